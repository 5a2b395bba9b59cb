import sys

def _default_log_fn(data, *args, **kwargs):
    """默认日志函数：什么也不做（动画期间不能往屏幕上打字）"""
    pass

# sink 挂在模块属性上，所有 import 方看到的是同一个
_module = sys.modules[__name__]

_module._log_fn = _default_log_fn

def log(data, *args, **kwargs):
    """
    状态切换、配置变化、退出信息都走这里。

    log("quit from {}", "MATRIX")   # 有 args 时按 str.format 填充
    log("[red]CRITICAL ERROR[/]")   # sink 是 console.print 时 markup 生效
    """
    if args and isinstance(data, str):
        try:
            data = data.format(*args)
        except (IndexError, KeyError, ValueError):
            pass  # 占位符对不上就原样输出

    _module._log_fn(data, **kwargs)

def set_log_fn(fn):
    """换 sink。main 在终端恢复之后才装 console.print，测试装列表收集器。"""
    if not callable(fn):
        raise TypeError("log function must be callable")

    _module._log_fn = fn

def reset_log_fn():
    """换回静默 sink"""
    _module._log_fn = _default_log_fn
