import sys

from rich.console import Console

from digirain.controller import Controller
from digirain.keys import VARIANT_A, VARIANT_B
from digirain.log import log, set_log_fn
from digirain.terminal import Terminal

# 全局 Console 对象，保证输出统一
console = Console(highlight=False)


def run(variant):
    """进入动画，退出后返回进程退出码"""
    try:
        with Terminal(console) as term:
            Controller(term, variant).run()
    except KeyboardInterrupt:
        pass
    except OSError as e:
        # 终端已经恢复，这里才能正常打印
        set_log_fn(console.print)
        log(f"[red]CRITICAL ERROR: {e}[/]")
        return 1

    set_log_fn(console.print)
    log("[bold green]👋 Bye![/]")
    return 0


def main():
    sys.exit(run(VARIANT_A))


def main_classic():
    sys.exit(run(VARIANT_B))


if __name__ == "__main__":
    main()
