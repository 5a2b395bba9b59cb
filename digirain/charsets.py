import random
import string

ENGLISH = "English"
TRADITIONAL_CHINESE = "Traditional Chinese"
SIMPLIFIED_CHINESE = "Simplified Chinese"

PUNCTUATION = "!@#$%^&*()_+-=[]{}|;:',.<>/?`~"


def _code_point_range(first, last):
    # 闭区间，未分配的码位也保留
    return tuple(chr(i) for i in range(first, last + 1))


def _build_registry():
    english = tuple(string.ascii_lowercase + string.ascii_uppercase + string.digits + PUNCTUATION)
    return {
        ENGLISH: english,
        TRADITIONAL_CHINESE: _code_point_range(0x4E00, 0x9FA5),
        SIMPLIFIED_CHINESE: _code_point_range(0x4E00, 0x9FFF),
    }

# 启动时构建一次，之后只读。插入顺序就是配置菜单里的切换顺序
CHAR_SETS = _build_registry()


def charset_names():
    return tuple(CHAR_SETS)


def random_glyph(key, rng=random):
    """从 key 对应的字符集中均匀随机取一个字符。未注册的 key 直接 KeyError。"""
    return rng.choice(CHAR_SETS[key])


def glyph_source(key, rng=random):
    """绑定字符集和随机源，返回给 Column.update 用的无参函数"""
    CHAR_SETS[key]  # 未注册的 key 立即 KeyError
    return lambda: random_glyph(key, rng)
