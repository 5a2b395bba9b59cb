from collections import namedtuple

from digirain.charsets import TRADITIONAL_CHINESE, charset_names

ESCAPE = "escape"
ENTER = "enter"
UP = "up"
DOWN = "down"
RIGHT = "right"
LEFT = "left"

ESC = "\x1b"

# CSI (ESC [) 和 SS3 (ESC O) 两种方向键写法都认
_ARROWS = {"A": UP, "B": DOWN, "C": RIGHT, "D": LEFT}


def decode_keys(text):
    """
    把一次 read 读到的原始输入拆成按键名列表。
    普通字符原样返回；回车 -> 'enter'；方向键 -> 'up'/'down'/'left'/'right'；单独的 ESC -> 'escape'。
    不认识的转义序列返回 'escape:<序列>'，controller 会忽略它。
    """
    keys = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != ESC:
            keys.append(ENTER if ch in "\r\n" else ch)
            i += 1
            continue

        if i + 1 >= len(text) or text[i + 1] not in "[O":
            keys.append(ESCAPE)
            i += 1
            continue

        # ESC [ ... 以字母或 ~ 结尾
        j = i + 2
        while j < len(text) and not (text[j].isalpha() or text[j] == "~"):
            j += 1
        seq = text[i + 1:j + 1]
        final = text[j] if j < len(text) else ""
        if len(seq) == 2 and final in _ARROWS:
            keys.append(_ARROWS[final])
        else:
            keys.append(f"{ESCAPE}:{seq}")
        i = j + 1
    return keys


Variant = namedtuple("Variant", [
    "name",
    "quit_keys",
    "pause_key",
    "pause_label",
    "config_keys",      # Matrix 状态下进入配置菜单
    "leave_config_keys",
    "speed_up_keys",
    "speed_down_keys",
    "next_theme_keys",
    "prev_theme_keys",
    "next_charset_keys",
    "prev_charset_keys",
    "charsets",         # 可选字符集名，按切换顺序
])

# 变体 A：空格暂停，上下键切换语言
VARIANT_A = Variant(
    name="digirain",
    quit_keys=("q", ESCAPE),
    pause_key=" ",
    pause_label="SPACE",
    config_keys=("c",),
    leave_config_keys=("c", ESCAPE),
    speed_up_keys=("+", "="),
    speed_down_keys=("-",),
    next_theme_keys=(RIGHT,),
    prev_theme_keys=(LEFT,),
    next_charset_keys=(UP,),
    prev_charset_keys=(DOWN,),
    charsets=charset_names(),
)

# 变体 B：p 暂停，只有一个写死的字符集
VARIANT_B = VARIANT_A._replace(
    name="digirain-classic",
    pause_key="p",
    pause_label="'p'",
    next_charset_keys=(),
    prev_charset_keys=(),
    charsets=(TRADITIONAL_CHINESE,),
)


def has_language_menu(variant):
    return bool(variant.next_charset_keys or variant.prev_charset_keys)
