from collections import namedtuple

from digirain.log import log

# --- 速度 / 流长度常量 ---
MIN_SPEED = 1
MAX_SPEED = 10
DEFAULT_SPEED = 5
DEFAULT_THEME = 0
DEFAULT_CHARSET = 0

# 每档速度对应的 tick 毫秒数 (level 1 -> 100ms ... level 10 -> 20ms)
SPEED_DURATIONS = (100, 88, 76, 64, 52, 40, 33, 28, 24, 20)

MIN_STREAM_LENGTH = 5
MAX_COLUMN_SPEED = 4   # column 每 1~4 个 tick 前进一格
TRAIL_BAND = 3         # 紧跟头部的亮色带宽度

BLANK_GLYPH = " "
BLANK_COLOR = "black"

ColorScheme = namedtuple("ColorScheme", ["name", "head", "trail", "fade"])

THEMES = (
    ColorScheme("Classic Green", head="bright_white", trail="bright_green", fade="green"),
    ColorScheme("Ocean Blue", head="bright_white", trail="bright_blue", fade="blue"),
    ColorScheme("Crimson Red", head="bright_white", trail="bright_red", fade="red"),
    ColorScheme("Cyberpunk", head="bright_cyan", trail="bright_magenta", fade="magenta"),
)


def tick_seconds(speed_level):
    """速度档位 -> 轮询超时（秒）。越界属于程序错误，直接抛 IndexError。"""
    if not MIN_SPEED <= speed_level <= MAX_SPEED:
        raise IndexError(f"speed level out of range: {speed_level}")
    return SPEED_DURATIONS[speed_level - 1] / 1000


class Config:
    """
    运行时配置：只由 Controller 根据按键修改。
    不做持久化，每次启动都是默认值。
    """
    def __init__(self, charset_names, theme_index=DEFAULT_THEME,
                 speed_level=DEFAULT_SPEED, charset_index=DEFAULT_CHARSET):
        if not charset_names:
            raise ValueError("at least one character set is required")
        self.charset_names = tuple(charset_names)
        self.theme_index = theme_index % len(THEMES)
        self.speed_level = min(max(speed_level, MIN_SPEED), MAX_SPEED)
        self.charset_index = charset_index % len(self.charset_names)

    @property
    def theme(self):
        return THEMES[self.theme_index]

    @property
    def charset_name(self):
        return self.charset_names[self.charset_index]

    @property
    def tick(self):
        return tick_seconds(self.speed_level)

    # --- 速度：夹紧，不回绕 ---
    def speed_up(self):
        self.speed_level = min(self.speed_level + 1, MAX_SPEED)
        log("speed -> {}", self.speed_level)

    def speed_down(self):
        self.speed_level = max(self.speed_level - 1, MIN_SPEED)
        log("speed -> {}", self.speed_level)

    # --- 主题 / 字符集：两个方向都回绕 ---
    def next_theme(self):
        self.theme_index = (self.theme_index + 1) % len(THEMES)
        log("theme -> {}", self.theme.name)

    def prev_theme(self):
        self.theme_index = (self.theme_index - 1) % len(THEMES)
        log("theme -> {}", self.theme.name)

    def next_charset(self):
        self.charset_index = (self.charset_index + 1) % len(self.charset_names)
        log("language -> {}", self.charset_name)

    def prev_charset(self):
        self.charset_index = (self.charset_index - 1) % len(self.charset_names)
        log("language -> {}", self.charset_name)
