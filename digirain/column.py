import random

from digirain.config import (
    BLANK_COLOR, BLANK_GLYPH, MAX_COLUMN_SPEED, MIN_STREAM_LENGTH, TRAIL_BAND,
)


class Cell:
    """一格字符：glyph / color / 剩余寿命。寿命为 0 时 glyph 必为空白。"""
    __slots__ = ("glyph", "color", "lifetime")

    def __init__(self, glyph=BLANK_GLYPH, color=BLANK_COLOR, lifetime=0):
        self.glyph = glyph
        self.color = color
        self.lifetime = lifetime

    @property
    def lit(self):
        return self.lifetime > 0

    def as_tuple(self):
        return (self.glyph, self.color, self.lifetime)

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        return f"Cell({self.glyph!r}, {self.color!r}, {self.lifetime})"


class Column:
    """
    一条竖直的字符流。

    x      : 列序号（屏幕上画在 x * 2，给 CJK 字符留出双宽）
    head   : 最新字符所在行，从 -1 开始，让第一个字符晚一拍出现
    length : 头部后面仍然亮着的行数
    speed  : 每 speed 个 tick 才前进一格
    counter: 距离上次前进过了几个 tick
    """

    def __init__(self, x, height, rng=None):
        self.x = x
        self.rng = rng or random
        self.cells = [Cell() for _ in range(height)]
        self.reset()

    @property
    def height(self):
        return len(self.cells)

    def _random_length(self):
        # 矮终端下 height // 2 < 5，把上界抬到下界，避免空区间
        upper = max(MIN_STREAM_LENGTH, self.height // 2)
        return self.rng.randint(MIN_STREAM_LENGTH, upper)

    def reset(self):
        """流完全离开屏幕底部后重新随机长度和速度"""
        self.head = -1
        self.length = self._random_length()
        self.speed = self.rng.randint(1, MAX_COLUMN_SPEED)
        self.counter = 0

    def update(self, colors, glyph_source):
        """前进一个逻辑 tick。colors 是 ColorScheme，glyph_source() 返回一个新字符。"""
        self.counter += 1
        if self.counter < self.speed:
            return
        self.counter = 0

        self.head += 1

        for cell in self.cells:
            if cell.lifetime > 0:
                cell.lifetime -= 1
                if cell.lifetime == 0:
                    cell.glyph = BLANK_GLYPH

        bright = self.length - TRAIL_BAND
        for cell in self.cells:
            cell.color = colors.trail if cell.lifetime > bright else colors.fade

        if 0 <= self.head < self.height:
            head_cell = self.cells[self.head]
            head_cell.glyph = glyph_source()
            head_cell.color = colors.head
            head_cell.lifetime = self.length

        if self.head >= self.height + self.length:
            self.reset()

    def lit_cells(self):
        """(行号, Cell) —— 只包含需要画出来的格子"""
        return [(y, cell) for y, cell in enumerate(self.cells) if cell.lifetime > 0]

    def snapshot(self):
        return tuple(cell.as_tuple() for cell in self.cells)


def make_columns(width, height, rng=None):
    """按终端尺寸建立所有列：每两格终端列一条流"""
    return [Column(x, height, rng) for x in range(width // 2)]
