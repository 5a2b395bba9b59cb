import random

import pytest

from digirain.log import reset_log_fn, set_log_fn


class ScriptExhausted(Exception):
    """脚本里的按键用完了 —— 测试写错了，别让循环卡死"""


class FakeTerminal:
    """
    无头终端：记录画到屏幕上的东西，按脚本返回按键。
    keys 里的 None 表示一次 poll 超时。
    """
    def __init__(self, width=20, height=20, keys=()):
        self.width = width
        self.height = height
        self.keys = list(keys)
        self.screen = {}
        self.texts = []
        self.clears = 0
        self.flushes = 0
        self.poll_timeouts = []

    def size(self):
        return self.width, self.height

    def poll_key(self, timeout):
        self.poll_timeouts.append(timeout)
        if not self.keys:
            raise ScriptExhausted()
        return self.keys.pop(0)

    def read_key(self):
        while self.keys:
            key = self.keys.pop(0)
            if key is not None:
                return key
        raise ScriptExhausted()

    def clear(self):
        self.clears += 1
        self.screen = {}

    def paint(self, cells):
        for x, y, glyph, color in cells:
            self.screen[(x, y)] = (glyph, color)

    def draw_text(self, x, y, text, color):
        self.texts.append(text)
        self.paint([(x, y, text, color)])

    def flush(self):
        self.flushes += 1


@pytest.fixture
def fake_terminal():
    def _make(keys=(), width=20, height=20):
        return FakeTerminal(width=width, height=height, keys=keys)
    return _make


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def logs():
    lines = []
    set_log_fn(lambda data, **kwargs: lines.append(data))
    yield lines
    reset_log_fn()


@pytest.fixture(autouse=True)
def _quiet_log():
    yield
    reset_log_fn()
