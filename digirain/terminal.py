import os
import sys
import select
import termios
import time
import tty
from collections import deque

from rich.console import Console
from rich.control import Control
from rich.segment import Segment, Segments
from rich.style import Style

from digirain.keys import ESC, decode_keys

# 单独的 ESC 之后再等多久，看是不是方向键序列的前半截
ESCAPE_WAIT = 0.02


class Terminal:
    """
    终端能力层：rich Console 负责输出（备用屏幕、光标、定位上色），
    termios / tty / select 负责按键输入。

    用法:
        with Terminal() as term:
            ...
    退出 with 时（包括异常退出）恢复光标、离开备用屏幕、还原终端属性。
    """

    def __init__(self, console=None, stdin=None):
        self.console = console or Console(highlight=False)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.fd = None
        self._old_settings = None
        self._pending = deque()

    def size(self):
        """(columns, rows)，只在启动时读一次"""
        width, height = self.console.size
        return width, height

    # --- 生命周期 ---
    def __enter__(self):
        if not self.console.is_terminal or not self.stdin.isatty():
            raise OSError("digirain must be run in an interactive terminal")

        self.fd = self.stdin.fileno()
        try:
            self._old_settings = termios.tcgetattr(self.fd)
        except termios.error as e:
            raise OSError(f"cannot read terminal attributes: {e}") from e

        try:
            self.console.set_alt_screen(True)
            self.console.show_cursor(False)
            # 关闭行缓冲和回显，按键一个个送进来
            tty.setcbreak(self.fd)
        except termios.error as e:
            self._restore()
            raise OSError(f"cannot enable raw input: {e}") from e
        except BaseException:
            self._restore()
            raise
        return self

    def __exit__(self, exc_type, exc, tb):
        self._restore()
        return False

    def _restore(self):
        try:
            self.console.show_cursor(True)
            self.console.set_alt_screen(False)
        finally:
            if self._old_settings is not None:
                try:
                    termios.tcsetattr(self.fd, termios.TCSADRAIN, self._old_settings)
                except termios.error as e:
                    raise OSError(f"cannot restore terminal attributes: {e}") from e
                finally:
                    self._old_settings = None

    # --- 输入 ---
    def poll_key(self, timeout):
        """
        等最多 timeout 秒，返回按键名或 None。
        timeout=None 表示一直等。一次读到多个按键时排队，逐个返回。
        """
        if self._pending:
            return self._pending.popleft()

        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            wait = None if deadline is None else max(0.0, deadline - time.monotonic())
            ready, _, _ = select.select([self.fd], [], [], wait)
            if not ready:
                return None

            text = self._read_text()
            # 方向键序列可能被拆成两次 read，单独的 ESC 先等一下后续字节
            if text.endswith(ESC):
                more, _, _ = select.select([self.fd], [], [], ESCAPE_WAIT)
                if more:
                    text += self._read_text()

            self._pending.extend(decode_keys(text))
            if self._pending:
                return self._pending.popleft()
            # 解码后一个键都没有（非法字节）：不算按键也不算超时，继续等剩下的时间

    def _read_text(self):
        data = os.read(self.fd, 64)
        if not data:
            raise OSError("terminal input closed")
        return data.decode("utf-8", errors="ignore")

    def read_key(self):
        """阻塞直到拿到一个按键"""
        return self.poll_key(None)

    # --- 输出 ---
    def clear(self):
        self.console.control(Control.clear(), Control.home())

    def paint(self, cells):
        """cells: [(x, y, glyph, color), ...]，整批一次写出"""
        segments = []
        for x, y, glyph, color in cells:
            segments.append(Control.move_to(x, y).segment)
            segments.append(Segment(glyph, Style(color=color)))
        if segments:
            self.console.print(Segments(segments), end="", crop=False, soft_wrap=True)

    def draw_text(self, x, y, text, color):
        self.paint([(x, y, text, color)])

    def flush(self):
        self.console.file.flush()
