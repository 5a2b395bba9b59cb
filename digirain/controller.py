import enum
import random

from digirain import renderer
from digirain.charsets import glyph_source
from digirain.column import make_columns
from digirain.config import Config
from digirain.keys import VARIANT_A
from digirain.log import log


class AppState(enum.Enum):
    MATRIX = "matrix"
    PAUSED = "paused"
    CONFIG = "config"


class Controller:
    """
    顶层状态机：Matrix / Paused / Config。
    每个状态一个处理函数，返回下一个状态；返回 None 表示退出。
    """

    def __init__(self, term, variant=VARIANT_A, rng=None, config=None):
        self.term = term
        self.variant = variant
        self.rng = rng or random.Random()
        self.config = config or Config(variant.charsets)

        width, height = term.size()
        self.columns = make_columns(width, height, self.rng)
        self.state = AppState.MATRIX
        self.frames = 0

        self._handlers = {
            AppState.MATRIX: self._matrix,
            AppState.PAUSED: self._paused,
            AppState.CONFIG: self._config_menu,
        }

        # 配置菜单的按键 -> 动作
        self._config_actions = {}
        for keys, action in (
            (variant.speed_up_keys, self.config.speed_up),
            (variant.speed_down_keys, self.config.speed_down),
            (variant.next_theme_keys, self.config.next_theme),
            (variant.prev_theme_keys, self.config.prev_theme),
            (variant.next_charset_keys, self.config.next_charset),
            (variant.prev_charset_keys, self.config.prev_charset),
        ):
            for key in keys:
                self._config_actions[key] = action

        log("[dim]{} columns x {} rows, variant {}[/]", len(self.columns), height, variant.name)

    # --- 主循环 ---
    def run(self):
        while self.step():
            pass

    def step(self):
        """处理当前状态一次。返回 False 表示要退出。"""
        next_state = self._handlers[self.state]()
        if next_state is None:
            log("quit from {}", self.state.name)
            return False
        if next_state is not self.state:
            log("{} -> {}", self.state.name, next_state.name)
        self.state = next_state
        return True

    def tick(self):
        """一帧动画：清屏，所有列前进一个 tick 并重画"""
        colors = self.config.theme
        source = glyph_source(self.config.charset_name, self.rng)
        self.term.clear()
        for column in self.columns:
            column.update(colors, source)
            renderer.draw(self.term, column)
        self.term.flush()
        self.frames += 1

    # --- 各状态 ---
    def _matrix(self):
        key = self.term.poll_key(self.config.tick)
        if key is None:
            self.tick()
            return AppState.MATRIX

        v = self.variant
        if key in v.quit_keys:
            return None
        if key == v.pause_key:
            return AppState.PAUSED
        if key in v.config_keys:
            return AppState.CONFIG
        # 其他按键：吃掉这一轮，不推进动画
        return AppState.MATRIX

    def _paused(self):
        # 不清屏，最后一帧留在下面
        renderer.draw_ui(self.term, renderer.pause_text(self.variant), clear_screen=False)
        key = self.term.read_key()

        if key in self.variant.quit_keys:
            return None
        if key == self.variant.pause_key:
            return AppState.MATRIX
        return AppState.PAUSED

    def _config_menu(self):
        renderer.draw_ui(self.term, renderer.menu_text(self.config, self.variant), clear_screen=True)
        key = self.term.read_key()

        if key in self.variant.leave_config_keys:
            return AppState.MATRIX
        action = self._config_actions.get(key)
        if action:
            action()
        return AppState.CONFIG
