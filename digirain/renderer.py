from digirain.keys import has_language_menu

UI_COLOR = "white"
COLUMN_SPACING = 2  # CJK 字符占两格，列间距 2 让画面看起来是方的


def draw(term, column):
    """只画寿命 > 0 的格子；空白格跳过（所以 Matrix 每帧先清屏）"""
    term.paint([
        (column.x * COLUMN_SPACING, y, cell.glyph, cell.color)
        for y, cell in column.lit_cells()
    ])


def draw_ui(term, text, clear_screen):
    if clear_screen:
        term.clear()
    for y, line in enumerate(text.split("\n")):
        if line:
            term.draw_text(0, y, line, UI_COLOR)
    term.flush()


def pause_text(variant):
    return f"Paused - Press {variant.pause_label} to resume or 'q' to quit"


def menu_text(config, variant):
    lines = [
        "Configuration Menu",
        "",
        f"Speed: {config.speed_level} (use +/- to change)",
        f"Theme: {config.theme.name} (use left/right arrows to change)",
    ]
    if has_language_menu(variant):
        lines.append(f"Language: {config.charset_name} (use up/down arrows to change)")
    lines += [
        "",
        "Press 'c' or 'Esc': Return to matrix",
    ]
    return "\n".join(lines)
