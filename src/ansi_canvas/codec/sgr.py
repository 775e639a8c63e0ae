"""SGR (Select Graphic Rendition) color state."""

from dataclasses import dataclass, replace

from ansi_canvas.core.color import ANSI_PALETTE, BRIGHT_OFFSET, Color


@dataclass(frozen=True, slots=True)
class ColorState:
    """
    Color and style state driven by SGR codes.

    fg/bg hold base colors. Bold and reverse are kept as flags and only
    applied by ``effective_colors`` when the state is handed to a canvas.
    """
    fg: int = Color.LIGHTGRAY
    bg: int = Color.BLACK
    saved_fg: int = Color.LIGHTGRAY
    saved_bg: int = Color.BLACK
    bold: bool = False
    reverse: bool = False

    def effective_colors(self) -> tuple[int, int]:
        """The (fg, bg) pair to draw with, after bold and reverse."""
        fg, bg = self.fg, self.bg
        if self.bold:
            if fg < BRIGHT_OFFSET:
                fg += BRIGHT_OFFSET
            if bg < BRIGHT_OFFSET:
                bg += BRIGHT_OFFSET
        if self.reverse:
            return bg, fg
        return fg, bg


def apply_sgr(code: int, state: ColorState) -> ColorState:
    """Return the state after applying a single SGR code."""
    if 30 <= code <= 37:
        return replace(state, fg=ANSI_PALETTE[code - 30])
    if 40 <= code <= 47:
        return replace(state, bg=ANSI_PALETTE[code - 40])
    if 90 <= code <= 97:
        return replace(state, fg=ANSI_PALETTE[code - 90] + BRIGHT_OFFSET)
    if 100 <= code <= 107:
        return replace(state, bg=ANSI_PALETTE[code - 100] + BRIGHT_OFFSET)

    if code == 0:
        return replace(
            state,
            fg=Color.DEFAULT,
            bg=Color.DEFAULT,
            bold=False,
            reverse=False,
        )
    elif code == 1:
        return replace(state, bold=True)
    elif code == 7:
        return replace(state, reverse=True)
    elif code == 8:
        # Invisible: remember the colors for 28
        return replace(
            state,
            saved_fg=state.fg,
            saved_bg=state.bg,
            fg=Color.TRANSPARENT,
            bg=Color.TRANSPARENT,
        )
    elif code == 28:
        return replace(state, fg=state.saved_fg, bg=state.saved_bg)
    elif code == 39:
        return replace(state, fg=Color.DEFAULT)
    elif code == 49:
        return replace(state, bg=Color.DEFAULT)

    # 4 (underline), 5 (blink) and everything else leave the state alone
    return state
