"""Screen composition.

Pure functions: given a session and the terminal size they return the rows
to draw.  Nothing here writes to the terminal or touches state.
"""

import textwrap

from blessed import Terminal

from .state import Session, TextEntry

HELP_LINES = ["u: Enter URL", "q: Quit"]
CURSOR = "█"
MIN_PANEL_HEIGHT = 3  # border, one content row, border
HELP_PANEL_HEIGHT = len(HELP_LINES) + 2


def calculate_layout(height: int) -> tuple[int, int, int]:
    """Split *height* into help / body / footer panel heights (10% / 80% / 10%)."""
    help_height = max(HELP_PANEL_HEIGHT, height * 10 // 100)
    footer_height = max(MIN_PANEL_HEIGHT, height * 10 // 100)
    body_height = max(MIN_PANEL_HEIGHT, height - help_height - footer_height)
    return help_height, body_height, footer_height


def render_screen(term: Terminal, session: Session, width: int, height: int) -> list[str]:
    help_height, body_height, footer_height = calculate_layout(height)
    inner = max(0, width - 2)

    rows = render_panel(term, "Keybinds", HELP_LINES, width, help_height)

    if isinstance(session.mode, TextEntry):
        rows += render_panel(
            term,
            "URL Input",
            [_scroll_to_cursor(session.mode.url, inner)],
            width,
            body_height,
            style=term.yellow,
        )
    else:
        lines = textwrap.wrap(session.status_message, inner) if inner else []
        rows += render_panel(term, "Message", lines, width, body_height)

    chords = " ".join(session.last_result.chords) if session.last_result else ""
    rows += render_panel(term, "Chords", textwrap.wrap(chords, inner) if inner else [], width, footer_height)
    # Very short terminals cannot fit every panel
    return rows[: max(0, height)]


def render_panel(term, title, lines, width, height, style=None) -> list[str]:
    """Render a bordered panel with *title* in its top border.

    Content beyond the panel is cut off; *style* colours the content only.
    """
    inner = max(0, width - 2)
    label = title[:inner]
    rows = [term.cyan("┌" + label + "─" * (inner - len(label)) + "┐")]

    for i in range(max(0, height - 2)):
        text = lines[i][:inner] if i < len(lines) else ""
        pad = " " * (inner - len(text))
        if style and text:
            text = style(text)
        rows.append(term.cyan("│") + text + pad + term.cyan("│"))

    rows.append(term.cyan("└" + "─" * inner + "┘"))
    return rows


def _scroll_to_cursor(url: str, inner: int) -> str:
    # Keep the end of a long URL (and the cursor) visible
    url = "".join(c if c.isprintable() else " " for c in url)
    visible = max(0, inner - len(CURSOR))
    text = url[-visible:] if visible else ""
    return text + CURSOR
