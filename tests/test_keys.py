from blessed.keyboard import Keystroke

from chordfetch.models import KeyCode, KeyKind, KeyPress, Paste
from chordfetch.ui.keys import Commit, Quit, handle_event, parse_key
from chordfetch.ui.state import Navigation, Session, TextEntry

ENTER = Keystroke("\r", code=343, name="KEY_ENTER")
ESCAPE = Keystroke("\x1b", code=361, name="KEY_ESCAPE")
BACKSPACE = Keystroke("\x7f", code=263, name="KEY_BACKSPACE")
UP = Keystroke("\x1b[A", code=259, name="KEY_UP")


def _press(char: str) -> KeyPress:
    return KeyPress(KeyCode.CHAR, char)


def _typing(url: str) -> Session:
    return Session(mode=TextEntry(tuple(url)))


# ---------------------------------------------------------------------------
# parse_key
# ---------------------------------------------------------------------------


def test_parse_enter():
    assert parse_key(ENTER) == KeyPress(KeyCode.ENTER)


def test_parse_escape():
    assert parse_key(ESCAPE) == KeyPress(KeyCode.ESCAPE)


def test_parse_backspace():
    assert parse_key(BACKSPACE) == KeyPress(KeyCode.BACKSPACE)


def test_parse_raw_delete_char_as_backspace():
    assert parse_key(Keystroke("\x7f")) == KeyPress(KeyCode.BACKSPACE)


def test_parse_printable():
    assert parse_key(Keystroke("a")) == KeyPress(KeyCode.CHAR, "a")
    assert parse_key(Keystroke("/")) == KeyPress(KeyCode.CHAR, "/")


def test_parse_arrow_is_other():
    assert parse_key(UP).code is KeyCode.OTHER


def test_parse_control_char_is_other():
    assert parse_key(Keystroke("\x03")).code is KeyCode.OTHER


# ---------------------------------------------------------------------------
# navigation mode
# ---------------------------------------------------------------------------


def test_q_quits():
    session = Session()
    assert handle_event(session, _press("q")) == (session, Quit())


def test_u_enters_text_entry_and_clears_message():
    session, command = handle_event(Session(status_message="old"), _press("u"))
    assert command is None
    assert session.mode == TextEntry()
    assert session.status_message == ""


def test_other_keys_are_noops_in_navigation():
    session = Session(status_message="keep me")
    for event in (_press("x"), KeyPress(KeyCode.ENTER), KeyPress(KeyCode.ESCAPE), Paste("http://x")):
        assert handle_event(session, event) == (session, None)


def test_uppercase_q_does_not_quit():
    session = Session()
    assert handle_event(session, _press("Q")) == (session, None)


# ---------------------------------------------------------------------------
# text entry mode
# ---------------------------------------------------------------------------


def test_typing_appends():
    session = _typing("")
    for char in "https":
        session, _ = handle_event(session, _press(char))
    assert session.mode.url == "https"


def test_q_and_u_are_plain_text_while_typing():
    session, command = handle_event(_typing("a"), _press("q"))
    session, command = handle_event(session, _press("u"))
    assert command is None
    assert session.mode.url == "aqu"


def test_backspace_removes_last():
    session, _ = handle_event(_typing("ab"), KeyPress(KeyCode.BACKSPACE))
    assert session.mode.url == "a"


def test_backspace_on_empty_is_noop():
    start = _typing("")
    assert handle_event(start, KeyPress(KeyCode.BACKSPACE)) == (start, None)


def test_paste_appends_whole_text():
    session, command = handle_event(_typing("x"), Paste("https://chords.example.com/a"))
    assert command is None
    assert session.mode.url == "xhttps://chords.example.com/a"


def test_escape_cancels_without_command():
    session, command = handle_event(_typing("https://x"), KeyPress(KeyCode.ESCAPE))
    assert command is None
    assert session.mode == Navigation()


def test_enter_commits_current_url():
    start = _typing("https://x")
    session, command = handle_event(start, KeyPress(KeyCode.ENTER))
    assert command == Commit("https://x")
    assert session == start


def test_other_keys_are_noops_in_text_entry():
    start = _typing("abc")
    assert handle_event(start, KeyPress(KeyCode.OTHER)) == (start, None)


# ---------------------------------------------------------------------------
# non-press key events
# ---------------------------------------------------------------------------


def test_release_and_repeat_events_are_ignored():
    for kind in (KeyKind.RELEASE, KeyKind.REPEAT):
        assert handle_event(Session(), KeyPress(KeyCode.CHAR, "q", kind)) == (Session(), None)
        start = _typing("a")
        assert handle_event(start, KeyPress(KeyCode.CHAR, "b", kind)) == (start, None)
