import pytest

pytest.importorskip("tkinter")
pytest.importorskip("customtkinter")

import app as desktop  # noqa: E402


def test_shorten_path():
    assert desktop.shorten_path("short") == "short"
    long = "/very/long/" + "x" * 100 + "/corpus.txt"
    out = desktop.shorten_path(long, max_chars=40)
    assert "..." in out and len(out) < len(long)
    assert out.endswith("corpus.txt")


@pytest.mark.parametrize("text,expected", [("2", 2), (" 1 ", 1), ("", 0), ("-4", 0), ("x", 0)])
def test_parse_led(text, expected):
    assert desktop.parse_led(text) == expected


def test_app_class_is_a_ctk_window():
    assert issubclass(desktop.AutocorrectApp, desktop.ctk.CTk)


class _FakeWindow:
    """Stands in for the Tk window: `after` runs nothing, it just queues."""

    def __init__(self):
        self.scheduled = []
        self.errors = []
        self.ready = []

    def after(self, _ms, callback):
        self.scheduled.append(callback)

    def _on_load_error(self, exc):
        self.errors.append(exc)

    def _on_load_ok(self, engine):
        self.ready.append(engine)


def test_load_worker_reports_build_error(monkeypatch):
    def failing_build(self, paths, *, verbose=False):
        raise ValueError("corpus exploded")

    monkeypatch.setattr(desktop.Engine, "build", failing_build)
    win = _FakeWindow()
    desktop.AutocorrectApp._load_worker(win, ["a.txt"], desktop.SuggestOptions())

    assert len(win.scheduled) == 1
    win.scheduled[0]()  # runs after the except block is gone, like Tk's event loop
    assert len(win.errors) == 1
    assert isinstance(win.errors[0], ValueError)
    assert win.ready == []


def test_load_worker_hands_built_engine_over(tmp_path):
    p = tmp_path / "w.txt"
    p.write_text("ape apple", encoding="utf-8")
    win = _FakeWindow()
    desktop.AutocorrectApp._load_worker(win, [str(p)], desktop.SuggestOptions(prefix=True))

    win.scheduled[0]()
    assert win.errors == []
    assert win.ready[0].suggest("ap") == ["ape", "apple"]
