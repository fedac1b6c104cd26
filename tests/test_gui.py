import pytest

tk = pytest.importorskip("tkinter")

import scangrid_gui
from scangrid.DataModel import GenerateResult, BarLayout


@pytest.fixture
def app():
    try:
        a = scangrid_gui.App()
    except tk.TclError as e:
        pytest.skip(f"no display: {e}")
    a.withdraw()
    yield a
    a.destroy()


def test_status_is_flushed_before_generating(app, tmp_path, monkeypatch):
    events = []

    def fake_generate(paths, out_dir, bar_width):
        events.append(("generate", app.status.cget("text")))
        layout = BarLayout(width=10, height=1, bar_width=bar_width, img_count=len(paths))
        return GenerateResult(str(tmp_path / "output.png"), str(tmp_path / "mask.png"), layout)

    monkeypatch.setattr(scangrid_gui.filedialog, "askdirectory", lambda **kw: str(tmp_path))
    monkeypatch.setattr(scangrid_gui.messagebox, "showinfo", lambda *a, **kw: None)
    monkeypatch.setattr(scangrid_gui, "generate", fake_generate)
    monkeypatch.setattr(app, "update_idletasks", lambda: events.append(("idle", app.status.cget("text"))))

    app.selection.add(["a.png", "b.png"])
    app.bar_width.set(5)
    app.create_animation()

    assert events == [("idle", "Generating…"), ("generate", "Generating…")]
    assert app.status.cget("text").startswith("Saved ")


def test_needs_two_images(app, monkeypatch):
    shown = []
    monkeypatch.setattr(scangrid_gui.messagebox, "showerror", lambda *a: shown.append(a))
    app.selection.add(["a.png"])
    app.create_animation()
    assert shown == [("Error", "Need at least two images")]
