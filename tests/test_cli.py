import pytest

from conftest import BLUE, RED, solid
import scangrid_cli
from scangrid.DataModel import SENTINEL


def test_cli_writes_both_files(write_image, tmp_path, capsys):
    paths = [write_image("red.png", solid(RED)), write_image("blue.png", solid(BLUE))]
    out = tmp_path / "result"

    rc = scangrid_cli.main(["10", *paths, "--out", str(out)])

    assert rc == 0
    assert (out / "output.png").is_file()
    assert (out / "mask.png").is_file()
    text = capsys.readouterr().out
    assert "Image: w:100, h:50" in text
    assert "Number of images: 2" in text
    assert "Number of bars: 10" in text


def test_cli_quiet(write_image, tmp_path, capsys):
    paths = [write_image("red.png", solid(RED)), write_image("blue.png", solid(BLUE))]
    rc = scangrid_cli.main(["5", *paths, "--out", str(tmp_path / "o"), "--quiet"])
    assert rc == 0
    assert capsys.readouterr().out == ""


def test_cli_reports_errors(write_image, tmp_path, capsys):
    paths = [write_image("red.png", solid(RED)), write_image("blue.png", solid(BLUE))]
    out = tmp_path / "result"

    rc = scangrid_cli.main(["7", *paths, "--out", str(out)])

    assert rc == 1
    assert "Bar width must be a divider" in capsys.readouterr().err
    assert not (out / "output.png").exists()


def test_cli_needs_two_images(write_image):
    path = write_image("red.png", solid(RED))
    with pytest.raises(SystemExit) as ei:
        scangrid_cli.main(["10", path])
    assert ei.value.code == 2


@pytest.mark.parametrize("bar_width", ["abc", "0", "-3"])
def test_cli_rejects_bad_bar_width(write_image, bar_width):
    paths = [write_image("red.png", solid(RED)), write_image("blue.png", solid(BLUE))]
    with pytest.raises(SystemExit) as ei:
        scangrid_cli.main([bar_width, *paths])
    assert ei.value.code == 2


def test_cli_prints_diagnostics_in_order(write_image, tmp_path, capsys):
    paths = [write_image("red.png", solid(RED)), write_image("blue.png", solid(BLUE))]
    assert scangrid_cli.main(["10", *paths, "--out", str(tmp_path / "o")]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == ["Image: w:100, h:50", "Number of images: 2", "Number of bars: 10"]


def test_cli_reports_unfilled_columns(write_image, tmp_path, capsys):
    paths = [write_image("m.png", solid(SENTINEL)), write_image("blue.png", solid(BLUE))]
    out = tmp_path / "o"

    rc = scangrid_cli.main(["10", *paths, "--out", str(out), "--check-coverage"])

    assert rc == 1
    assert "unfilled columns" in capsys.readouterr().err
    assert not (out / "output.png").exists()
