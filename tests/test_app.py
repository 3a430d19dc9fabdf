import random

import pytest

from superseq.app import main, parse_buttons, random_range, run
from superseq.input import Buttons
from superseq.menu import MainMode
from superseq.render import Canvas


def test_random_range_stays_in_bounds():
    rng = random.Random(1234)
    values = {random_range(-3, 3, rng) for _ in range(500)}
    assert values == set(range(-3, 4))


def test_random_range_single_value():
    assert random_range(5, 5, random.Random(0)) == 5


def test_random_range_is_reproducible_with_seed():
    first = [random_range(0, 100, random.Random(7)) for _ in range(3)]
    second = [random_range(0, 100, random.Random(7)) for _ in range(3)]
    assert first == second


def test_random_range_rejects_empty_range():
    with pytest.raises(ValueError):
        random_range(4, 3)


def test_parse_buttons_names_and_separators():
    assert parse_buttons("a d_up") == Buttons(a=True, d_up=True)
    assert parse_buttons("c_left, r\n") == Buttons(c_left=True, r=True)


def test_parse_buttons_empty_and_comment():
    assert parse_buttons("") == Buttons()
    assert parse_buttons("# nothing pressed") == Buttons()
    assert parse_buttons("b # back") == Buttons(b=True)


def test_parse_buttons_rejects_unknown():
    with pytest.raises(ValueError):
        parse_buttons("x")


def test_run_draws_initial_frame_only_when_nothing_changes():
    canvas = Canvas()
    menu = run(["", "", ""], canvas)
    assert len(canvas.frames) == 1
    assert menu.mode is MainMode.EDIT


def test_run_redraws_on_change():
    canvas = Canvas()
    menu = run(["r", "", "r", "r"], canvas)
    assert len(canvas.frames) == 3
    assert menu.mode is MainMode.SEQUENCE


def test_run_grid_is_live_after_first_frame():
    canvas = Canvas()
    menu = run(["d_right", "d_down"], canvas)
    assert (menu.drum_grid.cur_x, menu.drum_grid.cur_y) == (1, 1)
    assert len(canvas.frames) == 3


def test_main_reports_frames_and_mode(tmp_path, capsys):
    path = tmp_path / "frames.txt"
    path.write_text("r\n\n", encoding="utf-8")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "mode: PERFORM"
    assert sum(line.startswith("frame ") for line in lines) == 2


def test_main_rejects_unknown_button(tmp_path, capsys):
    path = tmp_path / "frames.txt"
    path.write_text("start\nbogus\n", encoding="utf-8")
    assert main([str(path)]) == 2
    assert "bogus" in capsys.readouterr().err


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 2