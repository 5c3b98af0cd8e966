import gc
import random

import pytest

from elements import Direction
from schedule import Scheduler
from widgets import TextField


@pytest.fixture
def field(surface, recorder) -> TextField:
    tf = TextField(surface, 0, 0, recorder)
    tf.receive_click(10, 10)
    return tf


def type_text(tf: TextField, text: str) -> None:
    for ch in text:
        tf.receive_character(ch)


def test_click_selects_only_inside(surface, recorder) -> None:
    tf = TextField(surface, 0, 0, recorder)
    tf.receive_click(200, 10)
    assert not tf.selected
    tf.receive_click(10, 10)
    assert tf.selected
    tf.deselect()
    assert not tf.selected


def test_unselected_field_ignores_editing(surface, recorder) -> None:
    tf = TextField(surface, 0, 0, recorder)
    tf.receive_character("a")
    tf.delete_character()
    tf.receive_cursor_move(Direction.RIGHT)
    assert (tf.text, tf.cursor_location) == ("", 0)
    assert recorder.calls == []


def test_edit_scenario(field, recorder) -> None:
    type_text(field, "hello")
    assert field.cursor_location == 5
    field.receive_cursor_move(Direction.LEFT)
    assert field.cursor_location == 4
    field.delete_character()
    assert (field.text, field.cursor_location) == ("helo", 3)
    field.receive_character("X")
    assert (field.text, field.cursor_location) == ("helXo", 4)
    assert recorder.calls[-2:] == [("helo",), ("helXo",)]


def test_prepend_matches_insert_at_zero(field) -> None:
    type_text(field, "bc")
    field.receive_cursor_move(Direction.LEFT)
    field.receive_cursor_move(Direction.LEFT)
    field.receive_character("a")
    text = "bc"
    assert field.text == text[:0] + "a" + text[0:] == "abc"
    assert field.cursor_location == 1


def test_delete_at_start_is_noop(field, recorder) -> None:
    type_text(field, "ab")
    field.cursor_location = 0
    calls = len(recorder.calls)
    field.delete_character()
    assert (field.text, field.cursor_location) == ("ab", 0)
    assert len(recorder.calls) == calls


def test_cursor_moves_clamp_at_both_ends(field) -> None:
    type_text(field, "ab")
    field.receive_cursor_move(Direction.RIGHT)
    assert field.cursor_location == 2
    for _ in range(4):
        field.receive_cursor_move("left")
    assert field.cursor_location == 0
    field.receive_cursor_move("up")
    assert field.cursor_location == 0


def test_cursor_stays_in_range_under_random_edits(field) -> None:
    rng = random.Random(7)
    for _ in range(500):
        op = rng.choice(["char", "delete", "left", "right"])
        if op == "char":
            field.receive_character(rng.choice("xyz"))
        elif op == "delete":
            field.delete_character()
        else:
            field.receive_cursor_move(Direction(op))
        assert 0 <= field.cursor_location <= len(field.text)


def test_assignments_clamp_cursor(field) -> None:
    type_text(field, "hello")
    field.text = "hi"
    assert field.cursor_location == 2
    field.cursor_location = 99
    assert field.cursor_location == 2
    field.cursor_location = -3
    assert field.cursor_location == 0


def test_blink_only_while_selected(surface, recorder) -> None:
    tf = TextField(surface, 0, 0, recorder)
    tf.blink()
    assert tf.cursor_visible
    tf.receive_click(10, 10)
    tf.blink()
    assert not tf.cursor_visible
    tf.blink()
    assert tf.cursor_visible


def test_visible_text_shows_caret_when_selected(field) -> None:
    type_text(field, "ab")
    field.receive_cursor_move(Direction.LEFT)
    assert field.visible_text() == "a|b"
    field.cursor_visible = False
    assert field.visible_text() == "a b"
    field.deselect()
    assert field.visible_text() == "ab"


def test_visible_text_trims_far_end_without_touching_buffer(field) -> None:
    # 160 wide, 5px padding each side, 10px per char: 15 chars fit
    type_text(field, "abcdefghijklmnopqrst")
    shown = field.visible_text()
    assert len(shown) == 15
    assert shown.endswith("t|")
    assert field.text == "abcdefghijklmnopqrst"
    assert field.cursor_location == 20

    field.cursor_location = 0
    shown = field.visible_text()
    assert shown == "|abcdefghijklmn"
    assert field.cursor_location == 0


def test_render_draws_outline_and_clipped_text(field, surface) -> None:
    type_text(field, "hi")
    field.hover = True
    field.render()
    rect = surface.named("rect")[0]
    assert rect == (0, 0, 160, 30, False, 1, (255, 0, 0))
    text = surface.named("text")[0]
    assert text[:4] == (5, 15, (0, 0, 130), "hi|")


def test_blink_runs_on_scheduler_until_destroyed(surface, recorder) -> None:
    scheduler = Scheduler()
    tf = TextField(surface, 0, 0, recorder, scheduler=scheduler)
    tf.receive_click(10, 10)
    scheduler.pump(0.5)
    assert not tf.cursor_visible
    scheduler.pump(1.0)
    assert not tf.cursor_visible
    tf.destroy()
    assert len(scheduler) == 0
    scheduler.pump(0.5)
    assert not tf.cursor_visible


def test_field_with_scheduler_is_weakly_held(surface, recorder) -> None:
    scheduler = Scheduler()
    TextField(surface, 0, 0, recorder, scheduler=scheduler)
    gc.collect()
    # only the scheduler saw the field, and it holds a weak reference
    assert len(scheduler) == 0
