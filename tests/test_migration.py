import pytest

from conftest import make_screen

from partitionwm.core.errors import NoOtherScreensError
from partitionwm.tiling.frame import Frame
from partitionwm.tiling.migration import is_maximized, plan, select_destination


@pytest.fixture
def laptop():
    return make_screen("DISPLAY1", 0, 0, 1000, 800, primary=True)


@pytest.fixture
def tall():
    return make_screen("DISPLAY2", 1000, -200, 1200, 900)


def test_maximized_window_keeps_filling_destination(laptop, tall):
    result = plan(Frame(0, 0, 1000, 800), laptop, [laptop, tall], keep_maximized=True)

    assert result.destination is tall
    assert result.frame == Frame(1000, -200, 1200, 900)
    assert result.maximized is True
    assert result.direction == "up-right"


def test_large_window_shrinks_to_destination():
    big = make_screen("DISPLAY1", -1600, 0, 1600, 1200)
    small = make_screen("DISPLAY2", 0, 0, 1000, 700, primary=True)

    result = plan(Frame(-1600, 0, 1400, 1000), big, [small, big])

    assert result.destination is small
    assert result.frame == Frame(0, 0, 1000, 700)
    assert result.maximized is False


def test_small_window_keeps_its_size(laptop, tall):
    result = plan(Frame(100, 100, 400, 300), laptop, [laptop, tall])
    assert result.frame == Frame(1000, -200, 400, 300)


def test_maximized_window_without_keep_is_placed_at_origin(laptop, tall):
    result = plan(Frame(0, 0, 1000, 800), laptop, [laptop, tall], keep_maximized=False)

    assert result.frame == Frame(1000, -200, 1000, 800)
    assert result.maximized is False


def test_keep_maximized_on_window_that_is_not_maximized(laptop, tall):
    result = plan(Frame(10, 10, 500, 500), laptop, [laptop, tall], keep_maximized=True)

    assert result.maximized is False
    assert result.frame == Frame(1000, -200, 500, 500)


def test_maximized_compares_against_visible_frame():
    screen = make_screen("DISPLAY1", 0, 0, 1000, 800, menu=40)
    assert is_maximized(Frame(0, 40, 1000, 760), screen)
    assert not is_maximized(Frame(0, 0, 1000, 800), screen)


def test_destination_is_first_screen_that_is_not_current(laptop, tall):
    third = make_screen("DISPLAY3", -800, 0, 800, 600)

    assert select_destination(laptop, [laptop, tall, third]) is tall
    assert select_destination(tall, [laptop, tall, third]) is laptop
    assert select_destination(third, [laptop, tall, third]) is laptop


def test_single_screen_has_nowhere_to_go(laptop):
    with pytest.raises(NoOtherScreensError):
        plan(Frame(0, 0, 100, 100), laptop, [laptop])


def test_no_screens_at_all(laptop):
    with pytest.raises(NoOtherScreensError):
        select_destination(laptop, [])


def test_all_screens_share_the_identifier(laptop):
    clone = make_screen("DISPLAY1", 1000, 0, 1000, 800)
    with pytest.raises(NoOtherScreensError) as info:
        select_destination(laptop, [laptop, clone])
    assert info.value.feedback == "No other screens"


def test_direction_to_the_left():
    right = make_screen("DISPLAY1", 0, 0, 1000, 800, primary=True)
    left = make_screen("DISPLAY2", -1000, 0, 1000, 800)

    result = plan(Frame(200, 0, 300, 300), right, [right, left])
    assert result.direction == "left"


def test_direction_when_origin_does_not_change(laptop, tall):
    result = plan(Frame(1000, -200, 300, 300), laptop, [laptop, tall])
    assert result.direction == "no movement"
