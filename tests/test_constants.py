import pytest

from hanoitower.constants import (
    Color,
    attribute,
    split_attribute,
)


def test_default_colours_attribute():
    assert attribute(Color.BLACK, Color.WHITE) == 7


def test_attribute_pins_background_times_sixteen_plus_foreground():
    assert attribute(Color.BLACK, Color.HWHITE) == 15
    assert attribute(Color.BLUE, Color.BLACK) == 16
    assert attribute(Color.HWHITE, Color.HWHITE) == 255


def test_split_attribute_pins_known_values():
    assert split_attribute(0) == (Color.BLACK, Color.BLACK)
    assert split_attribute(0x4E) == (Color.RED, Color.HYELLOW)
    assert split_attribute(255) == (Color.HWHITE, Color.HWHITE)


def test_attribute_round_trip_for_all_colours():
    for bg in Color:
        for fg in Color:
            assert split_attribute(attribute(bg, fg)) == (bg, fg)


def test_attributes_are_distinct():
    values = {attribute(bg, fg) for bg in Color for fg in Color}
    assert len(values) == 256


@pytest.mark.parametrize("bg, fg", [(16, 0), (0, 16), (-1, 3)])
def test_attribute_rejects_out_of_range(bg, fg):
    with pytest.raises(ValueError):
        attribute(bg, fg)


def test_split_attribute_rejects_out_of_range():
    with pytest.raises(ValueError):
        split_attribute(256)