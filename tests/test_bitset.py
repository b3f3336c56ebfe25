import enum

import pytest

from kerndata.bitset import BitSet


class Color(enum.IntEnum):
    RED = 1
    GREEN = 2
    BLUE = 4


class Colors(BitSet, flag_type=Color, bits=8):
    pass


def test_empty_has_nothing():
    colors = Colors.empty()
    assert BitSet.is_empty(colors)
    assert BitSet.flags(colors) == []
    assert not any(BitSet.has(colors, c) for c in Color)


def test_set_is_chainable_and_mutates():
    colors = Colors.empty()
    result = BitSet.set(BitSet.set(colors, Color.RED), Color.BLUE)
    assert result is colors
    assert BitSet.has(colors, Color.RED)
    assert BitSet.has(colors, Color.BLUE)
    assert not BitSet.has(colors, Color.GREEN)


def test_unset_removes_only_that_flag():
    colors = Colors(Color.RED) | Color.GREEN
    BitSet.unset(colors, Color.RED)
    assert BitSet.flags(colors) == [Color.GREEN]


def test_toggle_twice_restores():
    colors = Colors(Color.GREEN)
    before = int(colors)
    BitSet.toggle(colors, Color.BLUE)
    assert BitSet.has(colors, Color.BLUE)
    BitSet.toggle(colors, Color.BLUE)
    assert int(colors) == before


def test_clear():
    colors = Colors(Color.RED).set(Color.GREEN)
    assert BitSet.flags(colors) == [Color.RED, Color.GREEN]
    assert BitSet.is_empty(BitSet.clear(colors))


def test_operators_with_flags_and_sets():
    red = Colors(Color.RED)
    blue = Colors(Color.BLUE)
    both = red | blue
    assert BitSet.flags(both) == [Color.RED, Color.BLUE]
    assert both == Colors(Color.RED) | Color.BLUE
    assert both == Color.BLUE | red
    assert (both & red) == red
    assert (both ^ red) == blue
    assert BitSet.is_empty(both & Color.GREEN)


def test_in_place_operators():
    colors = Colors.empty()
    colors |= Color.RED
    colors |= Colors(Color.GREEN)
    assert BitSet.flags(colors) == [Color.RED, Color.GREEN]
    colors &= Color.GREEN
    assert BitSet.flags(colors) == [Color.GREEN]
    colors ^= Color.GREEN
    assert BitSet.is_empty(colors)


def test_invert_is_masked_to_width():
    inverted = ~Colors.empty()
    assert int(inverted) == 0xFF
    assert BitSet.flags(inverted) == [Color.RED, Color.GREEN, Color.BLUE]
    assert BitSet.flags(~~Colors(Color.BLUE)) == [Color.BLUE]


def test_flags_in_declaration_order():
    colors = BitSet.set(Colors.empty(), Color.BLUE) | Color.RED
    assert BitSet.flags(colors) == [Color.RED, Color.BLUE]


def test_repr():
    colors = BitSet.set(Colors.empty(), Color.RED) | Color.BLUE
    assert repr(colors) == "0x5 [RED, BLUE]"
    assert repr(Colors.empty()) == "0x0 []"


def test_ordering_follows_value():
    red = BitSet.set(Colors.empty(), Color.RED)
    green = BitSet.set(Colors.empty(), Color.GREEN)
    blue = BitSet.set(Colors.empty(), Color.BLUE)
    assert red < blue
    assert green >= red


def test_base_class_cannot_be_instantiated():
    with pytest.raises(TypeError):
        BitSet()


def test_foreign_flag_rejected():
    with pytest.raises(TypeError):
        BitSet.set(Colors.empty(), 3)
    with pytest.raises(TypeError):
        Colors.empty() | 3


def test_int_conversion_round_trip():
    colors = BitSet.set(Colors.empty(), Color.GREEN) | Color.BLUE
    assert int(colors) == 6
    restored = Colors(int(colors))
    assert restored == colors
    assert BitSet.flags(restored) == [Color.GREEN, Color.BLUE]