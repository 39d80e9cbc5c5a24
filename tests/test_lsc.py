import pytest

from lstheme.lsc import LSColors, Pair
from lstheme.style import RGB, Colour, Fixed, Style

Black = Colour.BLACK
Red = Colour.RED
Green = Colour.GREEN
Yellow = Colour.YELLOW
Blue = Colour.BLUE
Purple = Colour.PURPLE
Cyan = Colour.CYAN
White = Colour.WHITE


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1", Style().bold()),
        ("01", Style().bold()),
        ("4", Style().underline()),
        ("04", Style().underline()),
        ("1;4", Style().bold().underline()),
        ("01;04", Style().bold().underline()),
        ("31", Red.normal()),
        ("43", Style().on(Yellow)),
        ("31;43", Red.on(Yellow)),
        ("0031;0043", Red.on(Yellow)),
        ("43;31;1;4", Red.on(Yellow).bold().underline()),
        ("1;1;1;1;1", Style().bold()),
        # failure cases
        ("", Style()),
        (";;;;;;", Style()),
        ("99999999", Style()),
        ("GREEN", Style()),
        # higher colours
        ("38;5;149", Fixed(149).normal()),
        ("48;5;1", Style().on(Fixed(1))),
        ("48;5;1;1", Style().on(Fixed(1)).bold()),
        ("4;48;5;1", Style().on(Fixed(1)).underline()),
        ("38;2;255;100;0", Style().fg(RGB(255, 100, 0))),
        ("38;2;255;100;0;3", Style().fg(RGB(255, 100, 0)).italic()),
        ("48;2;255;100;0", Style().on(RGB(255, 100, 0))),
        ("48;2;255;100;0;3", Style().on(RGB(255, 100, 0)).italic()),
        ("38;5;121;48;5;212", Fixed(121).on(Fixed(212))),
        ("48;5;121;38;5;212", Fixed(212).on(Fixed(121))),
        ("48;5;999", Style()),
    ],
)
def test_pair_to_style(value, expected):
    assert Pair("", value).to_style() == expected


@pytest.mark.parametrize(
    "code, colour",
    [("30", Black), ("32", Green), ("34", Blue), ("35", Purple), ("36", Cyan), ("37", White)],
)
def test_all_basic_foregrounds(code, colour):
    assert Pair("x", code).to_style() == colour.normal()
    background = "4" + code[1]
    assert Pair("x", background).to_style() == Style().on(colour)


def _collect(spec):
    return [(p.key, p.to_style()) for p in LSColors(spec).each_pair()]


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("", []),
        ("blah", []),
        ("=", []),
        ("=di", []),
        ("id=", []),
        ("cb=32", [("cb", Green.normal())]),
        ("di=31", [("di", Red.normal())]),
        ("la=34", [("la", Blue.normal())]),
        ("do=43", [("do", Style().on(Yellow))]),
        ("re=45", [("re", Style().on(Purple))]),
        ("mi=46", [("mi", Style().on(Cyan))]),
        ("fa=1", [("fa", Style().bold())]),
        ("so=4", [("so", Style().underline())]),
        ("la=1;4", [("la", Style().bold().underline())]),
        (
            "me=43;21;55;34:yu=1;4;1",
            [("me", Blue.on(Yellow)), ("yu", Style().bold().underline())],
        ),
        (
            "red=31:green=32:blue=34",
            [("red", Red.normal()), ("green", Green.normal()), ("blue", Blue.normal())],
        ),
    ],
)
def test_each_pair(spec, expected):
    assert _collect(spec) == expected


def test_iteration_matches_each_pair():
    spec = "red=31:bad:green=32"
    assert list(LSColors(spec)) == list(LSColors(spec).each_pair())
    assert [p.key for p in LSColors(spec)] == ["red", "green"]


def test_entry_with_two_equals_is_skipped():
    assert _collect("a=1=2:b=31") == [("b", Red.normal())]


def test_pair_keeps_raw_value():
    (pair,) = LSColors("*.txt=01;31").each_pair()
    assert pair == Pair("*.txt", "01;31")