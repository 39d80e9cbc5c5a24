import pytest

from lstheme.lsc import Pair
from lstheme.style import Colour, Fixed, Style
from lstheme.ui_styles import ColourScale, Size, UiStyles


def test_plain_is_default():
    plain = UiStyles.plain()
    assert plain == UiStyles()
    assert plain.colourful is False
    assert plain.filekinds.directory == Style()


def test_default_theme_values():
    theme = UiStyles.default_theme(ColourScale.FIXED)
    assert theme.colourful is True
    assert theme.filekinds.directory == Colour.BLUE.bold()
    assert theme.perms.user_execute_file == Colour.GREEN.bold().underline()
    assert theme.links.multi_link_file == Colour.RED.on(Colour.YELLOW)
    assert theme.git.ignored == Style().dimmed()
    assert theme.punctuation == Fixed(244).normal()
    assert theme.broken_path_overlay == Style().underline()


def test_size_fixed_scale():
    size = Size.colourful(ColourScale.FIXED)
    numbers = {size.number_byte, size.number_kilo, size.number_mega,
               size.number_giga, size.number_huge}
    assert numbers == {Colour.GREEN.bold()}
    assert size.unit_huge == Colour.GREEN.normal()


def test_size_gradient_scale():
    size = Size.colourful(ColourScale.GRADIENT)
    assert size.number_byte == Fixed(118).normal()
    assert size.number_kilo == Fixed(190).normal()
    assert size.number_mega == Fixed(226).normal()
    assert size.number_giga == Fixed(220).normal()
    assert size.number_huge == Fixed(214).normal()
    assert size.major == Colour.GREEN.bold()


def test_default_theme_uses_scale():
    theme = UiStyles.default_theme(ColourScale.GRADIENT)
    assert theme.size == Size.colourful(ColourScale.GRADIENT)


@pytest.mark.parametrize(
    "key, attribute",
    [
        ("di", "directory"),
        ("ex", "executable"),
        ("fi", "normal"),
        ("pi", "pipe"),
        ("so", "socket"),
        ("bd", "block_device"),
        ("cd", "char_device"),
        ("ln", "symlink"),
    ],
)
def test_set_ls_file_kinds(key, attribute):
    styles = UiStyles()
    assert styles.set_ls(Pair(key, "31")) is True
    assert getattr(styles.filekinds, attribute) == Colour.RED.normal()


def test_set_ls_orphan():
    styles = UiStyles()
    assert styles.set_ls(Pair("or", "33")) is True
    assert styles.broken_symlink == Colour.YELLOW.normal()


def test_set_ls_unknown_key_changes_nothing():
    styles = UiStyles()
    assert styles.set_ls(Pair("ur", "31")) is False
    assert styles.set_ls(Pair("*.txt", "31")) is False
    assert styles == UiStyles()


def test_set_exa_permission():
    styles = UiStyles()
    assert styles.set_exa(Pair("ur", "38;5;100")) is True
    assert styles.perms.user_read == Fixed(100).normal()


def test_set_exa_does_not_handle_ls_keys():
    styles = UiStyles()
    assert styles.set_exa(Pair("di", "31")) is False
    assert styles == UiStyles()


def test_set_exa_sn_sets_all_numbers():
    styles = UiStyles()
    assert styles.set_exa(Pair("sn", "38;5;113"))
    expected = Fixed(113).normal()
    assert styles.size.number_byte == expected
    assert styles.size.number_kilo == expected
    assert styles.size.number_mega == expected
    assert styles.size.number_giga == expected
    assert styles.size.number_huge == expected
    assert styles.size.unit_byte == Style()


def test_set_exa_sb_sets_all_units():
    styles = UiStyles()
    assert styles.set_exa(Pair("sb", "38;5;114"))
    expected = Fixed(114).normal()
    assert {styles.size.unit_byte, styles.size.unit_kilo, styles.size.unit_mega,
            styles.size.unit_giga, styles.size.unit_huge} == {expected}
    assert styles.size.number_byte == Style()


@pytest.mark.parametrize(
    "key, getter",
    [
        ("gt", lambda s: s.git.typechange),
        ("lm", lambda s: s.links.multi_link_file),
        ("gn", lambda s: s.users.group_not_yours),
        ("xx", lambda s: s.punctuation),
        ("hd", lambda s: s.header),
        ("ds", lambda s: s.size.minor),
    ],
)
def test_set_exa_various(key, getter):
    styles = UiStyles()
    assert styles.set_exa(Pair(key, "38;5;128"))
    assert getter(styles) == Fixed(128).normal()


def test_set_exa_broken_overlay_is_case_sensitive():
    styles = UiStyles()
    assert styles.set_exa(Pair("bO", "4")) is True
    assert styles.broken_path_overlay == Style().underline()
    assert styles.set_exa(Pair("bo", "4")) is False


def test_later_value_overrides():
    styles = UiStyles()
    for value in ("31", "32", "33"):
        styles.set_ls(Pair("pi", value))
    assert styles.filekinds.pipe == Colour.YELLOW.normal()