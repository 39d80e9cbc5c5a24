# lstheme

Build colour themes for file listings in the terminal from `LS_COLORS`
and `EXA_COLORS` style definitions.

The package parses the colon-separated `key=codes` format used by these
variables. It turns the ANSI SGR codes back into `Style` values and builds
a `Theme`. A listing program can then ask the theme how to colour each part
of its output: file kinds, permission bits, sizes, users, links, Git status,
dates and so on. Keys that are not interface codes are treated as glob
patterns for file names.

## Installation

```
pip install .
```

## Styles

`lstheme.style` holds immutable values:

- `Colour`: the eight basic colours, `Colour.BLACK` to `Colour.WHITE`.
- `Fixed(index)`: a colour from the 256-colour palette.
- `RGB(red, green, blue)`: a true colour.

`Fixed` and `RGB` raise `ValueError` for a component outside 0 to 255.

Every colour has `normal()`, `bold()`, `underline()` and `on(background)`,
which return a `Style`. A `Style` has `fg(colour)`, `on(colour)`, `bold()`,
`dimmed()`, `italic()`, `underline()`, `blink()`, `reverse()`, `hidden()`
and `strikethrough()`. Each of these returns a new style.

```python
from lstheme.style import Colour, Fixed, Style, apply_overlay

Colour.RED.on(Colour.YELLOW).bold()
Style().fg(Fixed(149)).underline()

# Copy across only the colours and attributes the overlay sets
apply_overlay(Colour.RED.normal(), Style().underline())
```

## Parsing colour definitions

```python
from lstheme.lsc import LSColors, Pair

for pair in LSColors("di=34:*.txt=38;5;149"):
    print(pair.key, pair.to_style())

Pair("", "1;31").to_style()   # bold, red foreground
```

`LSColors.each_pair()` yields the same pairs as iterating. It skips entries
that do not have exactly one `=`, and entries with an empty key or an empty
value.

`Pair.to_style()` understands attributes `1`–`5` and `7`–`9`, and the
foreground codes `30`–`37`. It also understands the background codes
`40`–`47`, and `38`/`48` followed by `5;n` or `2;r;g;b`. Leading zeros are
allowed. Codes it does not understand are ignored, and so are out-of-range
values.

## Interface styles

`lstheme.ui_styles.UiStyles` holds one style for every colourable part of
a listing. These are grouped into `FileKinds`, `Permissions`, `Size`,
`Users`, `Links` and `Git`, with some further styles on the object itself.

- `UiStyles.plain()`: no colours at all.
- `UiStyles.default_theme(scale)`: the built-in colourful theme. `scale` is
  `ColourScale.FIXED` or `ColourScale.GRADIENT`, and it chooses whether file
  sizes share one colour or get a colour for each magnitude.
- `set_ls(pair)` and `set_exa(pair)` apply one pair. Each returns `False`
  and changes nothing if it does not know the key.
- `set_number_style(style)` and `set_unit_style(style)` set the size style
  for every magnitude at once.

## File name colours

`lstheme.file_colours` decides the style of a file from its name:

- `ExtensionMappings`: glob patterns paired with styles. `add(pattern, style)`
  raises `ValueError` for a malformed glob. `colour_file(name)` checks the
  patterns from last to first, so later patterns win.
- `NoFileColours`: never picks a style.
- `FileColoursPair(first, second)`: asks `first`, then falls back to
  `second`.
- `FileColours`: the abstract base for your own sources of file colours.

## Building a theme

```python
from lstheme.theme import Definitions, Options, Prefix, UseColours
from lstheme.ui_styles import ColourScale

options = Options(
    use_colours=UseColours.AUTOMATIC,
    colour_scale=ColourScale.GRADIENT,
    definitions=Definitions(ls="di=31:*.log=33", exa="da=36"),
)
theme = options.to_theme(isatty=True)

theme.ui.filekinds.directory      # style for directories
theme.colour_file("server.log")   # style from the *.log pattern
theme.size(Prefix.MEBI)           # style for a size number in MiB
theme.unit(None)                  # style for the unit of a plain byte count
theme.broken_filename()           # broken-symlink style with the overlay applied
```

With `UseColours.NEVER`, or with `UseColours.AUTOMATIC` when `isatty` is
false, the theme is plain and colours no file names.

`Definitions.parse_color_vars(colours)` applies the interface codes to a
`UiStyles`. It returns the file name patterns as `ExtensionMappings`,
together with a flag that says whether default file type colours should
still be used. If a pattern cannot be parsed, a warning is logged and the
pattern is skipped.

`Options.to_theme(isatty, default_file_colours=None)` takes an optional
`FileColours` to use as the default file type colouring. Your own patterns
are asked first, and the default is the fallback. If `EXA_COLORS` is
`reset` or starts with `reset:`, the default is left out, so only your own
patterns apply. `Theme.colour_file(name)` falls back to the normal file
style when nothing matches.

## EXA_COLORS keys

The `LS_COLORS` keys are `di`, `ex`, `fi`, `pi`, `so`, `bd`, `cd`, `ln`
and `or`. Besides these, `EXA_COLORS` understands keys for:

- permissions: `ur`, `uw`, `ux`, `ue`, `gr`, `gw`, `gx`, `tr`, `tw`, `tx`,
  `su`, `sf`, `xa`
- sizes: `sn`, `sb`, `nb`, `nk`, `nm`, `ng`, `nh`, `ub`, `uk`, `um`, `ug`,
  `uh`, `df`, `ds`
- users: `uu`, `un`, `gu`, `gn`
- links: `lc`, `lm`
- Git: `ga`, `gm`, `gd`, `gv`, `gt`
- general parts: `xx`, `da`, `in`, `bl`, `hd`, `lp`, `cc`, `bO`

In `LS_COLORS` these extra keys are treated as file name patterns.

## What it does not do

- It does not list directories, and it has no command to run.
- It does not turn a `Style` into escape sequences for printing. Writing
  the styled text to the terminal is up to the program that uses the theme.
- It does not read the environment. You pass the variable values to
  `Definitions` yourself.
- It has no built-in colouring by file type, such as images or archives.
  Pass your own `FileColours` as `default_file_colours` if you want one.

## Running the tests

```
pip install .[test]
pytest
```