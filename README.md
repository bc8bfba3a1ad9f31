# themekit

A small, dependency-free theming model for user interfaces. It gives you
light, dark and system themes, custom colour themes that can build on one
another, and a provider object that keeps track of the chosen theme, the
theme actually in effect, previews and a forced override.

## Install

    pip install themekit

For running the tests:

    pip install "themekit[test]"

## Themes and colours

`themekit.common` holds the core types:

- `Theme`: a frozen dataclass with a `kind` (`ThemeKind.LIGHT`, `DARK`,
  `SYSTEM` or `CUSTOM`) and, for custom themes, a `custom` definition.
  `Theme.LIGHT`, `Theme.DARK` and `Theme.SYSTEM` are ready-made instances.
- `ColorTokens`: `primary`, `secondary`, `background`, `text` and the
  optional `error`, `warning` and `success`.
- `CustomTheme`: a `name`, its `tokens` and an optional `base` theme name.
- `StorageType`: `LOCAL_STORAGE` (the default) or `SESSION_STORAGE`.
- `ThemeError`: a `ValueError` raised for invalid, unknown or
  uncomposable themes.

```python
from themekit.common import Theme, ColorTokens, CustomTheme

dark = Theme.parse("dark")
print(dark.as_str())        # "dark"
print(dark.is_dark(None))   # True

tokens = dark.colors(None)
print(tokens.background)    # "#000000"
```

`Theme.parse` accepts `light`, `dark` and `system` (lower case or
capitalised) and raises `ThemeError` for anything else, custom theme names
included. `is_dark(system_fallback)` uses the fallback for the system theme
(false when it is `None`), and treats a custom theme as dark unless its
background is `#ffffff`. The light and system themes share the light colours.

### Custom themes

```python
brand = CustomTheme(
    name="brand",
    tokens=ColorTokens(
        primary="#336699",
        secondary="#224466",
        background="#101010",
        text="#eeeeee",
        error="#ff0000",
    ),
)
brand.validate()            # raises ThemeError on a blank name or bad hex colours

night = CustomTheme(
    name="night",
    tokens=ColorTokens(
        primary="#111111",
        secondary="#222222",
        background="#000000",
        text="#ffffff",
    ),
    base="brand",
)

theme = Theme.custom_theme(night)
colors = theme.colors({"brand": brand})
print(colors.error)         # "#ff0000", inherited from the base theme
```

The four main colours always come from the theme itself; `error`, `warning`
and `success` fall back to the base theme when the theme leaves them unset
(`ColorTokens.merge_with`). `CustomTheme.compose_with_base` raises
`ThemeError` when the base is not among the themes given; `Theme.colors`
instead falls back to the custom theme's own tokens.

## The provider

`themekit.provider.ThemeProvider` holds the current theme state:
`theme` (the chosen theme), `resolved_theme` (the one in effect),
`system_theme`, `preview_theme`, `forced_theme`, `custom_themes` and
`attributes`, a dict with the `data-theme`, `class` and `style`
values a document would carry.

On creation it reads the last chosen theme from `storage` under
`storage_name` (default `"theme"`), falling back to `default_theme`, and
resolves it. Resolution takes a forced theme first, then a preview, then the
chosen theme, with `system` following `prefers_dark`.

```python
from themekit.common import Theme
from themekit.provider import ThemeProvider, use_theme

storage = {}
provider = ThemeProvider(storage=storage)
provider.set_theme(Theme.DARK)        # storage["theme"] == "dark"
provider.reset_to_system()
provider.on_system_change(True)       # resolved_theme is now Theme.DARK
provider.apply_preview(Theme.LIGHT)

with provider:
    assert use_theme() is provider
```

- `set_custom_theme(custom)` validates the theme and registers it by name;
  an invalid theme raises `ThemeError`.
- `on_storage_event()` reloads the theme from storage; unknown values are
  ignored.
- `on_clock_tick(hour)` selects light from 07:00 to 18:59 and dark otherwise.
- `use_theme()` returns the innermost provider entered with `with` and
  raises `RuntimeError` when there is none.

## What it does not do

The provider does not talk to a browser or a real document. `storage` is
any mutable mapping you pass in (with `None`, nothing is read or saved), and
`attributes` is only a dict for you to apply. Nothing listens for system
preference changes, storage changes or the clock by itself: call
`on_system_change`, `on_storage_event` and `on_clock_tick` when those
happen.