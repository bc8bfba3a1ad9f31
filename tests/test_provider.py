import pytest

from themekit.common import ColorTokens, CustomTheme, Theme, ThemeError
from themekit.provider import ThemeProvider, use_theme


def _custom(name="ocean", background="#123456"):
    return CustomTheme(
        name=name,
        tokens=ColorTokens(
            primary="#111111", secondary="#222222", background=background, text="#ffffff"
        ),
    )


def test_default_provider_resolves_system_to_light():
    provider = ThemeProvider()
    assert provider.theme == Theme.SYSTEM
    assert provider.resolved_theme == Theme.LIGHT
    assert provider.system_theme == Theme.LIGHT


def test_system_preference_dark_resolves_dark():
    provider = ThemeProvider(prefers_dark=True)
    assert provider.system_theme == Theme.DARK
    assert provider.resolved_theme == Theme.DARK
    assert provider.attributes["data-theme"] == "dark"


def test_stored_theme_is_loaded():
    provider = ThemeProvider(storage={"theme": "dark"})
    assert provider.theme == Theme.DARK
    assert provider.resolved_theme == Theme.DARK


def test_invalid_stored_theme_falls_back_to_default():
    provider = ThemeProvider(default_theme=Theme.DARK, storage={"theme": "purple"})
    assert provider.theme == Theme.DARK


def test_custom_storage_name():
    storage = {"theme": "dark", "app-theme": "light"}
    provider = ThemeProvider(storage=storage, storage_name="app-theme")
    assert provider.theme == Theme.LIGHT
    provider.set_theme(Theme.DARK)
    assert storage["app-theme"] == Theme.DARK.as_str()
    assert storage["theme"] == "dark"


def test_set_theme_persists_and_resolves():
    storage = {}
    provider = ThemeProvider(storage=storage)
    provider.set_theme(Theme.DARK)
    assert storage["theme"] == "dark"
    assert provider.theme == Theme.DARK
    assert provider.resolved_theme == Theme.DARK
    assert provider.attributes["style"] == "color-scheme: dark;"


def test_set_theme_without_storage():
    provider = ThemeProvider()
    provider.set_theme(Theme.DARK)
    assert provider.resolved_theme == Theme.DARK
    assert provider.storage is None


def test_forced_theme_overrides_selection():
    provider = ThemeProvider(forced_theme=Theme.DARK)
    provider.set_theme(Theme.LIGHT)
    assert provider.theme == Theme.LIGHT
    assert provider.resolved_theme == Theme.DARK
    assert provider.attributes["class"] == "dark"


def test_apply_preview_sets_attributes_and_wins():
    provider = ThemeProvider()
    provider.apply_preview(Theme.DARK)
    assert provider.preview_theme == Theme.DARK
    assert provider.attributes["data-theme"] == "dark"
    provider.set_theme(Theme.LIGHT)
    assert provider.resolved_theme == Theme.DARK


def test_custom_theme_resolves_to_its_name():
    custom = _custom()
    provider = ThemeProvider()
    provider.set_theme(Theme.custom_theme(custom))
    assert provider.resolved_theme.as_str() == custom.name
    assert provider.attributes["data-theme"] == custom.name


def test_set_custom_theme_registers():
    custom = _custom()
    provider = ThemeProvider()
    provider.set_custom_theme(custom)
    assert provider.custom_themes[custom.name] is custom


def test_set_custom_theme_rejects_invalid():
    provider = ThemeProvider()
    with pytest.raises(ThemeError):
        provider.set_custom_theme(_custom(name="  "))
    assert provider.custom_themes == {}


def test_initial_custom_themes_are_copied():
    custom = _custom()
    initial = {custom.name: custom}
    provider = ThemeProvider(custom_themes=initial)
    provider.set_custom_theme(_custom(name="forest"))
    assert set(initial) == {custom.name}
    assert set(provider.custom_themes) == {custom.name, "forest"}


def test_reset_to_system():
    storage = {}
    provider = ThemeProvider(storage=storage, prefers_dark=True)
    provider.set_theme(Theme.LIGHT)
    provider.reset_to_system()
    assert storage["theme"] == "system"
    assert provider.theme == Theme.SYSTEM
    assert provider.resolved_theme == Theme.DARK


def test_on_system_change():
    provider = ThemeProvider()
    provider.on_system_change(True)
    assert provider.resolved_theme == Theme.DARK
    provider.on_system_change(False)
    assert provider.resolved_theme == Theme.LIGHT


def test_system_change_does_not_affect_explicit_theme():
    provider = ThemeProvider()
    provider.set_theme(Theme.LIGHT)
    provider.on_system_change(True)
    assert provider.system_theme == Theme.DARK
    assert provider.resolved_theme == Theme.LIGHT


def test_on_storage_event_picks_up_change():
    storage = {}
    provider = ThemeProvider(storage=storage)
    storage["theme"] = "Dark"
    provider.on_storage_event()
    assert provider.theme == Theme.DARK
    assert provider.resolved_theme == Theme.DARK


def test_on_storage_event_ignores_unknown_value():
    storage = {"theme": "light"}
    provider = ThemeProvider(storage=storage)
    storage["theme"] = "neon"
    provider.on_storage_event()
    assert provider.theme == Theme.LIGHT


@pytest.mark.parametrize(
    "hour, expected",
    [(7, Theme.LIGHT), (12, Theme.LIGHT), (18, Theme.LIGHT), (19, Theme.DARK), (6, Theme.DARK), (0, Theme.DARK)],
)
def test_on_clock_tick(hour, expected):
    provider = ThemeProvider()
    provider.on_clock_tick(hour)
    assert provider.theme == expected
    assert provider.resolved_theme == expected


def test_use_theme_inside_provider():
    with ThemeProvider() as provider:
        assert use_theme() is provider


def test_use_theme_without_provider_raises():
    with pytest.raises(RuntimeError):
        use_theme()


def test_nested_providers_restore_outer():
    with ThemeProvider() as outer:
        with ThemeProvider(default_theme=Theme.DARK) as inner:
            assert use_theme() is inner
        assert use_theme() is outer
    with pytest.raises(RuntimeError):
        use_theme()