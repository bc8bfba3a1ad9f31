"""A theme provider that tracks the selected, resolved and previewed theme."""

from __future__ import annotations

import contextvars
from collections.abc import Mapping, MutableMapping
from typing import Dict, Optional

from themekit.common import (
    DEFAULT_STORAGE_KEY,
    CustomTheme,
    StorageType,
    Theme,
    ThemeError,
    ThemeKind,
)

_current_provider: contextvars.ContextVar[Optional["ThemeProvider"]] = contextvars.ContextVar(
    "themekit_current_provider", default=None
)

_DAY_START_HOUR = 7
_DAY_END_HOUR = 19


class ThemeProvider:
    """Holds theme state, persists choices and mirrors them onto document attributes.

    ``storage`` stands in for the browser storage selected by ``storage_type``;
    when it is ``None`` nothing is read or persisted. ``prefers_dark`` is the
    current answer of the system colour-scheme query.
    """

    def __init__(
        self,
        default_theme: Theme = Theme.SYSTEM,
        storage_type: StorageType = StorageType.LOCAL_STORAGE,
        storage_name: str = DEFAULT_STORAGE_KEY,
        forced_theme: Optional[Theme] = None,
        custom_themes: Optional[Mapping[str, CustomTheme]] = None,
        storage: Optional[MutableMapping[str, str]] = None,
        prefers_dark: bool = False,
    ) -> None:
        self.storage_type = storage_type
        self.storage_name = storage_name
        self.forced_theme = forced_theme
        self.storage = storage
        self.prefers_dark = prefers_dark
        self.custom_themes: Dict[str, CustomTheme] = dict(custom_themes or {})
        self.preview_theme: Optional[Theme] = None
        self.system_theme = Theme.LIGHT
        self.resolved_theme = Theme.LIGHT
        self.attributes: Dict[str, str] = {}
        self._token: list[contextvars.Token] = []

        stored = self._read_stored()
        self.theme = stored if stored is not None else default_theme
        self._update_resolved(self.theme)

    def __enter__(self) -> ThemeProvider:
        self._token.append(_current_provider.set(self))
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        _current_provider.reset(self._token.pop())

    def _read_stored(self) -> Optional[Theme]:
        if self.storage is None:
            return None
        value = self.storage.get(self.storage_name)
        if value is None:
            return None
        try:
            return Theme.parse(value)
        except ThemeError:
            return None

    def _apply_attributes(self, theme: Theme) -> None:
        name = theme.as_str()
        self.attributes["data-theme"] = name
        self.attributes["class"] = name
        self.attributes["style"] = f"color-scheme: {name};"

    def _update_resolved(self, new_theme: Theme) -> None:
        system = Theme.DARK if self.prefers_dark else Theme.LIGHT
        self.system_theme = system
        if self.forced_theme is not None:
            final = self.forced_theme
        elif self.preview_theme is not None:
            final = self.preview_theme
        elif new_theme.kind is ThemeKind.SYSTEM:
            final = system
        else:
            final = new_theme
        self.resolved_theme = final
        self._apply_attributes(final)

    def set_theme(self, theme: Theme) -> None:
        """Select a theme, persist it and re-resolve."""
        if self.storage is not None:
            self.storage[self.storage_name] = theme.as_str()
        self.theme = theme
        self._update_resolved(theme)

    def set_custom_theme(self, custom: CustomTheme) -> None:
        """Register a custom theme after validating it; raises ThemeError if invalid."""
        custom.validate()
        self.custom_themes[custom.name] = custom

    def reset_to_system(self) -> None:
        """Select the system theme."""
        self.set_theme(Theme.SYSTEM)

    def apply_preview(self, theme: Theme) -> None:
        """Show a theme without selecting it; it wins over later selections."""
        self.preview_theme = theme
        self._apply_attributes(theme)

    def on_system_change(self, prefers_dark: bool) -> None:
        """React to a change of the system colour-scheme preference."""
        self.prefers_dark = prefers_dark
        self._update_resolved(self.theme)

    def on_storage_event(self) -> None:
        """Pick up a theme written to storage elsewhere; unknown values are ignored."""
        stored = self._read_stored()
        if stored is not None:
            self.theme = stored
            self._update_resolved(stored)

    def on_clock_tick(self, hour: int) -> None:
        """Switch to light during the day (07:00 to 18:59) and dark otherwise."""
        next_theme = Theme.LIGHT if _DAY_START_HOUR <= hour < _DAY_END_HOUR else Theme.DARK
        self.theme = next_theme
        self._update_resolved(next_theme)


def use_theme() -> ThemeProvider:
    """Return the innermost active provider; raises RuntimeError if there is none."""
    provider = _current_provider.get()
    if provider is None:
        raise RuntimeError("No ThemeProvider found")
    return provider