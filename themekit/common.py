"""Core theme types: colour tokens, custom themes and theme selection."""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import ClassVar, Optional

DEFAULT_STORAGE_KEY = "theme"
SYSTEM_THEME_QUERY = "(prefers-color-scheme: dark)"

_HEX_DIGITS = re.compile(r"\+?[0-9A-Fa-f]+")


class ThemeError(ValueError):
    """Raised when a theme is invalid, unknown or cannot be composed."""


class StorageType(enum.Enum):
    """Where the selected theme is persisted."""

    LOCAL_STORAGE = "local"
    SESSION_STORAGE = "session"

    @classmethod
    def default(cls) -> StorageType:
        return cls.LOCAL_STORAGE


class ThemeKind(enum.Enum):
    """The kinds of theme that can be selected."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"
    CUSTOM = "custom"


def _is_valid_hex(color: str) -> bool:
    color = color.lstrip("#")
    length = len(color.encode("utf-8"))
    return length == 6 or (length == 3 and _HEX_DIGITS.fullmatch(color) is not None)


@dataclass(frozen=True)
class ColorTokens:
    """The set of colours that make up a theme."""

    primary: str
    secondary: str
    background: str
    text: str
    error: Optional[str] = None
    warning: Optional[str] = None
    success: Optional[str] = None

    def merge_with(self, other: ColorTokens) -> ColorTokens:
        """Return ``other`` with its missing optional colours filled in from ``self``."""
        return replace(
            other,
            error=other.error if other.error is not None else self.error,
            warning=other.warning if other.warning is not None else self.warning,
            success=other.success if other.success is not None else self.success,
        )

    def validate(self) -> None:
        """Raise ThemeError if a required colour is not a hex colour."""
        for field_name in ("primary", "secondary", "background", "text"):
            value = getattr(self, field_name)
            if not _is_valid_hex(value):
                raise ThemeError(f"Invalid hex color for '{field_name}': {value}")


@dataclass(frozen=True)
class CustomTheme:
    """A named theme, optionally built on top of another named theme."""

    name: str
    tokens: ColorTokens
    base: Optional[str] = None

    def validate(self) -> None:
        """Raise ThemeError if the name is blank or the tokens are invalid."""
        if not self.name.strip():
            raise ThemeError("Theme name cannot be empty.")
        self.tokens.validate()

    def compose_with_base(self, available_themes: Mapping[str, CustomTheme]) -> ColorTokens:
        """Merge this theme's tokens over its base theme's tokens, if it has a base."""
        if self.base is None:
            return self.tokens
        base_theme = available_themes.get(self.base)
        if base_theme is None:
            raise ThemeError(f"Base theme '{self.base}' not found.")
        return base_theme.tokens.merge_with(self.tokens)


_LIGHT_TOKENS = ColorTokens(
    primary="#ffffff",
    secondary="#f0f0f0",
    background="#ffffff",
    text="#000000",
)

_DARK_TOKENS = ColorTokens(
    primary="#000000",
    secondary="#1a1a1a",
    background="#000000",
    text="#ffffff",
)

_PARSE_TABLE = {
    "light": ThemeKind.LIGHT,
    "Light": ThemeKind.LIGHT,
    "dark": ThemeKind.DARK,
    "Dark": ThemeKind.DARK,
    "system": ThemeKind.SYSTEM,
    "System": ThemeKind.SYSTEM,
}


@dataclass(frozen=True)
class Theme:
    """A selected theme: light, dark, system or a custom one."""

    kind: ThemeKind = ThemeKind.SYSTEM
    custom: Optional[CustomTheme] = None

    LIGHT: ClassVar[Theme]
    DARK: ClassVar[Theme]
    SYSTEM: ClassVar[Theme]

    def __post_init__(self) -> None:
        if (self.kind is ThemeKind.CUSTOM) != (self.custom is not None):
            raise ThemeError("A custom theme needs exactly the custom kind and a definition.")

    @classmethod
    def parse(cls, text: str) -> Theme:
        """Parse a stored theme name; only the built-in themes are recognised."""
        try:
            return cls(_PARSE_TABLE[text])
        except KeyError:
            raise ThemeError(f"Unknown theme: {text!r}") from None

    @classmethod
    def custom_theme(cls, custom: CustomTheme) -> Theme:
        """Wrap a custom theme definition."""
        return cls(ThemeKind.CUSTOM, custom)

    def as_str(self) -> str:
        """The name used for storage and document attributes."""
        if self.custom is not None:
            return self.custom.name
        return self.kind.value

    def __str__(self) -> str:
        return self.as_str()

    def is_dark(self, system_fallback: Optional[bool] = None) -> bool:
        """Whether this theme is dark; ``system_fallback`` decides for the system theme."""
        if self.kind is ThemeKind.DARK:
            return True
        if self.kind is ThemeKind.LIGHT:
            return False
        if self.kind is ThemeKind.SYSTEM:
            return bool(system_fallback) if system_fallback is not None else False
        return self.custom.tokens.background.lower() != "#ffffff"

    def colors(self, available_themes: Optional[Mapping[str, CustomTheme]] = None) -> ColorTokens:
        """The colour tokens for this theme, composing custom themes with their base."""
        if self.kind is ThemeKind.DARK:
            return _DARK_TOKENS
        if self.kind in (ThemeKind.LIGHT, ThemeKind.SYSTEM):
            return _LIGHT_TOKENS
        if available_themes is None:
            return self.custom.tokens
        try:
            return self.custom.compose_with_base(available_themes)
        except ThemeError:
            return self.custom.tokens


Theme.LIGHT = Theme(ThemeKind.LIGHT)
Theme.DARK = Theme(ThemeKind.DARK)
Theme.SYSTEM = Theme(ThemeKind.SYSTEM)