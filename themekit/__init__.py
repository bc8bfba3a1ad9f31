"""Light, dark, system and custom colour themes with a stateful theme provider."""

__version__ = "0.0.3"
__all__ = ["common", "provider"]