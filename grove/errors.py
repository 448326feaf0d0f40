"""Exception types raised while turning a content tree into a site."""

from __future__ import annotations


class GroveError(Exception):
    """Base class for every error raised by grove."""


# -- per-document failures (recoverable: the run continues) --
class ContentParseError(GroveError):
    """The syntax tree for a document could not be built."""


class UnsafeContentError(GroveError):
    """Rendered HTML contains an element from the denylist."""

    def __init__(self, tag: str):
        super().__init__(f"HTML contains potentially unsafe element: <{tag}>")
        self.tag = tag


class OutputConflictError(GroveError):
    """Two source files map to the same output page."""


class SourceReadError(GroveError):
    """A source file is missing or cannot be decoded."""


# -- setup failures --
class PluginError(GroveError):
    """A content parser was registered or mapped inconsistently."""


class ConfigError(GroveError):
    """The site configuration file is invalid."""


class GenerationError(GroveError):
    """A generation run produced no documents at all."""
