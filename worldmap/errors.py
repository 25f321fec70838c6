"""Exception hierarchy.

Every failure aborts the run; nothing here is recovered internally. The CLI
is the only place that catches :class:`WorldMapError`.
"""


class WorldMapError(Exception):
    """Base error for the package."""


class DecodeError(WorldMapError):
    """Malformed or unreadable input (bad XML, unknown geometry tag, I/O)."""


class StructuralError(WorldMapError):
    """Decoded model violates a structural invariant (e.g. point ring size)."""


class ExportError(WorldMapError):
    """An artifact could not be written."""


class ConfigError(WorldMapError):
    """Invalid run configuration."""
