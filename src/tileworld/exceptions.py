"""Custom exceptions for world generation."""


class TileWorldError(Exception):
    """Base exception for tile world errors."""

    pass


class ConfigurationError(TileWorldError):
    """Raised when a generation setting is invalid.

    Attributes:
        field: Dotted name of the offending setting, e.g. "mountain_range".
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid {field}: {message}")


class PlacementInvariantError(TileWorldError):
    """Raised when generated placements break a terrain invariant."""

    pass
