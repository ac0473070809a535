"""Configuration classes for wirecross components."""

from dataclasses import dataclass


@dataclass
class TracerConfig:
    """Defaults for parsing move lists and scoring crossings."""

    # Separator between instruction tokens in a path string
    separator: str = ","

    # Distance reported when two paths never cross
    no_crossing_distance: int = 0

    def __post_init__(self) -> None:
        if not self.separator:
            raise ValueError("separator must be a non-empty string")

    def split(self, path: str) -> list[str]:
        """Split a path string into non-empty, stripped tokens."""
        return [token.strip() for token in path.split(self.separator) if token.strip()]


# Global configuration instance
TRACER_CONFIG = TracerConfig()
