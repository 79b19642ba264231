"""Graphics settings and the small text file they are stored in."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class VideoMode:
    """A screen resolution."""

    width: int
    height: int
    bits_per_pixel: int = 32

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


DEFAULT_RESOLUTION = VideoMode(1920, 1080)


def _parse_bool(token: str, name: str) -> bool:
    if token not in ("0", "1"):
        raise ValueError(f"{name} must be 0 or 1, got {token!r}")
    return token == "1"


def _parse_int(token: str, name: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {token!r}") from None


@dataclass
class GraphicsSettings:
    """Window title, resolution and rendering options."""

    title: str = "kDefault"
    resolution: VideoMode = DEFAULT_RESOLUTION
    fullscreen: bool = False
    vertical_sync: bool = False
    frame_rate_limit: int = 120
    antialiasing_level: int = 0
    video_modes: list[VideoMode] = field(default_factory=list)

    def save_to_file(self, path: str | Path) -> None:
        """Write the title on one line followed by the numeric settings."""
        text = (
            f"{self.title}\n"
            f"{self.resolution.width} {self.resolution.height}\n"
            f"{int(self.fullscreen)}\n"
            f"{self.frame_rate_limit}\n"
            f"{int(self.vertical_sync)}\n"
            f"{self.antialiasing_level}\n"
        )
        Path(path).write_text(text, encoding="utf-8")

    def load_from_file(self, path: str | Path) -> None:
        """Read settings written by :meth:`save_to_file`.

        A missing file leaves the current settings untouched.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        title, _, rest = text.partition("\n")
        if not title and not rest:
            raise ValueError(f"settings file {path} is empty")
        tokens = rest.split()
        if len(tokens) < 6:
            raise ValueError(f"settings file {path} is incomplete")
        width = _parse_int(tokens[0], "width")
        height = _parse_int(tokens[1], "height")
        fullscreen = _parse_bool(tokens[2], "fullscreen")
        frame_rate_limit = _parse_int(tokens[3], "frame rate limit")
        vertical_sync = _parse_bool(tokens[4], "vertical sync")
        antialiasing_level = _parse_int(tokens[5], "antialiasing level")

        self.title = title.rstrip("\r")
        self.resolution = VideoMode(width, height, self.resolution.bits_per_pixel)
        self.fullscreen = fullscreen
        self.frame_rate_limit = frame_rate_limit
        self.vertical_sync = vertical_sync
        self.antialiasing_level = antialiasing_level