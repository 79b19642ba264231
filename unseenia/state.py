"""Game states: shared data, key bindings, input timing and mouse tracking."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from unseenia.geometry import Vector2
from unseenia.settings import GraphicsSettings


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _pairs(path: str | Path) -> list[tuple[str, str]]:
    try:
        tokens = Path(path).read_text(encoding="utf-8").split()
    except FileNotFoundError:
        return []
    return list(zip(tokens[::2], tokens[1::2]))


def load_key_values(path: str | Path) -> dict[str, int]:
    """Read ``name value`` pairs; reading stops at the first malformed value.

    A missing file gives an empty mapping.
    """
    keys: dict[str, int] = {}
    for name, value in _pairs(path):
        try:
            keys[name] = int(value)
        except ValueError:
            break
    return keys


def load_keybinds(path: str | Path, supported_keys: dict[str, int]) -> dict[str, int]:
    """Read ``action key`` pairs and resolve each key through ``supported_keys``."""
    keybinds: dict[str, int] = {}
    for action, key in _pairs(path):
        try:
            keybinds[action] = supported_keys[key]
        except KeyError:
            raise KeyError(f"unsupported key {key!r} bound to {action!r}") from None
    return keybinds


@dataclass
class StateData:
    """Data shared by every state of the game."""

    grid_size: float = 64.0
    window: Any = None
    gfx_settings: GraphicsSettings | None = None
    supported_keys: dict[str, int] = field(default_factory=dict)
    states: list[State] = field(default_factory=list)


class State(ABC):
    """One screen of the game, such as a menu or the world."""

    def __init__(self, state_data: StateData) -> None:
        self.state_data = state_data
        self.window = state_data.window
        self.supported_keys = state_data.supported_keys
        self.states = state_data.states
        self.keybinds: dict[str, int] = {}
        self.quit = False
        self.paused = False
        self.keytime = 0.0
        self.keytime_max = 10.0
        self.grid_size = state_data.grid_size
        self.textures: dict[str, Any] = {}

        self.mouse_pos_screen: tuple[int, int] = (0, 0)
        self.mouse_pos_window: tuple[int, int] = (0, 0)
        self.mouse_pos_view = Vector2()
        self.mouse_pos_grid: tuple[int, int] = (0, 0)

    def key_time(self) -> bool:
        """True once enough time has passed since the last key press; resets it."""
        if self.keytime >= self.keytime_max:
            self.keytime = 0.0
            return True
        return False

    def end_state(self) -> None:
        self.quit = True

    def pause_state(self) -> None:
        self.paused = True

    def unpause_state(self) -> None:
        self.paused = False

    def update_mouse_positions(
        self,
        screen: tuple[int, int],
        window: tuple[int, int],
        view: Vector2 | None = None,
    ) -> None:
        """Record the mouse position on screen, in the window, in the world and on the grid.

        ``view`` is the world position of the window's top-left corner; without
        it the world and window coordinates coincide.
        """
        grid = int(self.grid_size)
        if grid == 0:
            raise ValueError("grid size must not be zero")
        offset = view if view is not None else Vector2()
        self.mouse_pos_screen = (int(screen[0]), int(screen[1]))
        self.mouse_pos_window = (int(window[0]), int(window[1]))
        self.mouse_pos_view = Vector2(window[0] + offset.x, window[1] + offset.y)
        self.mouse_pos_grid = (
            _trunc_div(int(self.mouse_pos_view.x), grid),
            _trunc_div(int(self.mouse_pos_view.y), grid),
        )

    def update_key_time(self, dt: float) -> None:
        if self.keytime < self.keytime_max:
            self.keytime += 100.0 * dt

    @abstractmethod
    def update_input(self, dt: float) -> None:
        """React to input for this frame."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the state by ``dt`` seconds."""