"""Resolution-relative sizing and simple widgets: buttons, lists, selectors, bars."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Sequence

from unseenia.geometry import Rect
from unseenia.settings import VideoMode

Color = tuple[int, int, int, int]
TRANSPARENT: Color = (0, 0, 0, 0)


def p2p_x(perc: float, vm: VideoMode) -> float:
    """Pixels for a percentage of the resolution's width, rounded down."""
    return float(math.floor(float(vm.width) * (perc / 100.0)))


def p2p_y(perc: float, vm: VideoMode) -> float:
    """Pixels for a percentage of the resolution's height, rounded down."""
    return float(math.floor(float(vm.height) * (perc / 100.0)))


def calc_char_size(vm: VideoMode, modifier: int = 60) -> int:
    """Character size scaled to the resolution."""
    if modifier == 0:
        raise ValueError("modifier must not be zero")
    return (vm.width + vm.height) // modifier


class ButtonState(IntEnum):
    IDLE = 0
    HOVER = 1
    ACTIVE = 2


class Button:
    """A rectangular button that reacts to the mouse."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        text: str = "",
        character_size: int = 14,
        *,
        text_idle_color: Color = (255, 255, 255, 255),
        text_hover_color: Color = (255, 255, 255, 255),
        text_active_color: Color = (255, 255, 255, 255),
        idle_color: Color = TRANSPARENT,
        hover_color: Color = TRANSPARENT,
        active_color: Color = TRANSPARENT,
        outline_idle_color: Color = TRANSPARENT,
        outline_hover_color: Color = TRANSPARENT,
        outline_active_color: Color = TRANSPARENT,
        button_id: int = 0,
    ) -> None:
        self.shape = Rect(x, y, width, height)
        self.text = text
        self.character_size = character_size
        self.id = button_id
        self.state = ButtonState.IDLE
        self._colors = {
            ButtonState.IDLE: (idle_color, text_idle_color, outline_idle_color),
            ButtonState.HOVER: (hover_color, text_hover_color, outline_hover_color),
            ButtonState.ACTIVE: (active_color, text_active_color, outline_active_color),
        }
        self._apply_colors()

    def _apply_colors(self) -> None:
        self.fill_color, self.text_color, self.outline_color = self._colors[self.state]

    def is_pressed(self) -> bool:
        return self.state == ButtonState.ACTIVE

    def update(self, mouse_pos: tuple[float, float], mouse_pressed: bool) -> None:
        """Set the state from the mouse position and the left button."""
        self.state = ButtonState.IDLE
        if self.shape.contains(mouse_pos[0], mouse_pos[1]):
            self.state = ButtonState.HOVER
            if mouse_pressed:
                self.state = ButtonState.ACTIVE
        self._apply_colors()


class DropDownList:
    """A button that opens a list of choices below it."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        labels: Sequence[str],
        default_index: int = 0,
    ) -> None:
        if not 0 <= default_index < len(labels):
            raise IndexError(f"default index {default_index} is out of range")
        self.keytime = 0.0
        self.keytime_max = 1.0
        self.show_list = False
        self.active_element = Button(
            x,
            y,
            width,
            height,
            labels[default_index],
            14,
            text_idle_color=(255, 255, 255, 150),
            text_hover_color=(255, 255, 255, 200),
            text_active_color=(20, 20, 20, 50),
            idle_color=(70, 70, 70, 200),
            hover_color=(150, 150, 150, 200),
            active_color=(20, 20, 20, 200),
            outline_idle_color=(255, 255, 255, 200),
            outline_hover_color=(255, 255, 255, 255),
            outline_active_color=(20, 20, 20, 50),
            button_id=default_index,
        )
        self.elements = [
            Button(
                x,
                y + (index + 1) * height,
                width,
                height,
                label,
                14,
                text_idle_color=(255, 255, 255, 150),
                text_hover_color=(255, 255, 255, 255),
                text_active_color=(20, 20, 20, 50),
                idle_color=(70, 70, 70, 200),
                hover_color=(150, 150, 150, 200),
                active_color=(20, 20, 20, 200),
                outline_idle_color=(255, 255, 255, 0),
                outline_hover_color=(255, 255, 255, 0),
                outline_active_color=(20, 20, 20, 0),
                button_id=index,
            )
            for index, label in enumerate(labels)
        ]

    @property
    def active_element_id(self) -> int:
        return self.active_element.id

    def key_time(self) -> bool:
        if self.keytime >= self.keytime_max:
            self.keytime = 0.0
            return True
        return False

    def update_key_time(self, dt: float) -> None:
        if self.keytime < self.keytime_max:
            self.keytime += 10.0 * dt

    def update(
        self, mouse_pos: tuple[float, float], mouse_pressed: bool, dt: float
    ) -> None:
        """Open or close the list, and pick a choice when one is clicked."""
        self.update_key_time(dt)
        self.active_element.update(mouse_pos, mouse_pressed)

        if self.active_element.is_pressed() and self.key_time():
            self.show_list = not self.show_list

        if self.show_list:
            for element in self.elements:
                element.update(mouse_pos, mouse_pressed)
                if element.is_pressed() and self.key_time():
                    self.show_list = False
                    self.active_element.text = element.text
                    self.active_element.id = element.id


class TextureSelector:
    """A panel showing a texture sheet on which a grid cell can be picked."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        grid_size: float,
        sheet_width: float,
        sheet_height: float,
        text: str,
    ) -> None:
        if int(grid_size) <= 0:
            raise ValueError("grid size must be positive")
        self.keytime = 0.0
        self.keytime_max = 1.0
        self.grid_size = grid_size
        self.active = False
        self.hidden = False
        offset = grid_size

        self.bounds = Rect(x + offset, y, width, height)
        self.sheet_bounds = Rect(
            x + offset, y, min(sheet_width, width), min(sheet_height, height)
        )
        self.selector = Rect(x + offset, y, grid_size, grid_size)
        self.mouse_pos_grid: tuple[int, int] = (0, 0)
        self.texture_rect = Rect(0, 0, int(grid_size), int(grid_size))
        self.hide_button = Button(
            y,
            x,
            50.0,
            50.0,
            text,
            16,
            text_idle_color=(255, 255, 255, 200),
            text_hover_color=(255, 255, 255, 250),
            text_active_color=(255, 255, 255, 50),
            idle_color=(70, 70, 70, 200),
            hover_color=(150, 150, 150, 250),
            active_color=(20, 20, 20, 50),
        )

    def key_time(self) -> bool:
        if self.keytime >= self.keytime_max:
            self.keytime = 0.0
            return True
        return False

    def update_key_time(self, dt: float) -> None:
        if self.keytime < self.keytime_max:
            self.keytime += 10.0 * dt

    def update(
        self, mouse_pos: tuple[float, float], mouse_pressed: bool, dt: float
    ) -> None:
        """Toggle visibility and move the selector to the cell under the mouse."""
        self.update_key_time(dt)
        self.hide_button.update(mouse_pos, mouse_pressed)

        if self.hide_button.is_pressed() and self.key_time():
            self.hidden = not self.hidden

        if self.hidden:
            return
        self.active = False
        if not self.bounds.contains(mouse_pos[0], mouse_pos[1]):
            return
        self.active = True
        grid = int(self.grid_size)
        self.mouse_pos_grid = (
            (int(mouse_pos[0]) - int(self.bounds.left)) // grid,
            (int(mouse_pos[1]) - int(self.bounds.top)) // grid,
        )
        self.selector.left = self.bounds.left + self.mouse_pos_grid[0] * self.grid_size
        self.selector.top = self.bounds.top + self.mouse_pos_grid[1] * self.grid_size
        self.texture_rect.left = int(self.selector.left - self.bounds.left)
        self.texture_rect.top = int(self.selector.top - self.bounds.top)


class ProgressBar:
    """A bar whose inner part shrinks with the value it shows.

    Position and size are given as percentages of the resolution.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        max_value: int,
        vm: VideoMode,
    ) -> None:
        if max_value == 0:
            raise ValueError("max_value must not be zero")
        px_width = p2p_x(width, vm)
        px_height = p2p_y(height, vm)
        px_x = p2p_x(x, vm)
        px_y = p2p_y(y, vm)
        self.max_width = px_width
        self.max_value = max_value
        self.back = Rect(px_x, px_y, px_width, px_height)
        self.inner = Rect(px_x, px_y, px_width, px_height)
        self.text = ""

    def update(self, current_value: int) -> None:
        percent = current_value / self.max_value
        self.inner.width = float(math.floor(self.max_width * percent))
        self.text = f"{current_value} / {self.max_value}"