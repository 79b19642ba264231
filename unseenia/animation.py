"""Frame-based sprite-sheet animations and a component that switches between them."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from unseenia.geometry import Rect, Sprite

_MIN_MOD_PERCENT = 0.5


class Animation:
    """A horizontal run of frames on a texture sheet.

    Frames run from ``(start_frame_x, start_frame_y)`` to
    ``(frames_x, frames_y)``, each ``width`` by ``height`` pixels.
    """

    def __init__(
        self,
        sprite: Sprite,
        texture_sheet: object,
        animation_timer: float,
        start_frame_x: int,
        start_frame_y: int,
        frames_x: int,
        frames_y: int,
        width: int,
        height: int,
    ) -> None:
        self.sprite = sprite
        self.texture_sheet = texture_sheet
        self.animation_timer = animation_timer
        self.timer = 0.0
        self.done = False
        self.width = width
        self.height = height
        self.start_rect = Rect(start_frame_x * width, start_frame_y * height, width, height)
        self.current_rect = replace(self.start_rect)
        self.end_rect = Rect(frames_x * width, frames_y * height, width, height)

        sprite.texture = texture_sheet
        sprite.texture_rect = replace(self.start_rect)

    @property
    def is_done(self) -> bool:
        return self.done

    def play(self, dt: float, mod_percent: float | None = None) -> bool:
        """Advance the timer and step a frame when it runs out.

        With ``mod_percent`` the speed is scaled by it, but never below half.
        Returns True when the last frame has wrapped back to the first.
        """
        speed = 1.0 if mod_percent is None else max(mod_percent, _MIN_MOD_PERCENT)
        self.done = False
        self.timer += speed * 100.0 * dt
        if self.timer >= self.animation_timer:
            self.timer = 0.0
            if self.current_rect != self.end_rect:
                self.current_rect.left += self.width
            else:
                self.current_rect.left = self.start_rect.left
                self.done = True
            self.sprite.texture_rect = replace(self.current_rect)
        return self.done

    def reset(self) -> None:
        """Rewind to the first frame, ready to step on the next play."""
        self.timer = self.animation_timer
        self.current_rect = replace(self.start_rect)


class AnimationComponent:
    """Named animations on one sprite, with an optional priority animation."""

    def __init__(self, sprite: Sprite, texture_sheet: object) -> None:
        self.sprite = sprite
        self.texture_sheet = texture_sheet
        self.animations: dict[str, Animation] = {}
        self.last_animation: Animation | None = None
        self.priority_animation: Animation | None = None

    def add_animation(
        self,
        key: str,
        animation_timer: float,
        start_frame_x: int,
        start_frame_y: int,
        frames_x: int,
        frames_y: int,
        width: int,
        height: int,
    ) -> None:
        self.animations[key] = Animation(
            self.sprite,
            self.texture_sheet,
            animation_timer,
            start_frame_x,
            start_frame_y,
            frames_x,
            frames_y,
            width,
            height,
        )

    def _get(self, key: str) -> Animation:
        try:
            return self.animations[key]
        except KeyError:
            raise KeyError(f"no animation named {key!r}") from None

    def is_done(self, key: str) -> bool:
        return self._get(key).done

    def _switch_to(self, animation: Animation) -> None:
        if self.last_animation is not animation:
            if self.last_animation is not None:
                self.last_animation.reset()
            self.last_animation = animation

    def _run(
        self, animation: Animation, priority: bool, step: Callable[[], bool]
    ) -> bool:
        if self.priority_animation is not None:
            if self.priority_animation is animation:
                self._switch_to(animation)
                if step():
                    self.priority_animation = None
        else:
            if priority:
                self.priority_animation = animation
            self._switch_to(animation)
            step()
        return animation.done

    def play(self, key: str, dt: float, priority: bool = False) -> bool:
        """Play the named animation at its normal speed; return whether it finished."""
        animation = self._get(key)
        return self._run(animation, priority, lambda: animation.play(dt))

    def play_modified(
        self,
        key: str,
        dt: float,
        modifier: float,
        modifier_max: float,
        priority: bool = False,
    ) -> bool:
        """Play the named animation at a speed scaled by ``|modifier / modifier_max|``."""
        if modifier_max == 0:
            raise ValueError("modifier_max must not be zero")
        animation = self._get(key)
        percent = abs(modifier / modifier_max)
        return self._run(animation, priority, lambda: animation.play(dt, percent))