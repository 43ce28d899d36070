"""The frame loop of the simulator: keyboard state and frame timing."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable
from typing import Any, Optional, TypeVar, Union

DEFAULT_FRAMES_PER_SECOND = 30.0

State = TypeVar("State")


class Key(enum.Enum):
    """The keys the simulator reacts to."""

    DOWN = "down"
    UP = "up"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    SPACE = " "


class Interface:
    """Keeps track of which keys are held and when the next frame is due.

    Held arrow keys are counted in frames: a key that has just gone down reads
    1, and every finished frame while it stays down adds one. Released keys
    read 0. The space key (or Home) is only reported for the frame in which
    it was pressed.
    """

    def __init__(self, frames_per_second: float = DEFAULT_FRAMES_PER_SECOND) -> None:
        self.down = 0
        self.up = 0
        self.left = 0
        self.right = 0
        self.space = False
        self.next_tick = 0.0
        self._time_period = 0.0
        self.set_frames_per_second(frames_per_second)

    def key_event(self, key: Union[Key, str], down: bool) -> None:
        """Record that ``key`` went down or came up. Other keys are ignored."""
        try:
            key = Key(key) if not isinstance(key, Key) else key
        except ValueError:
            return
        pressed = 1 if down else 0
        if key is Key.DOWN:
            self.down = pressed
        elif key is Key.UP:
            self.up = pressed
        elif key is Key.RIGHT:
            self.right = pressed
        elif key is Key.LEFT:
            self.left = pressed
        else:
            self.space = bool(down)

    def end_frame(self) -> None:
        """Age the held keys by one frame and forget the space key."""
        if self.down:
            self.down += 1
        if self.up:
            self.up += 1
        if self.left:
            self.left += 1
        if self.right:
            self.right += 1
        self.space = False

    def set_frames_per_second(self, value: float) -> None:
        """Set how many frames are drawn each second."""
        if value <= 0:
            raise ValueError(f"frames per second must be positive, got {value}")
        self._time_period = 1.0 / value

    def frame_rate(self) -> float:
        """Return the time between frames, in seconds."""
        return self._time_period

    def is_time_to_draw(self, now: Optional[float] = None) -> bool:
        """Tell whether the next frame is due at ``now`` (seconds)."""
        if now is None:
            now = time.monotonic()
        return now >= self.next_tick

    def set_next_draw_time(self, now: Optional[float] = None) -> None:
        """Schedule the next frame one time period after ``now`` (seconds)."""
        if now is None:
            now = time.monotonic()
        self.next_tick = now + self._time_period

    def run(
        self,
        callback: Callable[[Interface, State], Any],
        state: State = None,
        frames: Optional[int] = None,
    ) -> int:
        """Call ``callback(self, state)`` once per frame.

        Runs ``frames`` frames, or forever when ``frames`` is None, and
        returns the number of frames run.
        """
        if frames is not None and frames < 0:
            raise ValueError(f"frame count must not be negative, got {frames}")
        count = 0
        while frames is None or count < frames:
            callback(self, state)
            now = time.monotonic()
            if not self.is_time_to_draw(now):
                time.sleep(self.next_tick - now)
            self.set_next_draw_time()
            self.end_frame()
            count += 1
        return count