"""Process-wide tick configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

_FALSE_WORDS = frozenset({"0", "false", "no", "off"})
_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class TickConfig:
    """Immutable tick configuration shared by every animator on a scheduler.

    Attributes:
        fps_target: Target ticks per second for every animation.
        frame_skip: Scale each tick's progress by the real time elapsed since
            the previous tick, keeping durations accurate when ticks run late.
    """

    fps_target: int = 60
    frame_skip: bool = True

    def __post_init__(self) -> None:
        if self.fps_target <= 0:
            raise ValueError(f"fps_target must be positive, got {self.fps_target}")

    @property
    def tick_interval(self) -> float:
        """Expected seconds between two ticks."""
        return 1.0 / self.fps_target

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TickConfig:
        """Build a config from ``TICK_FPS_TARGET`` and ``TICK_FRAME_SKIP``."""
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        raw_fps = env.get("TICK_FPS_TARGET", "").strip()
        if raw_fps:
            try:
                kwargs["fps_target"] = int(raw_fps)
            except ValueError:
                raise ValueError(
                    f"TICK_FPS_TARGET must be an integer, got {raw_fps!r}"
                ) from None

        raw_skip = env.get("TICK_FRAME_SKIP", "").strip().lower()
        if raw_skip:
            if raw_skip in _FALSE_WORDS:
                kwargs["frame_skip"] = False
            elif raw_skip in _TRUE_WORDS:
                kwargs["frame_skip"] = True
            else:
                raise ValueError(
                    f"TICK_FRAME_SKIP must be a boolean word, got {raw_skip!r}"
                )

        return cls(**kwargs)  # type: ignore[arg-type]
