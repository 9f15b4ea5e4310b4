"""tick-animator - Play/pause/reverse/loop timer engine for animations."""
from __future__ import annotations

from tick_animator.animator import Animator, AnimatorState, FinishFn, UpdateFn

__all__ = ["Animator", "AnimatorState", "UpdateFn", "FinishFn"]
