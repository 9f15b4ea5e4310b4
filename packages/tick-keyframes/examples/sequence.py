"""Sequence -- chained point and size animations delivered on the main thread.

Demonstrates:
- Point and Dimension keyframes with per-axis segment easing
- Chaining animations with then()
- A QueueDispatcher drained by a main loop, the way a UI thread would

Run: python -m examples.sequence
"""
from __future__ import annotations

import time

from tick_clock import QueueDispatcher, Scheduler, TickConfig
from tick_keyframes import Animation

MOVE = "{0%: point(0, 0); 60%: point(30, 10); 100%: point(40, 0)}"
GROW = "{0s: dim(4, 2); 0.5s: dim(12, 6)}"


def main() -> None:
    print("=== Sequence ===\n")

    scheduler = Scheduler(config=TickConfig(fps_target=15))
    dispatcher = QueueDispatcher()
    finished = []

    move = Animation(
        MOVE, 1.0,
        segment_easing=("ease_out_quad", "ease_in_out_sine"),
        on_update=lambda p: print(f"  move  {p}"),
        scheduler=scheduler,
        dispatcher=dispatcher,
    )
    grow = Animation(
        GROW, 0.5,
        easing="ease_out_back",
        on_update=lambda d: print(f"  grow  {d}"),
        on_finish=lambda: finished.append(True),
        scheduler=scheduler,
        dispatcher=dispatcher,
    )
    move.then(grow)

    try:
        move.play()
        # The main loop owns all callbacks; ticks only queue them.
        while not finished:
            dispatcher.drain()
            time.sleep(1 / 60)
    finally:
        scheduler.shutdown()

    print(f"\nDone. Ended at {move.value} with size {grow.value}.")


if __name__ == "__main__":
    main()
