"""Fade -- a brightness pulse drawn as a bar in the terminal.

Demonstrates:
- Parsing keyframes from text
- Playing an Animation on the threaded scheduler
- Receiving typed values in on_update
- Waiting for on_finish from the main thread

Run: python -m examples.fade [--duration 2] [--easing ease_in_out_sine]
"""
from __future__ import annotations

import argparse
import threading

from tick_clock import Scheduler, TickConfig
from tick_keyframes import Animation

PULSE = "{0%: 0; 50%: 255; 100%: 0}"
WIDTH = 40


def draw(brightness: int) -> None:
    filled = brightness * WIDTH // 255
    print(f"  [{'#' * filled:<{WIDTH}}] {brightness:3d}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--duration", type=float, default=1.0)
    parser.add_argument("--fps", type=int, default=20)
    parser.add_argument("--easing", default="linear")
    parser.add_argument("--keyframes", default=PULSE)
    args = parser.parse_args()

    print(f"=== Fade {args.keyframes} ===\n")

    scheduler = Scheduler(config=TickConfig(fps_target=args.fps))
    done = threading.Event()
    animation = Animation(
        args.keyframes,
        args.duration,
        segment_easing=args.easing,
        on_update=draw,
        on_finish=done.set,
        scheduler=scheduler,
    )
    try:
        animation.play()
        done.wait()
    finally:
        scheduler.shutdown()

    print(f"\nDone. Final value {animation.value}.")


if __name__ == "__main__":
    main()
