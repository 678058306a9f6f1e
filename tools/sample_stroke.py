#!/usr/bin/env python3
"""
Sample the procedural stroke without opening a window.

Prints the joint angles (degrees) the stroke animator assigns over a span of
clock time, which is handy when tuning presets.
"""

from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
import sys
from typing import List, Sequence

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.swimlib.animation import JointId, PRESETS, StrokeAnimator, RootMotion, get_preset  # noqa: E402
from src.swimlib.config.settings import LOG_FORMAT, LOG_LEVEL  # noqa: E402


def sample_times(duration: float, frames: int) -> np.ndarray:
    """Evenly spaced clock times, endpoint excluded so a full cycle does not repeat."""
    return np.linspace(0.0, duration, num=frames, endpoint=False)


def format_rows(preset_name: str, times: Sequence[float], joints: List[JointId]) -> List[str]:
    animator = StrokeAnimator(get_preset(preset_name))
    columns = []
    for joint in joints:
        for assignment in animator.compute_pose(0.0):
            if assignment.joint is joint:
                columns.append((joint, assignment.axis))

    header = ["t"] + [f"{joint.value}.{axis.name.lower()}" for joint, axis in columns]
    rows = ["  ".join(f"{name:>16}" for name in header)]

    for t in times:
        pose = animator.compute_pose(float(t))
        values = [f"{t:16.3f}"]
        for joint, axis in columns:
            values.append(f"{math.degrees(pose.angle(joint, axis)):16.2f}")
        rows.append("  ".join(values))

    return rows


def cli(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print joint angles of the procedural swimming stroke.",
    )
    parser.add_argument(
        "--preset",
        default="freestyle",
        choices=sorted(PRESETS),
        help="Stroke tuning preset.",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=2.0 * math.pi,
        help="Span of clock time to sample (defaults to one arm cycle).",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=16,
        help="Number of samples.",
    )
    parser.add_argument(
        "--joint",
        action="append",
        choices=[joint.value for joint in JointId],
        help="Joint to include (repeatable, defaults to all animated joints).",
    )
    args = parser.parse_args(argv)

    if args.frames <= 0:
        parser.error("--frames must be positive")

    joints = [JointId(value) for value in args.joint] if args.joint else list(JointId)
    times = sample_times(args.duration, args.frames)

    for row in format_rows(args.preset, times, joints):
        print(row)

    params = get_preset(args.preset)
    if params.root_motion:
        motion = RootMotion(params)
        for t in times:
            offset = motion.advance(float(t))
        print(f"Root after {args.frames} frames: forward={offset.forward:.3f} "
              f"vertical={offset.vertical:+.3f} lateral={offset.lateral:+.3f}")

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI-compatible entry point."""

    return cli(argv)


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    raise SystemExit(cli())
