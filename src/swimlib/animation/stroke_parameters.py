"""
Stroke Parameters

Named constants that shape the freestyle stroke, bundled per preset.
"""

import math
from dataclasses import dataclass
from typing import Dict

from .joints import Axis


@dataclass(frozen=True)
class StrokeParameters:
    """Fixed tuning for one swimming session. Angles in radians."""

    name: str

    # Clock scale applied to elapsed seconds
    time_scale: float = 1.5

    # Arms
    arm_stroke_frequency: float = 1.0
    arm_swing_amplitude: float = math.pi * 0.6   # forward/backward stroke
    arm_lift_amplitude: float = math.pi * 0.4    # up for recovery
    elbow_bend_max: float = math.pi * 0.6
    arm_stroke_axis: Axis = Axis.Y
    arm_lift_axis: Axis = Axis.Z
    elbow_axis: Axis = Axis.Y

    # Shoulder refinement (lift only during recovery)
    shoulder_refinement: bool = True
    shoulder_swing_amplitude: float = 0.3
    shoulder_lift_amplitude: float = 0.2

    # Hand refinement (angle the hand during the pull)
    hand_refinement: bool = True
    hand_pitch_max: float = math.pi * 0.2

    # Body roll, as a fraction of the arm stroke frequency
    body_roll_frequency_ratio: float = 0.5
    body_roll_amplitude: float = math.pi * 0.08
    body_roll_axis: Axis = Axis.Y

    # Head (gaze down, counter the body roll)
    head_tracking: bool = False
    head_pitch: float = 0.0
    head_counter_roll: float = 0.0

    # Legs (flutter kick)
    kick_frequency: float = 2.0
    leg_amplitude: float = math.pi * 0.20
    hip_offset: float = math.pi / 10
    knee_bend: float = -math.pi * 0.25
    foot_pitch: float = math.pi / 4

    # Root motion (bob and drift)
    root_motion: bool = False
    bob_amplitude: float = 0.0
    bob_speed: float = 1.0
    lateral_drift_amplitude: float = 0.0
    lateral_frequency_ratio: float = 1.0
    swim_speed: float = 0.0


# Canonical tuning: shoulder/hand refinement, half-speed body roll, no root motion
FREESTYLE = StrokeParameters(name="freestyle")

# Alternate tuning: equal-speed roll, head tracking, bob and forward drift
DRIFT = StrokeParameters(
    name="drift",
    time_scale=1.0,
    arm_swing_amplitude=math.pi * 0.5,
    arm_lift_amplitude=math.pi * 0.3,
    elbow_bend_max=math.pi * 0.5,
    arm_stroke_axis=Axis.X,
    arm_lift_axis=Axis.Z,
    elbow_axis=Axis.Z,
    shoulder_refinement=False,
    hand_refinement=False,
    body_roll_frequency_ratio=1.0,
    body_roll_axis=Axis.Z,
    head_tracking=True,
    head_pitch=-math.pi * 0.1,
    head_counter_roll=0.5,
    leg_amplitude=math.pi * 0.15,
    knee_bend=-math.pi * 0.2,
    root_motion=True,
    bob_amplitude=0.05,
    bob_speed=2.0,
    lateral_drift_amplitude=0.03,
    lateral_frequency_ratio=0.5,
    swim_speed=0.5,
)

PRESETS: Dict[str, StrokeParameters] = {
    FREESTYLE.name: FREESTYLE,
    DRIFT.name: DRIFT,
}


def get_preset(name: str) -> StrokeParameters:
    """
    Look up a preset by name.

    Raises:
        ValueError: If no preset has that name
    """
    try:
        return PRESETS[name.lower()]
    except KeyError:
        valid = ", ".join(sorted(PRESETS))
        raise ValueError(f"Unknown stroke preset '{name}' (expected one of: {valid})") from None
