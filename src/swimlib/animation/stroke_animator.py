"""
Stroke Animator

Procedural freestyle stroke: maps clock time to joint rotations.

Every angle is a closed-form function of time, so evaluating the same time
twice yields the same pose. The recurring ``max(0, x)`` clamp keeps a motion
active during only half of its cycle (elbow bend during the pull, knee bend on
the up-kick).
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .bone_registry import BoneRegistry
from .joints import Axis, JointId
from .stroke_parameters import StrokeParameters, FREESTYLE

# Progressive twist up the spine
SPINE_ROLL_WEIGHTS = (
    (JointId.SPINE, 0.3),
    (JointId.SPINE1, 0.5),
    (JointId.SPINE2, 0.7),
)


def half_cycle(value: float) -> float:
    """Clamp a wave to its positive half."""
    return max(0.0, value)


def stroke_phases(t: float, frequency: float) -> Tuple[float, float]:
    """Left and right arm phases; the right arm is exactly pi behind."""
    left = t * frequency
    return left, left + math.pi


def body_roll(t: float, params: StrokeParameters) -> float:
    """Side-to-side torso roll angle."""
    frequency = params.arm_stroke_frequency * params.body_roll_frequency_ratio
    return math.sin(t * frequency) * params.body_roll_amplitude


def leg_swing(t: float, params: StrokeParameters) -> float:
    """Hip swing of the left leg; the right leg mirrors it."""
    return math.sin(t * params.kick_frequency) * params.leg_amplitude


def elbow_bend(cycle: float, params: StrokeParameters) -> float:
    """Elbow flexion, nonzero only while the arm pulls (cycle < 0)."""
    return half_cycle(-cycle) * params.elbow_bend_max


@dataclass(frozen=True)
class JointRotation:
    """One axis assignment for one joint."""
    joint: JointId
    axis: Axis
    angle: float


class StrokePose:
    """
    Ordered rotation assignments for a single frame.

    Order matters: assignments are applied in the sequence they were computed.
    """

    def __init__(self, assignments: List[JointRotation]):
        self.assignments = assignments
        self._lookup: Dict[Tuple[JointId, Axis], float] = {
            (a.joint, a.axis): a.angle for a in assignments
        }

    def angle(self, joint: JointId, axis: Axis) -> Optional[float]:
        """Assigned angle, or None if the pose leaves that axis alone."""
        return self._lookup.get((joint, axis))

    def joints(self) -> List[JointId]:
        """Joints touched by this pose, in first-assignment order."""
        seen: List[JointId] = []
        for assignment in self.assignments:
            if assignment.joint not in seen:
                seen.append(assignment.joint)
        return seen

    def __iter__(self) -> Iterator[JointRotation]:
        return iter(self.assignments)

    def __len__(self) -> int:
        return len(self.assignments)

    def __eq__(self, other) -> bool:
        if not isinstance(other, StrokePose):
            return NotImplemented
        return self.assignments == other.assignments

    def __repr__(self):
        return f"StrokePose(assignments={len(self.assignments)})"


class StrokeAnimator:
    """
    Drives joint rotations for the freestyle stroke.

    The animator holds no per-frame state: ``compute_pose`` is pure and
    ``apply_pose`` writes into whatever bones the registry currently holds,
    skipping joints that are not resolved.
    """

    def __init__(self, params: StrokeParameters = FREESTYLE):
        """
        Initialize animator.

        Args:
            params: Stroke tuning preset
        """
        self.params = params

    def compute_pose(self, t: float) -> StrokePose:
        """
        Evaluate the stroke at clock time t.

        Args:
            t: Clock-scaled elapsed time

        Returns:
            Pose with every joint assignment for this time
        """
        p = self.params
        out: List[JointRotation] = []

        def put(joint: JointId, axis: Axis, angle: float):
            out.append(JointRotation(joint, axis, angle))

        # ── Arms: opposite phases ──────────────────────────────────────────
        left_phase, right_phase = stroke_phases(t, p.arm_stroke_frequency)

        # cycle drives forward/backward stroke, vertical drives recovery lift
        left_cycle = math.sin(left_phase)
        left_vertical = math.cos(left_phase)
        right_cycle = math.sin(right_phase)
        right_vertical = math.cos(right_phase)

        put(JointId.LEFT_ARM, p.arm_stroke_axis, left_cycle * p.arm_swing_amplitude)
        put(JointId.RIGHT_ARM, p.arm_stroke_axis, right_cycle * p.arm_swing_amplitude)
        put(JointId.LEFT_ARM, p.arm_lift_axis, left_vertical * p.arm_lift_amplitude)
        put(JointId.RIGHT_ARM, p.arm_lift_axis, -right_vertical * p.arm_lift_amplitude)

        if p.shoulder_refinement:
            put(JointId.LEFT_SHOULDER, Axis.Y, left_cycle * p.shoulder_swing_amplitude)
            put(JointId.RIGHT_SHOULDER, Axis.Y, right_cycle * p.shoulder_swing_amplitude)
            put(JointId.LEFT_SHOULDER, Axis.Z, half_cycle(left_vertical) * p.shoulder_lift_amplitude)
            put(JointId.RIGHT_SHOULDER, Axis.Z, half_cycle(-right_vertical) * p.shoulder_lift_amplitude)

        put(JointId.LEFT_FOREARM, p.elbow_axis, elbow_bend(left_cycle, p))
        put(JointId.RIGHT_FOREARM, p.elbow_axis, elbow_bend(right_cycle, p))

        if p.hand_refinement:
            put(JointId.LEFT_HAND, Axis.Z, half_cycle(-left_cycle) * p.hand_pitch_max)
            put(JointId.RIGHT_HAND, Axis.Z, half_cycle(-right_cycle) * p.hand_pitch_max)

        # ── Body roll ──────────────────────────────────────────────────────
        roll = body_roll(t, p)
        for joint, weight in SPINE_ROLL_WEIGHTS:
            put(joint, p.body_roll_axis, roll * weight)

        if p.head_tracking:
            put(JointId.HEAD, Axis.X, p.head_pitch)
            put(JointId.HEAD, Axis.Y, -roll * p.head_counter_roll)

        # ── Legs: flutter kick ─────────────────────────────────────────────
        kick = math.sin(t * p.kick_frequency)
        swing = leg_swing(t, p)

        put(JointId.LEFT_UP_LEG, Axis.X, swing - p.hip_offset)
        put(JointId.RIGHT_UP_LEG, Axis.X, -swing - p.hip_offset)

        # knees bend on the up-stroke
        put(JointId.LEFT_LEG, Axis.X, half_cycle(-kick) * p.knee_bend)
        put(JointId.RIGHT_LEG, Axis.X, half_cycle(kick) * p.knee_bend)

        # feet point forward when legs are up
        put(JointId.LEFT_FOOT, Axis.X, half_cycle(-kick) * p.foot_pitch)
        put(JointId.RIGHT_FOOT, Axis.X, half_cycle(kick) * p.foot_pitch)

        return StrokePose(out)

    @staticmethod
    def apply_pose(pose: StrokePose, registry: BoneRegistry) -> int:
        """
        Write a pose into resolved bones.

        Args:
            pose: Pose to apply
            registry: Joint handles; missing joints are skipped

        Returns:
            Number of axis writes performed
        """
        writes = 0
        for assignment in pose:
            bone = registry.get(assignment.joint)
            if bone is None:
                continue
            bone.rotation[int(assignment.axis)] = assignment.angle
            writes += 1
        return writes

    def update(self, t: float, registry: BoneRegistry) -> int:
        """Compute and apply the pose for clock time t."""
        return self.apply_pose(self.compute_pose(t), registry)

    def __repr__(self):
        return f"StrokeAnimator(preset='{self.params.name}')"
