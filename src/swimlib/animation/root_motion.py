"""
Root Motion

Buoyancy bob and forward drift of the swimmer root.
"""

import math
from dataclasses import dataclass

from pyrr import Vector3

from .stroke_parameters import StrokeParameters
from ..config.settings import FIXED_FRAME_DELTA


@dataclass
class RootOffset:
    """Displacement of the root from its rest position."""
    lateral: float = 0.0
    vertical: float = 0.0
    forward: float = 0.0

    def as_vector(self) -> Vector3:
        """World-space offset: lateral on X, vertical on Y, forward on Z."""
        return Vector3([self.lateral, self.vertical, self.forward])


class RootMotion:
    """
    Moves the swimmer root.

    Bob and lateral drift are functions of clock time. Forward distance grows
    by a fixed step once per frame, so the swim speed does not depend on the
    render frame rate. It is derived from the frame count rather than summed,
    which keeps it exactly speed * frames * step.
    """

    def __init__(self, params: StrokeParameters, fixed_delta: float = FIXED_FRAME_DELTA,
                 start_forward: float = 0.0):
        """
        Initialize root motion.

        Args:
            params: Stroke tuning (bob, drift and swim speed)
            fixed_delta: Seconds of forward travel per frame
            start_forward: Distance already covered (carried over a preset switch)
        """
        self.params = params
        self.fixed_delta = fixed_delta
        self.start_forward = start_forward
        self.frames = 0

    @property
    def forward(self) -> float:
        """Accumulated forward distance."""
        return self.start_forward + self.params.swim_speed * self.frames * self.fixed_delta

    @property
    def enabled(self) -> bool:
        return self.params.root_motion

    def offset_at(self, t: float) -> RootOffset:
        """Current offset for clock time t, using the accumulated forward distance."""
        p = self.params
        if not p.root_motion:
            return RootOffset()

        vertical = math.sin(t * p.bob_speed) * p.bob_amplitude
        lateral = math.sin(t * p.bob_speed * p.lateral_frequency_ratio) * p.lateral_drift_amplitude
        return RootOffset(lateral=lateral, vertical=vertical, forward=self.forward)

    def advance(self, t: float) -> RootOffset:
        """
        Step one frame and return the new offset.

        Args:
            t: Clock-scaled elapsed time

        Returns:
            Offset after this frame's forward step
        """
        if self.params.root_motion:
            self.frames += 1
        return self.offset_at(t)

    def apply(self, root, base_position, t: float) -> RootOffset:
        """
        Advance one frame and move a root node.

        Args:
            root: Node with a ``position`` vector
            base_position: Rest position of the root
            t: Clock-scaled elapsed time
        """
        offset = self.advance(t)
        root.position = Vector3(base_position) + offset.as_vector()
        return offset

    def reset(self):
        """Return to the start line."""
        self.start_forward = 0.0
        self.frames = 0

    def __repr__(self):
        return f"RootMotion(enabled={self.enabled}, forward={self.forward:.3f})"
