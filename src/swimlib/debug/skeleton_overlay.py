"""
Skeleton Overlay

Stick-figure view of a skinned mesh's bones, used while tuning the stroke.
Visual only: the overlay reads world transforms and never touches the pose.
"""

from typing import TYPE_CHECKING

import numpy as np

from ..config.settings import SKELETON_OVERLAY_OPACITY, SKELETON_OVERLAY_COLOR

if TYPE_CHECKING:
    from ..animation.skin import SkinnedMesh


class SkeletonOverlay:
    """
    Line-segment overlay bound to one skinned mesh.

    Hidden by default; drawn translucent and without depth testing so it shows
    through the body.
    """

    def __init__(self, mesh: "SkinnedMesh"):
        """
        Initialize overlay.

        Args:
            mesh: Skinned mesh whose bones are drawn
        """
        self.mesh = mesh
        self.visible = False
        self.opacity = SKELETON_OVERLAY_OPACITY
        self.transparent = True
        self.depth_test = False
        self.color = SKELETON_OVERLAY_COLOR

    def segments(self) -> np.ndarray:
        """
        Bone segments from parent to child in world space.

        Only bones whose parent is also part of this mesh's skin are drawn.

        Returns:
            Array of shape (num_segments, 2, 3), float32
        """
        bone_ids = {id(bone) for bone in self.mesh.bones}
        lines = []
        for bone in self.mesh.bones:
            parent = bone.parent
            if parent is None or id(parent) not in bone_ids:
                continue
            lines.append((parent.world_position, bone.world_position))

        if not lines:
            return np.zeros((0, 2, 3), dtype='f4')
        return np.array(lines, dtype='f4')

    def vertices(self) -> np.ndarray:
        """Flat vertex buffer for GL line rendering (x, y, z per vertex)."""
        return self.segments().reshape(-1)

    def __repr__(self):
        return f"SkeletonOverlay(mesh='{self.mesh.name}', visible={self.visible})"
