"""
Bone Resolver

Turns a loaded skeletal asset into a populated BoneRegistry.
"""

import logging
from typing import List, TYPE_CHECKING

from .bone_registry import BoneRegistry, canonical_bone_key
from .joints import JointId
from ..debug.skeleton_overlay import SkeletonOverlay

if TYPE_CHECKING:
    from ..loaders.skeleton_loader import SkeletalAsset

logger = logging.getLogger(__name__)


class BoneResolver:
    """
    Resolves bone names of every skinned mesh into joint handles.

    For each skinned mesh a hidden SkeletonOverlay is created, then each bone
    name is canonicalized and matched against the JointId set. Unmatched bones
    are ignored.
    """

    def __init__(self, registry: BoneRegistry):
        """
        Initialize resolver.

        Args:
            registry: Registry to populate (must not be published yet)
        """
        self.registry = registry
        self.overlays: List[SkeletonOverlay] = []

    def resolve(self, asset: "SkeletalAsset") -> BoneRegistry:
        """
        Populate and publish the registry from an asset.

        Args:
            asset: Loaded skeletal asset

        Returns:
            The published registry

        Raises:
            RuntimeError: If the registry was already resolved
        """
        if self.registry.is_ready:
            raise RuntimeError("Bones already resolved for this registry")

        if not asset.skinned_meshes:
            # Registry stays empty; the animator turns into a no-op
            logger.warning("[Resolver] Asset '%s' has no skinned mesh, nothing to animate", asset.name)
            return self.registry

        for mesh in asset.skinned_meshes:
            self.overlays.append(SkeletonOverlay(mesh))

            for bone in mesh.bones:
                joint = JointId.from_key(canonical_bone_key(bone.name))
                if joint is None:
                    continue
                self.registry.register(joint, bone)

        self.registry.publish()
        self._log_availability()
        return self.registry

    def _log_availability(self):
        availability = self.registry.availability()
        found = sum(1 for present in availability.values() if present)
        logger.info("[Resolver] Resolved %d/%d joints", found, len(availability))
        for joint, present in availability.items():
            logger.info("[Resolver]   %-14s %s", joint.value, "yes" if present else "MISSING")
