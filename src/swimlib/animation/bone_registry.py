"""
Bone Registry

Maps animated joints to the bone handles that drive them.
"""

import logging
import re
from typing import Dict, Iterator, Tuple

from .joints import JointId

logger = logging.getLogger(__name__)

# Mixamo rigs prefix every bone ("mixamorig:LeftArm", "mixamorig1:Spine", "mixamorig_Head")
_RIG_PREFIX = re.compile(r"^mixamorig\d*[:_]?")


def canonical_bone_key(name: str) -> str:
    """
    Canonical lookup key for a bone name: lowercase, vendor prefix removed.

    Args:
        name: Bone name as authored in the asset

    Returns:
        Key comparable against JointId values
    """
    return _RIG_PREFIX.sub("", name.strip().lower(), count=1)


class BoneRegistry:
    """
    Append-only JointId -> bone handle mapping.

    Filled once by the bone resolver, then published. Readers only ever see
    lookups; a joint absent from the registry simply has no handle.
    """

    def __init__(self):
        self._bones: Dict[JointId, object] = {}
        self._published = False

    @property
    def is_ready(self) -> bool:
        """True once the resolver has published its result."""
        return self._published

    def register(self, joint: JointId, handle) -> bool:
        """
        Register a handle for a joint.

        The first handle wins; later registrations for the same joint are ignored.

        Returns:
            True if the handle was stored
        """
        if self._published:
            raise RuntimeError(f"BoneRegistry already published, cannot register {joint.value}")

        if joint in self._bones:
            if self._bones[joint] is not handle:
                logger.debug("[Registry] Keeping first bone for %s", joint.value)
            return False

        self._bones[joint] = handle
        return True

    def publish(self):
        """Mark the registry complete. Publishing twice is an error."""
        if self._published:
            raise RuntimeError("BoneRegistry already published")
        self._published = True

    def get(self, joint: JointId):
        """Handle for a joint, or None if unresolved."""
        return self._bones.get(joint)

    def keys(self):
        return self._bones.keys()

    def items(self) -> Iterator[Tuple[JointId, object]]:
        return iter(self._bones.items())

    def availability(self) -> Dict[JointId, bool]:
        """Resolution status of every animated joint, in JointId order."""
        return {joint: joint in self._bones for joint in JointId}

    def missing(self):
        """Joints that have no handle."""
        return [joint for joint in JointId if joint not in self._bones]

    def __contains__(self, joint: JointId) -> bool:
        return joint in self._bones

    def __len__(self) -> int:
        return len(self._bones)

    def __repr__(self):
        return f"BoneRegistry(bones={len(self._bones)}, ready={self._published})"
