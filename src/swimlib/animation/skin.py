"""
Skin

A skinned mesh: the ordered bone list of a GLTF skin bound to a mesh node.
"""

from typing import List, Optional

from .skeleton import Skeleton, Joint


class SkinnedMesh:
    """
    Binds a skeleton's bones to a mesh node.

    Bones keep the skin's order; the bone resolver and skeleton overlay read
    them, the mesh geometry itself is not loaded.
    """

    def __init__(self, name: str, skeleton: Skeleton, node_index: Optional[int] = None):
        """
        Initialize skinned mesh.

        Args:
            name: Mesh node name
            skeleton: Skeleton owning the bones
            node_index: Index of the mesh node in the source asset
        """
        self.name = name
        self.skeleton = skeleton
        self.node_index = node_index
        self.bones: List[Joint] = []

    def add_bone(self, bone: Joint):
        self.bones.append(bone)

    @property
    def bone_names(self) -> List[str]:
        return [bone.name for bone in self.bones]

    def __repr__(self):
        return f"SkinnedMesh(name='{self.name}', bones={len(self.bones)})"
