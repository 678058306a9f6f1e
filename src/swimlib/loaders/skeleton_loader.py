"""
Skeleton Loader

Loads the bone hierarchy and skins of a GLTF/GLB character.

Only skeletal data is extracted: joints with their bind pose, the ordered
bone list of each skin, and the mesh nodes those skins deform. Geometry and
materials are ignored.
"""

import logging
import struct
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np
import pygltflib
from pyrr import Matrix44, Vector3

from ..animation.skeleton import (
    Joint, Skeleton, euler_to_matrix, quaternion_to_euler, rotation_matrix_to_euler,
)
from ..animation.skin import SkinnedMesh

logger = logging.getLogger(__name__)

_MALFORMED_ASSET_ERRORS = (
    OSError, ValueError, KeyError, IndexError, TypeError, AttributeError, struct.error,
)


class AssetLoadError(RuntimeError):
    """The asset file is missing or cannot be parsed."""


@dataclass
class SkeletalAsset:
    """Skeletal content of a loaded character."""
    name: str
    skeleton: Optional[Skeleton] = None
    skinned_meshes: List[SkinnedMesh] = field(default_factory=list)

    @property
    def has_skin(self) -> bool:
        return bool(self.skinned_meshes)


def node_pose(node) -> Tuple[Vector3, Vector3, Vector3]:
    """
    Local (rotation, position, scale) of a GLTF node.

    Args:
        node: GLTF node with either a matrix or TRS properties

    Returns:
        Euler XYZ rotation, translation and scale
    """
    if node.matrix is not None and len(node.matrix) == 16:
        # Column-major in GLTF; reshape gives the row-major (transposed) form
        columns = np.array(node.matrix, dtype=float).reshape(4, 4)
        basis = columns[:3, :3].T
        scale = np.linalg.norm(basis, axis=0)
        scale[scale == 0.0] = 1.0
        rotation = rotation_matrix_to_euler(basis / scale)
        return rotation, Vector3(columns[3, :3]), Vector3(scale)

    rotation = Vector3([0.0, 0.0, 0.0])
    if node.rotation is not None:
        rotation = quaternion_to_euler(node.rotation)  # (x, y, z, w)

    position = Vector3(node.translation) if node.translation is not None else Vector3([0.0, 0.0, 0.0])
    scale = Vector3(node.scale) if node.scale is not None else Vector3([1.0, 1.0, 1.0])
    return rotation, position, scale


def node_transform(node) -> Matrix44:
    """Local transform of a GLTF node, composed scale @ rotation @ translation."""
    rotation, position, scale = node_pose(node)
    matrix = Matrix44.from_scale(scale)
    matrix = matrix @ euler_to_matrix(rotation)
    matrix = matrix @ Matrix44.from_translation(position)
    return matrix


class SkeletonLoader:
    """
    Loads skeletal assets from GLTF/GLB files.
    """

    def load(self, filepath) -> SkeletalAsset:
        """
        Load a GLTF or GLB character.

        Args:
            filepath: Path to .gltf or .glb file

        Returns:
            SkeletalAsset (possibly without skinned meshes)

        Raises:
            AssetLoadError: If the file is missing, unreadable or structurally broken
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise AssetLoadError(f"Model not found: {filepath}")

        logger.info("[Loader] Loading model: %s", filepath)
        try:
            gltf = pygltflib.GLTF2().load(str(filepath))
            if gltf is None:
                raise AssetLoadError(f"Unsupported model format: {filepath}")
            return self.build_asset(gltf, filepath.stem)
        except _MALFORMED_ASSET_ERRORS as exc:
            # Truncated binaries and dangling node indices surface here
            raise AssetLoadError(f"Malformed model {filepath}: {exc}") from exc

    def load_async(self, filepath, executor: Executor) -> Future:
        """Schedule ``load`` on an executor; the future yields a SkeletalAsset."""
        return executor.submit(self.load, filepath)

    def build_asset(self, gltf: pygltflib.GLTF2, name: str) -> SkeletalAsset:
        """
        Build the skeletal asset from parsed GLTF data.

        Args:
            gltf: GLTF data
            name: Asset name

        Returns:
            SkeletalAsset with skeleton and skinned meshes
        """
        asset = SkeletalAsset(name=name)
        if not gltf.skins:
            logger.info("[Loader] %s has no skins", name)
            return asset

        asset.skeleton, joint_map = self._load_skeleton(gltf, name)
        asset.skinned_meshes = self._load_skinned_meshes(gltf, asset.skeleton, joint_map)

        logger.info(
            "[Loader] %s: %d joints, %d skinned meshes",
            name, len(asset.skeleton.joints), len(asset.skinned_meshes),
        )
        return asset

    def _compute_node_world_transforms(self, gltf: pygltflib.GLTF2) -> Dict[int, Matrix44]:
        """
        Compute world transforms for all nodes, including non-joint ancestors.

        Args:
            gltf: GLTF data

        Returns:
            Dictionary mapping node index to world transform
        """
        node_world: Dict[int, Matrix44] = {}

        def traverse(node_idx: int, parent_transform: Matrix44):
            node = gltf.nodes[node_idx]
            world_transform = node_transform(node) @ parent_transform
            node_world[node_idx] = world_transform
            for child_idx in node.children or []:
                traverse(child_idx, world_transform)

        if gltf.scenes:
            if gltf.scene is not None and gltf.scene < len(gltf.scenes):
                scene_indices = [gltf.scene]
            else:
                scene_indices = list(range(len(gltf.scenes)))

            for scene_idx in scene_indices:
                for node_idx in gltf.scenes[scene_idx].nodes or []:
                    traverse(node_idx, Matrix44.identity())

        # Nodes outside any scene still get a transform
        for node_idx in range(len(gltf.nodes)):
            if node_idx not in node_world:
                node_world[node_idx] = node_transform(gltf.nodes[node_idx])

        return node_world

    def _load_skeleton(self, gltf: pygltflib.GLTF2, name: str) -> Tuple[Skeleton, Dict[int, Joint]]:
        """
        Load skeleton from GLTF skins and nodes.

        Args:
            gltf: GLTF data
            name: Skeleton name

        Returns:
            Skeleton and the node index -> Joint map
        """
        skeleton = Skeleton(name=name)

        parent_map: Dict[int, int] = {}
        for idx, node in enumerate(gltf.nodes):
            for child_idx in node.children or []:
                parent_map[child_idx] = idx

        # GLTF stores joints as indices into the nodes array
        joint_indices = set()
        for skin in gltf.skins:
            joint_indices.update(skin.joints)

        joint_map: Dict[int, Joint] = {}
        for joint_idx in sorted(joint_indices):
            node = gltf.nodes[joint_idx]
            joint = Joint(
                name=node.name if node.name else f"Joint_{joint_idx}",
                index=joint_idx,
            )
            rotation, position, scale = node_pose(node)
            joint.scale = scale
            joint.set_bind_pose(rotation, position)

            joint_map[joint_idx] = joint
            skeleton.add_joint(joint)

        for joint_idx, joint in joint_map.items():
            for child_idx in gltf.nodes[joint_idx].children or []:
                if child_idx in joint_map:
                    joint.add_child(joint_map[child_idx])

        skeleton.rebuild_roots()

        # Root joints inherit the transform of their non-joint ancestors
        node_world = self._compute_node_world_transforms(gltf)
        for joint in skeleton.root_joints:
            parent_idx = parent_map.get(joint.index)
            if parent_idx is not None and parent_idx not in joint_map:
                joint.root_parent_transform = node_world.get(parent_idx, Matrix44.identity())

        skeleton.update_world_transforms()
        return skeleton, joint_map

    def _load_skinned_meshes(self, gltf: pygltflib.GLTF2, skeleton: Skeleton,
                             joint_map: Dict[int, Joint]) -> List[SkinnedMesh]:
        """
        Create a SkinnedMesh for every mesh node that references a skin.

        Args:
            gltf: GLTF data
            skeleton: Loaded skeleton
            joint_map: Node index -> Joint

        Returns:
            Skinned meshes in node order
        """
        meshes: List[SkinnedMesh] = []

        for node_idx, node in enumerate(gltf.nodes):
            if node.mesh is None or node.skin is None:
                continue
            if node.skin >= len(gltf.skins):
                logger.warning("[Loader] Node %d references missing skin %d", node_idx, node.skin)
                continue

            gltf_skin = gltf.skins[node.skin]

            mesh = SkinnedMesh(
                name=node.name if node.name else f"Mesh_{node_idx}",
                skeleton=skeleton,
                node_index=node_idx,
            )
            for joint_idx in gltf_skin.joints:
                mesh.add_bone(joint_map[joint_idx])
            meshes.append(mesh)

        return meshes

