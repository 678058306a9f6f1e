"""
Skeleton

Represents a hierarchical skeleton structure with joints/bones.

Joints store their local rotation as three independent Euler angles (radians)
so procedural animation can drive each axis separately. Angles are composed in
XYZ order when the local transform is built.
"""

import math
from typing import List, Optional, Dict, Sequence

import numpy as np
from pyrr import Matrix44, Vector3


def euler_to_matrix(rotation: Sequence[float]) -> Matrix44:
    """
    Build a row-major rotation matrix from XYZ Euler angles.

    The column-vector form is Rx @ Ry @ Rz (Z applied first); the result is
    transposed to match pyrr's row-vector convention.

    Args:
        rotation: (x, y, z) angles in radians

    Returns:
        4x4 rotation matrix
    """
    cx, sx = math.cos(rotation[0]), math.sin(rotation[0])
    cy, sy = math.cos(rotation[1]), math.sin(rotation[1])
    cz, sz = math.cos(rotation[2]), math.sin(rotation[2])

    rx = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    ry = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rz = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])

    matrix = Matrix44.identity()
    matrix[:3, :3] = (rx @ ry @ rz).T
    return matrix


def quaternion_to_euler(quat: Sequence[float]) -> Vector3:
    """
    Convert a GLTF quaternion (x, y, z, w) to XYZ Euler angles.

    Args:
        quat: Quaternion components in GLTF order

    Returns:
        Vector3 of (x, y, z) angles in radians
    """
    x, y, z, w = (float(c) for c in quat)

    rotation = np.array([
        [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - w * z), 2.0 * (x * z + w * y)],
        [2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - w * x)],
        [2.0 * (x * z - w * y), 2.0 * (y * z + w * x), 1.0 - 2.0 * (x * x + y * y)],
    ])
    return rotation_matrix_to_euler(rotation)


def rotation_matrix_to_euler(rotation: np.ndarray) -> Vector3:
    """
    Extract XYZ Euler angles from a column-vector 3x3 rotation matrix.

    Args:
        rotation: Pure rotation (no scale), column-vector convention

    Returns:
        Vector3 of (x, y, z) angles in radians
    """
    m11, m12, m13 = (float(v) for v in rotation[0])
    m22, m23 = float(rotation[1][1]), float(rotation[1][2])
    m32, m33 = float(rotation[2][1]), float(rotation[2][2])

    angle_y = math.asin(max(-1.0, min(1.0, m13)))
    if abs(m13) < 0.9999999:
        angle_x = math.atan2(-m23, m33)
        angle_z = math.atan2(-m12, m11)
    else:
        # Gimbal lock: fold Z into X
        angle_x = math.atan2(m32, m22)
        angle_z = 0.0

    return Vector3([angle_x, angle_y, angle_z])


class Joint:
    """
    Represents a single joint (bone) in a skeleton hierarchy.

    Each joint has:
    - Local rotation (Euler XYZ) and position relative to its parent
    - World transform (absolute, computed from hierarchy)
    - Parent-child relationships
    """

    def __init__(
        self,
        name: str,
        index: int,
        parent: Optional['Joint'] = None
    ):
        """
        Initialize a joint.

        Args:
            name: Joint name as authored in the asset
            index: Node index in the source asset (-1 for synthetic nodes)
            parent: Parent joint (None for root)
        """
        self.name = name
        self.index = index
        self.parent = parent
        self.children: List['Joint'] = []

        # Local pose (mutable; written by the animators)
        self.rotation = Vector3([0.0, 0.0, 0.0])
        self.position = Vector3([0.0, 0.0, 0.0])
        self.scale = Vector3([1.0, 1.0, 1.0])

        # Bind pose, restored by reset_pose()
        self.bind_rotation = Vector3([0.0, 0.0, 0.0])
        self.bind_position = Vector3([0.0, 0.0, 0.0])

        # Transform of non-joint ancestors (root joints only)
        self.root_parent_transform = Matrix44.identity()

        # World transform (absolute, computed from hierarchy)
        self.world_transform = Matrix44.identity()

    def set_bind_pose(self, rotation: Sequence[float], position: Sequence[float]):
        """Record the bind pose and move the joint into it."""
        self.bind_rotation = Vector3(np.array(rotation, dtype=float))
        self.bind_position = Vector3(np.array(position, dtype=float))
        self.reset_pose()

    def reset_pose(self):
        """Restore bind rotation and position."""
        self.rotation = self.bind_rotation.copy()
        self.position = self.bind_position.copy()

    def add_child(self, child: 'Joint'):
        """Add a child joint to this joint's hierarchy."""
        self.children.append(child)
        child.parent = self

    def get_local_transform(self) -> Matrix44:
        """Compose scale, Euler rotation and translation (row-major)."""
        matrix = Matrix44.from_scale(self.scale)
        matrix = matrix @ euler_to_matrix(self.rotation)
        matrix = matrix @ Matrix44.from_translation(self.position)
        return matrix

    @property
    def world_position(self) -> np.ndarray:
        """World-space position of the joint origin."""
        return np.array(self.world_transform)[3, :3]

    def __repr__(self):
        return f"Joint(name='{self.name}', index={self.index}, children={len(self.children)})"


class Skeleton:
    """
    Hierarchical skeleton structure.

    Manages the joint hierarchy and provides utilities for:
    - Finding joints by name
    - Updating world transforms from local poses
    - Restoring the bind pose
    """

    def __init__(self, name: str = "Skeleton"):
        """
        Initialize skeleton.

        Args:
            name: Skeleton name for debugging
        """
        self.name = name
        self.joints: List[Joint] = []
        self.root_joints: List[Joint] = []
        self.joint_by_name: Dict[str, Joint] = {}

    def add_joint(self, joint: Joint):
        """
        Add a joint to the skeleton.

        Args:
            joint: Joint to add
        """
        self.joints.append(joint)
        self.joint_by_name[joint.name] = joint

        if joint.parent is None:
            self.root_joints.append(joint)

    def rebuild_roots(self):
        """Recompute root joints after parent links change."""
        self.root_joints = [j for j in self.joints if j.parent is None]

    def get_joint(self, name: str) -> Optional[Joint]:
        """
        Find a joint by name.

        Args:
            name: Joint name

        Returns:
            Joint if found, None otherwise
        """
        return self.joint_by_name.get(name)

    def update_world_transforms(self, parent_world: Optional[Matrix44] = None):
        """
        Update all world transforms from local poses.

        Walks the hierarchy from the root joints and computes
        world_transform = local @ parent_world (row-major form).

        Args:
            parent_world: Transform of the node the skeleton hangs from
        """
        if parent_world is None:
            parent_world = Matrix44.identity()

        for root in self.root_joints:
            self._update_joint_recursive(root, root.root_parent_transform @ parent_world)

    def _update_joint_recursive(self, joint: Joint, parent_world: Matrix44):
        joint.world_transform = joint.get_local_transform() @ parent_world

        for child in joint.children:
            self._update_joint_recursive(child, joint.world_transform)

    def reset_pose(self):
        """Reset all joints to bind pose."""
        for joint in self.joints:
            joint.reset_pose()

    def __repr__(self):
        return f"Skeleton(name='{self.name}', joints={len(self.joints)}, roots={len(self.root_joints)})"
