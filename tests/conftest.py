"""Shared fixtures: in-memory rigged characters."""

import pytest

from src.swimlib.animation import Joint, Skeleton, SkinnedMesh
from src.swimlib.loaders import SkeletalAsset


MIXAMO_BONES = [
    "mixamorig:Hips",
    "mixamorig:Spine",
    "mixamorig:Spine1",
    "mixamorig:Spine2",
    "mixamorig:Neck",
    "mixamorig:Head",
    "mixamorig:LeftShoulder",
    "mixamorig:LeftArm",
    "mixamorig:LeftForeArm",
    "mixamorig:LeftHand",
    "mixamorig:RightShoulder",
    "mixamorig:RightArm",
    "mixamorig:RightForeArm",
    "mixamorig:RightHand",
    "mixamorig:LeftUpLeg",
    "mixamorig:LeftLeg",
    "mixamorig:LeftFoot",
    "mixamorig:LeftToeBase",
    "mixamorig:RightUpLeg",
    "mixamorig:RightLeg",
    "mixamorig:RightFoot",
    "mixamorig:RightToeBase",
]


def build_asset(bone_names, name="swimmer", mesh_names=("Body",)):
    """Chain the bones parent-to-child and bind them to each named mesh."""
    skeleton = Skeleton(name=name)
    previous = None
    for index, bone_name in enumerate(bone_names):
        joint = Joint(bone_name, index)
        joint.set_bind_pose((0.0, 0.0, 0.0), (0.0, 0.1 if previous else 0.0, 0.0))
        if previous is not None:
            previous.add_child(joint)
        skeleton.add_joint(joint)
        previous = joint
    skeleton.rebuild_roots()

    meshes = []
    for node_index, mesh_name in enumerate(mesh_names):
        mesh = SkinnedMesh(mesh_name, skeleton, node_index=node_index)
        for joint in skeleton.joints:
            mesh.add_bone(joint)
        meshes.append(mesh)

    return SkeletalAsset(name=name, skeleton=skeleton, skinned_meshes=meshes)


@pytest.fixture
def make_asset():
    """Factory for in-memory skeletal assets."""
    return build_asset


@pytest.fixture
def mixamo_asset():
    """Full Mixamo-style rig with one skinned mesh."""
    return build_asset(MIXAMO_BONES)
