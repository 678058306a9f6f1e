"""Tests for the skeleton overlay"""

import numpy as np

from src.swimlib.animation import Joint, Skeleton, SkinnedMesh
from src.swimlib.debug import SkeletonOverlay


def test_segments_link_parent_to_child(make_asset):
    asset = make_asset(["mixamorig:Hips", "mixamorig:Spine", "mixamorig:Spine1"])
    asset.skeleton.update_world_transforms()
    overlay = SkeletonOverlay(asset.skinned_meshes[0])

    segments = overlay.segments()

    assert segments.shape == (2, 2, 3)
    assert segments.dtype == np.float32
    assert np.allclose(segments[0], [[0.0, 0.0, 0.0], [0.0, 0.1, 0.0]])
    assert np.allclose(segments[1], [[0.0, 0.1, 0.0], [0.0, 0.2, 0.0]])
    assert overlay.vertices().shape == (12,)


def test_bones_outside_the_skin_are_not_drawn():
    """Parent not bound to this mesh: no segment"""
    skeleton = Skeleton()
    hips = Joint("Hips", 0)
    spine = Joint("Spine", 1)
    hips.add_child(spine)
    skeleton.add_joint(hips)
    skeleton.add_joint(spine)

    mesh = SkinnedMesh("Body", skeleton)
    mesh.add_bone(spine)

    assert SkeletonOverlay(mesh).segments().shape == (0, 2, 3)


def test_overlay_does_not_touch_pose(make_asset):
    asset = make_asset(["Spine", "Spine1"])
    asset.skeleton.update_world_transforms()
    before = [np.array(j.rotation) for j in asset.skeleton.joints]

    SkeletonOverlay(asset.skinned_meshes[0]).segments()

    for joint, rotation in zip(asset.skeleton.joints, before):
        assert np.array_equal(np.asarray(joint.rotation), rotation)
