"""Tests for bone name canonicalization and the joint registry"""

import pytest

from src.swimlib.animation import BoneRegistry, Joint, JointId
from src.swimlib.animation.bone_registry import canonical_bone_key


@pytest.mark.parametrize("name,expected", [
    ("mixamorig:LeftArm", "leftarm"),
    ("Spine", "spine"),
    ("mixamorig1:Spine2", "spine2"),
    ("mixamorig_Head", "head"),
    ("  mixamorig:RightForeArm ", "rightforearm"),
    ("LeftUpLeg", "leftupleg"),
])
def test_canonical_bone_key(name, expected):
    assert canonical_bone_key(name) == expected


def test_canonical_key_only_strips_leading_prefix():
    """A prefix in the middle of the name is not touched"""
    assert canonical_bone_key("Left_mixamorig:Arm") == "left_mixamorig:arm"


def test_canonical_keys_match_joint_ids():
    assert JointId.from_key(canonical_bone_key("mixamorig:LeftForeArm")) is JointId.LEFT_FOREARM
    assert JointId.from_key(canonical_bone_key("mixamorig:Spine1")) is JointId.SPINE1
    assert JointId.from_key(canonical_bone_key("mixamorig:LeftToeBase")) is None


def test_first_registration_wins():
    registry = BoneRegistry()
    first = Joint("mixamorig:LeftArm", 0)
    second = Joint("LeftArm", 1)

    assert registry.register(JointId.LEFT_ARM, first)
    assert not registry.register(JointId.LEFT_ARM, second)
    assert registry.get(JointId.LEFT_ARM) is first
    assert len(registry) == 1


def test_publish_once():
    registry = BoneRegistry()
    assert not registry.is_ready

    registry.publish()
    assert registry.is_ready

    with pytest.raises(RuntimeError):
        registry.publish()


def test_register_after_publish_raises():
    registry = BoneRegistry()
    registry.publish()

    with pytest.raises(RuntimeError):
        registry.register(JointId.HEAD, Joint("Head", 0))


def test_availability_covers_every_joint():
    registry = BoneRegistry()
    registry.register(JointId.SPINE, Joint("Spine", 0))
    registry.publish()

    availability = registry.availability()
    assert list(availability) == list(JointId)
    assert availability[JointId.SPINE]
    assert not availability[JointId.HEAD]

    assert JointId.SPINE in registry
    assert JointId.SPINE not in registry.missing()
    assert len(registry.missing()) == len(JointId) - 1


def test_missing_joint_lookup_returns_none():
    assert BoneRegistry().get(JointId.RIGHT_FOOT) is None
