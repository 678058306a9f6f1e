"""
Joints

Closed set of humanoid joints the stroke animator drives, plus rotation axes.
"""

from enum import Enum, IntEnum


class JointId(Enum):
    """Animated joints. Values are canonical (lowercase, unprefixed) bone names."""
    LEFT_ARM = "leftarm"
    RIGHT_ARM = "rightarm"
    LEFT_FOREARM = "leftforearm"
    RIGHT_FOREARM = "rightforearm"
    LEFT_HAND = "lefthand"
    RIGHT_HAND = "righthand"
    LEFT_SHOULDER = "leftshoulder"
    RIGHT_SHOULDER = "rightshoulder"
    LEFT_UP_LEG = "leftupleg"
    RIGHT_UP_LEG = "rightupleg"
    LEFT_LEG = "leftleg"
    RIGHT_LEG = "rightleg"
    LEFT_FOOT = "leftfoot"
    RIGHT_FOOT = "rightfoot"
    SPINE = "spine"
    SPINE1 = "spine1"
    SPINE2 = "spine2"
    HEAD = "head"

    @classmethod
    def from_key(cls, key: str):
        """Return the joint for a canonical key, or None if it is not animated."""
        return _JOINTS_BY_KEY.get(key)


class Axis(IntEnum):
    """Euler rotation axis; the value indexes a rotation triple."""
    X = 0
    Y = 1
    Z = 2


_JOINTS_BY_KEY = {joint.value: joint for joint in JointId}
