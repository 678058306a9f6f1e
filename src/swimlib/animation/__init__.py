"""
Animation System

Procedural skeletal animation for the swimmer: bone resolution, the stroke
animator and root motion.
"""

from .joints import JointId, Axis
from .skeleton import Joint, Skeleton
from .skin import SkinnedMesh
from .bone_registry import BoneRegistry, canonical_bone_key
from .bone_resolver import BoneResolver
from .stroke_parameters import StrokeParameters, PRESETS, FREESTYLE, DRIFT, get_preset
from .stroke_animator import StrokeAnimator, StrokePose, JointRotation
from .root_motion import RootMotion, RootOffset

__all__ = [
    'JointId',
    'Axis',
    'Joint',
    'Skeleton',
    'SkinnedMesh',
    'BoneRegistry',
    'canonical_bone_key',
    'BoneResolver',
    'StrokeParameters',
    'PRESETS',
    'FREESTYLE',
    'DRIFT',
    'get_preset',
    'StrokeAnimator',
    'StrokePose',
    'JointRotation',
    'RootMotion',
    'RootOffset',
]
