"""
SwimLib - Procedural Swimmer Animation

Drives a humanoid skeleton through a freestyle swimming stroke with
closed-form periodic functions of time.
"""

# Configuration
from .config.settings import *

# Animation
from .animation import (
    JointId,
    Axis,
    Joint,
    Skeleton,
    SkinnedMesh,
    BoneRegistry,
    BoneResolver,
    StrokeParameters,
    StrokeAnimator,
    StrokePose,
    RootMotion,
    RootOffset,
    PRESETS,
    get_preset,
)

# Core
from .core.camera import OrbitCamera
from .core.clock import AnimationClock
from .core.swim_session import SwimSession, LoadState

# Loaders
from .loaders import SkeletonLoader, SkeletalAsset, AssetLoadError

# Debug
from .debug import SkeletonOverlay

__version__ = "0.1.0"
__all__ = [
    # Config (exported via *)
    # Animation
    "JointId",
    "Axis",
    "Joint",
    "Skeleton",
    "SkinnedMesh",
    "BoneRegistry",
    "BoneResolver",
    "StrokeParameters",
    "StrokeAnimator",
    "StrokePose",
    "RootMotion",
    "RootOffset",
    "PRESETS",
    "get_preset",
    # Core
    "OrbitCamera",
    "AnimationClock",
    "SwimSession",
    "LoadState",
    # Loaders
    "SkeletonLoader",
    "SkeletalAsset",
    "AssetLoadError",
    # Debug
    "SkeletonOverlay",
]
