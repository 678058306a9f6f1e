"""Core session components"""
from .camera import OrbitCamera
from .clock import AnimationClock
from .swim_session import SwimSession, LoadState

__all__ = [
    "OrbitCamera",
    "AnimationClock",
    "SwimSession",
    "LoadState",
]
