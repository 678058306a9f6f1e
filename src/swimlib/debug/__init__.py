"""
Debug Module

Skeleton overlay for visual debugging. The imgui status panel lives in
``debug_overlay`` and is imported by the host directly.
"""

from .skeleton_overlay import SkeletonOverlay

__all__ = ['SkeletonOverlay']
