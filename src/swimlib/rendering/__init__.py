"""Rendering components for the swimmer demo."""

from .shader_manager import ShaderManager
from .skeleton_renderer import SkeletonRenderer

__all__ = ['ShaderManager', 'SkeletonRenderer']
