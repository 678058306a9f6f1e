"""Loader utilities for skeletal character assets."""

from .skeleton_loader import SkeletonLoader, SkeletalAsset, AssetLoadError

__all__ = ['SkeletonLoader', 'SkeletalAsset', 'AssetLoadError']
