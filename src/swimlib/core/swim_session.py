"""Swim session: one animated swimmer and everything it owns."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from typing import Dict, List, Optional

from pyrr import Matrix44

from ..animation import (
    BoneRegistry, BoneResolver, Joint, JointId, RootMotion, RootOffset,
    StrokeAnimator, StrokeParameters, get_preset,
)
from ..config.settings import (
    ASSET_LOADER_WORKERS,
    DEFAULT_STROKE_PRESET,
    MODEL_POSITION,
    MODEL_ROTATION,
)
from ..debug.skeleton_overlay import SkeletonOverlay
from ..loaders.skeleton_loader import AssetLoadError, SkeletalAsset, SkeletonLoader
from .clock import AnimationClock

logger = logging.getLogger(__name__)


class LoadState(Enum):
    """Progress of the character asset."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    NO_SKIN = "no_skin"
    FAILED = "failed"


class SwimSession:
    """
    Owns one swimmer: bone registry, clock, animator, root motion and asset.

    The host calls ``update`` once per frame. The asset loads on a worker
    thread; the session polls the pending future at the start of each frame
    and resolves bones on the frame-loop thread, so the registry has a single
    writer. Until then every joint write is skipped while root motion keeps
    running.
    """

    def __init__(
        self,
        params: Optional[StrokeParameters] = None,
        loader: Optional[SkeletonLoader] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        """
        Initialize session.

        Args:
            params: Stroke preset (defaults to the configured preset)
            loader: Asset loader
            executor: Executor for background loads (created on demand if None)
        """
        self.params = params if params is not None else get_preset(DEFAULT_STROKE_PRESET)
        self.registry = BoneRegistry()
        self.clock = AnimationClock(speed=self.params.time_scale)
        self.animator = StrokeAnimator(self.params)
        self.root_motion = RootMotion(self.params)

        # Character root: face down, lifted above the origin
        self.root = Joint("SwimmerRoot", -1)
        self.root.set_bind_pose(MODEL_ROTATION, MODEL_POSITION)
        self.root_offset = RootOffset()

        self.asset: Optional[SkeletalAsset] = None
        self.overlays: List[SkeletonOverlay] = []
        self.overlay_visible = False
        self.load_state = LoadState.IDLE
        self.load_error: Optional[str] = None
        self.last_writes = 0

        self._loader = loader if loader is not None else SkeletonLoader()
        self._executor = executor
        self._owns_executor = executor is None
        self._pending: Optional[Future] = None

    # ------------------------------------------------------------------
    # Asset loading
    # ------------------------------------------------------------------

    def load(self, filepath) -> Future:
        """
        Start loading the character in the background.

        Raises:
            RuntimeError: If a load was already started
        """
        if self.load_state is not LoadState.IDLE:
            raise RuntimeError(f"Session already has an asset ({self.load_state.value})")

        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=ASSET_LOADER_WORKERS,
                thread_name_prefix="asset-loader",
            )

        self.load_state = LoadState.LOADING
        self._pending = self._loader.load_async(filepath, self._executor)
        return self._pending

    def poll(self) -> bool:
        """
        Pick up a finished background load.

        Returns:
            True if the registry became ready during this call
        """
        if self._pending is None or not self._pending.done():
            return False

        future, self._pending = self._pending, None
        try:
            asset = future.result()
        except AssetLoadError as exc:
            # Structural failure: keep swimming with an empty registry
            logger.warning("[Session] Asset load failed: %s", exc)
            self.load_state = LoadState.FAILED
            self.load_error = str(exc)
            return False

        return self.attach(asset)

    def attach(self, asset: SkeletalAsset) -> bool:
        """
        Resolve bones of a loaded asset into the registry.

        Returns:
            True if joints were resolved
        """
        self.asset = asset
        resolver = BoneResolver(self.registry)
        resolver.resolve(asset)
        for overlay in resolver.overlays:
            overlay.visible = self.overlay_visible
            self.overlays.append(overlay)

        if not self.registry.is_ready:
            self.load_state = LoadState.NO_SKIN
            return False

        self.load_state = LoadState.READY
        return True

    @property
    def is_loading(self) -> bool:
        return self.load_state is LoadState.LOADING

    # ------------------------------------------------------------------
    # Frame update
    # ------------------------------------------------------------------

    def update(self, delta_time: float) -> float:
        """
        Advance one frame.

        Args:
            delta_time: Seconds since the previous frame

        Returns:
            Clock-scaled time used for this frame
        """
        self.poll()
        t = self.clock.tick(delta_time)

        if self.root_motion.enabled:
            self.root_offset = self.root_motion.apply(self.root, self.root.bind_position, t)

        self.last_writes = self.animator.update(t, self.registry)

        if self.asset is not None and self.asset.skeleton is not None:
            self.asset.skeleton.update_world_transforms(self.root_transform())

        return t

    def root_transform(self) -> Matrix44:
        """World transform of the character root."""
        return self.root.get_local_transform()

    def set_preset(self, params: StrokeParameters):
        """
        Switch stroke tuning mid-session.

        Bones return to bind pose so axes the new preset leaves alone do not
        keep stale angles. Clock time keeps counting from where it was and the
        swimmer keeps the distance already covered.
        """
        self.params = params
        self.animator = StrokeAnimator(params)
        self.root_motion = RootMotion(params, start_forward=self.root_motion.forward)
        self.clock.speed = params.time_scale

        if self.asset is not None and self.asset.skeleton is not None:
            self.asset.skeleton.reset_pose()

        logger.info("[Session] Stroke preset: %s", params.name)

    # ------------------------------------------------------------------
    # Debug
    # ------------------------------------------------------------------

    def joint_availability(self) -> Dict[JointId, bool]:
        return self.registry.availability()

    def set_overlay_visible(self, visible: bool):
        """Show or hide skeleton overlays, including ones created by a later load."""
        self.overlay_visible = visible
        for overlay in self.overlays:
            overlay.visible = visible

    def close(self):
        """Release the loader thread."""
        if self._executor is not None and self._owns_executor:
            self._executor.shutdown(wait=False)
        self._executor = None

    def __repr__(self):
        return (
            f"SwimSession(preset='{self.params.name}', state={self.load_state.value}, "
            f"joints={len(self.registry)})"
        )
