"""
Skeleton Renderer

Draws SkeletonOverlay bone segments as translucent lines.
"""

from __future__ import annotations

from typing import Iterable, Tuple

import moderngl
import numpy as np
from pyrr import Matrix44

from ..core.camera import OrbitCamera
from ..debug.skeleton_overlay import SkeletonOverlay
from ..config.settings import SKELETON_OVERLAY_LINE_WIDTH

# Room for a full Mixamo rig (65 bones) with spare
MAX_SEGMENTS = 128


class SkeletonRenderer:
    """Render visible skeleton overlays with a flat-color line program."""

    def __init__(self, ctx: moderngl.Context, program: moderngl.Program):
        self.ctx = ctx
        self.program = program

        # Reusable buffer/VAO; two vec3 vertices per segment
        self._line_buffer = ctx.buffer(reserve=MAX_SEGMENTS * 2 * 3 * 4, dynamic=True)
        self._line_vao = ctx.vertex_array(
            self.program,
            [(self._line_buffer, "3f", "in_position")],
        )

        self._identity_bytes = Matrix44.identity().astype("f4").tobytes()

    def render(self, camera: OrbitCamera, overlays: Iterable[SkeletonOverlay],
               viewport: Tuple[int, int, int, int]) -> int:
        """
        Draw every visible overlay.

        Returns:
            Number of segments drawn
        """
        overlays = [overlay for overlay in overlays if overlay.visible]
        if not overlays:
            return 0

        _, _, width, height = viewport
        aspect_ratio = width / height if height > 0 else 1.0
        self.program["view"].write(camera.get_view_matrix().astype("f4").tobytes())
        self.program["projection"].write(camera.get_projection_matrix(aspect_ratio).astype("f4").tobytes())
        self.program["model"].write(self._identity_bytes)

        self.ctx.viewport = viewport
        self.ctx.line_width = SKELETON_OVERLAY_LINE_WIDTH

        drawn = 0
        try:
            for overlay in overlays:
                if overlay.transparent:
                    self.ctx.enable(moderngl.BLEND)
                    self.ctx.blend_func = moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA
                if not overlay.depth_test:
                    self.ctx.disable(moderngl.DEPTH_TEST)

                vertices = overlay.vertices()[:MAX_SEGMENTS * 6].astype("f4")
                count = len(vertices) // 3
                if count == 0:
                    continue

                color = np.clip(np.array(overlay.color, dtype="f4"), 0.0, 1.0)
                self.program["color"].value = (float(color[0]), float(color[1]), float(color[2]))
                self.program["alpha"].value = float(overlay.opacity)

                self._line_buffer.orphan()
                self._line_buffer.write(vertices.tobytes())
                self._line_vao.render(mode=moderngl.LINES, vertices=count)
                drawn += count // 2
        finally:
            # Restore default depth/blend state for subsequent passes
            self.ctx.enable(moderngl.DEPTH_TEST)
            self.ctx.disable(moderngl.BLEND)

        return drawn

    def release(self):
        self._line_vao.release()
        self._line_buffer.release()
