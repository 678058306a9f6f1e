#!/usr/bin/env python3
"""
Swimmer Demo - Main Entry Point

Loads a rigged character and animates a procedural freestyle stroke.
"""

import logging

import moderngl
import moderngl_window as mglw
from pyrr import Vector3

from src.swimlib import (
    # Configuration
    WINDOW_SIZE, ASPECT_RATIO, GL_VERSION, WINDOW_TITLE, RESIZABLE,
    CLEAR_COLOR, CAMERA_POSITION, CAMERA_TARGET,
    DEFAULT_MODEL_PATH, DEFAULT_STROKE_PRESET,
    DEBUG_PANEL_ENABLED, SHOW_SKELETON_OVERLAY, LOG_LEVEL, LOG_FORMAT,
    # Core
    OrbitCamera, SwimSession, PRESETS, get_preset,
)
from src.swimlib.rendering import ShaderManager, SkeletonRenderer
from src.swimlib.debug.debug_overlay import DebugOverlay
from src.swimlib.ui import UIManager


logger = logging.getLogger(__name__)


class SwimmerDemo(mglw.WindowConfig):
    """Swimmer demo window"""

    gl_version = GL_VERSION
    title = WINDOW_TITLE
    window_size = WINDOW_SIZE
    aspect_ratio = ASPECT_RATIO
    resizable = RESIZABLE

    @classmethod
    def add_arguments(cls, parser):
        parser.add_argument(
            "--model",
            default=str(DEFAULT_MODEL_PATH),
            help="Rigged GLTF/GLB character to animate",
        )
        parser.add_argument(
            "--preset",
            default=DEFAULT_STROKE_PRESET,
            choices=sorted(PRESETS),
            help="Stroke tuning preset",
        )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        self.ctx.enable(moderngl.DEPTH_TEST)

        # Watch from the side, slowly circling the swimmer
        self.camera = OrbitCamera(
            position=Vector3(CAMERA_POSITION),
            target=Vector3(CAMERA_TARGET),
        )

        # Swimmer: loads in the background, animates as soon as bones resolve
        self.session = SwimSession(get_preset(self.argv.preset))
        self.session.set_overlay_visible(SHOW_SKELETON_OVERLAY)
        self.session.load(self.argv.model)

        # Rendering
        self.shaders = ShaderManager(self.ctx)
        self.skeleton_renderer = SkeletonRenderer(self.ctx, self.shaders.load("skeleton_overlay"))

        # Status panel
        self.ui_manager = UIManager(self.wnd.size)
        self.debug_overlay = DebugOverlay(self.session)
        self.debug_overlay.show = DEBUG_PANEL_ENABLED

        logger.info("[Demo] Preset '%s', model %s", self.session.params.name, self.argv.model)

    def on_render(self, time, frametime):
        """Render one frame"""
        self.session.update(frametime)

        self.camera.set_target(self.session.root.position)
        self.camera.update(frametime)

        self.ctx.screen.use()
        self.ctx.clear(*CLEAR_COLOR)
        viewport = (0, 0, *self.wnd.buffer_size)
        self.skeleton_renderer.render(self.camera, self.session.overlays, viewport)

        self.debug_overlay.record_frame(frametime)
        self.ui_manager.start_frame()
        self.debug_overlay.draw()
        self.ui_manager.render()

    def _cycle_preset(self):
        names = list(PRESETS)
        current = names.index(self.session.params.name)
        self.session.set_preset(PRESETS[names[(current + 1) % len(names)]])

    def on_key_event(self, key, action, modifiers):
        """
        Handle keyboard events.

        Args:
            key: Key code
            action: Action (press, release, repeat)
            modifiers: Modifier keys (shift, ctrl, etc.)
        """
        keys = self.wnd.keys
        if action != keys.ACTION_PRESS:
            return

        if key == keys.H:
            self.session.set_overlay_visible(not self.session.overlay_visible)
        elif key == keys.P:
            self._cycle_preset()
        elif key == keys.SPACE:
            self.session.clock.paused = not self.session.clock.paused

    def on_mouse_position_event(self, x, y, dx, dy):
        self.ui_manager.mouse_moved(x, y)

    def on_mouse_drag_event(self, x, y, dx, dy):
        self.ui_manager.mouse_moved(x, y)

    def on_mouse_press_event(self, x, y, button):
        self.ui_manager.mouse_button(button, True)

    def on_mouse_release_event(self, x: int, y: int, button: int):
        self.ui_manager.mouse_button(button, False)

    def on_resize(self, width: int, height: int):
        """Keep the UI sized to the window."""
        self.ui_manager.resize(width, height)

    def on_close(self):
        self.session.close()
        self.skeleton_renderer.release()
        self.shaders.release()
        self.ui_manager.shutdown()


if __name__ == '__main__':
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    SwimmerDemo.run()
