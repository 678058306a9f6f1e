"""
UI Manager

ImGui context for the swimmer status panel, fed by moderngl-window input.
"""

from typing import Tuple

import imgui
from imgui.integrations.opengl import ProgrammablePipelineRenderer

# moderngl-window numbers mouse buttons from 1, ImGui from 0
MOUSE_BUTTON_BASE = 1
TRACKED_MOUSE_BUTTONS = 3


class UIManager:
    """
    Owns the ImGui context and its OpenGL renderer.

    Panels draw between ``start_frame`` and ``render``.
    """

    def __init__(self, window_size: Tuple[int, int]):
        imgui.create_context()
        self.io = imgui.get_io()
        self.io.ini_file_name = None  # no imgui.ini beside the demo
        self.resize(*window_size)
        self.renderer = ProgrammablePipelineRenderer()

    def resize(self, width: int, height: int):
        self.io.display_size = (width, height)

    def mouse_moved(self, x: float, y: float):
        self.io.mouse_pos = (x, y)

    def mouse_button(self, button: int, pressed: bool):
        """Forward a moderngl-window mouse button press or release."""
        index = button - MOUSE_BUTTON_BASE
        if 0 <= index < TRACKED_MOUSE_BUTTONS:
            self.io.mouse_down[index] = pressed

    def start_frame(self):
        imgui.new_frame()

    def render(self):
        """Flush this frame's panels to the screen."""
        imgui.render()
        self.renderer.render(imgui.get_draw_data())

    def shutdown(self):
        self.renderer.shutdown()
