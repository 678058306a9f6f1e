"""
Shader Manager

Builds GLSL programs from vertex/fragment file pairs in the shaders directory.
"""

import logging
from pathlib import Path
from typing import Dict

import moderngl

from ..config.settings import SHADERS_DIR

logger = logging.getLogger(__name__)


class ShaderManager:
    """
    Cache of compiled programs keyed by file stem.

    ``load("skeleton_overlay")`` compiles ``skeleton_overlay.vert`` with
    ``skeleton_overlay.frag`` once; later calls return the cached program.
    """

    def __init__(self, ctx: moderngl.Context, shader_dir: Path = SHADERS_DIR):
        """
        Initialize shader manager.

        Args:
            ctx: ModernGL context
            shader_dir: Directory holding the .vert/.frag pairs
        """
        self.ctx = ctx
        self.shader_dir = Path(shader_dir)
        self.programs: Dict[str, moderngl.Program] = {}

    def _read_stage(self, stem: str, suffix: str) -> str:
        path = self.shader_dir / f"{stem}{suffix}"
        if not path.is_file():
            raise FileNotFoundError(f"Shader stage not found: {path}")
        return path.read_text()

    def load(self, stem: str) -> moderngl.Program:
        """
        Compile, or fetch from cache, the program for a shader stem.

        Raises:
            FileNotFoundError: If either stage file is missing
            moderngl.Error: If compiling or linking fails
        """
        program = self.programs.get(stem)
        if program is not None:
            return program

        vertex_source = self._read_stage(stem, ".vert")
        fragment_source = self._read_stage(stem, ".frag")
        try:
            program = self.ctx.program(vertex_shader=vertex_source, fragment_shader=fragment_source)
        except moderngl.Error as e:
            raise moderngl.Error(f"Shader program '{stem}' failed to build: {e}") from e

        logger.info("[Shaders] Built '%s'", stem)
        self.programs[stem] = program
        return program

    def release(self):
        """Free every cached program."""
        for program in self.programs.values():
            program.release()
        self.programs.clear()
