"""
Debug Overlay

Collects swimmer statistics and shows them in an ImGui panel:
frame time, clock, preset, root offset and which joints resolved.
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

import imgui

from ..config.settings import (
    DEBUG_FRAME_SAMPLES,
    DEBUG_PANEL_POSITION,
    DEBUG_PANEL_WIDTH,
)

if TYPE_CHECKING:
    from ..core.swim_session import SwimSession


class DebugOverlay:
    """
    Manages the debug panel.

    ``gather_stats`` builds the text lines; ``draw`` renders them plus the
    overlay toggle with ImGui.
    """

    def __init__(self, session: "SwimSession"):
        """
        Initialize debug overlay.

        Args:
            session: Session to report on
        """
        self.session = session
        self.show = True

        # Frame time tracking for averaging
        self.frame_times: List[float] = []
        self.max_frame_samples = DEBUG_FRAME_SAMPLES

    def record_frame(self, frametime: float):
        """Track a frame time (seconds) for the rolling average."""
        self.frame_times.append(frametime * 1000.0)
        if len(self.frame_times) > self.max_frame_samples:
            self.frame_times.pop(0)

    @property
    def average_frametime(self) -> float:
        """Average frame time in ms."""
        if not self.frame_times:
            return 0.0
        return sum(self.frame_times) / len(self.frame_times)

    def gather_stats(self) -> List[str]:
        """
        Gather all statistics into formatted lines.

        Returns:
            List of formatted stat lines
        """
        session = self.session
        avg = self.average_frametime
        fps = 1000.0 / avg if avg > 0.0 else 0.0

        lines = [
            f"FPS: {fps:.1f} ({avg:.2f}ms)",
            f"Preset: {session.params.name} | Speed: x{session.clock.speed:.2f}",
            f"Clock: {session.clock.elapsed:.2f}s (t={session.clock.time:.2f})"
            + (" [paused]" if session.clock.paused else ""),
            f"Asset: {session.load_state.value}",
        ]

        if session.load_error:
            lines.append(f"  {session.load_error}")

        if session.root_motion.enabled:
            offset = session.root_offset
            lines.append(
                f"Root: lateral={offset.lateral:+.3f} vertical={offset.vertical:+.3f} "
                f"forward={offset.forward:.2f}"
            )

        availability = session.joint_availability()
        found = sum(1 for present in availability.values() if present)
        lines.append(f"Joints: {found}/{len(availability)} | writes/frame: {session.last_writes}")

        missing = [joint.value for joint, present in availability.items() if not present]
        if missing and session.registry.is_ready:
            lines.append(f"  Missing: {', '.join(missing)}")

        return lines

    def draw(self):
        """Draw the panel. Call between UIManager.start_frame() and render()."""
        if not self.show:
            return

        x, y = DEBUG_PANEL_POSITION
        imgui.set_next_window_position(x, y, imgui.FIRST_USE_EVER)
        imgui.set_next_window_size(DEBUG_PANEL_WIDTH, 0, imgui.FIRST_USE_EVER)

        expanded, self.show = imgui.begin("Swimmer##debug", self.show)
        if not expanded:
            imgui.end()
            return

        for line in self.gather_stats():
            imgui.text(line)

        imgui.separator()
        changed, visible = imgui.checkbox("Skeleton overlay##overlay", self.session.overlay_visible)
        if changed:
            self.session.set_overlay_visible(visible)

        imgui.separator()
        imgui.text("H: Overlay | P: Preset | Space: Pause")
        imgui.end()
