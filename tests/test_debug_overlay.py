"""Tests for the debug panel statistics"""

import pytest

pytest.importorskip("imgui")

from src.swimlib.animation import DRIFT, FREESTYLE  # noqa: E402
from src.swimlib.core import SwimSession  # noqa: E402
from src.swimlib.debug.debug_overlay import DebugOverlay  # noqa: E402


def test_frame_time_average():
    overlay = DebugOverlay(SwimSession(FREESTYLE))
    overlay.max_frame_samples = 2
    for frametime in (0.010, 0.020, 0.030):
        overlay.record_frame(frametime)

    assert overlay.average_frametime == pytest.approx(25.0)


def test_stats_before_load():
    overlay = DebugOverlay(SwimSession(FREESTYLE))
    lines = overlay.gather_stats()

    assert lines[0].startswith("FPS: 0.0")
    assert "Preset: freestyle" in lines[1]
    assert "Asset: idle" in lines
    assert any(line.startswith("Joints: 0/18") for line in lines)
    assert not any("Missing" in line for line in lines)


def test_stats_report_missing_joints(make_asset):
    session = SwimSession(DRIFT)
    session.attach(make_asset(["mixamorig:LeftArm", "mixamorig:Spine"]))
    session.update(1 / 60)

    lines = DebugOverlay(session).gather_stats()

    assert any(line.startswith("Root:") for line in lines)
    assert any(line.startswith("Joints: 2/18") for line in lines)
    missing = next(line for line in lines if "Missing" in line)
    assert "head" in missing
    assert "leftarm" not in missing
