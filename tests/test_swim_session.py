"""Tests for SwimSession frame updates and background loading"""

import math
from concurrent.futures import Future, wait

import numpy as np
import pytest

from src.swimlib.animation import DRIFT, FREESTYLE, JointId
from src.swimlib.config.settings import FIXED_FRAME_DELTA, MODEL_POSITION
from src.swimlib.core import LoadState, SwimSession
from src.swimlib.loaders import SkeletalAsset


class CompletedLoader:
    """Loader whose background load has already finished."""

    def __init__(self, asset):
        self.asset = asset
        self.paths = []

    def load_async(self, filepath, executor):
        self.paths.append(filepath)
        future = Future()
        future.set_result(self.asset)
        return future


@pytest.fixture
def session():
    session = SwimSession(FREESTYLE)
    yield session
    session.close()


def test_update_before_load_is_safe(session):
    """No asset: clock advances, no joint writes"""
    t = session.update(1.0)

    assert t == pytest.approx(FREESTYLE.time_scale)
    assert session.last_writes == 0
    assert session.load_state is LoadState.IDLE


def test_attach_drives_bones(session, mixamo_asset):
    assert session.attach(mixamo_asset)
    assert session.load_state is LoadState.READY

    session.update(math.pi / FREESTYLE.time_scale)

    assert session.last_writes > 0
    forearm = session.registry.get(JointId.RIGHT_FOREARM)
    # t = pi: right phase 2*pi, cycle ~0, elbow straight
    assert forearm.rotation[1] == pytest.approx(0.0, abs=1e-9)
    left_arm = session.registry.get(JointId.LEFT_ARM)
    assert left_arm.rotation[2] == pytest.approx(-FREESTYLE.arm_lift_amplitude)


def test_background_load_resolves_on_poll(mixamo_asset):
    loader = CompletedLoader(mixamo_asset)
    session = SwimSession(FREESTYLE, loader=loader)
    try:
        future = session.load("swimmer.glb")
        assert future.done()
        assert session.is_loading

        session.update(1 / 60)

        assert session.load_state is LoadState.READY
        assert session.asset is mixamo_asset
        assert session.registry.is_ready
        assert loader.paths == ["swimmer.glb"]
    finally:
        session.close()


def test_second_load_raises(mixamo_asset):
    session = SwimSession(FREESTYLE, loader=CompletedLoader(mixamo_asset))
    try:
        session.load("swimmer.glb")
        with pytest.raises(RuntimeError):
            session.load("other.glb")
    finally:
        session.close()


def test_failed_load_keeps_running(session, tmp_path):
    future = session.load(tmp_path / "missing.glb")
    wait([future], timeout=5)

    session.update(1 / 60)

    assert session.load_state is LoadState.FAILED
    assert "missing.glb" in session.load_error
    assert len(session.registry) == 0
    assert session.update(1 / 60) > 0.0


def test_asset_without_skin(session):
    session.attach(SkeletalAsset(name="props"))

    assert session.load_state is LoadState.NO_SKIN
    assert session.overlays == []
    session.update(0.5)
    assert session.last_writes == 0


def test_root_motion_runs_without_asset():
    """Drift preset swims forward even while the asset is missing"""
    session = SwimSession(DRIFT)
    frames = 10
    for _ in range(frames):
        session.update(1 / 30)

    position = np.array(session.root.position)
    assert position[2] == pytest.approx(DRIFT.swim_speed * frames * FIXED_FRAME_DELTA)
    assert position[1] == pytest.approx(MODEL_POSITION[1] + session.root_offset.vertical)
    assert session.last_writes == 0
    session.close()


def test_freestyle_root_stays_put(session):
    for _ in range(5):
        session.update(1 / 60)

    assert np.allclose(np.asarray(session.root.position), MODEL_POSITION)


def test_overlay_visibility_applies_to_later_load(session, mixamo_asset):
    session.set_overlay_visible(True)
    session.attach(mixamo_asset)

    assert session.overlays
    assert all(overlay.visible for overlay in session.overlays)

    session.set_overlay_visible(False)
    assert not any(overlay.visible for overlay in session.overlays)


def test_set_preset_resets_pose(session, mixamo_asset):
    session.attach(mixamo_asset)
    session.update(1.0)
    assert np.any(np.array(session.registry.get(JointId.LEFT_UP_LEG).rotation) != 0.0)

    session.set_preset(DRIFT)

    assert session.params is DRIFT
    assert session.clock.speed == DRIFT.time_scale
    assert session.root_motion.enabled
    assert np.allclose(np.asarray(session.registry.get(JointId.LEFT_UP_LEG).rotation), [0.0, 0.0, 0.0])


def test_skeleton_follows_root(session, mixamo_asset):
    """World transforms are computed under the root placement"""
    session.attach(mixamo_asset)
    session.update(1 / 60)

    hips = mixamo_asset.skeleton.root_joints[0]
    assert np.allclose(np.asarray(hips.world_position), MODEL_POSITION)
    assert len(mixamo_asset.skinned_meshes[0].bones) == 22


@pytest.mark.parametrize("filename, payload", [
    ("broken.glb", b"glTF\x02\x00\x00\x00garbage"),
    ("dangling.gltf", (
        b'{"asset": {"version": "2.0"},'
        b' "nodes": [{"name": "Hips"}, {"name": "Body", "mesh": 0, "skin": 0}],'
        b' "meshes": [{"primitives": []}],'
        b' "skins": [{"joints": [1, 7]}]}'
    )),
])
def test_malformed_model_fails_without_stopping_updates(session, tmp_path, filename, payload):
    """Corrupt GLB bytes and out-of-range skin joints both end in FAILED"""
    path = tmp_path / filename
    path.write_bytes(payload)

    future = session.load(path)
    wait([future], timeout=5)
    t = session.update(1 / 60)

    assert session.load_state is LoadState.FAILED
    assert filename in session.load_error
    assert t > 0.0
    assert session.update(1 / 60) > t


def test_preset_switch_never_rewinds_time(session):
    before = session.update(10.0)

    session.set_preset(DRIFT)
    after = session.update(1 / 60)

    assert before == pytest.approx(10.0 * FREESTYLE.time_scale)
    assert after >= before


def test_preset_switch_keeps_distance_swum():
    session = SwimSession(DRIFT)
    try:
        for _ in range(30):
            session.update(1 / 60)
        covered = session.root_motion.forward

        session.set_preset(FREESTYLE)
        session.set_preset(DRIFT)
        session.update(1 / 60)

        assert covered > 0.0
        assert session.root_motion.forward == pytest.approx(covered + DRIFT.swim_speed * FIXED_FRAME_DELTA)
        assert np.asarray(session.root.position)[2] >= covered
    finally:
        session.close()
