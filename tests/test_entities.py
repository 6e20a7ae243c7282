import random

import pytest

from blobworld.config import SimConfig
from blobworld.constants import GRAVITY, JUMP_V, MAX_RUN
from blobworld.entities import Blob, landing_intensity
from blobworld.mathutil import PerlinNoise
from blobworld.services import ServiceContainer


def make_blob(scene, recorder=None, config=None, **kwargs):
    services = ServiceContainer(particles=recorder)
    return Blob(scene, config or SimConfig(), services=services, **kwargs)


def test_blob_starts_resting_on_floor(scene):
    b = make_blob(scene)
    assert b.on_ground is True
    assert b.pos[1] == scene.floor_y - b.radius
    assert b.pos[0] == scene.width / 2


def test_jump_only_when_grounded(scene):
    b = make_blob(scene)
    assert b.jump() is True
    assert b.velocity[1] == JUMP_V
    assert b.on_ground is False
    b.velocity[1] = -3.0
    # Airborne jump is a silent no-op
    assert b.jump() is False
    assert b.velocity[1] == -3.0


def test_jump_then_gravity_next_tick(scene):
    b = make_blob(scene)
    b.jump()
    b.update(0)
    assert b.velocity[1] == pytest.approx(JUMP_V + GRAVITY)
    assert b.on_ground is False


def test_landing_scenario_vy_12(scene):
    b = make_blob(scene)
    b.on_ground = False
    b.was_on_ground = False
    b.pos[1] = b.rest_y + 3
    b.velocity[1] = 12.0
    assert b.resolve_ground() is True
    assert b.velocity[1] == pytest.approx(-2.4)
    assert b.landing_squash == pytest.approx(0.4)
    assert b.landing_stretch == pytest.approx(1.24)
    assert b.pos[1] == b.rest_y
    assert b.on_ground is True


def test_no_landing_when_already_grounded(scene):
    b = make_blob(scene)
    b.pos[1] = b.rest_y + 1
    b.velocity[1] = 0.2
    assert b.resolve_ground() is False
    assert b.landing_squash == 1.0
    # damped, then zeroed below threshold
    assert b.velocity[1] == 0.0


def test_landing_intensity_bounds_and_monotonic():
    assert landing_intensity(0) == pytest.approx(0.3)
    assert landing_intensity(10) == pytest.approx(0.6)
    assert landing_intensity(25) == pytest.approx(0.6)
    assert landing_intensity(-4) == pytest.approx(0.3)
    speeds = [0, 0.5, 1, 2.5, 5, 7.5, 9.9, 10, 14]
    values = [landing_intensity(s) for s in speeds]
    assert values == sorted(values)


def test_horizontal_speed_never_exceeds_max_run(scene):
    gen = random.Random(7)
    for cfg in (SimConfig(), SimConfig.from_preset("slippery"), SimConfig.from_preset("heavy")):
        b = make_blob(scene, config=cfg)
        for _ in range(600):
            if gen.random() < 0.05:
                b.jump()
            b.begin_update(gen.choice([-1, 0, 1, 1]))
            assert abs(b.velocity[0]) <= MAX_RUN
            b.finish_update()


def test_out_of_range_intent_is_clamped(scene):
    b = make_blob(scene)
    b.apply_input(5)
    assert b.velocity[0] == pytest.approx(0.5 * 0.88)


def test_grounded_frames_rest_exactly_on_floor(scene):
    gen = random.Random(11)
    b = make_blob(scene)
    grounded_frames = 0
    for _ in range(1500):
        if gen.random() < 0.03:
            b.jump()
        b.update(gen.choice([-1, 0, 1]))
        if b.on_ground:
            grounded_frames += 1
            assert b.pos[1] == scene.floor_y - b.radius
    assert grounded_frames > 0


def test_idle_blob_stays_grounded(scene, recorder):
    b = make_blob(scene, recorder)
    for _ in range(300):
        b.update(0)
        assert b.on_ground is True
    assert recorder.origins == []
    assert b.landing_squash == 1.0


def test_squash_and_stretch_relax_monotonically(scene):
    b = make_blob(scene)
    b.landing_squash = 0.4
    b.landing_stretch = 1.24
    prev_squash, prev_stretch = b.landing_squash, b.landing_stretch
    for _ in range(200):
        b.relax()
        assert prev_squash <= b.landing_squash <= 1.0
        assert 1.0 <= b.landing_stretch <= prev_stretch
        prev_squash, prev_stretch = b.landing_squash, b.landing_stretch
    assert b.landing_squash == pytest.approx(1.0, abs=1e-6)
    assert b.landing_stretch == pytest.approx(1.0, abs=1e-6)


def test_apex_emits_once_per_rise(scene, recorder):
    b = make_blob(scene, recorder)
    b.jump()
    emitted_at = None
    for frame in range(60):
        if b.begin_update(0):
            emitted_at = frame
            assert b.velocity[1] > 0
            assert b.on_ground is False
            break
        b.finish_update()
    assert emitted_at is not None
    assert len(recorder.origins) == 1


def test_apex_uses_previous_frame_velocity(scene, recorder):
    b = make_blob(scene, recorder)
    b.on_ground = False
    b.was_on_ground = False
    b.pos[1] = 100
    b.prev_vy = 0.1  # already falling last frame
    b.velocity[1] = -0.2
    assert b.detect_apex() is False
    b.prev_vy = -0.2
    b.velocity[1] = 0.15
    assert b.detect_apex() is True
    assert recorder.origins == [(b.pos[0], 100)]


def test_wall_clamp_is_hard(scene):
    b = make_blob(scene)
    for _ in range(400):
        b.update(-1)
    assert b.pos[0] == b.radius
    for _ in range(600):
        b.update(1)
    assert b.pos[0] == scene.width - b.radius


def test_presentation_state_never_affects_physics(scene):
    a = make_blob(scene)
    b = make_blob(scene)
    b.landing_squash = 0.2
    b.landing_stretch = 1.7
    b.bob_phase = 3.0
    b.t = 42.0
    inputs = [1] * 30 + [0] * 20 + [-1] * 40
    for i, move in enumerate(inputs):
        if i in (5, 70):
            a.jump()
            b.jump()
        a.update(move)
        b.update(move)
        assert a.pos == b.pos
        assert a.velocity == b.velocity
        assert a.on_ground == b.on_ground


def test_render_scale_tracks_vertical_velocity(scene):
    b = make_blob(scene)
    b.velocity[1] = 0
    assert b.render_scale() == pytest.approx((1.0, 1.0))
    b.velocity[1] = -30  # rising fast, clamped at -15
    scale_x, scale_y = b.render_scale()
    assert scale_y == pytest.approx(1.15)
    assert scale_x == pytest.approx(0.85)
    b.velocity[1] = 15
    assert b.render_scale() == pytest.approx((1.15, 0.85))


def test_anchor_offset_only_when_grounded(scene):
    b = make_blob(scene)
    assert b.anchor_offset(0.5) == pytest.approx(b.radius * 0.5)
    b.on_ground = False
    assert b.anchor_offset(0.5) == 0.0


def test_bob_offset_is_bounded(scene):
    b = make_blob(scene)
    for _ in range(200):
        b.update(0)
        assert abs(b.bob_offset) <= 1.5


def test_silhouette_with_and_without_noise(scene, rng):
    plain = make_blob(scene)
    outline = plain.silhouette()
    assert len(outline) == plain.points
    assert all(abs((x * x + y * y) ** 0.5 - plain.radius) < 1e-9 for x, y in outline)

    wobbly = make_blob(scene, noise=PerlinNoise(rng))
    for x, y in wobbly.silhouette():
        r = (x * x + y * y) ** 0.5
        assert wobbly.radius - wobbly.wobble - 1e-9 <= r <= wobbly.radius + wobbly.wobble + 1e-9
