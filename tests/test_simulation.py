import json
import math
import random
import numpy as np
import pytest
import settings
import map_config
import physics
import simulation
import debug_console
from entities import Ball, Hexagon, PhysicsParams


@pytest.fixture
def hexagon():
    return Hexagon(400, 300, 200, 0.0)

@pytest.fixture
def params():
    return PhysicsParams(gravity=500, air_friction=0.02, bounce_damping=0.85, min_velocity=50)


def test_free_flight_tick(hexagon, params):
    ball = Ball(400, 200, 200, 0, radius=10, mass=1)
    simulation.step(ball, hexagon, params, 0.5, 0.016)

    assert hexagon.rotation == pytest.approx(0.008)
    drag = 1 - 0.02 * 0.016
    expected_vel = np.array([200 * drag, 500 * 0.016 * drag])
    np.testing.assert_allclose(ball.vel, expected_vel)
    np.testing.assert_allclose(ball.pos, np.array([400, 200]) + expected_vel * 0.016)
    # roughly velocity * dt
    np.testing.assert_allclose(ball.pos, [403.2, 200.128], atol=0.01)

def test_zero_dt_changes_nothing(hexagon, params):
    # Slow enough that the speed floor would kick in if the step ran
    ball = Ball(420, 310, 3, -4)
    hexagon.rotation = 1.25
    simulation.step(ball, hexagon, params, 0.5, 0.0)
    np.testing.assert_array_equal(ball.pos, [420, 310])
    np.testing.assert_array_equal(ball.vel, [3, -4])
    assert hexagon.rotation == 1.25

def test_head_on_bounce_off_still_wall(hexagon):
    params = PhysicsParams(gravity=0, air_friction=0, bounce_damping=1.0, min_velocity=0)
    apothem = 200 * math.sqrt(3) / 2
    # Edge 1 is the horizontal bottom edge at rotation 0
    edge = physics.get_hexagon_edges(hexagon)[1]
    outward = physics.edge_outward_normal(edge)
    np.testing.assert_allclose(outward, [0, 1], atol=1e-12)

    ball = Ball(400, 300 + apothem - 10, 0, 300, radius=10)
    before = np.dot(ball.vel, outward)
    simulation.step(ball, hexagon, params, 0.0, 0.016)
    after = np.dot(ball.vel, outward)

    assert before == pytest.approx(300)
    assert after == pytest.approx(-300)
    assert ball.pos[1] == pytest.approx(300 + apothem - 10)
    assert physics.point_in_hexagon(ball.pos, hexagon)

def test_rotating_wall_drags_ball_along():
    hexagon = Hexagon(400, 300, 200, 0.0)
    apothem = 200 * math.sqrt(3) / 2
    ball = Ball(400, 300 + apothem - 5, 0, 100, radius=10)
    simulation.handle_collisions(ball, hexagon, 1.0, 0.8)
    # Contact point below the center moves in -x for positive angular velocity
    assert ball.vel[0] < 0
    assert ball.vel[1] < 0

def test_corner_contact_hits_both_edges(hexagon):
    ball = Ball(595, 300, 100, 0, radius=10)
    hits = simulation.handle_collisions(ball, hexagon, 0.0, 1.0)
    assert hits == 2
    assert ball.vel[0] < 0
    assert ball.pos[0] < 595
    assert physics.point_in_hexagon(ball.pos, hexagon)

def test_no_collision_leaves_ball_alone(hexagon):
    ball = Ball(400, 300, 50, 50)
    assert simulation.handle_collisions(ball, hexagon, 0.5, 0.85) == 0
    np.testing.assert_array_equal(ball.pos, [400, 300])
    np.testing.assert_array_equal(ball.vel, [50, 50])

def test_ball_on_wall_line_skips_response(hexagon, monkeypatch):
    wall = (np.array([500.0, 400.0]), np.array([300.0, 400.0]))
    monkeypatch.setattr(physics, "get_hexagon_edges", lambda h: [wall])
    ball = Ball(400, 400, 0, 40)
    assert simulation.handle_collisions(ball, hexagon, 0.0, 1.0) == 1
    np.testing.assert_array_equal(ball.vel, [0, 40])

def test_contain_ball_pulls_escaped_ball_back(hexagon):
    ball = Ball(700, 300, 200, 0)
    assert simulation.contain_ball(ball, hexagon)

    assert physics.point_in_hexagon(ball.pos, hexagon)
    for edge in physics.get_hexagon_edges(hexagon):
        _, dist = physics.closest_point_on_segment(ball.pos, edge)
        assert dist >= ball.radius - 1e-9
    # Still on the line from the center through where it escaped
    assert ball.pos[1] == pytest.approx(300)
    # Bounced back towards the middle
    assert ball.vel[0] < 0

def test_contain_ball_keeps_inward_velocity(hexagon):
    ball = Ball(400, 600, 0, -50)
    simulation.contain_ball(ball, hexagon)
    np.testing.assert_allclose(ball.vel, [0, -50])

def test_contain_ball_ignores_ball_inside(hexagon):
    ball = Ball(450, 320)
    assert not simulation.contain_ball(ball, hexagon)
    np.testing.assert_array_equal(ball.pos, [450, 320])

def test_containment_is_logged_when_enabled(hexagon, tmp_path, monkeypatch):
    log_file = tmp_path / "log.txt"
    monkeypatch.setattr(settings, "DEBUG_CONTAINMENT", True)
    monkeypatch.setattr(debug_console, "LOG_FILE", str(log_file))
    simulation.contain_ball(Ball(400, 600), hexagon)

    entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])
    assert entry["message"].startswith("Ball escaped")
    assert entry["data"]["edge"] == 1
    apothem = 200 * math.sqrt(3) / 2
    assert entry["data"]["pos"] == pytest.approx([400, 300 + apothem - 10])

def test_crossed_edge_is_left_to_containment(hexagon):
    apothem = 200 * math.sqrt(3) / 2
    # Center 3px past the bottom edge line, heading back in
    ball = Ball(400, 300 + apothem + 3, 0, -100)
    assert simulation.handle_collisions(ball, hexagon, 0.0, 1.0) == 0
    np.testing.assert_array_equal(ball.vel, [0, -100])

def test_fast_ball_through_edge_recovers(hexagon, params):
    apothem = 200 * math.sqrt(3) / 2
    ball = Ball(400, 300 + apothem + 2, 0, 600)
    simulation.step(ball, hexagon, params, 0.5, 0.033)
    assert physics.point_in_hexagon(ball.pos, hexagon)
    assert ball.vel[1] < 0
    for _ in range(300):
        simulation.step(ball, hexagon, params, 0.5, 0.033)
        assert physics.point_in_hexagon(ball.pos, hexagon)

def test_strong_settings_at_max_dt_stay_inside(hexagon):
    params = PhysicsParams(gravity=1000, air_friction=0.0, bounce_damping=1.0, min_velocity=50)
    ball = Ball()
    for _ in range(5000):
        simulation.step(ball, hexagon, params, -2.0, settings.MAX_DT)
        assert physics.point_in_hexagon(ball.pos, hexagon)

def test_clamp_min_velocity():
    ball = Ball(0, 0, 3, 4)
    simulation.clamp_min_velocity(ball, 50)
    np.testing.assert_allclose(ball.vel, [30, 40])

    still = Ball(0, 0, 0, 0)
    simulation.clamp_min_velocity(still, 50)
    np.testing.assert_array_equal(still.vel, [0, 0])

    fast = Ball(0, 0, 60, 80)
    simulation.clamp_min_velocity(fast, 50)
    np.testing.assert_array_equal(fast.vel, [60, 80])

def test_forces():
    ball = Ball(0, 0, 10, 20)
    simulation.apply_gravity(ball, 500, 0.01)
    np.testing.assert_allclose(ball.vel, [10, 25])
    simulation.apply_air_friction(ball, 0.1, 0.5)
    np.testing.assert_allclose(ball.vel, [9.5, 23.75])
    simulation.update_ball_position(ball, 2)
    np.testing.assert_allclose(ball.pos, [19, 47.5])

def test_long_run_stays_inside(hexagon, params):
    ball = Ball()
    rng = random.Random(7)
    for _ in range(3000):
        simulation.step(ball, hexagon, params, settings.ROTATION_SPEED, rng.uniform(0.005, settings.MAX_DT))
        assert np.all(np.isfinite(ball.pos))
        assert np.linalg.norm(ball.pos - hexagon.center) < hexagon.radius + ball.radius
        assert ball.speed >= params.min_velocity - 1e-9

def test_reset_ball():
    ball = Ball(123, 456, 0, 0)
    simulation.reset_ball(ball, rng=random.Random(1))
    np.testing.assert_array_equal(ball.pos, map_config.BALL_START_POS)
    assert abs(ball.vel[0]) <= map_config.RESET_SPEED_X
    assert abs(ball.vel[1]) <= map_config.RESET_SPEED_Y
    assert ball.radius == map_config.BALL_RADIUS

def test_reposition_ball(hexagon):
    ball = Ball()
    assert simulation.reposition_ball(ball, hexagon, 350, 275, rng=random.Random(2))
    np.testing.assert_array_equal(ball.pos, [350, 275])
    assert np.all(np.abs(ball.vel) <= map_config.CLICK_SPEED)

def test_reposition_outside_hexagon_is_refused(hexagon):
    ball = Ball(420, 310, 30, 40)
    assert not simulation.reposition_ball(ball, hexagon, 50, 50, rng=random.Random(3))
    np.testing.assert_array_equal(ball.pos, [420, 310])
    np.testing.assert_array_equal(ball.vel, [30, 40])
    assert physics.point_in_hexagon(ball.pos, hexagon)
