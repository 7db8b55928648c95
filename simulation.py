"""One simulation tick for a ball inside a rotating hexagon.

`step` is driven by the host loop once per frame. It assumes a finite,
non-negative `dt` that the caller has already clamped (see settings.MAX_DT);
large deltas or air_friction * dt >= 1 make the drag term unstable and are
not checked here. Ball and hexagon are mutated in place and must not be
touched by anything else while a step runs.
"""
import math
import random
import numpy as np
import settings
import map_config
import physics
import debug_console


def apply_gravity(ball, gravity, dt):
    ball.vel[1] += gravity * dt

def apply_air_friction(ball, air_friction, dt):
    ball.vel *= 1 - air_friction * dt

def update_ball_position(ball, dt):
    ball.pos += ball.vel * dt

def handle_collisions(ball, hexagon, angular_velocity, bounce_damping):
    """Bounce the ball off every edge it overlaps, in edge order.

    Each touching edge responds on its own, so a ball wedged in a corner gets
    two corrections in the same tick. Edges whose line the center has already
    crossed are left to contain_ball, their closest-point normal faces outwards.
    Returns the number of edges hit.
    """
    hits = 0
    for edge in physics.get_hexagon_edges(hexagon):
        if physics.edge_side(ball.pos, edge) < 0: continue
        collided, normal, depth, contact = physics.circle_segment_collision(ball.pos, ball.radius, edge)
        if not collided: continue
        hits += 1
        # Center sits exactly on the wall, no usable direction this tick
        if not normal.any(): continue

        wall_vel = physics.wall_velocity_at(contact, hexagon, angular_velocity)
        ball.vel = physics.resolve_bounce(ball.vel, normal, wall_vel, bounce_damping)
        ball.pos += normal * depth
    return hits

def contain_ball(ball, hexagon, angular_velocity=0.0, bounce_damping=1.0):
    """Fallback for tunnelling: bring an escaped ball back inside.

    The ball is pulled towards the center until it sits one radius inside the
    edge it went through, and bounces off that edge. Returns True if the ball
    was outside and got moved.
    """
    if physics.point_in_hexagon(ball.pos, hexagon):
        return False

    edges = physics.get_hexagon_edges(hexagon)
    normals = [physics.edge_outward_normal(edge) for edge in edges]
    offset = ball.pos - hexagon.center
    reach = [np.dot(offset, n) for n in normals]
    worst = int(np.argmax(reach))

    apothem = hexagon.radius * math.cos(math.pi / 6)
    limit = max(apothem - ball.radius, 0.0)
    ball.pos = hexagon.center + offset * (limit / reach[worst])

    contact, _ = physics.closest_point_on_segment(ball.pos, edges[worst])
    wall_vel = physics.wall_velocity_at(contact, hexagon, angular_velocity)
    ball.vel = physics.resolve_bounce(ball.vel, -normals[worst], wall_vel, bounce_damping)

    if settings.DEBUG_CONTAINMENT:
        debug_console.console_log("Ball escaped hexagon, pulled back inside", {
            "edge": worst,
            "pos": ball.pos.tolist(),
            "vel": ball.vel.tolist(),
            "rotation": hexagon.rotation,
        })
    return True

def clamp_min_velocity(ball, min_velocity):
    # A ball at rest stays at rest: there is no direction to scale
    speed = np.linalg.norm(ball.vel)
    if 0 < speed < min_velocity:
        ball.vel *= min_velocity / speed

def step(ball, hexagon, params, angular_velocity, dt):
    """Advance ball and hexagon by `dt` seconds. A non-positive `dt` does nothing."""
    if dt <= 0: return

    hexagon.rotation += angular_velocity * dt

    apply_gravity(ball, params.gravity, dt)
    apply_air_friction(ball, params.air_friction, dt)
    update_ball_position(ball, dt)

    handle_collisions(ball, hexagon, angular_velocity, params.bounce_damping)
    contain_ball(ball, hexagon, angular_velocity, params.bounce_damping)

    clamp_min_velocity(ball, params.min_velocity)

# --- HOST HELPERS ---

def reset_ball(ball, rng=random):
    """Back to the spawn point with a random kick."""
    ball.pos = physics.vec(*map_config.BALL_START_POS)
    ball.vel = np.array([
        rng.uniform(-map_config.RESET_SPEED_X, map_config.RESET_SPEED_X),
        rng.uniform(-map_config.RESET_SPEED_Y, map_config.RESET_SPEED_Y),
    ])

def reposition_ball(ball, hexagon, x, y, rng=random):
    """Place the ball at (x, y) with a random kick. Points outside the hexagon are refused."""
    if not physics.point_in_hexagon((x, y), hexagon):
        return False
    ball.pos = physics.vec(x, y)
    ball.vel = np.array([
        rng.uniform(-map_config.CLICK_SPEED, map_config.CLICK_SPEED),
        rng.uniform(-map_config.CLICK_SPEED, map_config.CLICK_SPEED),
    ])
    return True
