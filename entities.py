import numpy as np
import settings
import map_config


class PhysicsParams:
    """Tunable physics constants. Read-only to the integrator; the host owns them."""

    def __init__(self, gravity=settings.GRAVITY, air_friction=settings.AIR_FRICTION,
                 bounce_damping=settings.BOUNCE_DAMPING, min_velocity=settings.MIN_VELOCITY):
        if gravity < 0:
            raise ValueError(f"gravity must be >= 0, got {gravity}")
        if air_friction < 0:
            raise ValueError(f"air_friction must be >= 0, got {air_friction}")
        if not 0 < bounce_damping <= 1:
            raise ValueError(f"bounce_damping must be in (0, 1], got {bounce_damping}")
        if min_velocity < 0:
            raise ValueError(f"min_velocity must be >= 0, got {min_velocity}")

        self.gravity = gravity
        self.air_friction = air_friction
        self.bounce_damping = bounce_damping
        self.min_velocity = min_velocity

    def as_dict(self):
        return {
            "gravity": self.gravity,
            "air_friction": self.air_friction,
            "bounce_damping": self.bounce_damping,
            "min_velocity": self.min_velocity,
        }


class Ball:
    def __init__(self, x=map_config.BALL_START_POS[0], y=map_config.BALL_START_POS[1],
                 vx=map_config.BALL_START_VEL[0], vy=map_config.BALL_START_VEL[1],
                 radius=map_config.BALL_RADIUS, mass=map_config.BALL_MASS):
        if radius <= 0:
            raise ValueError(f"ball radius must be > 0, got {radius}")
        if mass <= 0:
            raise ValueError(f"ball mass must be > 0, got {mass}")

        self.pos = np.array([float(x), float(y)])
        self.vel = np.array([float(vx), float(vy)])
        self.radius = radius
        self.mass = mass

    @property
    def speed(self):
        return float(np.linalg.norm(self.vel))


class Hexagon:
    def __init__(self, cx=map_config.HEXAGON_CENTER[0], cy=map_config.HEXAGON_CENTER[1],
                 radius=map_config.HEXAGON_RADIUS, rotation=0.0):
        if radius <= 0:
            raise ValueError(f"hexagon radius must be > 0, got {radius}")

        self.center = np.array([float(cx), float(cy)])
        self.radius = radius
        # Radians, unbounded
        self.rotation = rotation
