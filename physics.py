import math
import numpy as np

# --- VECTOR HELPERS ---
# Vectors are float numpy arrays of shape (2,). Helpers never modify their inputs.

def vec(x, y):
    return np.array([float(x), float(y)])

def add_vectors(v1, v2):
    return np.asarray(v1, dtype=float) + np.asarray(v2, dtype=float)

def scale_vector(v, scalar):
    return np.asarray(v, dtype=float) * scalar

def dot_product(v1, v2):
    return float(np.dot(v1, v2))

def vector_length(v):
    return math.sqrt(dot_product(v, v))

def normalize_vector(v):
    """Unit vector in the direction of `v`, or the zero vector when `v` has no length."""
    length = vector_length(v)
    if length == 0: return np.array([0.0, 0.0])
    return scale_vector(v, 1.0 / length)

# --- HEXAGON GEOMETRY ---

def get_hexagon_vertices(hexagon):
    """Six corners of the hexagon, vertex i at angle rotation + i*60deg."""
    cx, cy = hexagon.center
    vertices = []
    for i in range(6):
        angle = hexagon.rotation + (math.pi / 3) * i
        vertices.append(np.array([cx + hexagon.radius * math.cos(angle),
                                  cy + hexagon.radius * math.sin(angle)]))
    return vertices

def get_hexagon_edges(hexagon):
    vertices = get_hexagon_vertices(hexagon)
    return [(vertices[i], vertices[(i + 1) % 6]) for i in range(6)]

def edge_side(point, edge):
    """Cross product (end - start) x (point - start). Negative means outside the edge line."""
    (x1, y1), (x2, y2) = edge
    return (x2 - x1) * (point[1] - y1) - (y2 - y1) * (point[0] - x1)

def point_in_hexagon(point, hexagon):
    # Points on an edge count as inside
    for edge in get_hexagon_edges(hexagon):
        if edge_side(point, edge) < 0: return False
    return True

def edge_outward_normal(edge):
    """Unit normal of an edge from get_hexagon_edges, pointing away from the interior."""
    start, end = edge
    ex, ey = np.asarray(end, dtype=float) - np.asarray(start, dtype=float)
    return normalize_vector(np.array([ey, -ex]))

# --- COLLISION DETECTION ---

def closest_point_on_segment(point, segment):
    """Returns (closest_point, distance) from `point` to the segment."""
    start, end = segment
    start = np.asarray(start, dtype=float)
    point = np.asarray(point, dtype=float)
    seg = np.asarray(end, dtype=float) - start
    seg_len_sq = np.dot(seg, seg)
    t = 0.0
    if seg_len_sq != 0:
        t = max(0.0, min(1.0, np.dot(point - start, seg) / seg_len_sq))
    closest = start + t * seg
    return closest, vector_length(point - closest)

def circle_segment_collision(center, radius, segment):
    """Circle vs segment overlap test.

    Returns (collided, normal, depth, contact_point). The normal points from
    the contact point towards the circle center and is the zero vector if the
    center lies exactly on the segment. A circle just touching the segment
    (distance == radius) is not a collision.
    """
    closest, dist = closest_point_on_segment(center, segment)
    if dist >= radius:
        return False, None, 0, None
    normal = normalize_vector(np.asarray(center, dtype=float) - closest)
    return True, normal, radius - dist, closest

# --- COLLISION RESPONSE ---

def wall_velocity_at(point, hexagon, angular_velocity):
    # Tangential velocity of a point on the rotating hexagon
    dx = point[0] - hexagon.center[0]
    dy = point[1] - hexagon.center[1]
    return np.array([-dy * angular_velocity, dx * angular_velocity])

def resolve_bounce(velocity, normal, wall_velocity, damping):
    """Damped reflection of `velocity` off a wall moving at `wall_velocity`.

    A contact that is already separating along `normal` is left alone. Otherwise
    the normal component is reflected (scaled by `damping`) and a share of the
    wall's own motion, (1 - damping), is carried into the ball.
    """
    velocity = np.asarray(velocity, dtype=float)
    wall_velocity = np.asarray(wall_velocity, dtype=float)
    relative = velocity - wall_velocity
    normal_speed = dot_product(relative, normal)
    if normal_speed > 0: return velocity.copy()

    bounced = velocity - 2 * normal_speed * damping * np.asarray(normal, dtype=float)
    return bounced + wall_velocity * (1 - damping)
