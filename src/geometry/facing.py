# geometry/facing.py
import math
from core.vector import EPSILON, Vector3, cross, dot, is_zero, length, normalize

def is_facing(facing: Vector3, to_target: Vector3) -> bool:
    """
    True when to_target lies less than 90 degrees away from facing.
    """
    return dot(facing, to_target) > 0

def is_perpendicular(a: Vector3, b: Vector3) -> bool:
    return abs(dot(a, b)) <= EPSILON

def angle_between(a: Vector3, b: Vector3) -> float:
    """
    Angle between a and b in radians, in [0, pi]. Returns 0 if either is a zero vector.
    """
    denom = length(a) * length(b)
    if denom == 0:
        return 0.0
    cos_theta = dot(a, b) / denom
    # Rounding can push the cosine slightly outside acos' domain
    cos_theta = max(-1.0, min(1.0, cos_theta))
    return math.acos(cos_theta)

def in_field_of_view(eye: Vector3, facing: Vector3, target: Vector3, fov: float) -> bool:
    """
    Vision cone test. fov is the full cone angle in radians; the target is
    visible when the cosine between the facing direction and the direction to
    the target is at least cos(fov / 2).

    The test only sees the angle, not its side: a target mirrored across the
    facing direction gives the same answer. Use side_of() to tell left from right.
    """
    to_target = target - eye
    if is_zero(to_target):
        return True
    return dot(normalize(facing), normalize(to_target)) >= math.cos(fov / 2)

def side_of(facing: Vector3, up: Vector3, to_target: Vector3) -> int:
    """
    Which side of the facing direction the target is on: 1 for right, -1 for
    left, 0 when it is straight ahead or behind. Right is cross(facing, up).
    """
    right = cross(facing, up)
    d = dot(right, to_target)
    if abs(d) <= EPSILON:
        return 0
    return 1 if d > 0 else -1
