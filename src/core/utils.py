# core/utils.py
import random
from core.vector import Vector3, dot, normalize

def random_in_unit_sphere(rng=random) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    rng is anything with a uniform(a, b) method, e.g. random.Random(seed).
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if 0.0 < dot(p, p) < 1.0:
            return p

def random_unit_vector(rng=random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return normalize(random_in_unit_sphere(rng))

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the unit normal n.
    """
    return v - n * (2 * dot(v, n))
