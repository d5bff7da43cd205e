# geometry/triangle.py
from typing import Tuple
from core.vector import Vector3, cross, is_zero, length, normalize

def surface_normal(p0: Vector3, p1: Vector3, p2: Vector3) -> Vector3:
    """
    Unit normal of the plane through three points. Counter-clockwise order
    (seen from the tip of the normal) gives the right-handed normal; swapping
    any two points flips it. Collinear points give the zero vector.
    """
    return normalize(cross(p1 - p0, p2 - p0))

class Triangle:
    """Represents a single triangle in 3D space. Vertex order is the winding."""
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3):
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2

    def edges(self) -> Tuple[Vector3, Vector3]:
        """The two edges leaving v0, in winding order."""
        return self.v1 - self.v0, self.v2 - self.v0

    def normal(self) -> Vector3:
        return surface_normal(self.v0, self.v1, self.v2)

    def area(self) -> float:
        edge1, edge2 = self.edges()
        return length(cross(edge1, edge2)) * 0.5

    def is_degenerate(self) -> bool:
        edge1, edge2 = self.edges()
        return is_zero(cross(edge1, edge2))

    def centroid(self) -> Vector3:
        return (self.v0 + self.v1 + self.v2) / 3.0

    def flipped(self) -> "Triangle":
        """Same triangle with the opposite winding, so its normal points the other way."""
        return Triangle(self.v0, self.v2, self.v1)

    def __repr__(self) -> str:
        return f"Triangle({self.v0}, {self.v1}, {self.v2})"
