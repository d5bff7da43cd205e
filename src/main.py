# main.py
import math
import sys
from core.vector import (UNIT_X, UNIT_Y, UNIT_Z, Vector3, cross, dot, length,
                         length_squared, normalize)
from geometry.triangle import Triangle
from geometry.facing import angle_between, in_field_of_view, side_of

def run_scenarios():
    print("\n=== Vector Products ===")
    c = cross(Vector3(-2, 10, -6), Vector3(8, -1, 2))
    print(f"cross((-2, 10, -6), (8, -1, 2)) = {c}")
    d = dot(Vector3(4, -2, 3), Vector3(-5, 9, -1))
    print(f"dot((4, -2, 3), (-5, 9, -1)) = {d}")

    print("\n=== Length and Normalization ===")
    v = Vector3(6, 10, 1)
    print(f"length_squared({v}) = {length_squared(v)}")
    print(f"length({v}) = {length(v):.7f}")
    n = normalize(Vector3(-4, -3, -5))
    print(f"normalize((-4, -3, -5)) = ({n.x:.8f}, {n.y:.8f}, {n.z:.8f})")

    print("\n=== Handedness ===")
    print(f"cross(unit_x, unit_y) == unit_z: {cross(UNIT_X, UNIT_Y) == UNIT_Z}")
    print(f"cross(unit_z, unit_x) == unit_y: {cross(UNIT_Z, UNIT_X) == UNIT_Y}")
    print(f"cross(unit_y, unit_z) == unit_x: {cross(UNIT_Y, UNIT_Z) == UNIT_X}")

    print("\n=== Surface Normal ===")
    tri = Triangle(Vector3(1, 1, 0), Vector3(-3, 6, 0), Vector3(0, -2, 0))
    print(f"Counter-clockwise normal: {tri.normal()}")
    print(f"Clockwise normal: {tri.flipped().normal()}")
    print(f"Area: {tri.area():.4f}")

def run_vision_cone():
    print("\n=== Vision Cone ===")
    eye = Vector3(0, 0, 0)
    facing = Vector3(0, 0, -1)
    fov = math.radians(90)
    print(f"Guard at {eye} facing {facing} with a {math.degrees(fov):.0f} degree cone")
    for target in (Vector3(1, 0, -3), Vector3(-1, 0, -3), Vector3(4, 0, -1), Vector3(0, 0, 2)):
        to_target = target - eye
        visible = in_field_of_view(eye, facing, target, fov)
        side = {1: "right", -1: "left", 0: "center"}[side_of(facing, UNIT_Y, to_target)]
        angle = math.degrees(angle_between(facing, to_target))
        print(f"Target {target}: {angle:.1f} degrees off, {side}, visible={visible}")

def main() -> int:
    run_scenarios()
    run_vision_cone()
    return 0

if __name__ == "__main__":
    sys.exit(main())
