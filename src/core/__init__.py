from core.vector import (EPSILON, UNIT_X, UNIT_Y, UNIT_Z, ZERO, Vector3, cross,
                         distance, distance_squared, dot, is_unit, is_zero,
                         length, length_squared, normalize)
