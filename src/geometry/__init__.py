from geometry.facing import (angle_between, in_field_of_view, is_facing,
                             is_perpendicular, side_of)
from geometry.triangle import Triangle, surface_normal
