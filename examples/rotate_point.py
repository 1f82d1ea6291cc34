# examples/rotate_point.py
import numpy as np
from physics_math import Mat22, Vec2

# Body frame rotated 30 degrees counterclockwise
R = Mat22.from_angle(np.pi / 6)

local = Vec2(1.0, 0.0)
world = Mat22.mul_vec(R, local)        # local -> world
back = Mat22.mul_t_vec(R, world)       # world -> local (transpose = inverse)

print("R:", R)
print("world:", world)
print("back to local:", back)
