# examples/revolute_impulse.py
#
# One velocity iteration of a revolute (pin) joint between a static body A
# and a dynamic unit box B, using Mat22 for the 2x2 effective mass.
import numpy as np
from physics_math import Mat22, Vec2

inv_mass_b = 1.0
inv_inertia_b = 1.0 / (1.0 / 12.0 * (2.0**2 + 2.0**2))  # box 2x2, m=1

# Anchor offset from B's center, rotated into world space
angle_b = 0.25
rb = Mat22.mul_vec(Mat22.from_angle(angle_b), Vec2(-1.0, 0.0))

# K = inv_m * I + inv_I * [[ry², -rx*ry], [-rx*ry, rx²]]
K = Mat22.add(
    Mat22.from_scalars(inv_mass_b, 0.0, 0.0, inv_mass_b),
    Mat22.from_scalars(
        inv_inertia_b * rb.y * rb.y, -inv_inertia_b * rb.x * rb.y,
        -inv_inertia_b * rb.x * rb.y, inv_inertia_b * rb.x * rb.x,
    ),
)

if not K.is_invertible(eps=1e-15):
    raise SystemExit("degenerate joint")

v_b = Vec2(0.0, 1.0)
omega_b = 0.5
# Velocity of B's anchor point: v + ω × r
cdot = v_b + Vec2(-omega_b * rb.y, omega_b * rb.x)

impulse = K.solve(-cdot)

v_b = v_b + inv_mass_b * impulse
omega_b += inv_inertia_b * (rb.x * impulse.y - rb.y * impulse.x)
cdot_after = v_b + Vec2(-omega_b * rb.y, omega_b * rb.x)

print("K:", K)
print("impulse:", impulse)
print("anchor velocity before:", cdot, "after:", cdot_after)
print("residual:", float(np.hypot(cdot_after.x, cdot_after.y)))
