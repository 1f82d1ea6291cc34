"""
Microbenchmark: Mat22.solve vs get_inverse + mul_vec vs numpy.linalg.solve.
Run:
  python benchmarks/bench_solve.py
"""
import time
import numpy as np
from physics_math import Mat22, Vec2


def run(n: int):
    rng = np.random.default_rng(12345)  # determinism
    mats = [Mat22.from_array(rng.uniform(-5.0, 5.0, size=(2, 2))) for _ in range(n)]
    vecs = [Vec2.from_array(rng.uniform(-5.0, 5.0, size=2)) for _ in range(n)]
    arrs = [(m.to_array(), v.to_array()) for m, v in zip(mats, vecs)]

    timings = {}

    t0 = time.perf_counter()
    for m, v in zip(mats, vecs):
        m.solve(v)
    timings["solve"] = time.perf_counter() - t0

    t0 = time.perf_counter()
    for m, v in zip(mats, vecs):
        Mat22.mul_vec(m.get_inverse(), v)
    timings["inverse+mul"] = time.perf_counter() - t0

    t0 = time.perf_counter()
    for a, b in arrs:
        np.linalg.solve(a, b)
    timings["numpy"] = time.perf_counter() - t0

    return {k: 1e6 * t / n for k, t in timings.items()}


if __name__ == "__main__":
    for n in [1000, 10000, 100000]:
        per_call = run(n)
        cols = "  ".join(f"{k}={us:7.3f} us" for k, us in per_call.items())
        print(f"N={n:6d}  {cols}")
