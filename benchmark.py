import time
import numpy as np
from modescale.constants import FAMILIES
from modescale.scale_builder import compute_scale

_ROOTS = ["C", "F#", "Bb", "Ebb", "G###", "Cb", "a", "d#"]


def run_benchmark():
    # Setup
    np.random.seed(42)
    n = 100000
    roots = np.random.choice(_ROOTS, n)
    modes = np.random.randint(-20, 20, n)
    families = np.random.choice(FAMILIES, n)

    # Pre-warm
    compute_scale("C", 1, FAMILIES[0])

    # Benchmark
    start_time = time.perf_counter()
    for root, mode, family in zip(roots, modes, families):
        compute_scale(str(root), int(mode), str(family))
    end_time = time.perf_counter()

    duration = end_time - start_time
    print(f"Benchmark duration: {duration:.4f} seconds ({n} scales)")

if __name__ == '__main__':
    run_benchmark()
