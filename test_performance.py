"""
Performance test script for the Gray-Scott simulation.
Tests the stencil helpers and the hot paths to ensure they work correctly and efficiently.
"""
import numpy as np
import time
from grayscott import utils
from grayscott.colormap import to_rgba
from grayscott.grid import GridState
from grayscott.params import SimulationParams
from grayscott.seeder import seed_grid
from grayscott.stepper import step


def test_laplacian_performance():
    """Test periodic Laplacian computation performance."""
    print("Testing Laplacian computation...")

    sizes = [128, 256, 512]
    for size in sizes:
        arr = np.random.rand(size, size).astype(np.float32)
        start = time.time()
        for _ in range(100):
            lap = utils.laplacian(arr)
        elapsed = time.time() - start
        print(f"  Size {size}x{size}: {elapsed:.4f}s for 100 iterations")
        assert lap.shape == arr.shape
        assert lap.dtype == np.float32
        # Periodic stencil only moves mass around
        assert abs(float(np.sum(lap, dtype=np.float64))) < 1e-2
    print("  ✓ Laplacian computation test passed\n")


def test_laplacian_wraps_edges():
    """Test that edge cells see the opposite edge as a neighbour."""
    print("Testing Laplacian wrap...")

    arr = np.zeros((5, 5))
    arr[0, 0] = 1.0
    lap = utils.laplacian(arr)
    assert lap[0, 0] == -4.0
    assert lap[0, 1] == 1.0
    assert lap[0, 4] == 1.0
    assert lap[1, 0] == 1.0
    assert lap[4, 0] == 1.0
    assert np.count_nonzero(lap) == 5
    print("  ✓ Laplacian wrap test passed\n")


def test_wrap_index():
    """Test true modulo wrap of coordinates."""
    assert utils.wrap_index(-1, 10) == 9
    assert utils.wrap_index(10, 10) == 0
    assert utils.wrap_index(-11, 10) == 9
    assert np.array_equal(utils.wrap_index(np.array([-2, 0, 11]), 10), [8, 0, 1])


def test_disk_offsets():
    """Test disk offsets creation and ordering."""
    print("Testing disk offsets creation...")

    for radius in [1, 5, 20]:
        start = time.time()
        for _ in range(100):
            dy, dx = utils.create_disk_offsets(radius)
        elapsed = time.time() - start
        print(f"  Radius {radius}: {elapsed:.4f}s for 100 iterations")
        assert len(dy) == len(dx)
        assert np.all(dx**2 + dy**2 <= radius**2)
        assert dy[0] == -radius and dx[0] == 0
        # Row-major: dy never decreases, dx increases within a row
        assert np.all(np.diff(dy) >= 0)
        same_row = np.diff(dy) == 0
        assert np.all(np.diff(dx)[same_row] > 0)

    dy, dx = utils.create_disk_offsets(1)
    assert list(zip(dy, dx)) == [(-1, 0), (0, -1), (0, 0), (0, 1), (1, 0)]
    print("  ✓ Disk offsets test passed\n")


def test_round_half_up():
    """Test JavaScript-style rounding of halves."""
    assert list(utils.round_half_up([0.5, 1.5, 2.5, 2.4, 127.5])) == [1.0, 2.0, 3.0, 2.0, 128.0]
    assert utils.round_half_up_int(332.5) == 333
    assert utils.round_half_up_int(0.49) == 0


def test_step_performance():
    """Test stepper and color mapper throughput."""
    print("Testing stepper and color mapper...")

    params = SimulationParams(Du=0.16, Dv=0.08, F=0.029, k=0.057)
    for size in [64, 128, 256]:
        grid = GridState(size)
        seed_grid(grid, "rdx")
        start = time.time()
        for _ in range(50):
            step(grid, params)
        step_time = time.time() - start

        start = time.time()
        for _ in range(50):
            pixels = to_rgba(grid)
        color_time = time.time() - start
        print(f"  Size {size}x{size}: step {step_time:.4f}s, color {color_time:.4f}s for 50 iterations")
        assert pixels.shape == (size, size, 4)
        assert np.all(np.isfinite(grid.u))
        assert np.all(np.isfinite(grid.v))
    print("  ✓ Stepper and color mapper test passed\n")


if __name__ == "__main__":
    print("=" * 60)
    print("Gray-Scott Performance Tests")
    print("=" * 60 + "\n")

    test_laplacian_performance()
    test_laplacian_wraps_edges()
    test_wrap_index()
    test_disk_offsets()
    test_round_half_up()
    test_step_performance()

    print("=" * 60)
    print("All performance tests passed! ✓")
    print("=" * 60)
