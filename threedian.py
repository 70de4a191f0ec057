import numpy as np
import matplotlib.pyplot as plt

from half_plane_triangle import ConcreteTriangle
from monte_carlo_area import (
    SAMPLES,
    estimate_area_vectorized,
    estimate_concrete_triangle_area,
    estimate_triangle_area,
)
from point2d import Point2D

# Print every sample point and its classification
LOG_SAMPLES = False
# Use the numpy path instead of the per-point loop (ignored when logging samples)
VECTORIZED = False
SEED = None

EXAMPLE_TRIANGLES = [
    (0, 0, 1, 0, 0, 1),
    (-3, -2, 6, -7, -2, 5),
]


def run_self_checks(rng=None, sample_count=SAMPLES):
    rng = np.random.default_rng(rng)

    tri = ConcreteTriangle(0, 0, 1, 0, 0, 1)
    assert tri.test_point(Point2D(.1, .1))
    assert not tri.test_point(Point2D(-.1, .1))
    assert not tri.test_point(Point2D(.1, -.1))
    assert not tri.test_point(Point2D(1, 1))

    a = estimate_concrete_triangle_area(tri, sample_count, rng)
    assert abs(a - .5) < .01, a

    tri = ConcreteTriangle(0, 0, 10, 0, 0, 20)
    assert tri.test_point(Point2D(2, 2))
    a = estimate_concrete_triangle_area(tri, sample_count, rng)
    assert abs(a - 100) < 1, a

    tri = ConcreteTriangle(0 - 1, 0 + 2, 1 - 1, 0 + 2, 0 - 1, 1 + 2)
    a = estimate_concrete_triangle_area(tri, sample_count, rng)
    assert abs(a - .5) < .01, a

    tri = ConcreteTriangle(-3, -2, 6, -7, -2, 5)
    a = estimate_concrete_triangle_area(tri, sample_count, rng)
    assert abs(a - 34) < .5, a


def threedian_calc(tri, rng=None, sample_count=SAMPLES, diagnostics=False, vectorized=False):
    """
    Estimate the areas of a triangle and of its threedian and print them.

    The threedian is sampled over the outer triangle's bounding box.

    Returns:
    --------
    a, ta, ratio : float
        Full area, threedian area and ta / a (nan when a is zero)
    """
    rng = np.random.default_rng(rng)
    threed = tri.create_inner_sub_triangle()
    width, height, origin_x, origin_y = tri.sampling_rectangle()

    if vectorized and not diagnostics:
        a = estimate_area_vectorized(tri, width, height, origin_x, origin_y, sample_count, rng)
        ta = estimate_area_vectorized(threed, width, height, origin_x, origin_y, sample_count, rng)
    else:
        a = estimate_concrete_triangle_area(tri, sample_count, rng, diagnostics)
        ta = estimate_triangle_area(threed, width, height, origin_x, origin_y,
                                    sample_count, rng, diagnostics)

    ratio = ta / a if a != 0 else float("nan")

    print(f"Full Area: {a} Threed Area: {ta} Ratio: {ratio}")
    return a, ta, ratio


def plot_threedian(tri, sample_count=20000, rng=None, show=True):
    """
    Scatter plot of uniform samples over the bounding box, coloured by
    membership in the triangle and in its threedian.
    """
    rng = np.random.default_rng(rng)
    threed = tri.create_inner_sub_triangle()
    width, height, origin_x, origin_y = tri.sampling_rectangle()

    u = rng.random((sample_count, 2))
    xs = u[:, 0] * width + origin_x
    ys = u[:, 1] * height + origin_y
    in_full = tri.test_points(xs, ys)
    in_threed = threed.test_points(xs, ys)

    fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    outside = ~in_full
    ax.scatter(xs[outside], ys[outside], c='lightgray', s=2, alpha=0.5, label='Outside')
    ring = in_full & ~in_threed
    ax.scatter(xs[ring], ys[ring], c='blue', s=2, alpha=0.5, label='Triangle')
    ax.scatter(xs[in_threed], ys[in_threed], c='red', s=2, alpha=0.7, label='Threedian')

    vertices = np.array([v.to_array() for v in tri.vertices + tri.vertices[:1]])
    ax.plot(vertices[:, 0], vertices[:, 1], 'k-', linewidth=2)

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(f'Threedian Sampling ({sample_count} points, '
                 f'ratio ~ {np.sum(in_threed) / max(np.sum(in_full), 1):.4f})')
    ax.legend()
    ax.grid(True, alpha=0.3)
    ax.set_aspect('equal', adjustable='box')

    plt.tight_layout()
    if show:
        plt.show()
    return fig


def main():
    rng = np.random.default_rng(SEED)

    run_self_checks(rng)

    for coords in EXAMPLE_TRIANGLES:
        tri = ConcreteTriangle(*coords)
        threedian_calc(tri, rng, diagnostics=LOG_SAMPLES, vectorized=VECTORIZED)


if __name__ == "__main__":
    main()
