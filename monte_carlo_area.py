import numpy as np

from point2d import Point2D

SAMPLES = 1000000


def _make_rng(rng):
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def _check_arguments(width, height, origin_x, origin_y, sample_count):
    if isinstance(sample_count, bool) or not isinstance(sample_count, (int, np.integer)):
        raise ValueError(f"sample_count must be an integer, got {sample_count!r}")
    if sample_count <= 0:
        raise ValueError(f"sample_count must be positive, got {sample_count}")
    for name, value in (("width", width), ("height", height),
                        ("origin_x", origin_x), ("origin_y", origin_y)):
        if np.ndim(value) != 0:
            raise ValueError(f"{name} must be a scalar, got {value!r}")
        if not np.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value}")


def print_sample(point, inside):
    print(f"({point.x}, {point.y}) -> {inside}")


def estimate_area(predicate, width=1.0, height=1.0, origin_x=0.0, origin_y=0.0,
                  sample_count=SAMPLES, rng=None, diagnostics=False):
    """
    Monte Carlo estimate of the area of a region inside a rectangle.

    Points are drawn uniformly in [origin_x, origin_x + width) x
    [origin_y, origin_y + height) and classified with predicate. The estimate
    is the rectangle area times the fraction of points inside.

    Parameters:
    -----------
    predicate : callable
        predicate(Point2D) -> bool
    width, height, origin_x, origin_y : float
        Sampling rectangle
    sample_count : int
        Number of samples, must be positive
    rng : numpy.random.Generator, int or None
        Random source, or a seed for a new one. None gives an unseeded generator.
    diagnostics : bool or callable
        True prints every sample, a callable is called as sink(point, inside).
        Does not change the result.

    Returns:
    --------
    area : float
    """
    _check_arguments(width, height, origin_x, origin_y, sample_count)
    rng = _make_rng(rng)
    if diagnostics is True:
        sink = print_sample
    elif callable(diagnostics):
        sink = diagnostics
    else:
        sink = None

    count = 0
    for _ in range(sample_count):
        x = rng.random() * width + origin_x
        y = rng.random() * height + origin_y
        pt = Point2D(x, y)

        inside = predicate(pt)
        if sink is not None:
            sink(pt, inside)
        if inside:
            count += 1

    return width * height * count / sample_count


def estimate_triangle_area(triangle, width=1.0, height=1.0, origin_x=0.0, origin_y=0.0,
                           sample_count=SAMPLES, rng=None, diagnostics=False):
    return estimate_area(triangle.test_point, width, height, origin_x, origin_y,
                         sample_count=sample_count, rng=rng, diagnostics=diagnostics)


def estimate_concrete_triangle_area(triangle, sample_count=SAMPLES, rng=None, diagnostics=False):
    """Estimate over the triangle's own bounding box."""
    width, height, origin_x, origin_y = triangle.sampling_rectangle()
    return estimate_triangle_area(triangle.region, width, height, origin_x, origin_y,
                                  sample_count=sample_count, rng=rng, diagnostics=diagnostics)


def estimate_area_vectorized(region, width=1.0, height=1.0, origin_x=0.0, origin_y=0.0,
                             sample_count=SAMPLES, rng=None):
    """
    Vectorized version of estimate_area for regions with test_points.
    Same parameters and returns as estimate_area, without diagnostics.

    The uniforms are consumed in the same order as the scalar loop (x then y
    for each sample), so a generator in the same state gives the same points.
    """
    _check_arguments(width, height, origin_x, origin_y, sample_count)
    rng = _make_rng(rng)

    u = rng.random((sample_count, 2))
    xs = u[:, 0] * width + origin_x
    ys = u[:, 1] * height + origin_y
    count = int(np.count_nonzero(region.test_points(xs, ys)))

    return width * height * count / sample_count
