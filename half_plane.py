import numpy as np
from dataclasses import dataclass

from point2d import Point2D, dot, subtract


@dataclass(frozen=True)
class HalfPlane:
    """
    Points on the left of the directed line p1 -> p2, boundary included.

    The set is {p | dot(p, normal) >= offset}. A plane built from two equal
    points has a zero normal and accepts every point (0 >= 0).
    """
    normal: Point2D
    offset: float

    @classmethod
    def through(cls, p1, p2):
        edge = subtract(p2, p1)
        # Edge rotated 90 degrees counterclockwise
        normal = Point2D(-edge.y, edge.x)
        return cls(normal, dot(normal, p1))

    def test(self, point):
        return dot(point, self.normal) >= self.offset

    def test_points(self, xs, ys):
        """
        Vectorized version of test.

        Parameters:
        -----------
        xs, ys : array-like, same shape
            Coordinates of the points to classify

        Returns:
        --------
        inside : ndarray of bool, same shape as xs
        """
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        return xs * self.normal.x + ys * self.normal.y >= self.offset
