import numpy as np

from half_plane import HalfPlane
from point2d import Point2D, add, component_max, component_min, scale, subtract


class Triangle:
    """
    Membership region given by exactly three half-planes.

    A point is inside when every plane accepts it. The planes carry their own
    orientation, so a triangle whose planes face away from each other is empty.
    """

    def __init__(self, planes):
        planes = tuple(planes)
        if len(planes) != 3:
            raise ValueError(f"A triangle needs exactly 3 half-planes, got {len(planes)}")
        self.planes = planes

    def test_point(self, point):
        for plane in self.planes:
            if not plane.test(point):
                return False
        return True

    __call__ = test_point

    def test_points(self, xs, ys):
        inside = np.ones(np.shape(xs), dtype=bool)
        for plane in self.planes:
            inside &= plane.test_points(xs, ys)
        return inside

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self.planes == other.planes

    def __hash__(self):
        return hash(self.planes)

    def __repr__(self):
        return f"Triangle({list(self.planes)!r})"


class ConcreteTriangle:
    """
    Triangle given by its vertices v0, v1, v2.

    The edge planes are built in the order (v0, v1), (v1, v2), (v2, v0), so
    the enclosed area is "inside" only for counterclockwise vertices. Clockwise
    input is not corrected and gives an empty region.

    Attributes:
    -----------
    vertices : tuple of Point2D
    region : Triangle
        The three edge half-planes
    bounding_min, bounding_max : Point2D
        Corners of the axis-aligned bounding box
    """

    def __init__(self, x0, y0, x1, y1, x2, y2):
        v0 = Point2D(float(x0), float(y0))
        v1 = Point2D(float(x1), float(y1))
        v2 = Point2D(float(x2), float(y2))
        self.vertices = (v0, v1, v2)

        self.region = Triangle([
            HalfPlane.through(v0, v1),
            HalfPlane.through(v1, v2),
            HalfPlane.through(v2, v0),
        ])

        self.bounding_min = component_min(component_min(v0, v1), v2)
        self.bounding_max = component_max(component_max(v0, v1), v2)

    @classmethod
    def from_points(cls, v0, v1, v2):
        return cls(v0.x, v0.y, v1.x, v1.y, v2.x, v2.y)

    @property
    def planes(self):
        return self.region.planes

    def test_point(self, point):
        return self.region.test_point(point)

    __call__ = test_point

    def test_points(self, xs, ys):
        return self.region.test_points(xs, ys)

    def sampling_rectangle(self):
        """Bounding box as (width, height, origin_x, origin_y)."""
        size = subtract(self.bounding_max, self.bounding_min)
        return size.x, size.y, self.bounding_min.x, self.bounding_min.y

    def create_inner_sub_triangle(self):
        """
        Build the threedian: the triangle cut out by the segments joining each
        vertex to the point one third along the opposite edge.

        Only the half-planes are returned. The threedian's own vertices are
        never computed, so callers sample it over this triangle's bounding box.
        """
        v0, v1, v2 = self.vertices
        third = 1.0 / 3.0
        q01 = add(v0, scale(subtract(v1, v0), third))
        q12 = add(v1, scale(subtract(v2, v1), third))
        q20 = add(v2, scale(subtract(v0, v2), third))

        return Triangle([
            HalfPlane.through(v0, q12),
            HalfPlane.through(v1, q20),
            HalfPlane.through(v2, q01),
        ])

    def __repr__(self):
        coords = ", ".join(f"({v.x}, {v.y})" for v in self.vertices)
        return f"ConcreteTriangle({coords})"
