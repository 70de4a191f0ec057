import numpy as np
from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    def __add__(self, other):
        return add(self, other)

    def __sub__(self, other):
        return subtract(self, other)

    def __mul__(self, k):
        return scale(self, k)

    def dot(self, other):
        return dot(self, other)

    def to_array(self):
        return np.array([self.x, self.y], dtype=np.float64)


ORIGIN = Point2D(0.0, 0.0)


def add(a, b):
    return Point2D(a.x + b.x, a.y + b.y)


def subtract(a, b):
    return Point2D(a.x - b.x, a.y - b.y)


def scale(a, k):
    return Point2D(a.x * k, a.y * k)


def dot(a, b):
    return a.x * b.x + a.y * b.y


def component_min(a, b):
    # np.minimum keeps NaN whatever its position
    return Point2D(float(np.minimum(a.x, b.x)), float(np.minimum(a.y, b.y)))


def component_max(a, b):
    return Point2D(float(np.maximum(a.x, b.x)), float(np.maximum(a.y, b.y)))
