"""Geometric primitives used by the graph and the triangulation:
Vector, LineSegment and Circle.
"""
from math import hypot

from dctri.delaunay.preds import EPS, ccw_angle, cw_angle, circumcenter


class Vector(object):
    """A 2D point / direction.
    """
    __slots__ = ('x', 'y')

    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __str__(self):
        return "{0} {1}".format(self.x, self.y)

    def __repr__(self):
        return "{0}({1!r}, {2!r})".format(type(self).__name__, self.x, self.y)

    def __getitem__(self, i):
        if i == 0:
            return self.x
        elif i == 1:
            return self.y
        else:
            raise IndexError("No such ordinate: {}".format(i))

    def __len__(self):
        return 2

    def __add__(self, other):
        return Vector(self.x + other[0], self.y + other[1])

    def __sub__(self, other):
        return Vector(self.x - other[0], self.y - other[1])

    def __mul__(self, factor):
        return Vector(self.x * factor, self.y * factor)

    def clone(self):
        """Plain Vector copy of the location (sub-class data is not copied)"""
        return Vector(self.x, self.y)

    def set(self, x, y):
        self.x = x
        self.y = y

    @property
    def length(self):
        return hypot(self.x, self.y)

    @property
    def squared_length(self):
        return self.x * self.x + self.y * self.y

    def normalize(self):
        """Scales this vector to unit length, in place

        A zero vector is left untouched.
        """
        length = self.length
        if length > 0:
            self.x /= length
            self.y /= length
        return self

    def distance(self, other):
        """Cartesian distance to other point """
        return hypot(self.x - other[0], self.y - other[1])

    def distance2(self, other):
        """Cartesian distance *squared* to other point """
        return pow(self.x - other[0], 2) + pow(self.y - other[1], 2)

    def is_approximately(self, other, eps=EPS):
        return abs(self.x - other[0]) <= eps and abs(self.y - other[1]) <= eps

    def ccw_angle_to(self, other):
        return ccw_angle(self, other)

    def cw_angle_to(self, other):
        return cw_angle(self, other)


def subtract(a, b):
    """Vector pointing from b to a"""
    return Vector(a[0] - b[0], a[1] - b[1])


def down():
    """Unit vector pointing in negative y-direction"""
    return Vector(0., -1.)


class LineSegment(object):
    """Straight line segment between two locations"""
    __slots__ = ('start', 'end')

    def __init__(self, start, end):
        self.start = start
        self.end = end

    def __str__(self):
        return "LINESTRING({0}, {1})".format(self.start, self.end)

    def clone(self):
        return LineSegment(self.start.clone(), self.end.clone())

    def reverse(self):
        self.start, self.end = self.end, self.start

    def update_endpoints(self, start, end):
        """Moves the segment its end points to the given locations"""
        self.start = Vector(start[0], start[1])
        self.end = Vector(end[0], end[1])

    @property
    def direction(self):
        return subtract(self.end, self.start)

    @property
    def length(self):
        return self.start.distance(self.end)

    @property
    def squared_length(self):
        return self.start.distance2(self.end)


class Circle(object):
    __slots__ = ('center', 'radius')

    def __init__(self, center, radius):
        self.center = center
        self.radius = radius

    def __str__(self):
        return "CIRCLE({0}, {1})".format(self.center, self.radius)

    @staticmethod
    def by_three_points(a, b, c):
        """Circle through the three given points

        Returns None in case the points are collinear
        """
        center = circumcenter(a, b, c)
        if center is None:
            return None
        center = Vector(center[0], center[1])
        return Circle(center, center.distance(a))

    def contains(self, point, eps=EPS):
        """Is point strictly inside this circle, i.e. closer to the center
        than the radius minus eps?"""
        return self.center.distance(point) < self.radius - eps
