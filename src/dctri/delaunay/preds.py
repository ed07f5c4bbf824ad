"""Epsilon-tolerant geometric predicates.

All functions accept anything indexable as a point (tuples, Vector and Vertex
objects), with p[0] the x- and p[1] the y-coordinate.
"""

from math import atan2, pi

# -- default tolerance for imprecision
EPS = 0.000001

# orientation of three points
LEFT = 1
COLLINEAR = 0
RIGHT = -1

# outcome of the in-circle test
INSIDE = 1
OUTSIDE = 0
DEGENERATE = -1


def close(a, b, eps=EPS):
    """Returns whether |a - b| <= eps"""
    return abs(a - b) <= eps


def cross(a, b):
    """Cross product of two vectors (z-component of the 3D cross product)"""
    return a[0] * b[1] - a[1] * b[0]


def dot(a, b):
    """Dot product of two vectors"""
    return a[0] * b[0] + a[1] * b[1]


def orientation(u, v, w, eps=EPS):
    """Direction from u to w, via v, where returned value is as follows:

    left:     LEFT  [ = ccw ]
    straight: COLLINEAR (signed area within eps)
    right:    RIGHT [ = cw ]

    Note that eps is compared with the cross product of v - u and w - u
    (twice the signed area of the triangle), so the tolerance is not scale
    invariant: for coordinates in the order of sqrt(eps) every triple is
    collinear. Scale the input (or eps) accordingly.
    """
    det = cross((v[0] - u[0], v[1] - u[1]), (w[0] - u[0], w[1] - u[1]))
    if close(det, 0., eps):
        return COLLINEAR
    elif det > 0:
        return LEFT
    else:
        return RIGHT


def collinear(u, v, w, eps=EPS):
    return orientation(u, v, w, eps) == COLLINEAR


def ccw_angle(a, b):
    """Counter-clockwise angle, in [0, 2*pi), to turn vector a onto vector b
    """
    angle = atan2(cross(a, b), dot(a, b))
    if angle < 0:
        angle += 2 * pi
    return angle


def cw_angle(a, b):
    """Clockwise angle, in [0, 2*pi), to turn vector a onto vector b
    """
    angle = ccw_angle(a, b)
    if angle == 0:
        return angle
    return 2 * pi - angle


def circumcenter(a, b, c):
    """Center of the circle through a, b and c

    Returns None if the three points are exactly collinear (there is no such
    circle then).
    """
    bx, by = b[0] - a[0], b[1] - a[1]
    cx, cy = c[0] - a[0], c[1] - a[1]
    d = 2. * (bx * cy - by * cx)
    if d == 0:
        return None
    b2 = bx * bx + by * by
    c2 = cx * cx + cy * cy
    ux = (cy * b2 - by * c2) / d
    uy = (bx * c2 - cx * b2) / d
    return (a[0] + ux, a[1] + uy)


def in_circle(a, b, c, d, eps=EPS):
    """Tests whether d lies strictly inside the circle defined by a, b and c

    Returns INSIDE if d is further than eps inside the circle,
    OUTSIDE if it is not, and DEGENERATE if a, b and c are collinear.
    """
    center = circumcenter(a, b, c)
    if center is None:
        return DEGENERATE
    radius = _distance(center, a)
    if _distance(center, d) < radius - eps:
        return INSIDE
    else:
        return OUTSIDE


def _distance(p, q):
    return ((p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2) ** 0.5
