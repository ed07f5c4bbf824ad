"""Helpers: random point sets (for testing purposes) and the convex hull
"""
from math import sqrt, pi, cos, sin
from random import randint, random

from dctri.delaunay.preds import cross

# ------------------------------------------------------------------------------
# Generate randomized point sets
#


def random_sorted_vertices(n=10):
    """Returns a sorted list with (at most) n random vertices on a grid,
    duplicates removed
    """
    vertices = []
    for _ in range(n):
        x = randint(0, n)
        y = randint(0, n)
        vertices.append((x / float(n), y / float(n)))
    vertices = list(set(vertices))
    vertices.sort()
    return vertices


def random_circle_vertices(n=10, cx=0, cy=0):
    """Returns a list with n random vertices in a circle

    Method according to:

    http://www.anderswallin.net/2009/05/uniform-random-points-in-a-circle-using-polar-coordinates/
    """
    vertices = []
    for _ in range(n):
        r = sqrt(random())
        t = 2 * pi * random()
        x = r * cos(t)
        y = r * sin(t)
        vertices.append((x + cx, y + cy))
    vertices = list(set(vertices))
    vertices.sort()
    return vertices


# ------------------------------------------------------------------------------
# Convex hull
#

def convex_hull(points):
    """Convex hull of points (Andrew's monotone chain), as list of the
    points on the hull in counter-clockwise order.

    Points in the interior of a hull edge are not part of the hull.
    """
    pts = sorted(set((p[0], p[1]) for p in points))
    if len(pts) <= 2:
        return pts

    def turn(o, a, b):
        return cross((a[0] - o[0], a[1] - o[1]), (b[0] - o[0], b[1] - o[1]))

    lower = []
    for p in pts:
        while len(lower) >= 2 and turn(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)
    upper = []
    for p in reversed(pts):
        while len(upper) >= 2 and turn(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    return lower[:-1] + upper[:-1]
