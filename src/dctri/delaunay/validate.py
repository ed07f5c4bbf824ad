"""Checks for the output of the triangulation.

These use the robust (adaptive precision) predicates of geompreds, so that
they do not share the round-off behaviour of the epsilon-tolerant predicates
used while triangulating.
"""
import logging

from geompreds import orient2d, incircle

from dctri.delaunay.geometry import Circle
from dctri.delaunay.iter import TriangleIterator
from dctri.delaunay.preds import EPS


def _xy(v):
    return (v[0], v[1])


def _between(p, q, r):
    """For r collinear with p and q: is r on segment pq (but not at p or q)?
    """
    if (r[0], r[1]) in ((p[0], p[1]), (q[0], q[1])):
        return False
    return min(p[0], q[0]) <= r[0] <= max(p[0], q[0]) and \
        min(p[1], q[1]) <= r[1] <= max(p[1], q[1])


def crosses(e, f):
    """Do the segments of edges e and f have a point in common, other than a
    shared end point?
    """
    a, b = _xy(e.start), _xy(e.end)
    c, d = _xy(f.start), _xy(f.end)
    o1 = orient2d(a, b, c)
    o2 = orient2d(a, b, d)
    o3 = orient2d(c, d, a)
    o4 = orient2d(c, d, b)
    if ((o1 > 0 and o2 < 0) or (o1 < 0 and o2 > 0)) and \
            ((o3 > 0 and o4 < 0) or (o3 < 0 and o4 > 0)):
        # proper crossing (impossible when an end point is shared)
        return True
    # touching / overlapping
    return (o1 == 0 and _between(a, b, c)) or \
        (o2 == 0 and _between(a, b, d)) or \
        (o3 == 0 and _between(c, d, a)) or \
        (o4 == 0 and _between(c, d, b))


def is_planar(graph):
    """Returns whether no two edges of the graph cross"""
    edges = graph.edges
    for i in range(len(edges)):
        for j in range(i + 1, len(edges)):
            if crosses(edges[i], edges[j]):
                logging.warning("Edges {} and {} cross".format(edges[i],
                                                               edges[j]))
                return False
    return True


def is_delaunay(graph, eps=EPS):
    """Returns whether no vertex of the graph lies strictly inside (more than
    eps) the circumcircle of a triangle of the graph
    """
    for a, b, c in TriangleIterator(graph):
        pa, pb, pc = _xy(a), _xy(b), _xy(c)
        circle = Circle.by_three_points(a, b, c)
        if circle is None:
            continue
        for v in graph.vertices:
            if v is a or v is b or v is c:
                continue
            if incircle(pa, pb, pc, _xy(v)) > 0 and circle.contains(v, eps):
                logging.warning("{} inside circumcircle of "
                                "triangle {}, {}, {}".format(v, a, b, c))
                return False
    return True
