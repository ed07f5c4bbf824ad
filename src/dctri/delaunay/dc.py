"""Divide-and-conquer Delaunay triangulation of the vertices of a Graph.
"""

import logging
import os
import time
from math import pi

from dctri.delaunay.geometry import LineSegment, subtract, down
from dctri.delaunay.graph import Graph
from dctri.delaunay.preds import EPS, INSIDE, close, collinear, cross, \
    in_circle
from dctri.delaunay.inout import output_vertices, output_edges, \
    output_triangles
from dctri.delaunay.iter import TriangleIterator

# the two halves of a merge
LEFT = 0
RIGHT = 1


class MergeError(Exception):
    """Raised when merging two triangulations tries to insert an edge that
    is already present"""


def lexicographic(vertex):
    """Sort key: x first, then y"""
    return (vertex.x, vertex.y)


def identity(geometry):
    return geometry


class DelaunayTriangulator(object):
    """Computes the Delaunay triangulation of the vertices of a graph,
    in O(V log V) time, with the divide-and-conquer algorithm.

    The existing edges of the graph are removed, and the edges of the
    triangulation are added instead. Every edge gets as geometry what the
    cloner makes of the LineSegment between its end points.

    Calling run() again will recompute the triangulation.
    """

    __slots__ = ('graph', 'cloner', 'eps', 'vertices', 'graph_to_sorted',
                 'merges', 'removals')

    def __init__(self, graph, cloner=None, eps=EPS):
        self.graph = graph
        self.cloner = cloner if cloner is not None else identity
        self.eps = eps
        self.vertices = []
        self.graph_to_sorted = None
        self.merges = 0
        self.removals = 0

    def run(self):
        """Triangulate the vertices of the graph"""
        self.merges = 0
        self.removals = 0

        start = time.perf_counter()
        self.graph.clear_edges()
        self.vertices = sorted(self.graph.vertices, key=lexicographic)
        self.graph_to_sorted = [None] * len(self.vertices)
        for i, v in enumerate(self.vertices):
            self.graph_to_sorted[v.graph_index] = i
        end = time.perf_counter()
        logging.debug("Sorting points: " + str(end - start) + " secs")

        start = time.perf_counter()
        try:
            self.compute(0, len(self.vertices))
        except MergeError as err:
            logging.error("Unexpected situation in computing DT: "
                          "{}".format(err))
        finally:
            self.graph_to_sorted = None
            self.vertices = []
        end = time.perf_counter()

        logging.debug("Triangulating took: " + str(end - start) + " secs")
        logging.debug("{} vertices".format(len(self.graph.vertices)))
        logging.debug("{} edges".format(len(self.graph.edges)))
        logging.debug("{} merges".format(self.merges))
        logging.debug("{} edges removed while merging".format(self.removals))

    def compute(self, low, high):
        """Computes the DT on the sorted vertices in the [low, high) interval

        Returns the vertex with lowest y-coordinate
        (None if the interval is empty)
        """
        size = high - low
        if size == 0:
            return None
        elif size == 1:
            # one vertex
            return self.vertices[low]
        elif size == 2:
            # one line segment
            u, v = self.vertices[low], self.vertices[low + 1]
            self.add_edge(u, v)
            return u if u.y <= v.y else v
        elif size == 3:
            # one triangle, or two segments if the three are on a line
            u, v, w = self.vertices[low:high]
            self.add_edge(u, v)
            self.add_edge(v, w)
            if not collinear(u, v, w, self.eps):
                self.add_edge(w, u)
            if u.y <= v.y and u.y <= w.y:
                return u
            return v if v.y <= w.y else w

        mid = (low + high) // 2
        u = self.compute(low, mid)
        v = self.compute(mid, high)
        if u is None or v is None:
            return None
        return self.merge(u, v, mid)

    def merge(self, u, v, mid):
        """Merges the triangulation left of mid, with lowest vertex u,
        and the one right of mid, with lowest vertex v.
        """
        self.merges += 1
        lowest = u if u.y <= v.y else v

        # -- walk along both hulls to the lower common tangent
        while True:
            prev_u, prev_v = u, v
            u = self.shift_hull(u, v, mid, LEFT)
            v = self.shift_hull(v, u, mid, RIGHT)
            if u is prev_u and v is prev_v:
                break

        # -- the tangent is the base edge, from here we zip upwards
        self.add_edge(u, v)
        u_cand = self.candidate(u, v, mid, LEFT)
        v_cand = self.candidate(v, u, mid, RIGHT)
        while u_cand is not None or v_cand is not None:
            if u_cand is not None and v_cand is not None:
                if in_circle(u, v, u_cand, v_cand, self.eps) == INSIDE:
                    u_cand = None
                else:
                    v_cand = None

            if u_cand is not None:
                if self.add_edge(u_cand, v):
                    raise MergeError("trying to add an existing edge "
                                     "({}, {})".format(u_cand, v))
                u = u_cand
            else:
                if self.add_edge(u, v_cand):
                    raise MergeError("trying to add an existing edge "
                                     "({}, {})".format(u, v_cand))
                v = v_cand

            u_cand = self.candidate(u, v, mid, LEFT)
            v_cand = self.candidate(v, u, mid, RIGHT)
        return lowest

    def add_edge(self, u, v):
        """Adds an edge between u and v

        Returns whether the edge was present already (then nothing is added)
        """
        if u.is_neighbour_of(v):
            return True
        segment = LineSegment(u.clone(), v.clone())
        self.graph.add_edge(u, v, self.cloner(segment))
        return False

    def shift_hull(self, vertex, other, mid, side):
        """Moves vertex along the hull of its side of the triangulation,
        as long as the line to other does not become a tangent."""
        xalign = close(vertex.x, other.x, self.eps)
        direction = down()
        bound = pi + self.eps
        to_other = subtract(other, vertex)

        if side == LEFT:
            nxt = self.find_first(vertex, direction, mid, side, bound)
            while nxt is not None and \
                    cross(to_other, subtract(nxt, vertex)) <= 0:
                vertex = nxt
                nxt = self.find_first(vertex, direction, mid, side, bound)
                to_other = subtract(other, vertex)
            if not xalign:
                prev = self.find_last(vertex, direction, mid, side, bound)
                while prev is not None and \
                        cross(to_other, subtract(prev, vertex)) < 0:
                    vertex = prev
                    prev = self.find_last(vertex, direction, mid, side, bound)
                    to_other = subtract(other, vertex)
        else:
            if not xalign:
                nxt = self.find_first(vertex, direction, mid, side, bound)
                while nxt is not None and \
                        cross(to_other, subtract(nxt, vertex)) >= 0:
                    vertex = nxt
                    nxt = self.find_first(vertex, direction, mid, side, bound)
                    to_other = subtract(other, vertex)
            prev = self.find_last(vertex, direction, mid, side, bound)
            while prev is not None and \
                    cross(to_other, subtract(prev, vertex)) > 0:
                vertex = prev
                prev = self.find_last(vertex, direction, mid, side, bound)
                to_other = subtract(other, vertex)
        return vertex

    def candidate(self, vertex, other, mid, side):
        """Next vertex to connect to (seen from the base edge vertex-other),
        on the given side.

        Edges of vertex that turn out to be non-Delaunay are removed.
        """
        direction = subtract(other, vertex).normalize()
        bound = pi - self.eps
        first = self.find_first(vertex, direction, mid, side, bound)
        if first is None:
            return None
        second = self.find_second(vertex, direction, mid, side, bound)
        while second is not None and \
                in_circle(vertex, other, first, second, self.eps) == INSIDE:
            self.graph.remove_edge(vertex.edge_to(first))
            self.removals += 1
            first = second
            second = self.find_second(vertex, direction, mid, side, bound)
        return first

    def _angles(self, vertex, direction, mid, side, reverse=False):
        """Yields (angle, neighbour) for the neighbours of vertex on
        the given side of mid.

        Angles are counter-clockwise from direction for the LEFT side,
        clockwise for the RIGHT side (and the opposite if reverse is set).
        """
        ccw = (side == LEFT) != reverse
        for nbr in vertex.neighbours():
            pos = self.graph_to_sorted[nbr.graph_index]
            if side == LEFT and pos >= mid:
                continue
            elif side == RIGHT and pos < mid:
                continue
            edir = subtract(nbr, vertex).normalize()
            if ccw:
                yield direction.ccw_angle_to(edir), nbr
            else:
                yield direction.cw_angle_to(edir), nbr

    def find_first(self, vertex, direction, mid, side, bound):
        best = None
        opt = bound
        for a, nbr in self._angles(vertex, direction, mid, side):
            if 0 < a < opt:
                best = nbr
                opt = a
        return best

    def find_second(self, vertex, direction, mid, side, bound):
        best = None
        opt = bound
        sec = None
        sec_opt = bound
        for a, nbr in self._angles(vertex, direction, mid, side):
            if a < opt:
                sec, sec_opt = best, opt
                best, opt = nbr, a
            elif a < sec_opt:
                sec, sec_opt = nbr, a
        return sec

    def find_last(self, vertex, direction, mid, side, bound):
        # swapped angular sense wrt find_first / find_second
        best = None
        opt = bound
        for a, nbr in self._angles(vertex, direction, mid, side, reverse=True):
            if 0 < a < opt:
                best = nbr
                opt = a
        return best


def triangulate(pts, infos=None, eps=EPS, output=None):
    """Triangulate a set of points

    Returns a Graph with a vertex for every point and the edges of the
    Delaunay triangulation. The info of every vertex is taken from infos,
    or is the index of the point in pts when infos is not given.

    If output is given, it is the name of a directory, to which the
    result is written as WKT files.
    """
    if infos is not None and len(infos) != len(pts):
        raise ValueError("Expected {} infos, got {}".format(len(pts),
                                                              len(infos)))
    start = time.perf_counter()
    graph = Graph()
    seen = set()
    for idx, pt in enumerate(pts):
        if len(pt) != 2:
            raise ValueError("Expected 2D point, got {}".format(pt))
        x, y = float(pt[0]), float(pt[1])
        if (x, y) in seen:
            raise ValueError("Duplicate point found for insertion")
        seen.add((x, y))
        v = graph.add_vertex(x, y)
        v.info = infos[idx] if infos is not None else idx
    end = time.perf_counter()
    logging.debug("Building graph: " + str(end - start) + " secs")

    DelaunayTriangulator(graph, eps=eps).run()

    if output:
        with open(os.path.join(output, "all_vertices.wkt"), "w") as fh:
            output_vertices(graph.vertices, fh)
        with open(os.path.join(output, "all_edges.wkt"), "w") as fh:
            output_edges(graph.edges, fh)
        with open(os.path.join(output, "all_tris.wkt"), "w") as fh:
            output_triangles(TriangleIterator(graph), fh)
    return graph


def edges(graph):
    """Iterates over the edges of graph, as pairs of the info of the vertices
    """
    for e in graph.edges:
        yield e.start.info, e.end.info
