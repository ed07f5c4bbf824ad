"""Iterators over the elements of a (triangulated) Graph
"""
from math import pi

from dctri.delaunay.geometry import subtract
from dctri.delaunay.preds import ccw_angle, cw_angle


class TriangleIterator(object):
    """Iterator over all triangular faces of the graph. Every face is output
    once, with its vertices in counter-clockwise order.

    The face on a side of an edge a-b is closed by the neighbour of a that
    comes first when turning away from b to that side; a triple of mutually
    adjacent vertices that has another vertex inside is not a face.

    A face is found via its edge between the two vertices with the lowest
    graph index.
    """

    def __init__(self, graph):
        self.graph = graph
        self.edge_idx = 0
        self.pending = []

    def __iter__(self):
        return self

    def __next__(self):
        while not self.pending:
            if self.edge_idx >= len(self.graph.edges):
                raise StopIteration()
            edge = self.graph.edges[self.edge_idx]
            self.edge_idx += 1
            a, b = edge.start, edge.end
            if a.graph_index > b.graph_index:
                a, b = b, a
            apex = self._apex(a, b, ccw_angle)
            if apex is not None:
                self.pending.append((a, b, apex))
            apex = self._apex(a, b, cw_angle)
            if apex is not None:
                self.pending.append((b, a, apex))
        return self.pending.pop(0)

    def _apex(self, a, b, angle):
        """Third vertex of the face on one side of a-b, or None if that face
        is not a triangle or is reached via a lower edge"""
        direction = subtract(b, a)
        best = None
        opt = pi
        for nbr in a.neighbours():
            ang = angle(direction, subtract(nbr, a))
            if 0 < ang < opt:
                best = nbr
                opt = ang
        if best is None or best.graph_index < b.graph_index or \
                not best.is_neighbour_of(b):
            return None
        return best


class SegmentIterator(object):
    """Iterator over the edges of the graph, giving for every edge the
    coordinates of its end points: ((x0, y0), (x1, y1))
    """

    def __init__(self, graph):
        self.graph = graph
        self.current_idx = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self.current_idx >= len(self.graph.edges):
            raise StopIteration()
        edge = self.graph.edges[self.current_idx]
        self.current_idx += 1
        return ((edge.start.x, edge.start.y), (edge.end.x, edge.end.y))
