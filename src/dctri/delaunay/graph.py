"""Planar graph data structure

An undirected graph with an edge-list per vertex. Vertices and edges know
their (dense) position in the lists of the graph they belong to; removal
swaps the last element of a list into the freed slot, so that these indices
stay valid.

Vertex and edge objects are made by factories handed to the Graph, so that
callers can use sub-classes carrying extra information.
"""
import logging

from dctri.delaunay.geometry import Vector
from dctri.delaunay.preds import EPS


class Vertex(Vector):
    """A vertex in the graph.
    Can carry extra information via its info property.
    """
    __slots__ = ('graph_index', 'edges', 'info')

    def __init__(self, x, y, info=None):
        super(Vertex, self).__init__(x, y)
        self.graph_index = -1
        self.edges = []
        self.info = info

    @property
    def degree(self):
        return len(self.edges)

    def neighbours(self):
        """Iterates over the vertices adjacent to this vertex"""
        for edge in self.edges:
            yield edge.other_vertex(self)

    def edge_to(self, other):
        """Gets the edge connecting this vertex to other, None if there is none
        """
        for edge in self.edges:
            if edge.other_vertex(self) is other:
                return edge
        return None

    def is_neighbour_of(self, other):
        return self.edge_to(other) is not None


class Edge(object):
    """An edge connects two distinct vertices. It is used undirected, but its
    start / end orient the geometry that is attached to it.
    """
    __slots__ = ('start', 'end', 'geometry', 'graph_index', 'info')

    def __init__(self):
        self.start = None
        self.end = None
        self.geometry = None
        self.graph_index = -1
        self.info = None

    def __str__(self):
        return "LINESTRING({0}, {1})".format(self.start, self.end)

    def is_incident_to(self, vertex):
        return self.start is vertex or self.end is vertex

    def other_vertex(self, vertex):
        """Gets the endpoint that is not the given vertex"""
        if self.start is vertex:
            return self.end
        assert self.end is vertex, "Vertex is not an endpoint of this edge"
        return self.start


class Graph(object):
    """Graph data structure"""

    def __init__(self, vertex_factory=Vertex, edge_factory=Edge):
        self.vertices = []
        self.edges = []
        self.vertex_factory = vertex_factory
        self.edge_factory = edge_factory

    def verify(self):
        """Checks the index invariants, logs each violation found.

        Returns True when the graph is consistent.
        """
        ok = True
        for i, v in enumerate(self.vertices):
            if v.graph_index != i:
                logging.error("Vertex error: {} at {}".format(v.graph_index, i))
                ok = False
        for i, e in enumerate(self.edges):
            if e.graph_index != i:
                logging.error("Edge error: {} at {}".format(e.graph_index, i))
                ok = False
            if not self._has_vertex(e.start):
                logging.error("Edge origin error: {}".format(e))
                ok = False
            if not self._has_vertex(e.end):
                logging.error("Edge destin error: {}".format(e))
                ok = False
        return ok

    def _has_vertex(self, vertex):
        idx = vertex.graph_index
        return 0 <= idx < len(self.vertices) and self.vertices[idx] is vertex

    def _has_edge(self, edge):
        idx = edge.graph_index
        return 0 <= idx < len(self.edges) and self.edges[idx] is edge

    # -- vertices

    def add_vertex(self, x, y=None):
        """Adds a vertex, either at (x, y) or, if y is not given, at the
        location of point x
        """
        if y is None:
            x, y = x[0], x[1]
        vertex = self.vertex_factory(x, y)
        vertex.graph_index = len(self.vertices)
        self.vertices.append(vertex)
        return vertex

    def find_vertex(self, point, eps=EPS):
        """Gets a vertex at the location of point (within eps), or None"""
        for v in self.vertices:
            if v.is_approximately(point, eps):
                return v
        return None

    def remove_vertex(self, vertex):
        """Removes a vertex, together with its incident edges"""
        assert self._has_vertex(vertex), \
            "Trying to remove vertex from graph of which it is not a vertex..."
        for edge in reversed(vertex.edges[:]):
            self.remove_edge(edge)
        last = self.vertices.pop()
        if last is not vertex:
            self.vertices[vertex.graph_index] = last
            last.graph_index = vertex.graph_index
        vertex.graph_index = -1

    def sort_vertices(self, key):
        self.vertices.sort(key=key)
        for i, v in enumerate(self.vertices):
            v.graph_index = i

    # -- edges

    def is_neighbour_of(self, u, v):
        return u.is_neighbour_of(v)

    def add_edge(self, start, end, geometry):
        """Adds an edge between start and end.

        If the two vertices are adjacent already, the existing edge is
        returned (and geometry is not used).
        """
        assert start is not None, "Origin is null..."
        assert end is not None, "Destination is null..."
        assert start is not end, "Edge should connect two different vertices"
        assert self._has_vertex(start), \
            "Origin of edge is not part of this graph!"
        assert self._has_vertex(end), \
            "Destination of edge is not part of this graph!"
        edge = start.edge_to(end)
        if edge is None:
            edge = self.edge_factory()
            edge.start = start
            edge.end = end
            edge.geometry = geometry
            _update_geometry(edge)
            start.edges.append(edge)
            end.edges.append(edge)
            edge.graph_index = len(self.edges)
            self.edges.append(edge)
        return edge

    def remove_edge(self, edge):
        assert self._has_edge(edge), \
            "Trying to remove edge from graph of which it is not an edge..."
        edge.start.edges.remove(edge)
        edge.end.edges.remove(edge)
        last = self.edges.pop()
        if last is not edge:
            self.edges[edge.graph_index] = last
            last.graph_index = edge.graph_index
        edge.graph_index = -1

    def sort_edges(self, key):
        self.edges.sort(key=key)
        for i, e in enumerate(self.edges):
            e.graph_index = i

    def clear_edges(self):
        """Removes all edges, keeps the vertices"""
        while self.edges:
            self.remove_edge(self.edges[-1])

    def clear(self):
        self.clear_edges()
        while self.vertices:
            self.remove_vertex(self.vertices[-1])

    def split_edge(self, edge, vertex, loc, geometry):
        """Splits an edge, at the side of the given vertex, placing the new
        vertex at loc.

        If edge = (a, vertex), it becomes (a, n) and f = (n, vertex) is made.
        If edge = (vertex, a), it becomes (n, a) and f = (vertex, n) is made.

        Returns the new edge f.
        """
        assert edge.is_incident_to(vertex)
        n = self.add_vertex(loc)
        vertex.edges.remove(edge)
        n.edges.append(edge)
        if edge.end is vertex:
            edge.end = n
            _update_geometry(edge)
            return self.add_edge(n, vertex, geometry)
        else:
            edge.start = n
            _update_geometry(edge)
            return self.add_edge(vertex, n, geometry)

    def combine_vertices(self, a, b):
        """Merges vertex b into vertex a.

        The edges of b are moved to a, and b is removed from the graph.
        The edge between a and b is removed, as is an edge of b to a common
        neighbour (a keeps its own edge to that neighbour).
        """
        for edge in list(b.edges):
            other = edge.other_vertex(b)
            if other is a or a.is_neighbour_of(other):
                self.remove_edge(edge)
                continue
            if edge.end is b:
                edge.end = a
            else:
                edge.start = a
            _update_geometry(edge)
            a.edges.append(edge)
        b.edges = []
        self.remove_vertex(b)


def _update_geometry(edge):
    """Moves the end points of the edge geometry (if it supports this) to
    the locations of the edge its vertices"""
    update = getattr(edge.geometry, "update_endpoints", None)
    if update is not None:
        update(edge.start, edge.end)
