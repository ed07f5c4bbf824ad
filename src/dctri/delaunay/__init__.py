"""dctri - Divide-and-conquer Delaunay Triangulation of planar point sets
"""

from dctri.delaunay.dc import triangulate, edges, DelaunayTriangulator
from dctri.delaunay.graph import Graph, Vertex, Edge
from dctri.delaunay.geometry import Vector, LineSegment, Circle


__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__all__ = ("triangulate", "edges", "DelaunayTriangulator",
           "Graph", "Vertex", "Edge",
           "Vector", "LineSegment", "Circle")
