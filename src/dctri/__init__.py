"""dctri - Divide-and-conquer Delaunay Triangulation of planar point sets
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'

from dctri.delaunay import triangulate, edges, Graph, DelaunayTriangulator

__all__ = ["triangulate", "edges", "Graph", "DelaunayTriangulator"]
