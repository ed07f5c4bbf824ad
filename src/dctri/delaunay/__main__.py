import logging

from dctri.delaunay import triangulate
from dctri.delaunay.helpers import random_circle_vertices


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    pts = random_circle_vertices(15000)
    triangulate(pts)
