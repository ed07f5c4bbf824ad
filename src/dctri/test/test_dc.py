import os
import random
import tempfile
import unittest

from dctri.delaunay import triangulate, edges, Graph, DelaunayTriangulator
from dctri.delaunay.dc import MergeError
from dctri.delaunay.geometry import LineSegment
from dctri.delaunay.helpers import convex_hull, random_circle_vertices
from dctri.delaunay.iter import TriangleIterator
from dctri.delaunay.validate import is_planar, is_delaunay


def coordinate_pairs(graph):
    """Edges of the graph as set of (unordered) coordinate pairs"""
    return set(frozenset([(e.start.x, e.start.y), (e.end.x, e.end.y)])
               for e in graph.edges)


def random_points(n, seed):
    rnd = random.Random(seed)
    return [(rnd.random(), rnd.random()) for _ in range(n)]


class TestSmallInputs(unittest.TestCase):

    def test_empty(self):
        dt = triangulate([])
        self.assertEqual(dt.vertices, [])
        self.assertEqual(dt.edges, [])

    def test_one_point(self):
        dt = triangulate([(5, 5)])
        self.assertEqual(len(dt.vertices), 1)
        self.assertEqual(dt.edges, [])

    def test_two_points(self):
        dt = triangulate([(0, 0), (3, -1)])
        self.assertEqual(coordinate_pairs(dt),
                         set([frozenset([(0., 0.), (3., -1.)])]))

    def test_triangle(self):
        dt = triangulate([(0, 0), (1, 0), (0, 1)])
        self.assertEqual(len(dt.edges), 3)
        self.assertEqual(coordinate_pairs(dt), set([
            frozenset([(0., 0.), (1., 0.)]),
            frozenset([(1., 0.), (0., 1.)]),
            frozenset([(0., 1.), (0., 0.)])]))

    def test_collinear_three(self):
        dt = triangulate([(0, 0), (1, 0), (2, 0)])
        self.assertEqual(coordinate_pairs(dt), set([
            frozenset([(0., 0.), (1., 0.)]),
            frozenset([(1., 0.), (2., 0.)])]))

    def test_square(self):
        dt = triangulate([(0, 0), (1, 0), (1, 1), (0, 1)])
        hull = set([
            frozenset([(0., 0.), (1., 0.)]),
            frozenset([(1., 0.), (1., 1.)]),
            frozenset([(1., 1.), (0., 1.)]),
            frozenset([(0., 1.), (0., 0.)])])
        pairs = coordinate_pairs(dt)
        self.assertEqual(len(pairs), 5)
        self.assertTrue(hull <= pairs)
        # co-circular: the tie is broken towards this diagonal
        self.assertEqual(pairs - hull,
                         set([frozenset([(0., 1.), (1., 0.)])]))

    def test_square_input_order(self):
        # the diagonal does not depend on the order of the input
        dt = triangulate([(1, 1), (0, 1), (0, 0), (1, 0)])
        self.assertIn(frozenset([(0., 1.), (1., 0.)]), coordinate_pairs(dt))
        self.assertEqual(len(dt.edges), 5)

    def test_five_points(self):
        pts = [(0, 0), (1, 2), (2, 1), (3, -1), (4, 2)]
        dt = triangulate(pts)
        expected = [(0, 1), (2, 3), (3, 4), (4, 2), (0, 3), (0, 2), (1, 2),
                    (1, 4)]
        self.assertEqual(set(frozenset(e) for e in edges(dt)),
                         set(frozenset(e) for e in expected))

    def test_inner_point(self):
        dt = triangulate([(0, 0), (4, 0), (2, 4), (2, 1)])
        self.assertEqual(len(dt.edges), 6)
        self.assertEqual(len(list(TriangleIterator(dt))), 3)
        self.assertTrue(is_delaunay(dt))

    def test_horizontal_line(self):
        dt = triangulate([(x, 0) for x in range(5)])
        self.assertEqual(coordinate_pairs(dt),
                         set(frozenset([(float(x), 0.), (x + 1., 0.)])
                             for x in range(4)))

    def test_vertical_line(self):
        dt = triangulate([(0, y) for y in range(5)])
        self.assertEqual(coordinate_pairs(dt),
                         set(frozenset([(0., float(y)), (0., y + 1.)])
                             for y in range(4)))


class TestProperties(unittest.TestCase):

    def check(self, pts):
        dt = triangulate(pts)
        self.assertTrue(dt.verify())
        self.assertTrue(is_planar(dt))
        self.assertTrue(is_delaunay(dt))
        n = len(pts)
        h = len(convex_hull(pts))
        self.assertEqual(len(dt.edges), 3 * n - 3 - h)
        self.assertEqual(len(list(TriangleIterator(dt))), 2 * n - 2 - h)
        return dt

    def test_random_100(self):
        self.check(random_points(100, seed=1))

    def test_random_sizes(self):
        for n in (4, 5, 6, 7, 8, 9, 13, 17, 31):
            self.check(random_points(n, seed=n))

    def test_random_circle(self):
        random.seed(2018)
        self.check(random_circle_vertices(150))

    def test_deterministic(self):
        pts = random_points(60, seed=7)
        first = coordinate_pairs(triangulate(pts))
        second = coordinate_pairs(triangulate(pts))
        self.assertEqual(first, second)

    def test_rerun(self):
        pts = random_points(50, seed=3)
        graph = Graph()
        for pt in pts:
            graph.add_vertex(pt)
        dt = DelaunayTriangulator(graph)
        dt.run()
        first = coordinate_pairs(graph)
        dt.run()
        self.assertEqual(coordinate_pairs(graph), first)
        self.assertTrue(graph.verify())

    def test_existing_edges_discarded(self):
        graph = Graph()
        vertices = [graph.add_vertex(pt) for pt in
                    [(0, 0), (1, 0), (1, 1), (0, 1)]]
        # the other diagonal, which is not the one to be computed
        graph.add_edge(vertices[0], vertices[2],
                       LineSegment(vertices[0].clone(), vertices[2].clone()))
        DelaunayTriangulator(graph).run()
        self.assertFalse(vertices[0].is_neighbour_of(vertices[2]))
        self.assertTrue(vertices[1].is_neighbour_of(vertices[3]))
        self.assertEqual(len(graph.edges), 5)


class TestTriangulator(unittest.TestCase):

    def test_cloner(self):
        class Wrapped(object):
            def __init__(self, segment):
                self.segment = segment

        graph = Graph()
        for pt in [(0, 0), (2, 0), (1, 2)]:
            graph.add_vertex(pt)
        DelaunayTriangulator(graph, cloner=Wrapped).run()
        self.assertEqual(len(graph.edges), 3)
        for e in graph.edges:
            self.assertIsInstance(e.geometry, Wrapped)
            self.assertIsInstance(e.geometry.segment, LineSegment)
            self.assertEqual(e.geometry.segment.start.x, e.start.x)
            self.assertEqual(e.geometry.segment.end.y, e.end.y)

    def test_default_geometry(self):
        dt = triangulate([(0, 0), (2, 0), (1, 2)])
        for e in dt.edges:
            self.assertIsInstance(e.geometry, LineSegment)
            self.assertIsNot(e.geometry.start, e.start)

    def test_merge_error_is_logged(self):
        class Broken(DelaunayTriangulator):
            __slots__ = ()

            def add_edge(self, u, v):
                super(Broken, self).add_edge(u, v)
                return True

        graph = Graph()
        for pt in random_points(8, seed=11):
            graph.add_vertex(pt)
        with self.assertLogs(level='ERROR') as cm:
            Broken(graph).run()
        self.assertIn("trying to add an existing edge", cm.output[0])
        # partially triangulated, but consistent
        self.assertTrue(graph.verify())
        self.assertLess(len(graph.edges), 3 * 8 - 3 - 3)

    def test_merge_error(self):
        self.assertTrue(issubclass(MergeError, Exception))

    def test_graph_order_untouched(self):
        pts = random_points(20, seed=5)
        graph = Graph()
        vertices = [graph.add_vertex(pt) for pt in pts]
        DelaunayTriangulator(graph).run()
        self.assertEqual(graph.vertices, vertices)
        for i, v in enumerate(graph.vertices):
            self.assertEqual(v.graph_index, i)


class TestTriangulate(unittest.TestCase):

    def test_infos(self):
        dt = triangulate([(0, 0), (1, 0), (0, 1)], infos=['a', 'b', 'c'])
        self.assertEqual([v.info for v in dt.vertices], ['a', 'b', 'c'])
        self.assertEqual(set(frozenset(e) for e in edges(dt)),
                         set([frozenset('ab'), frozenset('bc'),
                              frozenset('ca')]))

    def test_default_infos(self):
        dt = triangulate([(0, 0), (1, 0)])
        self.assertEqual([v.info for v in dt.vertices], [0, 1])

    def test_duplicate_points(self):
        with self.assertRaises(ValueError):
            triangulate([(0, 0), (1, 0), (0, 0)])

    def test_bad_points(self):
        with self.assertRaises(ValueError):
            triangulate([(0, 0, 0), (1, 0, 0)])

    def test_infos_length(self):
        with self.assertRaises(ValueError):
            triangulate([(0, 0), (1, 0)], infos=['a'])

    def test_output(self):
        with tempfile.TemporaryDirectory() as tmp:
            triangulate([(0, 0), (1, 0), (1, 1), (0, 1)], output=tmp)
            for name, count in (("all_vertices.wkt", 4),
                                ("all_edges.wkt", 5),
                                ("all_tris.wkt", 2)):
                with open(os.path.join(tmp, name)) as fh:
                    lines = fh.readlines()
                # header + one line per element
                self.assertEqual(len(lines), count + 1)


if __name__ == "__main__":
    unittest.main()
