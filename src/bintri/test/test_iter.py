import unittest
from io import StringIO

from bintri import triangulate
from bintri.delaunay.iter import TriangleIterator, EdgeIterator
from bintri.delaunay.inout import output_points, output_triangles


class TestIterators(unittest.TestCase):

    def setUp(self):
        self.mesh = triangulate([(-5.0, 10.0), (0.0, 0.0), (1.0, 5.0)])

    def test_all_triangles(self):
        items = list(TriangleIterator(self.mesh))
        self.assertEqual(items, self.mesh.items())

    def test_finite_triangles(self):
        items = list(TriangleIterator(self.mesh, finite_only=True))
        self.assertEqual(len(items), 1)
        key, tri = items[0]
        self.assertIs(self.mesh.triangle(key), tri)
        self.assertEqual(sorted(tri.vertices), [0, 1, 2])

    def test_edges(self):
        edges = list(EdgeIterator(self.mesh))
        # 7 triangles, 3 edges on the outside
        self.assertEqual(len(edges), (3 * 7 + 3) // 2)
        self.assertEqual(len(edges), len(set(edges)))
        for a, b in edges:
            self.assertLess(a, b)

    def test_finite_edges(self):
        edges = sorted(EdgeIterator(self.mesh, finite_only=True))
        self.assertEqual(edges, [(0, 1), (0, 2), (1, 2)])


class TestOutput(unittest.TestCase):

    def setUp(self):
        self.mesh = triangulate([(-5.0, 10.0), (0.0, 0.0), (1.0, 5.0)])

    def test_output_points(self):
        fh = StringIO()
        output_points(self.mesh, fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(lines[0], "id;wkt;finite;input")
        self.assertEqual(len(lines), 1 + 6)
        self.assertEqual(lines[1], "0;POINT(0.0 0.0);True;1")
        self.assertEqual(lines[3], "2;POINT(-5.0 10.0);True;0")
        self.assertEqual(lines[4], "3;POINT(-1000000.0 1000000.0);False;None")

    def test_output_triangles(self):
        fh = StringIO()
        output_triangles(self.mesh, fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(lines[0], "id;wkt;n12;n23;n31;p1;p2;p3")
        self.assertEqual(len(lines), 1 + 7)
        fh = StringIO()
        output_triangles(self.mesh, fh, finite_only=True)
        lines = fh.getvalue().splitlines()
        self.assertEqual(len(lines), 2)
        fields = lines[1].split(";")
        self.assertEqual(len(fields), 8)
        self.assertTrue(fields[1].startswith("POLYGON(("))
        self.assertTrue(fields[1].endswith("))"))
        ring = fields[1][len("POLYGON(("):-2].split(", ")
        self.assertEqual(len(ring), 4)
        self.assertEqual(ring[0], ring[-1])


if __name__ == "__main__":
    unittest.main()
