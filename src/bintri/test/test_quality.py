import unittest

from bintri import triangulate
from bintri.delaunay.tds import Triangle
from bintri.delaunay.insert_bins import Mesh
from bintri.delaunay.quality import is_locally_delaunay, non_delaunay_edges
from bintri.voronoi import VoronoiTransformer


def two_triangles(points, first=(0, 1, 2), second=(0, 1, 3)):
    """Mesh with two triangles that share the edge 0-1"""
    mesh = Mesh(points)
    k0 = mesh._add(Triangle(*first))
    k1 = mesh._add(Triangle(*second))
    mesh._link(k0, k1, 0, 1)
    return mesh, k0, k1


class TestQuality(unittest.TestCase):

    def test_not_delaunay(self):
        # (5, -1) is inside the circle through (0, 0), (10, 0), (5, 1)
        mesh, k0, k1 = two_triangles([(0, 0), (10, 0), (5, 1), (5, -1)])
        self.assertFalse(is_locally_delaunay(mesh, k0, k1))
        self.assertEqual(non_delaunay_edges(mesh), [(k0, k1)])

    def test_not_delaunay_cw(self):
        # same configuration, first triangle wound clockwise
        mesh, k0, k1 = two_triangles([(0, 0), (10, 0), (5, 1), (5, -1)],
                                     first=(1, 0, 2))
        self.assertFalse(is_locally_delaunay(mesh, k0, k1))

    def test_delaunay(self):
        mesh, k0, k1 = two_triangles([(0, 0), (10, 0), (5, 5), (5, -6)])
        self.assertTrue(is_locally_delaunay(mesh, k0, k1))
        self.assertTrue(is_locally_delaunay(mesh, k1, k0))
        self.assertEqual(non_delaunay_edges(mesh), [])

    def test_single_insertion(self):
        mesh = triangulate([(0.0, 0.0)])
        self.assertEqual(non_delaunay_edges(mesh), [])


class TestVoronoi(unittest.TestCase):

    def test_centers(self):
        mesh = triangulate([(-5.0, 10.0), (0.0, 0.0), (1.0, 5.0)])
        trafo = VoronoiTransformer(mesh)
        trafo.transform()
        self.assertEqual(len(trafo.centers), 1)
        center = list(trafo.centers.values())[0]
        self.assertAlmostEqual(center.x, -73. / 14.)
        self.assertAlmostEqual(center.y, 51. / 14.)
        # no two finite triangles are adjacent
        self.assertEqual(trafo.segments, [])

    def test_segments(self):
        # square split along its diagonal: both centers in the middle
        mesh, k0, k1 = two_triangles([(0, 0), (10, 10), (10, 0), (0, 10)])
        trafo = VoronoiTransformer(mesh)
        trafo.transform()
        self.assertEqual(trafo.segments, [(k0, k1)])
        for center in trafo.centers.values():
            self.assertAlmostEqual(center.x, 5.)
            self.assertAlmostEqual(center.y, 5.)
        self.assertEqual(trafo.close_centers(), [(k0, k1)])

    def test_segments_apart(self):
        mesh, k0, k1 = two_triangles([(0, 0), (10, 0), (5, 5), (5, -6)])
        trafo = VoronoiTransformer(mesh)
        trafo.transform()
        self.assertEqual(trafo.segments, [(k0, k1)])
        self.assertEqual(trafo.close_centers(), [])


if __name__ == "__main__":
    unittest.main()
