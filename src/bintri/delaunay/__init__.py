"""Incremental triangulation of planar point sets
"""

from bintri.delaunay.tds import Point, Triangle
from bintri.delaunay.insert_bins import Mesh, PointLocationError, \
    triangulate
from bintri.delaunay.iter import TriangleIterator, EdgeIterator
from bintri.delaunay.inout import output_points, output_triangles


__all__ = ("triangulate", "Mesh", "Point", "Triangle", "PointLocationError",
           "TriangleIterator", "EdgeIterator",
           "output_points", "output_triangles")
