'''
Incremental construction of a triangle mesh, inserting the points in a
serpentine bin order.
'''

import logging
import time
from datetime import datetime
from math import ceil, floor, sqrt

from bintri.delaunay.tds import Point, Triangle

# corners of the bootstrap triangle, all input should lie well inside
SUPER_TRIANGLE = ((-1000000.0, 1000000.0),
                  (1000000.0, 1000000.0),
                  (0.0, -1000000.0))


class PointLocationError(ValueError):
    """No triangle in the mesh contains the point to insert"""


def bin_side(n):
    """Number of bins along one side of the grid for *n* points"""
    return int(ceil(sqrt(n)))


def binsort(points):
    """Returns the indices of *points* ordered along the bins of a grid.

    The grid has cells of size ceil(sqrt(n)). Rows of bins are visited
    bottom to top, alternating direction from row to row, so that
    consecutive points stay close to each other.
    """
    n = len(points)
    if n == 0:
        return []
    side = bin_side(n)

    def key(idx):
        pt = points[idx]
        bin_x = floor(pt[0] / side)
        bin_y = floor(pt[1] / side)
        if bin_y % 2 == 0:
            bin_x = side - bin_x + 1
        return (bin_y, bin_x)

    return sorted(range(n), key=key)


class Mesh(object):
    """Triangle mesh over a set of points.

    Triangles are kept in an arena: a dict from an integer key, which is
    never handed out twice, to the Triangle. Neighbour fields of the
    triangles refer to these keys.
    """

    def __init__(self, points):
        self.points = [Point(pt[0], pt[1]) for pt in points]
        self.original_count = len(self.points)
        # order[new_index] -> index in the input sequence
        self.order = list(range(self.original_count))
        self.visits = 0
        self._triangles = {}
        self._next_key = 0

    @property
    def triangles(self):
        """The live triangles, oldest first"""
        return list(self._triangles.values())

    def keys(self):
        return list(self._triangles.keys())

    def items(self):
        return list(self._triangles.items())

    def triangle(self, key):
        return self._triangles[key]

    def neighbours(self, key):
        """The triangles adjacent to the one with *key*, over its edges
        p1-p2, p2-p3 and p3-p1 (None where there is no neighbour)
        """
        return tuple(self._triangles[n] if n is not None else None
                     for n in self._triangles[key].neighbours)

    def is_synthetic(self, index):
        """Whether the point at *index* is a corner of the bootstrap
        triangle
        """
        return index >= self.original_count

    def triangulate(self):
        """Sort the points, bootstrap and insert all points one by one.

        Raises PointLocationError if a point can not be located, there is
        no partial result in that case.
        """
        if self._triangles:
            raise ValueError("Mesh is already triangulated")
        start = time.perf_counter()
        self.sort_points_by_bins()
        end = time.perf_counter()
        logging.debug("Sorting points: " + str(end - start) + " secs")

        start = time.perf_counter()
        self.create_giant_super_triangle()
        for i in range(self.original_count):
            pt = self.points[i]
            logging.debug(" - inserting {}".format(pt))
            key = self.get_triangle_containing_point(pt)
            if key is None:
                raise PointLocationError(
                    "Point {} not found in any triangle".format(pt))
            self.insert_point_in_triangle(i, key)
            if (i % 10000) == 0:
                logging.debug(" " + str(datetime.now()) + " " + str(i))
        end = time.perf_counter()
        logging.debug("Triangulating took: " + str(end - start) + " secs")
        logging.debug("{} triangles".format(len(self._triangles)))
        logging.debug("{} points".format(len(self.points)))
        logging.debug("{} visits".format(self.visits))

    def sort_points_by_bins(self):
        """Reorder the points along the serpentine bin order"""
        if self._triangles:
            raise ValueError("Points can not be sorted after bootstrapping")
        permutation = binsort(self.points)
        self.points = [self.points[i] for i in permutation]
        self.order = [self.order[i] for i in permutation]

    def create_giant_super_triangle(self):
        """Append the bootstrap points and seed the mesh with the triangle
        that spans them
        """
        first = len(self.points)
        for x, y in SUPER_TRIANGLE:
            self.points.append(Point(x, y))
        return self._add(
            Triangle.new_unsorted(first, first + 1, first + 2, self.points))

    def get_triangle_containing_point(self, point):
        """Key of the first triangle that contains *point* (borders
        included), None if there is no such triangle
        """
        for key, tri in self._triangles.items():
            self.visits += 1
            if tri.is_point_inside_or_in_border(point, self.points):
                return key
        return None

    def insert_point_in_triangle(self, point, key):
        """Replace the triangle with *key* by three triangles fanning out
        from the point with index *point*.

        It is assumed that the point lies inside the triangle.
        Returns the keys of the new triangles.
        """
        t0 = self._triangles.pop(key)
        a, b, c = t0.vertices
        outer = [(a, b, t0.n12), (b, c, t0.n23), (c, a, t0.n31)]
        new = [self._add(Triangle.new_unsorted(u, w, point, self.points))
               for u, w, _ in outer]
        # external links, the neighbours now see the new triangles
        for (u, w, neighbour), k in zip(outer, new):
            self._triangles[k].set_neighbor_across(u, w, neighbour)
            if neighbour is not None:
                other = self._triangles[neighbour]
                assert other.neighbor_across(u, w) == key
                other.set_neighbor_across(u, w, k)
        # internal links, over the edges that end in the new point
        k1, k2, k3 = new
        self._link(k1, k2, b, point)
        self._link(k2, k3, c, point)
        self._link(k3, k1, a, point)
        return tuple(new)

    def _add(self, triangle):
        key = self._next_key
        self._next_key += 1
        self._triangles[key] = triangle
        return key

    def _link(self, k0, k1, a, b):
        """Links two triangles to each other over their common edge a-b"""
        self._triangles[k0].set_neighbor_across(a, b, k1)
        self._triangles[k1].set_neighbor_across(a, b, k0)


def triangulate(points):
    """Triangulate a sequence of points, returns the Mesh"""
    mesh = Mesh(points)
    mesh.triangulate()
    return mesh
