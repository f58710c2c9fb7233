'''
Triangulation data structure: points and triangles.

Triangles refer to their corners by index into the point list of the
Mesh that owns them, and to their neighbours by key into the triangle
arena of that Mesh.
'''
from collections import namedtuple
from math import hypot
from random import Random

from bintri.delaunay.preds import right_of, circumcenter

# shared generator, used when no explicit generator is handed in
_rng = Random()


class Point(namedtuple("Point", "x y")):
    """An immutable 2D coordinate.

    Being a 2-tuple it can be handed directly to the predicates.
    """
    __slots__ = ()

    def __str__(self):
        return "{0} {1}".format(self.x, self.y)

    @classmethod
    def random(cls, min_x, max_x, min_y, max_y, rng=None):
        """Point drawn uniformly from [min_x, max_x) x [min_y, max_y)

        *rng* is a random.Random instance; if None a module wide
        generator is used.
        """
        if not min_x < max_x:
            raise ValueError(
                "Empty range for x: [{}, {})".format(min_x, max_x))
        if not min_y < max_y:
            raise ValueError(
                "Empty range for y: [{}, {})".format(min_y, max_y))
        if rng is None:
            rng = _rng
        x = min_x + (max_x - min_x) * rng.random()
        y = min_y + (max_y - min_y) * rng.random()
        return cls(x, y)

    def distance(self, other):
        """Cartesian distance to other point """
        return hypot(self.x - other[0], self.y - other[1])


class Triangle(object):
    """Triangle made of three point indices.

    The neighbour fields hold the arena key of the triangle sharing
    that edge (n12 for the edge p1-p2, n23 for p2-p3, n31 for p3-p1),
    or None. They do not own the triangle they refer to.
    """

    __slots__ = ('p1', 'p2', 'p3', 'n12', 'n23', 'n31')

    def __init__(self, p1, p2, p3):
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.n12 = None
        self.n23 = None
        self.n31 = None

    @classmethod
    def new_unsorted(cls, p1, p2, p3, points):
        """Create a triangle with its corners in canonical order:

        - p1 is the point with the greatest y (on equal y, greatest x)
        - p2 is the one with the greatest x among the other two
          (on equal x, greatest y)
        - p3 is the remaining one
        """
        top, p2, p3 = sorted(
            (p1, p2, p3),
            key=lambda i: (points[i].y, points[i].x),
            reverse=True)
        p2, p3 = sorted(
            (p2, p3),
            key=lambda i: (points[i].x, points[i].y),
            reverse=True)
        return cls(top, p2, p3)

    def __repr__(self):
        return "Triangle({0}, {1}, {2})".format(self.p1, self.p2, self.p3)

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self.vertices == other.vertices

    def __hash__(self):
        return hash(self.vertices)

    @property
    def vertices(self):
        return (self.p1, self.p2, self.p3)

    @property
    def neighbours(self):
        return (self.n12, self.n23, self.n31)

    def find_circumcenter(self, points):
        """Returns the circumcenter of the triangle as a new Point.

        Collinear corners give a zero determinant and raise
        ZeroDivisionError.
        """
        return Point(*circumcenter(points[self.p1],
                                   points[self.p2],
                                   points[self.p3]))

    def is_point_inside_or_in_border(self, point, points):
        """Whether *point* lies inside or on the border of the triangle.

        Assumes the corners p1, p2, p3 turn clockwise; for a triangle
        wound the other way the answer is wrong.
        """
        a = points[self.p1]
        b = points[self.p2]
        c = points[self.p3]
        d1 = right_of(a, b, point)
        d2 = right_of(b, c, point)
        d3 = right_of(c, a, point)
        # on two edges at the same time: a corner
        if (d1 == 0. and d2 == 0.) or (d2 == 0. and d3 == 0.) or \
                (d3 == 0. and d1 == 0.):
            return True
        return d1 >= 0. and d2 >= 0. and d3 >= 0.

    def set_neighbors(self, n12, n23, n31):
        self.n12 = n12
        self.n23 = n23
        self.n31 = n31

    def edge_slot(self, a, b):
        """Name of the neighbour field for the edge between point
        indices *a* and *b*
        """
        edge = frozenset((a, b))
        if edge == frozenset((self.p1, self.p2)):
            return 'n12'
        elif edge == frozenset((self.p2, self.p3)):
            return 'n23'
        elif edge == frozenset((self.p3, self.p1)):
            return 'n31'
        raise ValueError("{0} has no edge {1}-{2}".format(self, a, b))

    def neighbor_across(self, a, b):
        return getattr(self, self.edge_slot(a, b))

    def set_neighbor_across(self, a, b, key):
        setattr(self, self.edge_slot(a, b), key)

    def opposite(self, a, b):
        """The corner not on the edge *a*-*b* """
        slot = self.edge_slot(a, b)
        if slot == 'n12':
            return self.p3
        elif slot == 'n23':
            return self.p1
        else:
            return self.p2
