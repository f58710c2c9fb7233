'''
Helpers to generate point sets (for testing purposes).
'''
from math import sqrt, pi, cos, sin

from bintri.delaunay.tds import Point, _rng


def box(points):
    """Obtain a tight fitting axis-aligned box around point set"""
    xmin = min(points, key=lambda x: x[0])[0]
    ymin = min(points, key=lambda x: x[1])[1]
    xmax = max(points, key=lambda x: x[0])[0]
    ymax = max(points, key=lambda x: x[1])[1]
    return (xmin, ymin), (xmax, ymax)


def random_points(n=10, min_x=0., max_x=1., min_y=0., max_y=1., rng=None):
    """Returns a list with n random points, uniformly drawn from the
    rectangle [min_x, max_x) x [min_y, max_y)
    """
    return [Point.random(min_x, max_x, min_y, max_y, rng)
            for _ in range(n)]


def random_circle_points(n=10, cx=0., cy=0., radius=1., rng=None):
    """Returns a list with n random points in a circle

    Method according to:

    http://www.anderswallin.net/2009/05/uniform-random-points-in-a-circle-using-polar-coordinates/
    """
    if rng is None:
        rng = _rng
    points = []
    for _ in range(n):
        r = radius * sqrt(rng.random())
        t = 2 * pi * rng.random()
        points.append(Point(cx + r * cos(t), cy + r * sin(t)))
    return points
