'''
Geometric predicates and constructions.

The sign predicates come from geompreds (Shewchuk's adaptive precision
arithmetic), so a zero result means exactly zero.
'''

from geompreds import orient2d, incircle

__all__ = ("orient2d", "incircle", "right_of", "circumcenter")


def right_of(pa, pb, pt):
    """Signed value of *pt* relative to the directed edge *pa* -> *pb*:

    right:    + [ = cw ]
    straight: 0.
    left:     - [ = ccw ]

    i.e. (pt.x - pa.x) * (pb.y - pa.y) - (pt.y - pa.y) * (pb.x - pa.x)
    """
    return orient2d(pb, pa, pt)


def circumcenter(pa, pb, pc):
    """Returns the center of the circle through *pa*, *pb* and *pc* as a
    2-tuple.

    The three points must not be collinear, otherwise the determinant is
    zero and the division raises ZeroDivisionError.
    """
    ax, ay = pa[0], pa[1]
    bx, by = pb[0], pb[1]
    cx, cy = pc[0], pc[1]
    d = 2.0 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    alift = ax * ax + ay * ay
    blift = bx * bx + by * by
    clift = cx * cx + cy * cy
    ux = (alift * (by - cy) + blift * (cy - ay) + clift * (ay - by)) / d
    uy = (alift * (cx - bx) + blift * (ax - cx) + clift * (bx - ax)) / d
    return ux, uy
