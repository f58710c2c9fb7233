'''
Checks on the quality of a Mesh.

The insertion does not flip edges, so a built Mesh is in general not
Delaunay; these functions report where it is not, without changing
anything.
'''

from bintri.delaunay.preds import orient2d, incircle


def is_locally_delaunay(mesh, key, neighbour):
    """Whether the corner of triangle *neighbour* opposite to the edge it
    shares with triangle *key* lies outside (or on) the circumcircle of
    *key*
    """
    t0 = mesh.triangle(key)
    t1 = mesh.triangle(neighbour)
    a, b, c = [mesh.points[v] for v in t0.vertices]
    shared = [v for v in t0.vertices if v in t1.vertices]
    assert len(shared) == 2
    d = mesh.points[t1.opposite(shared[0], shared[1])]
    # incircle is positive for a point inside only if a, b, c turn ccw
    det = incircle(a, b, c, d)
    if orient2d(a, b, c) < 0:
        det = -det
    return det <= 0


def non_delaunay_edges(mesh):
    """Returns (key, neighbour key) pairs, each pair once, of triangles
    whose shared edge is not locally Delaunay
    """
    result = []
    for key, triangle in mesh.items():
        for neighbour in triangle.neighbours:
            if neighbour is None or neighbour < key:
                continue
            if not is_locally_delaunay(mesh, key, neighbour):
                result.append((key, neighbour))
    return result
