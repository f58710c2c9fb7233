'''
Text output of a Mesh, one feature per line with WKT geometry (for QGIS).
'''
from bintri.delaunay.iter import TriangleIterator


def output_points(mesh, fh):
    """Output the points of the mesh as WKT to text file"""
    fh.write("id;wkt;finite;input\n")
    for idx, pt in enumerate(mesh.points):
        finite = not mesh.is_synthetic(idx)
        fh.write("{0};POINT({1});{2};{3}\n".format(
            idx, pt, finite, mesh.order[idx] if finite else None))


def output_triangles(mesh, fh, finite_only=False):
    """Output the triangles of the mesh as WKT to text file"""
    fh.write("id;wkt;n12;n23;n31;p1;p2;p3\n")
    for key, t in TriangleIterator(mesh, finite_only):
        ring = [mesh.points[v] for v in t.vertices]
        ring.append(ring[0])
        fh.write("{0};POLYGON(({1}));"
                 "{2[0]};{2[1]};{2[2]};"
                 "{3[0]};{3[1]};{3[2]}\n".format(
                    key, ", ".join(str(pt) for pt in ring),
                    t.neighbours, t.vertices))
