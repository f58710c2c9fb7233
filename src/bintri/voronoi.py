from bintri.delaunay.iter import TriangleIterator


def dist_squared(orig, dest):
    dx = orig[0] - dest[0]
    dy = orig[1] - dest[1]
    return (dx * dx + dy * dy)


class VoronoiTransformer(object):
    """Class to transform a triangle Mesh into the segments of its dual

    Every finite triangle gets its circumcenter as center, and for every
    pair of adjacent finite triangles a segment joins their centers.
    Only when the mesh is Delaunay this is the Voronoi diagram of the
    points.
    """

    def __init__(self, mesh):
        self.mesh = mesh
        self.centers = {}
        self.segments = []

    def transform(self):
        """Calculate center of circumscribed circles for all triangles
        and generate a line segment from one triangle to its neighbours
        (this happens only once for every pair).
        """
        self._transform_centers()
        self._transform_segments()

    def _transform_centers(self):
        self.centers = {}
        for key, t in TriangleIterator(self.mesh, finite_only=True):
            self.centers[key] = t.find_circumcenter(self.mesh.points)

    def _transform_segments(self):
        segments = []
        for key in self.centers:
            for n in self.mesh.triangle(key).neighbours:
                if n in self.centers and key < n:
                    segments.append((key, n))
        self.segments = segments

    def close_centers(self, tolerance=1e-10):
        """Segments whose two centers (almost) coincide, these would
        collapse to a point in the dual
        """
        return [(start, end) for start, end in self.segments
                if dist_squared(self.centers[start],
                                self.centers[end]) < tolerance]
