'''
Iterators over the triangles and edges of a Mesh.
'''


class TriangleIterator(object):
    """Iterator over all triangles of the mesh, oldest first.

    The finite_only parameter determines whether triangles that have a
    corner of the bootstrap triangle are skipped.
    """

    def __init__(self, mesh, finite_only=False):
        self.mesh = mesh
        self.finite_only = finite_only
        self._items = iter(mesh.items())

    def __iter__(self):
        return self

    def __next__(self):
        for key, triangle in self._items:
            if self.finite_only and \
                    any(self.mesh.is_synthetic(v) for v in triangle.vertices):
                continue
            return key, triangle
        raise StopIteration()


class EdgeIterator(object):
    """Iterator over the edges of the mesh, as (a, b) point index pairs
    with a < b. Every edge is output once.
    """

    def __init__(self, mesh, finite_only=False):
        self.mesh = mesh
        self.finite_only = finite_only
        self.seen = set()
        self._triangles = TriangleIterator(mesh)
        self._pending = []

    def __iter__(self):
        return self

    def __next__(self):
        while True:
            while self._pending:
                edge = self._pending.pop(0)
                if edge in self.seen:
                    continue
                self.seen.add(edge)
                if self.finite_only and \
                        any(self.mesh.is_synthetic(v) for v in edge):
                    continue
                return edge
            _, triangle = next(self._triangles)
            p1, p2, p3 = triangle.vertices
            self._pending = [tuple(sorted(edge))
                             for edge in ((p1, p2), (p2, p3), (p3, p1))]
