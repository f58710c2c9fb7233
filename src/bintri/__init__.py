"""bintri - Incremental triangulation of planar point sets in bin order
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__author__ = 'Martijn Meijers'

from bintri.delaunay import triangulate, Mesh, Point, Triangle, \
    PointLocationError

__all__ = ["triangulate", "Mesh", "Point", "Triangle", "PointLocationError"]
