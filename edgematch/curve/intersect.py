"""Find the places where two sampled curves cross.

For indices i, j into two polylines, the distance between path1[i] and
path2[j] forms a 2D field. The curves cross wherever that field has a local
minimum that is (nearly) zero. A local minimum alone is not enough: two curves
that approach and then diverge again also produce one.
"""

import logging

import numpy
from scipy import ndimage

from . import geometry

logger = logging.getLogger(__name__)

# points of the two curves closer than this may be counted as a crossing
TOLERANCE = 0.01

def find_intersections(path1, path2, tolerance=TOLERANCE):
    """Find all crossings between two polylines.

    A pair of indices (i, j) is reported if path1[i] and path2[j] are closer
    than tolerance, and their distance is less than or equal to that of all
    eight neighboring index pairs. Flat minima (several neighboring pairs with
    exactly the same distance) are all reported.

    Only interior pairs are examined: crossings at the first or last sample of
    either path are never reported.

    The full len(path1) x len(path2) distance matrix is computed, so this is
    meant for sampled edges of a few hundred points, not huge polylines.

    Parameters:
    path1, path2: arrays of shape (n, 2) and (m, 2)
    tolerance: maximum distance between the points of a crossing

    Returns a list of (i, j) index tuples, in order of i and then j."""
    path1 = geometry.as_path(path1)
    path2 = geometry.as_path(path2)
    if len(path1) < 3 or len(path2) < 3:
        return []
    distances = geometry.squared_distance_matrix(path1, path2)
    # a cell is no larger than any of its 8 neighbors iff it equals the 3x3 minimum
    neighborhood_min = ndimage.minimum_filter(distances, size=3, mode='nearest')
    minima = (distances <= neighborhood_min) & (distances < tolerance**2)
    # border rows and columns lack a full neighborhood; ignore them
    minima[[0, -1], :] = False
    minima[:, [0, -1]] = False
    intersections = [(int(i), int(j)) for i, j in numpy.argwhere(minima)]
    logger.debug(f'Found {len(intersections)} intersections between paths of {len(path1)} and {len(path2)} points')
    return intersections

def sort_intersections(intersections):
    """Return intersections sorted by their index into the first path. Pairs
    with the same first index keep their relative order."""
    return sorted(intersections, key=lambda pair: pair[0])

def intersection_points(path1, path2, intersections):
    """Return the locations of intersections on each path, e.g. for drawing
    markers.

    Returns: (points1, points2)
        points1: array of shape (k, 2) of the crossing points on path1
        points2: array of shape (k, 2) of the crossing points on path2
    """
    path1 = geometry.as_path(path1)
    path2 = geometry.as_path(path2)
    indices = numpy.asarray(intersections, dtype=int).reshape((-1, 2))
    return path1[indices[:, 0]], path2[indices[:, 1]]
