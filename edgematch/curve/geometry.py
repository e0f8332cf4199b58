import numpy
from scipy.spatial import distance

from ..errors import InvalidInputError
from ..point import EPSILON

def as_path(points):
    """Return a polyline as a float array of shape (n, 2).

    Parameters:
    points: sequence of n points x,y (list of tuples, list of Vector2, or array)

    Raises InvalidInputError if the input cannot be viewed as a list of 2D points."""
    path = numpy.asarray(points, dtype=float)
    if path.size == 0:
        return path.reshape((0, 2))
    if path.ndim != 2 or path.shape[1] != 2:
        raise InvalidInputError(f'path must be a sequence of 2D points, not an array of shape {path.shape}')
    return path

def squared_distance_matrix(path1, path2):
    """Return the squared distance between every point of path1 and every
    point of path2, as an array of shape (len(path1), len(path2))."""
    return distance.cdist(as_path(path1), as_path(path2), 'sqeuclidean')

def endpoints_match(path1, path2, epsilon=EPSILON):
    """Return True if the two polylines start at the same point and end at the
    same point, to within epsilon in each coordinate."""
    path1 = as_path(path1)
    path2 = as_path(path2)
    if len(path1) == 0 or len(path2) == 0:
        return False
    ends = numpy.abs(path1[[0, -1]] - path2[[0, -1]])
    return bool((ends < epsilon).all())
