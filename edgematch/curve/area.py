"""Areas enclosed by polylines, using Green's theorem.

The area enclosed by a closed curve is the line integral of x dy around it.
For a polyline this integral can be computed exactly with the trapezoid rule,
one segment at a time. For an open polyline, the same sum gives the signed
area between the curve and the x-axis: positive when the curve runs
counter-clockwise around the region it encloses.
"""

import logging

from . import geometry
from . import intersect
from ..errors import InvalidInputError
from ..point import EPSILON

logger = logging.getLogger(__name__)

def segment_area(p1, p2):
    """Return the contribution of the line segment from p1 to p2 to the
    line integral of x dy."""
    return (p1[0] + p2[0]) * (p2[1] - p1[1]) / 2

def path_area(path):
    """Return the signed area under a polyline: the sum of segment_area()
    over each pair of consecutive points.

    Parameters:
    path: array of n points x,y; shape=(n,2). A single point has zero area;
        an empty path raises InvalidInputError."""
    path = geometry.as_path(path)
    if len(path) == 0:
        raise InvalidInputError('cannot compute the area of an empty path')
    x = path[:,0]
    y = path[:,1]
    return float(((x[1:] + x[:-1]) * (y[1:] - y[:-1])).sum() / 2)

def area_between_normalized_paths(path1, path2, intersections=None, epsilon=EPSILON):
    """Return the total area enclosed between two polylines that share their
    start and end points.

    Where the paths cross, the area enclosed between them is split into
    separate loops. The absolute area of each loop is summed, so that regions
    on opposite sides of a crossing add up instead of cancelling out.

    Parameters:
    path1, path2: arrays of shape (n, 2) and (m, 2), with path1[0] == path2[0]
        and path1[-1] == path2[-1] (e.g. unit edges from (0,0) to (1,0)).
    intersections: list of (i, j) index pairs where path1[i] meets path2[j],
        sorted by i. If None, find_intersections() is used to find them.
        The index pairs must not revisit an earlier stretch of path2 more than
        once; this is not checked.
    epsilon: endpoints closer than this in each coordinate count as shared.

    Returns: non-negative area. Paths that coincide give 0.

    Raises InvalidInputError if either path is empty or if the intersections
    are not sorted by their index into path1. Paths with different endpoints
    give a well-defined but meaningless result; a warning is logged."""
    path1 = geometry.as_path(path1)
    path2 = geometry.as_path(path2)
    if len(path1) == 0 or len(path2) == 0:
        raise InvalidInputError('cannot compute the area between empty paths')
    if intersections is None:
        intersections = intersect.sort_intersections(intersect.find_intersections(path1, path2))
    else:
        firsts = [i for i, j in intersections]
        if any(b < a for a, b in zip(firsts[:-1], firsts[1:])):
            raise InvalidInputError('intersections must be sorted by their index into the first path')
    if not geometry.endpoints_match(path1, path2, epsilon):
        logger.warning(f'Paths do not share endpoints: {path1[[0,-1]].tolist()} vs. {path2[[0,-1]].tolist()}')

    total = 0
    a1, a2 = 0, 0
    for b1, b2 in intersections:
        if a2 <= b2:
            total += _forward_loop_area(path1, path2, a1, a2, b1, b2)
        else:
            total += _backward_loop_area(path1, path2, a1, a2, b1, b2)
        a1, a2 = b1, b2
    # close the last loop at the shared endpoint
    total += abs(path_area(path1[a1:]) - path_area(path2[a2:]) + segment_area(path2[a2], path1[a1]))
    logger.debug(f'Stitched {len(intersections) + 1} loops, total area {total}')
    return float(total)

def _forward_loop_area(path1, path2, a1, a2, b1, b2):
    """Area of the loop along path1 from a1 to b1, across to path2[b2], back
    along path2 to a2 and across to the start, for a2 <= b2."""
    area = (path_area(path1[a1:b1+1]) + segment_area(path1[b1], path2[b2])
        - path_area(path2[a2:b2+1]) + segment_area(path2[a2], path1[a1]))
    return abs(area)

def _backward_loop_area(path1, path2, a1, a2, b1, b2):
    """As _forward_loop_area(), for a crossing that lies behind the previous
    one on path2 (b2 <= a2): path2 is then traversed forward from b2 to a2."""
    area = (path_area(path1[a1:b1+1]) + segment_area(path1[b1], path2[b2])
        + path_area(path2[b2:a2+1]) + segment_area(path2[a2], path1[a1]))
    return abs(area)
