"""Puzzle-piece edges and how well pairs of them match.

Edges use the "unit edge" convention: they run from (0, 0) to (1, 0), with
tabs and blanks bulging above or below the x-axis in between. Two edges that
fit well enclose little area between them, so that area serves as a
dissimilarity score. Edges are compared as given: a flipped or rotated edge is
not matched against its counterpart.
"""

import logging

from .config import MatchConfig
from .curve import area
from .curve import intersect
from .curve import spline
from .errors import InvalidInputError
from .point import EPSILON, as_vectors

logger = logging.getLogger(__name__)

class Edge:
    """An edge shaped by a centripetal Catmull-Rom spline.

    The first and last control points are the endpoints of the edge; the
    points in between pull the curve into shape."""
    def __init__(self, control_points):
        points = as_vectors(control_points)
        if len(points) < 4:
            raise InvalidInputError(f'an edge needs at least 4 control points, not {len(points)}')
        self.control_points = tuple(points)

    def __repr__(self):
        return f'{type(self).__name__}({[tuple(p) for p in self.control_points]})'

    def as_path(self, steps_per_segment=spline.STEPS_PER_SEGMENT, alpha=spline.ALPHA, epsilon=EPSILON):
        """Return the edge sampled to a polyline of shape (n, 2)."""
        return spline.evaluate_spline(self.control_points, steps_per_segment, alpha, epsilon)

    def area(self, steps_per_segment=spline.STEPS_PER_SEGMENT):
        """Return the signed area between the edge and the x-axis."""
        return area.path_area(self.as_path(steps_per_segment))


def example_edge():
    """Return a seven-point edge with a single tab, roughly like a jigsaw edge."""
    return Edge([
        (0.0, 0.0),
        (0.4, 0.0),
        (0.3, 0.2),
        (0.5, 0.3),
        (0.7, 0.2),
        (0.6, 0.0),
        (1.0, 0.0),
    ])

def second_example_edge():
    """Return an edge with a slightly narrower, lower tab than example_edge(),
    which crosses it on the way up and the way down."""
    return Edge([
        (0.0, 0.0),
        (0.35, 0.0),
        (0.33, 0.22),
        (0.5, 0.27),
        (0.67, 0.22),
        (0.65, 0.0),
        (1.0, 0.0),
    ])


def compare_edges(edge1, edge2, config=None):
    """Return the total area enclosed between two edges.

    Both edges are sampled with the same settings, their crossings found, and
    the areas of the loops between crossings summed. Smaller is a better match;
    identical edges score 0.

    Parameters:
    edge1, edge2: Edge instances
    config: MatchConfig, or None for the defaults.
    """
    if config is None:
        config = MatchConfig()
    sampling = config.spline.steps_per_segment, config.spline.alpha, config.epsilon
    path1 = edge1.as_path(*sampling)
    path2 = edge2.as_path(*sampling)
    intersections = intersect.find_intersections(path1, path2, config.intersection.tolerance)
    intersections = intersect.sort_intersections(intersections)
    score = area.area_between_normalized_paths(path1, path2, intersections, config.epsilon)
    logger.info(f'Edges cross {len(intersections)} times, enclosed area {score:.6f}')
    return score
