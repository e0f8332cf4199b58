"""Centripetal Catmull-Rom interpolation of edge control points.

See https://en.wikipedia.org/wiki/Centripetal_Catmull%E2%80%93Rom_spline
"""

import logging

import numpy

from . import geometry
from ..errors import InvalidInputError
from ..point import EPSILON, Vector2, as_vectors

logger = logging.getLogger(__name__)

STEPS_PER_SEGMENT = 20
ALPHA = 0.5 # centripetal parameterization

def catmull_rom_segment(p0, p1, p2, p3, steps_per_segment=STEPS_PER_SEGMENT, alpha=ALPHA, epsilon=EPSILON):
    """Sample the Catmull-Rom curve between p1 and p2, using p0 and p3 as the
    neighboring context points.

    Parameters:
    p0, p1, p2, p3: x,y points (Vector2 or any length-2 sequence)
    steps_per_segment: number of samples to produce. Samples are equally spaced
        in the spline parameter, starting exactly at p1 and stopping short of p2.
    alpha: knot parameterization exponent: 0.5 is centripetal, 0 uniform,
        1 chordal.
    epsilon: blending between points closer than this returns the first point
        unchanged, so that coincident control points (which make a knot
        interval collapse to zero length) do not cause division by zero.

    Returns an array of shape (steps_per_segment, 2)"""
    p0, p1, p2, p3 = (Vector2.of(p) for p in (p0, p1, p2, p3))
    # knot values: t_{i+1} = t_i + |p_i - p_{i+1}|^alpha
    t0 = 0.0
    t1 = t0 + (p0 - p1).magnitude()**alpha
    t2 = t1 + (p1 - p2).magnitude()**alpha
    t3 = t2 + (p2 - p3).magnitude()**alpha

    points = []
    for i in range(steps_per_segment):
        t = t1 + i * (t2 - t1) / steps_per_segment
        a1 = _blend(p0, p1, t0, t1, t, epsilon)
        a2 = _blend(p1, p2, t1, t2, t, epsilon)
        a3 = _blend(p2, p3, t2, t3, t, epsilon)
        b1 = _blend(a1, a2, t0, t2, t, epsilon)
        b2 = _blend(a2, a3, t1, t3, t, epsilon)
        points.append(_blend(b1, b2, t1, t2, t, epsilon))
    return numpy.array(points, dtype=float).reshape((-1, 2))

def _blend(q0, q1, ta, tb, t, epsilon):
    """Linearly interpolate from q0 (at parameter ta) to q1 (at parameter tb)."""
    if q0.approximately_equal(q1, epsilon):
        return q0
    span = tb - ta
    return q0 * ((tb - t) / span) + q1 * ((t - ta) / span)

def evaluate_spline(control_points, steps_per_segment=STEPS_PER_SEGMENT, alpha=ALPHA,
        epsilon=EPSILON, include_endpoint=True):
    """Sample a Catmull-Rom spline through a list of control points to a dense
    polyline.

    Each pair of consecutive control points is joined by a curve segment,
    sampled with catmull_rom_segment(). At either end of the list, the
    boundary point serves as its own missing neighbor.

    Parameters:
    control_points: sequence of n >= 4 points x,y. For edges, the first and last
        points are the fixed endpoints of the edge.
    steps_per_segment: number of samples per segment between control points.
    alpha, epsilon: see catmull_rom_segment()
    include_endpoint: if True, the last control point is appended so that the
        polyline ends exactly at the end of the curve. Otherwise the output
        stops one sample short of it.

    Returns an array of shape ((n-1)*steps_per_segment (+1), 2)"""
    points = as_vectors(control_points)
    n = len(points)
    if n < 4:
        raise InvalidInputError(f'at least 4 control points are required, not {n}')
    if steps_per_segment < 1:
        raise InvalidInputError(f'steps_per_segment must be at least 1, not {steps_per_segment}')
    segments = []
    for i in range(n - 1):
        window = points[max(i-1, 0)], points[i], points[i+1], points[min(i+2, n-1)]
        segments.append(catmull_rom_segment(*window, steps_per_segment=steps_per_segment,
            alpha=alpha, epsilon=epsilon))
    if include_endpoint:
        segments.append(geometry.as_path([points[-1]]))
    path = numpy.concatenate(segments)
    logger.debug(f'Sampled {n} control points to {len(path)} path points')
    return path
