'''
# edgematch

Score how well two candidate boundary curves ("edges", e.g. the sides of
jigsaw pieces) match, by measuring the area enclosed between them.

Edges are normalized so that they start at (0, 0) and end at (1, 0). Each
edge is described by a handful of control points, which are sampled to a
dense polyline with a centripetal Catmull-Rom spline.

Curve
-----
Functions for computations over sampled edges, approximated as series of points (polylines).
 - curve.spline: centripetal Catmull-Rom interpolation of control points.
 - curve.area: signed area under a polyline, and total area enclosed between two edges.
 - curve.intersect: find the places where two polylines cross.
 - curve.geometry: basic helpers for polyline arrays.

Other modules
-------------
 - point: a small 2D vector value type for control points.
 - edge: edges defined by control points, and the edge dissimilarity score.
 - config: YAML-backed settings for sampling density and tolerances.
'''

from .errors import InvalidInputError
