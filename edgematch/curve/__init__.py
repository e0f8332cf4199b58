'''
Curve
-----
Functions for computations over sampled edges, approximated as series of points (polylines).
 - curve.spline: centripetal Catmull-Rom interpolation of control points.
 - curve.area: signed area under a polyline, and total area enclosed between two edges.
 - curve.intersect: find the places where two polylines cross.
 - curve.geometry: basic helpers for polyline arrays.
 '''
