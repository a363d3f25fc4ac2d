'''
# smoothpath

Python modules for drawing smooth curves through a series of 2D points.

Curve
-----
Functions for computations over plane curves, approximated as cubic Bezier segments or series of points (polylines).
 - curve.geometry: point validation and basic algorithms for polyline curves.
 - curve.bezier: compute the control points of a smooth piecewise cubic Bezier curve through a series of points.
 - curve.interpolate: sample a piecewise Bezier curve into a polyline with a given number of points per segment, or convert it to a scipy.interpolate.BPoly.

Other
-----
 - datafile: read and write lists of points as delimited text files.
 - demo: the five-point reference curve.
 - errors: InvalidInputError and InternalInvariantViolation exceptions.

'''
