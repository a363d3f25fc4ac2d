'''
Curve
-----
Functions for computations over smooth plane curves built from cubic Bezier segments, and the polylines that approximate them.
 - curve.geometry: point validation and basic algorithms for polyline curves.
 - curve.bezier: control points of a smooth (C1-continuous) cubic Bezier curve through a series of points (by solving a tridiagonal system), and evaluation of Bezier segments.
 - curve.interpolate: sampling of piecewise Bezier curves into polylines, and conversion to scipy.interpolate.BPoly.
 '''
