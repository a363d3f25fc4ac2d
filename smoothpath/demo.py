"""The five-point reference curve: the corners of a square, then its center.

Usage (e.g. to draw with matplotlib):
    points, controls, polyline = demo_curve(width=400, height=400, subdivisions=10)
    pyplot.plot(*polyline.T)
    pyplot.scatter(*points.T)
"""

import numpy

from .curve import bezier
from .curve import interpolate

# fractions of the drawing width and height
DEMO_FRACTIONS = numpy.array([
    [0.33, 0.33],
    [0.67, 0.33],
    [0.67, 0.67],
    [0.33, 0.67],
    [0.5, 0.5]
])

def demo_points(width=100, height=100):
    """Return the reference points scaled to a drawing of the given size."""
    return DEMO_FRACTIONS * [width, height]

def demo_curve(width=100, height=100, subdivisions=interpolate.DEFAULT_SUBDIVISIONS):
    """Return the reference points, their control points and the sampled curve."""
    points = demo_points(width, height)
    controls = bezier.control_points(points)
    polyline = interpolate.sample_curve(points, controls, subdivisions)
    return points, controls, polyline
