import logging
import numbers

import numpy
from scipy.interpolate import BPoly

from . import bezier
from . import geometry
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

# number of polyline points generated per curve segment, unless otherwise specified
DEFAULT_SUBDIVISIONS = 3

def sample_curve(points, controls, subdivisions=DEFAULT_SUBDIVISIONS):
    """Approximate a piecewise cubic Bezier curve with a dense polyline.

    Parameters:
    points: array of n+1 knot points x,y; shape=(n+1,2)
    controls: control points for each of the n segments, as returned by
        bezier.control_points(): shape=(n,2,2). A list with None in place of
        some segments' control point pairs is also accepted: those segments
        are sampled as straight lines.
    subdivisions: number of polyline points generated per segment (>= 1).

    Returns an array of shape (1 + n*subdivisions, 2). The first point is
    points[0]; each segment then contributes the curve positions at parameter
    values 1/subdivisions, 2/subdivisions, ..., 1, so that the last point
    generated for each segment is its ending knot."""
    points = geometry.as_points(points, min_points=2)
    _check_subdivisions(subdivisions)
    count = len(points) - 1
    if controls is None or not hasattr(controls, '__len__'):
        raise InvalidInputError('Control points must be a sequence with one entry per segment, not {!r}.'.format(controls))
    if len(controls) != count:
        raise InvalidInputError('Expected control points for {} segments, got {}.'.format(count, len(controls)))

    t = numpy.arange(1, subdivisions + 1) / subdivisions
    polyline = numpy.empty((1 + count * subdivisions, 2))
    polyline[0] = points[0]
    for i in range(count):
        p0, p3 = points[i], points[i+1]
        pair = controls[i]
        if pair is None:
            samples = geometry.lerp(p0, p3, t)
        else:
            pair = _as_control_pair(pair, i)
            samples = bezier.evaluate_cubic([p0, pair[0], pair[1], p3], t)
        start = 1 + i * subdivisions
        polyline[start:start + subdivisions] = samples
    logger.debug('Sampled %d segments into %d polyline points.', count, len(polyline))
    return polyline

def smooth_polyline(points, subdivisions=DEFAULT_SUBDIVISIONS):
    """Return a polyline approximating the smooth cubic curve through the given points.

    This computes the control points with bezier.control_points() and samples
    the resulting curve with sample_curve()."""
    controls = bezier.control_points(points)
    return sample_curve(points, controls, subdivisions)

def to_bpoly(points, controls):
    """Convert a piecewise cubic Bezier curve to a scipy.interpolate.BPoly.

    The returned parametric curve has breakpoints 0, 1, ..., n: segment i
    is traced as the parameter goes from i to i+1. Evaluating it at an array of
    shape (m,) yields points of shape (m,2); the derivative() method provides
    the curve's derivatives in the same form."""
    segments = bezier.bezier_segments(points, controls)
    # BPoly coefficients are indexed as (bernstein term, interval, dimension)
    coefficients = segments.transpose(1, 0, 2)
    breakpoints = numpy.arange(len(segments) + 1, dtype=float)
    return BPoly(coefficients, breakpoints)

def _check_subdivisions(subdivisions):
    if isinstance(subdivisions, bool) or not isinstance(subdivisions, numbers.Integral):
        raise InvalidInputError('The number of subdivisions must be an integer, not {!r}.'.format(subdivisions))
    if subdivisions < 1:
        raise InvalidInputError('The number of subdivisions must be at least 1, not {}.'.format(subdivisions))

def _as_control_pair(pair, i):
    pair = numpy.asarray(pair, dtype=float)
    if pair.shape != (2, 2):
        raise InvalidInputError('Control points for segment {} must have shape (2,2), not {}.'.format(i, pair.shape))
    if not numpy.isfinite(pair).all():
        raise InvalidInputError('Control points for segment {} must be finite.'.format(i))
    return pair
