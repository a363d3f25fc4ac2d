"""Control points for a smooth cubic Bezier curve through a sequence of 2D points.

The curve through n+1 knot points consists of n cubic Bezier segments. Segment
i runs from points[i] to points[i+1] and has two control points: the first
near points[i] and the second near points[i+1]. The control points are chosen
so that the piecewise curve is continuous in position and first derivative
(C1) at every interior knot.

Control points are returned as an array of shape (n,2,2), indexed by segment:
controls[i,0] is the first control point of segment i, and controls[i,1] the
second.
"""

import logging

import numpy

from . import geometry
from ..errors import InvalidInputError, InternalInvariantViolation

logger = logging.getLogger(__name__)

# the solve scales coordinates by up to 8 before dividing, so larger values overflow float64
MAX_COORDINATE = 1e300

def control_points(points):
    """Calculate the Bezier control points of a smooth curve through the given points.

    Parameters:
    points: array of n+1 points x,y; shape=(n+1,2), with n+1 >= 2.

    Returns an array of shape (n,2,2) containing the first and second control
    points for each of the n segments.

    For two points, the single segment is the straight line between them, with
    control points at 1/3 and 2/3 of the way along. Otherwise a tridiagonal
    system is solved for the first control point of every segment (independently
    for x and y), and the second control points are derived from those.

    Adjacent duplicate points are accepted, but produce degenerate segments.
    Coordinates must not exceed MAX_COORDINATE in magnitude."""
    points = geometry.as_points(points, min_points=2)
    if numpy.abs(points).max() > MAX_COORDINATE:
        raise InvalidInputError('Point coordinates must not exceed {} in magnitude.'.format(MAX_COORDINATE))
    count = len(points) - 1
    duplicates = geometry.duplicate_point_indices(points)
    if len(duplicates) > 0:
        logger.warning('Points %s are repeated: the segments after them have zero length.', duplicates.tolist())

    if count == 1:
        p0, p3 = points
        # 3*P1 = 2*P0 + P3
        p1 = (2 * p0 + p3) / 3
        # P2 = 2*P1 - P0
        p2 = 2 * p1 - p0
        controls = numpy.array([[p1, p2]])
    else:
        p0 = points[:-1]
        p3 = points[1:]
        a = numpy.ones(count)
        b = numpy.full(count, 4.0)
        c = numpy.ones(count)
        rhs = 4 * p0 + 2 * p3
        # first segment
        a[0], b[0], c[0] = 0, 2, 1
        rhs[0] = p0[0] + 2 * p3[0]
        # last segment
        a[-1], b[-1], c[-1] = 2, 7, 0
        rhs[-1] = 8 * p0[-1] + p3[-1]

        first = solve_tridiagonal(a, b, c, rhs)
        second = numpy.empty_like(first)
        # tangent continuity: P2[i] is the reflection of P1[i+1] through the shared knot
        second[:-1] = 2 * p3[:-1] - first[1:]
        second[-1] = (p3[-1] + first[-1]) / 2
        controls = numpy.stack([first, second], axis=1)

    _check_solution(controls, count)
    logger.debug('Computed control points for %d segments.', count)
    return controls

def solve_tridiagonal(a, b, c, rhs):
    """Solve a tridiagonal linear system with the Thomas algorithm.

    Parameters:
    a: sub-diagonal coefficients, shape (n,); a[0] is ignored.
    b: diagonal coefficients, shape (n,).
    c: super-diagonal coefficients, shape (n,); c[-1] is ignored.
    rhs: right-hand side, of shape (n,) or (n,d). In the latter case, the d
        columns are solved together, sharing the same elimination.

    Returns the solution x, of the same shape as rhs. The inputs are not modified.

    No pivoting is done, so the matrix should be diagonally dominant (as it is
    for spline fitting)."""
    a = numpy.array(a, dtype=float)
    b = numpy.array(b, dtype=float)
    c = numpy.array(c, dtype=float)
    rhs = numpy.array(rhs, dtype=float)
    n = len(b)
    if n == 0:
        raise InvalidInputError('Cannot solve an empty system.')
    if not (len(a) == len(c) == len(rhs) == n):
        raise InvalidInputError('Coefficient and right-hand side lengths must all equal {}.'.format(n))

    # forward elimination
    for i in range(1, n):
        m = a[i] / b[i-1]
        b[i] -= m * c[i-1]
        rhs[i] -= m * rhs[i-1]

    # back substitution
    x = numpy.empty_like(rhs)
    x[-1] = rhs[-1] / b[-1]
    for i in range(n - 2, -1, -1):
        x[i] = (rhs[i] - c[i] * x[i+1]) / b[i]
    return x

def _check_solution(controls, count):
    if controls.shape != (count, 2, 2):
        raise InternalInvariantViolation('Expected control points of shape {}, got {}.'.format((count, 2, 2), controls.shape))
    bad = ~numpy.isfinite(controls).all(axis=(1, 2))
    if bad.any():
        raise InternalInvariantViolation('Control points for segments {} are not finite.'.format(numpy.flatnonzero(bad).tolist()))

def as_controls(controls, count):
    """Return control points as a float array of shape (count,2,2), or raise
    InvalidInputError."""
    controls = numpy.asarray(controls, dtype=float)
    if controls.shape != (count, 2, 2):
        raise InvalidInputError('Control points must have shape {}, not {}.'.format((count, 2, 2), controls.shape))
    if not numpy.isfinite(controls).all():
        raise InvalidInputError('Control point coordinates must be finite.')
    return controls

def bezier_segments(points, controls):
    """Assemble the full Bezier description of each curve segment.

    Returns an array of shape (n,4,2): for each segment, its starting knot,
    the two control points, and its ending knot."""
    points = geometry.as_points(points, min_points=2)
    controls = as_controls(controls, len(points) - 1)
    return numpy.concatenate([points[:-1, numpy.newaxis], controls, points[1:, numpy.newaxis]], axis=1)

def evaluate_cubic(segment, t):
    """Evaluate a cubic Bezier curve at parameter values t in [0, 1].

    Parameters:
    segment: array of the four points P0, P1, P2, P3; shape=(4,2)
    t: scalar or array of parameter values.

    Returns points of shape t.shape + (2,)."""
    p0, p1, p2, p3 = numpy.asarray(segment, dtype=float)
    t = numpy.asarray(t, dtype=float)[..., numpy.newaxis]
    mt = 1 - t
    return mt**3 * p0 + 3 * mt**2 * t * p1 + 3 * mt * t**2 * p2 + t**3 * p3

def derivative_cubic(segment, t):
    """Evaluate the first derivative (with respect to t) of a cubic Bezier curve."""
    p0, p1, p2, p3 = numpy.asarray(segment, dtype=float)
    t = numpy.asarray(t, dtype=float)[..., numpy.newaxis]
    mt = 1 - t
    return 3 * mt**2 * (p1 - p0) + 6 * mt * t * (p2 - p1) + 3 * t**2 * (p3 - p2)

def control_handles(points, controls):
    """Return the line segments joining each control point to its knot.

    For display of the control points: segment i contributes the line from
    points[i] to its first control point, and from its second control point to
    points[i+1].

    Returns an array of shape (2n,2,2) of line start and end points."""
    segments = bezier_segments(points, controls)
    handles = numpy.empty((2 * len(segments), 2, 2))
    handles[0::2] = segments[:, [0, 1]]
    handles[1::2] = segments[:, [2, 3]]
    return handles
