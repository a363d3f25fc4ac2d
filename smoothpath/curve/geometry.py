import numpy

from ..errors import InvalidInputError

def as_points(points, min_points=1):
    """Return the input as a float array of 2D points, checking that it is valid.

    Parameters:
    points: array-like of n points x,y; shape=(n,2)
    min_points: minimum acceptable number of points.

    Returns a new float64 array of shape (n,2). Raises InvalidInputError if the
    input has the wrong shape, too few points, or non-finite coordinates."""
    try:
        points = numpy.array(points, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError('Points must be numeric x,y pairs: {}'.format(e))
    if points.ndim != 2 or points.shape[1] != 2:
        raise InvalidInputError('Points must have shape (n,2), not {}.'.format(points.shape))
    if len(points) < min_points:
        raise InvalidInputError('At least {} points are required, got {}.'.format(min_points, len(points)))
    if not numpy.isfinite(points).all():
        raise InvalidInputError('Point coordinates must be finite.')
    return points

def lerp(p0, p1, t):
    """Linearly interpolate between points p0 and p1 at parameter values t.

    Returns an array of shape (len(t),2) for array-valued t, or a single point
    for scalar t."""
    t = numpy.asarray(t, dtype=float)
    p0 = numpy.asarray(p0, dtype=float)
    p1 = numpy.asarray(p1, dtype=float)
    t = t[..., numpy.newaxis]
    # this form returns p1 exactly at t=1
    return (1 - t) * p0 + t * p1

def segment_lengths(points):
    """Return the length of each straight segment of a polyline."""
    points = numpy.asarray(points, dtype=float)
    return numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1))

def cumulative_distances(points, unit=True):
    """Return cumulative distances along a polyline.

    Parameters:
    points: array of shape (n,m) consisting of n points in m dimensions
    unit: if True, return distances divided by total length of the curve,
          if False, return actual arc lengths."""
    distances = numpy.concatenate([[0], numpy.add.accumulate(segment_lengths(points))])
    if unit:
        if distances[-1] == 0:
            raise InvalidInputError('Cannot normalize distances along a zero-length polyline.')
        distances /= distances[-1]
    return distances

def polyline_length(points):
    """Return the total length of a polyline."""
    return segment_lengths(points).sum()

def duplicate_point_indices(points):
    """Return the indices i for which points[i+1] is identical to points[i].

    Such pairs bound zero-length segments, which the control-point solver
    accepts but which give degenerate curve pieces."""
    points = numpy.asarray(points, dtype=float)
    same = (points[:-1] == points[1:]).all(axis=1)
    return numpy.flatnonzero(same)

def filter_dup_points(points):
    """Return a polyline with no duplicate or near-duplicate adjacent points."""
    points = numpy.asarray(points, dtype=float)
    points_out = [points[0]]
    for point in points[1:]:
        if not numpy.allclose(point, points_out[-1]):
            points_out.append(point)
    return numpy.array(points_out)
