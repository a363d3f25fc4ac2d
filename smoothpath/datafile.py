import pathlib

from .curve import geometry
from .errors import InvalidInputError

def write_points(path, points, delimiter=',', header=('x', 'y')):
    """Write a list of x,y points to a delimited text file, one point per line.

    Parameters:
        path: path to output file
        points: array of n points x,y; shape=(n,2)
        delimiter: symbol with which to separate the x and y values.
        header: column names for the first line, or None to write no header.
    """
    points = geometry.as_points(points)
    path = pathlib.Path(path)
    rows = [] if header is None else [delimiter.join(header)]
    rows.extend(delimiter.join(map(repr, (float(x), float(y)))) for x, y in points)
    try:
        with path.open('w') as f:
            f.write('\n'.join(rows) + '\n')
    except Exception:
        if path.exists():
            # an error occured during writing the file. Remove the half-written
            # file and re-raise the exception
            path.unlink()
        raise

def read_points(path, delimiter=','):
    """Read x,y points from a delimited text file such as a csv.

    Blank lines are skipped, as is a first line that cannot be read as numbers
    (i.e. a header). Only the first two columns are used.

    Returns an array of shape (n,2). Raises InvalidInputError if any line
    after the header does not contain two numbers.

    Example:
        points = read_points('path/to/points.csv')
        polyline = curve.interpolate.smooth_polyline(points, subdivisions=10)
        write_points('path/to/polyline.csv', polyline)
    """
    rows = []
    first_row = True
    with pathlib.Path(path).open() as infile:
        for line_number, line in enumerate(infile):
            line = line.strip()
            if not line:
                continue # skip blank lines
            vals = line.split(delimiter)[:2]
            is_first_row, first_row = first_row, False
            try:
                rows.append([float(val) for val in vals])
            except ValueError as e:
                if is_first_row:
                    continue # header line
                raise InvalidInputError('Line {} of {} does not contain numeric x,y values.'.format(line_number + 1, path)) from e
    return geometry.as_points(rows)
