""" Helpers for the dense, row-major float matrices exchanged by the network
and the feature schema. Every matrix is a two dimensional numpy array with
one row per sample.
"""
import numpy

from slnn.core.exception import ShapeMismatch


def as_matrix(arr, name='matrix'):
    """ Convert `arr` to a two dimensional float array

    Raises
    ------
    ShapeMismatch
        If `arr` is not two dimensional.

    """
    matrix = numpy.asarray(arr, dtype=numpy.float64)

    if matrix.ndim != 2:
        msg = "`{}` must be two dimensional, but has shape {}"
        raise ShapeMismatch(msg.format(name, matrix.shape))

    return matrix


def check_shape(matrix, rows=None, cols=None, name='matrix'):
    """ Check the number of rows and/or columns of `matrix`. A value of None
    for `rows` or `cols` skips the respective check.
    """
    expected = (matrix.shape[0] if rows is None else rows,
                matrix.shape[1] if cols is None else cols)

    if matrix.shape != expected:
        msg = "`{}` has shape {}, but must be shape {}"
        raise ShapeMismatch(msg.format(name, matrix.shape, expected))


def sum_along_axis(axis, matrix):
    """ Sum the matrix along `axis`, keeping the result two dimensional;
    axis 0 collapses the rows into a single row of column sums, axis 1
    collapses the columns into a single column of row sums.
    """
    if axis not in (0, 1):
        msg = "`axis` must be 0 or 1 (got {})"
        raise ValueError(msg.format(axis))

    return matrix.sum(axis=axis, keepdims=True)


def add_row(matrix, row):
    """ Add the single row `row` to every row of `matrix`
    """
    if row.shape != (1, matrix.shape[1]):
        msg = "Row of shape {} cannot be added to rows of matrix shape {}"
        raise ShapeMismatch(msg.format(row.shape, matrix.shape))

    return matrix + row
