import numpy as np

from numpy import ndarray


def compute_gini(Y) -> ndarray:
    """ Gini coefficient of read counts for each cell.

    Computed from the area under the Lorenz curve of the sorted bin counts
    of each cell. Evenly covered cells approach 0, cells whose reads pile
    up in a few bins approach 1.

    Parameters
    ----------
    Y : array-like
        read counts with one row per bin and one column per cell

    Returns
    -------
    ndarray
        Gini coefficient per cell
    """
    Y = np.asarray(Y, dtype=float)
    if Y.ndim != 2:
        raise ValueError(f'expected a bins by cells matrix, got {Y.ndim} dimensions')

    Y = np.sort(Y, axis=0)
    totals = Y.sum(axis=0)
    if (totals <= 0).any():
        raise ValueError('every cell requires a positive total read count')

    n_bins = Y.shape[0]

    lorenz = np.vstack([np.zeros((1, Y.shape[1])), np.cumsum(Y, axis=0) / totals])
    area = ((lorenz[1:] + lorenz[:-1]) / 2).sum(axis=0) / n_bins

    return 1. - 2. * area
