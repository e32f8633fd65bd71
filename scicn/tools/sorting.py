import numpy as np
import pandas as pd
import scipy.cluster.hierarchy as sch
import scipy.spatial.distance as dst

from anndata import AnnData
from numpy import ndarray
from typing import Tuple


def hierarchical_order(
        X: ndarray,
        method: str='complete',
        metric: str='euclidean',
    ) -> Tuple[ndarray, ndarray]:
    """ Order rows of a matrix by agglomerative hierarchical clustering.

    Parameters
    ----------
    X : ndarray
        matrix with one row per observation
    method : str, optional
        linkage method, by default 'complete'
    metric : str, optional
        distance between rows, by default 'euclidean'

    Returns
    -------
    Tuple[ndarray, ndarray]
        linkage matrix and leaf order, the latter a permutation of row indices

    Examples
    -------

    >>> import numpy as np
    >>> import scicn
    >>> X = np.array([[0, 0], [5, 5], [0, 1], [5, 4]])
    >>> linkage, order = scicn.tl.hierarchical_order(X)
    >>> sorted(order.tolist())
    [0, 1, 2, 3]
    """
    X = np.asarray(X, dtype=float)
    if X.shape[0] < 2:
        raise ValueError(f'at least two observations are required, got {X.shape[0]}')

    D = dst.pdist(X, metric)
    Y = sch.linkage(D, method=method)
    Z = sch.dendrogram(Y, color_threshold=-1, no_plot=True)
    order = np.array(Z['leaves'])

    return Y, order


def sort_cells(
        adata: AnnData,
        layer_name: str='state',
        method: str='complete',
        metric: str='euclidean',
    ) -> AnnData:
    """ Sort cells by hierarchical clustering on copy number values.

    Parameters
    ----------
    adata : AnnData
        copy number data
    layer_name : str, optional
        layer with copy number data to use for sorting, None for X, by default 'state'
    method : str, optional
        linkage method, by default 'complete'
    metric : str, optional
        distance between cells, by default 'euclidean'

    Returns
    -------
    AnnData
        copy number data with cell_order column added to obs
    """
    if layer_name is not None:
        X = np.array(adata.layers[layer_name])
    else:
        X = np.array(adata.X)

    _, idx = hierarchical_order(X, method=method, metric=metric)

    ordering = np.zeros(idx.shape[0], dtype=int)
    ordering[idx] = np.arange(idx.shape[0])

    adata.obs['cell_order'] = pd.Series(ordering, index=adata.obs.index)

    return adata
