import logging
import pandas as pd
import numpy as np
import anndata as ad

from anndata import AnnData
from pandas import DataFrame
from typing import Tuple


_bin_columns = ['chr', 'start', 'end']


def read_icn_table(filename: str, sep: str='\t') -> Tuple[DataFrame, DataFrame]:
    """ Read a wide table of integer copy number, one row per bin and one column per cell.

    Parameters
    ----------
    filename : str
        table with columns 'chr', 'start', 'end' followed by one column per cell
    sep : str, optional
        field separator, by default tab

    Returns
    -------
    Tuple[DataFrame, DataFrame]
        copy number matrix with cell ids as columns, and bins with columns 'chr', 'start', 'end'
    """
    data = pd.read_csv(filename, sep=sep, dtype={'chr': str})

    missing = [a for a in _bin_columns if a not in data.columns]
    if len(missing) > 0:
        raise ValueError(f'{filename} is missing columns {missing}')

    bin_index = (
        data['chr'].astype(str) + ':' +
        data['start'].astype(str) + '-' +
        data['end'].astype(str))

    ref = data[_bin_columns].set_index(bin_index).rename_axis('bin')
    icn = data.drop(columns=_bin_columns).set_index(bin_index).rename_axis('bin')
    icn.columns = icn.columns.astype(str)

    logging.info(f'read {icn.shape[0]} bins and {icn.shape[1]} cells from {filename}')

    return icn, ref


def read_cell_values(filename: str, sep: str='\t') -> pd.Series:
    """ Read a two column table of per cell values keyed by 'cell_id'.

    Parameters
    ----------
    filename : str
        table with a 'cell_id' column and one value column
    sep : str, optional
        field separator, by default tab

    Returns
    -------
    pd.Series
        values indexed by cell id
    """
    data = pd.read_csv(filename, sep=sep, dtype={'cell_id': str})

    if 'cell_id' not in data.columns or data.shape[1] != 2:
        raise ValueError(f'{filename} should have a cell_id column and exactly one value column')

    if data['cell_id'].duplicated().any():
        raise ValueError(f'{filename} has duplicate cell ids')

    return data.set_index('cell_id').iloc[:, 0]


def create_icn_anndata(
        icn: DataFrame,
        ref: DataFrame,
        cell_metrics_data: DataFrame=None,
        layer_name: str='state',
    ) -> AnnData:
    """ Convert a bins by cells copy number table to anndata

    Parameters
    ----------
    icn : DataFrame
        integer copy number with one row per bin and one column per cell
    ref : DataFrame
        bins with columns 'chr', 'start', 'end', aligned with the rows of icn
    cell_metrics_data : DataFrame, optional
        per cell metrics indexed by cell id, by default None
    layer_name : str, optional
        layer in which to store the copy number, by default 'state'

    Returns
    -------
    AnnData
        An instantiated AnnData Object, cells by bins.

    Raises
    ------
    ValueError
        duplicate data or otherwise incompatible inputs
    """
    if icn.shape[0] != ref.shape[0]:
        raise ValueError(f'icn has {icn.shape[0]} bins but ref has {ref.shape[0]}')

    if icn.columns.duplicated().any():
        raise ValueError(f'cell {icn.columns[icn.columns.duplicated()][0]} is duplicated')

    var = ref[_bin_columns].copy()
    var.index = var.index.astype(str)

    obs = pd.DataFrame(index=icn.columns.astype(str))
    if cell_metrics_data is not None:
        obs = obs.merge(cell_metrics_data, left_index=True, right_index=True, how='left')

    X = np.array(icn.values).T

    adata = ad.AnnData(
        X,
        obs=obs,
        var=var,
        layers={layer_name: X.copy()},
    )

    return adata
