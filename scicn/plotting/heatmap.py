import logging
import numpy as np
import pandas as pd
import scipy.sparse
import scipy.cluster.hierarchy as sch
from anndata import AnnData
from matplotlib import pyplot as plt
from matplotlib.colors import ListedColormap
from numpy import ndarray
from pandas import DataFrame
from typing import Dict, NamedTuple, Optional, Tuple

import scicn.tools.ranges
import scicn.tools.sorting
from scicn.constants import (
    CHROM_PREFIX, CHROM_BAND_COLORS, CHROM_LABEL_COLORS, ICN_COLORS,
    FIGURE_SIZE, FIGURE_DPI, FONT_SIZE, LINE_WIDTH,
    INVALID_MATRIX, INVALID_REF_LENGTH, INVALID_ANNOTATION_DIM, INVALID_ANNOTATION_LENGTH,
    MISSING_CELL_NAMES, INVALID_CELL_IDS_LENGTH, INVALID_QUALITY_LENGTH, TOO_FEW_CELLS,
)
from scicn.plotting import colors

"""
icn_mat is bins by cells

format:
                       CELL1             CELL2
chr1:1-500000             1                  2
chr1:500001-1000000       3                  4

ref holds the bins in the same order

bin                    chr    start    end
chr1:1-500000          chr1   1        500000
chr1:500001-1000000    chr1   500001   1000000

usage:
icn, ref = scicn.pp.read_icn_table('icn.tsv')
gini = scicn.tl.compute_gini(reads)
scicn.pl.plot_icn(icn, ref, gini, 'icn_heatmap', annotation=clone_labels, show_names=True)
"""


_panel_widths = {
    'dendrogram': 0.25,
    'quality': 0.1,
    'annotation': 0.1,
    'heatmap': 5.,
    'names': 0.2,
    'legend': 0.5,
}

_panel_heights = [2, 20, 20, 20]


class IcnPlotData(NamedTuple):
    """ Copy number and per cell annotations, with cells in clustering order """
    matrix: ndarray
    order: ndarray
    linkage: ndarray
    quality: ndarray
    quality_range: Tuple[float, float]
    annotation_codes: Optional[ndarray]
    annotation_levels: Optional[list]
    cell_ids: Optional[ndarray]
    chromosome_runs: DataFrame


class PanelLayout(NamedTuple):
    width_ratios: list
    height_ratios: list
    panels: Dict[str, tuple]


def panel_layout(plot_dendrogram: bool, show_names: bool, has_annotation: bool) -> PanelLayout:
    """ Grid arrangement of the heatmap panels.

    A thin top row holds the chromosome band above the heatmap, and three
    equal rows below hold the heatmap and its side panels. Legends stack in
    the rightmost column. The dendrogram column is kept, empty, when no
    dendrogram is drawn.

    Parameters
    ----------
    plot_dendrogram : bool
        draw the cell dendrogram
    show_names : bool
        add a column of cell names right of the heatmap
    has_annotation : bool
        add a categorical annotation column and its legend

    Returns
    -------
    PanelLayout
        width and height ratios, and grid positions keyed by panel name
    """
    columns = ['dendrogram', 'quality']
    if has_annotation:
        columns.append('annotation')
    columns.append('heatmap')
    if show_names:
        columns.append('names')
    columns.append('legend')

    col = {name: idx for idx, name in enumerate(columns)}
    body = slice(1, len(_panel_heights))

    panels = {
        'heatmap': (body, col['heatmap']),
        'chromosomes': (0, col['heatmap']),
        'quality': (body, col['quality']),
        'quality_legend': (1, col['legend']),
        'icn_legend': (3, col['legend']),
    }
    if plot_dendrogram:
        panels['dendrogram'] = (body, col['dendrogram'])
    if has_annotation:
        panels['annotation'] = (body, col['annotation'])
        panels['annotation_legend'] = (2, col['legend'])
    if show_names:
        panels['names'] = (body, col['names'])

    width_ratios = [_panel_widths[name] for name in columns]

    return PanelLayout(width_ratios, list(_panel_heights), panels)


def _as_matrix(icn_mat, cell_ids):
    if isinstance(icn_mat, DataFrame):
        if cell_ids is None:
            cell_ids = icn_mat.columns.astype(str)
        icn_mat = icn_mat.to_numpy()

    X = np.asarray(icn_mat)

    if X.ndim != 2 or X.dtype == bool or not np.issubdtype(X.dtype, np.number):
        raise ValueError(INVALID_MATRIX)

    if not np.isfinite(X).all():
        raise ValueError(f'{INVALID_MATRIX}, found missing or infinite values')

    return X, cell_ids


def prepare_icn_plot_data(
        icn_mat,
        ref,
        gini,
        annotation=None,
        show_names: bool=False,
        cell_ids=None,
    ) -> IcnPlotData:
    """ Validate heatmap inputs and order cells by hierarchical clustering.

    Parameters
    ----------
    icn_mat : ndarray or DataFrame
        integer copy number, one row per bin and one column per cell
    ref : DataFrame or PyRanges
        bins with a 'chr' column, aligned with the rows of icn_mat
    gini : array-like
        per cell quality metric, in the column order of icn_mat
    annotation : array-like, optional
        per cell category, in the column order of icn_mat, by default None
    show_names : bool, optional
        cell names will be displayed, by default False
    cell_ids : array-like, optional
        cell names, by default the columns of a DataFrame icn_mat

    Returns
    -------
    IcnPlotData
        clamped matrix (cells by bins), quality, annotation codes and cell ids
        all ordered by the same cell permutation

    Raises
    ------
    ValueError
        inputs are not a numeric matrix or are not aligned with it
    """
    X, cell_ids = _as_matrix(icn_mat, cell_ids)
    n_bins, n_cells = X.shape

    ref = scicn.tools.ranges.as_bins_dataframe(ref)
    if len(ref) != n_bins:
        raise ValueError(f'{INVALID_REF_LENGTH}: {len(ref)} != {n_bins}')

    if annotation is not None:
        annotation = np.asarray(annotation, dtype=object)
        if annotation.ndim != 1:
            raise ValueError(INVALID_ANNOTATION_DIM)
        if annotation.shape[0] != n_cells:
            raise ValueError(f'{INVALID_ANNOTATION_LENGTH}: {annotation.shape[0]} != {n_cells}')

    if cell_ids is not None:
        cell_ids = np.asarray(cell_ids, dtype=str)
        if cell_ids.ndim != 1 or cell_ids.shape[0] != n_cells:
            raise ValueError(f'{INVALID_CELL_IDS_LENGTH}: {cell_ids.size} != {n_cells}')

    if show_names and cell_ids is None:
        raise ValueError(MISSING_CELL_NAMES)

    gini = np.asarray(gini, dtype=float)
    if gini.ndim != 1 or gini.shape[0] != n_cells:
        raise ValueError(f'{INVALID_QUALITY_LENGTH}: {gini.size} != {n_cells}')

    if n_cells < 2:
        raise ValueError(TOO_FEW_CELLS)

    dat = colors.clamp_icn(X).T

    linkage, order = scicn.tools.sorting.hierarchical_order(dat, method='complete', metric='euclidean')

    annotation_codes = None
    annotation_levels = None
    if annotation is not None:
        annotation = pd.Categorical(annotation.astype(str))
        annotation_levels = list(annotation.categories)
        annotation_codes = np.asarray(annotation.codes)[order]

    return IcnPlotData(
        matrix=dat[order],
        order=order,
        linkage=linkage,
        quality=gini[order],
        quality_range=(float(np.nanmin(gini)), float(np.nanmax(gini))),
        annotation_codes=annotation_codes,
        annotation_levels=annotation_levels,
        cell_ids=None if cell_ids is None else cell_ids[order],
        chromosome_runs=scicn.tools.ranges.chromosome_runs(ref['chr'].astype(str)),
    )


def _plot_heatmap(ax, data):
    ax.imshow(colors.map_icn_colors_to_matrix(data.matrix), aspect='auto', interpolation='none')

    runs = data.chromosome_runs
    for val in [0] + list(runs['end_idx']):
        ax.axvline(x=val - 0.5, linewidth=LINE_WIDTH, color='black', zorder=100)

    ax.set_xlim(-0.5, data.matrix.shape[1] - 0.5)
    ax.set_axis_off()


def _plot_dendrogram(ax, data):
    with plt.rc_context({'lines.linewidth': 1}):
        sch.dendrogram(
            data.linkage, orientation='left', ax=ax, no_labels=True,
            color_threshold=-1, above_threshold_color='black')

    # leaves sit at 5, 15, 25, ... from the first cell in order
    ax.set_ylim(10 * data.matrix.shape[0], 0)
    ax.set_axis_off()


def _plot_cell_bar(ax, values, cmap, vmin=None, vmax=None):
    ax.imshow(
        np.asarray(values)[:, np.newaxis], aspect='auto', interpolation='none',
        cmap=cmap, vmin=vmin, vmax=vmax)
    ax.set_axis_off()


def _plot_chromosome_band(ax, data):
    runs = data.chromosome_runs
    band = np.repeat(np.arange(len(runs)) % 2, runs['size'].values)

    ax.imshow(
        band[np.newaxis, :], aspect='auto', interpolation='none',
        cmap=ListedColormap(list(CHROM_BAND_COLORS)), vmin=0, vmax=1)

    for idx, row in enumerate(runs.itertuples()):
        label = row.chr[len(CHROM_PREFIX):] if row.chr.startswith(CHROM_PREFIX) else row.chr
        ax.text(
            row.mid - 0.5, 0, label, ha='center', va='center',
            color=CHROM_LABEL_COLORS[idx % 2])

    ax.set_xlim(-0.5, band.shape[0] - 0.5)
    ax.set_axis_off()


def _plot_color_bar_legend(ax, hex_colors, ticks, ticklabels, title):
    ax.set_axis_off()

    axins = ax.inset_axes([0.25, 0.08, 0.2, 0.8])
    axins.imshow(
        np.arange(len(hex_colors))[:, np.newaxis], aspect='auto', interpolation='none',
        origin='lower', cmap=ListedColormap(hex_colors), vmin=-0.5, vmax=len(hex_colors) - 0.5)

    axins.set_xticks([])
    axins.yaxis.tick_right()
    axins.set_yticks(ticks)
    axins.set_yticklabels(ticklabels, fontweight='bold')
    axins.tick_params(axis='y', length=0)
    for spine in axins.spines.values():
        spine.set_visible(False)
    axins.set_title(title, fontweight='bold')


def _plot_quality_legend(ax, data, title):
    hex_colors = colors.quality_legend_colors()
    low, high = data.quality_range
    _plot_color_bar_legend(
        ax, hex_colors, [0, len(hex_colors) - 1],
        [f'{round(low, 2)}', f'{round(high, 2)}'], title)


def _plot_icn_legend(ax, data):
    states = np.unique(data.matrix)
    _plot_color_bar_legend(
        ax, [ICN_COLORS[s] for s in states], list(range(len(states))),
        [str(s) for s in states], 'integer CN')


def _plot_annotation_legend(ax, color_reference):
    ax.set_axis_off()
    patches, labels = colors.legend_patches(color_reference)
    ax.legend(patches, labels, loc='center', frameon=False)


def _plot_cell_names(ax, data):
    for idx, cell_id in enumerate(data.cell_ids):
        ax.text(0.5, idx, cell_id, ha='center', va='center', fontweight='bold')

    ax.set_xlim(0, 1)
    ax.set_ylim(len(data.cell_ids) - 0.5, -0.5)
    ax.set_axis_off()


def plot_icn(
        icn_mat,
        ref,
        gini,
        filename: str,
        annotation=None,
        plot_dendrogram: bool=True,
        show_names: bool=False,
        cell_ids=None,
        quality_label: str='Gini',
    ) -> None:
    """ Plot a heatmap of integer copy number with cells clustered by hierarchical clustering.

    Cells are ordered by complete linkage clustering on the euclidean distance
    between their copy number profiles, and the quality metric, annotation
    and name panels follow the same order. Copy number is displayed in the
    range 0 to 7, larger values saturate at 7.

    Parameters
    ----------
    icn_mat : ndarray or DataFrame
        integer copy number, one row per bin and one column per cell
    ref : DataFrame or PyRanges
        bins with a 'chr' column, in the row order of icn_mat
    gini : array-like
        per cell quality metric such as the gini coefficient, in the column order of icn_mat
    filename : str
        output file name without extension, '.png' is appended
    annotation : array-like, optional
        per cell category, in the column order of icn_mat, by default None
    plot_dendrogram : bool, optional
        whether to plot the dendrogram, by default True
    show_names : bool, optional
        whether to show cell names, by default False
    cell_ids : array-like, optional
        cell names, by default the columns of a DataFrame icn_mat
    quality_label : str, optional
        title of the quality metric legend, by default 'Gini'

    Raises
    ------
    ValueError
        invalid or misaligned inputs, raised before any file is written

    Examples
    -------

    .. plot::
        :context: close-figs

        import numpy as np
        import scicn
        ref = scicn.tl.create_bins(50000000, genome_version='hg19', sex=False)
        icn = np.random.randint(0, 10, size=(len(ref), 10))
        gini = np.random.uniform(0.1, 0.4, size=10)
        scicn.pl.plot_icn(icn, ref, gini, 'plot_icn_demo')
    """
    data = prepare_icn_plot_data(
        icn_mat, ref, gini, annotation=annotation, show_names=show_names, cell_ids=cell_ids)

    layout = panel_layout(plot_dendrogram, show_names, data.annotation_codes is not None)

    output_filename = f'{filename}.png'
    logging.info(f'plotting {data.matrix.shape[0]} cells by {data.matrix.shape[1]} bins to {output_filename}')

    with plt.rc_context({'font.size': FONT_SIZE, 'font.weight': 'bold'}):
        fig = plt.figure(figsize=FIGURE_SIZE, dpi=FIGURE_DPI)

        try:
            gs = fig.add_gridspec(
                nrows=len(layout.height_ratios), ncols=len(layout.width_ratios),
                width_ratios=layout.width_ratios, height_ratios=layout.height_ratios,
                left=0, right=1, bottom=0, top=1, wspace=0, hspace=0)

            axes = {name: fig.add_subplot(gs[pos]) for name, pos in layout.panels.items()}

            _plot_heatmap(axes['heatmap'], data)
            _plot_chromosome_band(axes['chromosomes'], data)

            if plot_dendrogram:
                _plot_dendrogram(axes['dendrogram'], data)

            _plot_cell_bar(axes['quality'], data.quality, colors.quality_cmap())
            _plot_quality_legend(axes['quality_legend'], data, quality_label)

            if data.annotation_codes is not None:
                color_reference = colors.annotation_colors(data.annotation_levels)
                _plot_cell_bar(
                    axes['annotation'], data.annotation_codes,
                    ListedColormap(list(color_reference.values())),
                    vmin=-0.5, vmax=len(color_reference) - 0.5)
                _plot_annotation_legend(axes['annotation_legend'], color_reference)

            _plot_icn_legend(axes['icn_legend'], data)

            if show_names:
                _plot_cell_names(axes['names'], data)

            fig.savefig(output_filename, dpi=FIGURE_DPI)

        finally:
            plt.close(fig)


def plot_icn_anndata(
        adata: AnnData,
        filename: str,
        layer_name: str='state',
        quality_field: str='gini',
        annotation_field: str=None,
        plot_dendrogram: bool=True,
        show_names: bool=False,
    ) -> None:
    """ Plot a clustered integer copy number heatmap from anndata.

    Parameters
    ----------
    adata : AnnData
        copy number data, cells by bins, with 'chr' in var
    filename : str
        output file name without extension, '.png' is appended
    layer_name : str, optional
        layer with integer copy number, None for X, by default 'state'
    quality_field : str, optional
        obs column with the per cell quality metric, by default 'gini'
    annotation_field : str, optional
        obs column with a per cell category, by default None
    plot_dendrogram : bool, optional
        whether to plot the dendrogram, by default True
    show_names : bool, optional
        whether to show cell names, by default False
    """
    if layer_name is not None:
        X = adata.layers[layer_name]
    else:
        X = adata.X

    if scipy.sparse.issparse(X):
        X = X.toarray()

    icn = pd.DataFrame(np.asarray(X).T, index=adata.var.index, columns=adata.obs.index)

    annotation = None
    if annotation_field is not None:
        annotation = adata.obs[annotation_field].values

    plot_icn(
        icn,
        adata.var,
        adata.obs[quality_field].values,
        filename,
        annotation=annotation,
        plot_dendrogram=plot_dendrogram,
        show_names=show_names,
        quality_label=quality_field,
    )
