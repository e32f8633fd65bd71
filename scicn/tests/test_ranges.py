import numpy as np
import pandas as pd
import pyranges as pr
import pytest

import scicn.refgenome
from scicn.tools.ranges import Ranges, create_bins, sort_bins, as_bins_dataframe, chromosome_runs


def test_tile_data_cuts_last_tile():
    chromsizes = pd.DataFrame({'chr': ['chr1', 'chr2'], 'start': [0, 0], 'end': [2500, 2000]})

    bins = Ranges().tile_data(chromsizes, 1000).sort_values(['chr', 'start'])

    assert list(bins['start']) == [0, 1000, 2000, 0, 1000]
    assert list(bins['end']) == [1000, 2000, 2500, 1000, 2000]


def test_create_bins():
    binsize = 1000000
    bins = create_bins(binsize, genome_version='hg38', sex=True)
    chromosome_info = scicn.refgenome.chromosome_info('hg38', sex=True)

    assert list(bins['chr'].cat.categories) == list(chromosome_info['chr'])

    for row in chromosome_info.itertuples():
        chr_bins = bins[bins['chr'] == row.chr]
        assert len(chr_bins) == int(np.ceil(row.chromosome_length / binsize))
        assert chr_bins['start'].iloc[0] == 1
        assert chr_bins['end'].iloc[-1] == row.chromosome_length
        assert (chr_bins['end'].iloc[:-1] - chr_bins['start'].iloc[:-1] + 1 == binsize).all()
        assert (chr_bins['start'].values[1:] == chr_bins['end'].values[:-1] + 1).all()

    assert bins.index[0] == 'chr1:1-1000000'


def test_sort_bins():
    bins = pd.DataFrame({
        'chr': ['chr10', 'chr2', 'chrM', 'chr2'],
        'start': [1, 101, 1, 1],
        'end': [100, 200, 100, 100],
    })

    bins = sort_bins(bins, ['chr2', 'chr10'])

    assert list(bins.index) == ['chr2:1-100', 'chr2:101-200', 'chr10:1-100']


def test_as_bins_dataframe():
    ranges = pr.PyRanges(pd.DataFrame({'Chromosome': ['chr1'], 'Start': [0], 'End': [10]}))

    bins = as_bins_dataframe(ranges)
    assert list(bins['chr'].astype(str)) == ['chr1']

    with pytest.raises(ValueError):
        as_bins_dataframe(pd.DataFrame({'start': [1]}))


def test_chromosome_runs():
    runs = chromosome_runs(['chr1'] * 3 + ['chr2'] * 2 + ['chrX'])

    assert list(runs['chr']) == ['chr1', 'chr2', 'chrX']
    assert list(runs['start_idx']) == [0, 3, 5]
    assert list(runs['end_idx']) == [3, 5, 6]
    assert list(runs['size']) == [3, 2, 1]
    assert list(runs['mid']) == [1.5, 4., 5.5]
