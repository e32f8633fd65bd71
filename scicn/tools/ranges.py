import logging
import numpy as np
import pandas as pd
import pyranges as pr
import scicn.refgenome

from pandas import DataFrame
from typing import Sequence


class Ranges(object):

    def convert_to_pyranges(self, data):
        assert 'chr' in data.columns
        assert 'start' in data.columns
        assert 'end' in data.columns

        pr_data = pr.PyRanges(data.rename(columns={
            'chr': 'Chromosome',
            'start': 'Start',
            'end': 'End',
        }))

        return pr_data

    def convert_to_dataframe(self, ranges):
        data = ranges.as_df().rename(columns={
            'Chromosome': 'chr',
            'Start': 'start',
            'End': 'end',
        })

        return data

    def tile_data(self, data, binsize):
        ranges = self.convert_to_pyranges(data)

        # last tile of each chromosome is cut at the chromosome end
        bins = pr.gf.tile_genome(ranges, binsize, tile_last=False)

        bins_df = self.convert_to_dataframe(bins)

        # empty tile left over when a chromosome length is a multiple of binsize
        bins_df = bins_df[bins_df['end'] > bins_df['start']]

        return bins_df


def as_bins_dataframe(ref) -> DataFrame:
    """ Coerce a PyRanges or DataFrame of bins to a DataFrame with a chr column

    Parameters
    ----------
    ref : PyRanges or DataFrame
        genomic bins

    Returns
    -------
    DataFrame
        bins with columns 'chr', 'start', 'end'
    """
    if isinstance(ref, pr.PyRanges):
        return Ranges().convert_to_dataframe(ref)

    if not isinstance(ref, DataFrame) or 'chr' not in ref.columns:
        raise ValueError('Invalid ref object: expected a PyRanges or a DataFrame with a chr column')

    return ref


def sort_bins(bins: DataFrame, chromosomes: Sequence[str]) -> DataFrame:
    """ Sort bins by chromosome order then position, dropping chromosomes not listed

    Parameters
    ----------
    bins : DataFrame
        bins with columns 'chr', 'start', 'end'
    chromosomes : Sequence[str]
        chromosomes in genomic order

    Returns
    -------
    DataFrame
        sorted bins with an ordered categorical chr and a 'bin' index
    """
    bins = bins[bins['chr'].astype(str).isin(chromosomes)].copy()

    bins['chr'] = pd.Categorical(bins['chr'].astype(str), categories=list(chromosomes), ordered=True)
    bins['chr'] = bins['chr'].cat.remove_unused_categories()

    bins = bins.sort_values(['chr', 'start', 'end'])

    bins.index = (
        bins['chr'].astype(str) + ':' +
        bins['start'].astype(str) + '-' +
        bins['end'].astype(str))
    bins.index.name = 'bin'

    return bins[['chr', 'start', 'end']]


def create_bins(binsize: int, genome_version: str = 'hg19', sex: bool = True) -> DataFrame:
    """ Create a regular binning of the genome

    Parameters
    ----------
    binsize : int
        size of bins in base pairs
    genome_version : str, optional
        reference genome, one of 'hg19', 'hg38', 'mm10', by default 'hg19'
    sex : bool, optional
        include X and Y chromosomes, by default True

    Returns
    -------
    DataFrame
        regular bins tiled across the genome, 1-based closed coordinates,
        sorted by chromosome then start
    """
    refgenome = scicn.refgenome.RefGenome(genome_version)

    chromsizes = refgenome.chromosome_info(sex=sex)[['chr', 'chromosome_length']].rename(
        columns={'chromosome_length': 'end'}).assign(start=0)[['chr', 'start', 'end']]

    logging.info(f'tiling {genome_version} into {binsize} bp bins over {len(chromsizes)} chromosomes')

    bins = Ranges().tile_data(chromsizes, binsize)
    bins['start'] = bins['start'] + 1

    bins = sort_bins(bins, refgenome.chromosomes(sex=sex))

    assert (bins['end'] - bins['start'] + 1 <= binsize).all()

    return bins


def chromosome_runs(chromosomes) -> DataFrame:
    """ Run length encoding of consecutive identical chromosome labels

    Parameters
    ----------
    chromosomes : array-like
        chromosome of each bin, in plotting order

    Returns
    -------
    DataFrame
        one row per run with columns 'chr', 'start_idx', 'end_idx', 'size', 'mid'
        where 'end_idx' is exclusive
    """
    chromosomes = np.asarray(chromosomes, dtype=str)
    assert chromosomes.shape[0] > 0

    chrom_boundaries = np.array(
        [0] + list(np.where(chromosomes[1:] != chromosomes[:-1])[0] + 1) + [chromosomes.shape[0]]
    )

    runs = pd.DataFrame({
        'chr': chromosomes[chrom_boundaries[:-1]],
        'start_idx': chrom_boundaries[:-1],
        'end_idx': chrom_boundaries[1:],
    })
    runs['size'] = runs['end_idx'] - runs['start_idx']
    runs['mid'] = runs['start_idx'] + runs['size'] / 2

    return runs
