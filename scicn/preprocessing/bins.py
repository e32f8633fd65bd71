import glob
import logging
import os

from pandas import DataFrame
from typing import NamedTuple, Sequence, Tuple, List

import scicn.tools.ranges
from scicn.constants import REFERENCE_GENOMES, KB, INVALID_REFERENCE, INVALID_RESOLUTION


class BamBed(NamedTuple):
    """ BAM file paths, sample names and the genome wide bins they will be counted in """
    bamdir: Sequence[str]
    sampname: Sequence[str]
    ref: DataFrame


def get_bam_bed(
        bamdir: Sequence[str],
        sampname: Sequence[str],
        hgref: str='hg19',
        resolution: float=500,
        sex: bool=False,
    ) -> BamBed:
    """ Get bam file paths, sample names, and whole genome fixed width bins.

    Parameters
    ----------
    bamdir : Sequence[str]
        bam file paths, in the same order as `sampname`
    sampname : Sequence[str]
        sample names, in the same order as `bamdir`
    hgref : str, optional
        reference genome, one of 'hg19', 'hg38' or 'mm10', by default 'hg19'
    resolution : float, optional
        fixed bin length in kb, by default 500
    sex : bool, optional
        whether to include sex chromosomes, by default False

    Returns
    -------
    BamBed
        bamdir and sampname as given, and ref, bins with columns 'chr',
        'start', 'end' sorted in genomic order

    Raises
    ------
    ValueError
        unsupported reference genome or non positive resolution

    Examples
    -------

    >>> import scicn
    >>> bambed = scicn.pp.get_bam_bed(['a.bam'], ['a'], hgref='hg38', resolution=500)
    >>> bambed.ref.index[0]
    'chr1:1-500000'
    """
    if hgref not in REFERENCE_GENOMES:
        raise ValueError(f'{INVALID_REFERENCE}, got {hgref}')

    if resolution <= 0:
        raise ValueError(f'{INVALID_RESOLUTION}: {resolution}')

    binsize = int(round(resolution * KB))
    if binsize < 1:
        raise ValueError(f'{INVALID_RESOLUTION}: {resolution}')

    ref = scicn.tools.ranges.create_bins(binsize, genome_version=hgref, sex=sex)

    logging.info(f'created {len(ref)} bins of {resolution} kb for {len(sampname)} samples')

    return BamBed(bamdir=bamdir, sampname=sampname, ref=ref)


def list_bam_files(directory: str, pattern: str='*.dedup.bam') -> Tuple[List[str], List[str]]:
    """ List bam files in a directory along with sample names.

    The sample name is the file name up to its first '.'.

    Parameters
    ----------
    directory : str
        directory containing bam files
    pattern : str, optional
        glob pattern of bam file names, by default '*.dedup.bam'

    Returns
    -------
    Tuple[List[str], List[str]]
        sorted bam file paths and matching sample names
    """
    bamdir = sorted(glob.glob(os.path.join(directory, pattern)))

    if len(bamdir) == 0:
        logging.warning(f'no files matching {pattern} in {directory}')

    sampname = [os.path.basename(a).split('.')[0] for a in bamdir]

    return bamdir, sampname
