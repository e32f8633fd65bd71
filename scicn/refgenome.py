import importlib.resources

import numpy as np
import pandas as pd

from scicn.constants import REFERENCE_GENOMES, AUTOSOME_COUNT, SEX_CHROMOSOMES, CHROM_PREFIX, INVALID_REFERENCE


def normalize_chromosome_names(names):
    """ Add the chr prefix to bare chromosome names, leave prefixed names untouched
    """
    return [a if a.startswith(CHROM_PREFIX) else CHROM_PREFIX + a for a in map(str, names)]


class RefGenome(object):
    def __init__(self, genome_version='hg19'):
        if genome_version not in REFERENCE_GENOMES:
            raise ValueError(f'{INVALID_REFERENCE}, got {genome_version}')
        self.genome_version = genome_version

    def autosomes(self):
        return [str(a) for a in range(1, AUTOSOME_COUNT[self.genome_version] + 1)]

    def plot_chromosomes(self, sex=True):
        chromosomes = self.autosomes()
        if sex:
            chromosomes += list(SEX_CHROMOSOMES)
        return chromosomes

    def chromosomes(self, sex=True):
        return normalize_chromosome_names(self.plot_chromosomes(sex=sex))

    def chromosome_lengths(self):
        resource = importlib.resources.files('scicn') / 'data' / f'{self.genome_version}.chrom.sizes'

        with resource.open('r') as f:
            chromosome_lengths = pd.read_csv(
                f,
                sep='\t',
                header=None,
                names=['chr', 'chromosome_length'],
                dtype={'chr': str, 'chromosome_length': np.int64},
            )

        chromosome_lengths['chr'] = normalize_chromosome_names(chromosome_lengths['chr'])

        return chromosome_lengths

    def chromosome_info(self, sex=True):
        chromosome_info = self.chromosome_lengths()

        chromosomes = self.chromosomes(sex=sex)
        assert set(chromosomes).issubset(chromosome_info['chr']), f'{self.genome_version} is missing chromosomes'

        # Subset and order according to list of chromosomes
        chromosome_info = chromosome_info.set_index('chr').loc[chromosomes].reset_index()
        chromosome_info['chr_index'] = range(chromosome_info.shape[0])

        # Add plotting names of chromosomes
        chromosome_info['chr_plot'] = self.plot_chromosomes(sex=sex)

        # Add start end and mid
        chromosome_info['chromosome_end'] = np.cumsum(chromosome_info['chromosome_length'])
        chromosome_info['chromosome_start'] = chromosome_info['chromosome_end'].shift(1)
        chromosome_info.loc[chromosome_info.index[0], 'chromosome_start'] = 0
        chromosome_info['chromosome_start'] = chromosome_info['chromosome_start'].astype(int)
        chromosome_info['chromosome_mid'] = (chromosome_info['chromosome_start'] + chromosome_info[
            'chromosome_end']) // 2

        return chromosome_info


def chromosome_info(genome_version='hg19', sex=True):
    return RefGenome(genome_version=genome_version).chromosome_info(sex=sex)


def chromosomes(genome_version='hg19', sex=True):
    return RefGenome(genome_version=genome_version).chromosomes(sex=sex)


def plot_chromosomes(genome_version='hg19', sex=True):
    return RefGenome(genome_version=genome_version).plot_chromosomes(sex=sex)
