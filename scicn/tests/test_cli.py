import matplotlib
matplotlib.use('Agg')

import pandas as pd
from click.testing import CliRunner

from scicn.cli import cli
from scicn.tests.constants_test import E1_GINI, E1_ANNOTATION, E1_CELL_IDS
from scicn.tests.test_load_cn import write_icn_table, write_cell_values


def test_bins(tmp_path):
    (tmp_path / 'c1.dedup.bam').write_text('')
    output = tmp_path / 'bins.tsv'

    result = CliRunner().invoke(cli, [
        'bins', str(output), '--bam-dir', str(tmp_path), '--hgref', 'mm10', '--resolution', '10000', '--sex'])

    assert result.exit_code == 0, result.output
    bins = pd.read_csv(output, sep='\t')
    assert list(bins.columns) == ['chr', 'start', 'end']
    assert bins['chr'].iloc[0] == 'chr1'
    assert bins['chr'].iloc[-1] == 'chrY'


def test_bins_invalid_resolution(tmp_path):
    result = CliRunner().invoke(cli, ['bins', str(tmp_path / 'bins.tsv'), '--resolution', '0'])

    assert result.exit_code == 2
    assert 'Invalid fixed bin length' in result.output
    assert not (tmp_path / 'bins.tsv').exists()


def test_bins_invalid_reference(tmp_path):
    result = CliRunner().invoke(cli, ['bins', str(tmp_path / 'bins.tsv'), '--hgref', 'hg18'])

    assert result.exit_code == 2


def test_plot_icn(tmp_path):
    write_icn_table(tmp_path / 'icn.tsv')
    write_cell_values(tmp_path / 'gini.tsv', E1_GINI)
    write_cell_values(tmp_path / 'clone.tsv', E1_ANNOTATION, name='clone')

    result = CliRunner().invoke(cli, [
        'plot-icn', str(tmp_path / 'icn.tsv'), str(tmp_path / 'gini.tsv'), str(tmp_path / 'out'),
        '--annotation', str(tmp_path / 'clone.tsv'), '--show-names', '--no-dendrogram'])

    assert result.exit_code == 0, result.output
    assert (tmp_path / 'out.png').exists()


def test_plot_icn_missing_quality(tmp_path):
    write_icn_table(tmp_path / 'icn.tsv')
    pd.DataFrame({'cell_id': ['cell_0'], 'gini': [0.2]}).to_csv(tmp_path / 'gini.tsv', sep='\t', index=False)

    result = CliRunner().invoke(cli, [
        'plot-icn', str(tmp_path / 'icn.tsv'), str(tmp_path / 'gini.tsv'), str(tmp_path / 'out')])

    assert result.exit_code == 2
    assert not (tmp_path / 'out.png').exists()


def test_plot_icn_missing_annotation(tmp_path):
    write_icn_table(tmp_path / 'icn.tsv')
    write_cell_values(tmp_path / 'gini.tsv', E1_GINI)
    pd.DataFrame({'cell_id': E1_CELL_IDS[:5], 'clone': E1_ANNOTATION[:5]}).to_csv(
        tmp_path / 'clone.tsv', sep='\t', index=False)

    result = CliRunner().invoke(cli, [
        'plot-icn', str(tmp_path / 'icn.tsv'), str(tmp_path / 'gini.tsv'), str(tmp_path / 'out'),
        '--annotation', str(tmp_path / 'clone.tsv')])

    assert result.exit_code == 2
    assert 'no annotation' in result.output
    assert not (tmp_path / 'out.png').exists()
