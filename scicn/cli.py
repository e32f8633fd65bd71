import sys
import click
import logging

import scicn.preprocessing
import scicn.plotting
from scicn.constants import LOGGING_FORMAT, REFERENCE_GENOMES


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='debug logging')
def cli(verbose):
    logging.basicConfig(
        format=LOGGING_FORMAT, stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.INFO)


@cli.command()
@click.argument('output', type=click.Path())
@click.option('--bam-dir', type=click.Path(exists=True, file_okay=False), default=None,
              help='directory of bam files to list alongside the bins')
@click.option('--pattern', default='*.dedup.bam', show_default=True, help='bam file name pattern')
@click.option('--hgref', type=click.Choice(REFERENCE_GENOMES), default='hg19', show_default=True)
@click.option('--resolution', type=float, default=500, show_default=True, help='bin length in kb')
@click.option('--sex/--no-sex', default=False, show_default=True, help='include sex chromosomes')
def bins(output, bam_dir, pattern, hgref, resolution, sex):
    """
    Tile the reference genome into fixed width bins and write them to OUTPUT as tsv.
    """
    bamdir, sampname = [], []
    if bam_dir is not None:
        bamdir, sampname = scicn.preprocessing.list_bam_files(bam_dir, pattern=pattern)
        for path, name in zip(bamdir, sampname):
            logging.info(f'sample {name}: {path}')

    try:
        bambed = scicn.preprocessing.get_bam_bed(bamdir, sampname, hgref=hgref, resolution=resolution, sex=sex)
    except ValueError as e:
        raise click.UsageError(str(e))

    bambed.ref.to_csv(output, sep='\t', index=False)
    logging.info(f'wrote {len(bambed.ref)} bins to {output}')


@cli.command('plot-icn')
@click.argument('icn_table', type=click.Path(exists=True, dir_okay=False))
@click.argument('quality_table', type=click.Path(exists=True, dir_okay=False))
@click.argument('filename', type=click.Path())
@click.option('--annotation', type=click.Path(exists=True, dir_okay=False), default=None,
              help='tsv of cell_id and a per cell category')
@click.option('--dendrogram/--no-dendrogram', default=True, show_default=True)
@click.option('--show-names', is_flag=True, help='label rows with cell ids')
@click.option('--quality-label', default='Gini', show_default=True, help='quality metric legend title')
def plot_icn(icn_table, quality_table, filename, annotation, dendrogram, show_names, quality_label):
    """
    Plot the integer copy number in ICN_TABLE, annotated with the per cell
    metric in QUALITY_TABLE, to FILENAME.png.
    """
    icn, ref = scicn.preprocessing.read_icn_table(icn_table)

    quality = scicn.preprocessing.read_cell_values(quality_table)
    missing = icn.columns.difference(quality.index)
    if len(missing) > 0:
        raise click.UsageError(f'{len(missing)} cells have no quality value, first is {missing[0]}')

    annotation_values = None
    if annotation is not None:
        annotation_data = scicn.preprocessing.read_cell_values(annotation)
        missing = icn.columns.difference(annotation_data.index)
        if len(missing) > 0:
            raise click.UsageError(f'{len(missing)} cells have no annotation, first is {missing[0]}')
        annotation_values = annotation_data.reindex(icn.columns).values

    try:
        scicn.plotting.plot_icn(
            icn, ref, quality.reindex(icn.columns).values, filename,
            annotation=annotation_values,
            plot_dendrogram=dendrogram,
            show_names=show_names,
            quality_label=quality_label,
        )
    except ValueError as e:
        raise click.UsageError(str(e))


if __name__ == '__main__':
    cli()
