from .bins import BamBed, get_bam_bed, list_bam_files
from .load_cn import read_icn_table, read_cell_values, create_icn_anndata
