LOGGING_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Reference genomes
REFERENCE_GENOMES = ('hg19', 'hg38', 'mm10')
AUTOSOME_COUNT = {
    'hg19': 22,
    'hg38': 22,
    'mm10': 19,
}
SEX_CHROMOSOMES = ('X', 'Y')
CHROM_PREFIX = 'chr'
KB = 1000

# Integer copy number display
MIN_DISPLAY_CN = 0
MAX_DISPLAY_CN = 7
ICN_COLORS = [
    '#2166AC', '#92C5DE', '#FDFDFD', '#FDDBC7',
    '#F4A582', '#D6604D', '#B2182B', '#67001F',
]
QUALITY_COLOR_LOW = '#F7FBFF'
QUALITY_COLOR_HIGH = '#084594'
QUALITY_COLOR_STEPS = 50
QUALITY_LEGEND_PALETTE = 'Blues'
QUALITY_LEGEND_STEPS = 8
ANNOTATION_PALETTE = 'Set3'
ANNOTATION_PALETTE_SIZE = 12
CHROM_BAND_COLORS = ('gray', 'black')
CHROM_LABEL_COLORS = ('black', 'grey')

# Figure
FIGURE_SIZE = (25, 16)
FIGURE_DPI = 100
FONT_SIZE = 27
LINE_WIDTH = 2

# Error messages
INVALID_REFERENCE = "Reference genome should be hg19, hg38 or mm10"
INVALID_RESOLUTION = "Invalid fixed bin length"
INVALID_MATRIX = "Invalid plot object: must be an integer matrix"
INVALID_REF_LENGTH = "Invalid ref object: length of ref and # of rows in icn_mat must be the same"
INVALID_ANNOTATION_DIM = "Invalid annotation object: has to be a vector with the same # of cells as that of icn_mat"
INVALID_ANNOTATION_LENGTH = "Invalid annotation object: length of annotation and # of cells in icn_mat must be the same"
MISSING_CELL_NAMES = "Invalid plot object: cell names cannot be None"
INVALID_CELL_IDS_LENGTH = "Invalid cell_ids object: length of cell_ids and # of cells in icn_mat must be the same"
INVALID_QUALITY_LENGTH = "Invalid quality object: length of quality metric and # of cells in icn_mat must be the same"
TOO_FEW_CELLS = "Invalid plot object: at least two cells are required for clustering"
