from .ranges import Ranges, create_bins, sort_bins, as_bins_dataframe, chromosome_runs
from .sorting import hierarchical_order, sort_cells
from .qc import compute_gini
