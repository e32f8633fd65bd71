from .colors import Colors, clamp_icn, map_icn_colors_to_matrix, quality_cmap, annotation_colors
from .heatmap import plot_icn, plot_icn_anndata, prepare_icn_plot_data, panel_layout
