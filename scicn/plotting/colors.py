"""
input: field name (icn, state, cn), categorical levels, or a two colour gradient
return:
        rgb color ref
        hex color ref
        colormap
"""

import matplotlib
import numpy as np
import seaborn as sns
from matplotlib.colors import LinearSegmentedColormap, ListedColormap
from matplotlib.colors import to_rgb, to_hex
from matplotlib.patches import Patch
from numpy import ndarray

from scicn.constants import (
    MIN_DISPLAY_CN, MAX_DISPLAY_CN, ICN_COLORS,
    QUALITY_COLOR_LOW, QUALITY_COLOR_HIGH, QUALITY_COLOR_STEPS,
    QUALITY_LEGEND_PALETTE, QUALITY_LEGEND_STEPS,
    ANNOTATION_PALETTE, ANNOTATION_PALETTE_SIZE,
)


class Colors(object):
    def __init__(
            self,
            field_name=None,
            levels=None,
            gradient=None,
            num_steps=QUALITY_COLOR_STEPS,
    ):

        if field_name is not None:
            self.hex_color_reference = self.infer_color_reference_from_fieldname(field_name)
            self.cmap = self.get_cmap_from_reference()

        elif levels is not None:
            levels = list(levels)
            palette = self.infer_colormap_from_levels(len(levels))
            self.hex_color_reference = dict(zip(levels, self.load_preset_colors(palette, len(levels))))
            self.cmap = self.get_cmap_from_reference()

        elif gradient is not None:
            self.cmap = LinearSegmentedColormap.from_list('gradient', list(gradient), N=num_steps)
            self.hex_color_reference = {
                i: to_hex(self.cmap(i)) for i in range(num_steps)}

        else:
            raise ValueError('one of field_name, levels or gradient is required')

        self.rgb_color_reference = self.translate_hex_to_rgb(self.hex_color_reference)

    @property
    def icn_color_reference(self):
        return dict(zip(range(MIN_DISPLAY_CN, MAX_DISPLAY_CN + 1), ICN_COLORS))

    def infer_color_reference_from_fieldname(self, field_name):

        if field_name.lower() in ('icn', 'state', 'cn'):
            return self.icn_color_reference
        else:
            raise ValueError(f'no color reference for field {field_name}')

    def infer_colormap_from_levels(self, num_levels):
        if num_levels <= ANNOTATION_PALETTE_SIZE:
            return ANNOTATION_PALETTE
        elif num_levels <= 20:
            return 'tab20'
        else:
            return 'hsv'

    def get_cmap_from_reference(self):
        return ListedColormap(list(self.hex_color_reference.values()))

    def load_preset_colors(self, palette, num_levels):
        cmap = matplotlib.colormaps[palette]

        if isinstance(cmap, ListedColormap) and cmap.N >= num_levels:
            colors = cmap.colors[:num_levels]
        else:
            colors = cmap(np.linspace(0, 1, num_levels, endpoint=False))

        return [to_hex(c) for c in colors]

    def translate_hex_to_rgb(self, color_reference):

        new_reference = {}
        for k, v in color_reference.items():
            new_reference[k] = to_rgb(v)

        return new_reference


def clamp_icn(X) -> ndarray:
    """ Round copy number and clamp it to the displayed range

    Parameters
    ----------
    X : array-like
        copy number states

    Returns
    -------
    ndarray
        integer states, values above the range saturate at its maximum and
        values below at its minimum
    """
    X = np.rint(np.asarray(X, dtype=float))
    return np.clip(X, MIN_DISPLAY_CN, MAX_DISPLAY_CN).astype(int)


def map_icn_colors_to_matrix(X) -> ndarray:
    """ Create an array of colors from an array of copy number states

    Parameters
    ----------
    X : array-like
        copy number states

    Returns
    -------
    ndarray
        colors with shape X.shape + (3,)
    """
    color_reference = Colors(field_name='icn').rgb_color_reference

    X = clamp_icn(X)

    X_colors = np.zeros(X.shape + (3,))
    for state, rgb in color_reference.items():
        X_colors[X == state, :] = rgb

    return X_colors


def quality_cmap():
    """ Continuous two color gradient for the per cell quality metric """
    return Colors(gradient=(QUALITY_COLOR_LOW, QUALITY_COLOR_HIGH)).cmap


def quality_legend_colors():
    return [to_hex(c) for c in sns.color_palette(QUALITY_LEGEND_PALETTE, QUALITY_LEGEND_STEPS)]


def annotation_colors(levels):
    """ Qualitative colors for sorted categorical levels

    Parameters
    ----------
    levels : Sequence
        sorted distinct categories

    Returns
    -------
    dict
        hex color keyed by level
    """
    return Colors(levels=levels).hex_color_reference


def legend_patches(color_reference):
    labels = []
    patches = []
    for s, h in color_reference.items():
        labels.append(str(s))
        patches.append(Patch(facecolor=h, edgecolor=h))
    return patches, labels
