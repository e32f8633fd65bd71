import numpy as np
import pytest
from matplotlib.colors import to_hex, to_rgb

from scicn.constants import ICN_COLORS
from scicn.plotting.colors import (
    Colors, clamp_icn, map_icn_colors_to_matrix, quality_cmap, annotation_colors)


def test_clamp_icn():
    X = np.array([[-2, 0, 3.4], [7, 8, 25]])
    assert clamp_icn(X).tolist() == [[0, 0, 3], [7, 7, 7]]


def test_saturated_states_share_colors():
    X_colors = map_icn_colors_to_matrix(np.array([[7, 9, 100, 0, -1, -5]]))

    assert np.allclose(X_colors[0, 1], X_colors[0, 0])
    assert np.allclose(X_colors[0, 2], X_colors[0, 0])
    assert np.allclose(X_colors[0, 4], X_colors[0, 3])
    assert np.allclose(X_colors[0, 5], X_colors[0, 3])
    assert np.allclose(X_colors[0, 0], to_rgb(ICN_COLORS[7]))
    assert np.allclose(X_colors[0, 3], to_rgb(ICN_COLORS[0]))


def test_icn_reference():
    reference = Colors(field_name='state').hex_color_reference
    assert list(reference.keys()) == list(range(8))
    assert reference[2] == '#FDFDFD'


def test_annotation_colors():
    reference = annotation_colors(['a', 'b', 'c'])

    assert list(reference.keys()) == ['a', 'b', 'c']
    assert reference['a'] == '#8dd3c7'
    assert len(set(reference.values())) == 3


def test_annotation_colors_many_levels():
    reference = annotation_colors([f'l{i}' for i in range(15)])
    assert len(set(reference.values())) == 15


def test_quality_cmap():
    cmap = quality_cmap()
    assert cmap.N == 50
    assert to_hex(cmap(0.)) == '#f7fbff'
    assert to_hex(cmap(1.)) == '#084594'


def test_unknown_field():
    with pytest.raises(ValueError):
        Colors(field_name='giemsa')
