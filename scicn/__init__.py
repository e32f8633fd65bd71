""" Single-cell integer copy number heatmaps and reference bins in Python. """

from . import tools as tl
from . import preprocessing as pp
from . import plotting as pl

__version__ = '0.1.0'

# has to be done at the end, after everything has been imported
import sys

sys.modules.update({f'{__name__}.{m}': globals()[m] for m in ['tl', 'pp', 'pl']})

del sys
