import numpy as np
import pandas as pd

####
E1_CHR_SIZES = {'chr1': 40, 'chr2': 35, 'chr3': 25}
E1_BIN_SIZE = 500000


def make_ref(chr_sizes=E1_CHR_SIZES, binsize=E1_BIN_SIZE):
    rows = []
    for chrom, num_bins in chr_sizes.items():
        for i in range(num_bins):
            rows.append((chrom, i * binsize + 1, (i + 1) * binsize))
    ref = pd.DataFrame(rows, columns=['chr', 'start', 'end'])
    ref.index = ref['chr'] + ':' + ref['start'].astype(str) + '-' + ref['end'].astype(str)
    return ref


E1_REF = make_ref()
E1_NUM_BINS = len(E1_REF)
E1_NUM_CELLS = 10
E1_CELL_IDS = [f'cell_{i}' for i in range(E1_NUM_CELLS)]

_rng = np.random.default_rng(42)
E1_ICN_MAT = _rng.integers(0, 10, size=(E1_NUM_BINS, E1_NUM_CELLS))
E1_GINI = _rng.uniform(0.1, 0.5, size=E1_NUM_CELLS)
E1_ANNOTATION = np.array(['clone_b', 'clone_a', 'clone_c', 'clone_a', 'clone_b'] * 2)

#######
# two groups of cells with distinct profiles
E2_GROUP_A = np.array([2, 2, 2, 2, 3, 3])
E2_GROUP_B = np.array([1, 1, 4, 4, 4, 4])
E2_ICN_MAT = np.array([E2_GROUP_A, E2_GROUP_B, E2_GROUP_A, E2_GROUP_B]).T
E2_CELL_IDS = ['a1', 'b1', 'a2', 'b2']
E2_REF = make_ref({'chr1': 4, 'chr2': 2})
