
def test_imports():
    import scicn
    import scicn.pl
    import scicn.pp
    import scicn.tl
    import scicn.cli
    import scicn.refgenome
    import scicn.constants
    import scicn.plotting.heatmap
    import scicn.plotting.colors
    import scicn.preprocessing.bins
    import scicn.preprocessing.load_cn
    import scicn.tools.ranges
    import scicn.tools.sorting
    import scicn.tools.qc

    print(scicn.pl.plot_icn)
    print(scicn.pl.plot_icn_anndata)
    print(scicn.pl.prepare_icn_plot_data)
    print(scicn.pl.panel_layout)
    print(scicn.pl.clamp_icn)

    print(scicn.pp.get_bam_bed)
    print(scicn.pp.list_bam_files)
    print(scicn.pp.read_icn_table)
    print(scicn.pp.read_cell_values)
    print(scicn.pp.create_icn_anndata)

    print(scicn.tl.create_bins)
    print(scicn.tl.chromosome_runs)
    print(scicn.tl.hierarchical_order)
    print(scicn.tl.sort_cells)
    print(scicn.tl.compute_gini)
