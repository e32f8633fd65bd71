from setuptools import setup, find_packages

setup(name='scicn',
      version='0.1.0',
      description='Integer copy number heatmaps and reference bins for single cell genomes',
      author='Shah Lab',
      url='https://www.shahlab.ca/',
      packages=find_packages(include=['scicn', 'scicn.*']),
      python_requires='>=3.9',
      install_requires=[
        'numpy',
        'pandas',
        'scipy',
        'matplotlib>=3.6',
        'seaborn',
        'anndata',
        'pyranges<1',
        'click',
      ],
      extras_require={
        'test': ['pytest'],
      },
      entry_points={
        'console_scripts': [
            'scicn = scicn.cli:cli',
        ]
      },
      package_data={'scicn': ['data/*.chrom.sizes']},
    )
