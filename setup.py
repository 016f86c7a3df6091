from pathlib import Path

from setuptools import find_packages, setup

setup(
    name='lhef',
    version='1.0.0',
    packages=find_packages(include=['lhef', 'lhef.*']),
    license='GPLv3',
    description='A streaming reader for Les Houches Event Files',
    long_description=(Path(__file__).parent / 'README.rst').read_text(),
    keywords=['LHEF', 'Les Houches', 'event generators', 'particle physics'],
    classifiers=[
        'Intended Audience :: Science/Research',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Physics',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
    ],
    entry_points={
        'console_scripts': [
            'store_lhef_data = lhef.store_lhef_data:main',
        ],
    },
    package_data={
        'lhef': [
            'tests/test_data/*.lhe',
            'tests/test_data/*.lhe.gz',
        ],
    },
    install_requires=['numpy', 'tables>=3.3.0', 'progressbar2>=3.7.0'],
    extras_require={'dev': ['Sphinx', 'ruff', 'coverage']},
)
