"""Read Les Houches Event Files

LHEF is the text format used to pass parton level events from matrix
element generators to shower and hadronisation programs. This package
reads such files one event at a time, converting every record into typed
numeric data and reporting malformed input precisely.

The following modules are included:

:mod:`~lhef.blocks`
    classes for the run information, events and particles

:mod:`~lhef.errors`
    exceptions raised for malformed files

:mod:`~lhef.fields`
    decoding of single numeric fields

:mod:`~lhef.particles`
    convert PDG particle codes to common names

:mod:`~lhef.reader`
    read LHE files into Python

:mod:`~lhef.store_lhef_data`
    convert LHE files to HDF5 files

:mod:`~lhef.tags`
    the literal tags of the format

:mod:`~lhef.tests`
    code tests

:mod:`~lhef.utils`
    commonly used functions such as a progressbar

"""
from . import blocks, errors, fields, particles, reader, tags, utils
from .blocks import Event, Particle, RunInfo
from .errors import LHEFError
from .reader import LHEFile
from .utils import open_lhef

__all__ = [
    'blocks',
    'errors',
    'fields',
    'particles',
    'reader',
    'tags',
    'utils',
    'Event',
    'LHEFError',
    'LHEFile',
    'Particle',
    'RunInfo',
    'open_lhef',
]
