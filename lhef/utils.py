"""Utilities

The module contains some commonly used functions.

"""
import gzip

from progressbar import ETA, Bar, Counter, Percentage, ProgressBar, Timer, \
    UnknownLength

#: First two bytes of a gzip compressed file.
GZIP_MAGIC = b'\x1f\x8b'


def pbar(iterable, length=None, show=True, **kwargs):
    """Get a new progressbar with our default widgets

    :param iterable: the iterable over which will be looped.
    :param length: in case iterable is a generator, this should be its
                   expected length. If it is unknown a counter is shown
                   instead of a percentage.
    :param show: boolean, if False simply return the iterable.
    :return: a new iterable which iterates over the same elements as
             the input, but shows a progressbar if possible.

    """
    if not show:
        return iterable

    if length is None:
        try:
            length = len(iterable)
        except TypeError:
            pass

    if length:
        pb = ProgressBar(max_value=length,
                         widgets=[Percentage(), Bar(), ETA()], **kwargs)
    else:
        pb = ProgressBar(max_value=UnknownLength,
                         widgets=[Counter(), ' ', Timer()], **kwargs)
    return pb(iterable)


def open_lhef(path):
    """Open a plain or gzip compressed LHE file for reading

    Compression is detected from the first bytes in the file, not from
    the extension.

    :param path: path to the file.
    :return: a text stream with universal newlines.

    """
    with open(path, 'rb') as f:
        magic = f.read(len(GZIP_MAGIC))
    if magic == GZIP_MAGIC:
        return gzip.open(path, 'rt', encoding='utf-8')
    return open(path, 'r', encoding='utf-8')
