"""Decode the whitespace separated fields of LHEF records

Each numeric field in the init and event blocks is decoded with one of
these functions. They take the name of the field, used in the error
message, and the text of the field, which is ``None`` when the record
line had too few entries.

.. code-block:: python

    >>> entries = iter('2212 2212 6500 6500'.split())
    >>> parse_int('IDBMUP(1)', next(entries, None))
    2212

"""
import re

from .errors import ConversionError, MissingEntry

#: Range of the integer fields, which are 32 bit signed in the format.
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

INTEGER = re.compile(r'[+-]?[0-9]+')


def parse_int(name, text):
    """Decode an integer field

    :param name: name of the field, e.g. 'IDBMUP(1)'.
    :param text: text of the field or None if it is missing.
    :return: the integer value.

    """
    if text is None:
        raise MissingEntry(name)
    if INTEGER.fullmatch(text) is None:
        raise ConversionError(text, name)
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ConversionError(text, name)
    return value


def parse_float(name, text):
    """Decode a floating point field

    :param name: name of the field, e.g. 'EBMUP(2)'.
    :param text: text of the field or None if it is missing.
    :return: the float value.

    """
    if text is None:
        raise MissingEntry(name)
    # float() allows digit grouping and non-ASCII digits, the format does not
    if '_' in text or not text.isascii():
        raise ConversionError(text, name)
    try:
        return float(text)
    except ValueError:
        raise ConversionError(text, name) from None


def parse_count(name, text):
    """Decode a field holding the number of following records"""

    value = parse_int(name, text)
    if value < 0:
        raise ConversionError(text, name)
    return value
