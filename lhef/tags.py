"""Literal tags of the Les Houches Event File format

These strings are matched exactly (after removing surrounding whitespace
where noted in :mod:`~lhef.reader`) to find the blocks in a file.

"""

LHEF_TAG_OPEN = '<LesHouchesEvents version='
LHEF_LAST_LINE = '</LesHouchesEvents>'

COMMENT_START = '<!--'
COMMENT_END = '-->'

HEADER_START = '<header>'
HEADER_END = '</header>'

INIT_START = '<init>'
INIT_END = '</init>'

EVENT_START = '<event>'
EVENT_END = '</event>'

#: Versions of the format which can be read.
SUPPORTED_VERSIONS = ('1.0', '2.0', '3.0')
