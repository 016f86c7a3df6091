"""Errors raised while reading Les Houches Event Files

All problems found in the input are reported by raising one of the
exceptions below. Each of them derives from :class:`LHEFError`, so callers
can catch that to handle any malformed file.

None of these are recoverable: after an error the position in the stream
is undefined and the reader should be discarded.

"""

from .tags import (COMMENT_START, EVENT_START, HEADER_START, INIT_START,
                   LHEF_TAG_OPEN, SUPPORTED_VERSIONS)


class LHEFError(Exception):

    """Base class for all errors in LHE files"""


class BadFirstLine(LHEFError):

    """The first line is not a valid opening tag"""

    def __init__(self, line):
        self.line = line
        super().__init__(line)

    def __str__(self):
        return (f"First line '{self.line.rstrip()}' in input does not start "
                f"with '{LHEF_TAG_OPEN}'")


class MissingVersion(LHEFError):

    """The opening tag has no version attribute"""

    def __str__(self):
        return 'Version information missing'


class UnsupportedVersion(LHEFError):

    """The version attribute holds an unknown version"""

    def __init__(self, version):
        self.version = version
        super().__init__(version)

    def __str__(self):
        return (f"Unsupported version {self.version}, only "
                f"{', '.join(SUPPORTED_VERSIONS)} are supported")


class BadHeaderStart(LHEFError):

    """A header line which does not start a known block"""

    def __init__(self, line):
        self.line = line
        super().__init__(line)

    def __str__(self):
        return (f"Encountered unrecognized line '{self.line}', expected a "
                f"header starting with '{COMMENT_START}', '{HEADER_START}', "
                f"or the init block starting with '{INIT_START}'")


class BadEventStart(LHEFError):

    """A line which neither starts an event nor ends the file"""

    def __init__(self, line):
        self.line = line
        super().__init__(line)

    def __str__(self):
        return (f"Encountered unrecognized line '{self.line.rstrip()}', "
                f"expected an event starting with '{EVENT_START}'")


class MissingEntry(LHEFError):

    """A required field is absent from a record line"""

    def __init__(self, field):
        self.field = field
        super().__init__(field)

    def __str__(self):
        return f"Missing entry '{self.field}'"


class ConversionError(LHEFError):

    """A field is present but can not be converted to a number

    :param text: the raw text of the field.
    :param field: name of the field that was being decoded, if known.

    """

    def __init__(self, text, field=None):
        self.text = text
        self.field = field
        super().__init__(text)

    def __str__(self):
        if self.field is None:
            return f"Failed to convert to number: '{self.text}'"
        return f"Failed to convert {self.field} to number: '{self.text}'"


class EndOfFile(LHEFError):

    """The input ended inside a block"""

    def __init__(self, block):
        self.block = block
        super().__init__(block)

    def __str__(self):
        return f"Encountered '{self.block}' block without closing tag"
