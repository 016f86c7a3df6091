""" Read Les Houches Event Files.

    This provides functionality to read LHEF files with `Python
    <www.python.org>`_. It provides the following main class:

    * :class:`~lhef.reader.LHEFile`: The file class reads the version,
      header and run information and provides the events one at a time.

    and the following classes that correspond to the blocks in the file:

    * :class:`~lhef.blocks.RunInfo`
    * :class:`~lhef.blocks.Event`
    * :class:`~lhef.blocks.Particle`

    Example usage:

    .. code-block:: python

        >>> from lhef import LHEFile
        >>> with LHEFile.from_path('events.lhe.gz') as lhef:
        ...     print(lhef.version, lhef.run_info.n_processes)
        ...     for event in lhef.get_events():
        ...         pass
        3.0 1


    Issues
    ======

    * **Closing tags**: The closing tag of the init block must be on a
      line of its own, without any surrounding whitespace. The closing
      tag of an event may be surrounded by whitespace.
    * **Truncated files**: A file which ends where an event or the
      closing tag of the file is expected raises
      :class:`~lhef.errors.EndOfFile` for the 'LesHouchesEvents' block,
      not :class:`~lhef.errors.BadEventStart` with an empty line.
    * **Comments**: A comment in the header must start with a line
      holding only '<!--' and end with a line holding only '-->'.
      Surrounding whitespace is ignored.
    * **Header**: The contents of the header blocks are not interpreted.
      They are only available as text.
    * **Random access**: Events are read strictly in order. There is no
      index and no way to go back.


    More Info
    =========

    The format is described in https://arxiv.org/abs/hep-ph/0609017 and,
    for the common blocks, https://arxiv.org/abs/hep-ph/0109068.

"""
import logging

import numpy

from .blocks import (Event, RunInfo, decode_event_record, decode_init_record,
                     decode_particle, decode_process)
from .errors import (BadEventStart, BadFirstLine, BadHeaderStart, EndOfFile,
                     MissingVersion, UnsupportedVersion)
from .tags import (COMMENT_END, COMMENT_START, EVENT_END, EVENT_START,
                   HEADER_END, HEADER_START, INIT_END, INIT_START,
                   LHEF_LAST_LINE, LHEF_TAG_OPEN, SUPPORTED_VERSIONS)
from .utils import open_lhef

logger = logging.getLogger('lhef.reader')


class LHEFile:

    """Les Houches Event File reader

    The version, header and run information are read when the reader is
    created. Afterwards the events are read one at a time with
    :meth:`next_event` or :meth:`get_events`.

    """

    def __init__(self, stream):
        """LHEFile constructor

        :param stream: object with a ``readline`` method, e.g. an opened
                       file. Lines may be str or UTF-8 encoded bytes, an
                       empty line signals the end of the input.

        """
        self._stream = stream
        self._owns_stream = False
        self._done = False
        self._version = self._read_version()
        self._header = self._read_header()
        self._run_info = self._read_init()
        logger.debug('Opened LHEF version %s with %d subprocesses.',
                     self._version, self._run_info.n_processes)

    @classmethod
    def from_path(cls, path):
        """Open a (gzip compressed) LHE file and create a reader for it

        The file is closed by :meth:`close` or when used as a context
        manager.

        """
        stream = open_lhef(path)
        try:
            lhef = cls(stream)
        except BaseException:
            stream.close()
            raise
        lhef._owns_stream = True
        return lhef

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __iter__(self):
        return self.get_events()

    def close(self):
        """Close the file if it was opened by :meth:`from_path`"""

        if self._owns_stream:
            self._stream.close()

    @property
    def version(self):
        """Format version, one of '1.0', '2.0' or '3.0'"""

        return self._version

    @property
    def header(self):
        """Raw text of the comment and header blocks"""

        return self._header

    @property
    def run_info(self):
        """The :class:`~lhef.blocks.RunInfo` from the init block"""

        return self._run_info

    def next_event(self):
        """Get the next event

        :return: an instance of :class:`~lhef.blocks.Event`, or None if
                 the end of the file was reached. Once None is returned
                 all further calls return None as well.

        """
        if self._done:
            return None

        line = self._readline()
        if not line:
            raise EndOfFile('LesHouchesEvents')
        tag = line.strip()
        if tag == EVENT_START:
            return self._read_event()
        elif tag == LHEF_LAST_LINE:
            logger.debug('Reached end of events.')
            self._done = True
            return None
        raise BadEventStart(line)

    def get_events(self):
        """Generator over the remaining events in the file

        Use it like this::

            for event in my_file.get_events():
                pass

        """
        while True:
            event = self.next_event()
            if event is None:
                return
            yield event

    def _readline(self):
        """Read a line, with the line terminator normalized to '\\n'"""

        line = self._stream.readline()
        if isinstance(line, bytes):
            line = line.decode('utf-8')
        if line.endswith('\r\n'):
            line = line[:-2] + '\n'
        return line

    def _read_version(self):
        """Get the version from the opening tag on the first line"""

        line = self._readline()
        entries = line.strip().split('"')
        if entries[0] != LHEF_TAG_OPEN:
            raise BadFirstLine(line)
        if len(entries) < 2:
            raise MissingVersion()
        version = entries[1]
        if version not in SUPPORTED_VERSIONS:
            raise UnsupportedVersion(version)
        if len(entries) < 3 or entries[2] != '>':
            raise BadFirstLine(line)
        return version

    def _read_header(self):
        """Collect the comment and header blocks preceding the init block

        :return: the text of all lines up to, but excluding, the opening
                 tag of the init block.

        """
        header = []
        while True:
            line = self._readline()
            if not line:
                raise EndOfFile('header')
            tag = line.strip()
            if tag == INIT_START:
                return ''.join(header)
            header.append(line)
            if tag == COMMENT_START:
                self._read_until(header, COMMENT_END, 'header')
            elif tag == HEADER_START:
                self._read_until(header, HEADER_END, 'header')
            else:
                raise BadHeaderStart(tag)

    def _read_until(self, lines, closing_tag, block, strip=True):
        """Append lines up to and including the closing tag of a block

        :param lines: list to which the lines are appended.
        :param closing_tag: the tag which closes the block.
        :param block: name of the block, for the error if the input ends.
        :param strip: if True surrounding whitespace is ignored when
                      looking for the closing tag, otherwise only the line
                      terminator is.

        """
        while True:
            line = self._readline()
            if not line:
                raise EndOfFile(block)
            lines.append(line)
            text = line.strip() if strip else line.rstrip('\n')
            if text == closing_tag:
                return

    def _read_info(self, closing_tag, block, strip):
        """Get the free text at the end of a block, without closing tag"""

        info = []
        self._read_until(info, closing_tag, block, strip=strip)
        return ''.join(info[:-1])

    def _read_init(self):
        """Read the init block, the opening tag is already consumed"""

        (beam_ids, beam_energies, pdf_groups, pdf_sets, weight_strategy,
         n_processes) = decode_init_record(self._readline())

        cross_sections = numpy.empty(n_processes, dtype=numpy.float64)
        cross_section_errors = numpy.empty(n_processes, dtype=numpy.float64)
        max_weights = numpy.empty(n_processes, dtype=numpy.float64)
        process_ids = numpy.empty(n_processes, dtype=numpy.int32)
        for i in range(n_processes):
            (cross_sections[i], cross_section_errors[i], max_weights[i],
             process_ids[i]) = decode_process(i, self._readline())

        # Only the init closing tag has to match without any whitespace
        info = self._read_info(INIT_END, 'init', strip=False)

        return RunInfo(beam_ids, beam_energies, pdf_groups, pdf_sets,
                       weight_strategy, n_processes, cross_sections,
                       cross_section_errors, max_weights, process_ids, info)

    def _read_event(self):
        """Read an event block, the opening tag is already consumed"""

        (n_particles, process_id, weight, scale, alpha_qed,
         alpha_qcd) = decode_event_record(self._readline())

        particle_ids = numpy.empty(n_particles, dtype=numpy.int32)
        statuses = numpy.empty(n_particles, dtype=numpy.int32)
        mothers = numpy.empty((n_particles, 2), dtype=numpy.int32)
        colors = numpy.empty((n_particles, 2), dtype=numpy.int32)
        momenta = numpy.empty((n_particles, 5), dtype=numpy.float64)
        lifetimes = numpy.empty(n_particles, dtype=numpy.float64)
        spins = numpy.empty(n_particles, dtype=numpy.float64)
        for i in range(n_particles):
            (particle_ids[i], statuses[i], mothers[i], colors[i], momenta[i],
             lifetimes[i], spins[i]) = decode_particle(i, self._readline())

        info = self._read_info(EVENT_END, 'event', strip=True)

        return Event(n_particles, process_id, weight, scale, alpha_qed,
                     alpha_qcd, particle_ids, statuses, mothers, colors,
                     momenta, lifetimes, spins, info)
