"""
Classes corresponding to the LHEF init and event blocks

The classes in this module correspond one-to-one with the common blocks
of the Les Houches accord, HEPRUP for the run information and HEPEUP for
each event. See https://arxiv.org/abs/hep-ph/0109068 for the meaning of
the fields.

The decode functions turn a single record line of a block into Python
values. Errors in a field are reported with the Fortran name of the field
and, for tables, the 1-based row index, e.g. 'XERRUP(3)'.

"""
import math

import numpy

from . import particles
from .fields import parse_count, parse_float, parse_int


def decode_init_record(line):
    """Decode the first line of the init block

    :return: tuple with beam_ids, beam_energies, pdf_groups, pdf_sets,
             weight_strategy and n_processes.

    """
    entries = iter(line.split())
    beam_ids = (parse_int('IDBMUP(1)', next(entries, None)),
                parse_int('IDBMUP(2)', next(entries, None)))
    beam_energies = (parse_float('EBMUP(1)', next(entries, None)),
                     parse_float('EBMUP(2)', next(entries, None)))
    pdf_groups = (parse_int('PDFGUP(1)', next(entries, None)),
                  parse_int('PDFGUP(2)', next(entries, None)))
    pdf_sets = (parse_int('PDFSUP(1)', next(entries, None)),
                parse_int('PDFSUP(2)', next(entries, None)))
    weight_strategy = parse_int('IDWTUP', next(entries, None))
    n_processes = parse_count('NPRUP', next(entries, None))
    return (beam_ids, beam_energies, pdf_groups, pdf_sets, weight_strategy,
            n_processes)


def decode_process(index, line):
    """Decode one subprocess line of the init block

    :param index: 0-based index of the subprocess.
    :return: tuple with cross section, its error, maximum weight and
             process id.

    """
    i = index + 1
    entries = iter(line.split())
    return (parse_float(f'XSECUP({i})', next(entries, None)),
            parse_float(f'XERRUP({i})', next(entries, None)),
            parse_float(f'XMAXUP({i})', next(entries, None)),
            parse_int(f'LPRUP({i})', next(entries, None)))


def decode_event_record(line):
    """Decode the first line of an event block

    :return: tuple with n_particles, process_id, weight, scale, alpha_qed
             and alpha_qcd.

    """
    entries = iter(line.split())
    return (parse_count('NUP', next(entries, None)),
            parse_int('IDRUP', next(entries, None)),
            parse_float('XWGTUP', next(entries, None)),
            parse_float('SCALUP', next(entries, None)),
            parse_float('AQEDUP', next(entries, None)),
            parse_float('AQCDUP', next(entries, None)))


def decode_particle(index, line):
    """Decode one particle line of an event block

    :param index: 0-based index of the particle.
    :return: tuple with particle_id, status, mothers (2-tuple), colors
             (2-tuple), momentum (5-tuple), lifetime and spin.

    """
    i = index + 1
    entries = iter(line.split())
    particle_id = parse_int(f'IDUP({i})', next(entries, None))
    status = parse_int(f'ISTUP({i})', next(entries, None))
    mothers = tuple(parse_int(f'MOTHUP({i}, {j})', next(entries, None))
                    for j in (1, 2))
    colors = tuple(parse_int(f'ICOLUP({i}, {j})', next(entries, None))
                   for j in (1, 2))
    momentum = tuple(parse_float(f'PUP({i}, {j})', next(entries, None))
                     for j in range(1, 6))
    lifetime = parse_float(f'VTIMUP({i})', next(entries, None))
    spin = parse_float(f'SPINUP({i})', next(entries, None))
    return particle_id, status, mothers, colors, momentum, lifetime, spin


def _check_length(name, values, length):
    if len(values) != length:
        raise ValueError(f'{name} has {len(values)} entries, expected '
                         f'{length}')


class RunInfo:

    """The run information in the init block (HEPRUP)

    The subprocess columns are NumPy arrays with one entry per subprocess.

    """

    def __init__(self, beam_ids, beam_energies, pdf_groups, pdf_sets,
                 weight_strategy, n_processes, cross_sections,
                 cross_section_errors, max_weights, process_ids, info=''):
        self.beam_ids = tuple(beam_ids)
        self.beam_energies = tuple(beam_energies)
        self.pdf_groups = tuple(pdf_groups)
        self.pdf_sets = tuple(pdf_sets)
        self.weight_strategy = weight_strategy
        self.n_processes = n_processes

        self.cross_sections = numpy.asarray(cross_sections,
                                            dtype=numpy.float64)
        self.cross_section_errors = numpy.asarray(cross_section_errors,
                                                  dtype=numpy.float64)
        self.max_weights = numpy.asarray(max_weights, dtype=numpy.float64)
        self.process_ids = numpy.asarray(process_ids, dtype=numpy.int32)
        for name in ('cross_sections', 'cross_section_errors',
                     'max_weights', 'process_ids'):
            _check_length(name, getattr(self, name), n_processes)

        self.info = info

    def __repr__(self):
        return (f'{self.__class__.__name__}(beam_ids={self.beam_ids}, '
                f'beam_energies={self.beam_energies}, '
                f'n_processes={self.n_processes})')

    @property
    def total_cross_section(self):
        """Sum of the subprocess cross sections (pb)"""

        return float(self.cross_sections.sum())

    def get_process(self, process_id):
        """Get the subprocess row index for a process id

        :return: index in the subprocess columns, or None if the process
                 id is not declared in the run information.

        """
        matches = numpy.flatnonzero(self.process_ids == process_id)
        if len(matches):
            return int(matches[0])
        return None


class Event:

    """An event block (HEPEUP)

    The particle columns are NumPy arrays with one row per particle, the
    mother, colour and momentum columns have 2, 2 and 5 entries per row.

    """

    def __init__(self, n_particles, process_id, weight, scale, alpha_qed,
                 alpha_qcd, particle_ids, statuses, mothers, colors,
                 momenta, lifetimes, spins, info=''):
        self.n_particles = n_particles
        self.process_id = process_id
        self.weight = weight
        self.scale = scale
        self.alpha_qed = alpha_qed
        self.alpha_qcd = alpha_qcd

        self.particle_ids = numpy.asarray(particle_ids, dtype=numpy.int32)
        self.statuses = numpy.asarray(statuses, dtype=numpy.int32)
        self.mothers = numpy.asarray(mothers, dtype=numpy.int32)
        self.colors = numpy.asarray(colors, dtype=numpy.int32)
        self.momenta = numpy.asarray(momenta, dtype=numpy.float64)
        self.lifetimes = numpy.asarray(lifetimes, dtype=numpy.float64)
        self.spins = numpy.asarray(spins, dtype=numpy.float64)
        for name in ('particle_ids', 'statuses', 'mothers', 'colors',
                     'momenta', 'lifetimes', 'spins'):
            _check_length(name, getattr(self, name), n_particles)

        self.info = info

    def __repr__(self):
        return (f'{self.__class__.__name__}(n_particles={self.n_particles}, '
                f'process_id={self.process_id}, weight={self.weight})')

    def __len__(self):
        return self.n_particles

    def get_particles(self):
        """Generator over the particles in the event

        Use like this::

            for particle in event.get_particles():
                pass

        :yield: a :class:`Particle` for each row.

        """
        for i in range(self.n_particles):
            yield Particle(int(self.particle_ids[i]), int(self.statuses[i]),
                           tuple(int(m) for m in self.mothers[i]),
                           tuple(int(c) for c in self.colors[i]),
                           tuple(float(p) for p in self.momenta[i]),
                           float(self.lifetimes[i]), float(self.spins[i]))


class Particle:

    """A single particle entry of an event

    Momentum components are in GeV, the lifetime in mm.

    """

    def __init__(self, particle_id, status, mothers, colors, momentum,
                 lifetime, spin):
        self.id = particle_id
        self.status = status
        self.mothers = mothers
        self.colors = colors
        self.p_x, self.p_y, self.p_z, self.energy, self.mass = momentum
        self.lifetime = lifetime
        self.spin = spin

    def __repr__(self):
        return f'{self.__class__.__name__}({self.name}, status={self.status})'

    @property
    def name(self):
        return particles.name(self.id)

    @property
    def is_incoming(self):
        return self.status == -1

    @property
    def is_outgoing(self):
        return self.status == 1

    @property
    def is_intermediate(self):
        return self.status == 2

    @property
    def p_t(self):
        """Transverse momentum"""

        return math.hypot(self.p_x, self.p_y)
