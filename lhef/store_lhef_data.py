""" Store LHEF event data in HDF5 file

    This module reads a (gzip compressed) Les Houches Event File and
    stores the run information, each event and each particle in a HDF5
    file, using PyTables.

    The syntax and options for calling this script can be seen with::

        $ store_lhef_data --help

    For example to convert a file in the current directory called
    events.lhe.gz to a HDF5 file called events.h5 with a progress bar
    run::

        $ store_lhef_data --progress events.lhe.gz events.h5

"""
import argparse
import logging
import os

import tables

from .reader import LHEFile
from .utils import pbar

logger = logging.getLogger('lhef.store_lhef_data')


class Subprocesses(tables.IsDescription):
    """Store the cross section information for each subprocess"""

    process_id = tables.Int32Col(pos=0)
    cross_section = tables.Float64Col(pos=1)
    cross_section_error = tables.Float64Col(pos=2)
    max_weight = tables.Float64Col(pos=3)


class Events(tables.IsDescription):
    """Store the event record of each event

    The particles of an event are the rows in the particles table from
    first_particle up to first_particle + n_particles.

    """

    event_id = tables.UInt32Col(pos=0)
    n_particles = tables.UInt32Col(pos=1)
    process_id = tables.Int32Col(pos=2)
    weight = tables.Float64Col(pos=3)
    scale = tables.Float64Col(pos=4)
    alpha_qed = tables.Float64Col(pos=5)
    alpha_qcd = tables.Float64Col(pos=6)
    first_particle = tables.UInt64Col(pos=7)


class Particles(tables.IsDescription):
    """Store information about each particle in the events"""

    event_id = tables.UInt32Col(pos=0)
    particle_id = tables.Int32Col(pos=1)
    status = tables.Int32Col(pos=2)
    mother_1 = tables.Int32Col(pos=3)
    mother_2 = tables.Int32Col(pos=4)
    color_1 = tables.Int32Col(pos=5)
    color_2 = tables.Int32Col(pos=6)
    p_x = tables.Float64Col(pos=7)
    p_y = tables.Float64Col(pos=8)
    p_z = tables.Float64Col(pos=9)
    energy = tables.Float64Col(pos=10)
    mass = tables.Float64Col(pos=11)
    lifetime = tables.Float64Col(pos=12)
    spin = tables.Float64Col(pos=13)


def save_event(row, event_id, event, first_particle):
    """Write the event record of an event into a row"""

    row['event_id'] = event_id
    row['n_particles'] = event.n_particles
    row['process_id'] = event.process_id
    row['weight'] = event.weight
    row['scale'] = event.scale
    row['alpha_qed'] = event.alpha_qed
    row['alpha_qcd'] = event.alpha_qcd
    row['first_particle'] = first_particle
    row.append()


def save_particle(row, event_id, p):
    """Write the information of a particle into a row"""

    row['event_id'] = event_id
    row['particle_id'] = p.id
    row['status'] = p.status
    row['mother_1'], row['mother_2'] = p.mothers
    row['color_1'], row['color_2'] = p.colors
    row['p_x'] = p.p_x
    row['p_y'] = p.p_y
    row['p_z'] = p.p_z
    row['energy'] = p.energy
    row['mass'] = p.mass
    row['lifetime'] = p.lifetime
    row['spin'] = p.spin
    row.append()


def store_run_info(source, destination):
    """Store the version, header and run information

    The scalar run information is stored as attributes of the root node,
    the subprocesses in a table.

    :param source: LHEFile instance of the source file
    :param destination: PyTables file instance of the destination file

    """
    run_info = source.run_info

    destination.set_node_attr('/', 'version', source.version)
    destination.set_node_attr('/', 'header', source.header)
    destination.set_node_attr('/', 'run_info_text', run_info.info)
    destination.set_node_attr('/', 'run_info', {
        'beam_ids': run_info.beam_ids,
        'beam_energies': run_info.beam_energies,
        'pdf_groups': run_info.pdf_groups,
        'pdf_sets': run_info.pdf_sets,
        'weight_strategy': run_info.weight_strategy,
        'n_processes': run_info.n_processes})

    table = destination.create_table('/', 'subprocesses', Subprocesses,
                                     'Subprocess cross sections',
                                     expectedrows=run_info.n_processes)
    row = table.row
    for values in zip(run_info.process_ids, run_info.cross_sections,
                      run_info.cross_section_errors, run_info.max_weights):
        (row['process_id'], row['cross_section'], row['cross_section_error'],
         row['max_weight']) = values
        row.append()
    table.flush()


def store_lhef_data(source, destination, progress=False):
    """Store the run information and all events of an LHE file

    :param source: LHEFile instance of the source file
    :param destination: PyTables file instance of the destination file
    :param progress: show a progressbar while storing the events.
    :return: number of stored events.

    """
    store_run_info(source, destination)

    events = destination.create_table('/', 'events', Events, 'All events')
    particles = destination.create_table('/', 'particles', Particles,
                                         'All particles')
    event_info = destination.create_vlarray('/', 'event_info',
                                            tables.VLUnicodeAtom(),
                                            'Optional event information')

    event_row = events.row
    particle_row = particles.row
    n_events = 0
    n_particles = 0
    for event_id, event in enumerate(pbar(source.get_events(),
                                          show=progress)):
        save_event(event_row, event_id, event, n_particles)
        for particle in event.get_particles():
            save_particle(particle_row, event_id, particle)
        event_info.append(event.info)
        n_events += 1
        n_particles += event.n_particles
        if not event_id % 10000:
            events.flush()
            particles.flush()

    events.flush()
    particles.flush()
    logger.info('Stored %d events with %d particles.', n_events, n_particles)
    return n_events


def store_and_convert_lhef_data(source, destination, overwrite=False,
                                progress=False):
    """Convert an LHE file to a new HDF5 file

    :param source: path of the (gzip compressed) LHE file.
    :param destination: path of the HDF5 file to create.
    :param overwrite: if True an existing destination is replaced.
    :param progress: show a progressbar.

    """
    if os.path.exists(destination):
        if not overwrite:
            if progress:
                raise Exception('Destination already exists, doing nothing')
            logger.warning('Destination %s already exists, doing nothing.',
                           destination)
            return
        else:
            logger.warning('Overwriting destination %s.', destination)
            os.remove(destination)

    logger.info('Converting LHEF data (%s) to HDF5 format.', source)
    with LHEFile.from_path(source) as lhef, \
            tables.open_file(destination, 'w') as hdf_data:
        store_lhef_data(lhef, hdf_data, progress=progress)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('source', help='path of the LHEF source file')
    parser.add_argument('destination',
                        help='path of the HDF5 destination file')
    parser.add_argument('--overwrite', action='store_true',
                        help='overwrite destination file if it already exists')
    parser.add_argument('--progress', action='store_true',
                        help='show progressbar during conversion')
    parser.add_argument('--verbose', action='store_true',
                        help='log the steps of the conversion')
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    store_and_convert_lhef_data(args.source, args.destination,
                                args.overwrite, args.progress)


if __name__ == '__main__':
    main()
