"""
Use this for particle identification for particles in LHE files

Particle codes follow the Monte Carlo particle numbering scheme of the
Particle Data Group, as used for the IDUP field of each particle.

Antiparticles have negative codes. Those not listed explicitly get the
name of their particle prefixed with 'anti\\_':

.. code-block:: python

    from lhef import particles

    for particle in event.get_particles():
        if particles.name(particle.id) in ['positron', 'electron']:
            pass

    particles.name(-2)  # 'anti_up'

"""


def name(particle_id):
    """Get the name for a PDG particle code

    :param particle_id: code for the particle
    :return: name of the particle, or 'unknown' for codes not in the
             table.

    """
    try:
        return ID[particle_id]
    except KeyError:
        if particle_id < 0 and -particle_id in ID and \
                -particle_id not in SELF_CONJUGATE:
            return 'anti_' + ID[-particle_id]
        return 'unknown'


def particle_id(name):
    """Get the PDG particle code for a particle name

    :param name: name of the particle, antiparticles may be prefixed with
                 'anti\\_'.
    :return: PDG code for the particle, None if the name is unknown.

    """
    for pid, particle_name in ID.items():
        if name == particle_name:
            return pid
    if name.startswith('anti_'):
        pid = particle_id(name[len('anti_'):])
        if pid is not None and pid > 0 and pid not in SELF_CONJUGATE:
            return -pid
    return None


ID = {1: 'down',
      2: 'up',
      3: 'strange',
      4: 'charm',
      5: 'bottom',
      6: 'top',

      11: 'electron',
      -11: 'positron',
      12: 'electron_neutrino',
      13: 'muon_m',
      -13: 'muon_p',
      14: 'muon_neutrino',
      15: 'tau_m',
      -15: 'tau_p',
      16: 'tau_neutrino',

      21: 'gluon',
      22: 'gamma',
      23: 'Z_0',
      24: 'W_p',
      -24: 'W_m',
      25: 'Higgs',

      111: 'pion_0',
      211: 'pion_p',
      -211: 'pion_m',
      113: 'rho_0',
      213: 'rho_p',
      -213: 'rho_m',
      221: 'eta',
      223: 'omega',
      130: 'Kaon_0_long',
      310: 'Kaon_0_short',
      311: 'Kaon_0',
      321: 'Kaon_p',
      -321: 'Kaon_m',
      411: 'D_p',
      -411: 'D_m',
      421: 'D_0',
      443: 'J_psi',
      511: 'B_0',
      521: 'B_p',
      -521: 'B_m',
      553: 'Upsilon',

      2112: 'neutron',
      2212: 'proton',
      3122: 'Lambda',

      # Nuclei: 10LZZZAAAI
      1000010020: 'deuteron',
      1000020040: 'alpha',
      1000822080: 'lead208'}


#: Codes of particles which are their own antiparticle.
SELF_CONJUGATE = {21, 22, 23, 25, 111, 113, 130, 221, 223, 310, 443, 553}


#    PDG MC numbering, selected codes
#
#     1   d             11   e-             21   g           111   pi 0
#     2   u             12   nu e           22   gamma       211   pi +
#     3   s             13   mu-            23   Z 0         321   K +
#     4   c             14   nu mu          24   W +        2112   n
#     5   b             15   tau-           25   h 0        2212   p
#     6   t             16   nu tau
