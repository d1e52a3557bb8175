import math

from .. import pdg
from ..constants import kCos8c2, kGF2, kNucleonMass, kPi
from ..interaction import Interaction, ScatteringType
from ..kinematics import KinePhaseSpace
from .base import XSecAlgorithm
from .xsec_utils import dipole, probe_matches_current, require, threshold_energy


class QELPXSec(XSecAlgorithm):
    """
    Quasi-elastic scattering off a single nucleon.

    CC: nu + n -> l- + p, nubar + p -> l+ + n. NC / EM: either nucleon.
    Dipole axial form factor with mass `QEL-Ma`.
    """

    name = "QELPXSec"
    description = "Quasi-elastic, dipole form factor"

    def load_config(self):
        self._ma = float(self.get_param("QEL-Ma", 0.99))
        self._norm = float(self.get_param("Norm", 1.0))

    def valid_process(self, interaction: Interaction) -> bool:
        proc = interaction.proc_info
        nucleon = interaction.target.hit_nucleon
        if proc.scattering is not ScatteringType.QE:
            return False
        if not probe_matches_current(interaction) or nucleon is None:
            return False
        if proc.is_weak_cc:
            probe = interaction.init_state.probe
            return (pdg.is_neutrino(probe) and pdg.is_neutron(nucleon)) or \
                   (pdg.is_antineutrino(probe) and pdg.is_proton(nucleon))
        return True

    def integral(self, interaction: Interaction) -> float:
        if not self.valid_process(interaction) or not self.valid_kinematics(interaction):
            return 0.0
        E = interaction.init_state.probe_energy
        E_thr = threshold_energy(interaction)
        if E <= E_thr:
            return 0.0
        sigma0 = kGF2 * kCos8c2 * kNucleonMass ** 2 / kPi
        return self._norm * sigma0 * (1.0 - math.exp(-(E - E_thr) / self._ma))

    def xsec(self, interaction: Interaction, kps: KinePhaseSpace) -> float:
        if kps is KinePhaseSpace.E:
            return self.integral(interaction)
        if kps is not KinePhaseSpace.Q2_E:
            raise ValueError(f"{self.id}: unsupported phase space {kps}")
        if not self.valid_process(interaction) or not self.valid_kinematics(interaction):
            return 0.0
        Q2 = require(interaction.kinematics.Q2, "Q2", self)
        E = interaction.init_state.probe_energy
        if Q2 < 0.0 or Q2 > 2.0 * kNucleonMass * E:
            return 0.0
        return self._norm * kGF2 * kCos8c2 / (2.0 * kPi) * dipole(Q2, self._ma) ** 2
