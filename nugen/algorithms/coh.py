import math

from ..constants import kGF2, kNucleonMass, kNucRo, kPi, kPionMass
from ..interaction import Interaction, ScatteringType
from ..kinematics import KinePhaseSpace
from .base import XSecAlgorithm
from .xsec_utils import final_lepton_mass, probe_matches_current, require

_FM_TO_INV_GEV = 5.0677307


class COHPXSec(XSecAlgorithm):
    """Coherent pion production off the whole nucleus (no hit nucleon)."""

    name = "COHPXSec"
    description = "Coherent pion production, exponential nuclear form factor"

    def load_config(self):
        self._ma = float(self.get_param("COH-Ma", 1.0))
        self._norm = float(self.get_param("Norm", 1.0))

    def valid_process(self, interaction: Interaction) -> bool:
        proc = interaction.proc_info
        tgt = interaction.target
        if proc.scattering is not ScatteringType.COH or not proc.is_weak:
            return False
        if not probe_matches_current(interaction):
            return False
        return not tgt.hit_nucleon_is_set and tgt.A > 1

    def _threshold(self, interaction: Interaction) -> float:
        return final_lepton_mass(interaction) + kPionMass

    def integral(self, interaction: Interaction) -> float:
        if not self.valid_process(interaction) or not self.valid_kinematics(interaction):
            return 0.0
        E = interaction.init_state.probe_energy
        E_thr = self._threshold(interaction)
        if E <= E_thr:
            return 0.0
        A = interaction.target.A
        sigma0 = 0.01 * kGF2 * kNucleonMass ** 2 / kPi * A ** (1.0 / 3.0)
        return self._norm * sigma0 * (1.0 - math.exp(-(E - E_thr) / self._ma))

    def xsec(self, interaction: Interaction, kps: KinePhaseSpace) -> float:
        if kps is KinePhaseSpace.E:
            return self.integral(interaction)
        if kps is not KinePhaseSpace.Q2_E:
            raise ValueError(f"{self.id}: unsupported phase space {kps}")
        if not self.valid_process(interaction) or not self.valid_kinematics(interaction):
            return 0.0
        Q2 = require(interaction.kinematics.Q2, "Q2", self)
        if Q2 < 0.0:
            return 0.0
        A = interaction.target.A
        radius = kNucRo * A ** (1.0 / 3.0) * _FM_TO_INV_GEV
        b = radius * radius / 3.0
        return self._norm * 0.01 * kGF2 / (2.0 * kPi) * A * A * math.exp(-b * Q2)
