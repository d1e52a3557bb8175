"""
Meson-exchange-current (2p2h) cross section.

Configuration: MaMEC (dipole mass), Mass / Width (Gaussian in W), Norm.
All four are required.
"""
import math

from ..constants import kGF2, kNucleonMass, kPi
from ..interaction import Interaction, ScatteringType
from ..kinematics import KinePhaseSpace
from .base import XSecAlgorithm
from .xsec_utils import dipole, final_lepton_mass, probe_matches_current, require, s_invariant


class MECPXSec(XSecAlgorithm):

    name = "MECPXSec"
    description = "Meson exchange current, Gaussian W shape"

    def load_config(self):
        self._ma = float(self.get_param("MaMEC"))
        self._mass = float(self.get_param("Mass"))
        self._width = float(self.get_param("Width"))
        self._norm = float(self.get_param("Norm"))

    def valid_process(self, interaction: Interaction) -> bool:
        proc = interaction.proc_info
        tgt = interaction.target
        if proc.scattering is not ScatteringType.MEC or not proc.is_weak:
            return False
        if not probe_matches_current(interaction):
            return False
        return tgt.hit_nucleon_is_set and tgt.A > 1

    def _gauss(self, W: float) -> float:
        z = (W - self._mass) / self._width
        return math.exp(-0.5 * z * z) / (self._width * math.sqrt(2.0 * kPi))

    def _w_max(self, interaction: Interaction) -> float:
        # nucleon pair at rest
        s = s_invariant(interaction.init_state.probe_energy, 2.0 * kNucleonMass)
        return math.sqrt(s) - final_lepton_mass(interaction)

    def integral(self, interaction: Interaction) -> float:
        if not self.valid_process(interaction) or not self.valid_kinematics(interaction):
            return 0.0
        w_min = 2.0 * kNucleonMass
        w_max = self._w_max(interaction)
        if w_max <= w_min:
            return 0.0

        def cdf(w):
            return 0.5 * (1.0 + math.erf((w - self._mass) / (self._width * math.sqrt(2.0))))

        E = interaction.init_state.probe_energy
        sigma0 = 0.1 * kGF2 * kNucleonMass ** 2 / kPi
        return self._norm * sigma0 * (cdf(w_max) - cdf(w_min)) * (1.0 - math.exp(-E / self._ma))

    def xsec(self, interaction: Interaction, kps: KinePhaseSpace) -> float:
        if kps is KinePhaseSpace.E:
            return self.integral(interaction)
        if kps is not KinePhaseSpace.W_Q2_E:
            raise ValueError(f"{self.id}: unsupported phase space {kps}")
        if not self.valid_process(interaction) or not self.valid_kinematics(interaction):
            return 0.0
        W = require(interaction.kinematics.W, "W", self)
        Q2 = require(interaction.kinematics.Q2, "Q2", self)
        if W <= 2.0 * kNucleonMass or W > self._w_max(interaction) or Q2 < 0.0:
            return 0.0
        return self._norm * 0.1 * kGF2 / (2.0 * kPi) * self._gauss(W) * dipole(Q2, self._ma) ** 2
