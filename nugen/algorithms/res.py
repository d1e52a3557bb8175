"""
Resonance production cross section.

The resonance line shape is delegated to a Breit-Wigner sub-algorithm, which
itself pulls masses and widths from a resonance-table sub-algorithm.
"""
import math
import numpy as np

from ..constants import kGF2, kNucleonMass, kPi, kPionMass
from ..interaction import Interaction, ScatteringType
from ..kinematics import KinePhaseSpace
from .base import Capability, XSecAlgorithm
from .xsec_utils import (
    charge_shift,
    dipole,
    final_lepton_mass,
    nucleon_charge,
    probe_matches_current,
    require,
    s_invariant,
    trapezoid,
)


class RESPXSec(XSecAlgorithm):

    name = "RESPXSec"
    description = "Single resonance production with Breit-Wigner line shape"

    def load_config(self):
        self._bw = self.sub_alg("breit-wigner-alg-name", "breit-wigner-param-set",
                                Capability.BREIT_WIGNER)
        self._ma = float(self.get_param("RES-Ma", 1.12))
        self._norm = float(self.get_param("Norm", 1.0))
        self._n_points = int(self.get_param("W-grid-points", 200))

    @property
    def breit_wigner(self):
        return self._bw

    def valid_process(self, interaction: Interaction) -> bool:
        proc = interaction.proc_info
        res = interaction.resonance
        nucleon = interaction.target.hit_nucleon
        if proc.scattering is not ScatteringType.RES or res is None or nucleon is None:
            return False
        if not probe_matches_current(interaction):
            return False
        return res.allows_charge(nucleon_charge(nucleon) + charge_shift(interaction))

    def _w_range(self, interaction: Interaction):
        E = interaction.init_state.probe_energy
        w_min = kNucleonMass + kPionMass
        w_max = math.sqrt(s_invariant(E)) - final_lepton_mass(interaction)
        return w_min, w_max

    def integral(self, interaction: Interaction) -> float:
        if not self.valid_process(interaction) or not self.valid_kinematics(interaction):
            return 0.0
        w_min, w_max = self._w_range(interaction)
        if w_max <= w_min:
            return 0.0
        w = np.linspace(w_min, w_max, self._n_points)
        bw = [self._bw.eval(interaction.resonance, wi) for wi in w]
        return self._norm * kGF2 * kNucleonMass ** 2 / kPi * trapezoid(bw, w)

    def xsec(self, interaction: Interaction, kps: KinePhaseSpace) -> float:
        if kps is KinePhaseSpace.E:
            return self.integral(interaction)
        if kps not in (KinePhaseSpace.W_E, KinePhaseSpace.W_Q2_E):
            raise ValueError(f"{self.id}: unsupported phase space {kps}")
        if not self.valid_process(interaction) or not self.valid_kinematics(interaction):
            return 0.0
        W = require(interaction.kinematics.W, "W", self)
        w_min, w_max = self._w_range(interaction)
        if not (w_min < W <= w_max):
            return 0.0
        bw = self._bw.eval(interaction.resonance, W)
        if kps is KinePhaseSpace.W_E:
            return self._norm * kGF2 * kNucleonMass ** 2 / kPi * bw
        Q2 = require(interaction.kinematics.Q2, "Q2", self)
        if Q2 < 0.0:
            return 0.0
        return self._norm * kGF2 / (2.0 * kPi) * bw * dipole(Q2, self._ma) ** 2
