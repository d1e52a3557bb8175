"""
Deep-inelastic scattering off a struck quark.

Quark-parton picture: d2sigma/dxdy = GF^2 M E / pi * f_q * h(y), with
h(y) = 1 for same-helicity (nu q, nubar qbar) and (1-y)^2 otherwise.
"""
from .. import pdg
from ..constants import kGF2, kNucleonMass, kPi
from ..interaction import Interaction, ScatteringType
from ..kinematics import KinePhaseSpace
from .base import XSecAlgorithm
from .xsec_utils import probe_matches_current, require, s_invariant

# (nucleon, quark) -> momentum fraction carried by valence quarks
_VALENCE_FRACTION = {
    (pdg.kPdgProton, pdg.kPdgUQuark): 0.30,
    (pdg.kPdgProton, pdg.kPdgDQuark): 0.15,
    (pdg.kPdgNeutron, pdg.kPdgUQuark): 0.15,
    (pdg.kPdgNeutron, pdg.kPdgDQuark): 0.30,
}
_SEA_FRACTION = 0.03


def cc_quark_allowed(probe: int, quark: int) -> bool:
    """W+ absorbed by d or ubar; W- by u or dbar."""
    if pdg.is_neutrino(probe):
        return pdg.is_d_quark(quark) or pdg.is_u_antiquark(quark)
    if pdg.is_antineutrino(probe):
        return pdg.is_u_quark(quark) or pdg.is_d_antiquark(quark)
    return False


class DISPXSec(XSecAlgorithm):

    name = "DISPXSec"
    description = "Quark-parton model DIS"

    def load_config(self):
        self._wcut = float(self.get_param("Wcut", 1.7))
        self._norm = float(self.get_param("Norm", 1.0))

    def valid_process(self, interaction: Interaction) -> bool:
        proc = interaction.proc_info
        tgt = interaction.target
        if proc.scattering is not ScatteringType.DIS:
            return False
        if not probe_matches_current(interaction):
            return False
        if not (tgt.hit_nucleon_is_set and tgt.hit_quark_is_set):
            return False
        quark = tgt.hit_quark
        if not (pdg.is_u_quark(quark) or pdg.is_d_quark(quark) or
                pdg.is_u_antiquark(quark) or pdg.is_d_antiquark(quark)):
            return False
        if pdg.is_antiquark(quark) and not tgt.from_sea:
            return False
        if proc.is_weak_cc:
            return cc_quark_allowed(interaction.init_state.probe, quark)
        return True

    def _fraction(self, interaction: Interaction) -> float:
        tgt = interaction.target
        if tgt.from_sea:
            return _SEA_FRACTION
        return _VALENCE_FRACTION.get((tgt.hit_nucleon, tgt.hit_quark), 0.0)

    def _same_helicity(self, interaction: Interaction) -> bool:
        antiprobe = interaction.init_state.probe < 0
        return antiprobe == pdg.is_antiquark(interaction.target.hit_quark)

    def integral(self, interaction: Interaction) -> float:
        if not self.valid_process(interaction) or not self.valid_kinematics(interaction):
            return 0.0
        E = interaction.init_state.probe_energy
        s = s_invariant(E)
        if s <= self._wcut ** 2:
            return 0.0
        y_factor = 1.0 if self._same_helicity(interaction) else 1.0 / 3.0
        sigma = kGF2 * kNucleonMass * E / kPi * self._fraction(interaction) * y_factor
        return self._norm * sigma * (1.0 - self._wcut ** 2 / s)

    def xsec(self, interaction: Interaction, kps: KinePhaseSpace) -> float:
        if kps is KinePhaseSpace.E:
            return self.integral(interaction)
        if kps is not KinePhaseSpace.X_Y_E:
            raise ValueError(f"{self.id}: unsupported phase space {kps}")
        if not self.valid_process(interaction) or not self.valid_kinematics(interaction):
            return 0.0
        x = require(interaction.kinematics.x, "x", self)
        y = require(interaction.kinematics.y, "y", self)
        if not (0.0 < x < 1.0 and 0.0 < y < 1.0):
            return 0.0
        E = interaction.init_state.probe_energy
        h = 1.0 if self._same_helicity(interaction) else (1.0 - y) ** 2
        return self._norm * kGF2 * kNucleonMass * E / kPi * self._fraction(interaction) * h
