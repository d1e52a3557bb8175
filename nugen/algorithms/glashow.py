"""
Glashow resonance: nu_e_bar + e- -> W-.

sigma(E) = GF^2 / (3 pi) * s * Mw^4 / ((s - Mw^2)^2 + Gw^2 Mw^2),  s = 2 me E
"""
import logging

from .. import pdg
from ..constants import kElectronMass, kGF2, kMw, kPi, kWidthW
from ..interaction import Interaction, ScatteringType
from ..kinematics import KinePhaseSpace
from .base import XSecAlgorithm

logger = logging.getLogger(__name__)


class GlashowResonancePXSec(XSecAlgorithm):

    name = "GlashowResonancePXSec"
    description = "nu_e_bar e- -> W- resonance"

    def load_config(self):
        self._mw = float(self.get_param("Mw", kMw))
        self._gw = float(self.get_param("Gw", kWidthW))

    def valid_process(self, interaction: Interaction) -> bool:
        proc = interaction.proc_info
        if proc.scattering is not ScatteringType.GLASHOW_RES:
            return False
        if not pdg.is_anti_nu_e(interaction.init_state.probe):
            return False
        if interaction.target.hit_nucleon_is_set:
            return False
        return proc.is_weak_cc

    def integral(self, interaction: Interaction) -> float:
        if not self.valid_process(interaction) or not self.valid_kinematics(interaction):
            return 0.0
        E = interaction.init_state.probe_energy
        mw2 = self._mw * self._mw
        s = 2.0 * kElectronMass * E
        bw = mw2 * mw2 / ((s - mw2) ** 2 + self._gw ** 2 * mw2)
        xsec = kGF2 / (3.0 * kPi) * s * bw
        logger.debug(f"XSec (E = {E}) = {xsec}")
        return xsec

    def xsec(self, interaction: Interaction, kps: KinePhaseSpace) -> float:
        # only the total cross section is modelled
        if kps is not KinePhaseSpace.E:
            return 0.0
        return self.integral(interaction)
