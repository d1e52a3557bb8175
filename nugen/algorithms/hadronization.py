"""
Hadronization of the DIS hadronic system.

The model works out which quark / remnant-diquark system fragments, then
hands it to an external fragmentation backend configured as the `backend`
parameter:

    backend(final_quark: int, diquark: int, W: float) -> list[HadronRecord]
"""
import logging
from dataclasses import dataclass
from typing import List, Tuple

from .. import pdg
from ..interaction import Interaction
from ..kinematics import FourVector
from .base import AlgorithmConfigError, HadronizationModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HadronRecord:
    pdg: int
    p4: FourVector


# valence: (nucleon, hit quark) -> remnant diquark
_VALENCE_DIQUARK = {
    (pdg.kPdgProton, pdg.kPdgUQuark): pdg.kPdgUDDiquarkS1,   # u(->q) + ud
    (pdg.kPdgProton, pdg.kPdgDQuark): pdg.kPdgUUDiquarkS1,   # d(->q) + uu
    (pdg.kPdgNeutron, pdg.kPdgUQuark): pdg.kPdgDDDiquarkS1,  # u(->q) + dd
    (pdg.kPdgNeutron, pdg.kPdgDQuark): pdg.kPdgUDDiquarkS1,  # d(->q) + ud
}

# sea antiquark: (nucleon, hit antiquark, is CC) -> (final quark, diquark).
# The partner quark of the struck antiquark is forced to annihilate with a
# valence quark, leaving a q + qq system.
_SEA_ANTIQUARK_SYSTEM = {
    (pdg.kPdgProton, pdg.kPdgUQuarkBar, True): (pdg.kPdgUQuark, pdg.kPdgUUDiquarkS1),
    (pdg.kPdgProton, pdg.kPdgUQuarkBar, False): (pdg.kPdgUQuark, pdg.kPdgUDDiquarkS1),
    (pdg.kPdgProton, pdg.kPdgDQuarkBar, True): (pdg.kPdgDQuark, pdg.kPdgUDDiquarkS1),
    (pdg.kPdgProton, pdg.kPdgDQuarkBar, False): (pdg.kPdgDQuark, pdg.kPdgUUDiquarkS1),
    (pdg.kPdgNeutron, pdg.kPdgUQuarkBar, True): (pdg.kPdgUQuark, pdg.kPdgUDDiquarkS1),
    (pdg.kPdgNeutron, pdg.kPdgUQuarkBar, False): (pdg.kPdgUQuark, pdg.kPdgDDDiquarkS1),
    (pdg.kPdgNeutron, pdg.kPdgDQuarkBar, True): (pdg.kPdgDQuark, pdg.kPdgDDDiquarkS1),
    (pdg.kPdgNeutron, pdg.kPdgDQuarkBar, False): (pdg.kPdgDQuark, pdg.kPdgUDDiquarkS1),
}


class PythiaHadronization(HadronizationModel):

    name = "PythiaHadronization"
    description = "q + qq string system handed to an external fragmentation backend"

    def load_config(self):
        self._backend = self.get_param("backend")
        if not callable(self._backend):
            raise AlgorithmConfigError(f"{self.id}: backend must be callable, got {type(self._backend).__name__}")

    def fragmentation_system(self, interaction: Interaction) -> Tuple[int, int]:
        """
        Return (final_quark, remnant_diquark) for a weak DIS interaction.

        Raises:
            ValueError: non-nucleon target, non-weak current, non-neutrino
                probe, or a struck quark the current cannot couple to.
        """
        init_state = interaction.init_state
        proc_info = interaction.proc_info
        target = interaction.target

        if not target.hit_quark_is_set:
            raise ValueError("Hadronization needs a struck quark")

        probe = init_state.probe
        hit_nucleon = target.hit_nucleon
        hit_quark = target.hit_quark
        from_sea = target.from_sea

        isp, isn = pdg.is_proton(hit_nucleon), pdg.is_neutron(hit_nucleon)
        isv, isvb = pdg.is_neutrino(probe), pdg.is_antineutrino(probe)
        iscc, isnc = proc_info.is_weak_cc, proc_info.is_weak_nc
        if not (isp or isn):
            raise ValueError(f"Can not handle nucleon: {hit_nucleon}")
        if not (iscc or isnc):
            raise ValueError("Can only handle weak interactions")
        if not (isv or isvb):
            raise ValueError(f"Can not handle non-neutrino probe: {probe}")

        isu, isd = pdg.is_u_quark(hit_quark), pdg.is_d_quark(hit_quark)
        isub, isdb = pdg.is_u_antiquark(hit_quark), pdg.is_d_antiquark(hit_quark)
        allowed = (iscc and isv and (isd or isub)) or \
                  (iscc and isvb and (isu or isdb)) or \
                  (isnc and (isu or isd or isub or isdb))
        if not allowed:
            raise ValueError(f"Current cannot couple to struck quark {hit_quark} for probe {probe}")

        if isnc:
            final_quark = hit_quark
        elif isv and isd:
            final_quark = pdg.kPdgUQuark
        elif isv and isub:
            final_quark = pdg.kPdgDQuarkBar
        elif isvb and isu:
            final_quark = pdg.kPdgDQuark
        else:
            final_quark = pdg.kPdgUQuarkBar

        if isub or isdb:
            if not from_sea:
                raise ValueError("Antiquark can only be struck from the sea")
            return _SEA_ANTIQUARK_SYSTEM[(hit_nucleon, hit_quark, iscc)]

        # valence or sea quark: same remnant
        return final_quark, _VALENCE_DIQUARK[(hit_nucleon, hit_quark)]

    def hadronize(self, interaction: Interaction) -> List[HadronRecord]:
        W = interaction.kinematics.W
        if W is None or W <= 0.0:
            raise ValueError("Hadronization needs the hadronic invariant mass W")

        final_quark, diquark = self.fragmentation_system(interaction)
        logger.debug(
            f"Fragmentation / init system: q = {final_quark}, qq = {diquark}, W = {W:.4f}"
        )

        particles = list(self._backend(final_quark, diquark, W))
        if not particles:
            raise RuntimeError(f"{self.id}: fragmentation backend returned no particles")
        for particle in particles:
            logger.debug(f"Adding final state particle pdgc = {particle.pdg}")
        return particles
