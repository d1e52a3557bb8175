"""
Interaction-list generators: enumerate the candidate channels of one
scattering type for an initial state.

They enumerate by structure only (currents x hit nucleons x quarks /
resonances); the cross-section algorithm paired with them in an
EventGenerator decides which candidates it can actually evaluate.

Config parameters: is-CC, is-NC, is-EM (bools), plus `scattering` where
the class serves more than one scattering type.
"""
from typing import List

from .. import pdg
from ..interaction import (
    InitialState,
    InteractionType,
    Resonance,
    ScatteringType,
    make_interaction,
)
from ..interaction_list import InteractionList
from .base import AlgorithmConfigError, InteractionListGenerator

_CURRENT_FLAGS = (
    ("is-CC", InteractionType.WEAK_CC),
    ("is-NC", InteractionType.WEAK_NC),
    ("is-EM", InteractionType.EM),
)


def target_nucleons(init_state: InitialState) -> List[int]:
    tgt = init_state.target
    nucleons = []
    if tgt.Z > 0:
        nucleons.append(pdg.kPdgProton)
    if tgt.N > 0:
        nucleons.append(pdg.kPdgNeutron)
    return nucleons


class _ChannelListGenerator(InteractionListGenerator):

    allowed_scattering: tuple = ()

    def load_config(self):
        self._currents = [cur for key, cur in _CURRENT_FLAGS if self.get_param(key, False)]
        if not self._currents:
            raise AlgorithmConfigError(f"{self.id}: none of is-CC / is-NC / is-EM is enabled")
        if len(self.allowed_scattering) == 1:
            self._scattering = self.allowed_scattering[0]
            return
        try:
            self._scattering = ScatteringType(self.get_param("scattering"))
        except ValueError as e:
            raise AlgorithmConfigError(f"{self.id}: {e}") from e
        if self._scattering not in self.allowed_scattering:
            raise AlgorithmConfigError(f"{self.id}: cannot enumerate {self._scattering.value} channels")

    @property
    def currents(self):
        return list(self._currents)

    @property
    def scattering(self) -> ScatteringType:
        return self._scattering


class NucleonChannelListGenerator(_ChannelListGenerator):
    """One channel per current and hit nucleon (QE, MEC)."""

    name = "NucleonChannelListGenerator"
    allowed_scattering = (ScatteringType.QE, ScatteringType.MEC)

    def create_interaction_list(self, init_state: InitialState) -> InteractionList:
        intlist = InteractionList()
        for current in self._currents:
            for nucleon in target_nucleons(init_state):
                intlist.add(make_interaction(init_state, self._scattering, current, hit_nucleon=nucleon))
        return intlist


class ResonanceChannelListGenerator(_ChannelListGenerator):
    """One channel per current, hit nucleon and baryon resonance."""

    name = "ResonanceChannelListGenerator"
    allowed_scattering = (ScatteringType.RES,)

    def load_config(self):
        super().load_config()
        names = self.get_param("resonances", None)
        if names is None:
            self._resonances = list(Resonance)
            return
        try:
            self._resonances = [Resonance[n] for n in names]
        except KeyError as e:
            raise AlgorithmConfigError(f"{self.id}: unknown resonance {e}") from e

    def create_interaction_list(self, init_state: InitialState) -> InteractionList:
        intlist = InteractionList()
        for current in self._currents:
            for nucleon in target_nucleons(init_state):
                for res in self._resonances:
                    intlist.add(make_interaction(init_state, ScatteringType.RES, current,
                                                 hit_nucleon=nucleon, resonance=res))
        return intlist


# (quark, from_sea)
_DIS_QUARKS = (
    (pdg.kPdgUQuark, False),
    (pdg.kPdgDQuark, False),
    (pdg.kPdgUQuark, True),
    (pdg.kPdgDQuark, True),
    (pdg.kPdgUQuarkBar, True),
    (pdg.kPdgDQuarkBar, True),
)


class DISChannelListGenerator(_ChannelListGenerator):
    """One channel per current, hit nucleon and struck (valence or sea) quark."""

    name = "DISChannelListGenerator"
    allowed_scattering = (ScatteringType.DIS,)

    def create_interaction_list(self, init_state: InitialState) -> InteractionList:
        intlist = InteractionList()
        for current in self._currents:
            for nucleon in target_nucleons(init_state):
                for quark, from_sea in _DIS_QUARKS:
                    intlist.add(make_interaction(init_state, ScatteringType.DIS, current,
                                                 hit_nucleon=nucleon, hit_quark=quark, from_sea=from_sea))
        return intlist


class NuclearChannelListGenerator(_ChannelListGenerator):
    """One channel per current with no hit nucleon (coherent, Glashow resonance)."""

    name = "NuclearChannelListGenerator"
    allowed_scattering = (ScatteringType.COH, ScatteringType.GLASHOW_RES)

    def create_interaction_list(self, init_state: InitialState) -> InteractionList:
        intlist = InteractionList()
        for current in self._currents:
            intlist.add(make_interaction(init_state, self._scattering, current))
        return intlist
