"""
EventGenerator: pairs an interaction-list generator with the cross-section
algorithm that evaluates the channels it enumerates.

Config parameters:
    xsec-alg-name / xsec-param-set        cross-section sub-algorithm
    intlist-alg-name / intlist-param-set  interaction-list sub-algorithm
"""
import logging

from ..interaction import InitialState
from ..interaction_list import InteractionList
from .base import Capability, EventGeneratorBase, InteractionListGenerator, XSecAlgorithm

logger = logging.getLogger(__name__)


class EventGenerator(EventGeneratorBase):

    name = "EventGenerator"
    description = "Channel enumeration + cross-section model for one process"

    def load_config(self):
        self._xsec_alg = self.sub_alg("xsec-alg-name", "xsec-param-set", Capability.XSEC)
        self._intlist_gen = self.sub_alg("intlist-alg-name", "intlist-param-set",
                                         Capability.INTERACTION_LIST)

    def cross_section_alg(self) -> XSecAlgorithm:
        return self._xsec_alg

    def interaction_list_generator(self) -> InteractionListGenerator:
        return self._intlist_gen

    def enumerable_interactions(self, init_state: InitialState) -> InteractionList:
        """Candidate channels that the cross-section algorithm accepts."""
        candidates = self._intlist_gen.create_interaction_list(init_state)
        accepted = InteractionList()
        for interaction in candidates:
            if self._xsec_alg.valid_process(interaction):
                accepted.add(interaction)
        logger.debug(
            f"{self.id}: {len(accepted)}/{len(candidates)} candidate channels for {init_state.as_string()}"
        )
        return accepted
