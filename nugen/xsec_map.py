"""
Interaction -> cross-section algorithm map.

Built once per initial state from the enabled generator list, then queried
per event with a plain dictionary lookup. The map owns its interactions
(and its initial-state snapshot) but only holds weak references to the
algorithms: those belong to the registry / generator list that configured
them, and must outlive the map.

A single map is not safe to rebuild while other threads read from it;
concurrent read-only queries on a built map are fine.
"""
from __future__ import annotations
import copy
import logging
import weakref
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .algorithms.base import AlgId, EventGeneratorBase, XSecAlgorithm
from .generator_list import GeneratorList
from .interaction import InitialState, Interaction, channel_key
from .interaction_list import InteractionList

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlgorithmRef:
    """Non-owning handle to the algorithm (and generator) owning one channel."""
    xsec_ref: weakref.ref
    generator_ref: weakref.ref
    xsec_id: AlgId
    generator_id: AlgId

    @classmethod
    def to(cls, generator: EventGeneratorBase) -> "AlgorithmRef":
        xsec_alg = generator.cross_section_alg()
        return cls(weakref.ref(xsec_alg), weakref.ref(generator), xsec_alg.id, generator.id)

    @staticmethod
    def _deref(ref: weakref.ref, alg_id: AlgId):
        obj = ref()
        if obj is None:
            raise ReferenceError(f"{alg_id} was released while still referenced by a cross-section map")
        return obj

    def xsec_alg(self) -> XSecAlgorithm:
        return self._deref(self.xsec_ref, self.xsec_id)

    def generator(self) -> EventGeneratorBase:
        return self._deref(self.generator_ref, self.generator_id)


class XSecAlgorithmMap:

    def __init__(self, other: Optional["XSecAlgorithmMap"] = None):
        self._generator_list: Optional[GeneratorList] = None
        self._init_state: Optional[InitialState] = None
        self._interactions = InteractionList()
        self._refs: Dict[str, AlgorithmRef] = {}
        if other is not None:
            self.copy_from(other)

    # -------------------- Building --------------------

    def use_generator_list(self, generator_list: GeneratorList) -> None:
        """Generator list consulted by the next build_map(). Does not build."""
        self._generator_list = generator_list

    @property
    def generator_list(self) -> Optional[GeneratorList]:
        return self._generator_list

    @property
    def initial_state(self) -> Optional[InitialState]:
        return self._init_state

    def build_map(self, init_state: InitialState) -> None:
        """
        Rebuild from scratch for `init_state`.

        Generators are asked in list order; the first one to claim a channel
        owns it and later claims are dropped (logged at DEBUG). An initial
        state nobody claims gives an empty, valid map.
        """
        if self._generator_list is None:
            raise RuntimeError("No generator list; call use_generator_list() before build_map()")

        self.reset()
        self._init_state = copy.deepcopy(init_state)

        for generator in self._generator_list:
            claimed = generator.enumerable_interactions(init_state)
            for interaction in claimed:
                key = channel_key(interaction)
                owner = self._refs.get(key)
                if owner is not None:
                    logger.debug(
                        f"Channel {key} claimed by {generator.id} is already owned by "
                        f"{owner.generator_id}; keeping the earlier generator"
                    )
                    continue
                self._interactions.add(interaction)
                self._refs[key] = AlgorithmRef.to(generator)

        logger.info(
            f"Built cross-section map for {init_state.as_string()}: "
            f"{len(self._refs)} channels from {len(self._generator_list)} generators"
        )

    # -------------------- Queries --------------------

    def find_xsec_algorithm(self, interaction: Interaction) -> Optional[XSecAlgorithm]:
        """Algorithm owning the interaction's channel, or None if no generator claims it."""
        ref = self._refs.get(channel_key(interaction))
        return ref.xsec_alg() if ref is not None else None

    def find_generator(self, interaction: Interaction) -> Optional[EventGeneratorBase]:
        ref = self._refs.get(channel_key(interaction))
        return ref.generator() if ref is not None else None

    def get_interaction_list(self) -> Tuple[Interaction, ...]:
        """Read-only view of the owned interactions, in build order."""
        return tuple(self._interactions)

    def keys(self) -> List[str]:
        return list(self._refs)

    def items(self) -> Iterator[Tuple[Interaction, XSecAlgorithm]]:
        for interaction in self._interactions:
            yield interaction, self._refs[channel_key(interaction)].xsec_alg()

    def __len__(self) -> int:
        return len(self._refs)

    def __contains__(self, item) -> bool:
        key = item if isinstance(item, str) else channel_key(item)
        return key in self._refs

    # -------------------- Lifecycle --------------------

    def reset(self) -> None:
        """Empty the map. The generator list is kept."""
        self._interactions.reset()
        self._refs.clear()
        self._init_state = None

    def copy_from(self, other: "XSecAlgorithmMap") -> None:
        """Deep-copy interactions and initial state; algorithm references are shared."""
        if other is self:
            return
        self._generator_list = other._generator_list
        self._init_state = copy.deepcopy(other._init_state)
        self._interactions.copy_from(other._interactions)
        self._refs = dict(other._refs)

    def __copy__(self) -> "XSecAlgorithmMap":
        return XSecAlgorithmMap(self)

    def __str__(self) -> str:
        header = self._init_state.as_string() if self._init_state is not None else "not built"
        lines = [f"XSecAlgorithmMap [{header}] ({len(self)} channels)"]
        for interaction in self._interactions:
            ref = self._refs[channel_key(interaction)]
            lines.append(f"  {interaction.as_string():<60s} -> {ref.xsec_id} (via {ref.generator_id})")
        return "\n".join(lines)
