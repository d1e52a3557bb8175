"""
GeneratorList: the ordered set of enabled event generators for a run.

Order matters: when two generators claim the same channel, the earlier one
owns it in the cross-section algorithm map.
"""
from typing import Iterable, Iterator, List

from .algorithms.base import Capability, EventGeneratorBase
from .algorithms.registry import AlgorithmRegistry


class GeneratorList:

    def __init__(self, generators: Iterable[EventGeneratorBase] = ()):
        self._generators: List[EventGeneratorBase] = []
        for gen in generators:
            self.add(gen)

    def add(self, generator: EventGeneratorBase) -> None:
        if generator.capability is not Capability.EVENT_GENERATOR:
            raise TypeError(f"{generator!r} is not an event generator")
        self._generators.append(generator)

    @classmethod
    def from_registry(cls, registry: AlgorithmRegistry, config_sets: Iterable[str],
                      name: str = "EventGenerator") -> "GeneratorList":
        """Resolve `name/<set>` for each config set, in order."""
        return cls(registry.resolve(name, config_set, capability=Capability.EVENT_GENERATOR)
                   for config_set in config_sets)

    def names(self) -> List[str]:
        return [str(gen.id) for gen in self._generators]

    def __iter__(self) -> Iterator[EventGeneratorBase]:
        return iter(self._generators)

    def __len__(self) -> int:
        return len(self._generators)

    def __getitem__(self, index) -> EventGeneratorBase:
        return self._generators[index]

    def __repr__(self) -> str:
        return f"GeneratorList({self.names()})"
