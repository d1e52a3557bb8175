"""
Algorithm base class and capability interfaces.

Every configurable physics component derives from Algorithm and declares
exactly one Capability. The registry checks the declared capability when a
consumer asks for one, so a component never has to guess what it got back.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

from ..kinematics import KinePhaseSpace

if TYPE_CHECKING:
    from ..interaction import InitialState, Interaction, Resonance
    from ..interaction_list import InteractionList
    from .registry import AlgorithmRegistry


class AlgorithmConfigError(RuntimeError):
    """An algorithm (or one of its sub-algorithms) could not be configured."""


class Capability(Enum):
    XSEC = "cross-section evaluator"
    HADRONIZATION = "hadronizer"
    RESONANCE_TABLE = "resonance-parameter provider"
    BREIT_WIGNER = "breit-wigner shape"
    INTERACTION_LIST = "interaction-list generator"
    EVENT_GENERATOR = "event generator"


@dataclass(frozen=True)
class AlgId:
    name: str
    config: str = "Default"

    def __str__(self) -> str:
        return f"{self.name}/{self.config}"


_REQUIRED = object()


class Algorithm(ABC):
    """
    Base class for all registry-managed algorithms.

    Subclasses set `name` (the registry identifier), `capability` and
    optionally `description`, and override `load_config()` to read their
    parameters and resolve sub-algorithms.
    """

    name: str = "abstract"
    description: str = ""
    capability: Optional[Capability] = None

    def __init__(self):
        self._id = AlgId(self.name)
        self._config: Mapping[str, Any] = MappingProxyType({})
        self._registry: Optional["AlgorithmRegistry"] = None

    @property
    def id(self) -> AlgId:
        return self._id

    @property
    def config(self) -> Mapping[str, Any]:
        return self._config

    def configure(self, registry: "AlgorithmRegistry", config_set: str, params: Mapping[str, Any]) -> None:
        self._registry = registry
        self._id = AlgId(self.name, config_set)
        self._config = MappingProxyType(dict(params))
        self.load_config()

    def load_config(self) -> None:
        """Read parameters / resolve sub-algorithms. Called once by configure()."""

    def get_param(self, key: str, default: Any = _REQUIRED) -> Any:
        if key in self._config:
            return self._config[key]
        if default is _REQUIRED:
            raise AlgorithmConfigError(f"{self.id}: missing required parameter '{key}'")
        return default

    def sub_alg(self, name_key: str, config_key: str, capability: Capability) -> "Algorithm":
        """
        Resolve the sub-algorithm named by parameters `name_key` / `config_key`.

        The config-set parameter is optional and defaults to "Default".
        """
        if self._registry is None:
            raise AlgorithmConfigError(f"{self.id}: not configured through a registry")
        alg_name = self.get_param(name_key)
        alg_config = self.get_param(config_key, "Default")
        return self._registry.resolve(alg_name, alg_config, capability=capability)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"


class XSecAlgorithm(Algorithm):
    """Computes differential and integrated cross sections (GeV^-2)."""

    capability = Capability.XSEC

    @abstractmethod
    def xsec(self, interaction: "Interaction", kps: KinePhaseSpace) -> float:
        """Differential cross section at the interaction's kinematics."""

    @abstractmethod
    def integral(self, interaction: "Interaction") -> float:
        """Total cross section for the channel at the probe energy."""

    @abstractmethod
    def valid_process(self, interaction: "Interaction") -> bool:
        """Can this algorithm evaluate this discrete channel at all?"""

    def valid_kinematics(self, interaction: "Interaction") -> bool:
        return interaction.init_state.probe_energy > 0.0


class HadronizationModel(Algorithm):

    capability = Capability.HADRONIZATION

    @abstractmethod
    def hadronize(self, interaction: "Interaction") -> list:
        """Final-state hadrons for the interaction's hadronic system."""


class ResonanceDataSet(Algorithm):

    capability = Capability.RESONANCE_TABLE

    @abstractmethod
    def contains(self, res: "Resonance") -> bool: ...

    @abstractmethod
    def mass(self, res: "Resonance") -> float: ...

    @abstractmethod
    def width(self, res: "Resonance") -> float: ...

    def orbital_angular_mom(self, res: "Resonance") -> int:
        return res.orbital_angular_mom

    def isospin(self, res: "Resonance") -> float:
        return res.isospin


class BreitWigner(Algorithm):

    capability = Capability.BREIT_WIGNER

    @abstractmethod
    def eval(self, res: "Resonance", W: float) -> float: ...


class InteractionListGenerator(Algorithm):

    capability = Capability.INTERACTION_LIST

    @abstractmethod
    def create_interaction_list(self, init_state: "InitialState") -> "InteractionList":
        """Candidate channels for `init_state`; may be empty, never None."""


class EventGeneratorBase(Algorithm):

    capability = Capability.EVENT_GENERATOR

    @abstractmethod
    def cross_section_alg(self) -> XSecAlgorithm: ...

    @abstractmethod
    def enumerable_interactions(self, init_state: "InitialState") -> "InteractionList": ...


__all__: List[str] = [
    "AlgId",
    "Algorithm",
    "AlgorithmConfigError",
    "BreitWigner",
    "Capability",
    "EventGeneratorBase",
    "HadronizationModel",
    "InteractionListGenerator",
    "ResonanceDataSet",
    "XSecAlgorithm",
]
