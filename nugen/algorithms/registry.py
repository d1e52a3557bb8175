"""
Algorithm registry: resolves (name, config set) pairs to configured instances.

One registry object is created by the application and handed to whatever
needs to resolve algorithms. Resolution is recursive: an algorithm's
load_config() resolves its own sub-algorithms through the same registry,
so a broken configuration fails here, at setup time, and never later
during event generation.

Instances are shared: resolving the same (name, config set) twice returns
the same object.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from .base import AlgId, Algorithm, AlgorithmConfigError, Capability

logger = logging.getLogger(__name__)


class AlgorithmRegistry:

    def __init__(self):
        self._classes: Dict[str, Type[Algorithm]] = {}
        self._configs: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._instances: Dict[AlgId, Algorithm] = {}
        self._resolving: List[AlgId] = []

    # -------------------- Registration --------------------

    def register(self, cls: Type[Algorithm], name: Optional[str] = None) -> Type[Algorithm]:
        """
        Register an algorithm class under `name` (default: cls.name).

        Usable as a plain call or as a class decorator. An empty "Default"
        configuration set is created if none exists yet.
        """
        key = name or cls.name
        if cls.capability is None:
            raise AlgorithmConfigError(f"{cls.__name__} declares no capability")
        if key in self._classes and self._classes[key] is not cls:
            raise AlgorithmConfigError(f"Algorithm name '{key}' already registered to {self._classes[key].__name__}")
        self._classes[key] = cls
        self._configs.setdefault(key, {}).setdefault("Default", {})
        return cls

    def add_config(self, name: str, config_set: str, params: Mapping[str, Any]) -> None:
        """Add (or replace) a named configuration set for algorithm `name`."""
        if name not in self._classes:
            raise AlgorithmConfigError(f"Cannot add config '{config_set}': algorithm '{name}' is not registered")
        alg_id = AlgId(name, config_set)
        if alg_id in self._instances:
            raise AlgorithmConfigError(f"{alg_id} is already in use and cannot be reconfigured")
        self._configs[name][config_set] = dict(params)

    # -------------------- Resolution --------------------

    def resolve(self, name: str, config_set: str = "Default",
                capability: Optional[Capability] = None) -> Algorithm:
        """
        Return the configured instance for (name, config_set).

        Raises:
            AlgorithmConfigError: unknown name or config set, capability
                mismatch, missing parameter, or a sub-algorithm cycle.
        """
        alg_id = AlgId(name, config_set)

        alg = self._instances.get(alg_id)
        if alg is not None:
            self._check_capability(alg_id, type(alg), capability)
            return alg

        if alg_id in self._resolving:
            chain = " -> ".join(str(a) for a in self._resolving + [alg_id])
            raise AlgorithmConfigError(f"Sub-algorithm cycle: {chain}")

        cls = self._classes.get(name)
        if cls is None:
            raise AlgorithmConfigError(f"Unknown algorithm '{name}'")
        self._check_capability(alg_id, cls, capability)

        params = self._configs[name].get(config_set)
        if params is None:
            available = ", ".join(sorted(self._configs[name]))
            raise AlgorithmConfigError(f"Unknown config set '{config_set}' for '{name}'. Available: {available}")

        alg = cls()
        self._resolving.append(alg_id)
        try:
            alg.configure(self, config_set, params)
        finally:
            self._resolving.pop()

        self._instances[alg_id] = alg
        logger.debug(f"Configured {alg_id} ({cls.capability.value})")
        return alg

    @staticmethod
    def _check_capability(alg_id: AlgId, cls: Type[Algorithm], capability: Optional[Capability]) -> None:
        if capability is not None and cls.capability is not capability:
            raise AlgorithmConfigError(
                f"{alg_id} is a {cls.capability.value}, not a {capability.value}"
            )

    # -------------------- Lifecycle / diagnostics --------------------

    def clear(self) -> None:
        """Drop every configured instance. Registrations and config sets stay."""
        n = len(self._instances)
        self._instances.clear()
        logger.debug(f"Registry cleared ({n} instances released)")

    def __enter__(self) -> "AlgorithmRegistry":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()

    def is_configured(self, name: str, config_set: str = "Default") -> bool:
        return AlgId(name, config_set) in self._instances

    def list_registered(self) -> Dict[str, str]:
        """Registered algorithm names -> capability."""
        return {k: v.capability.value for k, v in self._classes.items()}

    def list_configs(self, name: str) -> List[str]:
        return sorted(self._configs.get(name, {}))


def default_registry() -> AlgorithmRegistry:
    """Registry with every shipped algorithm and its standard configuration sets."""
    from .breit_wigner import BreitWignerLRes
    from .resonance_params import BaryonResDataPDG
    from .qel import QELPXSec
    from .res import RESPXSec
    from .dis import DISPXSec
    from .coh import COHPXSec
    from .mec import MECPXSec
    from .glashow import GlashowResonancePXSec
    from .hadronization import PythiaHadronization
    from .intlist import (
        NucleonChannelListGenerator,
        ResonanceChannelListGenerator,
        DISChannelListGenerator,
        NuclearChannelListGenerator,
    )
    from .generator import EventGenerator

    reg = AlgorithmRegistry()
    for cls in (BaryonResDataPDG, BreitWignerLRes, QELPXSec, RESPXSec, DISPXSec, COHPXSec,
                MECPXSec, GlashowResonancePXSec, PythiaHadronization,
                NucleonChannelListGenerator, ResonanceChannelListGenerator,
                DISChannelListGenerator, NuclearChannelListGenerator, EventGenerator):
        reg.register(cls)

    # ========== STANDARD CONFIGURATION SETS ==========
    reg.add_config("BreitWignerLRes", "Default", {
        "baryon-res-alg-name": "BaryonResDataPDG",
        "baryon-res-param-set": "Default",
    })
    reg.add_config("RESPXSec", "Default", {
        "breit-wigner-alg-name": "BreitWignerLRes",
        "breit-wigner-param-set": "Default",
    })
    reg.add_config("MECPXSec", "Default", {
        "MaMEC": 1.0, "Mass": 2.1, "Width": 0.3, "Norm": 1.0,
    })

    for current in ("CC", "NC", "EM"):
        flags = {"is-CC": current == "CC", "is-NC": current == "NC", "is-EM": current == "EM"}
        reg.add_config("NucleonChannelListGenerator", f"QEL-{current}", {"scattering": "QES", **flags})
        reg.add_config("ResonanceChannelListGenerator", f"RES-{current}", flags)
        reg.add_config("DISChannelListGenerator", f"DIS-{current}", flags)
    reg.add_config("NucleonChannelListGenerator", "MEC-CC",
                   {"scattering": "MEC", "is-CC": True, "is-NC": False, "is-EM": False})
    reg.add_config("NuclearChannelListGenerator", "COH-CC",
                   {"scattering": "COH", "is-CC": True, "is-NC": False, "is-EM": False})
    reg.add_config("NuclearChannelListGenerator", "COH-NC",
                   {"scattering": "COH", "is-CC": False, "is-NC": True, "is-EM": False})
    reg.add_config("NuclearChannelListGenerator", "GLASHOW",
                   {"scattering": "GLR", "is-CC": True, "is-NC": False, "is-EM": False})

    generators = {
        "QEL-CC": ("QELPXSec", "NucleonChannelListGenerator", "QEL-CC"),
        "QEL-NC": ("QELPXSec", "NucleonChannelListGenerator", "QEL-NC"),
        "QEL-EM": ("QELPXSec", "NucleonChannelListGenerator", "QEL-EM"),
        "RES-CC": ("RESPXSec", "ResonanceChannelListGenerator", "RES-CC"),
        "RES-NC": ("RESPXSec", "ResonanceChannelListGenerator", "RES-NC"),
        "RES-EM": ("RESPXSec", "ResonanceChannelListGenerator", "RES-EM"),
        "DIS-CC": ("DISPXSec", "DISChannelListGenerator", "DIS-CC"),
        "DIS-NC": ("DISPXSec", "DISChannelListGenerator", "DIS-NC"),
        "DIS-EM": ("DISPXSec", "DISChannelListGenerator", "DIS-EM"),
        "COH-CC": ("COHPXSec", "NuclearChannelListGenerator", "COH-CC"),
        "COH-NC": ("COHPXSec", "NuclearChannelListGenerator", "COH-NC"),
        "MEC-CC": ("MECPXSec", "NucleonChannelListGenerator", "MEC-CC"),
        "GLASHOW": ("GlashowResonancePXSec", "NuclearChannelListGenerator", "GLASHOW"),
    }
    for config_set, (xsec, intlist, intlist_set) in generators.items():
        reg.add_config("EventGenerator", config_set, {
            "xsec-alg-name": xsec,
            "xsec-param-set": "Default",
            "intlist-alg-name": intlist,
            "intlist-param-set": intlist_set,
        })

    return reg
