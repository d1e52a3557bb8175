"""
Physics algorithm library for NuGenX.

Usage:
    from nugen.algorithms import default_registry, Capability

    registry = default_registry()
    gen = registry.resolve("EventGenerator", "QEL-CC", capability=Capability.EVENT_GENERATOR)
    xsec = gen.cross_section_alg()
    sigma = xsec.integral(interaction)
"""
from .base import (
    AlgId,
    Algorithm,
    AlgorithmConfigError,
    BreitWigner,
    Capability,
    EventGeneratorBase,
    HadronizationModel,
    InteractionListGenerator,
    ResonanceDataSet,
    XSecAlgorithm,
)
from .registry import AlgorithmRegistry, default_registry
from .generator import EventGenerator
from .hadronization import HadronRecord, PythiaHadronization

__all__ = [
    "AlgId",
    "Algorithm",
    "AlgorithmConfigError",
    "AlgorithmRegistry",
    "BreitWigner",
    "Capability",
    "EventGenerator",
    "EventGeneratorBase",
    "HadronRecord",
    "HadronizationModel",
    "InteractionListGenerator",
    "PythiaHadronization",
    "ResonanceDataSet",
    "XSecAlgorithm",
    "default_registry",
]
