"""
NuGenX: neutrino-nucleus interaction channels and cross-section algorithms.

Usage:
    from nugen import (default_registry, GeneratorList, XSecAlgorithmMap,
                       InitialState, Target, probe_along_z)

    registry = default_registry()
    generators = GeneratorList.from_registry(registry, ["QEL-CC", "RES-CC", "DIS-CC"])

    xsec_map = XSecAlgorithmMap()
    xsec_map.use_generator_list(generators)
    xsec_map.build_map(InitialState(14, Target(6, 12), probe_along_z(2.0)))

    for interaction in xsec_map.get_interaction_list():
        alg = xsec_map.find_xsec_algorithm(interaction)
        print(interaction.as_string(), alg.integral(interaction))
"""
from .algorithms import AlgorithmConfigError, AlgorithmRegistry, Capability, default_registry
from .generator_list import GeneratorList
from .interaction import (
    InitialState,
    Interaction,
    InteractionType,
    ProcessInfo,
    Resonance,
    ScatteringType,
    Target,
    channel_key,
    make_interaction,
)
from .interaction_list import InteractionList
from .kinematics import FourVector, KinePhaseSpace, Kinematics, probe_along_z
from .xsec_map import XSecAlgorithmMap

__all__ = [
    "AlgorithmConfigError",
    "AlgorithmRegistry",
    "Capability",
    "FourVector",
    "GeneratorList",
    "InitialState",
    "Interaction",
    "InteractionList",
    "InteractionType",
    "KinePhaseSpace",
    "Kinematics",
    "ProcessInfo",
    "Resonance",
    "ScatteringType",
    "Target",
    "XSecAlgorithmMap",
    "channel_key",
    "default_registry",
    "make_interaction",
    "probe_along_z",
]
