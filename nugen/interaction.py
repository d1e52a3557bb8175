"""
Interaction: one discrete reaction channel plus its (continuous) kinematics.

Channel identity is the discrete descriptor only:
    probe, target nucleus, hit nucleon, hit quark (+ sea flag),
    interaction type, scattering type, resonance.

Probe four-momentum and event kinematics are carried along but excluded
from equality, hashing and the lookup key.
"""
from __future__ import annotations
import copy
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from . import pdg
from .kinematics import FourVector, Kinematics


class InteractionType(Enum):
    WEAK_CC = "Weak[CC]"
    WEAK_NC = "Weak[NC]"
    EM = "EM"


class ScatteringType(Enum):
    QE = "QES"
    RES = "RES"
    DIS = "DIS"
    COH = "COH"
    MEC = "MEC"
    GLASHOW_RES = "GLR"


class Resonance(Enum):
    """Baryon resonances as (label, isospin x2, orbital angular momentum L)."""
    P33_1232 = ("P33(1232)", 3, 1)
    S11_1535 = ("S11(1535)", 1, 0)
    D13_1520 = ("D13(1520)", 1, 2)
    S11_1650 = ("S11(1650)", 1, 0)
    D13_1700 = ("D13(1700)", 1, 2)
    D15_1675 = ("D15(1675)", 1, 2)
    S31_1620 = ("S31(1620)", 3, 0)
    D33_1700 = ("D33(1700)", 3, 2)
    P11_1440 = ("P11(1440)", 1, 1)
    P33_1600 = ("P33(1600)", 3, 1)
    P13_1720 = ("P13(1720)", 1, 1)
    F15_1680 = ("F15(1680)", 1, 3)
    P31_1910 = ("P31(1910)", 3, 1)
    P33_1920 = ("P33(1920)", 3, 1)
    F35_1905 = ("F35(1905)", 3, 3)
    F37_1950 = ("F37(1950)", 3, 3)
    P11_1710 = ("P11(1710)", 1, 1)
    F17_1970 = ("F17(1970)", 1, 3)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def isospin(self) -> float:
        return self.value[1] / 2.0

    @property
    def orbital_angular_mom(self) -> int:
        return self.value[2]

    def allows_charge(self, charge: int) -> bool:
        """N* (I=1/2) come in charges 0, +1; Delta (I=3/2) in -1 .. +2."""
        if self.value[1] == 1:
            return charge in (0, 1)
        return charge in (-1, 0, 1, 2)


@dataclass(frozen=True)
class ProcessInfo:
    scattering: ScatteringType
    interaction: InteractionType

    @property
    def is_weak_cc(self) -> bool:
        return self.interaction is InteractionType.WEAK_CC

    @property
    def is_weak_nc(self) -> bool:
        return self.interaction is InteractionType.WEAK_NC

    @property
    def is_weak(self) -> bool:
        return self.is_weak_cc or self.is_weak_nc

    @property
    def is_em(self) -> bool:
        return self.interaction is InteractionType.EM

    def __str__(self) -> str:
        return f"{self.interaction.value},{self.scattering.value}"


@dataclass(frozen=True)
class Target:
    Z: int
    A: int
    hit_nucleon: Optional[int] = None
    hit_quark: Optional[int] = None
    from_sea: bool = False

    def __post_init__(self):
        if self.hit_nucleon is not None and not pdg.is_nucleon(self.hit_nucleon):
            raise ValueError(f"Hit nucleon must be a proton or neutron, got {self.hit_nucleon}")
        if self.hit_quark is not None and self.hit_nucleon is None:
            raise ValueError("Hit quark set without a hit nucleon")
        if self.from_sea and self.hit_quark is None:
            raise ValueError("Sea flag set without a hit quark")

    @property
    def pdg(self) -> int:
        return pdg.ion_pdg_code(self.Z, self.A)

    @property
    def N(self) -> int:
        return self.A - self.Z

    @property
    def hit_nucleon_is_set(self) -> bool:
        return self.hit_nucleon is not None

    @property
    def hit_quark_is_set(self) -> bool:
        return self.hit_quark is not None

    def with_hit_nucleon(self, nucleon: Optional[int]) -> "Target":
        return replace(self, hit_nucleon=nucleon, hit_quark=None, from_sea=False)

    def with_hit_quark(self, quark: Optional[int], from_sea: bool = False) -> "Target":
        return replace(self, hit_quark=quark, from_sea=from_sea)

    @classmethod
    def from_pdg(cls, code: int, hit_nucleon: Optional[int] = None) -> "Target":
        """Accepts an ion code or a free nucleon code (2212 / 2112)."""
        if pdg.is_nucleon(code):
            return cls(Z=1 if pdg.is_proton(code) else 0, A=1, hit_nucleon=hit_nucleon)
        return cls(Z=pdg.ion_z(code), A=pdg.ion_a(code), hit_nucleon=hit_nucleon)


@dataclass(frozen=True)
class InitialState:
    probe: int
    target: Target
    probe_p4: Optional[FourVector] = field(default=None, compare=False)

    @property
    def probe_energy(self) -> float:
        return self.probe_p4.E if self.probe_p4 is not None else 0.0

    def with_target(self, target: Target) -> "InitialState":
        return replace(self, target=target)

    def with_probe_p4(self, p4: FourVector) -> "InitialState":
        return replace(self, probe_p4=p4)

    def as_string(self) -> str:
        return f"nu:{self.probe};tgt:{self.target.pdg}"


@dataclass(frozen=True)
class Interaction:
    init_state: InitialState
    proc_info: ProcessInfo
    kinematics: Kinematics = field(default_factory=Kinematics, compare=False)
    resonance: Optional[Resonance] = None

    @property
    def target(self) -> Target:
        return self.init_state.target

    def as_string(self) -> str:
        """Discrete channel descriptor, e.g. 'nu:14;tgt:1000060120;N:2112;proc:Weak[CC],QES'."""
        tgt = self.target
        s = self.init_state.as_string()
        if tgt.hit_nucleon_is_set:
            s += f";N:{tgt.hit_nucleon}"
        if tgt.hit_quark_is_set:
            s += f";q:{tgt.hit_quark}({'s' if tgt.from_sea else 'v'})"
        s += f";proc:{self.proc_info}"
        if self.resonance is not None:
            s += f";res:{self.resonance.name}"
        return s

    def with_kinematics(self, kinematics: Kinematics) -> "Interaction":
        return replace(self, kinematics=kinematics)

    def copy(self) -> "Interaction":
        return copy.deepcopy(self)

    def __str__(self) -> str:
        tgt = self.target
        quark = "-"
        if tgt.hit_quark_is_set:
            quark = f"{pdg.name(tgt.hit_quark)} [{'sea' if tgt.from_sea else 'valence'}]"
        lines = [
            "[-] Interaction",
            f" |-> probe      : {pdg.name(self.init_state.probe)} ({self.init_state.probe})",
            f" |-> target     : {tgt.pdg} (Z={tgt.Z}, A={tgt.A})",
            f" |-> hit nucleon: {pdg.name(tgt.hit_nucleon)}",
            f" |-> hit quark  : {quark}",
            f" |-> process    : {self.proc_info}",
        ]
        if self.resonance is not None:
            lines.append(f" |-> resonance  : {self.resonance.label}")
        if self.init_state.probe_p4 is not None:
            lines.append(f" |-> probe E    : {self.init_state.probe_energy:.4g} GeV")
        lines.append(f" |-> kinematics : {self.kinematics}")
        return "\n".join(lines)


def channel_key(interaction: Interaction) -> str:
    """Lookup key for the cross-section algorithm map."""
    return interaction.as_string()


def make_interaction(init_state: InitialState,
                     scattering: ScatteringType,
                     interaction: InteractionType,
                     hit_nucleon: Optional[int] = None,
                     hit_quark: Optional[int] = None,
                     from_sea: bool = False,
                     resonance: Optional[Resonance] = None) -> Interaction:
    """Build an Interaction for `init_state` with the given hit nucleon/quark."""
    target = init_state.target.with_hit_nucleon(hit_nucleon)
    if hit_quark is not None:
        target = target.with_hit_quark(hit_quark, from_sea)
    return Interaction(
        init_state=init_state.with_target(target),
        proc_info=ProcessInfo(scattering, interaction),
        resonance=resonance,
    )
