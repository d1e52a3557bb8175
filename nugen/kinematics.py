"""
Kinematics helpers for NuGenX.

Units: GeV (natural units c = 1).

Everything in this module is a continuous quantity. None of it takes part
in deciding which discrete channel an interaction belongs to.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import numpy as np


# -----------------------------
# FourVector
# -----------------------------
@dataclass(frozen=True)
class FourVector:
    E: float
    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0

    @property
    def p(self) -> np.ndarray:
        return np.array([self.px, self.py, self.pz], dtype=float)

    @property
    def magnitude(self) -> float:
        return float(np.linalg.norm(self.p))

    @property
    def mass(self) -> float:
        m2 = self.E * self.E - self.magnitude * self.magnitude
        return math.sqrt(max(m2, 0.0))

    def to_tuple(self) -> tuple:
        return (self.E, self.px, self.py, self.pz)

    def __add__(self, other: "FourVector") -> "FourVector":
        return FourVector(self.E + other.E, self.px + other.px, self.py + other.py, self.pz + other.pz)

    def __sub__(self, other: "FourVector") -> "FourVector":
        return FourVector(self.E - other.E, self.px - other.px, self.py - other.py, self.pz - other.pz)

    def __repr__(self) -> str:
        return f"FourVector(E={self.E:.6f}, px={self.px:.6f}, py={self.py:.6f}, pz={self.pz:.6f})"


def probe_along_z(energy: float, mass: float = 0.0) -> FourVector:
    """Probe four-momentum travelling along +z with total energy `energy`."""
    if energy < mass:
        raise ValueError(f"Probe energy {energy} below its mass {mass}")
    pz = math.sqrt(max(energy * energy - mass * mass, 0.0))
    return FourVector(energy, 0.0, 0.0, pz)


# -----------------------------
# Event kinematics
# -----------------------------
@dataclass(frozen=True)
class Kinematics:
    """Hadronic invariant mass W, momentum transfer Q2, Bjorken x, inelasticity y."""
    W: Optional[float] = None
    Q2: Optional[float] = None
    x: Optional[float] = None
    y: Optional[float] = None

    def __str__(self) -> str:
        parts = [f"{k}={v:.4g}" for k, v in (("W", self.W), ("Q2", self.Q2), ("x", self.x), ("y", self.y))
                 if v is not None]
        return ", ".join(parts) if parts else "unset"


class KinePhaseSpace(Enum):
    """Variables a differential cross section is evaluated with respect to."""
    E = "fE"
    Q2_E = "Q2fE"
    W_Q2_E = "WQ2fE"
    X_Y_E = "xyfE"
    W_E = "WfE"
