"""
L-dependent Breit-Wigner for baryon resonances.

The resonance parameters come from a resonance-table sub-algorithm named in
the configuration (baryon-res-alg-name / baryon-res-param-set).
"""
from __future__ import annotations
import math
import numpy as np

from ..constants import kNucleonMass, kPionMass, kPi
from ..interaction import Resonance
from .base import BreitWigner, Capability
from .xsec_utils import trapezoid

_W_MIN = kNucleonMass + kPionMass


def _pion_momentum(W):
    """Pion momentum in the N-pi rest frame at invariant mass W (0 below threshold)."""
    W = np.asarray(W, dtype=float)
    mN2, mPi2 = kNucleonMass ** 2, kPionMass ** 2
    with np.errstate(divide="ignore", invalid="ignore"):
        q2 = ((W * W - mN2 - mPi2) / (2.0 * W)) ** 2 - mPi2
    return np.sqrt(np.clip(q2, 0.0, None))


def breit_wigner_l(W, L: int, mass: float, width0: float, norm: float = 1.0):
    """Unnormalised (norm=1) or normalised L-wave Breit-Wigner; vectorised over W."""
    W = np.asarray(W, dtype=float)
    qW = _pion_momentum(W)
    qM = float(_pion_momentum(mass))
    if qM <= 0.0:
        raise ValueError(f"Resonance mass {mass} below N-pi threshold")
    with np.errstate(divide="ignore", invalid="ignore"):
        width = width0 * (qW / qM) ** (2 * L + 1)
        bw = (0.5 * width) / ((W - mass) ** 2 + 0.25 * width * width) / kPi
    bw = np.where(W > _W_MIN, np.nan_to_num(bw), 0.0)
    return bw / norm


class BreitWignerLRes(BreitWigner):

    name = "BreitWignerLRes"
    description = "L-dependent Breit-Wigner using a resonance-table sub-algorithm"

    def load_config(self):
        self._res_data = self.sub_alg("baryon-res-alg-name", "baryon-res-param-set",
                                      Capability.RESONANCE_TABLE)
        n_points = int(self.get_param("norm-grid-points", 2000))
        self._norms = {}
        for res in Resonance:
            if not self._res_data.contains(res):
                continue
            mass = self._res_data.mass(res)
            width = self._res_data.width(res)
            L = self._res_data.orbital_angular_mom(res)
            w = np.linspace(_W_MIN, mass + 10.0 * width, n_points)
            bw = breit_wigner_l(w, L, mass, width)
            self._norms[res] = trapezoid(bw, w)

    @property
    def resonance_data(self):
        return self._res_data

    def eval(self, res: Resonance, W: float) -> float:
        if res not in self._norms:
            return 0.0
        mass = self._res_data.mass(res)
        width = self._res_data.width(res)
        L = self._res_data.orbital_angular_mom(res)
        value = float(breit_wigner_l(W, L, mass, width, self._norms[res]))
        return value if math.isfinite(value) else 0.0
