"""Helpers shared by the cross-section algorithms."""
import math
import numpy as np

from .. import pdg
from ..constants import kElectronMass, kMuonMass, kTauMass, kNucleonMass
from ..interaction import Interaction

_LEPTON_MASS = {11: kElectronMass, 13: kMuonMass, 15: kTauMass}


def probe_matches_current(interaction: Interaction) -> bool:
    """Weak currents need a (anti)neutrino probe, EM needs a charged lepton."""
    probe = interaction.init_state.probe
    proc = interaction.proc_info
    if proc.is_weak:
        return pdg.is_neutrino(probe) or pdg.is_antineutrino(probe)
    if proc.is_em:
        return pdg.is_charged_lepton(probe)
    return False


def charge_shift(interaction: Interaction) -> int:
    """Charge transferred to the hadronic system by the current."""
    if not interaction.proc_info.is_weak_cc:
        return 0
    return 1 if pdg.is_neutrino(interaction.init_state.probe) else -1


def nucleon_charge(nucleon) -> int:
    return 1 if pdg.is_proton(nucleon) else 0


def final_lepton_mass(interaction: Interaction) -> float:
    """Outgoing lepton mass: charged partner for CC, the probe itself otherwise."""
    probe = abs(interaction.init_state.probe)
    if interaction.proc_info.is_weak_cc:
        return _LEPTON_MASS.get(probe - 1, 0.0)
    return _LEPTON_MASS.get(probe, 0.0)


def s_invariant(E: float, target_mass: float = kNucleonMass) -> float:
    """Centre-of-mass energy squared for a massless probe on a target at rest."""
    return target_mass * target_mass + 2.0 * target_mass * E


def threshold_energy(interaction: Interaction, hadronic_mass: float = kNucleonMass,
                     target_mass: float = kNucleonMass) -> float:
    """Lowest probe energy producing lepton + hadronic system of mass `hadronic_mass`."""
    ml = final_lepton_mass(interaction)
    m_final = ml + hadronic_mass
    return max((m_final * m_final - target_mass * target_mass) / (2.0 * target_mass), 0.0)


def dipole(Q2: float, ma: float) -> float:
    return 1.0 / (1.0 + Q2 / (ma * ma)) ** 2


def trapezoid(y, x) -> float:
    y = np.asarray(y, dtype=float)
    x = np.asarray(x, dtype=float)
    return float(np.sum(0.5 * (y[1:] + y[:-1]) * np.diff(x)))


def require(value, what: str, alg) -> float:
    """Kinematic variable needed by a differential cross section."""
    if value is None or not math.isfinite(value):
        raise ValueError(f"{alg.id}: kinematic variable {what} is not set")
    return float(value)
