"""
PDG particle codes and predicates used by the channel descriptors.

Only the codes needed to describe a neutrino-nucleus channel live here;
particle properties (masses, widths, ...) are not looked up from any table.
"""

# Leptons
kPdgElectron = 11
kPdgPositron = -11
kPdgNuE = 12
kPdgAntiNuE = -12
kPdgMuon = 13
kPdgAntiMuon = -13
kPdgNuMu = 14
kPdgAntiNuMu = -14
kPdgTau = 15
kPdgAntiTau = -15
kPdgNuTau = 16
kPdgAntiNuTau = -16

# Quarks
kPdgDQuark = 1
kPdgDQuarkBar = -1
kPdgUQuark = 2
kPdgUQuarkBar = -2
kPdgSQuark = 3
kPdgSQuarkBar = -3

# Remnant diquarks (spin 1)
kPdgDDDiquarkS1 = 1103
kPdgUDDiquarkS1 = 2103
kPdgUUDiquarkS1 = 2203

# Nucleons / bosons
kPdgProton = 2212
kPdgNeutron = 2112
kPdgWP = 24
kPdgWM = -24

_NEUTRINOS = (kPdgNuE, kPdgNuMu, kPdgNuTau)
_ANTINEUTRINOS = (kPdgAntiNuE, kPdgAntiNuMu, kPdgAntiNuTau)
_CHARGED_LEPTONS = (kPdgElectron, kPdgPositron, kPdgMuon, kPdgAntiMuon, kPdgTau, kPdgAntiTau)

_NAMES = {
    kPdgNuE: "nu_e",
    kPdgAntiNuE: "nu_e_bar",
    kPdgNuMu: "nu_mu",
    kPdgAntiNuMu: "nu_mu_bar",
    kPdgNuTau: "nu_tau",
    kPdgAntiNuTau: "nu_tau_bar",
    kPdgElectron: "e-",
    kPdgPositron: "e+",
    kPdgMuon: "mu-",
    kPdgAntiMuon: "mu+",
    kPdgTau: "tau-",
    kPdgAntiTau: "tau+",
    kPdgUQuark: "u",
    kPdgUQuarkBar: "u_bar",
    kPdgDQuark: "d",
    kPdgDQuarkBar: "d_bar",
    kPdgSQuark: "s",
    kPdgSQuarkBar: "s_bar",
    kPdgProton: "proton",
    kPdgNeutron: "neutron",
    kPdgUDDiquarkS1: "ud_1",
    kPdgUUDiquarkS1: "uu_1",
    kPdgDDDiquarkS1: "dd_1",
}


def is_neutrino(pdg: int) -> bool:
    return pdg in _NEUTRINOS


def is_antineutrino(pdg: int) -> bool:
    return pdg in _ANTINEUTRINOS


def is_anti_nu_e(pdg: int) -> bool:
    return pdg == kPdgAntiNuE


def is_charged_lepton(pdg: int) -> bool:
    return pdg in _CHARGED_LEPTONS


def is_proton(pdg) -> bool:
    return pdg == kPdgProton


def is_neutron(pdg) -> bool:
    return pdg == kPdgNeutron


def is_nucleon(pdg) -> bool:
    return pdg in (kPdgProton, kPdgNeutron)


def is_u_quark(pdg) -> bool:
    return pdg == kPdgUQuark


def is_d_quark(pdg) -> bool:
    return pdg == kPdgDQuark


def is_u_antiquark(pdg) -> bool:
    return pdg == kPdgUQuarkBar


def is_d_antiquark(pdg) -> bool:
    return pdg == kPdgDQuarkBar


def is_quark(pdg) -> bool:
    return pdg in (kPdgDQuark, kPdgUQuark, kPdgSQuark)


def is_antiquark(pdg) -> bool:
    return pdg in (kPdgDQuarkBar, kPdgUQuarkBar, kPdgSQuarkBar)


def ion_pdg_code(Z: int, A: int) -> int:
    """Nuclear code 10LZZZAAAI (L = I = 0)."""
    if Z < 0 or A < 1 or Z > A:
        raise ValueError(f"Invalid nucleus Z={Z}, A={A}")
    return 1000000000 + Z * 10000 + A * 10


def ion_z(code: int) -> int:
    return (code // 10000) % 1000


def ion_a(code: int) -> int:
    return (code // 10) % 1000


def name(pdg) -> str:
    """Short printable name; falls back to the numeric code."""
    if pdg is None:
        return "-"
    return _NAMES.get(pdg, str(pdg))
