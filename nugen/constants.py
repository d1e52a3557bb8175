"""Physical constants (GeV, natural units)."""
import math

kPi = math.pi

kGF = 1.16639e-5              # Fermi constant, GeV^-2
kGF2 = kGF * kGF
kCos8c = 0.97418               # cos(Cabibbo angle)
kCos8c2 = kCos8c * kCos8c

kElectronMass = 0.000510998918
kMuonMass = 0.105658357
kTauMass = 1.77699
kProtonMass = 0.93827203
kNeutronMass = 0.93956536
kNucleonMass = 0.5 * (kProtonMass + kNeutronMass)
kPionMass = 0.13957018
kMw = 80.385
kWidthW = 2.085

kNucRo = 1.2                   # nuclear radius parameter, fm
kGeV2ToCm2 = 0.38937966e-27    # 1 GeV^-2 in cm^2
k1E38Cm2 = 1e-38
