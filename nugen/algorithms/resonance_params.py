"""
Baryon resonance parameter table (masses and widths in GeV).
"""
from ..interaction import Resonance
from .base import AlgorithmConfigError, ResonanceDataSet

# resonance -> (mass, width)
_PDG_TABLE = {
    Resonance.P33_1232: (1.232, 0.120),
    Resonance.S11_1535: (1.535, 0.150),
    Resonance.D13_1520: (1.520, 0.120),
    Resonance.S11_1650: (1.650, 0.150),
    Resonance.D13_1700: (1.700, 0.100),
    Resonance.D15_1675: (1.675, 0.150),
    Resonance.S31_1620: (1.620, 0.150),
    Resonance.D33_1700: (1.700, 0.300),
    Resonance.P11_1440: (1.440, 0.350),
    Resonance.P33_1600: (1.600, 0.350),
    Resonance.P13_1720: (1.720, 0.150),
    Resonance.F15_1680: (1.680, 0.130),
    Resonance.P31_1910: (1.910, 0.250),
    Resonance.P33_1920: (1.920, 0.200),
    Resonance.F35_1905: (1.905, 0.350),
    Resonance.F37_1950: (1.950, 0.300),
    Resonance.P11_1710: (1.710, 0.100),
    Resonance.F17_1970: (1.970, 0.325),
}


class BaryonResDataPDG(ResonanceDataSet):
    """
    PDG resonance parameters.

    Optional config parameter `resonances`: list of resonance names
    (e.g. ["P33_1232", "S11_1535"]) restricting the table.
    """

    name = "BaryonResDataPDG"
    description = "Baryon resonance masses/widths from the PDG tables"

    def load_config(self):
        names = self.get_param("resonances", None)
        if names is None:
            self._table = dict(_PDG_TABLE)
            return
        try:
            selected = [Resonance[n] for n in names]
        except KeyError as e:
            raise AlgorithmConfigError(f"{self.id}: unknown resonance {e}") from e
        self._table = {res: _PDG_TABLE[res] for res in selected}

    def contains(self, res: Resonance) -> bool:
        return res in self._table

    def resonances(self):
        return list(self._table)

    def _lookup(self, res: Resonance):
        try:
            return self._table[res]
        except KeyError:
            raise ValueError(f"{self.id}: no parameters for {res.label}") from None

    def mass(self, res: Resonance) -> float:
        return self._lookup(res)[0]

    def width(self, res: Resonance) -> float:
        return self._lookup(res)[1]
