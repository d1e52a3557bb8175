"""
Algorithm registry: resolution, sharing, and configuration failures.
"""
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from nugen.algorithms import (
    AlgorithmConfigError,
    AlgorithmRegistry,
    BreitWigner,
    Capability,
    default_registry,
)
from nugen.algorithms.breit_wigner import BreitWignerLRes
from nugen.algorithms.res import RESPXSec
from nugen.algorithms.resonance_params import BaryonResDataPDG
from nugen.interaction import Resonance


@pytest.fixture
def registry():
    with default_registry() as reg:
        yield reg


class LoopingShape(BreitWigner):
    """Names another instance of itself as sub-algorithm."""
    name = "LoopingShape"

    def load_config(self):
        self.sub_alg("next-alg-name", "next-param-set", Capability.BREIT_WIGNER)

    def eval(self, res, W):
        return 0.0


# ----------------------------- Resolution ----------------------------------
def test_resolve_returns_shared_instance(registry):
    first = registry.resolve("QELPXSec")
    second = registry.resolve("QELPXSec", "Default", capability=Capability.XSEC)
    assert first is second, "Same (name, config set) must give the same instance"
    assert registry.is_configured("QELPXSec")
    print("✓ Instances are shared")


def test_nested_sub_algorithms(registry):
    res = registry.resolve("RESPXSec", capability=Capability.XSEC)
    assert isinstance(res, RESPXSec)
    assert isinstance(res.breit_wigner, BreitWignerLRes)
    assert isinstance(res.breit_wigner.resonance_data, BaryonResDataPDG)
    assert res.breit_wigner is registry.resolve("BreitWignerLRes")
    assert registry.is_configured("BaryonResDataPDG")
    print("✓ Nested sub-algorithms resolved at configuration time")


def test_config_is_read_only(registry):
    alg = registry.resolve("MECPXSec")
    assert alg.config["Mass"] == 2.1
    with pytest.raises(TypeError):
        alg.config["Mass"] = 3.0


def test_alg_id(registry):
    gen = registry.resolve("EventGenerator", "QEL-CC")
    assert str(gen.id) == "EventGenerator/QEL-CC"
    assert str(gen.cross_section_alg().id) == "QELPXSec/Default"


# ------------------------------- Failures ----------------------------------
def test_unknown_algorithm(registry):
    with pytest.raises(AlgorithmConfigError, match="Unknown algorithm"):
        registry.resolve("NoSuchAlgorithm")


def test_unknown_config_set(registry):
    with pytest.raises(AlgorithmConfigError, match="Unknown config set"):
        registry.resolve("QELPXSec", "NoSuchSet")


def test_capability_mismatch(registry):
    with pytest.raises(AlgorithmConfigError):
        registry.resolve("BaryonResDataPDG", capability=Capability.XSEC)


def test_capability_mismatch_on_cached_instance(registry):
    registry.resolve("BaryonResDataPDG")
    with pytest.raises(AlgorithmConfigError):
        registry.resolve("BaryonResDataPDG", capability=Capability.BREIT_WIGNER)


def test_missing_sub_algorithm_name(registry):
    registry.add_config("RESPXSec", "NoShape", {})
    with pytest.raises(AlgorithmConfigError, match="breit-wigner-alg-name"):
        registry.resolve("RESPXSec", "NoShape")


def test_sub_algorithm_wrong_capability(registry):
    registry.add_config("RESPXSec", "WrongShape", {"breit-wigner-alg-name": "BaryonResDataPDG"})
    with pytest.raises(AlgorithmConfigError):
        registry.resolve("RESPXSec", "WrongShape")
    assert not registry.is_configured("RESPXSec", "WrongShape")


def test_missing_required_parameter(registry):
    registry.add_config("MECPXSec", "NoMass", {"MaMEC": 1.0, "Width": 0.3, "Norm": 1.0})
    with pytest.raises(AlgorithmConfigError, match="Mass"):
        registry.resolve("MECPXSec", "NoMass")


def test_generator_with_broken_xsec_fails_at_setup(registry):
    registry.add_config("MECPXSec", "Empty", {})
    registry.add_config("EventGenerator", "MEC-broken", {
        "xsec-alg-name": "MECPXSec",
        "xsec-param-set": "Empty",
        "intlist-alg-name": "NucleonChannelListGenerator",
        "intlist-param-set": "MEC-CC",
    })
    with pytest.raises(AlgorithmConfigError):
        registry.resolve("EventGenerator", "MEC-broken")


def test_list_generator_needs_a_current(registry):
    registry.add_config("DISChannelListGenerator", "NoCurrent", {})
    with pytest.raises(AlgorithmConfigError):
        registry.resolve("DISChannelListGenerator", "NoCurrent")


def test_hadronization_needs_backend(registry):
    with pytest.raises(AlgorithmConfigError):
        registry.resolve("PythiaHadronization")


def test_cycle_detected():
    reg = AlgorithmRegistry()
    reg.register(LoopingShape)
    reg.add_config("LoopingShape", "A", {"next-alg-name": "LoopingShape", "next-param-set": "B"})
    reg.add_config("LoopingShape", "B", {"next-alg-name": "LoopingShape", "next-param-set": "A"})
    with pytest.raises(AlgorithmConfigError, match="cycle"):
        reg.resolve("LoopingShape", "A")
    # the registry is still usable afterwards
    with pytest.raises(AlgorithmConfigError, match="cycle"):
        reg.resolve("LoopingShape", "B")


# ----------------------------- Registration --------------------------------
def test_duplicate_name_rejected():
    reg = AlgorithmRegistry()
    reg.register(BaryonResDataPDG)
    reg.register(BaryonResDataPDG)
    with pytest.raises(AlgorithmConfigError):
        reg.register(LoopingShape, name="BaryonResDataPDG")


def test_config_for_unregistered_algorithm():
    with pytest.raises(AlgorithmConfigError):
        AlgorithmRegistry().add_config("Nope", "Default", {})


def test_cannot_reconfigure_live_instance(registry):
    registry.resolve("QELPXSec")
    with pytest.raises(AlgorithmConfigError):
        registry.add_config("QELPXSec", "Default", {"QEL-Ma": 1.2})


def test_list_registered(registry):
    registered = registry.list_registered()
    assert registered["RESPXSec"] == Capability.XSEC.value
    assert registered["EventGenerator"] == Capability.EVENT_GENERATOR.value
    assert "GLASHOW" in registry.list_configs("EventGenerator")
    assert registry.list_configs("QELPXSec") == ["Default"]


# ------------------------------ Lifecycle ----------------------------------
def test_clear_releases_instances(registry):
    first = registry.resolve("QELPXSec")
    registry.clear()
    assert not registry.is_configured("QELPXSec")
    assert registry.resolve("QELPXSec") is not first


def test_context_manager_clears():
    with default_registry() as reg:
        reg.resolve("BreitWignerLRes")
        assert reg.is_configured("BaryonResDataPDG")
    assert not reg.is_configured("BreitWignerLRes")
    assert not reg.is_configured("BaryonResDataPDG")


def test_restricted_resonance_table(registry):
    registry.add_config("BaryonResDataPDG", "Delta", {"resonances": ["P33_1232"]})
    registry.add_config("BreitWignerLRes", "Delta", {
        "baryon-res-alg-name": "BaryonResDataPDG",
        "baryon-res-param-set": "Delta",
    })
    bw = registry.resolve("BreitWignerLRes", "Delta")
    assert bw.resonance_data.resonances() == [Resonance.P33_1232]
    assert bw.eval(Resonance.P33_1232, 1.232) > 0.0
    assert bw.eval(Resonance.S11_1535, 1.535) == 0.0


def test_unknown_resonance_in_table(registry):
    registry.add_config("BaryonResDataPDG", "Bad", {"resonances": ["X99_9999"]})
    with pytest.raises(AlgorithmConfigError):
        registry.resolve("BaryonResDataPDG", "Bad")


if __name__ == "__main__":
    with default_registry() as reg:
        test_resolve_returns_shared_instance(reg)
        test_nested_sub_algorithms(reg)
    test_cycle_detected()
    print("\n✅ Registry tests passed")
