"""
Channel selection and event storage.

Tests:
    1. Total cross section is the sum over mapped channels
    2. Channels are drawn in proportion to their cross sections
    3. Generated events land in the sqlite event store
"""
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

import numpy as np
import pytest

from nugen import pdg
from nugen.algorithms import AlgorithmRegistry, Capability, EventGeneratorBase, XSecAlgorithm, default_registry
from nugen.event_generator import channel_xsecs, generate_events, select_interaction, total_xsec
from nugen.events import EventDB
from nugen.generator_list import GeneratorList
from nugen.interaction import InitialState, InteractionType, ScatteringType, Target, make_interaction
from nugen.interaction_list import InteractionList
from nugen.kinematics import probe_along_z
from nugen.xsec_map import XSecAlgorithmMap

CARBON_2GEV = InitialState(pdg.kPdgNuMu, Target(6, 12), probe_along_z(2.0))


class ConstantXSec(XSecAlgorithm):
    name = "ConstantXSec"

    def load_config(self):
        self.sigma = float(self.get_param("sigma"))

    def valid_process(self, interaction):
        return True

    def integral(self, interaction):
        return self.sigma

    def xsec(self, interaction, kps):
        return self.sigma


class SingleChannelGenerator(EventGeneratorBase):
    name = "SingleChannelGenerator"

    def load_config(self):
        self._xsec = self.sub_alg("xsec-alg-name", "xsec-param-set", Capability.XSEC)
        self._current = InteractionType(self.get_param("current"))

    def cross_section_alg(self):
        return self._xsec

    def enumerable_interactions(self, init_state):
        intlist = InteractionList()
        intlist.add(make_interaction(init_state, ScatteringType.QE, self._current, hit_nucleon=pdg.kPdgProton))
        return intlist


@pytest.fixture
def weighted_generators():
    """CC channel with sigma = 3, NC channel with sigma = 1."""
    with AlgorithmRegistry() as reg:
        reg.register(ConstantXSec)
        reg.register(SingleChannelGenerator)
        reg.add_config("ConstantXSec", "Big", {"sigma": 3.0})
        reg.add_config("ConstantXSec", "Small", {"sigma": 1.0})
        reg.add_config("SingleChannelGenerator", "CC",
                       {"xsec-alg-name": "ConstantXSec", "xsec-param-set": "Big", "current": "Weak[CC]"})
        reg.add_config("SingleChannelGenerator", "NC",
                       {"xsec-alg-name": "ConstantXSec", "xsec-param-set": "Small", "current": "Weak[NC]"})
        yield GeneratorList.from_registry(reg, ["CC", "NC"], name="SingleChannelGenerator")


@pytest.fixture
def qel_generators():
    with default_registry() as reg:
        yield GeneratorList.from_registry(reg, ["QEL-CC", "QEL-NC"])


def _map(generators, init_state=CARBON_2GEV):
    xsec_map = XSecAlgorithmMap()
    xsec_map.use_generator_list(generators)
    xsec_map.build_map(init_state)
    return xsec_map


def test_total_xsec_is_channel_sum(qel_generators):
    xsec_map = _map(qel_generators)
    expected = sum(xsec_map.find_xsec_algorithm(i).integral(i) for i in xsec_map.get_interaction_list())
    assert total_xsec(xsec_map) == pytest.approx(expected)
    assert total_xsec(xsec_map) > 0.0
    assert len(channel_xsecs(xsec_map)) == 3


def test_selection_follows_cross_sections(weighted_generators):
    xsec_map = _map(weighted_generators)
    xsecs = channel_xsecs(xsec_map)
    np.testing.assert_allclose(xsecs, [3.0, 1.0])

    rng = np.random.default_rng(12345)
    n = 4000
    n_cc = sum(select_interaction(xsec_map, rng, xsecs).proc_info.is_weak_cc for _ in range(n))
    assert n_cc / n == pytest.approx(0.75, abs=0.03), f"CC fraction {n_cc / n:.3f}"
    print("✓ Channel frequencies follow cross sections")


def test_no_positive_xsec_selects_nothing(qel_generators):
    at_rest = InitialState(pdg.kPdgNuMu, Target(6, 12))
    xsec_map = _map(qel_generators, at_rest)
    assert len(xsec_map) == 3
    assert select_interaction(xsec_map, np.random.default_rng(0)) is None


def test_generate_without_channels():
    summary = generate_events(GeneratorList(), CARBON_2GEV, n=5, seed=1)
    assert summary["generated"] == 0
    assert summary["total"] == 5
    assert summary["channels"] == {}


def test_generate_is_reproducible(weighted_generators):
    first = generate_events(weighted_generators, CARBON_2GEV, n=200, seed=7)
    second = generate_events(weighted_generators, CARBON_2GEV, n=200, seed=7)
    assert first == second
    assert first["generated"] == 200
    assert sum(first["channels"].values()) == 200
    assert first["total_xsec"] == pytest.approx(4.0)


def test_generate_stores_events(qel_generators, tmp_path):
    db = EventDB(tmp_path / "events.db")
    summary = generate_events(qel_generators, CARBON_2GEV, n=25, seed=3, event_db=db)

    stats = db.stats()
    assert stats["total_events"] == 25
    assert set(stats["by_process"]) <= {"Weak[CC],QES", "Weak[NC],QES"}
    assert stats["average_probe_energy"] == pytest.approx(2.0)
    assert sum(summary["channels"].values()) == 25

    event = db.fetch_event(1)
    assert event["algorithm"] == "QELPXSec/Default"
    assert event["probe"] == pdg.kPdgNuMu
    assert event["target"] == 1000060120
    assert event["channel"] in summary["channels"]
    assert event["xsec"] > 0.0


def test_event_db_queries(tmp_path):
    db = EventDB(tmp_path / "events.db")
    cc = make_interaction(CARBON_2GEV, ScatteringType.QE, InteractionType.WEAK_CC, hit_nucleon=pdg.kPdgNeutron)
    nc = make_interaction(CARBON_2GEV, ScatteringType.QE, InteractionType.WEAK_NC, hit_nucleon=pdg.kPdgProton)
    first = db.store_event(cc, "QELPXSec/Default", xsec=1e-11)
    db.store_event(nc, "QELPXSec/Default", xsec=5e-12, weight=0.5)

    assert first == 1
    assert [e["process"] for e in db.list_events()] == ["Weak[NC],QES", "Weak[CC],QES"]
    assert len(db.list_events(process="Weak[CC],QES")) == 1
    assert db.fetch_event(2)["weight"] == 0.5
    assert db.fetch_event(99) is None

    db.clear_events()
    assert db.stats()["total_events"] == 0
