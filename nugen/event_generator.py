"""
Channel selection on top of the cross-section algorithm map.

The map is built once per initial state; every event afterwards only does
dictionary lookups plus one weighted draw.
"""
import logging
from typing import Dict, Optional

import numpy as np

from .events import EventDB
from .generator_list import GeneratorList
from .interaction import InitialState, Interaction, channel_key
from .xsec_map import XSecAlgorithmMap

logger = logging.getLogger(__name__)


def channel_xsecs(xsec_map: XSecAlgorithmMap) -> np.ndarray:
    """Integrated cross section (GeV^-2) per channel, in interaction-list order."""
    values = []
    for interaction in xsec_map.get_interaction_list():
        alg = xsec_map.find_xsec_algorithm(interaction)
        values.append(alg.integral(interaction) if alg is not None else 0.0)
    return np.array(values, dtype=float)


def total_xsec(xsec_map: XSecAlgorithmMap) -> float:
    """Sum over all channels in the map; unmodelled channels count as zero."""
    return float(np.sum(channel_xsecs(xsec_map)))


def _select_index(xsecs: np.ndarray, rng: np.random.Generator) -> Optional[int]:
    weights = np.clip(np.asarray(xsecs, dtype=float), 0.0, None)
    total = float(weights.sum())
    if weights.size == 0 or total <= 0.0:
        return None
    return int(rng.choice(weights.size, p=weights / total))


def select_interaction(xsec_map: XSecAlgorithmMap,
                       rng: Optional[np.random.Generator] = None,
                       xsecs: Optional[np.ndarray] = None) -> Optional[Interaction]:
    """
    Pick a channel with probability proportional to its cross section.

    Returns None when no channel has a positive cross section.
    """
    rng = rng or np.random.default_rng()
    if xsecs is None:
        xsecs = channel_xsecs(xsec_map)
    idx = _select_index(xsecs, rng)
    if idx is None:
        return None
    return xsec_map.get_interaction_list()[idx]


def generate_events(generator_list: GeneratorList,
                    init_state: InitialState,
                    n: int = 10,
                    seed: Optional[int] = None,
                    event_db: Optional[EventDB] = None) -> Dict:
    """
    Select `n` interactions for `init_state`.

    Returns:
        dict with keys: generated, total, total_xsec, channels (channel key -> count)
    """
    rng = np.random.default_rng(seed)

    xsec_map = XSecAlgorithmMap()
    xsec_map.use_generator_list(generator_list)
    xsec_map.build_map(init_state)

    interactions = xsec_map.get_interaction_list()
    xsecs = channel_xsecs(xsec_map)
    total = float(xsecs.sum())

    counts: Dict[str, int] = {}
    generated = 0
    if total <= 0.0:
        logger.warning(f"No channel with non-zero cross section for {init_state.as_string()}")
    else:
        for _ in range(n):
            idx = _select_index(xsecs, rng)
            interaction = interactions[idx]
            key = channel_key(interaction)
            counts[key] = counts.get(key, 0) + 1
            generated += 1
            if event_db is not None:
                alg = xsec_map.find_xsec_algorithm(interaction)
                event_db.store_event(interaction, algorithm=str(alg.id), xsec=float(xsecs[idx]))

    logger.info(f"Generated {generated}/{n} events for {init_state.as_string()} "
                f"(sigma_tot = {total:.4e} GeV^-2, {len(counts)} channels hit)")

    return {
        "generated": generated,
        "total": n,
        "total_xsec": total,
        "channels": counts,
    }
