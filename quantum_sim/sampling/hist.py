"""Histogram helpers for sampled bitstring counts."""

from __future__ import annotations

import math
from typing import Dict, Mapping, Sequence


def marginalize_counts(
    counts: Mapping[str, int],
    qubits_to_keep: Sequence[int],
) -> Dict[str, int]:
    """
    Project full-register counts onto a subset of qubits.

    Bitstrings are MSB-first (qubit 0 is the rightmost character). The
    returned keys list the kept qubits in descending order, i.e. they use
    the same convention restricted to ``qubits_to_keep``.

    Parameters
    ----------
    counts:
        Mapping from full bitstring to count.
    qubits_to_keep:
        Qubit indices to retain.
    """
    keep = sorted({int(q) for q in qubits_to_keep}, reverse=True)
    if not keep:
        raise ValueError("qubits_to_keep must be non-empty.")

    marg: Dict[str, int] = {}
    for bitstring, n in counts.items():
        width = len(bitstring)
        for q in keep:
            if q < 0 or q >= width:
                raise ValueError(
                    f"Qubit index {q} is out of bounds for bitstring {bitstring!r}."
                )
        key = "".join(bitstring[width - 1 - q] for q in keep)
        marg[key] = marg.get(key, 0) + n
    return marg


def total_variation_distance(
    p: Mapping[str, float],
    q: Mapping[str, float],
) -> float:
    """
    Total variation distance ``0.5 * sum |p(x) - q(x)|``.

    Both inputs are renormalized first, so raw counts are accepted.
    """
    sum_p = sum(p.values())
    sum_q = sum(q.values())
    if sum_p <= 0 or sum_q <= 0:
        raise ValueError("Distributions p and q must have positive total probability.")

    keys = set(p) | set(q)
    return 0.5 * sum(abs(p.get(k, 0.0) / sum_p - q.get(k, 0.0) / sum_q) for k in keys)


def kl_divergence(
    p: Mapping[str, float],
    q: Mapping[str, float],
    epsilon: float = 1e-12,
) -> float:
    """
    Kullback-Leibler divergence KL(p || q) in nats.

    Keys missing from ``q`` count as zero probability; both sides are
    clamped at ``epsilon`` to keep ``log`` finite.
    """
    sum_p = sum(p.values())
    sum_q = sum(q.values())
    if sum_p <= 0 or sum_q <= 0:
        raise ValueError("Distributions p and q must have positive total probability.")

    kl = 0.0
    for key, p_val in p.items():
        p_prob = max(p_val / sum_p, epsilon)
        q_prob = max(q.get(key, 0.0) / sum_q, epsilon)
        kl += p_prob * math.log(p_prob / q_prob)
    return kl


__all__ = ["marginalize_counts", "total_variation_distance", "kl_divergence"]
