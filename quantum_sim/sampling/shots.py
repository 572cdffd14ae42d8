"""Shot-based sampling of circuit measurement outcomes.

Every shot replays the whole circuit on its own statevector and measures all
qubits once, so shots share no mutable state. With ``workers > 1`` the shots
are split across a thread pool; each worker draws from its own generator and
fills a private ``Counter`` which are merged at the end.
"""

from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional

import torch

from quantum_sim.backend.statevector import resolve_generator
from quantum_sim.logging import get_logger

if TYPE_CHECKING:
    from quantum_sim.circuit import QuantumCircuit

logger = get_logger(__name__)

# Seeds for worker generators are drawn from [0, 2**62).
_SEED_BOUND = 2**62


@dataclass
class SampleResult:
    """
    Outcome histogram of a sampling run.

    Attributes
    ----------
    counts:
        Mapping from bitstring (qubit 0 rightmost) to number of occurrences.
    shots:
        Total number of shots taken.
    """

    counts: Dict[str, int] = field(default_factory=dict)
    shots: int = 0

    def probabilities(self) -> Dict[str, float]:
        """Empirical probability of each observed bitstring."""
        return counts_to_probs(self.counts)

    def most_common(self, n: Optional[int] = None) -> List[tuple]:
        return Counter(self.counts).most_common(n)


def merge_counts(*counts: Mapping[str, int]) -> Dict[str, int]:
    """Sum several count mappings. The order of arguments does not matter."""
    total: Counter = Counter()
    for c in counts:
        total.update(c)
    return dict(total)


def counts_to_probs(counts: Mapping[str, int]) -> Dict[str, float]:
    """
    Convert integer counts for bitstrings into a probability distribution.

    Raises
    ------
    ValueError
        If the total count is not positive.
    """
    total = sum(counts.values())
    if total <= 0:
        raise ValueError("Total count must be positive.")
    return {k: v / float(total) for k, v in counts.items()}


def _split_shots(shots: int, workers: int) -> List[int]:
    base, extra = divmod(shots, workers)
    return [base + (1 if i < extra else 0) for i in range(workers)]


def _worker_generators(parent: torch.Generator, n: int) -> List[torch.Generator]:
    seeds = torch.randint(0, _SEED_BOUND, (n,), generator=parent, dtype=torch.int64)
    gens = []
    for seed in seeds.tolist():
        gen = torch.Generator()
        gen.manual_seed(int(seed))
        gens.append(gen)
    return gens


def _run_batch(
    circuit: "QuantumCircuit", shots: int, generator: torch.Generator
) -> Counter:
    counts: Counter = Counter()
    for _ in range(shots):
        state = circuit.simulate()
        counts[state.measure_all(generator).bitstring] += 1
    return counts


def run_shots(
    circuit: "QuantumCircuit",
    shots: int,
    generator: Optional[torch.Generator] = None,
    workers: int = 1,
) -> SampleResult:
    """
    Execute ``circuit`` ``shots`` times and histogram the full-register outcomes.

    Parameters
    ----------
    circuit:
        Circuit to sample. It is only read.
    shots:
        Number of shots; must be positive.
    generator:
        Optional torch.Generator to control randomness for reproducibility.
        With several workers it seeds one child generator per worker, so a
        given (seed, workers) pair always yields the same counts.
    workers:
        Number of threads to spread the shots over.

    Returns
    -------
    SampleResult
    """
    if shots <= 0:
        raise ValueError(f"shots must be a positive integer, got {shots}.")
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}.")

    gen = resolve_generator(generator)
    workers = min(workers, shots)
    logger.info(
        "Sampling %d shot(s) of a %d-qubit circuit on %d worker(s)",
        shots,
        circuit.n_qubits,
        workers,
    )

    if workers == 1:
        counts = _run_batch(circuit, shots, gen)
        return SampleResult(counts=dict(counts), shots=shots)

    batches = _split_shots(shots, workers)
    gens = _worker_generators(gen, workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        partials = list(pool.map(_run_batch, [circuit] * workers, batches, gens))

    return SampleResult(counts=merge_counts(*partials), shots=shots)


__all__ = [
    "SampleResult",
    "run_shots",
    "merge_counts",
    "counts_to_probs",
]
