"""Benchmark measurement sampling operations."""

import time
from typing import Dict

import torch

from quantum_sim.circuit import QuantumCircuit
from quantum_sim.sampling import run_shots


def benchmark_sampling(n_qubits: int, n_shots: int = 1000, workers: int = 1) -> Dict[str, float]:
    """Benchmark shot sampling of a uniform superposition circuit.

    Args:
        n_qubits: Number of qubits.
        n_shots: Number of shots (samples).
        workers: Number of sampling threads.

    Returns:
        Dictionary with timing results.
    """
    circuit = QuantumCircuit(n_qubits)
    for q in range(n_qubits):
        circuit.h(q)

    generator = torch.Generator()
    generator.manual_seed(0)

    # Warmup
    run_shots(circuit, 10, generator=generator)

    start = time.perf_counter()
    run_shots(circuit, n_shots, generator=generator, workers=workers)
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_qubits": n_qubits,
        "n_shots": n_shots,
        "workers": workers,
        "total_time_sec": total_time,
        "time_per_shot_sec": total_time / n_shots,
        "shots_per_sec": n_shots / total_time,
    }


if __name__ == "__main__":
    print("Benchmarking sampling...")

    for workers in (1, 4):
        results = benchmark_sampling(n_qubits=8, n_shots=2000, workers=workers)
        print(f"Sampling (8 qubits, 2000 shots, {workers} worker(s)):")
        print(f"  Time per shot: {results['time_per_shot_sec']*1e6:.2f} μs")
        print(f"  Shots per second: {results['shots_per_sec']:.0f}")
