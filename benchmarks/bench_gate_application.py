"""Benchmark gate application operations."""

import time
from typing import Dict

from quantum_sim.backend import StateVector
from quantum_sim.gates import GATES, TWO_QUBIT_GATES


def benchmark_gate_application(n_qubits: int, n_gates: int = 1000) -> Dict[str, float]:
    """Benchmark bitmask single-qubit gate application.

    Args:
        n_qubits: Number of qubits.
        n_gates: Number of gates to apply.

    Returns:
        Dictionary with timing results.
    """
    state = StateVector(n_qubits)
    gates = [GATES["H"], GATES["X"], GATES["Y"], GATES["Z"]]

    # Warmup
    for _ in range(10):
        state.apply_single_qubit_gate(gates[0], 0)

    start = time.perf_counter()
    for i in range(n_gates):
        state.apply_single_qubit_gate(gates[i % len(gates)], i % n_qubits)
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_qubits": n_qubits,
        "n_gates": n_gates,
        "total_time_sec": total_time,
        "time_per_gate_sec": total_time / n_gates,
        "gates_per_sec": n_gates / total_time,
    }


def benchmark_cnot_bitmask_vs_dense(n_qubits: int, n_gates: int = 200) -> Dict[str, float]:
    """Compare the CNOT permutation routine with the dense tensor path.

    Args:
        n_qubits: Number of qubits.
        n_gates: Number of CNOTs applied on each path.

    Returns:
        Dictionary with per-gate timings for both paths.
    """
    pairs = [(i % n_qubits, (i + 1) % n_qubits) for i in range(n_gates)]

    state = StateVector(n_qubits)
    start = time.perf_counter()
    for control, target in pairs:
        state.apply_cnot(control, target)
    bitmask_time = time.perf_counter() - start

    state = StateVector(n_qubits)
    start = time.perf_counter()
    for control, target in pairs:
        state.apply_matrix(TWO_QUBIT_GATES["CNOT"], [control, target])
    dense_time = time.perf_counter() - start

    return {
        "n_qubits": n_qubits,
        "n_gates": n_gates,
        "bitmask_time_per_gate_sec": bitmask_time / n_gates,
        "dense_time_per_gate_sec": dense_time / n_gates,
    }


if __name__ == "__main__":
    print("Benchmarking gate application...")

    results = benchmark_gate_application(n_qubits=10, n_gates=1000)
    print("Bitmask single-qubit gates (10 qubits, 1000 gates):")
    print(f"  Time per gate: {results['time_per_gate_sec']*1e6:.2f} μs")
    print(f"  Gates per second: {results['gates_per_sec']:.0f}")

    results_cnot = benchmark_cnot_bitmask_vs_dense(n_qubits=10, n_gates=200)
    print("\nCNOT, bitmask vs dense (10 qubits, 200 gates):")
    print(f"  Bitmask: {results_cnot['bitmask_time_per_gate_sec']*1e6:.2f} μs")
    print(f"  Dense:   {results_cnot['dense_time_per_gate_sec']*1e6:.2f} μs")
