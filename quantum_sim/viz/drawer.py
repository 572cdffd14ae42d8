"""ASCII/text circuit drawer.

Each operation gets its own column; wires not touched by the operation are
extended with plain wire, and wires crossed by a multi-qubit gate show a
vertical connector.
"""

from __future__ import annotations

import math
import sys
from typing import IO, Dict, List, Optional

from quantum_sim.circuit import GateOp, QuantumCircuit
from quantum_sim.gates.kinds import GateKind

_UNICODE = {
    "wire": "─",
    "cross": "│",
    "control": "●",
    "target": "⊕",
    "swap": "X",
    "pi": "π",
}
_ASCII = {
    "wire": "-",
    "cross": "|",
    "control": "*",
    "target": "+",
    "swap": "x",
    "pi": "pi",
}


def format_angle(theta: float, pi_symbol: str = "π", atol: float = 1e-8) -> str:
    """
    Format an angle in radians, using multiples of π/4 where exact.

    Falls back to three decimals otherwise.
    """
    k = round(theta / (math.pi / 4.0))
    if not math.isclose(theta, k * (math.pi / 4.0), abs_tol=atol):
        return f"{theta:.3f}"
    if k == 0:
        return "0"

    sign = "-" if k < 0 else ""
    k = abs(k)
    # Reduce k/4 to lowest terms.
    divisor = math.gcd(k, 4)
    num, den = k // divisor, 4 // divisor
    head = pi_symbol if num == 1 else f"{num}{pi_symbol}"
    return f"{sign}{head}" if den == 1 else f"{sign}{head}/{den}"


def _gate_label(op: GateOp, symbols: Dict[str, str]) -> str:
    if op.kind is GateKind.MEASURE:
        return "[M]"
    if op.params:
        args = ",".join(format_angle(p, symbols["pi"]) for p in op.params)
        return f"[{op.name}({args})]"
    return f"[{op.name}]"


def _op_cells(op: GateOp, symbols: Dict[str, str]) -> Dict[int, str]:
    """Symbols drawn on the qubits an operation touches."""
    kind = op.kind
    if kind is GateKind.CX:
        control, target = op.qubits
        return {control: symbols["control"], target: symbols["target"]}
    if kind is GateKind.CZ:
        return {q: symbols["control"] for q in op.qubits}
    if kind is GateKind.SWAP:
        return {q: symbols["swap"] for q in op.qubits}
    if kind is GateKind.CCX:
        c1, c2, target = op.qubits
        return {
            c1: symbols["control"],
            c2: symbols["control"],
            target: symbols["target"],
        }
    return {op.qubits[0]: _gate_label(op, symbols)}


def _pad(symbol: str, width: int, fill: str) -> str:
    extra = width - len(symbol)
    left = extra // 2
    return fill * left + symbol + fill * (extra - left)


def draw_circuit(circuit: QuantumCircuit, use_ascii: bool = False) -> str:
    """
    Render a circuit as a multi-line text diagram.

    Parameters
    ----------
    circuit:
        Circuit to visualize.
    use_ascii:
        If True, use only ASCII characters.

    Returns
    -------
    str
        One line per qubit, ``q0`` first.
    """
    symbols = _ASCII if use_ascii else _UNICODE
    wire = symbols["wire"]
    n = circuit.n_qubits

    prefixes = [f"q{q}: " for q in range(n)]
    prefix_width = max(len(p) for p in prefixes)
    rows: List[str] = [p.ljust(prefix_width) for p in prefixes]

    for op in circuit.operations:
        cells = _op_cells(op, symbols)
        width = max(len(s) for s in cells.values())
        low, high = min(op.qubits), max(op.qubits)
        for q in range(n):
            symbol = cells.get(q)
            if symbol is None:
                symbol = symbols["cross"] if low < q < high else wire
            rows[q] += wire + _pad(symbol, width, wire) + wire

    return "\n".join(row.rstrip() for row in rows)


def print_circuit(
    circuit: QuantumCircuit,
    file: Optional[IO[str]] = None,
    use_ascii: bool = False,
) -> None:
    """Print a circuit diagram to stdout or a file."""
    if file is None:
        file = sys.stdout
    print(draw_circuit(circuit, use_ascii=use_ascii), file=file)


__all__ = ["draw_circuit", "print_circuit", "format_angle"]
