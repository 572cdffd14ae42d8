"""Dense reference application of k-qubit gate matrices.

This is the tensor-contraction path: the statevector is viewed as a rank-n
tensor with one axis of size 2 per qubit and the 2^k x 2^k gate is
contracted against the axes of the qubits it acts on. It is used for gates
with no specialised bitmask routine (iSWAP, √SWAP, Fredkin, ...) and as the
reference the bitmask routines are checked against.
"""

from __future__ import annotations

from typing import Sequence

import torch


def apply_dense_gate(
    state: torch.Tensor,
    gate: torch.Tensor,
    qubits: Sequence[int],
    n_qubits: int,
) -> torch.Tensor:
    """
    Apply a dense k-qubit gate to a statevector tensor.

    Convention: qubit 0 is the least significant bit of the basis index.
    ``qubits[0]`` is the most significant bit of the gate's row/column index.

    Args:
        state: Complex tensor of shape (2**n_qubits,).
        gate: Complex tensor of shape (2**k, 2**k) with k = len(qubits).
        qubits: Distinct qubit indices the gate acts on.
        n_qubits: Number of qubits in the state.

    Returns:
        A new statevector tensor with the gate applied.

    Raises:
        ValueError: If shapes disagree or qubits are invalid.
    """
    k = len(qubits)
    dim = 2**n_qubits
    if state.shape != (dim,):
        raise ValueError(
            f"state must have shape ({dim},), got {tuple(state.shape)}"
        )
    if gate.shape != (2**k, 2**k):
        raise ValueError(
            f"gate acting on {k} qubit(s) must have shape ({2**k}, {2**k}), "
            f"got {tuple(gate.shape)}"
        )
    if len(set(qubits)) != k:
        raise ValueError(f"qubits must be distinct, got {list(qubits)}")
    for q in qubits:
        if q < 0 or q >= n_qubits:
            raise ValueError(f"qubit index {q} out of range [0, {n_qubits})")

    # Row-major reshape puts qubit q on axis n_qubits - 1 - q.
    axes = [n_qubits - 1 - q for q in qubits]
    psi = state.reshape([2] * n_qubits)
    gate_view = gate.to(state.dtype).reshape([2] * (2 * k))

    out = torch.tensordot(gate_view, psi, dims=(list(range(k, 2 * k)), axes))
    out = torch.movedim(out, list(range(k)), axes)
    return out.reshape(dim).contiguous()


__all__ = ["apply_dense_gate"]
