"""The closed set of gate kinds a circuit can contain."""

from __future__ import annotations

from enum import Enum

from quantum_sim.errors import UnknownGateError


class GateKind(Enum):
    """
    Supported gate operations.

    Each member carries its wire name (as used in serialized circuits),
    the number of qubits it acts on and the number of angle parameters
    it requires.
    """

    H = ("H", 1, 0)
    X = ("X", 1, 0)
    Y = ("Y", 1, 0)
    Z = ("Z", 1, 0)
    S = ("S", 1, 0)
    SDG = ("Sdg", 1, 0)
    T = ("T", 1, 0)
    TDG = ("Tdg", 1, 0)
    RX = ("Rx", 1, 1)
    RY = ("Ry", 1, 1)
    RZ = ("Rz", 1, 1)
    P = ("P", 1, 1)
    CX = ("CX", 2, 0)
    CZ = ("CZ", 2, 0)
    SWAP = ("SWAP", 2, 0)
    CCX = ("CCX", 3, 0)
    MEASURE = ("MEASURE", 1, 0)

    def __init__(self, wire_name: str, n_qubits: int, n_params: int) -> None:
        self.wire_name = wire_name
        self.n_qubits = n_qubits
        self.n_params = n_params

    @property
    def is_parametric(self) -> bool:
        return self.n_params > 0

    @classmethod
    def from_name(cls, name: str) -> "GateKind":
        """
        Resolve a gate name, case-insensitively.

        Accepts the wire names plus the aliases ``CNOT``, ``TOFFOLI``,
        ``PHASE`` and ``M``.

        Raises
        ------
        UnknownGateError
            If the name is not part of the vocabulary.
        """
        if isinstance(name, GateKind):
            return name
        if not isinstance(name, str):
            raise UnknownGateError(f"Gate name must be a string, got {name!r}.")
        kind = _BY_NAME.get(name.strip().upper())
        if kind is None:
            raise UnknownGateError(
                f"Unsupported gate {name!r}. Supported gates: "
                f"{', '.join(k.wire_name for k in cls)}."
            )
        return kind

    def __str__(self) -> str:
        return self.wire_name


_BY_NAME = {kind.wire_name.upper(): kind for kind in GateKind}
_BY_NAME.update(
    {
        "CNOT": GateKind.CX,
        "TOFFOLI": GateKind.CCX,
        "PHASE": GateKind.P,
        "M": GateKind.MEASURE,
    }
)


__all__ = ["GateKind"]
