"""Text visualization of circuits."""

from .drawer import draw_circuit, format_angle, print_circuit

__all__ = ["draw_circuit", "print_circuit", "format_angle"]
