"""Sampling and histogram utilities."""

from .hist import kl_divergence, marginalize_counts, total_variation_distance
from .shots import SampleResult, counts_to_probs, merge_counts, run_shots

__all__ = [
    "SampleResult",
    "run_shots",
    "merge_counts",
    "counts_to_probs",
    "marginalize_counts",
    "total_variation_distance",
    "kl_divergence",
]
