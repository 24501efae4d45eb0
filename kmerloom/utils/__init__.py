"""
Utilities module for KmerLoom.

This module provides sequence helpers used by the CLI and tests:
- K-mer extraction
- Read tiling for round-trip assembly
- Random genome generation
"""

from .sequence_utils import (
    extract_kmers,
    calculate_gc_content,
    tile_reads,
    sliding_reads,
    random_genome,
    DNA_ALPHABET,
)

__all__ = [
    "extract_kmers",
    "calculate_gc_content",
    "tile_reads",
    "sliding_reads",
    "random_genome",
    "DNA_ALPHABET",
]
