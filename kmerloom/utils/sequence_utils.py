"""
KmerLoom v0.1.0

Sequence utility functions for KmerLoom.

Provides k-mer extraction, read tiling and random genome generation.
"""

from typing import List, Optional

import numpy as np


DNA_ALPHABET = "ACGT"


def extract_kmers(sequence: str, k: int) -> List[str]:
    """
    Extract all k-mers from a sequence.

    Args:
        sequence: DNA sequence string
        k: K-mer size

    Returns:
        List of k-mer strings

    Example:
        >>> extract_kmers("ATCGATCG", 3)
        ['ATC', 'TCG', 'CGA', 'GAT', 'ATC', 'TCG']
    """
    if k <= 0 or k > len(sequence):
        return []

    return [sequence[i:i + k] for i in range(len(sequence) - k + 1)]


def calculate_gc_content(sequence: str) -> float:
    """
    Calculate GC content of a DNA sequence.

    Args:
        sequence: DNA sequence string

    Returns:
        GC content as fraction (0.0 to 1.0)
    """
    if not sequence:
        return 0.0

    sequence = sequence.upper()
    gc_count = sequence.count('G') + sequence.count('C')

    return gc_count / len(sequence)


def tile_reads(sequence: str, read_length: int, k: int) -> List[str]:
    """
    Cut a sequence into reads where consecutive reads overlap by exactly k.

    Reads start every read_length - k positions, so each k+1-mer of the
    sequence is covered once and the reads reassemble to the sequence.

    Args:
        sequence: Sequence to tile
        read_length: Length of every read
        k: Overlap between consecutive reads

    Returns:
        List of reads

    Raises:
        ValueError: If read_length <= k, the sequence is shorter than one
            read, or the reads cannot end exactly at the sequence end

    Example:
        >>> tile_reads("ACTGACGT", 4, 2)
        ['ACTG', 'TGAC', 'ACGT']
    """
    step = read_length - k
    if step <= 0:
        raise ValueError(f"read_length ({read_length}) must be greater than k ({k})")
    if len(sequence) < read_length:
        raise ValueError(
            f"Sequence of length {len(sequence)} is shorter than read length {read_length}"
        )
    if (len(sequence) - read_length) % step:
        raise ValueError(
            f"Sequence length {len(sequence)} cannot be tiled by {read_length} bp reads "
            f"overlapping by {k}; length - read_length must be a multiple of {step}"
        )

    return [
        sequence[start:start + read_length]
        for start in range(0, len(sequence) - read_length + 1, step)
    ]


def sliding_reads(sequence: str, read_length: int) -> List[str]:
    """Reads of length read_length at every offset of the sequence."""
    return extract_kmers(sequence, read_length)


def random_genome(length: int, seed: Optional[int] = None, alphabet: str = DNA_ALPHABET) -> str:
    """
    Generate a uniformly random sequence.

    Args:
        length: Sequence length
        seed: Random seed for reproducibility
        alphabet: Symbols to draw from

    Returns:
        Random sequence string
    """
    rng = np.random.default_rng(seed)
    symbols = np.array(list(alphabet))
    return ''.join(rng.choice(symbols, size=length))


__all__ = [
    'extract_kmers',
    'calculate_gc_content',
    'tile_reads',
    'sliding_reads',
    'random_genome',
    'DNA_ALPHABET'
]
