#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
KmerLoom v0.1.0

Rolling k-mer hasher.

Each k-length window is read as a base-p number; sliding the window by one
symbol updates the fingerprint in O(1) instead of rescanning k symbols.

Author: KmerLoom Development Team
License: MIT
"""

from typing import List, Optional


# Base of the positional number system; larger than the 4-symbol alphabet
HASH_BASE = 5

# Fingerprints are kept to machine-word width
HASH_MASK = (1 << 64) - 1

ALPHABET_SIZE = 4


def encode_symbol(symbol: str) -> int:
    """
    Map a symbol to its 2-bit code.

    A=0, C=1, T=2, G=3. Any character maps into [0, 4), so reads over other
    small alphabets (e.g. 'AB') are accepted as well.
    """
    return (ord(symbol) & 6) >> 1


def hash_kmer(sequence: str, start: int = 0, k: Optional[int] = None) -> int:
    """
    Compute the fingerprint of sequence[start:start + k] from scratch.

    Args:
        sequence: Read or k-mer string
        start: Offset of the window
        k: Window length (defaults to the rest of the sequence)

    Returns:
        Fingerprint in [0, 2**64)

    Example:
        >>> hash_kmer("ACT")
        7
    """
    if k is None:
        k = len(sequence) - start

    value = 0
    for i in range(start, start + k):
        value = (value * HASH_BASE + encode_symbol(sequence[i])) & HASH_MASK
    return value


class RollingKmerHasher:
    """
    Stateful hasher over consecutive windows of a read.

    hash(read, 0) starts a new read; hash(read, pos) for pos > 0 must follow
    hash(read, pos - 1) on the same read. A single instance is not reentrant.
    """

    def __init__(self, k: int):
        if k < 1:
            raise ValueError(f"k must be >= 1, got {k}")

        self.k = k
        max_power = pow(HASH_BASE, k, HASH_MASK + 1)

        # encode(old) * p^k for every symbol code
        self.drop_table: List[int] = [
            (code * max_power) & HASH_MASK for code in range(ALPHABET_SIZE)
        ]

        self.last_hash = 0
        self._read: Optional[str] = None
        self._pos = -1

    def hash(self, read: str, pos: int) -> int:
        """
        Fingerprint of read[pos:pos + k].

        Raises:
            ValueError: If called out of sequence for pos > 0
        """
        if pos == 0:
            self.last_hash = hash_kmer(read, 0, self.k)
        else:
            if read is not self._read or pos != self._pos + 1:
                raise ValueError(
                    f"Rolling hash at position {pos} requires position {pos - 1} "
                    f"of the same read to be hashed first"
                )
            self.last_hash = self.roll(
                self.last_hash, read[pos - 1], read[pos + self.k - 1]
            )

        self._read = read
        self._pos = pos
        return self.last_hash

    def roll(self, previous_hash: int, old_symbol: str, new_symbol: str) -> int:
        """Slide a fingerprint one symbol to the right."""
        return (
            previous_hash * HASH_BASE
            - self.drop_table[encode_symbol(old_symbol)]
            + encode_symbol(new_symbol)
        ) & HASH_MASK

    def window_hashes(self, read: str) -> List[int]:
        """Fingerprints of every k-length window of a read, left to right."""
        return [self.hash(read, pos) for pos in range(len(read) - self.k + 1)]

    def __repr__(self) -> str:
        return f"RollingKmerHasher(k={self.k}, base={HASH_BASE})"
