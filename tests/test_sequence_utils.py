#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
KmerLoom v0.1.0

Tests for sequence manipulation utilities.

Author: KmerLoom Development Team
License: MIT
"""

import pytest
from kmerloom.utils.sequence_utils import (
    extract_kmers,
    calculate_gc_content,
    tile_reads,
    sliding_reads,
    random_genome,
)


class TestKmerExtraction:
    """Test k-mer extraction functions."""

    def test_basic_kmer_extraction(self):
        """Test extraction of k-mers from sequence."""
        kmers = extract_kmers("ATCGATCG", 3)

        expected = ["ATC", "TCG", "CGA", "GAT", "ATC", "TCG"]
        assert kmers == expected

    def test_kmer_count_correct(self):
        """Test that number of k-mers is correct."""
        sequence = "ATCGATCG"  # Length 8
        kmers = extract_kmers(sequence, 3)

        # Should have (length - k + 1) k-mers
        assert len(kmers) == len(sequence) - 3 + 1

    def test_kmer_larger_than_sequence(self):
        """Test handling when k > sequence length."""
        assert extract_kmers("ATG", 5) == []

    def test_zero_k(self):
        assert extract_kmers("ATG", 0) == []


class TestGCContent:
    """Test GC content calculation."""

    def test_gc_content_50_percent(self):
        assert calculate_gc_content("ATGC") == 0.5

    def test_gc_content_empty(self):
        assert calculate_gc_content("") == 0.0

    def test_gc_content_case_insensitive(self):
        assert calculate_gc_content("ATGC") == calculate_gc_content("atgc")


class TestTiling:
    """Test read tiling."""

    def test_tile_example(self):
        assert tile_reads("ACTGACGT", 4, 2) == ["ACTG", "TGAC", "ACGT"]

    def test_consecutive_reads_overlap_by_k(self):
        reads = tile_reads(random_genome(100, seed=1), 25, 10)
        for left, right in zip(reads, reads[1:]):
            assert left[-10:] == right[:10]

    def test_tiles_cover_sequence(self):
        sequence = random_genome(100, seed=1)
        reads = tile_reads(sequence, 25, 10)
        assert reads[0] + "".join(read[10:] for read in reads[1:]) == sequence

    def test_untileable_length(self):
        with pytest.raises(ValueError, match="multiple of"):
            tile_reads("ACGTACGTA", 4, 2)

    def test_read_not_longer_than_k(self):
        with pytest.raises(ValueError):
            tile_reads("ACGTACGT", 3, 3)

    def test_sequence_shorter_than_read(self):
        with pytest.raises(ValueError):
            tile_reads("ACG", 4, 2)

    def test_sliding_reads(self):
        assert sliding_reads("ACGTA", 4) == ["ACGT", "CGTA"]


class TestRandomGenome:
    """Test random genome generation."""

    def test_length_and_alphabet(self):
        sequence = random_genome(500, seed=3)
        assert len(sequence) == 500
        assert set(sequence) <= set("ACGT")

    def test_seed_reproducible(self):
        assert random_genome(100, seed=42) == random_genome(100, seed=42)

    def test_custom_alphabet(self):
        assert set(random_genome(50, seed=0, alphabet="AB")) <= {"A", "B"}

# KmerLoom v0.1.0
# Any usage is subject to this software's license.
