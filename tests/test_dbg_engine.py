"""
Unit tests for the de Bruijn graph engine.

Author: KmerLoom Development Team
License: MIT
"""

import random

import pytest
from kmerloom.assembly_core.dbg_engine_module import (
    DeBruijnGraphBuilder,
    GraphStrategy,
    KmerView,
    build_kmer_graph,
)
from kmerloom.assembly_core.kmer_hasher import hash_kmer


def _view(read, start, k):
    return KmerView(read, start, k, hash_kmer(read, start, k))


class TestKmerView:
    """Test k-mer keys as views into reads."""

    def test_value_equality_across_reads(self):
        a = _view("ACTG", 1, 3)
        b = _view("CTGA", 0, 3)
        assert a == b
        assert hash(a) == hash(b)

    def test_different_values_not_equal(self):
        assert _view("ACTG", 0, 3) != _view("ACTG", 1, 3)

    def test_hash_collision_falls_back_to_value(self):
        a = KmerView("ACT", 0, 3, 42)
        b = KmerView("TCA", 0, 3, 42)
        assert hash(a) == hash(b)
        assert a != b
        assert len({a: 1, b: 2}) == 2

    def test_value_is_substring(self):
        assert _view("GGACTT", 2, 3).value == "ACT"


class TestStrategy:
    """Test strategy selection."""

    def test_coerce_string(self):
        assert GraphStrategy.coerce("kmer") is GraphStrategy.KMER
        assert GraphStrategy.coerce("READ") is GraphStrategy.READ

    def test_coerce_enum(self):
        assert GraphStrategy.coerce(GraphStrategy.READ) is GraphStrategy.READ

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown graph strategy"):
            GraphStrategy.coerce("unitig")


class TestKmerGraph:
    """Test fine-grained (per-k-mer) construction."""

    def test_example_graph(self, overlapping_reads):
        graph = build_kmer_graph(overlapping_reads, 3)

        assert graph.kmers() == ["ACT", "CTG", "TGA", "GAC"]
        assert graph.num_edges == 3
        assert graph.total_payload_length() == 3

    def test_edges_per_read(self):
        reads = ["ACGTAC", "GTACGG"]
        graph = build_kmer_graph(reads, 3)
        # d - k edges per read
        assert graph.num_edges == 2 * (6 - 3)

    def test_vertices_deduplicated(self):
        graph = build_kmer_graph(["ABAB"], 2)
        assert graph.num_vertices == 2
        assert graph.num_edges == 2

    def test_edge_labels_are_trailing_symbols(self):
        graph = build_kmer_graph(["ACTGA"], 3)
        labels = [edge.payload for vertex in graph.vertices for edge in vertex.edges]
        assert labels == ["G", "A"]

    def test_in_degree_counted(self, overlapping_reads):
        graph = build_kmer_graph(overlapping_reads, 3)
        start = graph.find_vertex("ACT")
        end = graph.find_vertex("GAC")

        assert graph.in_degree(start) == 0
        assert graph.out_degree(start) == 1
        assert graph.in_degree(end) == 1
        assert graph.out_degree(end) == 0

    def test_degree_imbalance(self, overlapping_reads):
        graph = build_kmer_graph(overlapping_reads, 3)
        imbalance = dict(graph.degree_imbalance())

        assert imbalance == {graph.find_vertex("ACT"): 1, graph.find_vertex("GAC"): -1}

    def test_edge_order_preserved(self):
        graph = build_kmer_graph(["AAC", "AAG", "AAT"], 2)
        aa = graph.find_vertex("AA")
        targets = [graph.vertices[e.target].kmer for e in graph.vertices[aa].edges]
        assert targets == ["AC", "AG", "AT"]

    def test_find_vertex_missing(self, overlapping_reads):
        graph = build_kmer_graph(overlapping_reads, 3)
        assert graph.find_vertex("GGG") is None
        assert graph.find_vertex("ACTG") is None

    def test_read_equal_to_k(self):
        graph = build_kmer_graph(["ACG", "CGT"], 3)
        assert graph.num_vertices == 2
        assert graph.num_edges == 0

    def test_permuted_reads_same_graph(self, tiled_reads):
        """Building from any read order gives the same vertex set and edge count."""
        shuffled = list(tiled_reads)
        random.Random(3).shuffle(shuffled)

        original = build_kmer_graph(tiled_reads, 15)
        permuted = build_kmer_graph(shuffled, 15)

        assert set(original.kmers()) == set(permuted.kmers())
        assert original.num_edges == permuted.num_edges


class TestReadGraph:
    """Test coarse-grained (per-read) construction."""

    def test_one_edge_per_read(self, overlapping_reads):
        graph = build_kmer_graph(overlapping_reads, 3, strategy="read")

        assert graph.strategy is GraphStrategy.READ
        assert graph.num_edges == len(overlapping_reads)
        assert graph.kmers() == ["ACT", "CTG", "TGA", "GAC"]

    def test_payload_is_read_suffix(self):
        graph = build_kmer_graph(["ACGTTGCA"], 3, strategy=GraphStrategy.READ)
        edge = graph.vertices[graph.find_vertex("ACG")].edges[0]

        assert edge.read == "ACGTTGCA"
        assert edge.payload == "TTGCA"
        assert graph.vertices[edge.target].kmer == "GCA"

    def test_tiled_reads(self, tiled_reads):
        graph = DeBruijnGraphBuilder(15, GraphStrategy.READ).build(tiled_reads)

        assert graph.num_edges == len(tiled_reads)
        assert graph.num_vertices == len(tiled_reads) + 1
        assert graph.total_payload_length() == len(tiled_reads) * 20
