#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
KmerLoom v0.1.0

De Bruijn Graph (DBG) Engine for KmerLoom.
- Vertices are distinct k-mers, deduplicated by value through rolling-hash keys
- Vertices live in an index-addressed arena; edges store destination indices
- Fine-grained construction (one vertex per k-mer window, one edge per new symbol)
- Coarse-grained construction (one edge per read, prefix k-mer to suffix k-mer)
- K-mer keys are views into the caller's reads, never copies

Author: KmerLoom Development Team
License: MIT
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple, Union
import logging

from .kmer_hasher import RollingKmerHasher, hash_kmer

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================

class GraphStrategy(str, Enum):
    """Graph granularity used by the builder."""
    KMER = "kmer"  # Per-k-mer vertices, single-symbol edges
    READ = "read"  # Per-read edges from first to last k-mer

    @classmethod
    def coerce(cls, value: Union["GraphStrategy", str]) -> "GraphStrategy":
        """Accept either an enum member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown graph strategy '{value}' (expected one of: {valid})")


# ============================================================================
# Core Data Structures
# ============================================================================

class KmerView:
    """
    Non-owning view of read[start:start + k] paired with its fingerprint.

    Two views are equal when their symbol sequences match, regardless of which
    read or offset they point into. The read must outlive the view.
    """

    __slots__ = ("read", "start", "k", "fingerprint")

    def __init__(self, read: str, start: int, k: int, fingerprint: int):
        self.read = read
        self.start = start
        self.k = k
        self.fingerprint = fingerprint

    @property
    def value(self) -> str:
        """Materialised k-mer string."""
        return self.read[self.start:self.start + self.k]

    def __hash__(self) -> int:
        return self.fingerprint

    def __eq__(self, other) -> bool:
        if not isinstance(other, KmerView):
            return NotImplemented
        if self.fingerprint != other.fingerprint or self.k != other.k:
            return False
        if self.read is other.read and self.start == other.start:
            return True
        return self.read.startswith(other.value, self.start)

    def __repr__(self) -> str:
        return f"KmerView({self.value!r}, hash={self.fingerprint})"


class KmerEdge(NamedTuple):
    """
    Directed edge to vertex `target`.

    The payload is the view read[start:end]: the single trailing symbol for
    k-mer graphs, the non-overlapping read suffix for read graphs.
    """
    target: int
    read: str
    start: int
    end: int

    @property
    def payload(self) -> str:
        return self.read[self.start:self.end]

    @property
    def payload_length(self) -> int:
        return self.end - self.start


@dataclass
class KmerVertex:
    """One distinct k-mer with its outgoing edges and in-degree."""
    key: KmerView
    edges: List[KmerEdge] = field(default_factory=list)
    in_degree: int = 0

    @property
    def out_degree(self) -> int:
        return len(self.edges)

    @property
    def kmer(self) -> str:
        return self.key.value


@dataclass
class KmerGraph:
    """
    Directed multigraph over k-mers.

    Vertices are stored in an arena and addressed by index; `index` maps a k-mer
    view to its vertex index.
    """
    k: int
    strategy: GraphStrategy = GraphStrategy.KMER
    vertices: List[KmerVertex] = field(default_factory=list)
    index: Dict[KmerView, int] = field(default_factory=dict)
    num_edges: int = 0

    def add_vertex(self, key: KmerView) -> int:
        """Return the index of the vertex for `key`, creating it on first sight."""
        vertex_id = self.index.get(key)
        if vertex_id is None:
            vertex_id = len(self.vertices)
            self.index[key] = vertex_id
            self.vertices.append(KmerVertex(key=key))
        return vertex_id

    def add_edge(self, from_id: int, to_id: int, read: str, start: int, end: int):
        """Append an edge carrying read[start:end] and bump the target's in-degree."""
        self.vertices[from_id].edges.append(KmerEdge(to_id, read, start, end))
        self.vertices[to_id].in_degree += 1
        self.num_edges += 1

    def find_vertex(self, kmer: str) -> Optional[int]:
        """Look up a vertex by k-mer string."""
        if len(kmer) != self.k:
            return None
        return self.index.get(KmerView(kmer, 0, self.k, hash_kmer(kmer, 0, self.k)))

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    def out_degree(self, vertex_id: int) -> int:
        return len(self.vertices[vertex_id].edges)

    def in_degree(self, vertex_id: int) -> int:
        return self.vertices[vertex_id].in_degree

    def total_payload_length(self) -> int:
        """Number of symbols the edges contribute to the assembled sequence."""
        return sum(
            edge.payload_length
            for vertex in self.vertices
            for edge in vertex.edges
        )

    def degree_imbalance(self) -> List[Tuple[int, int]]:
        """(vertex index, out-degree - in-degree) for every unbalanced vertex."""
        return [
            (vertex_id, vertex.out_degree - vertex.in_degree)
            for vertex_id, vertex in enumerate(self.vertices)
            if vertex.out_degree != vertex.in_degree
        ]

    def kmers(self) -> List[str]:
        """All distinct k-mers in insertion order."""
        return [vertex.kmer for vertex in self.vertices]


# ============================================================================
# De Bruijn Graph Builder
# ============================================================================

class DeBruijnGraphBuilder:
    """
    Builder for k-mer adjacency graphs from equal-length reads.

    Supports:
    - Fine-grained graphs (GraphStrategy.KMER): d - k edges per read
    - Coarse-grained graphs (GraphStrategy.READ): one edge per read
    """

    def __init__(self, k: int, strategy: Union[GraphStrategy, str] = GraphStrategy.KMER):
        """
        Initialize DBG builder.

        Args:
            k: K-mer size
            strategy: Graph granularity
        """
        self.k = k
        self.strategy = GraphStrategy.coerce(strategy)
        self.hasher = RollingKmerHasher(k)

    def build(self, reads: Sequence[str]) -> KmerGraph:
        """
        Build the adjacency graph.

        Args:
            reads: Reads of uniform length d >= k

        Returns:
            KmerGraph whose vertex 0 is the first k-mer of the first read
        """
        graph = KmerGraph(k=self.k, strategy=self.strategy)

        if self.strategy is GraphStrategy.KMER:
            for read in reads:
                self._add_read_windows(graph, read)
        else:
            for read in reads:
                self._add_read_edge(graph, read)

        logger.info(
            f"Built {self.strategy.value} graph from {len(reads)} reads (k={self.k}): "
            f"{graph.num_vertices} vertices, {graph.num_edges} edges"
        )
        return graph

    def _add_read_windows(self, graph: KmerGraph, read: str):
        """Chain consecutive k-mer windows of one read."""
        k = self.k
        hasher = self.hasher

        u = graph.add_vertex(KmerView(read, 0, k, hasher.hash(read, 0)))
        for i in range(1, len(read) - k + 1):
            v = graph.add_vertex(KmerView(read, i, k, hasher.hash(read, i)))
            # Label: the symbol this window appends
            graph.add_edge(u, v, read, i + k - 1, i + k)
            u = v

    def _add_read_edge(self, graph: KmerGraph, read: str):
        """Connect a read's prefix k-mer to its suffix k-mer."""
        k = self.k
        last = len(read) - k

        u = graph.add_vertex(KmerView(read, 0, k, self.hasher.hash(read, 0)))
        v = graph.add_vertex(KmerView(read, last, k, hash_kmer(read, last, k)))
        graph.add_edge(u, v, read, k, len(read))


def build_kmer_graph(
    reads: Sequence[str],
    k: int,
    strategy: Union[GraphStrategy, str] = GraphStrategy.KMER
) -> KmerGraph:
    """
    Convenience function to build a k-mer graph.

    Args:
        reads: Reads of uniform length
        k: K-mer size
        strategy: 'kmer' (fine-grained) or 'read' (coarse-grained)

    Returns:
        KmerGraph
    """
    return DeBruijnGraphBuilder(k, strategy).build(reads)
