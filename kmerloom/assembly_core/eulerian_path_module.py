#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
KmerLoom v0.1.0

Eulerian path assembler.

Iterative Hierholzer traversal over a KmerGraph. An explicit stack replaces
recursion so arbitrarily long genomes cannot exhaust the call stack, and the
result is written back-to-front into a buffer sized before traversal starts.

Author: KmerLoom Development Team
License: MIT
"""

from typing import List, Optional, Tuple
import logging

from .dbg_engine_module import KmerEdge, KmerGraph

logger = logging.getLogger(__name__)


class EulerianPathError(RuntimeError):
    """Raised when the graph has no Eulerian path covering every edge."""
    pass


def check_degree_balance(graph: KmerGraph):
    """
    Verify the Eulerian path degree condition.

    At most one vertex may have out - in = +1, at most one out - in = -1, and
    every other vertex must be balanced.

    Raises:
        EulerianPathError: If the condition does not hold
    """
    sources = []
    sinks = []

    for vertex_id, delta in graph.degree_imbalance():
        if delta == 1:
            sources.append(vertex_id)
        elif delta == -1:
            sinks.append(vertex_id)
        else:
            raise EulerianPathError(
                f"K-mer {graph.vertices[vertex_id].kmer!r} has out-degree minus "
                f"in-degree {delta:+d}; no Eulerian path exists"
            )

    if len(sources) > 1 or len(sinks) > 1 or len(sources) != len(sinks):
        raise EulerianPathError(
            f"Graph has {len(sources)} start candidates and {len(sinks)} end "
            f"candidates; an Eulerian path needs at most one of each"
        )


class EulerianPathAssembler:
    """
    Spell the sequence of an Eulerian path through a k-mer graph.

    The graph's edge lists are drained by traversal; a graph can be
    assembled only once.
    """

    def __init__(self, graph: KmerGraph):
        self.graph = graph

    def find_start_vertex(self) -> Optional[int]:
        """
        Vertex whose out-degree exceeds its in-degree.

        When every vertex is balanced the first vertex observed while building
        is used, so the sequence is spelled from the first read's prefix.
        """
        for vertex_id, vertex in enumerate(self.graph.vertices):
            if vertex.out_degree > vertex.in_degree:
                return vertex_id

        if self.graph.vertices:
            logger.debug("No unbalanced vertex; starting from the first observed k-mer")
            return 0
        return None

    def assemble(self) -> str:
        """
        Run Hierholzer's algorithm and return the reconstructed sequence.

        Raises:
            EulerianPathError: If the graph is empty or not every edge is
                reachable along a single path
        """
        graph = self.graph
        k = graph.k
        vertices = graph.vertices

        start = self.find_start_vertex()
        if start is None:
            raise EulerianPathError("Cannot assemble an empty graph")

        length = k + graph.total_payload_length()
        result: List[str] = [""] * length
        result[:k] = vertices[start].kmer
        cursor = length

        logger.debug(
            f"Starting traversal at {vertices[start].kmer!r} "
            f"({graph.num_edges} edges, output length {length})"
        )

        stack: List[Tuple[int, Optional[KmerEdge]]] = [(start, None)]
        while stack:
            vertex_id, incoming = stack[-1]
            edges = vertices[vertex_id].edges
            if edges:
                edge = edges.pop()
                stack.append((edge.target, edge))
                continue

            stack.pop()
            if incoming is None:
                continue

            span = incoming.end - incoming.start
            if cursor - span < k:
                raise EulerianPathError(
                    "Traversal produced more sequence than the output can hold"
                )
            result[cursor - span:cursor] = incoming.read[incoming.start:incoming.end]
            cursor -= span

        if cursor != k:
            raise EulerianPathError(
                f"Traversal left {cursor - k} positions unfilled; "
                f"the graph is not connected by a single path"
            )

        return "".join(result)


def assemble_eulerian_path(graph: KmerGraph, check_balance: bool = True) -> str:
    """
    Convenience function to assemble a graph.

    Args:
        graph: Graph built by DeBruijnGraphBuilder (consumed)
        check_balance: Verify the degree condition before traversal

    Returns:
        Reconstructed sequence
    """
    if check_balance:
        check_degree_balance(graph)
    return EulerianPathAssembler(graph).assemble()
