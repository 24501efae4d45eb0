"""
Assembly Core module for KmerLoom.

This module provides the de Bruijn assembly pipeline:
- Rolling k-mer hashing
- K-mer and read-level graph construction
- Iterative Eulerian path traversal (Hierholzer)
- Read set validation
"""

from .kmer_hasher import RollingKmerHasher, hash_kmer, encode_symbol

from .dbg_engine_module import (
    build_kmer_graph,
    DeBruijnGraphBuilder,
    GraphStrategy,
    KmerGraph,
    KmerVertex,
    KmerEdge,
    KmerView
)

from .eulerian_path_module import (
    assemble_eulerian_path,
    check_degree_balance,
    EulerianPathAssembler,
    EulerianPathError
)

from .read_validation import validate_reads, ReadValidationError
from .genome_assembler import assembly, expected_length

__all__ = [
    # Assembly functions
    "assembly",
    "expected_length",
    "build_kmer_graph",
    "assemble_eulerian_path",
    "check_degree_balance",
    "validate_reads",
    # Hashing
    "RollingKmerHasher",
    "hash_kmer",
    "encode_symbol",
    # Core classes
    "DeBruijnGraphBuilder",
    "GraphStrategy",
    "KmerGraph",
    "KmerVertex",
    "KmerEdge",
    "KmerView",
    "EulerianPathAssembler",
    # Errors
    "EulerianPathError",
    "ReadValidationError",
]
