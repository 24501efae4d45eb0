#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
KmerLoom v0.1.0

Genome assembly entry point: reads in, reconstructed sequence out.

Author: KmerLoom Development Team
License: MIT
"""

from typing import Optional, Sequence, Union
import logging

from .dbg_engine_module import DeBruijnGraphBuilder, GraphStrategy
from .eulerian_path_module import EulerianPathAssembler, check_degree_balance
from .read_validation import validate_reads

logger = logging.getLogger(__name__)


def expected_length(k: int, num_reads: int, read_length: int) -> int:
    """Length of the assembly of num_reads reads of length read_length."""
    if k == 0 or num_reads == 0:
        return 0
    return k + num_reads * (read_length - k)


def assembly(
    k: int,
    reads: Sequence[str],
    strategy: Union[GraphStrategy, str] = GraphStrategy.KMER,
    validate: bool = True,
    alphabet: Optional[str] = None
) -> str:
    """
    Reconstruct a sequence from equal-length overlapping reads.

    Args:
        k: Overlap (k-mer) length
        reads: Reads of uniform length d >= k; must stay alive during the call
        strategy: 'kmer' for per-k-mer vertices, 'read' for one edge per read
        validate: Check read preconditions and degree balance first
        alphabet: Allowed symbols when validating (None = any)

    Returns:
        Sequence of length k + len(reads) * (d - k), or '' when k == 0 or
        there are no reads

    Raises:
        ReadValidationError: If validation is on and the reads are malformed
        EulerianPathError: If the reads do not form a single Eulerian path

    Example:
        >>> assembly(3, ["ACTG", "CTGA", "TGAC"])
        'ACTGAC'
    """
    if k == 0 or not reads:
        return ""

    if validate:
        validate_reads(k, reads, alphabet=alphabet)

    graph = DeBruijnGraphBuilder(k, strategy).build(reads)

    if validate:
        check_degree_balance(graph)

    sequence = EulerianPathAssembler(graph).assemble()
    logger.info(f"Assembled {len(sequence)} bp from {len(reads)} reads")
    return sequence
