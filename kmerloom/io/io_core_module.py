#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Core I/O module for KmerLoom.

Consolidated module containing:
- Read file format detection
- FASTA / FASTQ reading (Biopython)
- Plain-text reads, one per line
- FASTA writing for assemblies and simulated reads

Gzipped inputs and outputs are handled transparently.
"""

# =============================================================================
# SECTION 1: IMPORTS AND DEPENDENCIES
# =============================================================================

import gzip
import logging
from pathlib import Path
from typing import Iterable, List, TextIO, Tuple, Union

from Bio import SeqIO

logger = logging.getLogger(__name__)

READ_FORMATS = ('auto', 'fasta', 'fastq', 'txt')

FASTA_SUFFIXES = ('.fa', '.fasta', '.fna', '.fas')
FASTQ_SUFFIXES = ('.fq', '.fastq')


# =============================================================================
# SECTION 2: FILE UTILITIES
# =============================================================================
# Helper functions for file handling with automatic gzip detection

def is_gzipped(filepath: Union[str, Path]) -> bool:
    """
    Check if file is gzip compressed.

    Args:
        filepath: Path to file

    Returns:
        True if file is gzipped
    """
    filepath = Path(filepath)
    return filepath.suffix in ('.gz', '.gzip')


def open_file(filepath: Union[str, Path], mode: str = 'r') -> TextIO:
    """
    Open file with automatic gzip detection.

    Args:
        filepath: Path to file
        mode: File mode ('r' or 'w')

    Returns:
        File handle
    """
    filepath = Path(filepath)

    if is_gzipped(filepath):
        if 'r' in mode:
            return gzip.open(filepath, 'rt')
        else:
            return gzip.open(filepath, 'wt')
    else:
        return open(filepath, mode)


def detect_format(filepath: Union[str, Path]) -> str:
    """
    Infer the read format from the file name.

    Returns:
        'fasta', 'fastq' or 'txt'
    """
    filepath = Path(filepath)
    suffix = filepath.suffix.lower()
    if is_gzipped(filepath):
        suffix = Path(filepath.stem).suffix.lower()

    if suffix in FASTA_SUFFIXES:
        return 'fasta'
    if suffix in FASTQ_SUFFIXES:
        return 'fastq'
    return 'txt'


# =============================================================================
# SECTION 3: READ INPUT
# =============================================================================

def read_sequences(
    filepath: Union[str, Path],
    fmt: str = 'auto',
    uppercase: bool = True
) -> List[str]:
    """
    Load reads from a FASTA, FASTQ or plain-text file.

    Plain-text files hold one read per line; blank lines and lines starting
    with '#' are skipped.

    Args:
        filepath: Path to reads file (can be gzipped)
        fmt: 'auto', 'fasta', 'fastq' or 'txt'
        uppercase: Convert reads to upper case

    Returns:
        Reads in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If fmt is not a known format
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Reads file not found: {filepath}")
    if fmt not in READ_FORMATS:
        raise ValueError(f"Unknown read format '{fmt}' (expected one of: {', '.join(READ_FORMATS)})")

    if fmt == 'auto':
        fmt = detect_format(filepath)

    with open_file(filepath, 'r') as handle:
        if fmt == 'txt':
            reads = [
                line.strip() for line in handle
                if line.strip() and not line.lstrip().startswith('#')
            ]
        else:
            reads = [str(record.seq) for record in SeqIO.parse(handle, fmt)]

    if uppercase:
        reads = [read.upper() for read in reads]

    logger.info(f"Loaded {len(reads)} reads from {filepath} ({fmt})")
    return reads


# =============================================================================
# SECTION 4: OUTPUT
# =============================================================================

def write_fasta(
    records: Iterable[Tuple[str, str]],
    filepath: Union[str, Path],
    line_width: int = 80
) -> int:
    """
    Write (id, sequence) records to a FASTA file.

    Args:
        records: Iterable of (identifier, sequence) pairs
        filepath: Output FASTA file path (.gz to compress)
        line_width: Number of bases per line (0 = no wrapping)

    Returns:
        Number of sequences written
    """
    filepath = Path(filepath)

    # Create output directory if needed
    filepath.parent.mkdir(parents=True, exist_ok=True)

    count = 0

    with open_file(filepath, 'w') as handle:
        for record_id, sequence in records:
            handle.write(f">{record_id}\n")

            if line_width > 0:
                for i in range(0, len(sequence), line_width):
                    handle.write(sequence[i:i + line_width] + '\n')
            else:
                handle.write(sequence + '\n')

            count += 1

    return count


def write_reads(reads: Iterable[str], filepath: Union[str, Path], fmt: str = 'fasta') -> int:
    """
    Write reads as FASTA ('read_1', 'read_2', ...) or one per line ('txt').

    Returns:
        Number of reads written
    """
    if fmt == 'fasta':
        return write_fasta(
            ((f"read_{i}", read) for i, read in enumerate(reads, 1)),
            filepath,
            line_width=0
        )
    if fmt != 'txt':
        raise ValueError(f"Cannot write reads as '{fmt}' (expected 'fasta' or 'txt')")

    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open_file(filepath, 'w') as handle:
        for read in reads:
            handle.write(read + '\n')
            count += 1
    return count
