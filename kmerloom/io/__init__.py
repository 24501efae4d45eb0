"""
I/O module for KmerLoom.

Read loading (FASTA, FASTQ, plain text) and FASTA output.
"""

from .io_core_module import (
    detect_format,
    open_file,
    read_sequences,
    write_fasta,
    write_reads,
    READ_FORMATS,
)

__all__ = [
    "detect_format",
    "open_file",
    "read_sequences",
    "write_fasta",
    "write_reads",
    "READ_FORMATS",
]
