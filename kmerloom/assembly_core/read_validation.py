"""
KmerLoom v0.1.0

Read set validation.

Checks the preconditions the assembler relies on before any graph is built.

Author: KmerLoom Development Team
License: MIT
"""

from typing import Optional, Sequence


class ReadValidationError(ValueError):
    """Raised when a read set violates an assembly precondition."""
    pass


def validate_reads(k: int, reads: Sequence[str], alphabet: Optional[str] = None) -> int:
    """
    Validate reads for assembly with overlap k.

    Args:
        k: K-mer size
        reads: Reads to assemble (must be non-empty)
        alphabet: Allowed symbols (None = any)

    Returns:
        The common read length d

    Raises:
        ReadValidationError: On negative k, empty read set, inconsistent read
            lengths, reads shorter than k, or symbols outside the alphabet
    """
    if k < 0:
        raise ReadValidationError(f"k must be non-negative, got {k}")
    if not reads:
        raise ReadValidationError("No reads to assemble")

    d = len(reads[0])
    if d < k:
        raise ReadValidationError(f"Read length {d} is shorter than k={k}")

    allowed = set(alphabet) if alphabet else None

    for i, read in enumerate(reads):
        if len(read) != d:
            raise ReadValidationError(
                f"Read {i} has length {len(read)}, expected {d} (all reads must share one length)"
            )
        if allowed is not None:
            unexpected = set(read) - allowed
            if unexpected:
                raise ReadValidationError(
                    f"Read {i} contains symbols outside alphabet '{alphabet}': "
                    f"{', '.join(sorted(unexpected))}"
                )

    return d
