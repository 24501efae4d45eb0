#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
KmerLoom v0.1.0

Pytest configuration and shared fixtures.

Author: KmerLoom Development Team
License: MIT
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from kmerloom.utils.sequence_utils import random_genome, tile_reads


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="kmerloom_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def overlapping_reads():
    """Three 4 bp reads overlapping by 3, spelling ACTGAC."""
    return ["ACTG", "CTGA", "TGAC"]


@pytest.fixture
def genome():
    """Random 315 bp genome (tiles exactly into 35 bp reads overlapping by 15)."""
    return random_genome(315, seed=7)


@pytest.fixture
def tiled_reads(genome):
    """Reads of 35 bp overlapping by 15, covering the genome exactly."""
    return tile_reads(genome, 35, 15)


@pytest.fixture
def simple_fasta():
    """FASTA text holding the overlapping reads."""
    return ">r1\nACTG\n>r2\nCTGA\n>r3\nTGAC\n"


@pytest.fixture
def simple_fastq():
    """FASTQ text holding the overlapping reads."""
    return """@r1
ACTG
+
IIII
@r2
CTGA
+
IIII
@r3
TGAC
+
IIII
"""

# KmerLoom v0.1.0
# Any usage is subject to this software's license.
