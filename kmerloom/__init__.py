#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
KmerLoom v0.1.0

Package initialization and version metadata.

Author: KmerLoom Development Team
License: MIT
"""

from .version import __version__
from .assembly_core import assembly, GraphStrategy, EulerianPathError, ReadValidationError

__all__ = [
    "__version__",
    "assembly",
    "GraphStrategy",
    "EulerianPathError",
    "ReadValidationError",
]

# KmerLoom v0.1.0
# Any usage is subject to this software's license.
