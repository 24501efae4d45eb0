"""
KmerLoom v0.1.0

Configuration management for KmerLoom.

Author: KmerLoom Development Team
License: MIT
"""

from .schema import (
    ConfigValidationError,
    DEFAULT_CONFIG,
    load_config,
    merge_overrides,
    save_config_template,
    validate_config,
)

__all__ = [
    "ConfigValidationError",
    "DEFAULT_CONFIG",
    "load_config",
    "merge_overrides",
    "save_config_template",
    "validate_config",
]
