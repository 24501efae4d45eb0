"""
KmerLoom v0.1.0

Configuration schema for KmerLoom.

Defines all available configuration parameters with defaults and validation.

Author: KmerLoom Development Team
License: MIT
"""

import copy
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


class ConfigValidationError(Exception):
    """Raised when a configuration file cannot be loaded."""
    pass


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Assembly
    # ========================================================================
    'assembly': {
        'k': 31,  # K-mer (overlap) length
        'strategy': 'kmer',  # 'kmer' (per-k-mer vertices) or 'read' (one edge per read)
        'validate': True,  # Check read lengths and degree balance before traversal
    },

    # ========================================================================
    # Input
    # ========================================================================
    'input': {
        'format': 'auto',  # 'auto', 'fasta', 'fastq', 'txt'
        'uppercase': True,
        'alphabet': 'ACGT',  # Allowed symbols; null disables the check
    },

    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'record_id': 'assembly',
        'line_width': 80,  # 0 = single line
    },

    'logging': {
        'level': 'INFO',
    },
}

VALID_STRATEGIES = ['kmer', 'read']
VALID_FORMATS = ['auto', 'fasta', 'fastq', 'txt']
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

_ENV_PATTERN = re.compile(r'\$\{([^}:]+)(?::-(.*?))?\}')


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file, merged with defaults.

    Args:
        config_path: Path to YAML config file (optional)

    Returns:
        Complete configuration dictionary

    Raises:
        FileNotFoundError: If config_path does not exist
        ConfigValidationError: If the file is not valid YAML mapping
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                user_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in config file {config_path}: {e}")

        if user_config is not None:
            if not isinstance(user_config, dict):
                raise ConfigValidationError(
                    f"Config file {config_path} must contain a mapping, got {type(user_config).__name__}"
                )
            # Deep merge user config into defaults
            config = _deep_merge(config, _substitute_env_vars(user_config))

    return config


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _substitute_env_vars(config: Any) -> Any:
    """
    Recursively substitute environment variables in configuration.

    Supports:
    - ${VAR}: Replace with environment variable VAR
    - ${VAR:-default}: Replace with VAR, or 'default' if not set

    A string that is exactly one reference is re-parsed as YAML so numbers
    and booleans keep their type.
    """
    if isinstance(config, dict):
        return {k: _substitute_env_vars(v) for k, v in config.items()}

    elif isinstance(config, list):
        return [_substitute_env_vars(item) for item in config]

    elif isinstance(config, str):
        def replace_var(match):
            return os.environ.get(match.group(1), match.group(2) or '')

        substituted = _ENV_PATTERN.sub(replace_var, config)
        if substituted != config and _ENV_PATTERN.fullmatch(config):
            return yaml.safe_load(substituted) if substituted else substituted
        return substituted

    else:
        return config


def merge_overrides(config: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply command-line overrides in dotted notation (e.g. 'assembly.k').

    None values are ignored so unset CLI options keep the file's value.
    """
    result = copy.deepcopy(config)

    for key, value in overrides.items():
        if value is None:
            continue
        keys = key.split('.')
        target = result
        for k in keys[:-1]:
            target = target.setdefault(k, {})
        target[keys[-1]] = value

    return result


def save_config_template(output_path: Path):
    """
    Save the default configuration to a YAML file.

    Args:
        output_path: Output file path
    """
    with open(output_path, 'w') as f:
        yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    assembly = config.get('assembly', {})
    k = assembly.get('k')
    if isinstance(k, bool) or not isinstance(k, int) or k < 0:
        errors.append(f"Invalid assembly.k: must be a non-negative integer, got {k!r}")

    strategy = assembly.get('strategy')
    if strategy not in VALID_STRATEGIES:
        errors.append(f"Invalid assembly.strategy: {strategy!r} (expected one of {VALID_STRATEGIES})")

    fmt = config.get('input', {}).get('format')
    if fmt not in VALID_FORMATS:
        errors.append(f"Invalid input.format: {fmt!r} (expected one of {VALID_FORMATS})")

    alphabet = config.get('input', {}).get('alphabet')
    if alphabet is not None and (not isinstance(alphabet, str) or not alphabet):
        errors.append(f"Invalid input.alphabet: must be a non-empty string or null, got {alphabet!r}")

    line_width = config.get('output', {}).get('line_width')
    if isinstance(line_width, bool) or not isinstance(line_width, int) or line_width < 0:
        errors.append(f"Invalid output.line_width: must be a non-negative integer, got {line_width!r}")

    level = str(config.get('logging', {}).get('level', '')).upper()
    if level not in VALID_LOG_LEVELS:
        errors.append(f"Invalid logging.level: {level!r} (expected one of {VALID_LOG_LEVELS})")

    return errors
