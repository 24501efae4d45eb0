#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for KmerLoom.

This module provides the main CLI entry point and all subcommands for
the KmerLoom de Bruijn assembler.
"""

import logging
import sys
from pathlib import Path

import click
import numpy as np
import yaml

from .version import __version__
from .assembly_core import assembly, EulerianPathError, ReadValidationError
from .config.schema import (
    ConfigValidationError,
    load_config,
    merge_overrides,
    save_config_template,
    validate_config,
)
from .io.io_core_module import read_sequences, write_fasta, write_reads
from .utils.sequence_utils import calculate_gc_content, random_genome, tile_reads

logger = logging.getLogger(__name__)


def setup_logging(level: str):
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S',
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    KmerLoom: de Bruijn graph genome assembler

    Reconstructs a sequence from equal-length overlapping reads by building a
    k-mer graph and walking its Eulerian path.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet


def _log_level(ctx, config) -> str:
    if ctx.obj.get('VERBOSE'):
        return 'DEBUG'
    if ctx.obj.get('QUIET'):
        return 'ERROR'
    return config['logging']['level']


# ============================================================================
# Assembly Commands
# ============================================================================

@main.command()
@click.option('--input', '-i', 'input_path', required=True, type=click.Path(exists=True),
              help='Reads file (FASTA, FASTQ or one read per line; may be gzipped)')
@click.option('--kmer-size', '-k', type=int, default=None,
              help='K-mer (overlap) length [config: assembly.k]')
@click.option('--strategy', '-s', type=click.Choice(['kmer', 'read']), default=None,
              help='Graph granularity: per-k-mer vertices or one edge per read')
@click.option('--output', '-o', type=click.Path(), default=None,
              help='Output FASTA (default: stdout)')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True),
              help='Configuration file (YAML)')
@click.option('--format', '-f', 'read_format', type=click.Choice(['auto', 'fasta', 'fastq', 'txt']),
              default=None, help='Reads file format [config: input.format]')
@click.option('--no-validate', is_flag=True, help='Skip read and degree-balance checks')
@click.pass_context
def assemble(ctx, input_path, kmer_size, strategy, output, config_path, read_format, no_validate):
    """
    Assemble reads into a single sequence.

    Examples:
        kmerloom assemble -i reads.fa -k 31 -o genome.fa

        kmerloom assemble -i reads.txt -k 20 --strategy read
    """
    try:
        config = load_config(Path(config_path) if config_path else None)
    except ConfigValidationError as e:
        click.echo(f"✗ Error loading configuration: {e}", err=True)
        sys.exit(1)

    config = merge_overrides(config, {
        'assembly.k': kmer_size,
        'assembly.strategy': strategy,
        'assembly.validate': False if no_validate else None,
        'input.format': read_format,
    })

    errors = validate_config(config)
    if errors:
        click.echo("✗ Configuration validation failed:", err=True)
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    setup_logging(_log_level(ctx, config))
    logger.debug(f"Effective configuration: {config}")

    assembly_config = config['assembly']
    input_config = config['input']

    reads = read_sequences(input_path, fmt=input_config['format'],
                           uppercase=input_config['uppercase'])

    try:
        sequence = assembly(
            assembly_config['k'],
            reads,
            strategy=assembly_config['strategy'],
            validate=assembly_config['validate'],
            alphabet=input_config['alphabet'],
        )
    except (ReadValidationError, EulerianPathError) as e:
        click.echo(f"✗ Assembly failed: {e}", err=True)
        sys.exit(1)

    if not sequence:
        click.echo("⚠ Nothing to assemble (k = 0 or no reads)", err=True)
        return

    record_id = config['output']['record_id']
    line_width = config['output']['line_width']

    if output:
        write_fasta([(record_id, sequence)], output, line_width=line_width)
        if not ctx.obj.get('QUIET'):
            click.echo(f"✓ Assembled {len(sequence)} bp from {len(reads)} reads "
                       f"(GC {calculate_gc_content(sequence):.1%}) → {output}")
    else:
        click.echo(f">{record_id}")
        if line_width > 0:
            for i in range(0, len(sequence), line_width):
                click.echo(sequence[i:i + line_width])
        else:
            click.echo(sequence)


@main.command()
@click.option('--output', '-o', required=True, type=click.Path(),
              help='Output reads file')
@click.option('--read-length', '-d', required=True, type=int, help='Read length')
@click.option('--kmer-size', '-k', required=True, type=int, help='Overlap between consecutive reads')
@click.option('--genome', '-g', type=click.Path(exists=True), default=None,
              help='Source genome (first record is used); random if omitted')
@click.option('--length', '-l', type=int, default=1000, show_default=True,
              help='Random genome length (rounded down to a tileable length)')
@click.option('--seed', type=int, default=None, help='Random seed')
@click.option('--shuffle', is_flag=True, help='Shuffle read order')
@click.option('--format', '-f', 'read_format', type=click.Choice(['fasta', 'txt']),
              default='fasta', show_default=True, help='Output format')
@click.option('--genome-output', type=click.Path(), default=None,
              help='Also write the source genome as FASTA')
@click.pass_context
def simulate(ctx, output, read_length, kmer_size, genome, length, seed, shuffle,
             read_format, genome_output):
    """
    Tile a genome into error-free reads that overlap by k.

    The reads reassemble exactly with `kmerloom assemble -k K`.
    """
    setup_logging(_log_level(ctx, {'logging': {'level': 'INFO'}}))

    step = read_length - kmer_size
    if step <= 0 or kmer_size <= 0:
        click.echo(f"✗ Need 0 < k < read length, got k={kmer_size}, read length={read_length}", err=True)
        sys.exit(1)

    if genome:
        records = read_sequences(genome)
        if not records:
            click.echo(f"✗ No sequences found in {genome}", err=True)
            sys.exit(1)
        sequence = records[0]
    else:
        if length < read_length:
            click.echo(f"✗ Genome length {length} is shorter than read length {read_length}", err=True)
            sys.exit(1)
        usable = read_length + ((length - read_length) // step) * step
        sequence = random_genome(usable, seed=seed)

    try:
        reads = tile_reads(sequence, read_length, kmer_size)
    except ValueError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    if shuffle:
        order = np.random.default_rng(seed).permutation(len(reads))
        reads = [reads[i] for i in order]

    count = write_reads(reads, output, fmt=read_format)
    if genome_output:
        write_fasta([('genome', sequence)], genome_output)

    if not ctx.obj.get('QUIET'):
        click.echo(f"✓ Wrote {count} reads of {read_length} bp (k={kmer_size}) "
                   f"covering {len(sequence)} bp → {output}")


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='kmerloom_config.yaml',
              help='Output configuration file path')
def config_init(output):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating configuration template: {output}")

    try:
        save_config_template(Path(output))
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Configuration file created: {output}")


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        config = load_config(Path(config_file))
    except ConfigValidationError as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")
    click.echo(f"  k: {config['assembly']['k']}")
    click.echo(f"  Strategy: {config['assembly']['strategy']}")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True), required=False)
def config_show(config_file):
    """Display the effective configuration (defaults if no file is given)."""
    try:
        config = load_config(Path(config_file) if config_file else None)
    except ConfigValidationError as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    click.echo(yaml.dump(config, default_flow_style=False, sort_keys=False))


@main.command()
def version():
    """Show version information."""
    click.echo(f"KmerLoom v{__version__}")
    click.echo("\nDependencies:")

    import Bio

    click.echo(f"  BioPython: {Bio.__version__}")
    click.echo(f"  NumPy: {np.__version__}")
    click.echo(f"  PyYAML: {yaml.__version__}")


if __name__ == '__main__':
    sys.exit(main())
