#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for SeedWeaver.

This module provides the main CLI entry point and all subcommands for
seed-bounded graph sampling.
"""

import sys
from importlib.metadata import version as package_version
import click
from pathlib import Path
import yaml

from .version import __version__
from .config.parser import ConfigParser, ConfigValidationError
from .config.schema import save_config_template, validate_config


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    SeedWeaver: Seed-Bounded Graph Sampling

    Grows one best-first frontier from each seed vertex, records every
    path where two frontiers meet, and returns the sampled subgraph.
    """
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet


def _log_level(ctx):
    if ctx.obj.get('VERBOSE'):
        return 'DEBUG'
    if ctx.obj.get('QUIET'):
        return 'WARNING'
    return None


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='seedweaver_config.yaml',
              help='Output configuration file path')
@click.option('--template', '-t',
              type=click.Choice(['default', 'degree', 'entropy']),
              default='default', help='Configuration template type')
def config_init(output, template):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating {template} configuration template: {output}")

    try:
        save_config_template(Path(output), template=template)
        click.echo(f"✓ Configuration file created: {output}")
        click.echo("\nThe configuration file includes:")
        click.echo("  • Graph input (edge list, direction, delimiter)")
        click.echo("  • Sampling strategy and seed vertices")
        click.echo("  • Base priority weighting")
        click.echo("  • Output and logging")
        click.echo("\nEdit this file to customize your sampling run.")
    except Exception as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        config = ConfigParser(config_file).to_dict()
        errors = validate_config(config)
    except Exception as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)

    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")

    click.echo("\nKey Settings:")
    click.echo(f"  Graph: {config['graph']['path'] or 'not set'}"
               f" ({'directed' if config['graph']['directed'] else 'undirected'})")
    click.echo(f"  Strategy: {config['sampling']['strategy']}")
    click.echo(f"  Seeds: {', '.join(map(str, config['sampling']['seeds'])) or 'not set'}")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
def config_show(config_file):
    """Display the merged configuration as YAML."""
    try:
        config = ConfigParser(config_file).to_dict()
    except Exception as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    click.echo(yaml.dump(config, default_flow_style=False, sort_keys=False))


# ============================================================================
# Sampling Commands
# ============================================================================

def _build_config(ctx, edges, config, seeds, strategy, directed, delimiter):
    """Load the config file (or defaults) and apply command-line overrides."""
    try:
        parser = ConfigParser(config)
    except ConfigValidationError as e:
        click.echo(f"❌ {e}", err=True)
        ctx.exit(1)

    parser.merge_cli_overrides({
        'graph.path': edges,
        'graph.directed': directed,
        'graph.delimiter': delimiter,
        'sampling.seeds': list(seeds) if seeds else None,
        'sampling.strategy': strategy,
        'output.logging.level': _log_level(ctx),
    })
    return parser.to_dict()


def _run_pipeline(ctx, sampling_config):
    from .utils.pipeline import SamplingPipeline

    if not sampling_config['sampling']['seeds']:
        click.echo("❌ Error: at least one --seed is required (or sampling.seeds in --config)", err=True)
        ctx.exit(1)

    config_errors = validate_config(sampling_config)
    if config_errors:
        click.echo("❌ Configuration validation failed:", err=True)
        for error in config_errors:
            click.echo(f"  • {error}", err=True)
        ctx.exit(1)

    try:
        pipeline = SamplingPipeline(sampling_config)
        summary = pipeline.run()
    except Exception as e:
        click.echo(f"\n❌ Sampling failed: {e}", err=True)
        if ctx.obj.get('VERBOSE'):
            import traceback
            traceback.print_exc()
        ctx.exit(1)

    return pipeline, summary


def _echo_degree_histogram(summary):
    click.echo("\nExpanded-vertex degree distribution:")
    distribution = summary['degree_distribution']
    if not distribution:
        click.echo("  (no vertices expanded)")
    widest = max(distribution.values(), default=0)
    for bucket, count in distribution.items():
        bar = '█' * max(1, round(40 * count / widest))
        click.echo(f"  {bucket:>9}  {count:>8,}  {bar}")

    degrees = summary['degree_summary']
    click.echo(f"\n  Mean degree:   {degrees['mean_degree']:.2f}")
    click.echo(f"  Median degree: {degrees['median_degree']:.1f}")
    click.echo(f"  Max degree:    {degrees['max_degree']:,}")


@main.command()
@click.argument('edges', type=click.Path(exists=True))
@click.option('--seed', '-s', 'seeds', multiple=True,
              help='Seed vertex (repeat for each seed)')
@click.option('--strategy',
              type=click.Choice(['salience', 'degree', 'entropy', 'path_preserving']),
              help='Priority strategy (default: salience)')
@click.option('--directed/--undirected', default=None,
              help='Treat edges as one-way (default: undirected)')
@click.option('--delimiter', '-d', default=None,
              help='Column delimiter (default: any whitespace)')
@click.option('--output', '-o', type=click.Path(),
              help='Write the full result as JSON')
@click.option('--paths-tsv', type=click.Path(),
              help='Write discovered paths as TSV')
@click.option('--config', '-c', type=click.Path(exists=True),
              help='Configuration file (YAML)')
@click.pass_context
def sample(ctx, edges, seeds, strategy, directed, delimiter, output, paths_tsv, config):
    """
    Sample the subgraph connecting seed vertices.

    Examples:
        # Two seeds, adaptive salience priority
        seedweaver sample graph.tsv -s paperA -s paperB -o result.json

        # Three seeds, degree priority, directed graph
        seedweaver sample graph.tsv -s A -s B -s C --strategy degree --directed
    """
    sampling_config = _build_config(ctx, edges, config, seeds, strategy, directed, delimiter)
    if output:
        sampling_config['output']['path'] = output
    if paths_tsv:
        sampling_config['output']['paths_tsv'] = paths_tsv

    quiet = ctx.obj.get('QUIET', False)
    if not quiet:
        click.echo(f"{'='*60}")
        click.echo(f"SeedWeaver v{__version__}")
        click.echo(f"{'='*60}")
        click.echo(f"Graph:    {edges}")
        click.echo(f"Seeds:    {', '.join(map(str, sampling_config['sampling']['seeds']))}")
        click.echo(f"Strategy: {sampling_config['sampling']['strategy']}")
        click.echo(f"{'='*60}\n")

    pipeline, summary = _run_pipeline(ctx, sampling_config)

    click.echo(f"✓ Sampled {summary['sampled_nodes']:,} nodes and "
               f"{summary['sampled_edges']:,} edges in {summary['iterations']:,} iterations")
    click.echo(f"✓ Paths found: {summary['paths_found']}")

    if not quiet:
        seed_ids = summary['seeds']
        for i, path in enumerate(pipeline.result.paths, start=1):
            route = ' -> '.join(map(str, path.nodes))
            click.echo(f"  path_{i} [{seed_ids[path.from_seed]} -> {seed_ids[path.to_seed]}]: {route}")
        if summary['phase_transition_iteration'] is not None:
            click.echo(f"\nSalience phase began at iteration {summary['phase_transition_iteration']}")

    for kind, path in summary['outputs'].items():
        click.echo(f"Output ({kind}): {path}")


@main.command()
@click.argument('edges', type=click.Path(exists=True))
@click.option('--seed', '-s', 'seeds', multiple=True,
              help='Seed vertex (repeat for each seed)')
@click.option('--strategy',
              type=click.Choice(['salience', 'degree', 'entropy', 'path_preserving']),
              help='Priority strategy (default: salience)')
@click.option('--directed/--undirected', default=None,
              help='Treat edges as one-way (default: undirected)')
@click.option('--delimiter', '-d', default=None,
              help='Column delimiter (default: any whitespace)')
@click.option('--config', '-c', type=click.Path(exists=True),
              help='Configuration file (YAML)')
@click.pass_context
def stats(ctx, edges, seeds, strategy, directed, delimiter, config):
    """Run a sampling pass and print expansion statistics only."""
    sampling_config = _build_config(ctx, edges, config, seeds, strategy, directed, delimiter)
    sampling_config['output']['path'] = None
    sampling_config['output']['paths_tsv'] = None

    pipeline, summary = _run_pipeline(ctx, sampling_config)
    run_stats = pipeline.result.stats

    click.echo(f"Strategy:         {summary['strategy']}")
    click.echo(f"Iterations:       {run_stats.iterations:,}")
    click.echo(f"Nodes expanded:   {run_stats.nodes_expanded:,}")
    click.echo(f"Edges traversed:  {run_stats.edges_traversed:,}")
    click.echo(f"Paths found:      {run_stats.paths_found:,}")
    click.echo(f"Duplicate paths:  {run_stats.duplicate_paths:,}")
    click.echo(f"Looping walks:    {run_stats.looping_paths:,}")
    click.echo(f"Broken chains:    {run_stats.reconstruction_failures:,}")

    _echo_degree_histogram(summary)


@main.command()
def version():
    """Show version information."""
    import numpy

    click.echo(f"SeedWeaver v{__version__}")
    click.echo("\nDependencies:")
    click.echo(f"  NumPy: {numpy.__version__}")
    click.echo(f"  Click: {package_version('click')}")
    click.echo(f"  PyYAML: {yaml.__version__}")


if __name__ == '__main__':
    sys.exit(main())
