#!/usr/bin/env python3
"""
Command-line interface for typedocgen.
"""

import click
from pathlib import Path
from rich.console import Console
from rich.progress import Progress, BarColumn, TextColumn
from rich.table import Table

from .config import Config
from .documentation import DocumentationGenerator, GenerationState
from .utils import logger

console = Console()


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True), help='Config file path')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Quiet output')
@click.pass_context
def cli(ctx, config, verbose, quiet):
    """typedocgen - render reference documentation for your types"""
    ctx.ensure_object(dict)
    ctx.obj['config'] = Config(config)
    ctx.obj['verbose'] = verbose
    ctx.obj['quiet'] = quiet

    if verbose:
        logger.setLevel('DEBUG')
    elif quiet:
        logger.setLevel('ERROR')
    else:
        logger.setLevel(ctx.obj['config'].config.logging.level.upper())


def _generator_settings(config: Config, output=None, modules=(), root=None):
    updates = {}
    if output:
        updates['output_directory'] = output
    if modules:
        updates['modules'] = list(modules)
    if root:
        updates['root_directory'] = root
    return config.generator.model_copy(update=updates)


@cli.command()
@click.option('--output', '-o', help='Output directory, relative to the root directory')
@click.option('--module', '-m', 'modules', multiple=True, help='Module or package to document')
@click.option('--root', '-r', type=click.Path(file_okay=False), help='Root directory files are written below')
@click.pass_context
def generate(ctx, output, modules, root):
    """Generate documentation for every configured category."""
    settings = _generator_settings(ctx.obj['config'], output, modules, root)

    if not settings.categories:
        console.print("[yellow]⚠[/yellow] No categories configured. Run 'typedocgen init' to create a config.")
        ctx.exit(1)

    generator = DocumentationGenerator(settings)

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
        console=console,
        disable=ctx.obj['quiet'],
    ) as progress:
        task = progress.add_task("Setting up generator", total=1.0)

        def on_progress(update):
            progress.update(task, completed=update.fraction, description=update.message)

        report = generator.generate_all(on_progress)

    if report.state == GenerationState.ERROR:
        console.print(f"[red]✗[/red] Generation failed: {report.error}")
        ctx.exit(1)

    for result in report.categories:
        console.print(f"  {result.name}: {result.types} types, {len(result.written)} files written")

    console.print(f"[green]✓[/green] Generated {report.files_written} files")
    if report.files_failed:
        console.print(f"[yellow]⚠[/yellow] {report.files_failed} files could not be written")

    output_path = Path(settings.root_directory) / settings.output_directory
    console.print(f"Output directory: [blue]{output_path}[/blue]")


@cli.command()
@click.argument('category', required=False)
@click.option('--module', '-m', 'modules', multiple=True, help='Module or package to document')
@click.pass_context
def types(ctx, category, modules):
    """List the types each category documents."""
    settings = _generator_settings(ctx.obj['config'], modules=modules)
    generator = DocumentationGenerator(settings)

    categories = [c for c in generator.categories if category is None or c.name == category]
    if not categories:
        console.print(f"[yellow]⚠[/yellow] No category named {category}" if category
                      else "[yellow]⚠[/yellow] No categories configured")
        ctx.exit(1)

    for documentation_category in categories:
        documentation_category.resolve_identity(generator.categories)

        table = Table(title=f"{documentation_category.nice_name} ({documentation_category.id})")
        table.add_column("Type", style="cyan")
        table.add_column("Namespace")
        table.add_column("File", style="green")

        for type in documentation_category.get_types():
            table.add_row(
                documentation_category.get_link(type),
                type.namespace or "",
                documentation_category.get_type_filename(type),
            )

        console.print(table)


@cli.command()
@click.option('--path', '-p', default='.typedocgen.yaml', help='Config file to create')
@click.option('--force', '-f', is_flag=True, help='Overwrite an existing config file')
def init(path, force):
    """Create a default typedocgen configuration file."""
    config_path = Path(path)
    if config_path.exists() and not force:
        console.print("[yellow]⚠[/yellow] Configuration file already exists. Use --force to overwrite.")
        return

    Config.create_default(str(config_path))
    console.print(f"[green]✓[/green] Configuration saved to: [blue]{config_path}[/blue]")


def main():
    """Main entry point."""
    cli(obj={})


if __name__ == '__main__':
    main()
