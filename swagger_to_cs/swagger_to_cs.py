import logging
from pathlib import Path

import click

from .pipeline import AtomicWriter, CodeGenerationError, OutputConfig, PipelineGenerator

logger = logging.getLogger(__name__)


@click.command()
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False, resolve_path=True), help="The output for generated code.")
@click.argument("inputs", nargs=-1, type=click.Path(dir_okay=False))
@click.pass_context
def swagger_to_cs(ctx, output, inputs):
    """Generate a C# API client from the Swagger document INPUTS[0]."""
    if not inputs:
        click.echo("No input file found.\n")
        click.echo(ctx.get_help())
        return

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    path = Path(inputs[0])
    if len(inputs) > 1:
        logger.warning("Only the first input is used, ignoring: %s", " ".join(inputs[1:]))

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise click.ClickException(f"Unable to read file: {e}") from e

    try:
        out = PipelineGenerator(raw).generate()
    except CodeGenerationError as e:
        raise click.ClickException(f"Unable to generate code from {path}: {e}") from e

    if output is None:
        click.echo(out, nl=False)
        return

    try:
        AtomicWriter().write(Path(output), out, validate=OutputConfig().validate_before_write)
    except (OSError, CodeGenerationError) as e:
        raise click.ClickException(f"Unable to write file: {e}") from e
