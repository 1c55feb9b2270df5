import json
import logging
from pathlib import Path

import click

from .config import GenerateOptions
from .context import Context
from .errors import SchemaCodegenError
from .generator import generate
from .writer import AtomicWriter


@click.command()
@click.option("--namespace", "-n", default=None, type=str, help="Namespace to wrap all generated types in")
@click.option("--using", "-u", default=None, type=str, help="Extra using directive for interface files")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--force", is_flag=True, default=False, help="Overwrite existing files")
@click.option("--no-generation-comment", is_flag=True, default=False, help="Omit the comment header")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", type=click.Path(file_okay=False, resolve_path=True))
def schema_to_cs(namespace, using, config, force, no_generation_comment, verbose, path, output):
    """Generate C# sources from the schema context stored in PATH into the OUTPUT directory."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            options = GenerateOptions.from_dict(json.load(f))
    else:
        options = GenerateOptions()

    # CLI flags override the config file
    if namespace is not None:
        options.namespace = namespace
    if using is not None:
        options.using = using
    if no_generation_comment:
        options.add_generation_comment = False

    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"{Path(path).name} is not valid JSON: {e}") from e

    try:
        files = generate(Context.from_dict(data), options)
    except SchemaCodegenError as e:
        raise click.ClickException(str(e)) from e

    writer = AtomicWriter(require_namespace=bool(options.namespace))
    out_dir = Path(output)
    for generated in files:
        target = out_dir / generated.name
        try:
            if force:
                writer.write(target, generated.content)
            else:
                writer.write_if_not_exists(target, generated.content)
        except (FileExistsError, SchemaCodegenError) as e:
            raise click.ClickException(str(e)) from e
        click.echo(f"generated: {target}")
