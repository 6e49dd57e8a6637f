import json
import logging
from pathlib import Path

import click

from .aggregator import Aggregator
from .cli_utils import load_declaring_units
from .config import AggregatorConfig
from .errors import SwaggerBlocksError
from .writer import AtomicJsonWriter


def _load_config(path):
    if path is None:
        return AggregatorConfig()
    with open(path) as f:
        return AggregatorConfig.from_dict(json.load(f))


def _emit(build, output, indent):
    writer = AtomicJsonWriter(indent=indent)
    try:
        document = build()
        if output is None:
            click.echo(writer.render(document), nl=False)
        else:
            writer.write(Path(output), document)
    except SwaggerBlocksError as e:
        raise click.ClickException(str(e)) from e


config_option = click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
output_option = click.option("--output", "-o", default=None, type=click.Path(resolve_path=True))
indent_option = click.option("--indent", default=2, type=int, show_default=True, help="JSON indentation")


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log aggregation details to stderr")
def swagger_blocks(verbose):
    """Aggregate swagger declarations of Python classes into JSON documents."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@swagger_blocks.command("root")
@config_option
@output_option
@indent_option
@click.argument("targets", nargs=-1, required=True)
def root(config, output, indent, targets):
    """Build the resource listing (1.2) or the full document (2.0)."""
    aggregator = Aggregator(_load_config(config))
    units = load_declaring_units(targets)
    _emit(lambda: aggregator.build_root_json(units), output, indent)


@swagger_blocks.command("api")
@config_option
@output_option
@indent_option
@click.argument("resource_key")
@click.argument("targets", nargs=-1, required=True)
def api(config, output, indent, resource_key, targets):
    """Build the 1.2 API declaration of RESOURCE_KEY."""
    aggregator = Aggregator(_load_config(config))
    units = load_declaring_units(targets)
    _emit(lambda: aggregator.build_api_json(resource_key, units), output, indent)
