"""CLI utilities for testoria.

Provides inspection commands for the available actions, element
catalogs, and the JSON Schema of suite snapshots.
"""

import logging
from pathlib import Path

from click import ClickException, Context, argument, echo, group, pass_context
from click import Path as PathParam

from testoria.errors import CatalogError
from testoria.jsonschema import SchemaGenerator
from testoria.manager import TestModelManager
from testoria.settings import Settings

logger = logging.getLogger(__name__)

CatalogFilepath = PathParam(
    exists=True,
    dir_okay=False,
    readable=True,
    path_type=Path,
)


@group(help='Command-line utilities for testoria authoring models.')
@pass_context
def cli(ctx: Context) -> None:
    """Root CLI group resolving settings and logging."""
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(levelname)s %(name)s: %(message)s',
    )
    ctx.obj = settings


@cli.command(
    name='schema',
    help='Print the JSON Schema of suite snapshots to standard output.',
)
def print_schema() -> None:
    """Generate and print the JSON Schema."""
    echo(SchemaGenerator.make_schema())


@cli.command(
    name='actions',
    help='Print the available step actions, one per line.',
)
def print_actions() -> None:
    """Print actions in their documented order."""
    for action in TestModelManager().get_available_actions():
        echo(action.value)


@cli.command(
    name='elements',
    help=(
        'Validate an element catalog and print its elements. '
        'Defaults to the catalog configured by TESTORIA_CATALOG.'
    ),
)
@argument(
    'catalog',
    type=CatalogFilepath,
    required=False,
)
@pass_context
def print_elements(ctx: Context, catalog: Path | None) -> None:
    """Print catalog elements as tab-separated identifier, type and name.

    Args:
        ctx: Click context holding resolved settings.
        catalog: Optional catalog path overriding the settings.
    """
    settings: Settings = ctx.obj
    if catalog is not None:
        settings = settings.model_copy(update={'catalog': catalog})

    if settings.catalog is None:
        raise ClickException('No element catalog given')

    try:
        manager = settings.make_manager()
    except CatalogError as error:
        raise ClickException(str(error)) from error

    elements = manager.get_available_elements()
    logger.info('Loaded %d element(s) from %s', len(elements), settings.catalog)

    for element in elements:
        echo(f'{element.id}\t{element.type.value}\t{element.name}')


if __name__ == '__main__':
    cli()
