"""
tpsp command.

Single pipeline: validate the service filter, fetch the statuses, filter,
render as a table or JSON. Every failure prints to stderr and exits 1.
"""

import sys

import click
import structlog

from tpsp.cli.client import fetch_line_statuses
from tpsp.cli.render import render_json, render_table
from tpsp.core.config import get_app_config
from tpsp.core.exceptions import ApplicationError, EmptyResultError, InvalidServiceError
from tpsp.core.logging import get_logger, setup_logging
from tpsp.services.line_status import filter_by_service, validate_service

PROG_NAME = "tpsp"

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

COPYRIGHT = """
The person who associated a work with this deed has dedicated the work to the
public domain by waiving all of his or her rights to the work worldwide under
copyright law, including all related and neighboring rights, to the extent
allowed by law.

You can copy, modify, distribute and perform the work, even for commercial
purposes, all without asking permission.

AFFIRMER OFFERS THE WORK AS-IS AND MAKES NO REPRESENTATIONS OR WARRANTIES OF
ANY KIND CONCERNING THE WORK, EXPRESS, IMPLIED, STATUTORY OR OTHERWISE,
INCLUDING WITHOUT LIMITATION WARRANTIES OF TITLE, MERCHANTABILITY, FITNESS FOR
A PARTICULAR PURPOSE, NON INFRINGEMENT, OR THE ABSENCE OF LATENT OR OTHER
DEFECTS, ACCURACY, OR THE PRESENT OR ABSENCE OF ERRORS, WHETHER OR NOT
DISCOVERABLE, ALL TO THE GREATEST EXTENT PERMISSIBLE UNDER APPLICABLE LAW.

For more information, please see
<http://creativecommons.org/publicdomain/zero/1.0/>
"""


class TpspCommand(click.Command):
    """Click command whose usage errors exit with status 1 instead of 2."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def _show_version(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    application = get_app_config().application
    click.echo(f"{application.name} ({application.version})")
    ctx.exit()


def _show_copyright(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(COPYRIGHT)
    ctx.exit()


@click.command(cls=TpspCommand, context_settings=CONTEXT_SETTINGS)
@click.argument("services", nargs=-1, metavar="[SERVICE]")
@click.option(
    "--json", "-j", "json_output",
    is_flag=True,
    help="Show the output in JSON format.",
)
@click.option(
    "--version", "-v",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_show_version,
    help="Show the program version and exit.",
)
@click.option(
    "--copyright",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_show_copyright,
    help="Show the copyright information and exit.",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug output (DEBUG level logging on stderr).",
)
def main(services: tuple[str, ...], json_output: bool, debug: bool) -> None:
    """
    tpsp (portuguese for "Sao Paulo public transportation") is a tiny
    command-line tool that tells you the current status of Metro, CPTM,
    ViaMobilidade, and ViaQuatro lines.

    \b
    Services:
        metro          Show Metro lines only
        cptm           Show CPTM lines only
        viamobilidade  Show ViaMobilidade lines only
        viaquatro      Show ViaQuatro lines only

    If no service is specified, all lines are shown. Only the first
    service is used; any further arguments are ignored.

    \b
    Examples:
        $ tpsp
        # => shows the current state of all lines
        $ tpsp metro
        # => shows the current state of all Metro lines
        $ tpsp cptm --json
        # => shows the current state of all CPTM lines in JSON format

    This is a Free and Open-Source Software (FOSS).
    Project page: <https://github.com/caian-org/tpsp>
    """
    try:
        setup_logging(level="DEBUG" if debug else None)
    except ApplicationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(source="cli")

    logger = get_logger(__name__)

    requested = services[0] if services else None
    logger.debug("CLI invoked", service=requested, ignored=list(services[1:]), json_output=json_output)

    try:
        service = validate_service(requested)
    except InvalidServiceError as e:
        click.echo(f"Error: {e.message}", err=True)
        click.echo(f"Valid services: {', '.join(e.valid_services)}", err=True)
        sys.exit(1)

    try:
        response = fetch_line_statuses()
        lines = filter_by_service(response.data, service)
        if not lines:
            raise EmptyResultError()
    except ApplicationError as e:
        logger.debug("Command failed", code=e.code, error=e.message)
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    logger.debug("Rendering lines", count=len(lines), format="json" if json_output else "table")

    click.echo()
    if json_output:
        click.echo(render_json(lines))
    else:
        click.echo(render_table(lines))


def run() -> None:
    """Console script entry point."""
    main(prog_name=PROG_NAME)
