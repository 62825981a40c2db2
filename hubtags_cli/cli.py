"""CLI entry point for hubtags-cli."""

from __future__ import annotations

import logging
import sys

import click

from hubtags_cli import actions
from hubtags_cli.config import Settings
from hubtags_cli.digest.pipeline import run
from hubtags_cli.registry.client import HubClient

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Enable verbose (DEBUG) logging.",
)
def main(verbose: bool) -> None:
    """hubtags-cli — Docker Hub tag digest CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument("image", required=False, envvar="INPUT_IMAGE")
@click.option(
    "--max-pages",
    envvar="INPUT_MAX_PAGES",
    default=None,
    help="Stop after this many pages; 0 fetches all (default: 0).",
)
@click.option(
    "-n",
    "--number-of-tags",
    envvar="INPUT_NUMBER_OF_TAGS",
    default=None,
    help="Number of MAJOR.MINOR groups to report (default: 2).",
)
@click.option(
    "--output-name",
    envvar="INPUT_OUTPUT_NAME",
    default="tags",
    show_default=True,
    help="Name of the step output receiving the result.",
)
@click.option(
    "--pretty/--no-pretty",
    default=True,
    help="Pretty-print the JSON when writing to stdout (default: on).",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="HTTP timeout in seconds (default: none).",
)
def digest(
    image: str | None,
    max_pages: str | None,
    number_of_tags: str | None,
    output_name: str,
    pretty: bool,
    timeout: float | None,
) -> None:
    """Report the newest version groups of IMAGE and their platforms.

    IMAGE is a Docker Hub reference such as ``nginx`` or
    ``nginxinc/nginx-unprivileged``. It can also be given through the
    ``INPUT_IMAGE`` environment variable.
    """
    settings = Settings.from_inputs(image, max_pages, number_of_tags)
    try:
        click.echo(
            f"Digesting tags of {settings.image or '<missing>'} "
            f"(max_pages={settings.max_pages}, number_of_tags={settings.number_of_tags})",
            err=True,
        )
        result = run(settings, HubClient(timeout=timeout))
        actions.set_output(output_name, result, pretty=pretty)
    except Exception as exc:
        logger.debug("Digest failed", exc_info=True)
        actions.set_failed(str(exc))
        raise click.ClickException(str(exc)) from exc


@main.command()
def version() -> None:
    """Print the installed version."""
    from importlib.metadata import version as dist_version

    click.echo(f"hubtags-cli version {dist_version('hubtags-cli')}")


if __name__ == "__main__":
    main()
