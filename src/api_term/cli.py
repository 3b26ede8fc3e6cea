"""CLI entry point for api-term."""

import logging
from pathlib import Path

import click

from api_term.config import DEFAULT_BASE_URL, DEFAULT_OPENAPI_FILE, Config, parse_global_params
from api_term.parser.loader import load_catalog
from api_term.tui.app import ApiTermApp
from api_term.tui.session import Session

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(log_file: Path | None, verbose: bool) -> None:
    # The UI owns the terminal, so anything below WARNING only goes to a file.
    if log_file is not None:
        level = logging.DEBUG if verbose else logging.INFO
        logging.basicConfig(filename=str(log_file), level=level, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)


@click.command()
@click.option("--base-url", default=DEFAULT_BASE_URL, show_default=True, envvar="API_TERM_BASE_URL", help="Base URL requests are sent to.")
@click.option("-f", "--file", "openapi_file", default=DEFAULT_OPENAPI_FILE, show_default=True, envvar="API_TERM_FILE", help="Path to an OpenAPI file.")
@click.option("-u", "--url", "urls", multiple=True, help="URL of an OpenAPI spec (can be repeated).")
@click.option("-q", "--query", "queries", multiple=True, help="Global query param key=value (can be repeated).")
@click.option("--sort/--no-sort", "sort_endpoints", default=False, help="Sort endpoints by path and method.")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write logs to this file.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output (with --log-file).")
def main(
    base_url: str,
    openapi_file: str,
    urls: tuple[str, ...],
    queries: tuple[str, ...],
    sort_endpoints: bool,
    log_file: Path | None,
    verbose: bool,
):
    """Browse the endpoints of an OpenAPI spec and invoke them from the terminal."""
    _configure_logging(log_file, verbose)

    config = Config(
        base_url=base_url,
        openapi_file=openapi_file,
        openapi_urls=list(urls),
        global_query_params=parse_global_params(queries),
        sort_endpoints=sort_endpoints,
    )

    endpoints = load_catalog([config.openapi_file], config.openapi_urls, sort=config.sort_endpoints)
    if not endpoints:
        sources = ", ".join([config.openapi_file, *config.openapi_urls])
        raise click.ClickException(f"No endpoints could be loaded from: {sources}")

    session = Session(config, endpoints)
    try:
        ApiTermApp(session).run()
    finally:
        session.close()
