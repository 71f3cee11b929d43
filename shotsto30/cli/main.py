"""
Shots to 30 CLI

Unified command-line interface for the API, the proxy, the UI and quick lookups.

Usage:
    shotsto30 [OPTIONS] COMMAND [ARGS]...

Commands:
    serve     Run the HTTP API
    proxy     Run the stats.nba.com forwarding proxy
    ui        Launch the Streamlit page
    player    Player search and shots-to-30 lookups
"""

import click
import logging
import sys
from dotenv import load_dotenv

from shotsto30.config import Config

# Load .env file
load_dotenv()


def setup_logging(verbose: bool):
    """Configure logging to output to stdout."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


@click.group()
@click.option('--proxy-url', default=None, help='stats.nba.com proxy (overrides NBA_STATS_PROXY_URL)')
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, proxy_url, verbose, quiet):
    """Shots to 30 - how many shots a player needs to score 30."""
    if quiet:
        logging.basicConfig(level=logging.WARNING, format='%(message)s')
    else:
        setup_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    config = Config.from_env()
    if proxy_url is not None:
        config.api.proxy_url = proxy_url.strip() or None
    ctx.obj['config'] = config


# Import and register commands
from .serve import serve, proxy, ui
from .player import player

cli.add_command(serve)
cli.add_command(proxy)
cli.add_command(ui)
cli.add_command(player)


if __name__ == '__main__':
    cli()
