"""Commands that run the long-lived processes."""

import os
import subprocess
import sys

import click

from shotsto30.config import Config


def _config(ctx) -> Config:
    return (ctx.obj or {}).get('config') or Config.from_env()


@click.command()
@click.option('--host', default='127.0.0.1', help='Bind address')
@click.option('--port', default=8000, type=int, help='Port to listen on')
@click.option('--reload', is_flag=True, help='Reload on code changes')
@click.pass_context
def serve(ctx, host, port, reload):
    """Run the HTTP API."""
    import uvicorn

    config = _config(ctx)
    # The app builds its own Config from the environment at import
    if config.uses_proxy:
        os.environ['NBA_STATS_PROXY_URL'] = config.api.proxy_url
    else:
        os.environ.pop('NBA_STATS_PROXY_URL', None)
    mode = f"proxy {config.api.proxy_url}" if config.uses_proxy else "direct"
    click.echo(f"Serving API on http://{host}:{port} (stats.nba.com: {mode})")
    uvicorn.run('shotsto30.web.app:app', host=host, port=port, reload=reload)


@click.command()
@click.option('--host', default='0.0.0.0', help='Bind address')
@click.option('--port', default=None, type=int, help='Port to listen on (default: $PORT or 8080)')
@click.pass_context
def proxy(ctx, host, port):
    """Run the stats.nba.com forwarding proxy."""
    import uvicorn

    port = port or _config(ctx).proxy_port
    click.echo(f"NBA Stats proxy listening on port {port}")
    uvicorn.run('shotsto30.proxy.server:app', host=host, port=port)


@click.command()
@click.option('--port', default=8501, type=int, help='Streamlit port')
def ui(port):
    """Launch the Streamlit page."""
    app_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'ui', 'app.py')
    command = [sys.executable, '-m', 'streamlit', 'run', app_path, '--server.port', str(port)]
    click.echo(f"Starting UI: {' '.join(command)}")
    sys.exit(subprocess.call(command))
