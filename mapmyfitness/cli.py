import json
import xml.etree.ElementTree as ET

import click

from mapmyfitness.clients.api import MapMyFitnessClient
from mapmyfitness.config import Config
from mapmyfitness.database import init_db, list_owners
from mapmyfitness.exceptions import MapMyFitnessError
from mapmyfitness.logger import get_logger
from mapmyfitness.services.token_storage import DatabaseTokenStorage

# Out-of-band callback: the provider shows the verifier instead of redirecting
OOB_CALLBACK = "oob"


def _build_client(ctx, **overrides) -> MapMyFitnessClient:
    options = {
        "storage": DatabaseTokenStorage(ctx.obj["profile"]),
        "callback_url": Config.CALLBACK_URL or OOB_CALLBACK,
    }
    options.update(overrides)
    try:
        return MapMyFitnessClient.from_config(**options)
    except MapMyFitnessError as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


def _echo_body(body):
    if isinstance(body, ET.Element):
        click.echo(ET.tostring(body, encoding="unicode"))
    elif isinstance(body, str):
        click.echo(body)
    else:
        click.echo(json.dumps(body, indent=2, default=str))


def _parse_params(pairs):
    params = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="-p")
        key, value = pair.split("=", 1)
        params[key] = value
    return params


@click.group()
@click.option('--profile', default='default', help='Name under which tokens are stored')
@click.pass_context
def cli(ctx, profile):
    """MapMyFitness API command line client."""
    ctx.ensure_object(dict)
    ctx.obj["profile"] = profile
    get_logger("mapmyfitness")
    init_db()


@cli.command()
@click.option('--force', is_flag=True, help='Authorize again even if a token is stored')
@click.pass_context
def authorize(ctx, force):
    """Authorize this profile with MapMyFitness."""
    client = _build_client(ctx)
    if client.is_authorized() and not force:
        click.echo("Already authorized. Use --force to authorize again.")
        return

    try:
        # Fresh state store per process: the first step is always a Redirect
        result = client.init_session()
        click.echo("Open this URL and approve access:")
        click.echo(f"  {result.url}")
        verifier = click.prompt("Verifier")

        request_token = client.storage.retrieve_request_token()
        client.init_session({
            "oauth_token": request_token.token,
            "oauth_verifier": verifier.strip(),
        })
        click.echo(f"✓ Profile '{ctx.obj['profile']}' authorized")
    except MapMyFitnessError as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


@cli.command()
@click.pass_context
def status(ctx):
    """Show whether this profile is authorized."""
    client = _build_client(ctx)
    mark = "✓" if client.is_authorized() else "✗"
    state = "authorized" if client.is_authorized() else "not authorized"
    click.echo(f"{mark} {ctx.obj['profile']}: {state}")


@cli.command()
@click.pass_context
def logout(ctx):
    """Remove stored tokens for this profile."""
    _build_client(ctx).reset_session()
    click.echo(f"✓ Tokens for '{ctx.obj['profile']}' removed")


@cli.command()
def profiles():
    """List profiles holding an access token."""
    owners = list_owners()

    if not owners:
        click.echo("No authorized profiles.")
        return

    click.echo("\nAuthorized Profiles:")
    click.echo("-" * 50)
    for owner in owners:
        click.echo(f"✓ {owner['owner']:<20} updated {owner['updated_at']}")


@cli.command()
@click.option('--user-id', help='User to look up (default: authorized user)')
@click.option('--format', 'response_format', default='json',
              type=click.Choice(['json', 'xml', 'txt']))
@click.pass_context
def user(ctx, user_id, response_format):
    """Show a user profile."""
    client = _build_client(ctx, response_format=response_format)
    if user_id:
        client.set_user(user_id)
    try:
        _echo_body(client.get_user())
    except MapMyFitnessError as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


@cli.command()
@click.argument('path')
@click.option('-p', '--param', 'params', multiple=True, help='Parameter as key=value')
@click.option('--method', default='GET', type=click.Choice(['GET', 'POST', 'PUT', 'DELETE']))
@click.option('--format', 'response_format', default='json',
              type=click.Choice(['json', 'xml', 'txt']))
@click.pass_context
def call(ctx, path, params, method, response_format):
    """Call any API endpoint, e.g. `call workouts/get_workouts -p limit=5`."""
    parameters = _parse_params(params)
    parameters.setdefault("o", response_format)
    client = _build_client(ctx, response_format=response_format)
    try:
        response = client.custom_call(path, parameters, method=method)
    except MapMyFitnessError as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()

    click.echo(f"HTTP {response.code}")
    _echo_body(response.body)


@cli.command()
@click.option('--host', default=Config.WEB_HOST, help='Host to bind to')
@click.option('--port', default=Config.WEB_PORT, help='Port to bind to')
def web(host, port):
    """Start the web UI."""
    from mapmyfitness.web.app import create_app
    app = create_app()
    click.echo(f"Starting web server at http://{host}:{port}")
    app.run(host=host, port=port, debug=False)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
