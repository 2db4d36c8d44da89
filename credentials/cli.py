"""CLI commands for API key management"""

import click

from core.exceptions import ValidationError
from .store import get_credential_accessor, KEY_PRESENT_STATUS


@click.group()
def key_cli():
    """API key commands"""
    pass


@key_cli.command(name="set")
@click.argument("token", required=False)
def set_key(token: str):
    """Store the OpenAI API key"""
    if not token:
        token = click.prompt("OpenAI API key", hide_input=True)

    try:
        message = get_credential_accessor().set(token)
    except ValidationError as e:
        click.echo(f"✗ {e}", err=True)
        raise click.Abort()

    click.echo(f"✓ {message}")


@key_cli.command(name="check")
@click.pass_context
def check_key(ctx: click.Context):
    """Report whether an API key is available"""
    status = get_credential_accessor().check()
    if status == KEY_PRESENT_STATUS:
        click.echo(status)
    else:
        click.echo(status, err=True)
        ctx.exit(1)
