"""Helpers shared by CLI commands."""

import click

from ffdriver.cli.exit_codes import ExitCode
from ffdriver.config.models import FFDriverConfig
from ffdriver.exceptions import BinaryNotFoundError
from ffdriver.ffmpeg import FFMpeg


def get_ffmpeg(ctx: click.Context) -> FFMpeg:
    """Build an FFMpeg from the configuration stored on the context.

    Exits with TOOL_NOT_AVAILABLE when a binary cannot be found.
    """
    config: FFDriverConfig = ctx.obj["config"]
    try:
        return FFMpeg.create(config)
    except BinaryNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        click.echo("Install ffmpeg: https://ffmpeg.org/download.html", err=True)
        ctx.exit(ExitCode.TOOL_NOT_AVAILABLE)
