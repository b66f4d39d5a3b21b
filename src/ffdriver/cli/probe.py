"""Probe commands: option support and media information."""

import json
from pathlib import Path

import click

from ffdriver.cli.context import get_ffmpeg
from ffdriver.cli.exit_codes import ExitCode
from ffdriver.exceptions import ProbeError, ProbeUnavailableError


@click.command("has-option", context_settings={"ignore_unknown_options": True})
@click.argument("name")
@click.pass_context
def has_option_command(ctx: click.Context, name: str) -> None:
    """Check whether ffprobe supports option NAME.

    NAME may be given with or without its leading dash
    (e.g. "show_format" or "-show_format").

    Exit codes:
      0 - Option supported
      1 - Option not supported
      31 - ffprobe cannot list its options
    """
    option = name if name.startswith("-") else f"-{name}"
    ffmpeg = get_ffmpeg(ctx)

    try:
        supported = ffmpeg.ffprobe.options_tester.supports(option)
    except ProbeUnavailableError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.PROBE_UNAVAILABLE)

    click.echo("yes" if supported else "no")
    ctx.exit(ExitCode.SUCCESS if supported else ExitCode.NOT_SUPPORTED)


@click.command("probe")
@click.argument(
    "path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.pass_context
def probe_command(ctx: click.Context, path: Path) -> None:
    """Print format and stream information for PATH as JSON."""
    ffmpeg = get_ffmpeg(ctx)

    try:
        probe_format = ffmpeg.ffprobe.format(path)
        streams = ffmpeg.ffprobe.streams(path)
    except ProbeUnavailableError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.PROBE_UNAVAILABLE)
    except ProbeError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.PROBE_ERROR)

    data = {
        "format": probe_format.to_dict(),
        "streams": [stream.to_dict() for stream in streams],
    }
    click.echo(json.dumps(data, indent=2))
