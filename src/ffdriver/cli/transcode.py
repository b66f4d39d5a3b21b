"""Transcode command."""

from pathlib import Path

import click

from ffdriver.cli.context import get_ffmpeg
from ffdriver.cli.exit_codes import ExitCode
from ffdriver.exceptions import (
    EncodingFailedError,
    FFDriverError,
    InvalidFormatError,
    ProbeUnavailableError,
)
from ffdriver.format.audio import FORMATS
from ffdriver.format.progress import ProgressEvent


def _parse_metadata(values: tuple[str, ...]) -> dict[str, str]:
    metadata: dict[str, str] = {}
    for value in values:
        key, sep, data = value.partition("=")
        if not sep or not key:
            raise click.BadParameter(
                f"expected KEY=VALUE, got {value!r}", param_hint="--metadata"
            )
        metadata[key] = data
    return metadata


def _echo_progress(event: ProgressEvent) -> None:
    click.echo(f"\rEncoding: {event.percent:3d}%", nl=False, err=True)


@click.command("transcode")
@click.argument(
    "input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.argument("output_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "format_name",
    type=click.Choice(sorted(FORMATS), case_sensitive=False),
    required=True,
    help="Output format.",
)
@click.option("--bitrate", type=int, default=None, help="Audio bitrate in kbps.")
@click.option("--channels", type=int, default=None, help="Output channel count.")
@click.option("--codec", default=None, help="Audio codec (format default if unset).")
@click.option("--resample", type=int, default=None, help="Resample to RATE Hz.")
@click.option(
    "--metadata",
    multiple=True,
    help="Metadata tag as KEY=VALUE (repeatable).",
)
@click.option("--progress", is_flag=True, help="Show encoding progress.")
@click.pass_context
def transcode_command(
    ctx: click.Context,
    input_path: Path,
    output_path: Path,
    format_name: str,
    bitrate: int | None,
    channels: int | None,
    codec: str | None,
    resample: int | None,
    metadata: tuple[str, ...],
    progress: bool,
) -> None:
    """Transcode audio INPUT_PATH into OUTPUT_PATH.

    Exit codes:
      0 - Success
      10 - Invalid format parameters
      20 - Input missing or without audio
      30/31 - ffmpeg/ffprobe unavailable
      40 - Encoding failed
    """
    tags = _parse_metadata(metadata)

    try:
        format_class = FORMATS[format_name.lower()]
        output_format = format_class(
            audio_codec=codec,
            audio_channels=channels,
        )
        if bitrate is not None:
            output_format.set_audio_kilo_bitrate(bitrate)
    except InvalidFormatError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.INVALID_FORMAT)

    if progress:
        output_format.on_progress(_echo_progress)

    ffmpeg = get_ffmpeg(ctx)
    try:
        audio = ffmpeg.open(input_path)
    except ProbeUnavailableError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.PROBE_UNAVAILABLE)
    except FFDriverError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.TARGET_NOT_FOUND)

    if resample is not None:
        audio.filters().resample(resample)
    if tags:
        audio.filters().add_metadata(tags)

    try:
        audio.save(output_format, output_path)
    except EncodingFailedError as e:
        if progress:
            click.echo(err=True)
        cause = e.__cause__
        detail = getattr(cause, "stderr", "").strip()
        click.echo(f"Error: {e}", err=True)
        if detail:
            click.echo(detail, err=True)
        ctx.exit(ExitCode.ENCODING_FAILED)

    if progress:
        click.echo(err=True)
    click.echo(f"Wrote {output_path}")
