"""CLI module for ffdriver."""

import logging
from pathlib import Path

import click

from ffdriver.config import build_logging_config, get_config
from ffdriver.logging import configure_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="ffdriver")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.ffdriver/config.toml).",
)
@click.option(
    "--ffmpeg-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to the ffmpeg executable.",
)
@click.option(
    "--ffprobe-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to the ffprobe executable.",
)
@click.option(
    "--threads",
    type=click.IntRange(min=1),
    default=None,
    help="ffmpeg thread count (default: 2).",
)
@click.option(
    "--timeout",
    type=click.IntRange(min=0),
    default=None,
    help="Per-invocation timeout in seconds, 0 disables it (default: 300).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    ffmpeg_path: Path | None,
    ffprobe_path: Path | None,
    threads: int | None,
    timeout: int | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """ffdriver - probe and transcode audio with ffmpeg."""
    ctx.ensure_object(dict)

    # Preserve a config injected by tests
    if "config" not in ctx.obj:
        try:
            config = get_config(
                config_path=config_path,
                ffmpeg_path=ffmpeg_path,
                ffprobe_path=ffprobe_path,
                threads=threads,
                timeout=timeout,
            )
        except ValueError as e:
            raise click.UsageError(f"Invalid configuration: {e}") from e

        configure_logging(
            build_logging_config(
                config.logging,
                level=log_level,
                file=log_file,
                format="json" if log_json else None,
            )
        )
        ctx.obj["config"] = config

    logger.debug("ffdriver starting: %s", ctx.invoked_subcommand)


# Defer import to avoid circular dependency
def _register_commands():
    from ffdriver.cli.probe import has_option_command, probe_command
    from ffdriver.cli.transcode import transcode_command

    main.add_command(has_option_command)
    main.add_command(probe_command)
    main.add_command(transcode_command)


_register_commands()
