"""Encoding progress reporting.

ffmpeg reports progress on stderr in lines such as:
size=     256kB time=00:00:16.32 bitrate= 128.5kbits/s speed=32.6x

AudioProgressListener parses these lines while a save runs and turns them
into ProgressEvent notifications relative to the input's probed duration.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ffdriver.driver.listeners import STREAM_ERR
from ffdriver.exceptions import FFDriverError

if TYPE_CHECKING:
    from ffdriver.probe.ffprobe import FFProbe

logger = logging.getLogger(__name__)

_TIME_PATTERN = re.compile(r"time=\s*(\d+):(\d+):(\d+(?:\.\d+)?)")
_SIZE_PATTERN = re.compile(r"size=\s*(\d+)\s*[kK]i?B")
_BITRATE_PATTERN = re.compile(r"bitrate=\s*([\d.]+)\s*kbits/s")
_SPEED_PATTERN = re.compile(r"speed=\s*([\d.]+)x")


@dataclass
class ProgressSample:
    """One parsed ffmpeg stderr progress line."""

    out_time_seconds: float
    size_kb: int | None = None
    bitrate_kbps: float | None = None
    speed: float | None = None


@dataclass
class ProgressEvent:
    """Progress notification delivered to callbacks."""

    percent: int
    remaining_seconds: float | None
    rate_kbps: float | None
    current_pass: int
    total_passes: int


ProgressCallback = Callable[[ProgressEvent], None]


def parse_progress_line(line: str) -> ProgressSample | None:
    """Parse an ffmpeg stderr progress line.

    Returns:
        ProgressSample, or None if the line carries no time= field.
    """
    time_match = _TIME_PATTERN.search(line)
    if not time_match:
        return None

    hours, minutes, seconds = time_match.groups()
    sample = ProgressSample(
        out_time_seconds=int(hours) * 3600 + int(minutes) * 60 + float(seconds)
    )

    if size_match := _SIZE_PATTERN.search(line):
        sample.size_kb = int(size_match.group(1))
    if bitrate_match := _BITRATE_PATTERN.search(line):
        sample.bitrate_kbps = float(bitrate_match.group(1))
    if speed_match := _SPEED_PATTERN.search(line):
        sample.speed = float(speed_match.group(1))

    return sample


class AudioProgressListener:
    """Listener turning ffmpeg stderr into ProgressEvents.

    The total duration comes from the constructor or, when zero, from
    probing the input the first time a progress line arrives. Events are
    only emitted when the overall percentage changes.
    """

    def __init__(
        self,
        ffprobe: FFProbe,
        path: Path | str,
        current_pass: int = 1,
        total_passes: int = 1,
        duration: float = 0.0,
        callbacks: Iterable[ProgressCallback] = (),
    ) -> None:
        self.ffprobe = ffprobe
        self.path = path
        self.current_pass = current_pass
        self.total_passes = total_passes
        self.duration = duration
        self.callbacks = list(callbacks)
        self.last_percent: int | None = None
        self._duration_probed = duration > 0

    def on_progress(self, callback: ProgressCallback) -> None:
        self.callbacks.append(callback)

    def _total_duration(self) -> float:
        if not self._duration_probed:
            self._duration_probed = True
            try:
                self.duration = self.ffprobe.format(self.path).duration or 0.0
            except FFDriverError as e:
                logger.warning("Could not probe duration of %s: %s", self.path, e)
        return self.duration

    def handle(self, stream: str, line: str) -> None:
        if stream != STREAM_ERR:
            return

        sample = parse_progress_line(line)
        if sample is None:
            return

        duration = self._total_duration()
        if duration <= 0:
            return

        pass_percent = min(100.0, sample.out_time_seconds / duration * 100)
        percent = int(
            ((self.current_pass - 1) * 100 + pass_percent) / self.total_passes
        )
        if percent == self.last_percent:
            return
        self.last_percent = percent

        remaining: float | None = None
        if sample.speed:
            remaining = max(0.0, duration - sample.out_time_seconds) / sample.speed

        event = ProgressEvent(
            percent=percent,
            remaining_seconds=remaining,
            rate_kbps=sample.bitrate_kbps,
            current_pass=self.current_pass,
            total_passes=self.total_passes,
        )
        for callback in self.callbacks:
            callback(event)
