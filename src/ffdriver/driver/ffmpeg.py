"""Drivers for the ffmpeg and ffprobe binaries."""

from ffdriver.driver.binary import BinaryDriver


class FFMpegDriver(BinaryDriver):
    """Driver for the ffmpeg encoder."""

    name = "ffmpeg"
    binaries_key = "ffmpeg.binaries"
    default_binaries = ("ffmpeg",)


class FFProbeDriver(BinaryDriver):
    """Driver for the ffprobe prober."""

    name = "ffprobe"
    binaries_key = "ffprobe.binaries"
    default_binaries = ("ffprobe",)
