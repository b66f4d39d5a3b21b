"""Process drivers for the external ffmpeg/ffprobe binaries."""

from ffdriver.driver.binary import BinaryDriver
from ffdriver.driver.configuration import DriverConfiguration
from ffdriver.driver.ffmpeg import FFMpegDriver, FFProbeDriver
from ffdriver.driver.listeners import (
    STREAM_ERR,
    STREAM_OUT,
    DebugListener,
    Listener,
)

__all__ = [
    "BinaryDriver",
    "DebugListener",
    "DriverConfiguration",
    "FFMpegDriver",
    "FFProbeDriver",
    "Listener",
    "STREAM_ERR",
    "STREAM_OUT",
]
