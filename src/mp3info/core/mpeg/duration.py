"""Duration and average bit rate estimation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from mp3info.core.models import AudioStreamDescriptor, VbrSideInfo
from mp3info.core.mpeg.constants import LAYER_1_SAMPLES_PER_FRAME, LAYERS_23_SAMPLES_PER_FRAME


@dataclass(frozen=True, slots=True)
class DurationEstimate:
    frame_count: int
    duration: float
    bit_rate_bps: int


def samples_per_frame(layer: int) -> int:
    return LAYER_1_SAMPLES_PER_FRAME if layer == 1 else LAYERS_23_SAMPLES_PER_FRAME


def average_bit_rate(audio_size: int, frame_count: int, stream: AudioStreamDescriptor) -> int:
    """Bit rate that makes ``frame_count`` equal frames fill ``audio_size`` bytes.

    Inverse of ``frame_length``: Layer 1 frames hold 48 bytes per kbps-Hz unit
    (12 slots of 4 bytes), Layers 2 and 3 hold 144.
    Departs from the ``layer == 3 ? 12 : 144`` divisor; for Layer 1 it also
    differs from a fixed divisor of 144.
    """
    avg_frame_size = audio_size / frame_count
    divisor = 48 if stream.layer == 1 else 144
    return int(round(avg_frame_size * stream.sample_rate_hz / divisor))


def estimate(audio_size: int, stream: AudioStreamDescriptor, vbr: Optional[VbrSideInfo]) -> DurationEstimate:
    declared = vbr.frames_declared if vbr is not None else None
    if declared:
        frame_count = declared
    else:
        frame_count = math.ceil(audio_size / stream.frame_size_bytes) if audio_size > 0 else 0

    bit_rate = stream.bit_rate_bps
    if declared and vbr is not None and vbr.is_vbr:
        bit_rate = average_bit_rate(audio_size, declared, stream)

    duration = max(frame_count - 1, 0) * samples_per_frame(stream.layer) / stream.sample_rate_hz
    return DurationEstimate(frame_count=frame_count, duration=duration, bit_rate_bps=bit_rate)
