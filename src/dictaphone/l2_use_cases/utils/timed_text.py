"""Pure functions for rendering segments as TXT, SRT and WebVTT.

Timestamps are computed from integer milliseconds by successive division,
so a component can never round up to 60 s or 1000 ms. The milliseconds are
floored after rounding away binary float noise (``1.005 * 1000`` is
``1004.999...``), so values such as 1.005 s render exactly.
"""

from __future__ import annotations

import math
import re

from dictaphone.l1_entities.errors import TimestampParseError
from dictaphone.l1_entities.export_format import ExportFormat
from dictaphone.l1_entities.segment import Segment

VTT_HEADER = 'WEBVTT\n\n'

_TIMESTAMP_RE = re.compile(r'^(\d{2,}):(\d{2}):(\d{2})[,.](\d{3})$')
_CUE_TIMING_RE = re.compile(r'^(\S+) --> (\S+)')


def _split_ms(seconds: float) -> tuple[int, int, int, int]:
    total_ms = max(0, math.floor(round(seconds * 1000, 6)))
    hours, rem = divmod(total_ms, 3_600_000)
    minutes, rem = divmod(rem, 60_000)
    secs, ms = divmod(rem, 1000)
    return hours, minutes, secs, ms


def format_display_time(seconds: float) -> str:
    """MM:SS with no hour component; minutes keep counting past 59."""
    hours, minutes, secs, _ = _split_ms(seconds)
    return f'{hours * 60 + minutes:02d}:{secs:02d}'


def format_srt_time(seconds: float) -> str:
    hours, minutes, secs, ms = _split_ms(seconds)
    return f'{hours:02d}:{minutes:02d}:{secs:02d},{ms:03d}'


def format_vtt_time(seconds: float) -> str:
    hours, minutes, secs, ms = _split_ms(seconds)
    return f'{hours:02d}:{minutes:02d}:{secs:02d}.{ms:03d}'


def parse_timestamp(value: str) -> float:
    """Parse ``HH:MM:SS,mmm`` or ``HH:MM:SS.mmm`` back to seconds."""
    match = _TIMESTAMP_RE.match(value.strip())
    if match is None:
        raise TimestampParseError(f'Malformed timestamp: {value!r}')
    hours, minutes, secs, ms = (int(part) for part in match.groups())
    if minutes >= 60 or secs >= 60:
        raise TimestampParseError(f'Out-of-range timestamp: {value!r}')
    total_ms = ((hours * 60 + minutes) * 60 + secs) * 1000 + ms
    return total_ms / 1000


def parse_cue_times(document: str) -> list[tuple[float, float]]:
    """Extract (start, end) pairs from every cue timing line of an SRT/VTT document."""
    times: list[tuple[float, float]] = []
    for line in document.splitlines():
        match = _CUE_TIMING_RE.match(line)
        if match:
            times.append((parse_timestamp(match.group(1)), parse_timestamp(match.group(2))))
    return times


def exportable(segments: list[Segment], *, use_translated: bool = False) -> list[tuple[Segment, str]]:
    """Pair each segment with its export text, dropping segments whose text is empty."""
    pairs: list[tuple[Segment, str]] = []
    for seg in segments:
        text = seg.display_text(use_translated=use_translated)
        if text and text.strip():
            pairs.append((seg, text))
    return pairs


def render_txt(segments: list[Segment], *, use_translated: bool = False) -> str:
    return '\n'.join(
        f'[{format_display_time(seg.start_time)} - {format_display_time(seg.end_time)}] {text}'
        for seg, text in exportable(segments, use_translated=use_translated)
    )


def render_srt(segments: list[Segment], *, use_translated: bool = False) -> str:
    cues = [
        f'{i}\n{format_srt_time(seg.start_time)} --> {format_srt_time(seg.end_time)}\n{text}\n'
        for i, (seg, text) in enumerate(exportable(segments, use_translated=use_translated), start=1)
    ]
    return '\n'.join(cues)


def render_vtt(segments: list[Segment], *, use_translated: bool = False) -> str:
    cues = [
        f'{format_vtt_time(seg.start_time)} --> {format_vtt_time(seg.end_time)}\n{text}'
        for seg, text in exportable(segments, use_translated=use_translated)
    ]
    return VTT_HEADER + '\n\n'.join(cues)


_RENDERERS = {
    ExportFormat.TXT: render_txt,
    ExportFormat.SRT: render_srt,
    ExportFormat.VTT: render_vtt,
}


def render(segments: list[Segment], fmt: ExportFormat, *, use_translated: bool = False) -> str:
    """Render *segments* in *fmt*. An empty list yields an empty (but valid) document."""
    return _RENDERERS[fmt](segments, use_translated=use_translated)
