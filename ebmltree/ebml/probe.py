"""
Metadata probing over a parsed document.

Provides:
- seek_positions: SeekHead entries as absolute byte offsets
- build_cue_index: time-to-byte-offset map built from Cues
- summarize: JSON-ready DocumentSummary of header, info and tracks
"""

import bisect
import logging
from dataclasses import dataclass, field

from ebmltree.ebml import ids
from ebmltree.ebml.views import Info, Segment, TrackEntry
from ebmltree.schemas import DocumentSummary, TrackSummary

logger = logging.getLogger(__name__)

_TRACK_KINDS = {
    ids.TRACK_TYPE_VIDEO: "video",
    ids.TRACK_TYPE_AUDIO: "audio",
    ids.TRACK_TYPE_SUBTITLE: "subtitle",
}


@dataclass
class CueIndex:
    """Seek index extracted from a Segment's Cues."""

    timestamp_scale: int = ids.DEFAULT_TIMESTAMP_SCALE  # nanoseconds per tick
    duration_ms: float = 0.0
    segment_data_offset: int = 0  # Absolute offset where Segment children begin
    cue_points: list[tuple[float, int]] = field(default_factory=list)  # [(time_ms, cluster_offset), ...]

    def byte_offset_for_time(self, time_ms: float) -> tuple[int, float]:
        """
        Find the cluster for the nearest cue point at or before time_ms.

        Returns:
            (absolute_byte_offset, cue_time_ms); (0, 0.0) when there are no cues.
        """
        if not self.cue_points:
            return 0, 0.0

        times = [cp[0] for cp in self.cue_points]
        idx = max(bisect.bisect_right(times, time_ms) - 1, 0)

        cue_time_ms, cluster_offset = self.cue_points[idx]
        # cluster_offset is relative to Segment data start
        return self.segment_data_offset + cluster_offset, cue_time_ms


def _first_info(segment: Segment) -> Info | None:
    infos = segment.infos()
    if len(infos) > 1:
        logger.warning("[ebml] Segment has %d Info elements, using the first", len(infos))
    return infos[0] if infos else None


def seek_positions(segment: Segment) -> dict[int, int]:
    """
    Map element IDs listed in the SeekHeads to absolute byte offsets.

    When an ID is listed more than once the first entry wins.
    """
    positions = {}
    for seek_head in segment.seek_heads():
        for seek in seek_head.seeks():
            positions.setdefault(seek.seek_element_id(), segment.element.data_offset + seek.seek_position())
    return positions


def build_cue_index(segment: Segment) -> CueIndex:
    """Build a CueIndex from the Segment's Info and Cues elements."""
    info = _first_info(segment)
    timestamp_scale = info.timestamp_scale() if info is not None else ids.DEFAULT_TIMESTAMP_SCALE
    scale_ms = timestamp_scale / 1_000_000
    duration_ticks = (info.duration() if info is not None else None) or 0.0

    cue_points = []
    for cues in segment.cues():
        for cue_point in cues.cue_points():
            positions = cue_point.track_positions()
            if not positions:
                continue
            # Take the first track's position
            cue_points.append((cue_point.time() * scale_ms, positions[0].cluster_position()))
    cue_points.sort(key=lambda x: x[0])

    index = CueIndex(
        timestamp_scale=timestamp_scale,
        duration_ms=duration_ticks * scale_ms,
        segment_data_offset=segment.element.data_offset,
        cue_points=cue_points,
    )
    logger.debug(
        "[ebml] Built cue index: duration=%.1fs, %d cue points, segment_offset=%d",
        index.duration_ms / 1000,
        len(cue_points),
        index.segment_data_offset,
    )
    return index


def _summarize_track(entry: TrackEntry) -> TrackSummary:
    track_type = entry.track_type()
    video = entry.video()
    audio = entry.audio()
    return TrackSummary(
        number=entry.track_number(),
        uid=entry.track_uid(),
        type=track_type,
        kind=_TRACK_KINDS.get(track_type, "other"),
        codec_id=entry.codec_id(),
        name=entry.name(),
        language=entry.language(),
        default_duration_ns=entry.default_duration(),
        pixel_width=video.pixel_width() if video is not None else None,
        pixel_height=video.pixel_height() if video is not None else None,
        sampling_frequency=audio.sampling_frequency() if audio is not None else None,
        channels=audio.channels() if audio is not None else None,
    )


def summarize(document) -> DocumentSummary:
    """Collect header, Info and track metadata into a DocumentSummary."""
    segment = document.root
    info = _first_info(segment)
    timestamp_scale = info.timestamp_scale() if info is not None else ids.DEFAULT_TIMESTAMP_SCALE
    duration = info.duration() if info is not None else None

    tracks = [_summarize_track(entry) for tracks in segment.tracks() for entry in tracks.track_entries()]
    return DocumentSummary(
        doc_type=document.header.doc_type(),
        doc_type_version=document.header.doc_type_version(),
        timestamp_scale=timestamp_scale,
        duration_ms=duration * timestamp_scale / 1_000_000 if duration is not None else None,
        title=info.title() if info is not None else None,
        muxing_app=info.muxing_app() if info is not None else None,
        writing_app=info.writing_app() if info is not None else None,
        tracks=tracks,
        cluster_count=len(segment.clusters()),
        cue_point_count=sum(len(cues.cue_points()) for cues in segment.cues()),
    )
