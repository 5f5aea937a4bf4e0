from typing import Literal, Optional

from pydantic import BaseModel, Field


class TrackSummary(BaseModel):
    number: int = Field(..., description="TrackNumber referenced by SimpleBlock/Block headers.")
    uid: int = Field(..., description="TrackUID, unique across segments.")
    type: int = Field(..., description="Raw Matroska TrackType value.")
    kind: Literal["video", "audio", "subtitle", "other"] = Field(..., description="TrackType as a readable label.")
    codec_id: str = Field(..., description="Matroska CodecID, e.g. V_VP9 or A_OPUS.")
    name: Optional[str] = Field(None, description="Human-readable track name.")
    language: Optional[str] = Field(None, description="Track language code.")
    default_duration_ns: Optional[int] = Field(None, description="Default frame duration in nanoseconds.")
    pixel_width: Optional[int] = Field(None, description="Encoded video width in pixels.")
    pixel_height: Optional[int] = Field(None, description="Encoded video height in pixels.")
    sampling_frequency: Optional[float] = Field(None, description="Audio sampling frequency in Hz.")
    channels: Optional[int] = Field(None, description="Number of audio channels.")


class DocumentSummary(BaseModel):
    doc_type: str = Field(..., description="EBML DocType, e.g. webm or matroska.")
    doc_type_version: int = Field(..., description="DocType version the writer used.")
    timestamp_scale: int = Field(..., description="Nanoseconds per timestamp tick.")
    duration_ms: Optional[float] = Field(None, description="Segment duration in milliseconds.")
    title: Optional[str] = Field(None, description="Segment title.")
    muxing_app: Optional[str] = Field(None, description="Library that muxed the file.")
    writing_app: Optional[str] = Field(None, description="Application that wrote the file.")
    tracks: list[TrackSummary] = Field(default_factory=list, description="One entry per TrackEntry.")
    cluster_count: int = Field(0, description="Number of Cluster elements in the Segment.")
    cue_point_count: int = Field(0, description="Number of CuePoint elements in the Segment.")
