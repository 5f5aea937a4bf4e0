"""
Element registry: identifier -> kind and identifier -> name.

The kind decides how an element's payload is read: containers are parsed
into child elements, everything else is kept as raw bytes and decoded on
access. Names are diagnostic only. Identifiers missing from the tables are
UNKNOWN and handled as opaque binary.
"""

from enum import Enum
from types import MappingProxyType

from ebmltree.ebml import ids


class ElementKind(Enum):
    CONTAINER = "container"
    UNSIGNED_INT = "uint"
    SIGNED_INT = "int"
    FLOAT = "float"
    STRING = "string"
    UTF8 = "utf-8"
    DATE = "date"
    BINARY = "binary"
    UNKNOWN = "unknown"


# Container elements (have children, not raw data)
_CONTAINER_IDS = frozenset(
    {
        ids.EBML_HEADER,
        ids.SIGNATURE_SLOT,
        ids.SIGNATURE_ELEMENTS,
        ids.SIGNATURE_ELEMENT_LIST,
        ids.SEGMENT,
        ids.SEEK_HEAD,
        ids.SEEK,
        ids.INFO,
        ids.CLUSTER,
        ids.BLOCK_GROUP,
        ids.SLICES,
        ids.TIME_SLICE,
        ids.TRACKS,
        ids.TRACK_ENTRY,
        ids.VIDEO,
        ids.PROJECTION,
        ids.AUDIO,
        ids.CONTENT_ENCODINGS,
        ids.CONTENT_ENCODING,
        ids.CONTENT_ENCRYPTION,
        ids.CONTENT_ENC_AES_SETTINGS,
        ids.CUES,
        ids.CUE_POINT,
        ids.CUE_TRACK_POSITIONS,
        ids.CHAPTERS,
        ids.EDITION_ENTRY,
        ids.CHAPTER_ATOM,
        ids.CHAPTER_DISPLAY,
        ids.TAGS,
        ids.TAG,
        ids.TARGETS,
        ids.SIMPLE_TAG,
    }
)

_UNSIGNED_IDS = frozenset(
    {
        ids.EBML_VERSION,
        ids.EBML_READ_VERSION,
        ids.EBML_MAX_ID_LENGTH,
        ids.EBML_MAX_SIZE_LENGTH,
        ids.DOC_TYPE_VERSION,
        ids.DOC_TYPE_READ_VERSION,
        ids.SIGNATURE_ALGO,
        ids.SIGNATURE_HASH,
        ids.SEEK_POSITION,
        ids.TIMESTAMP_SCALE,
        ids.CLUSTER_TIMESTAMP,
        ids.POSITION,
        ids.PREV_SIZE,
        ids.BLOCK_DURATION,
        ids.LACE_NUMBER,
        ids.TRACK_NUMBER,
        ids.TRACK_UID,
        ids.TRACK_TYPE,
        ids.FLAG_ENABLED,
        ids.FLAG_DEFAULT,
        ids.FLAG_FORCED,
        ids.FLAG_LACING,
        ids.DEFAULT_DURATION,
        ids.CODEC_DELAY,
        ids.SEEK_PRE_ROLL,
        ids.FLAG_INTERLACED,
        ids.STEREO_MODE,
        ids.ALPHA_MODE,
        ids.PIXEL_WIDTH,
        ids.PIXEL_HEIGHT,
        ids.PIXEL_CROP_BOTTOM,
        ids.PIXEL_CROP_TOP,
        ids.PIXEL_CROP_LEFT,
        ids.PIXEL_CROP_RIGHT,
        ids.DISPLAY_WIDTH,
        ids.DISPLAY_HEIGHT,
        ids.DISPLAY_UNIT,
        ids.ASPECT_RATIO_TYPE,
        ids.PROJECTION_TYPE,
        ids.CHANNELS,
        ids.BIT_DEPTH,
        ids.CONTENT_ENCODING_ORDER,
        ids.CONTENT_ENCODING_SCOPE,
        ids.CONTENT_ENCODING_TYPE,
        ids.CONTENT_ENC_ALGO,
        ids.AES_SETTINGS_CIPHER_MODE,
        ids.CUE_TIME,
        ids.CUE_TRACK,
        ids.CUE_CLUSTER_POSITION,
        ids.CUE_BLOCK_NUMBER,
        ids.CHAPTER_UID,
        ids.CHAPTER_TIME_START,
        ids.CHAPTER_TIME_END,
        ids.TARGET_TYPE_VALUE,
        ids.TAG_TRACK_UID,
        ids.TAG_DEFAULT,
    }
)

_SIGNED_IDS = frozenset({ids.REFERENCE_BLOCK, ids.DISCARD_PADDING})

_FLOAT_IDS = frozenset(
    {
        ids.DURATION,
        ids.TRACK_TIMESTAMP_SCALE,
        ids.SAMPLING_FREQUENCY,
        ids.OUTPUT_SAMPLING_FREQUENCY,
        ids.PROJECTION_POSE_YAW,
        ids.PROJECTION_POSE_PITCH,
        ids.PROJECTION_POSE_ROLL,
    }
)

_DATE_IDS = frozenset({ids.DATE_UTC})

# ASCII-restricted strings
_STRING_IDS = frozenset({ids.DOC_TYPE, ids.CODEC_ID, ids.LANGUAGE, ids.CHAP_LANGUAGE, ids.TARGET_TYPE, ids.TAG_LANGUAGE})

_UTF8_IDS = frozenset(
    {
        ids.TITLE,
        ids.MUXING_APP,
        ids.WRITING_APP,
        ids.NAME,
        ids.CODEC_NAME,
        ids.CHAPTER_STRING_UID,
        ids.CHAP_STRING,
        ids.TAG_NAME,
        ids.TAG_STRING,
    }
)

_BINARY_IDS = frozenset(
    {
        ids.CRC32,
        ids.VOID,
        ids.SIGNATURE_PUBLIC_KEY,
        ids.SIGNATURE,
        ids.SIGNED_ELEMENT,
        ids.SEEK_ID,
        ids.SEGMENT_UID,
        ids.SIMPLE_BLOCK,
        ids.BLOCK,
        ids.CODEC_PRIVATE,
        ids.PROJECTION_PRIVATE,
        ids.CONTENT_ENC_KEY_ID,
        ids.TAG_BINARY,
    }
)


def _build_kind_table() -> MappingProxyType:
    table = {}
    for kind, members in (
        (ElementKind.CONTAINER, _CONTAINER_IDS),
        (ElementKind.UNSIGNED_INT, _UNSIGNED_IDS),
        (ElementKind.SIGNED_INT, _SIGNED_IDS),
        (ElementKind.FLOAT, _FLOAT_IDS),
        (ElementKind.DATE, _DATE_IDS),
        (ElementKind.STRING, _STRING_IDS),
        (ElementKind.UTF8, _UTF8_IDS),
        (ElementKind.BINARY, _BINARY_IDS),
    ):
        for element_id in members:
            if element_id in table:
                raise ValueError(f"element 0x{element_id:X} classified twice")
            table[element_id] = kind
    return MappingProxyType(table)


ELEMENT_KINDS = _build_kind_table()

ELEMENT_NAMES = MappingProxyType(
    {
        # EBML header and global elements
        ids.EBML_HEADER: "EBML",
        ids.EBML_VERSION: "EBMLVersion",
        ids.EBML_READ_VERSION: "EBMLReadVersion",
        ids.EBML_MAX_ID_LENGTH: "EBMLMaxIDLength",
        ids.EBML_MAX_SIZE_LENGTH: "EBMLMaxSizeLength",
        ids.DOC_TYPE: "DocType",
        ids.DOC_TYPE_VERSION: "DocTypeVersion",
        ids.DOC_TYPE_READ_VERSION: "DocTypeReadVersion",
        ids.CRC32: "CRC-32",
        ids.VOID: "Void",
        ids.SIGNATURE_SLOT: "SignatureSlot",
        ids.SIGNATURE_ALGO: "SignatureAlgo",
        ids.SIGNATURE_HASH: "SignatureHash",
        ids.SIGNATURE_PUBLIC_KEY: "SignaturePublicKey",
        ids.SIGNATURE: "Signature",
        ids.SIGNATURE_ELEMENTS: "SignatureElements",
        ids.SIGNATURE_ELEMENT_LIST: "SignatureElementList",
        ids.SIGNED_ELEMENT: "SignedElement",
        # Segment
        ids.SEGMENT: "Segment",
        ids.SEEK_HEAD: "SeekHead",
        ids.SEEK: "Seek",
        ids.SEEK_ID: "SeekID",
        ids.SEEK_POSITION: "SeekPosition",
        ids.INFO: "Info",
        ids.SEGMENT_UID: "SegmentUID",
        ids.TIMESTAMP_SCALE: "TimestampScale",
        ids.DURATION: "Duration",
        ids.DATE_UTC: "DateUTC",
        ids.TITLE: "Title",
        ids.MUXING_APP: "MuxingApp",
        ids.WRITING_APP: "WritingApp",
        ids.CLUSTER: "Cluster",
        ids.CLUSTER_TIMESTAMP: "Timestamp",
        ids.POSITION: "Position",
        ids.PREV_SIZE: "PrevSize",
        ids.SIMPLE_BLOCK: "SimpleBlock",
        ids.BLOCK_GROUP: "BlockGroup",
        ids.BLOCK: "Block",
        ids.BLOCK_DURATION: "BlockDuration",
        ids.REFERENCE_BLOCK: "ReferenceBlock",
        ids.DISCARD_PADDING: "DiscardPadding",
        ids.SLICES: "Slices",
        ids.TIME_SLICE: "TimeSlice",
        ids.LACE_NUMBER: "LaceNumber",
        # Tracks
        ids.TRACKS: "Tracks",
        ids.TRACK_ENTRY: "TrackEntry",
        ids.TRACK_NUMBER: "TrackNumber",
        ids.TRACK_UID: "TrackUID",
        ids.TRACK_TYPE: "TrackType",
        ids.FLAG_ENABLED: "FlagEnabled",
        ids.FLAG_DEFAULT: "FlagDefault",
        ids.FLAG_FORCED: "FlagForced",
        ids.FLAG_LACING: "FlagLacing",
        ids.DEFAULT_DURATION: "DefaultDuration",
        ids.TRACK_TIMESTAMP_SCALE: "TrackTimestampScale",
        ids.NAME: "Name",
        ids.LANGUAGE: "Language",
        ids.CODEC_ID: "CodecID",
        ids.CODEC_PRIVATE: "CodecPrivate",
        ids.CODEC_NAME: "CodecName",
        ids.CODEC_DELAY: "CodecDelay",
        ids.SEEK_PRE_ROLL: "SeekPreRoll",
        ids.VIDEO: "Video",
        ids.FLAG_INTERLACED: "FlagInterlaced",
        ids.STEREO_MODE: "StereoMode",
        ids.ALPHA_MODE: "AlphaMode",
        ids.PIXEL_WIDTH: "PixelWidth",
        ids.PIXEL_HEIGHT: "PixelHeight",
        ids.PIXEL_CROP_BOTTOM: "PixelCropBottom",
        ids.PIXEL_CROP_TOP: "PixelCropTop",
        ids.PIXEL_CROP_LEFT: "PixelCropLeft",
        ids.PIXEL_CROP_RIGHT: "PixelCropRight",
        ids.DISPLAY_WIDTH: "DisplayWidth",
        ids.DISPLAY_HEIGHT: "DisplayHeight",
        ids.DISPLAY_UNIT: "DisplayUnit",
        ids.ASPECT_RATIO_TYPE: "AspectRatioType",
        ids.PROJECTION: "Projection",
        ids.PROJECTION_TYPE: "ProjectionType",
        ids.PROJECTION_PRIVATE: "ProjectionPrivate",
        ids.PROJECTION_POSE_YAW: "ProjectionPoseYaw",
        ids.PROJECTION_POSE_PITCH: "ProjectionPosePitch",
        ids.PROJECTION_POSE_ROLL: "ProjectionPoseRoll",
        ids.AUDIO: "Audio",
        ids.SAMPLING_FREQUENCY: "SamplingFrequency",
        ids.OUTPUT_SAMPLING_FREQUENCY: "OutputSamplingFrequency",
        ids.CHANNELS: "Channels",
        ids.BIT_DEPTH: "BitDepth",
        ids.CONTENT_ENCODINGS: "ContentEncodings",
        ids.CONTENT_ENCODING: "ContentEncoding",
        ids.CONTENT_ENCODING_ORDER: "ContentEncodingOrder",
        ids.CONTENT_ENCODING_SCOPE: "ContentEncodingScope",
        ids.CONTENT_ENCODING_TYPE: "ContentEncodingType",
        ids.CONTENT_ENCRYPTION: "ContentEncryption",
        ids.CONTENT_ENC_ALGO: "ContentEncAlgo",
        ids.CONTENT_ENC_KEY_ID: "ContentEncKeyID",
        ids.CONTENT_ENC_AES_SETTINGS: "ContentEncAESSettings",
        ids.AES_SETTINGS_CIPHER_MODE: "AESSettingsCipherMode",
        # Cues
        ids.CUES: "Cues",
        ids.CUE_POINT: "CuePoint",
        ids.CUE_TIME: "CueTime",
        ids.CUE_TRACK_POSITIONS: "CueTrackPositions",
        ids.CUE_TRACK: "CueTrack",
        ids.CUE_CLUSTER_POSITION: "CueClusterPosition",
        ids.CUE_BLOCK_NUMBER: "CueBlockNumber",
        # Chapters
        ids.CHAPTERS: "Chapters",
        ids.EDITION_ENTRY: "EditionEntry",
        ids.CHAPTER_ATOM: "ChapterAtom",
        ids.CHAPTER_UID: "ChapterUID",
        ids.CHAPTER_STRING_UID: "ChapterStringUID",
        ids.CHAPTER_TIME_START: "ChapterTimeStart",
        ids.CHAPTER_TIME_END: "ChapterTimeEnd",
        ids.CHAPTER_DISPLAY: "ChapterDisplay",
        ids.CHAP_STRING: "ChapString",
        ids.CHAP_LANGUAGE: "ChapLanguage",
        # Tags
        ids.TAGS: "Tags",
        ids.TAG: "Tag",
        ids.TARGETS: "Targets",
        ids.TARGET_TYPE_VALUE: "TargetTypeValue",
        ids.TARGET_TYPE: "TargetType",
        ids.TAG_TRACK_UID: "TagTrackUID",
        ids.SIMPLE_TAG: "SimpleTag",
        ids.TAG_NAME: "TagName",
        ids.TAG_LANGUAGE: "TagLanguage",
        ids.TAG_DEFAULT: "TagDefault",
        ids.TAG_STRING: "TagString",
        ids.TAG_BINARY: "TagBinary",
    }
)

UNKNOWN_NAME = "Unknown"


def kind_of(element_id: int) -> ElementKind:
    return ELEMENT_KINDS.get(element_id, ElementKind.UNKNOWN)


def name_of(element_id: int) -> str:
    return ELEMENT_NAMES.get(element_id, UNKNOWN_NAME)


def is_container(element_id: int) -> bool:
    return element_id in _CONTAINER_IDS
