"""
EBML and Matroska element identifiers.

Identifiers keep their length-prefix bits, exactly as they appear on the
wire (e.g. the EBML header is 0x1A45DFA3, read from the octets
``1A 45 DF A3``).
"""

# =============================================================================
# Stream signature
# =============================================================================

# Every EBML stream starts with the EBML header identifier
EBML_SIGNATURE = b"\x1a\x45\xdf\xa3"

# =============================================================================
# EBML header
# =============================================================================

EBML_HEADER = 0x1A45DFA3
EBML_VERSION = 0x4286
EBML_READ_VERSION = 0x42F7
EBML_MAX_ID_LENGTH = 0x42F2
EBML_MAX_SIZE_LENGTH = 0x42F3
DOC_TYPE = 0x4282
DOC_TYPE_VERSION = 0x4287
DOC_TYPE_READ_VERSION = 0x4285

# Global elements (may appear inside any container)
CRC32 = 0xBF
VOID = 0xEC

# Signatures
SIGNATURE_SLOT = 0x1B538667
SIGNATURE_ALGO = 0x7E8A
SIGNATURE_HASH = 0x7E9A
SIGNATURE_PUBLIC_KEY = 0x7EA5
SIGNATURE = 0x7EB5
SIGNATURE_ELEMENTS = 0x7E5B
SIGNATURE_ELEMENT_LIST = 0x7E7B
SIGNED_ELEMENT = 0x6532

# =============================================================================
# Matroska Segment
# =============================================================================

SEGMENT = 0x18538067

# SeekHead
SEEK_HEAD = 0x114D9B74
SEEK = 0x4DBB
SEEK_ID = 0x53AB
SEEK_POSITION = 0x53AC

# Info
INFO = 0x1549A966
SEGMENT_UID = 0x73A4
TIMESTAMP_SCALE = 0x2AD7B1
DURATION = 0x4489
DATE_UTC = 0x4461
TITLE = 0x7BA9
MUXING_APP = 0x4D80
WRITING_APP = 0x5741

# Cluster
CLUSTER = 0x1F43B675
CLUSTER_TIMESTAMP = 0xE7
POSITION = 0xA7
PREV_SIZE = 0xAB
SIMPLE_BLOCK = 0xA3
BLOCK_GROUP = 0xA0
BLOCK = 0xA1
BLOCK_DURATION = 0x9B
REFERENCE_BLOCK = 0xFB
DISCARD_PADDING = 0x75A2
SLICES = 0x8E
TIME_SLICE = 0xE8
LACE_NUMBER = 0xCC

# Tracks
TRACKS = 0x1654AE6B
TRACK_ENTRY = 0xAE
TRACK_NUMBER = 0xD7
TRACK_UID = 0x73C5
TRACK_TYPE = 0x83
FLAG_ENABLED = 0xB9
FLAG_DEFAULT = 0x88
FLAG_FORCED = 0x55AA
FLAG_LACING = 0x9C
DEFAULT_DURATION = 0x23E383
TRACK_TIMESTAMP_SCALE = 0x23314F
NAME = 0x536E
LANGUAGE = 0x22B59C
CODEC_ID = 0x86
CODEC_PRIVATE = 0x63A2
CODEC_NAME = 0x258688
CODEC_DELAY = 0x56AA
SEEK_PRE_ROLL = 0x56BB

# Video track settings
VIDEO = 0xE0
FLAG_INTERLACED = 0x9A
STEREO_MODE = 0x53B8
ALPHA_MODE = 0x53C0
PIXEL_WIDTH = 0xB0
PIXEL_HEIGHT = 0xBA
PIXEL_CROP_BOTTOM = 0x54AA
PIXEL_CROP_TOP = 0x54BB
PIXEL_CROP_LEFT = 0x54CC
PIXEL_CROP_RIGHT = 0x54DD
DISPLAY_WIDTH = 0x54B0
DISPLAY_HEIGHT = 0x54BA
DISPLAY_UNIT = 0x54B2
ASPECT_RATIO_TYPE = 0x54B3

# Video projection
PROJECTION = 0x7670
PROJECTION_TYPE = 0x7671
PROJECTION_PRIVATE = 0x7672
PROJECTION_POSE_YAW = 0x7673
PROJECTION_POSE_PITCH = 0x7674
PROJECTION_POSE_ROLL = 0x7675

# Audio track settings
AUDIO = 0xE1
SAMPLING_FREQUENCY = 0xB5
OUTPUT_SAMPLING_FREQUENCY = 0x78B5
CHANNELS = 0x9F
BIT_DEPTH = 0x6264

# Content encoding
CONTENT_ENCODINGS = 0x6D80
CONTENT_ENCODING = 0x6240
CONTENT_ENCODING_ORDER = 0x5031
CONTENT_ENCODING_SCOPE = 0x5032
CONTENT_ENCODING_TYPE = 0x5033
CONTENT_ENCRYPTION = 0x5035
CONTENT_ENC_ALGO = 0x47E1
CONTENT_ENC_KEY_ID = 0x47E2
CONTENT_ENC_AES_SETTINGS = 0x47E7
AES_SETTINGS_CIPHER_MODE = 0x47E8

# Cues
CUES = 0x1C53BB6B
CUE_POINT = 0xBB
CUE_TIME = 0xB3
CUE_TRACK_POSITIONS = 0xB7
CUE_TRACK = 0xF7
CUE_CLUSTER_POSITION = 0xF1
CUE_BLOCK_NUMBER = 0x5378

# Chapters
CHAPTERS = 0x1043A770
EDITION_ENTRY = 0x45B9
CHAPTER_ATOM = 0xB6
CHAPTER_UID = 0x73C4
CHAPTER_STRING_UID = 0x5654
CHAPTER_TIME_START = 0x91
CHAPTER_TIME_END = 0x92
CHAPTER_DISPLAY = 0x80
CHAP_STRING = 0x85
CHAP_LANGUAGE = 0x437C

# Tags
TAGS = 0x1254C367
TAG = 0x7373
TARGETS = 0x63C0
TARGET_TYPE_VALUE = 0x68CA
TARGET_TYPE = 0x63CA
TAG_TRACK_UID = 0x63C5
SIMPLE_TAG = 0x67C8
TAG_NAME = 0x45A3
TAG_LANGUAGE = 0x447A
TAG_DEFAULT = 0x4484
TAG_STRING = 0x4487
TAG_BINARY = 0x4485

# =============================================================================
# Matroska value constants
# =============================================================================

TRACK_TYPE_VIDEO = 1
TRACK_TYPE_AUDIO = 2
TRACK_TYPE_SUBTITLE = 17

# Nanoseconds per timestamp tick when Info omits TimestampScale
DEFAULT_TIMESTAMP_SCALE = 1_000_000
