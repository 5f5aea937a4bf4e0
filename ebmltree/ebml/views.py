"""
Typed, read-only views over generic element nodes.

Each view class narrows a Node to one Matroska container and exposes only
the getters valid for it. Getters are declared as a field table:

    class Info(View):
        element_id = ids.INFO
        timestamp_scale = Mandatory(ids.TIMESTAMP_SCALE)
        duration = OptionalField(ids.DURATION)

and are called as methods (``info.timestamp_scale()``). Lookups only look
at direct children. Scalar payloads are decoded according to the registry
kind; container children are wrapped in their own view class.

- Mandatory: first matching child; MissingFieldError when absent.
- OptionalField: first matching child or None.
- Repeated: every matching child in document order (possibly empty).
"""

from dataclasses import dataclass
from datetime import datetime
from functools import partial
from typing import Callable

from ebmltree.ebml import ids
from ebmltree.ebml.blocks import Block, parse_block
from ebmltree.ebml.codec import bytes_to_uint
from ebmltree.ebml.errors import MissingFieldError
from ebmltree.ebml.registry import ElementKind
from ebmltree.ebml.tree import Element, Node

# Element ID -> view class, filled in as view classes are defined
VIEW_TYPES: dict[int, type["View"]] = {}


def as_bool(element: Element) -> bool:
    """Flag decoding: only an integer value of exactly 1 is True."""
    return element.data.to_bool()


def narrow(node: Node):
    """Wrap a node in its registered view class, or return it unchanged."""
    view_type = VIEW_TYPES.get(node.id)
    return view_type(node) if view_type is not None else node


class _Field:
    def __init__(self, element_id: int, decode: Callable[[Element], object] | None = None):
        self.element_id = element_id
        self.decode = decode
        self.name = ""

    def __set_name__(self, owner, name: str) -> None:
        self.name = name

    def __get__(self, view, owner=None):
        if view is None:
            return self
        return partial(self.lookup, view)

    def convert(self, node: Node):
        if self.decode is not None:
            return self.decode(node.element)
        if node.kind is ElementKind.CONTAINER:
            return narrow(node)
        return node.element.value()

    def lookup(self, view: "View"):
        raise NotImplementedError


class Mandatory(_Field):
    def lookup(self, view: "View"):
        node = view.node.find(self.element_id)
        if node is None:
            raise MissingFieldError(type(view).__name__, self.name, self.element_id, offset=view.node.element.offset)
        return self.convert(node)


class OptionalField(_Field):
    def lookup(self, view: "View"):
        node = view.node.find(self.element_id)
        return self.convert(node) if node is not None else None


class Repeated(_Field):
    def lookup(self, view: "View") -> list:
        return [self.convert(node) for node in view.node.find_all(self.element_id)]


@dataclass(frozen=True, repr=False)
class View:
    """Base class of every typed view; ``node`` is the wrapped container."""

    node: Node

    element_id = 0

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        VIEW_TYPES[cls.element_id] = cls

    @property
    def element(self) -> Element:
        return self.node.element

    @property
    def children(self) -> tuple[Node, ...]:
        return self.node.children

    def __repr__(self) -> str:
        return f"{type(self).__name__}(offset={self.element.offset}, size={self.element.size})"

    def __str__(self) -> str:
        return str(self.node)


# =============================================================================
# EBML header and signatures
# =============================================================================


class EBMLHeader(View):
    element_id = ids.EBML_HEADER

    version = Mandatory(ids.EBML_VERSION)
    read_version = Mandatory(ids.EBML_READ_VERSION)
    max_id_length = Mandatory(ids.EBML_MAX_ID_LENGTH)
    max_size_length = Mandatory(ids.EBML_MAX_SIZE_LENGTH)
    doc_type = Mandatory(ids.DOC_TYPE)
    doc_type_version = Mandatory(ids.DOC_TYPE_VERSION)
    doc_type_read_version = Mandatory(ids.DOC_TYPE_READ_VERSION)


class SignatureSlot(View):
    element_id = ids.SIGNATURE_SLOT

    algo = OptionalField(ids.SIGNATURE_ALGO)
    hash = OptionalField(ids.SIGNATURE_HASH)
    public_key = OptionalField(ids.SIGNATURE_PUBLIC_KEY)
    signature = OptionalField(ids.SIGNATURE)
    elements = OptionalField(ids.SIGNATURE_ELEMENTS)


class SignatureElements(View):
    element_id = ids.SIGNATURE_ELEMENTS

    element_lists = Repeated(ids.SIGNATURE_ELEMENT_LIST)


class SignatureElementList(View):
    element_id = ids.SIGNATURE_ELEMENT_LIST

    signed_elements = Repeated(ids.SIGNED_ELEMENT)


# =============================================================================
# Segment and meta seek
# =============================================================================


class Segment(View):
    element_id = ids.SEGMENT

    seek_heads = Repeated(ids.SEEK_HEAD)
    infos = Repeated(ids.INFO)
    clusters = Repeated(ids.CLUSTER)
    tracks = Repeated(ids.TRACKS)
    cues = Repeated(ids.CUES)
    chapters = Repeated(ids.CHAPTERS)
    tags = Repeated(ids.TAGS)
    signature_slots = Repeated(ids.SIGNATURE_SLOT)


class SeekHead(View):
    element_id = ids.SEEK_HEAD

    seeks = Repeated(ids.SEEK)


class Seek(View):
    element_id = ids.SEEK

    seek_id = Mandatory(ids.SEEK_ID)
    seek_position = Mandatory(ids.SEEK_POSITION)

    def seek_element_id(self) -> int:
        """SeekID as an element ID (it is stored as the ID's raw bytes)."""
        return bytes_to_uint(self.seek_id())


# =============================================================================
# Segment information
# =============================================================================


class Info(View):
    element_id = ids.INFO

    timestamp_scale = Mandatory(ids.TIMESTAMP_SCALE)
    duration = OptionalField(ids.DURATION)
    date_created = OptionalField(ids.DATE_UTC)
    muxing_app = Mandatory(ids.MUXING_APP)
    writing_app = Mandatory(ids.WRITING_APP)
    segment_uid = OptionalField(ids.SEGMENT_UID)
    title = OptionalField(ids.TITLE)

    def date_created_utc(self) -> datetime | None:
        node = self.node.find(ids.DATE_UTC)
        return node.element.data.to_datetime() if node is not None else None


# =============================================================================
# Clusters
# =============================================================================


class Cluster(View):
    element_id = ids.CLUSTER

    timestamp = Mandatory(ids.CLUSTER_TIMESTAMP)
    position = OptionalField(ids.POSITION)
    prev_size = OptionalField(ids.PREV_SIZE)
    simple_blocks = Repeated(ids.SIMPLE_BLOCK)
    block_groups = Repeated(ids.BLOCK_GROUP)

    def blocks(self) -> list[Block]:
        """SimpleBlocks and BlockGroup Blocks parsed into frames, in document order."""
        blocks = []
        for child in self.children:
            if child.id == ids.SIMPLE_BLOCK:
                blocks.append(parse_block(child.element.data.to_bytes()))
            elif child.id == ids.BLOCK_GROUP:
                blocks.append(BlockGroup(child).parsed_block())
        return blocks


class BlockGroup(View):
    element_id = ids.BLOCK_GROUP

    block = Mandatory(ids.BLOCK)
    block_duration = OptionalField(ids.BLOCK_DURATION)
    reference_blocks = Repeated(ids.REFERENCE_BLOCK)
    discard_padding = OptionalField(ids.DISCARD_PADDING)
    slices = OptionalField(ids.SLICES)

    def parsed_block(self) -> Block:
        return parse_block(self.block(), simple=False)


class Slices(View):
    element_id = ids.SLICES

    time_slices = Repeated(ids.TIME_SLICE)


class TimeSlice(View):
    element_id = ids.TIME_SLICE

    lace_number = OptionalField(ids.LACE_NUMBER)


# =============================================================================
# Tracks
# =============================================================================


class Tracks(View):
    element_id = ids.TRACKS

    track_entries = Repeated(ids.TRACK_ENTRY)


class TrackEntry(View):
    element_id = ids.TRACK_ENTRY

    track_number = Mandatory(ids.TRACK_NUMBER)
    track_uid = Mandatory(ids.TRACK_UID)
    track_type = Mandatory(ids.TRACK_TYPE)
    is_enabled = Mandatory(ids.FLAG_ENABLED, as_bool)
    is_default = Mandatory(ids.FLAG_DEFAULT, as_bool)
    is_forced = Mandatory(ids.FLAG_FORCED, as_bool)
    is_laced = Mandatory(ids.FLAG_LACING, as_bool)
    default_duration = OptionalField(ids.DEFAULT_DURATION)
    track_timestamp_scale = OptionalField(ids.TRACK_TIMESTAMP_SCALE)
    name = OptionalField(ids.NAME)
    language = OptionalField(ids.LANGUAGE)
    codec_id = Mandatory(ids.CODEC_ID)
    codec_private = OptionalField(ids.CODEC_PRIVATE)
    codec_name = OptionalField(ids.CODEC_NAME)
    codec_delay = OptionalField(ids.CODEC_DELAY)
    seek_pre_roll = Mandatory(ids.SEEK_PRE_ROLL)
    video = OptionalField(ids.VIDEO)
    audio = OptionalField(ids.AUDIO)
    content_encodings = OptionalField(ids.CONTENT_ENCODINGS)


class Video(View):
    element_id = ids.VIDEO

    interlacing_flag = Mandatory(ids.FLAG_INTERLACED)
    stereo_mode = OptionalField(ids.STEREO_MODE)
    alpha_mode = OptionalField(ids.ALPHA_MODE)
    pixel_width = Mandatory(ids.PIXEL_WIDTH)
    pixel_height = Mandatory(ids.PIXEL_HEIGHT)
    pixel_crop_bottom = OptionalField(ids.PIXEL_CROP_BOTTOM)
    pixel_crop_top = OptionalField(ids.PIXEL_CROP_TOP)
    pixel_crop_left = OptionalField(ids.PIXEL_CROP_LEFT)
    pixel_crop_right = OptionalField(ids.PIXEL_CROP_RIGHT)
    display_width = OptionalField(ids.DISPLAY_WIDTH)
    display_height = OptionalField(ids.DISPLAY_HEIGHT)
    display_unit = OptionalField(ids.DISPLAY_UNIT)
    aspect_ratio_type = OptionalField(ids.ASPECT_RATIO_TYPE)
    projection = OptionalField(ids.PROJECTION)


class Projection(View):
    element_id = ids.PROJECTION

    projection_type = Mandatory(ids.PROJECTION_TYPE)
    projection_private = OptionalField(ids.PROJECTION_PRIVATE)
    pose_yaw = Mandatory(ids.PROJECTION_POSE_YAW)
    pose_pitch = Mandatory(ids.PROJECTION_POSE_PITCH)
    pose_roll = Mandatory(ids.PROJECTION_POSE_ROLL)


class Audio(View):
    element_id = ids.AUDIO

    sampling_frequency = Mandatory(ids.SAMPLING_FREQUENCY)
    output_sampling_frequency = OptionalField(ids.OUTPUT_SAMPLING_FREQUENCY)
    channels = Mandatory(ids.CHANNELS)
    bit_depth = OptionalField(ids.BIT_DEPTH)


class ContentEncodings(View):
    element_id = ids.CONTENT_ENCODINGS

    content_encodings = Repeated(ids.CONTENT_ENCODING)


class ContentEncoding(View):
    element_id = ids.CONTENT_ENCODING

    order = Mandatory(ids.CONTENT_ENCODING_ORDER)
    scope = Mandatory(ids.CONTENT_ENCODING_SCOPE)
    type = Mandatory(ids.CONTENT_ENCODING_TYPE)
    encryption = Mandatory(ids.CONTENT_ENCRYPTION)


class ContentEncryption(View):
    element_id = ids.CONTENT_ENCRYPTION

    algorithm_type = Mandatory(ids.CONTENT_ENC_ALGO)
    key_id = OptionalField(ids.CONTENT_ENC_KEY_ID)
    aes_settings = OptionalField(ids.CONTENT_ENC_AES_SETTINGS)


class ContentEncAESSettings(View):
    element_id = ids.CONTENT_ENC_AES_SETTINGS

    cipher_mode = Mandatory(ids.AES_SETTINGS_CIPHER_MODE)


# =============================================================================
# Cues
# =============================================================================


class Cues(View):
    element_id = ids.CUES

    cue_points = Repeated(ids.CUE_POINT)


class CuePoint(View):
    element_id = ids.CUE_POINT

    time = Mandatory(ids.CUE_TIME)
    track_positions = Repeated(ids.CUE_TRACK_POSITIONS)


class CueTrackPositions(View):
    element_id = ids.CUE_TRACK_POSITIONS

    track = Mandatory(ids.CUE_TRACK)
    cluster_position = Mandatory(ids.CUE_CLUSTER_POSITION)
    block_number = OptionalField(ids.CUE_BLOCK_NUMBER)


# =============================================================================
# Chapters
# =============================================================================


class Chapters(View):
    element_id = ids.CHAPTERS

    edition_entries = Repeated(ids.EDITION_ENTRY)


class EditionEntry(View):
    element_id = ids.EDITION_ENTRY

    chapter_atoms = Repeated(ids.CHAPTER_ATOM)


class ChapterAtom(View):
    element_id = ids.CHAPTER_ATOM

    uid = Mandatory(ids.CHAPTER_UID)
    string_uid = OptionalField(ids.CHAPTER_STRING_UID)
    time_start = Mandatory(ids.CHAPTER_TIME_START)
    time_end = OptionalField(ids.CHAPTER_TIME_END)
    displays = Repeated(ids.CHAPTER_DISPLAY)


class ChapterDisplay(View):
    element_id = ids.CHAPTER_DISPLAY

    string = Mandatory(ids.CHAP_STRING)
    languages = Repeated(ids.CHAP_LANGUAGE)


# =============================================================================
# Tags
# =============================================================================


class Tags(View):
    element_id = ids.TAGS

    tags = Repeated(ids.TAG)


class Tag(View):
    element_id = ids.TAG

    targets = Mandatory(ids.TARGETS)
    simple_tags = Repeated(ids.SIMPLE_TAG)


class Targets(View):
    element_id = ids.TARGETS

    type_value = OptionalField(ids.TARGET_TYPE_VALUE)
    type = OptionalField(ids.TARGET_TYPE)
    track_uids = Repeated(ids.TAG_TRACK_UID)


class SimpleTag(View):
    element_id = ids.SIMPLE_TAG

    name = Mandatory(ids.TAG_NAME)
    language = Mandatory(ids.TAG_LANGUAGE)
    default = Mandatory(ids.TAG_DEFAULT)
    string = OptionalField(ids.TAG_STRING)
    binary = OptionalField(ids.TAG_BINARY)
    simple_tags = Repeated(ids.SIMPLE_TAG)
