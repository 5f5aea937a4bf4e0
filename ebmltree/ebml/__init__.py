"""
EBML / Matroska parsing package.

Pure Python decoding of EBML documents (WebM, Matroska) into an immutable
element tree with a typed accessor layer:

- ids: Element identifiers and Matroska value constants
- codec: VINT and payload primitives
- registry: Element ID -> kind / name tables
- tree: Element, ElementData, Node and the TreeBuilder
- document: Signature check and top-level Document parsing
- views: Typed read-only views (Segment, Info, TrackEntry, ...)
- blocks: SimpleBlock/Block header and lacing framing
- render: Diagnostic text rendering
- probe: Seek map, cue index and metadata summaries
"""
