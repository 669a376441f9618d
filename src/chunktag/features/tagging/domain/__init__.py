"""
Summary: Domain model for dual-source tag reconciliation.
Why: Expose keys, fields, stores and the composite facade from one place.
"""

from .composite_tag import CompositeTag
from .field_key import COMMON_FIELD_KEYS, FieldKey
from .field_store import FieldStore
from .id3_tag import Id3Tag, id3_encoding_for
from .info_tag import DEFAULT_INFO_ENCODING, AiffTextTag, InfoTag
from .tag_field import Artwork, TagField
from .tag_store import FieldRef, TagStore

__all__ = [
    "AiffTextTag",
    "Artwork",
    "COMMON_FIELD_KEYS",
    "CompositeTag",
    "DEFAULT_INFO_ENCODING",
    "FieldKey",
    "FieldRef",
    "FieldStore",
    "Id3Tag",
    "InfoTag",
    "TagField",
    "TagStore",
    "id3_encoding_for",
]
