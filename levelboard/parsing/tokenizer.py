"""Field tokenizer for ``key=value&key=value`` record streams.

The legacy proxy concatenates records behind a literal marker (for levels,
``\\levelId=``) and mixes a document-level pagination field into the
ordinary record fields. The tokenizer splits the body back into one mapping
per record and lifts the pagination field out into a side channel.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, NamedTuple, Tuple

from levelboard.constants import (
    LEVEL_FIELD_SEPARATOR,
    LEVEL_KV_SEPARATOR,
    LEVEL_PAGINATION_KEY,
    LEVEL_PAGINATION_ON,
    LEVEL_RECORD_KEY,
    LEVEL_RECORD_MARKER,
)

logger = logging.getLogger(__name__)


class RecordFormat(NamedTuple):
    """Delimiters describing one record-stream wire format."""
    record_key: str
    record_marker: str
    field_sep: str
    kv_sep: str
    pagination_key: str
    pagination_on: str = "1"

    @property
    def record_prefix(self) -> str:
        """The key literal that starts every record, e.g. ``levelId=``."""
        return f"{self.record_key}{self.kv_sep}"


LEVEL_RECORD_FORMAT = RecordFormat(
    record_key=LEVEL_RECORD_KEY,
    record_marker=LEVEL_RECORD_MARKER,
    field_sep=LEVEL_FIELD_SEPARATOR,
    kv_sep=LEVEL_KV_SEPARATOR,
    pagination_key=LEVEL_PAGINATION_KEY,
    pagination_on=LEVEL_PAGINATION_ON,
)


class TokenizedDocument(NamedTuple):
    """Records in body order plus the document-level pagination flag."""
    records: Tuple[Mapping[str, str], ...]
    has_more: bool


def _split_fields(block: str, record_format: RecordFormat) -> Tuple[Dict[str, str], bool]:
    """Split one record into its field mapping and its pagination flag."""
    fields: Dict[str, str] = {}
    has_more = False
    for segment in block.split(record_format.field_sep):
        key, _, value = segment.partition(record_format.kv_sep)
        if not key:
            continue
        if key == record_format.pagination_key:
            # document scoped; never part of the record itself
            has_more = has_more or value == record_format.pagination_on
            continue
        fields[key] = value
    return fields, has_more


def tokenize(raw: str, record_format: RecordFormat = LEVEL_RECORD_FORMAT) -> TokenizedDocument:
    """Split ``raw`` into per-record field mappings.

    A leading fragment before the first marker only counts as a record when
    it already starts with the record key literal; otherwise it is scanned
    for the pagination field and dropped.
    """
    records: List[Mapping[str, str]] = []
    has_more = False

    chunks = (raw or "").split(record_format.record_marker)
    for index, chunk in enumerate(chunks):
        if not chunk.strip():
            continue

        if index == 0 and not chunk.startswith(record_format.record_prefix):
            _, fragment_flag = _split_fields(chunk, record_format)
            has_more = has_more or fragment_flag
            logger.debug("Discarded leading fragment of %d chars", len(chunk))
            continue

        block = chunk if index == 0 else f"{record_format.record_prefix}{chunk}"
        fields, record_flag = _split_fields(block, record_format)
        has_more = has_more or record_flag
        records.append(fields)

    return TokenizedDocument(records=tuple(records), has_more=has_more)
