"""Decoders for the legacy proxy's level list and hall of fame payloads."""
from .coercion import decode_text_safely, parse_optional_number
from .hall_of_fame import decode_hof, ordinal, rank_pairs
from .levels import decode_level_list
from .tokenizer import LEVEL_RECORD_FORMAT, RecordFormat, TokenizedDocument, tokenize

__all__ = [
    "decode_text_safely",
    "parse_optional_number",
    "decode_hof",
    "ordinal",
    "rank_pairs",
    "decode_level_list",
    "LEVEL_RECORD_FORMAT",
    "RecordFormat",
    "TokenizedDocument",
    "tokenize",
]
