"""Level list decoder."""
import logging
from typing import List, Optional

from levelboard.models.levels import LevelEntry, LevelListResult, LevelRecordFields
from levelboard.parsing.coercion import decode_text_safely, parse_optional_number
from levelboard.parsing.tokenizer import LEVEL_RECORD_FORMAT, tokenize

logger = logging.getLogger(__name__)


def _build_entry(record: LevelRecordFields) -> Optional[LevelEntry]:
    level_id = decode_text_safely(record.level_id.strip())
    if not level_id.strip():
        return None

    return LevelEntry(
        level_id=level_id,
        level_author=decode_text_safely(record.level_author.strip()),
        level_rating=parse_optional_number(record.level_rating),
        level_difficulty=record.level_difficulty,
        level_downloads=parse_optional_number(record.level_downloads),
        level_top_times_raw=record.level_top_times,
    )


def decode_level_list(raw: str) -> LevelListResult:
    """Decode a raw level-list body into entries and the pagination flag.

    Records keep server order. Records whose id decodes to blank text are
    dropped; everything else degrades field by field.
    """
    document = tokenize(raw, LEVEL_RECORD_FORMAT)

    levels: List[LevelEntry] = []
    for fields in document.records:
        entry = _build_entry(LevelRecordFields.from_fields(fields))
        if entry is None:
            logger.debug("Dropped level record without an id: %s", sorted(fields))
            continue
        levels.append(entry)

    return LevelListResult(levels=levels, has_more_levels=document.has_more)
