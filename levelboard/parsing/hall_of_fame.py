"""Hall of fame decoder.

Wire shape::

    <b64 name0>,<score0>/<tail>,<score1>/<b64 name1>,<score2>/<b64 name2>,...

The first player's score rides on the second token and whatever follows its
slash is ignored. Every later token carries one complete ``score/name`` pair.
"""
import logging
from typing import List, Optional, Tuple

from levelboard.constants import HOF_PAIR_SEPARATOR, HOF_TOKEN_SEPARATOR, LEADING_INTEGER_RE
from levelboard.models.hall_of_fame import HofResult, HofRow
from levelboard.parsing.coercion import decode_text_safely, int_or_none

logger = logging.getLogger(__name__)

ScorePair = Tuple[str, int]


def ordinal(n: int) -> str:
    """Render ``n`` as an English ordinal: 1st, 2nd, 3rd, 4th, 11th, 21st..."""
    if n % 100 in (11, 12, 13):
        return f"{n}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _parse_score(text: str) -> Optional[int]:
    match = LEADING_INTEGER_RE.match(text)
    return int_or_none(match.group(1)) if match else None


def _make_pair(encoded_name: str, score_text: str) -> Optional[ScorePair]:
    score = _parse_score(score_text)
    name = decode_text_safely(encoded_name.strip())
    if score is None or not name.strip():
        logger.debug("Dropped hall of fame pair (score=%r, name=%r)", score_text, encoded_name)
        return None
    return name, score


def _collect_pairs(tokens: List[str]) -> List[ScorePair]:
    pairs: List[ScorePair] = []

    head_score, _, _ = tokens[1].partition(HOF_PAIR_SEPARATOR)
    head = _make_pair(tokens[0], head_score)
    if head is not None:
        pairs.append(head)

    for token in tokens[2:]:
        if HOF_PAIR_SEPARATOR not in token:
            continue
        score_text, _, encoded_name = token.partition(HOF_PAIR_SEPARATOR)
        pair = _make_pair(encoded_name, score_text)
        if pair is not None:
            pairs.append(pair)

    return pairs


def rank_pairs(pairs: List[ScorePair]) -> List[HofRow]:
    """Sort by score (stable, descending) and assign competition ranks."""
    ordered = sorted(pairs, key=lambda pair: pair[1], reverse=True)

    rows: List[HofRow] = []
    display_rank = 0
    previous_score: Optional[int] = None
    for position, (name, score) in enumerate(ordered, start=1):
        if previous_score is None or score != previous_score:
            display_rank = position
            previous_score = score
        rows.append(HofRow(rank=ordinal(display_rank), player=name, score=score))
    return rows


def decode_hof(raw: str) -> HofResult:
    """Decode a raw hall of fame body into ranked rows."""
    tokens = (raw or "").strip().split(HOF_TOKEN_SEPARATOR)
    if len(tokens) < 2:
        return HofResult()
    return HofResult(rows=rank_pairs(_collect_pairs(tokens)))
