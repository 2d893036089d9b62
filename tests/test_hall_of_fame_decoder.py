import base64

import pytest

from levelboard.models import HofRow
from levelboard.parsing import decode_hof, ordinal, rank_pairs


def b64(text):
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def _summary(result):
    return [(row.rank, row.player, row.score) for row in result.rows]


def test_decodes_header_pair_and_ranks_by_score():
    raw = f"{b64('Alice')},100/ignoredTail,200/{b64('Bob')},150/{b64('Carol')}"

    result = decode_hof(raw)

    assert result.rows == [
        HofRow(rank="1st", player="Bob", score=200),
        HofRow(rank="2nd", player="Carol", score=150),
        HofRow(rank="3rd", player="Alice", score=100),
    ]


def test_header_tail_never_becomes_a_player():
    # The segment after the slash in the second token is discarded even when
    # it is a well-formed encoded name.
    raw = f"{b64('Alice')},100/{b64('Mallory')},90/{b64('Bob')}"

    assert _summary(decode_hof(raw)) == [("1st", "Alice", 100), ("2nd", "Bob", 90)]


def test_tied_scores_share_rank_and_skip_the_next():
    raw = f"{b64('A')},100/x,90/{b64('B')},90/{b64('C')},80/{b64('D')}"

    assert _summary(decode_hof(raw)) == [
        ("1st", "A", 100),
        ("2nd", "B", 90),
        ("2nd", "C", 90),
        ("4th", "D", 80),
    ]


def test_rank_pairs_is_stable_for_equal_scores():
    rows = rank_pairs([("first", 5), ("top", 9), ("second", 5), ("third", 5)])

    assert [(row.rank, row.player) for row in rows] == [
        ("1st", "top"),
        ("2nd", "first"),
        ("2nd", "second"),
        ("2nd", "third"),
    ]


@pytest.mark.parametrize("raw", ["", "   ", b64("Alone"), "no commas here"])
def test_fewer_than_two_tokens_gives_no_rows(raw):
    assert decode_hof(raw).rows == []


def test_bad_pairs_are_dropped_individually():
    raw = ",".join(
        [
            b64("Alice"),
            "abc/tail",  # header score unparseable
            f"x/{b64('Bob')}",  # score unparseable
            f"70/{b64('   ')}",  # blank name
            "60",  # no slash
            f"50/{b64('Dana')}",
            "40/",  # empty name
        ]
    )

    assert _summary(decode_hof(raw)) == [("1st", "Dana", 50)]


def test_score_uses_leading_integer():
    raw = f"{b64('Alice')}, 12pts/x,-5/{b64('Bob')}"

    assert _summary(decode_hof(raw)) == [("1st", "Alice", 12), ("2nd", "Bob", -5)]


def test_names_keep_text_after_first_slash_and_fall_back_to_raw():
    raw = f"{b64('Alice')},10/x,20/not-b64/with/slashes"

    assert _summary(decode_hof(raw)) == [("1st", "not-b64/with/slashes", 20), ("2nd", "Alice", 10)]


def test_surrounding_whitespace_is_ignored():
    raw = f"\n  {b64('Alice')},10/x,20/{b64('Bob')}\n"

    assert _summary(decode_hof(raw)) == [("1st", "Bob", 20), ("2nd", "Alice", 10)]


def test_decoding_is_repeatable():
    raw = f"{b64('A')},3/x,5/{b64('B')},5/{b64('C')}"

    assert decode_hof(raw) == decode_hof(raw)


@pytest.mark.parametrize(
    "n, expected",
    [
        (1, "1st"),
        (2, "2nd"),
        (3, "3rd"),
        (4, "4th"),
        (10, "10th"),
        (11, "11th"),
        (12, "12th"),
        (13, "13th"),
        (21, "21st"),
        (22, "22nd"),
        (23, "23rd"),
        (101, "101st"),
        (111, "111th"),
        (112, "112th"),
        (1013, "1013th"),
    ],
)
def test_ordinal(n, expected):
    assert ordinal(n) == expected


def test_oversized_score_drops_the_pair():
    result = decode_hof(f"{b64('A')},{'9' * 5000}/x,5/{b64('B')}")

    assert [(row.rank, row.player, row.score) for row in result.rows] == [("1st", "B", 5)]


def test_non_ascii_digits_are_not_scores():
    result = decode_hof(f"{b64('A')},١٢٣/x,5/{b64('B')},٧/{b64('C')}")

    assert [(row.player, row.score) for row in result.rows] == [("B", 5)]
