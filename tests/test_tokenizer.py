from levelboard.parsing import LEVEL_RECORD_FORMAT, RecordFormat, tokenize


def test_splits_records_and_lifts_pagination_flag():
    raw = (
        "\\levelId=QQ==&levelAuthor=Qg==&levelDifficulty=&hasMoreLevels=1"
        "\\levelId=&levelAuthor=Qw=="
    )

    document = tokenize(raw)

    assert document.has_more is True
    assert list(document.records) == [
        {"levelId": "QQ==", "levelAuthor": "Qg==", "levelDifficulty": ""},
        {"levelId": "", "levelAuthor": "Qw=="},
    ]


def test_values_keep_extra_separators():
    document = tokenize("\\levelId=QQ==&levelTopTimes=a=b=c")

    assert document.records[0]["levelTopTimes"] == "a=b=c"


def test_leading_fragment_counts_only_when_it_starts_with_record_key():
    kept = tokenize("levelId=QQ==&levelAuthor=Qg==\\levelId=Qw==")
    assert [record["levelId"] for record in kept.records] == ["QQ==", "Qw=="]

    dropped = tokenize("status=ok&count=2\\levelId=Qw==")
    assert [record["levelId"] for record in dropped.records] == ["Qw=="]


def test_pagination_flag_in_discarded_fragment_is_still_seen():
    document = tokenize("hasMoreLevels=1&\\levelId=QQ==")

    assert document.has_more is True
    assert len(document.records) == 1


def test_pagination_key_is_removed_whatever_its_value():
    document = tokenize("\\levelId=QQ==&hasMoreLevels=0")

    assert document.has_more is False
    assert "hasMoreLevels" not in document.records[0]


def test_pagination_flag_is_sticky_across_records():
    document = tokenize("\\levelId=QQ==&hasMoreLevels=1\\levelId=Qg==&hasMoreLevels=0")

    assert document.has_more is True


def test_pagination_value_must_be_exactly_one():
    assert tokenize("\\levelId=QQ==&hasMoreLevels=true").has_more is False
    assert tokenize("\\levelId=QQ==&hasMoreLevels= 1").has_more is False


def test_skips_empty_keys_and_blank_chunks():
    document = tokenize("\\levelId=   \\levelId=QQ==&=orphan&&flag")

    assert list(document.records) == [{"levelId": "QQ==", "flag": ""}]


def test_empty_body_has_no_records():
    document = tokenize("")

    assert document.records == ()
    assert document.has_more is False


def test_custom_record_format():
    fmt = RecordFormat(record_key="id", record_marker="|id:", field_sep=";", kv_sep=":", pagination_key="more")

    document = tokenize("|id:1;name:x|id:2;more:1", fmt)

    assert list(document.records) == [{"id": "1", "name": "x"}, {"id": "2"}]
    assert document.has_more is True
    assert LEVEL_RECORD_FORMAT.record_prefix == "levelId="
