from datetime import datetime, timedelta, timezone

import pandas as pd

from process_miner.lib.constants import EPOCH_SENTINEL_MS
from process_miner.lib.timestamps import (
    normalize_timestamp,
    parse_timestamp,
    parse_timestamps,
)


def test_parse_timestamp_returns_epoch_milliseconds():
    assert parse_timestamp("1970-01-01T00:00:01Z") == 1000
    assert parse_timestamp("2024-01-01T00:00:00Z") == 1704067200000


def test_parse_timestamp_naive_values_are_utc():
    assert parse_timestamp("2024-01-01 00:00:00") == parse_timestamp(
        "2024-01-01T00:00:00+00:00"
    )


def test_parse_timestamp_honours_offsets():
    assert parse_timestamp("2024-01-01T01:00:00+01:00") == parse_timestamp(
        "2024-01-01T00:00:00Z"
    )


def test_parse_timestamp_keeps_milliseconds():
    assert parse_timestamp("1970-01-01T00:00:00.250Z") == 250


def test_unparseable_values_fall_back_to_sentinel():
    for value in ("not a date", "", None):
        assert parse_timestamp(value) == EPOCH_SENTINEL_MS


def test_parse_timestamps_mixed_formats_and_invalid_entries():
    values = pd.Series(
        ["2024-01-01", "garbage", "2024-01-01T00:00:01Z", None], index=[10, 11, 12, 13]
    )
    result = parse_timestamps(values)

    assert result.index.tolist() == [10, 11, 12, 13]
    assert result.tolist() == [
        1704067200000,
        EPOCH_SENTINEL_MS,
        1704067201000,
        EPOCH_SENTINEL_MS,
    ]
    assert result.dtype == "int64"


def test_parse_timestamps_empty_series():
    result = parse_timestamps(pd.Series([], dtype="object"))
    assert result.empty


def _expected_ms(*args) -> int:
    moment = datetime(*args, tzinfo=timezone.utc)
    return (moment - datetime(1970, 1, 1, tzinfo=timezone.utc)) // timedelta(
        milliseconds=1
    )


def test_dates_outside_nanosecond_range_are_parsed():
    assert parse_timestamp("3000-01-01") == 32503680000000
    assert parse_timestamp("0500-01-01") == _expected_ms(500, 1, 1)
    assert parse_timestamp("0500-01-01") < EPOCH_SENTINEL_MS


def test_parse_timestamps_mixes_far_dates_with_regular_ones():
    values = pd.Series(["0500-01-01", "2024-01-01", "3000-01-01", "nope"])
    assert parse_timestamps(values).tolist() == [
        _expected_ms(500, 1, 1),
        1704067200000,
        32503680000000,
        EPOCH_SENTINEL_MS,
    ]


def test_gmt_offset_suffix_uses_iso_sign():
    expected = 1704099600000  # 2024-01-01T09:00:00Z
    assert parse_timestamp("Mon Jan 01 2024 10:00:00 GMT+0100") == expected
    assert (
        parse_timestamp(
            "Mon Jan 01 2024 10:00:00 GMT+0100 (Central European Standard Time)"
        )
        == expected
    )
    assert parse_timestamp("Mon Jan 01 2024 04:00:00 UTC-0500") == expected


def test_normalize_timestamp():
    assert (
        normalize_timestamp("Mon Jan 01 2024 10:00:00 GMT+0100 (CET)")
        == "Mon Jan 01 2024 10:00:00 +01:00"
    )
    assert normalize_timestamp("2024-01-01T10:00:00Z") == "2024-01-01T10:00:00Z"
    assert normalize_timestamp(None) is None
