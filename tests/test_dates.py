import pytest

from services.dates import DateDecodeError, decode_alc_date, to_calendar_date


def test_negative_offset_is_added_to_epoch():
    # 1622255399000 is 2021-05-29T02:29:59Z; -0300 moves it back three hours
    assert decode_alc_date("/Date(1622255399000-0300)/") == "2021-05-28T23:29:59.000Z"


def test_positive_offset():
    assert decode_alc_date("/Date(1622255399000+0530)/") == "2021-05-29T07:59:59.000Z"


def test_offset_with_minutes():
    assert decode_alc_date("/Date(1622255399000-0245)/") == "2021-05-28T23:44:59.000Z"


def test_milliseconds_are_kept():
    assert decode_alc_date("/Date(1622255399123+0000)/") == "2021-05-29T02:29:59.123Z"


@pytest.mark.parametrize("value", ["", "/Date()/", "/Date(1622255399000)/", "garbage"])
def test_missing_groups_raise(value):
    with pytest.raises(DateDecodeError):
        decode_alc_date(value)


def test_decode_error_is_value_error():
    assert issubclass(DateDecodeError, ValueError)


def test_calendar_date_truncates_decoded_instant():
    assert to_calendar_date("/Date(1704081600000-0400)/") == "2024-01-01"


def test_calendar_date_passes_canonical_dates_through():
    assert to_calendar_date("2024-01-03") == "2024-01-03"


def test_out_of_range_epoch_is_a_decode_error():
    with pytest.raises(DateDecodeError):
        decode_alc_date("/Date(300000000000000-0400)/")
