import pytest

from Translator.Google.payload_repair import repair_payload, parse_raw_payload
from Translator.Exception.TranslateError import PayloadParseError


def test_repair_three_elided_slots():
    assert repair_payload("[a,,,,b]") == "[a,null,null,null,b]"


def test_parse_three_elided_slots():
    assert parse_raw_payload("[1,,,,2]") == [1, None, None, None, 2]


def test_repair_leading_separator():
    assert repair_payload("[,1]") == "[null,1]"
    assert parse_raw_payload("[,,1]") == [None, None, 1]


def test_repair_nested_elisions():
    raw = '[[["hola","hello",,,1]],,"en"]'
    assert parse_raw_payload(raw) == [[["hola", "hello", None, None, 1]], None, "en"]


def test_repair_is_idempotent_on_valid_payload():
    valid = '[[["hola","hello",null,null,1]],null,"en"]'
    assert repair_payload(valid) == valid
    assert repair_payload(repair_payload("[1,,,2]")) == repair_payload("[1,,,2]")


def test_parse_failure_propagates():
    with pytest.raises(PayloadParseError):
        parse_raw_payload('[[["hola"')


def test_parse_rejects_non_array():
    with pytest.raises(PayloadParseError):
        parse_raw_payload('{"text": "hola"}')


def test_repair_leaves_string_literals_alone():
    raw = '[[["1,,2","[,x",,,1]],,"en"]'
    assert repair_payload(raw) == '[[["1,,2","[,x",null,null,1]],null,"en"]'
    assert parse_raw_payload(raw)[0][0][:2] == ["1,,2", "[,x"]


def test_repair_handles_escaped_quotes():
    raw = '["say \\",,\\" twice",,1]'
    assert parse_raw_payload(raw) == ['say ",," twice', None, 1]


def test_trailing_elision_is_not_repaired():
    with pytest.raises(PayloadParseError):
        parse_raw_payload("[1,]")
