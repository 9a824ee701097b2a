import pytest

from cwkit.errors import CWidgetError
from cwkit.transcode import TranscodeError, decode, encode, transcode

CHINESE = "\u6211\u7684\u6c23\u588a\u8239\u5145\u6eff\u4e86\u9c54\u9b5a"


@pytest.mark.parametrize("text", ["", "hello", CHINESE, "caf\u00e9 \u00fcber"])
def test_utf8_round_trip(text):
    assert decode(encode(text, "utf-8"), "utf-8") == text


def test_utf16_round_trip():
    assert decode(encode(CHINESE, "utf-16"), "utf-16") == CHINESE


def test_latin1_encoding_bytes():
    assert encode("\u00e9", "latin-1") == b"\xe9"


def test_decode_invalid_byte_raises_with_partial():
    with pytest.raises(TranscodeError) as info:
        decode(b"a\xffb", "utf-8")
    assert info.value.partial == "a?b"
    assert isinstance(info.value, CWidgetError)
    assert info.value.errmsg() == info.value.reason


def test_decode_partial_keeps_valid_text():
    data = "ok".encode("utf-8") + b"\xff" + CHINESE.encode("utf-8")
    with pytest.raises(TranscodeError) as info:
        decode(data, "utf-8")
    assert info.value.partial == "ok?" + CHINESE


def test_encode_unencodable_raises_with_partial():
    with pytest.raises(TranscodeError) as info:
        encode("a\u00e9b", "ascii")
    assert info.value.partial == b"a?b"


def test_unknown_encoding_decode():
    with pytest.raises(TranscodeError) as info:
        decode(b"abc", "no-such-encoding")
    assert info.value.partial == ""


def test_unknown_encoding_encode():
    with pytest.raises(TranscodeError) as info:
        encode("abc", "no-such-encoding")
    assert info.value.partial == b""


def test_transcode_bytes_to_text():
    assert transcode(CHINESE.encode("utf-8"), "utf-8") == CHINESE


def test_transcode_text_to_bytes():
    assert transcode(CHINESE, "utf-8") == CHINESE.encode("utf-8")


def test_transcode_default_handler_returns_partial():
    assert transcode(b"a\xffb", "utf-8") == "a?b"
    assert transcode("a\u00e9b", "ascii") == b"a?b"


def test_transcode_custom_handler_receives_details():
    calls = []

    def handler(error, partial, original):
        calls.append((type(error), partial, original))
        return "handled"

    result = transcode(bytearray(b"x\xffy"), "utf-8", handler)
    assert result == "handled"
    assert calls == [(TranscodeError, "x?y", b"x\xffy")]


def test_transcode_handler_not_called_on_success():
    def handler(error, partial, original):
        raise AssertionError("unexpected call")

    assert transcode("plain", "ascii", handler) == b"plain"


def test_transcode_rejects_other_types():
    with pytest.raises(TypeError):
        transcode(42, "utf-8")


def test_each_bad_byte_becomes_one_question_mark():
    bad = b"\xff\xfe\xfd"
    with pytest.raises(TranscodeError) as info:
        decode(b"a" + bad, "utf-8")
    assert info.value.partial == "a" + "?" * len(bad)