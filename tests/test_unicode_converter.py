import pytest

from unicode_converter import (
    Font,
    InputTooLarge,
    InvalidFontSelection,
    InvalidRequest,
    OutputFont,
    UnicodeConverterService,
    parse_input_font,
    parse_output_font,
    strip_tags,
)


@pytest.mark.parametrize("input_font,output_font,text,expected", [
    ("preeti", "unicode", "ls", "कि"),
    ("hisab", "unicode", "!", "ज्ञ"),
    ("preeti", "hisab", "ls!", "ls1"),
    ("hisab", "preeti", "ls1", "ls!"),
    ("preeti", "preeti", "ls!", "ls!"),
    ("hisab", "hisab", "ls!", "ls!"),
])
def test_dispatch(service, input_font, output_font, text, expected):
    assert service.convert(text, input_font, output_font) == expected


def test_font_names_are_case_insensitive(service):
    assert service.convert("ls", " Preeti ", "UNICODE") == "कि"


def test_defaults_apply_when_fonts_are_missing(service):
    assert service.convert("ls") == "कि"
    assert service.resolve_fonts() == (Font.PREETI, OutputFont.UNICODE)


@pytest.mark.parametrize("input_font,output_font", [
    ("unicode", "preeti"),
    ("kantipur", "unicode"),
    ("preeti", "kantipur"),
])
def test_invalid_selection(service, input_font, output_font):
    with pytest.raises(InvalidFontSelection):
        service.convert("ls", input_font, output_font)


def test_invalid_defaults_fail_fast():
    with pytest.raises(InvalidFontSelection):
        UnicodeConverterService(default_input_font="unicode")


def test_input_limit():
    small = UnicodeConverterService(max_input_length=3)
    assert small.convert("sss") == "ककक"
    with pytest.raises(InputTooLarge):
        small.convert("ssss")


def test_html_tags_are_stripped(service):
    assert service.convert('<span class="x">ls</span>') == "कि"
    assert service.convert('<p style="a">ls</p>', "hisab", "preeti") == "ls"
    assert strip_tags('<span class="x">a</span>') == "a"


def test_preeti_angle_brackets_survive(service):
    assert service.convert("s<") == "क?"
    assert service.convert("s> s<") == "कश्र क?"


def test_parse_fonts():
    assert parse_input_font("hisab") is Font.HISAB
    assert parse_output_font("unicode") is OutputFont.UNICODE
    with pytest.raises(InvalidFontSelection):
        parse_input_font(None)


def test_handle_payload(service):
    result = service.handle({"input_text": "g]kfn", "input_font": "preeti", "output_font": "unicode"})
    assert result == {"success": True, "result": "नेपाल", "input_font": "preeti", "output_font": "unicode"}


def test_handle_rejects_non_string_text(service):
    with pytest.raises(InvalidRequest) as excinfo:
        service.handle({"input_text": ["ls"]})
    assert not isinstance(excinfo.value, InvalidFontSelection)


def test_font_options(service):
    assert service.font_options() == {"preeti": "Preeti", "hisab": "Hisab", "unicode": "Unicode"}


@pytest.mark.parametrize("text", ["<a>", "<b>ls</b>", "s<a>s"])
def test_same_font_returns_text_untouched(service, text):
    assert service.convert(text, "preeti", "preeti") == text
    assert service.convert(text, "hisab", "hisab") == text


def test_bare_angle_brackets_are_preeti_letters(service):
    assert service.convert("<a>", "preeti", "unicode") == "?बश्र"
