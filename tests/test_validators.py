"""Tests for FormBuilderValidators."""

import pytest

from pyqt_formbuilder.validators import FormBuilderValidators as V


def _fails(message):
    return lambda value: message


def _passes(value):
    return None


def test_compose_empty_passes_everything():
    """compose([]) never reports an error."""
    validator = V.compose([])
    for value in (None, "", "x", 0, [], {}):
        assert validator(value) is None


def test_compose_short_circuits_on_first_error():
    """The first failing validator wins, later ones are not consulted."""
    second_calls = []

    def second(value):
        second_calls.append(value)
        return "second"

    validator = V.compose([_fails("first"), second])
    assert validator("x") == "first"
    assert second_calls == []


def test_compose_runs_later_validators_when_earlier_pass():
    validator = V.compose([_passes, _fails("second")])
    assert validator("x") == "second"


@pytest.mark.parametrize("value", [None, "", [], (), {}, set()])
def test_required_rejects_empty(value):
    assert V.required(error_text="needed")(value) == "needed"


@pytest.mark.parametrize("value", ["a", [1], {"a": 1}, 0, False])
def test_required_accepts_non_empty(value):
    assert V.required(error_text="needed")(value) is None


def test_required_default_message_comes_from_config():
    from pyqt_formbuilder.protocols import FormBuilderConfig, ValidatorMessages, set_form_config

    assert V.required()("") == "This field cannot be empty."
    set_form_config(FormBuilderConfig(messages=ValidatorMessages(required="Pflichtfeld")))
    assert V.required()("") == "Pflichtfeld"


def test_equal_and_not_equal():
    assert V.equal(True, error_text="must accept")(True) is None
    assert V.equal(True, error_text="must accept")(None) == "must accept"
    assert V.not_equal("admin", error_text="reserved")("admin") == "reserved"
    assert V.not_equal("admin", error_text="reserved")("bob") is None


def test_min_inclusive_boundary_passes():
    validator = V.min(5)
    assert validator(5) is None
    assert validator(6) is None
    assert validator(4) == "Value must be greater than or equal to 5."


def test_min_exclusive_boundary_fails():
    validator = V.min(5, inclusive=False, error_text="too small")
    assert validator(5) == "too small"
    assert validator(5.1) is None


def test_max_inclusive_and_exclusive():
    assert V.max(10)(10) is None
    assert V.max(10)(11) is not None
    assert V.max(10, inclusive=False)(10) == "Value must be less than 10."
    assert V.max(10, inclusive=False)(9) is None


def test_min_max_parse_numeric_strings():
    assert V.min(5, error_text="small")("4") == "small"
    assert V.min(5, error_text="small")("5.5") is None
    assert V.max(5, error_text="big")("7") == "big"


def test_min_max_ignore_none_and_non_numeric_strings():
    assert V.min(5)(None) is None
    assert V.min(5)("abc") is None
    assert V.max(5)("abc") is None


def test_min_rejects_unsupported_types():
    with pytest.raises(TypeError):
        V.min(1)([1, 2])
    with pytest.raises(TypeError):
        V.max(1)(True)


def test_min_length():
    validator = V.min_length(3, error_text="short")
    assert validator("ab") == "short"
    assert validator("abc") is None
    assert validator(None) == "short"
    assert validator([1, 2]) == "short"


def test_min_length_allow_empty():
    validator = V.min_length(3, allow_empty=True, error_text="short")
    assert validator("") is None
    assert validator(None) is None
    assert validator("a") == "short"


def test_length_validators_reject_non_positive_limits():
    with pytest.raises(ValueError):
        V.min_length(0)
    with pytest.raises(ValueError):
        V.max_length(-1)


def test_max_length():
    validator = V.max_length(3, error_text="long")
    assert validator("abcd") == "long"
    assert validator("abc") is None
    assert validator(None) is None


def test_email():
    validator = V.email(error_text="bad")
    assert validator("user@example.com") is None
    assert validator("  user.name+tag@mail.example.org ") is None
    assert validator("not-an-email") == "bad"
    assert validator("user@") == "bad"
    assert validator("") is None
    assert validator(None) is None


def test_url():
    validator = V.url(error_text="bad")
    assert validator("https://example.com/path?q=1") is None
    assert validator("example.com") is None
    assert validator("http://localhost:8000") is None
    assert validator("http://192.168.1.1/admin") is None
    assert validator("notaurl") == "bad"
    assert validator("gopher://example.com") == "bad"
    assert validator("http://example.com:99999") == "bad"
    assert validator("") is None


def test_url_protocol_and_host_lists():
    assert V.url(require_protocol=True, error_text="bad")("example.com") == "bad"
    assert V.url(host_blacklist=["evil.com"], error_text="bad")("https://evil.com") == "bad"
    assert V.url(host_whitelist=["good.com"], error_text="bad")("https://other.com") == "bad"
    assert V.url(host_whitelist=["good.com"], error_text="bad")("https://good.com") is None


def test_match_searches_pattern():
    validator = V.match(r"^\d{3}$", error_text="bad")
    assert validator("123") is None
    assert validator("12a") == "bad"
    assert validator("") is None


def test_numeric_and_integer():
    assert V.numeric(error_text="bad")("3.14") is None
    assert V.numeric(error_text="bad")("-2") is None
    assert V.numeric(error_text="bad")("abc") == "bad"
    assert V.integer(error_text="bad")("42") is None
    assert V.integer(error_text="bad")("4.2") == "bad"
    assert V.integer(radix=16, error_text="bad")("ff") is None


def test_credit_card_luhn():
    validator = V.credit_card(error_text="bad")
    assert validator("4111 1111 1111 1111") is None
    assert validator("4111111111111112") == "bad"
    assert validator("1234") == "bad"


def test_ip_versions():
    assert V.ip(error_text="bad")("192.168.0.1") is None
    assert V.ip(error_text="bad")("::1") is None
    assert V.ip(error_text="bad")("999.1.1.1") == "bad"
    assert V.ip(version=6, error_text="bad")("192.168.0.1") == "bad"
    assert V.ip(version="4", error_text="bad")("10.0.0.1") is None


def test_date_string():
    validator = V.date_string(error_text="bad")
    assert validator("2020-01-31") is None
    assert validator("2020-01-31T10:00:00") is None
    assert validator("2020-13-01") == "bad"
    assert validator("yesterday") == "bad"


def test_string_format_validators_accept_non_string_values():
    assert V.integer(error_text="bad")(5) is None
    assert V.integer(error_text="bad")(5.5) == "bad"
    assert V.numeric(error_text="bad")(2.5) is None
    assert V.email(error_text="bad")(5) == "bad"
    assert V.match(r"^\d+$", error_text="bad")(123) is None
    assert V.credit_card(error_text="bad")(4111111111111111) is None
    assert V.ip(error_text="bad")(42) == "bad"
    assert V.date_string(error_text="bad")(31) == "bad"
    assert V.url(error_text="bad")(3.14) == "bad"


@pytest.mark.parametrize("text", ["1_000", " 5", "5 ", "٣", "1e", ".", "+"])
def test_numeric_rejects_loose_number_syntax(text):
    assert V.numeric(error_text="bad")(text) == "bad"


@pytest.mark.parametrize("text", ["0", "-7", "+3", "1.5", ".5", "5.", "1e3", "-2.5E-2"])
def test_numeric_accepts_decimal_literals(text):
    assert V.numeric(error_text="bad")(text) is None


def test_integer_rejects_loose_syntax():
    validator = V.integer(error_text="bad")
    assert validator("1_000") == "bad"
    assert validator(" 42") == "bad"
    assert validator("٤٢") == "bad"
    assert validator("-42") is None


def test_min_ignores_loose_number_syntax():
    assert V.min(5, error_text="small")("1_0") is None
    assert V.min(5, error_text="small")("1") == "small"


def test_explicit_empty_error_text_is_kept():
    assert V.required(error_text="")("") == ""
    assert V.min(5, error_text="")(1) == ""
    assert V.max_length(1, error_text="")("ab") == ""
    assert V.email(error_text="")("nope") == ""
    assert V.compose([V.required(error_text=""), _fails("later")])(None) == ""
