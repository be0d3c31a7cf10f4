"""
Validator factories for form fields.

A validator is a plain callable mapping a candidate value to an error message,
or None when the value is acceptable. Factories here build validators that can
be combined with FormBuilderValidators.compose():

    validator = FormBuilderValidators.compose([
        FormBuilderValidators.required(),
        FormBuilderValidators.email(),
    ])
    validator("")            # -> "This field cannot be empty."
    validator("a@b.co")      # -> None

String-format validators (email, url, numeric, ...) accept None and "" so that
optional fields stay valid; combine them with required() to enforce presence.
"""

import ipaddress
import re
from collections.abc import Mapping
from datetime import date, datetime
from numbers import Number
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from pyqt_formbuilder.protocols.form_config import get_form_config

Validator = Callable[[Any], Optional[str]]

_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)+$"
)
_HOST_LABEL_RE = re.compile(r"^[a-zA-Z0-9¡-￿-]+$")
_TLD_RE = re.compile(r"^([a-zA-Z¡-￿]{2,}|xn--[a-zA-Z0-9-]+)$")
_NON_DIGIT_RE = re.compile(r"[^0-9]")
# Same grammar as a plain decimal literal: no underscores, padding or non-ASCII digits
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\Z", re.ASCII)
_INT_RE = re.compile(r"^[+-]?\d+\Z", re.ASCII)
_RADIX_DIGITS_RE = re.compile(r"^[+-]?[0-9a-zA-Z]+\Z", re.ASCII)


def _messages():
    return get_form_config().messages


def _error(error_text: Optional[str], default: str) -> str:
    """Explicit error_text (even "") wins over the configured default."""
    return default if error_text is None else error_text


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _as_text(value: Any) -> str:
    """String-format validators check str(value) for non-string candidates."""
    return value if isinstance(value, str) else str(value)


def _to_number(value: Any) -> Optional[Number]:
    """Parse a number or numeric string; None when unparseable."""
    if isinstance(value, bool):
        raise TypeError(f"Expected a number or numeric string, got {value!r}")
    if isinstance(value, Number):
        return value
    if isinstance(value, str):
        if not _NUMBER_RE.match(value):
            return None
        if _INT_RE.match(value):
            return int(value)
        return float(value)
    raise TypeError(f"Expected a number or numeric string, got {type(value).__name__}")


def is_email(value: str) -> bool:
    """Return True if value looks like an email address."""
    if len(value) > 254 or not _EMAIL_RE.match(value):
        return False
    local, _, _domain = value.rpartition("@")
    return len(local) <= 64


def is_url(
    value: str,
    protocols: Sequence[str] = ("http", "https", "ftp"),
    require_tld: bool = True,
    require_protocol: bool = False,
    allow_underscore: bool = False,
    host_whitelist: Sequence[str] = (),
    host_blacklist: Sequence[str] = (),
) -> bool:
    """Return True if value is a URL matching the given constraints."""
    if not value or len(value) >= 2083 or value.startswith("mailto:"):
        return False

    rest = value
    if "://" in rest:
        protocol, rest = rest.split("://", 1)
        if protocol.lower() not in protocols:
            return False
    elif require_protocol:
        return False

    # Strip fragment, query and path; only authority is checked
    for sep in ("#", "?", "/"):
        rest = rest.split(sep, 1)[0]

    if "@" in rest:
        auth, rest = rest.rsplit("@", 1)
        if ":" in auth and not auth.split(":", 1)[0]:
            return False

    host = rest
    if host.startswith("["):
        # Bracketed IPv6 literal with optional port
        end = host.find("]")
        if end < 0:
            return False
        ip_part, port_part = host[1:end], host[end + 1:]
        if port_part and not port_part.startswith(":"):
            return False
        port = port_part[1:] or None
        host = ip_part
        if not is_ip(host, 6):
            return False
    else:
        port = None
        if ":" in host:
            host, port = host.split(":", 1)

    if port is not None:
        if not port.isdigit() or not 0 < int(port) <= 65535:
            return False

    if not host:
        return False
    if host_whitelist and host not in host_whitelist:
        return False
    if host in host_blacklist:
        return False
    if is_ip(host) or host == "localhost":
        return True
    return is_fqdn(host, require_tld=require_tld, allow_underscore=allow_underscore)


def is_fqdn(value: str, require_tld: bool = True, allow_underscore: bool = False) -> bool:
    """Return True if value is a fully qualified domain name."""
    parts = value.rstrip(".").split(".")
    if require_tld:
        if len(parts) < 2 or not _TLD_RE.match(parts[-1]):
            return False
    for part in parts:
        if allow_underscore:
            part = part.replace("_", "")
        if not part or len(part) > 63 or not _HOST_LABEL_RE.match(part):
            return False
        if part.startswith("-") or part.endswith("-"):
            return False
    return True


def is_ip(value: str, version: Union[int, str, None] = None) -> bool:
    """Return True if value is an IP address of the given version (4, 6 or any)."""
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        return False
    if version in (None, ""):
        return True
    return str(address.version) == str(version)


def is_credit_card(value: str) -> bool:
    """Return True if value is a plausible card number (Luhn checksum)."""
    digits = _NON_DIGIT_RE.sub("", value)
    if not 13 <= len(digits) <= 19:
        return False
    if re.search(r"[^0-9 -]", value):
        return False

    total = 0
    double = False
    for char in reversed(digits):
        digit = int(char)
        if double:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
        double = not double
    return total % 10 == 0


def is_date(value: str) -> bool:
    """Return True if value parses as an ISO-8601 date or datetime."""
    for parser in (date.fromisoformat, datetime.fromisoformat):
        try:
            parser(value)
            return True
        except ValueError:
            continue
    return False


def _is_integer(value: str, radix: int) -> bool:
    if not _RADIX_DIGITS_RE.match(value):
        return False
    try:
        int(value, radix)
    except ValueError:
        return False
    return True


class FormBuilderValidators:
    """Factories for field validators."""

    @staticmethod
    def compose(validators: Iterable[Validator]) -> Validator:
        """
        Validator that runs each validator in order against the value.

        Returns the first non-None result; passes when all pass (or when
        there are no validators at all).
        """
        chain = list(validators)

        def validate(value_candidate: Any) -> Optional[str]:
            for validator in chain:
                result = validator(value_candidate)
                if result is not None:
                    return result
            return None

        return validate

    @staticmethod
    def required(error_text: Optional[str] = None) -> Validator:
        """Validator that requires a non-empty value."""

        def validate(value_candidate: Any) -> Optional[str]:
            if value_candidate is None:
                return _error(error_text, _messages().required)
            if isinstance(value_candidate, (str, list, tuple, set, frozenset, Mapping)) \
                    and len(value_candidate) == 0:
                return _error(error_text, _messages().required)
            return None

        return validate

    @staticmethod
    def equal(value: Any, error_text: Optional[str] = None) -> Validator:
        """Validator that requires the value to equal ``value``."""
        return lambda value_candidate: (
            _error(error_text, _messages().equal.format(value=value))
            if value_candidate != value else None
        )

    @staticmethod
    def not_equal(value: Any, error_text: Optional[str] = None) -> Validator:
        """Validator that requires the value to differ from ``value``."""
        return lambda value_candidate: (
            _error(error_text, _messages().not_equal.format(value=value))
            if value_candidate == value else None
        )

    @staticmethod
    def min(min: Number, inclusive: bool = True, error_text: Optional[str] = None) -> Validator:
        """
        Validator that requires a number (or numeric string) of at least ``min``.

        With inclusive=False the boundary itself fails. None and strings that
        are not numbers pass.
        """

        def validate(value_candidate: Any) -> Optional[str]:
            if value_candidate is None:
                return None
            number = _to_number(value_candidate)
            if number is not None and (number < min if inclusive else number <= min):
                if error_text is not None:
                    return error_text
                template = _messages().min if inclusive else _messages().min_exclusive
                return template.format(min=min)
            return None

        return validate

    @staticmethod
    def max(max: Number, inclusive: bool = True, error_text: Optional[str] = None) -> Validator:
        """
        Validator that requires a number (or numeric string) of at most ``max``.

        With inclusive=False the boundary itself fails. None and strings that
        are not numbers pass.
        """

        def validate(value_candidate: Any) -> Optional[str]:
            if value_candidate is None:
                return None
            number = _to_number(value_candidate)
            if number is not None and (number > max if inclusive else number >= max):
                if error_text is not None:
                    return error_text
                template = _messages().max if inclusive else _messages().max_exclusive
                return template.format(max=max)
            return None

        return validate

    @staticmethod
    def min_length(min_length: int, allow_empty: bool = False,
                   error_text: Optional[str] = None) -> Validator:
        """Validator that requires a length of at least ``min_length``."""
        if min_length <= 0:
            raise ValueError(f"min_length must be positive, got {min_length}")

        def validate(value_candidate: Any) -> Optional[str]:
            length = len(value_candidate) if value_candidate is not None else 0
            if length < min_length and (not allow_empty or length > 0):
                return _error(error_text, _messages().min_length.format(min_length=min_length))
            return None

        return validate

    @staticmethod
    def max_length(max_length: int, error_text: Optional[str] = None) -> Validator:
        """Validator that requires a length of at most ``max_length``."""
        if max_length <= 0:
            raise ValueError(f"max_length must be positive, got {max_length}")

        def validate(value_candidate: Any) -> Optional[str]:
            if value_candidate is not None and len(value_candidate) > max_length:
                return _error(error_text, _messages().max_length.format(max_length=max_length))
            return None

        return validate

    @staticmethod
    @staticmethod
    def email(error_text: Optional[str] = None) -> Validator:
        """Validator that requires a valid email address."""
        return lambda value_candidate: (
            _error(error_text, _messages().email)
            if not _is_blank(value_candidate) and not is_email(_as_text(value_candidate).strip())
            else None
        )

    @staticmethod
    def url(
        error_text: Optional[str] = None,
        protocols: Sequence[str] = ("http", "https", "ftp"),
        require_tld: bool = True,
        require_protocol: bool = False,
        allow_underscore: bool = False,
        host_whitelist: Sequence[str] = (),
        host_blacklist: Sequence[str] = (),
    ) -> Validator:
        """Validator that requires a valid URL."""

        def validate(value_candidate: Any) -> Optional[str]:
            if _is_blank(value_candidate):
                return None
            if not is_url(
                _as_text(value_candidate),
                protocols=protocols,
                require_tld=require_tld,
                require_protocol=require_protocol,
                allow_underscore=allow_underscore,
                host_whitelist=host_whitelist,
                host_blacklist=host_blacklist,
            ):
                return _error(error_text, _messages().url)
            return None

        return validate

    @staticmethod
    def match(pattern: str, error_text: Optional[str] = None) -> Validator:
        """Validator that requires the value to match a regex (searched, not anchored)."""
        regex = re.compile(pattern)
        return lambda value_candidate: (
            _error(error_text, _messages().match)
            if not _is_blank(value_candidate) and not regex.search(_as_text(value_candidate))
            else None
        )

    @staticmethod
    def numeric(error_text: Optional[str] = None) -> Validator:
        """Validator that requires a number or numeric string."""
        return lambda value_candidate: (
            _error(error_text, _messages().numeric)
            if not _is_blank(value_candidate)
            and _to_number(_as_text(value_candidate)) is None
            else None
        )

    @staticmethod
    def integer(error_text: Optional[str] = None, radix: int = 10) -> Validator:
        """Validator that requires an integer string in the given radix."""
        return lambda value_candidate: (
            _error(error_text, _messages().integer)
            if not _is_blank(value_candidate) and not _is_integer(_as_text(value_candidate), radix)
            else None
        )

    @staticmethod
    def credit_card(error_text: Optional[str] = None) -> Validator:
        """Validator that requires a valid credit card number."""
        return lambda value_candidate: (
            _error(error_text, _messages().credit_card)
            if not _is_blank(value_candidate) and not is_credit_card(_as_text(value_candidate))
            else None
        )

    @staticmethod
    def ip(version: Union[int, str, None] = None, error_text: Optional[str] = None) -> Validator:
        """Validator that requires an IP address; version is 4, 6 or None for either."""
        return lambda value_candidate: (
            _error(error_text, _messages().ip)
            if not _is_blank(value_candidate) and not is_ip(_as_text(value_candidate), version)
            else None
        )

    @staticmethod
    def date_string(error_text: Optional[str] = None) -> Validator:
        """Validator that requires an ISO-8601 date or datetime string."""
        return lambda value_candidate: (
            _error(error_text, _messages().date_string)
            if not _is_blank(value_candidate) and not is_date(_as_text(value_candidate))
            else None
        )
