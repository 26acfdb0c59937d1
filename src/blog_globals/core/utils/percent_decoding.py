import re
from urllib.parse import unquote_to_bytes

# a '%' not followed by two hex digits
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class MalformedEncodingError(ValueError):
    """Raised by decode_uri_component for text it cannot decode."""


def decode_uri_component(value: str) -> str:
    """
    Reverse URI component encoding.

    - `%XX` escapes are collected as bytes and decoded as UTF-8.
    - Text without escapes is returned unchanged; `+` stays a plus sign.
    - A stray `%` or an escape sequence that is not valid UTF-8 raises
      MalformedEncodingError instead of producing replacement characters.
    """
    if "%" not in value:
        return value

    bad = _MALFORMED_ESCAPE.search(value)
    if bad:
        raise MalformedEncodingError(
            f"incomplete escape sequence at position {bad.start()}"
        )

    raw = unquote_to_bytes(value)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedEncodingError(
            f"escape sequence at byte {exc.start} is not valid UTF-8"
        ) from exc
