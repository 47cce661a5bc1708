"""String helpers used for resource keys and file names."""

import locale
import string

from apiengine.base import EngineError

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_upper(text):
    """Upper-case ASCII letters only, leaving every other character as it is."""
    return str(text).translate(_ASCII_UPPER)


def ansi_to_unicode(data):
    """Decode bytes in the system's preferred encoding."""
    if isinstance(data, str):
        data = data.encode(locale.getpreferredencoding(False))
    if not data:
        raise EngineError("string conversion failed: empty input")
    encoding = locale.getpreferredencoding(False)
    try:
        return bytes(data).decode(encoding)
    except UnicodeDecodeError as exc:
        raise EngineError(f"string conversion failed: {data!r}") from exc