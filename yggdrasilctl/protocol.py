"""
JSON wire codec for the admin socket: one document per direction.
"""

import codecs
import json
import re

from yggdrasilctl import config
from yggdrasilctl.exceptions import DecodeError, EncodeError
from yggdrasilctl.models import Response
from yggdrasilctl.transport import log_event

_CHUNK_SIZE = 4096

# Body of a string up to its closing quote, or up to a backslash that ends the chunk.
_STRING_BODY_RE = re.compile(r'[^"\\]*(?:\\.[^"\\]*)*', re.S)
_STRUCTURE_RE = re.compile(r'[{}\[\]"]')
# Outside strings only numbers, true/false/null, separators and whitespace may appear.
_BARE_INVALID_RE = re.compile(r"[^\s0-9+\-.eEtrufalsn,:]")
_NON_SPACE_RE = re.compile(r"\S")


def encode(req):
    """Serialize a Request as a single newline-terminated JSON object."""
    try:
        text = json.dumps(req.to_wire(), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EncodeError(f"[ERROR] Could not encode request '{req.name}': {e}") from e
    return (text + "\n").encode("utf-8")


def _malformed(detail):
    return DecodeError(f"[ERROR] Malformed admin socket response: {detail}")


class _Framer:
    """Find where the first top-level JSON object or array ends.

    Text is fed chunk by chunk and scanned once, so a response is parsed a
    single time however many reads it takes. Characters that can never be
    part of JSON raise DecodeError as soon as they arrive.
    """

    def __init__(self):
        self._closers = []
        self._in_string = False
        self._escaped = False

    @property
    def started(self):
        return bool(self._closers)

    def _check_bare(self, text, start, end):
        if not self._closers:
            m = _NON_SPACE_RE.search(text, start, end)
            if m:
                raise _malformed(f"expected JSON object, got {text[m.start()]!r}.")
            return
        m = _BARE_INVALID_RE.search(text, start, end)
        if m:
            raise _malformed(f"unexpected character {m.group()!r}.")

    def feed(self, text):
        """Scan *text*; return the offset just past the value's end, or -1."""
        i, n = 0, len(text)
        while i < n:
            if self._in_string:
                if self._escaped:
                    self._escaped = False
                    i += 1
                    continue
                i = _STRING_BODY_RE.match(text, i).end()
                if i >= n:
                    return -1
                if text[i] == "\\":
                    self._escaped = True
                    return -1
                self._in_string = False
                i += 1
                continue

            m = _STRUCTURE_RE.search(text, i)
            end = m.start() if m else n
            self._check_bare(text, i, end)
            if m is None:
                return -1
            ch = m.group()
            i = end + 1
            if not self._closers and ch not in "{[":
                raise _malformed(f"expected JSON object, got {ch!r}.")
            if ch == '"':
                self._in_string = True
            elif ch == "{":
                self._closers.append("}")
            elif ch == "[":
                self._closers.append("]")
            else:
                if self._closers.pop() != ch:
                    raise _malformed(f"unbalanced {ch!r}.")
                if not self._closers:
                    return i
        return -1


def decode(stream, max_bytes=None):
    """Read exactly one JSON object from *stream* and wrap it as a Response.

    *stream* needs only a ``recv(n)`` method. Raises DecodeError when the
    stream closes before a full value arrives, the bytes cannot be JSON,
    the value is not an object, or the response exceeds *max_bytes*.
    Bytes after the first complete value are ignored.
    """
    limit = max_bytes if max_bytes is not None else config.MAX_RESPONSE_BYTES
    utf8 = codecs.getincrementaldecoder("utf-8")()
    framer = _Framer()
    pieces = []
    received = 0
    while True:
        chunk = stream.recv(_CHUNK_SIZE)
        if not chunk:
            if framer.started or "".join(pieces).strip():
                raise DecodeError(
                    "[ERROR] Admin socket closed the connection before a complete "
                    f"response arrived ({received} bytes received)."
                )
            raise DecodeError("[ERROR] Admin socket closed the connection without a response.")
        received += len(chunk)
        if received > limit:
            raise DecodeError(f"[ERROR] Response too large from admin socket (>{limit} bytes).")
        try:
            text = utf8.decode(chunk)
        except UnicodeDecodeError as e:
            raise _malformed(f"invalid UTF-8 ({e.reason}).") from e
        end = framer.feed(text)
        if end < 0:
            pieces.append(text)
            continue
        pieces.append(text[:end])
        try:
            value = json.loads("".join(pieces))
        except ValueError as e:
            raise _malformed(f"{e}.") from e
        log_event(phase="response", bytes=received)
        return Response.from_value(value)
