"""Obscured-field codec for the sensitive numeric fields (premium, amount).

The default scheme is NOT encryption: it tags a base64 rendering of the number so the stored
value is opaque at a glance. Anything implementing `FieldCodec` can replace it.
"""

from __future__ import annotations

import base64
import binascii
import math
import re
from typing import Protocol

from rwa_options.exceptions import DecodeError

SCHEME_TAG = "FHE-"

_NUMERIC_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class FieldCodec(Protocol):
    """Reversible transform between a number and an opaque ciphertext string."""

    def encode(self, value: float) -> str:
        """Return the ciphertext for `value`."""
        ...

    def decode(self, ciphertext: str) -> float:
        """Return the number behind `ciphertext`, raising `DecodeError` if malformed."""
        ...


def format_number(value: float) -> str:
    """Shortest numeric literal for `value` ("100" rather than "100.0")."""
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Cannot encode non-finite value: {value!r}")
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return repr(number)


class Base64FieldCodec:
    """`FHE-` tag followed by the base64 of the number's literal."""

    def __init__(self, tag: str = SCHEME_TAG) -> None:
        self.tag = tag

    def encode(self, value: float) -> str:
        literal = format_number(value)
        return self.tag + base64.b64encode(literal.encode("ascii")).decode("ascii")

    def decode(self, ciphertext: str) -> float:
        if not ciphertext.startswith(self.tag):
            raise DecodeError(ciphertext, f"missing {self.tag!r} scheme tag")

        payload = ciphertext[len(self.tag) :]
        try:
            literal = base64.b64decode(payload, validate=True).decode("ascii")
        except (binascii.Error, ValueError) as e:
            raise DecodeError(ciphertext, "payload is not valid base64 text") from e

        if not _NUMERIC_LITERAL.fullmatch(literal):
            raise DecodeError(ciphertext, f"payload {literal!r} is not a number")
        number = float(literal)
        if not math.isfinite(number):
            raise DecodeError(ciphertext, f"payload {literal!r} is not a finite number")
        return number


DEFAULT_CODEC: FieldCodec = Base64FieldCodec()
