"""
Decoding of Cloudflare-protected email addresses.
"""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)


_LEADING_HEX = re.compile(r"[0-9a-fA-F]+")


def _hex_byte(pair: str) -> Optional[int]:
    # Reads the leading hex digits, so "0g" is 0 and "g0" is invalid.
    # Unlike a browser's parseInt, a sign or leading whitespace is invalid.
    match = _LEADING_HEX.match(pair)
    if match is None:
        return None
    return int(match.group(), 16)


def decode_email(encoded: str) -> str:
    """
    Reverse the data-cfemail obfuscation.

    The value is a run of hex byte pairs. The first byte is an XOR key applied
    to every following byte. Malformed input never raises: a bad key yields an
    empty string and bad pairs after the key are skipped.
    """
    if len(encoded) < 2:
        return ""

    key = _hex_byte(encoded[:2])
    if key is None:
        logger.debug(f"Invalid email key byte in {encoded!r}")
        return ""

    chars = []
    for i in range(2, len(encoded), 2):
        code = _hex_byte(encoded[i : i + 2])
        if code is None:
            continue
        chars.append(chr(code ^ key))
    return "".join(chars)
