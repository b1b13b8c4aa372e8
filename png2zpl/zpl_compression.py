"""
Hex encoding and the ZPL ASCII run-length compression used in ``^GFA`` data.

A run of three or more identical characters is replaced by count characters
followed by the character itself: ``z`` repeats 400 times, ``g`` to ``y``
repeat 20 to 380 times and ``G`` to ``Y`` repeat 1 to 19 times. Count
characters add up, so ``zgI0`` is 423 zeros. Shorter runs are left as is.
"""

from itertools import groupby
from typing import List
import logging

from png2zpl.exceptions import InvalidCompressedDataException
from png2zpl.zpl_info import (
    MIN_RUN_LENGTH, BLOCK_400, BLOCK_400_CHAR, BLOCK_20, BLOCK_20_BASE,
    BLOCK_1_BASE, COUNT_CHARS
)

logger = logging.getLogger(__name__)


def hex_encode(data: bytes) -> str:
    return data.hex().upper()


def hex_decode(text: str) -> bytes:
    return bytes.fromhex(text)


def count_prefix(run: int) -> str:
    """Return the count characters that denote ``run`` repeats."""
    prefix: str = ''
    if run > BLOCK_400:
        prefix += BLOCK_400_CHAR * (run // BLOCK_400)
        run %= BLOCK_400
    # exactly 400 lands here as chr(ord('f') + 20), which is also 'z'
    if run >= BLOCK_20:
        prefix += chr(ord(BLOCK_20_BASE) + run // BLOCK_20)
        run %= BLOCK_20
    if run > 0:
        prefix += chr(ord(BLOCK_1_BASE) + run)
    return prefix


def compress(data: str) -> str:
    if not data:
        return data
    out: List[str] = []
    for char, group in groupby(data):
        run: int = sum(1 for _ in group)
        if run < MIN_RUN_LENGTH:
            out.append(char * run)
        else:
            out.append(count_prefix(run))
            out.append(char)
    compressed: str = ''.join(out)
    logger.debug(
        'Compressed %d characters of hex data to %d', len(data),
        len(compressed)
    )
    return compressed


def decompress(data: str) -> str:
    """
    Expand data produced by :py:func:`compress`.

    Characters that are not count characters are copied once unless a count
    precedes them. Raises :py:exc:`InvalidCompressedDataException` if the
    data ends with a count that has no character to repeat.
    """
    out: List[str] = []
    count: int = 0
    start: int = 0
    for i, char in enumerate(data):
        if char in COUNT_CHARS:
            if not count:
                start = i
            count += COUNT_CHARS[char]
            continue
        out.append(char * (count or 1))
        count = 0
    if count:
        raise InvalidCompressedDataException(data, start)
    return ''.join(out)
