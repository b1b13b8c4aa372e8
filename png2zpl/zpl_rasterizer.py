from typing import List
import logging

from png2zpl.pixel_source import PixelSource

logger = logging.getLogger(__name__)


def bytes_per_row(width: int) -> int:
    return (width + 7) // 8


def pack_bitmap(source: PixelSource, invert: bool = False) -> bytearray:
    """
    Pack the black decisions of ``source`` into a monochrome bitmap.

    Rows are packed top to bottom, one bit per pixel with the leftmost pixel
    in the most significant bit. Every row takes ``bytes_per_row(width)``
    bytes; the unused low-order bits of a row's last byte are zero.
    """
    logger.debug(
        'Packing %dx%d %s pixel source (invert=%s)',
        source.width, source.height, source.kind, invert
    )
    buffer: bytearray = bytearray()
    row: List[bool]
    for row in source.rows(invert=invert):
        byte: int = 0
        bit: int = 7
        for black in row:
            if black:
                byte |= (1 << bit)
            bit -= 1
            if bit < 0:
                buffer.append(byte)
                byte = 0
                bit = 7
        # partial byte at the end of the row
        if bit != 7:
            buffer.append(byte)
    logger.debug('Packed bitmap is %d bytes', len(buffer))
    return buffer


def pixel_is_black(bitmap: bytes, width: int, x: int, y: int) -> bool:
    """Read back the bit for pixel ``(x, y)`` of a packed bitmap."""
    byte: int = bitmap[y * bytes_per_row(width) + x // 8]
    return bool(byte & (1 << (7 - x % 8)))
