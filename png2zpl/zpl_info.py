from typing import Dict, Tuple

#: Luma weights (R, G, B), applied as ``(wr*R + wg*G + wb*B) / 1000``
LUMA_WEIGHTS: Tuple[int, int, int] = (299, 587, 114)

#: 8-bit luminance below this value is printed black
BLACK_THRESHOLD: int = 128

#: Runs shorter than this are copied into the compressed data unchanged
MIN_RUN_LENGTH: int = 3

#: Count character for a block of 400 repeats
BLOCK_400_CHAR: str = 'z'
BLOCK_400: int = 400

#: ``chr(ord(BLOCK_20_BASE) + n)`` repeats ``n * 20`` times, n in 1..19
BLOCK_20_BASE: str = 'f'
BLOCK_20: int = 20

#: ``chr(ord(BLOCK_1_BASE) + n)`` repeats ``n`` times, n in 1..19
BLOCK_1_BASE: str = 'F'

#: Mapping of every ZPL count character to the repeat count it denotes
COUNT_CHARS: Dict[str, int] = {BLOCK_400_CHAR: BLOCK_400}
COUNT_CHARS.update({
    chr(ord(BLOCK_20_BASE) + n): n * BLOCK_20 for n in range(1, 20)
})
COUNT_CHARS.update({
    chr(ord(BLOCK_1_BASE) + n): n for n in range(1, 20)
})
