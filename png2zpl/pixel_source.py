from typing import Iterator, Any, Dict, List, Sequence, Tuple
import logging

from PIL import Image

from png2zpl.zpl_info import LUMA_WEIGHTS, BLACK_THRESHOLD

logger = logging.getLogger(__name__)

Color = Tuple[int, ...]


def is_black_color(r: int, g: int, b: int, a: int = 0xffff) -> bool:
    """
    Decide whether a 16-bit-per-channel color prints black.

    Color channels are premultiplied by alpha before the luminance is
    computed, so fully transparent pixels come out black.
    """
    r = r * a // 0xffff
    g = g * a // 0xffff
    b = b * a // 0xffff
    wr, wg, wb = LUMA_WEIGHTS
    lum: int = (wr * r + wg * g + wb * b) // 1000 // 257
    return lum < BLACK_THRESHOLD


def is_black_color8(r: int, g: int, b: int, a: int = 0xff) -> bool:
    """:py:func:`is_black_color` for 8-bit channels."""
    return is_black_color(r * 257, g * 257, b * 257, a * 257)


class PixelSource:

    kind: str = 'abstract'

    def __init__(self, width: int, height: int):
        self.width: int = width
        self.height: int = height

    def is_black(self, x: int, y: int) -> bool:
        raise NotImplementedError()

    def rows(self, invert: bool = False) -> Iterator[List[bool]]:
        """Yield one list of black decisions per row, top to bottom."""
        y: int
        for y in range(self.height):
            yield [
                self.is_black(x, y) != invert for x in range(self.width)
            ]

    def __repr__(self) -> str:
        return f'<{type(self).__name__} {self.width}x{self.height}>'


class GrayscalePixelSource(PixelSource):

    kind: str = 'grayscale'

    def __init__(
        self, width: int, height: int, rows: Sequence[Sequence[int]]
    ):
        super().__init__(width, height)
        self._rows: Sequence[Sequence[int]] = rows

    def is_black(self, x: int, y: int) -> bool:
        return self._rows[y][x] < BLACK_THRESHOLD

    def rows(self, invert: bool = False) -> Iterator[List[bool]]:
        for row in self._rows:
            yield [
                (v < BLACK_THRESHOLD) != invert for v in row[:self.width]
            ]


class PalettePixelSource(PixelSource):

    kind: str = 'palette'

    def __init__(
        self, width: int, height: int, rows: Sequence[Sequence[int]],
        palette: Sequence[Color]
    ):
        super().__init__(width, height)
        self._rows: Sequence[Sequence[int]] = rows
        self.palette: List[Color] = list(palette)
        # one decision per palette entry, shared by every pixel using it
        self._palette_is_black: List[bool] = [
            is_black_color8(*entry) for entry in self.palette
        ]

    def is_black(self, x: int, y: int) -> bool:
        return self._palette_is_black[self._rows[y][x]]

    def rows(self, invert: bool = False) -> Iterator[List[bool]]:
        lookup: List[bool] = [v != invert for v in self._palette_is_black]
        for row in self._rows:
            yield [lookup[i] for i in row[:self.width]]


class GenericPixelSource(PixelSource):
    """
    Pixel source over flat RGBA rows, ``4 * width`` samples per row, of the
    given bit depth (8 or 16).
    """

    kind: str = 'generic'

    def __init__(
        self, width: int, height: int, rows: Sequence[Sequence[int]],
        bitdepth: int = 8
    ):
        super().__init__(width, height)
        self._rows: Sequence[Sequence[int]] = rows
        self.bitdepth: int = bitdepth
        self._scale: int = 0xffff // (2 ** bitdepth - 1)

    def is_black(self, x: int, y: int) -> bool:
        i: int = x * 4
        s: int = self._scale
        r, g, b, a = self._rows[y][i:i + 4]
        return is_black_color(r * s, g * s, b * s, a * s)


def _is_palette(info: Dict[str, Any]) -> bool:
    # truecolor images may carry a suggested palette; their rows are not indices
    return 'palette' in info and info.get('planes', 1) == 1


def from_png_reader(
    width: int, height: int, rows: Iterator[Sequence[int]],
    info: Dict[str, Any]
) -> PixelSource:
    """
    Build a pixel source from the output of :py:meth:`png.Reader.read`.

    Only palette and plain greyscale images can be served from ``read()``
    output; callers must supply ``asRGBA()`` output for anything else, as
    reported by :py:func:`png_needs_rgba`.
    """
    if _is_palette(info):
        palette: List[Color] = list(info['palette'])
        logger.debug('Using palette pixel source with %d entries', len(palette))
        # indices past the end of PLTE read as opaque black
        palette += [(0, 0, 0)] * (2 ** info['bitdepth'] - len(palette))
        return PalettePixelSource(width, height, list(rows), palette)
    if png_needs_rgba(info):
        logger.debug(
            'Using generic pixel source at %d bits per channel',
            info['bitdepth']
        )
        return GenericPixelSource(
            width, height, list(rows), bitdepth=info['bitdepth']
        )
    maxval: int = 2 ** info['bitdepth'] - 1
    logger.debug(
        'Using grayscale pixel source; rescaling %d-bit samples',
        info['bitdepth']
    )
    return GrayscalePixelSource(
        width, height, [[v * 255 // maxval for v in row] for row in rows]
    )


def png_needs_rgba(info: Dict[str, Any]) -> bool:
    """
    Whether a PNG with this ``info`` must be read with ``asRGBA()``, i.e. it
    is neither palette-indexed nor greyscale without any transparency.
    """
    if _is_palette(info):
        return False
    return (
        not info['greyscale'] or info['alpha'] or
        info.get('transparent') is not None
    )


def _pil_rows(data: bytes, row_len: int, height: int) -> List[bytes]:
    return [data[y * row_len:(y + 1) * row_len] for y in range(height)]


def from_pil_image(image: Image.Image) -> PixelSource:
    width: int
    height: int
    width, height = image.size
    logger.debug('Building pixel source for %s image', image.mode)
    if image.mode == '1':
        image = image.convert('L')
    # greyscale with a transparent value goes through RGBA, like tRNS PNGs
    if image.mode == 'L' and 'transparency' not in image.info:
        return GrayscalePixelSource(
            width, height, _pil_rows(image.tobytes(), width, height)
        )
    if image.mode == 'P':
        flat: List[int] = image.getpalette() or []
        palette: List[Color] = [
            tuple(flat[i:i + 3]) for i in range(0, len(flat), 3)
        ]
        # entries missing from a short palette read as black
        palette += [(0, 0, 0)] * (256 - len(palette))
        transparency = image.info.get('transparency')
        if isinstance(transparency, int):
            palette = [
                c + ((0,) if idx == transparency else (255,))
                for idx, c in enumerate(palette)
            ]
        elif isinstance(transparency, bytes):
            palette = [
                c + ((transparency[idx],) if idx < len(transparency) else (255,))
                for idx, c in enumerate(palette)
            ]
        return PalettePixelSource(
            width, height, _pil_rows(image.tobytes(), width, height), palette
        )
    rgba: Image.Image = image.convert('RGBA')
    return GenericPixelSource(
        width, height, _pil_rows(rgba.tobytes(), width * 4, height),
        bitdepth=8
    )
