import sys
import argparse
import logging
import zlib
from typing import Union, Optional
from io import BytesIO

import png
from PIL import Image

from png2zpl.utils import (
    set_log_debug, set_log_info, add_converter_args
)
from png2zpl.exceptions import ImageDecodeException
from png2zpl.pixel_source import (
    PixelSource, from_png_reader, from_pil_image, png_needs_rgba
)
from png2zpl.zpl_rasterizer import bytes_per_row, pack_bitmap
from png2zpl.zpl_compression import hex_encode, compress
from png2zpl.zpl_field import ZplGraphicField

FORMAT = "[%(asctime)s %(levelname)s] %(message)s"
logging.basicConfig(level=logging.WARNING, format=FORMAT)
logger = logging.getLogger()


class Png2ZplConverter:

    def __init__(self, invert: bool = False):
        self.invert: bool = invert

    def convert_source(self, source: PixelSource) -> ZplGraphicField:
        row_bytes: int = bytes_per_row(source.width)
        data: bytearray = pack_bitmap(source, invert=self.invert)
        hex_data: str = hex_encode(data)
        compressed: str = compress(hex_data)
        logger.info(
            'Converted %dx%d image to %d bytes (%d per row); %d characters '
            'of compressed data', source.width, source.height, len(data),
            row_bytes, len(compressed)
        )
        return ZplGraphicField(len(data), row_bytes, compressed)

    def convert_image(self, image: Image.Image) -> ZplGraphicField:
        return self.convert_source(from_pil_image(image))

    def convert_png(self, data: Union[str, BytesIO]) -> ZplGraphicField:
        try:
            raw: bytes = self._read(data)
            width, height, rows, info = png.Reader(bytes=raw).read()
            if png_needs_rgba(info):
                width, height, rows, info = png.Reader(bytes=raw).asRGBA()
            source: PixelSource = from_png_reader(width, height, rows, info)
        except (png.Error, OSError, zlib.error) as ex:
            raise ImageDecodeException(data, ex) from ex
        return self.convert_source(source)

    def _read(self, data: Union[str, BytesIO]) -> bytes:
        if isinstance(data, str):
            logger.debug('Using PNG from file at: %s', data)
            with open(data, 'rb') as fh:
                return fh.read()
        logger.debug('Using PNG from file-like object')
        return data.read()

    def write(self, field: ZplGraphicField, output: Optional[str] = None):
        zpl: str = field.to_zpl()
        if output is None:
            logger.debug('Writing %d characters to stdout', len(zpl))
            sys.stdout.write(zpl)
            sys.stdout.flush()
            return
        logger.info('Writing ZPL to: %s', output)
        with open(output, 'w', encoding='ascii', newline='') as fh:
            fh.write(zpl)


def main():
    p = argparse.ArgumentParser(
        description='Convert a PNG image to a ZPL ^GFA graphic field'
    )
    add_converter_args(p)
    args = p.parse_args(sys.argv[1:])
    # set logging level
    if args.verbose:
        set_log_debug(logger)
    else:
        set_log_info(logger)
    converter: Png2ZplConverter = Png2ZplConverter(invert=args.invert)
    try:
        field: ZplGraphicField = converter.convert_png(args.input)
    except ImageDecodeException as ex:
        logger.error('%s', ex)
        raise SystemExit(1)
    converter.write(field, args.output)


if __name__ == "__main__":
    main()
