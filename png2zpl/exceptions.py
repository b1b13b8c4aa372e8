from typing import Any


class ImageDecodeException(Exception):

    def __init__(self, source: Any, reason: Exception):
        self.source: Any = source
        self.reason: Exception = reason
        super().__init__(
            f'ERROR: Unable to decode image from {source}: {reason}'
        )


class InvalidCompressedDataException(Exception):

    def __init__(self, data: str, position: int):
        self.data: str = data
        self.position: int = position
        super().__init__(
            f'ERROR: Invalid ZPL compressed data: count prefix at position '
            f'{position} is not followed by a character to repeat.'
        )
