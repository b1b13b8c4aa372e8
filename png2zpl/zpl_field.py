class ZplGraphicField:
    """
    A ``^GFA`` graphic field holding compressed ASCII hex bitmap data,
    wrapped in a one-field label format at origin ``0,0``.
    """

    def __init__(self, total_bytes: int, bytes_per_row: int, data: str):
        self.total_bytes: int = total_bytes
        self.bytes_per_row: int = bytes_per_row
        self.data: str = data

    def to_zpl(self) -> str:
        # total_bytes appears twice: binary byte count and graphic field count
        return (
            '^XA\n'
            '^FO0,0\n'
            f'^GFA,{self.total_bytes},{self.total_bytes},'
            f'{self.bytes_per_row},{self.data}\n'
            '^XZ\n'
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, ZplGraphicField):
            return NotImplemented
        return (
            self.total_bytes == other.total_bytes and
            self.bytes_per_row == other.bytes_per_row and
            self.data == other.data
        )

    def __repr__(self) -> str:
        return (
            f'<ZplGraphicField total_bytes={self.total_bytes} '
            f'bytes_per_row={self.bytes_per_row} data_len={len(self.data)}>'
        )
