import struct
from typing import BinaryIO

EOF = -1

class BitBuffer:
    """Packs single bits into bytes, first bit in the most significant position, and reads them back in the
    same order.
    """
    BYTE_BIT_WIDTH = 8
    BYTE_STRUCT_FMT = "!B"

    def __init__(self, backing_buff: BinaryIO) -> None:
        self.buff = 0
        self.accumulated_size = 0
        self.backing_buff = backing_buff

    def write(self, bit: int) -> bytes | None:
        """Appends one bit, returns the byte it completed if any."""
        self.buff = (self.buff << 1) | (bit & 1)
        self.accumulated_size += 1
        if self.accumulated_size < self.BYTE_BIT_WIDTH:
            return None
        return self._emit()

    def read(self) -> int:
        if self.accumulated_size == 0:
            serialized = self.backing_buff.read(1)
            if not serialized:
                return EOF
            self.buff = struct.unpack(self.BYTE_STRUCT_FMT, serialized)[0]
            self.accumulated_size = self.BYTE_BIT_WIDTH
        self.accumulated_size -= 1
        return (self.buff >> self.accumulated_size) & 1

    def flush(self) -> bytes:
        """Pads the partially filled byte with zeros and writes it out."""
        self.buff <<= (self.BYTE_BIT_WIDTH - self.accumulated_size)
        return self._emit()

    def skip_to_byte_boundary(self) -> None:
        """Drops the bits left over from the byte currently being read."""
        self.buff = 0
        self.accumulated_size = 0

    def is_empty(self) -> bool:
        return self.accumulated_size == 0

    def _emit(self) -> bytes:
        serialized_buff = struct.pack(self.BYTE_STRUCT_FMT, self.buff)
        self.buff = 0
        self.accumulated_size = 0
        self.backing_buff.write(serialized_buff)
        return serialized_buff
