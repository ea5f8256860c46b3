from io import StringIO
from typing import TextIO

from twobitchunker.model import PackedImage

DEFAULT_SYMBOL_PREFIX = "image"
INDENT = "    "
ELEMENT_SEPARATOR = ", "
ROW_TERMINATOR = ","
CLOSING_LINE = "};"


def format_byte(v: int) -> str:
    return f"0b{v:08b}"


class CSourceSerializer:
    """Writes a packed image as C declarations:

        byte image7Width = 3;
        byte image7Height = 3;
        unsigned int image7Size = 3;

        byte image7Data[] = {
            0b11100000,
            ...
        };

    Each line of the array holds one image row.
    """

    def __init__(self, symbol_prefix: str = DEFAULT_SYMBOL_PREFIX) -> None:
        self.symbol_prefix = symbol_prefix
        self.file: TextIO = None

    def symbol_names(self, sequence_number: int) -> tuple[str, str, str, str]:
        base = f"{self.symbol_prefix}{sequence_number}"
        return f"{base}Width", f"{base}Height", f"{base}Size", f"{base}Data"

    def serialize(self, packed: PackedImage, sequence_number: int, output: str | TextIO):
        self.file = output
        should_close = False
        try:
            if isinstance(output, str):
                self.file = open(output, 'w', encoding='ascii', newline='\n')
                should_close = True
            self._write_header(packed, sequence_number)
            self._write_data(packed, sequence_number)
        finally:
            if should_close:
                self.file.close()
            self.file = None

    def to_string(self, packed: PackedImage, sequence_number: int) -> str:
        out = StringIO()
        self.serialize(packed, sequence_number, out)
        return out.getvalue()

    def _write_header(self, packed: PackedImage, sequence_number: int):
        width, height, size, _ = self.symbol_names(sequence_number)
        self.file.write(f"byte {width} = {packed.width};\n")
        self.file.write(f"byte {height} = {packed.height};\n")
        self.file.write(f"unsigned int {size} = {packed.total_bytes};\n")
        self.file.write("\n")

    def _write_data(self, packed: PackedImage, sequence_number: int):
        *_, data = self.symbol_names(sequence_number)
        self.file.write(f"byte {data}[] = {{\n")
        rows = packed.rows()
        for i, row in enumerate(rows):
            self.file.write(INDENT + ELEMENT_SEPARATOR.join(format_byte(v) for v in row))
            self.file.write(ROW_TERMINATOR + "\n" if i < len(rows) - 1 else "\n")
        self.file.write(CLOSING_LINE + "\n")
