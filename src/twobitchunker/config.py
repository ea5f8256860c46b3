"""Run configuration for the chunker."""

from dataclasses import dataclass
from typing import Dict

from twobitchunker.output.c_source import DEFAULT_SYMBOL_PREFIX


@dataclass
class ChunkerConfig:
    """Where extracted images go and which files get written for each of them."""

    output_dir: str = "."
    symbol_prefix: str = DEFAULT_SYMBOL_PREFIX
    write_png: bool = True
    write_c: bool = True

    def validate(self) -> None:
        """Validate configuration values."""
        if not self.output_dir:
            raise ValueError("output_dir must not be empty")
        if not self.symbol_prefix.isidentifier() or not self.symbol_prefix.isascii():
            raise ValueError("symbol_prefix must be a valid C identifier")

    def to_dict(self) -> Dict[str, object]:
        """Return a JSON-serializable dict."""
        return {
            "output_dir": self.output_dir,
            "symbol_prefix": self.symbol_prefix,
            "write_png": self.write_png,
            "write_c": self.write_c,
        }
