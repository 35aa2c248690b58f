"""
Kansuji — Japanese kanji numerals to numbers and back.

Range: 垓 (10^20) groups down to 毛 (10^-3).
Flow:  text → tokens → ParsedNumber → int / float, and the reverse.
"""

from .exceptions import KansujiError
from .numeral import Kansuji, decode, encode, normalize

__version__ = "1.0.0"

__all__ = ["Kansuji", "KansujiError", "decode", "encode", "normalize"]
