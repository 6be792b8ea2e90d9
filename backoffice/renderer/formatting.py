import math
from typing import Optional

BYTE_UNITS = ["Bytes", "KB", "MB", "GB", "TB"]


def format_bytes(size: Optional[float]) -> str:
    """Human readable size in base 1024 with at most two decimals."""
    if not size or size <= 0:
        return "0 Bytes"
    exponent = 0
    scaled = float(size)
    while scaled >= 1024 and exponent < len(BYTE_UNITS) - 1:
        scaled /= 1024
        exponent += 1
    rounded = math.floor(scaled * 100 + 0.5) / 100
    return f"{rounded:g} {BYTE_UNITS[exponent]}"
