# levelgen/utils/bounds.py
import math
from typing import Any, Optional

# Playability limits (pixels). The player can jump about 120px high.
MAX_JUMP_REACH = 120.0
MIN_PLATFORM_CLEARANCE = 60.0

PALETTE = ["#c0392b", "#27ae60", "#2980b9", "#8e44ad", "#d35400"]

def palette_color(i: int) -> str:
    return PALETTE[i % len(PALETTE)]

def _as_number(raw: Any) -> Optional[float]:
    # bool is an int subclass; a flag is never a number here
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        try:
            value = float(raw)
        except OverflowError:
            value = math.inf if raw > 0 else -math.inf
    elif isinstance(raw, float):
        value = raw
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(value) or value == 0:
        return None
    return value

def clamp_number(raw: Any, fallback: float, lo: float, hi: float) -> float:
    """Clamp raw into [lo, hi]; anything absent, zero or non-numeric takes fallback.

    Never raises. The fallback itself is clamped too, so the result is always in range.
    """
    value = _as_number(raw)
    if value is None:
        value = float(fallback)
    return max(lo, min(hi, value))

def clamp_int(raw: Any, fallback: int, lo: int, hi: int) -> int:
    return int(round(clamp_number(raw, fallback, lo, hi)))

def clamp_flag(raw: Any, default: bool = True) -> bool:
    # tri-state: only an explicit boolean overrides the default
    if isinstance(raw, bool):
        return raw
    return default

def clean_text(raw: Any, fallback: str, max_len: int = 80) -> str:
    if not isinstance(raw, str):
        return fallback
    # lone surrogates decode from JSON but are not valid text
    text = raw.encode("utf-8", "replace").decode("utf-8")
    text = text.strip()[:max_len].strip()
    return text or fallback
