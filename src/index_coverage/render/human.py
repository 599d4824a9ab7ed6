"""Human-readable byte and count formatting."""

from __future__ import annotations

TB = 1 << 40
GB = 1 << 30
MB = 1 << 20
KB = 1 << 10

QUADRILLION = 1_000_000_000_000_000
TRILLION = 1_000_000_000_000
BILLION = 1_000_000_000
MILLION = 1_000_000
THOUSAND = 1_000


def human_bytes(n: int) -> str:
    """Format a byte count with a binary unit, e.g. ``"8.0 MB"`` or ``"1 TB"``.

    One decimal place is shown between 1 and 9.9 of a unit; above that the
    quotient is truncated.
    """
    if n >= TB:
        return f"{n // TB} TB"
    if n >= 10 * GB - GB // 10:
        return f"{n // GB} GB"
    if n >= GB:
        return f"{n / GB:.1f} GB"
    if n >= 10 * MB - MB // 10:
        return f"{n // MB} MB"
    if n >= MB:
        return f"{n / MB:.1f} MB"
    if n >= KB:
        return f"{n // KB} kB"
    return str(n)


def human_count(n: int) -> str:
    """Format a count with a truncated decimal suffix, e.g. ``"68 B"``."""
    for threshold, suffix in (
        (QUADRILLION, "Q"),
        (TRILLION, "T"),
        (BILLION, "B"),
        (MILLION, "M"),
        (THOUSAND, "k"),
    ):
        if n >= threshold:
            return f"{n // threshold} {suffix}"
    return str(n)
