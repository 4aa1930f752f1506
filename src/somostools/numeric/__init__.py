from .exact import format_exact, is_non_finite, parse_exact

__all__ = [
    "format_exact",
    "is_non_finite",
    "parse_exact",
]
