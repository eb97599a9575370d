"""Classic array and string problems, most with brute-force and faster solutions."""

__version__ = "0.1.0"

__all__ = [
    "disappeared",
    "duplicates",
    "islands",
    "missing_number",
    "mountain",
    "points",
    "prefix",
    "smaller_numbers",
    "spiral",
    "squares",
    "stock",
    "three_sum",
    "two_sum",
]