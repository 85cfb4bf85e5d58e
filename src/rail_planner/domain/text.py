"""Text normalization for city and weekday lookups."""

import unicodedata


def normalize_key(value: object) -> str:
    """Normalize free text for case- and diacritic-insensitive comparison.

    Decomposes to NFD, drops combining marks, trims and lower-cases.
    ``None`` becomes the empty string.
    """
    if value is None:
        return ""
    decomposed = unicodedata.normalize("NFD", str(value))
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.strip().lower()
