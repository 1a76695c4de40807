"""
Text normalisation helpers shared by configuration loading and risk lookup.
"""

import re
import unicodedata

_NON_LETTERS = re.compile(r"[^a-z]")


def normalize_keyword(value: str) -> str:
    """
    Fold a free-text value into a bare lowercase a-z keyword.

    Accents are folded to their ASCII base letter before every other
    character is dropped, so "Médico", "medico" and "MÉDICO" all give
    "medico" and "Construção Civil" gives "construcaocivil".
    """
    if not value:
        return ""
    decomposed = unicodedata.normalize("NFKD", value)
    ascii_only = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_LETTERS.sub("", ascii_only.lower())
