import unicodedata


def is_punctuation(ch: str) -> bool:
    # Pc, Pd, Ps, Pe, Pi, Pf, Po
    return unicodedata.category(ch).startswith("P")


def normalize(text: str) -> str:
    """
    Lowercase text and drop Unicode punctuation. Symbols, digits, letters
    and whitespace are left alone.

    >>> normalize("I wouldn't take [those] odds!")
    'i wouldnt take those odds'
    """
    return "".join(ch for ch in text.lower() if not is_punctuation(ch))
