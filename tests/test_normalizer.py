import pytest

from analysis.normalizer import is_punctuation, normalize


def test_normalize_strips_punctuation_and_lowercases():
    assert normalize("I wouldn't take [those] odds!") == "i wouldnt take those odds"
    assert normalize('"Do you know that man?" he said.') == "do you know that man he said"


def test_normalize_empty():
    assert normalize("") == ""


def test_normalize_unicode_punctuation():
    # guillemets (Pi/Pf), em dash and non-breaking hyphen (Pd)
    assert normalize("«Bonjour» — dit‑il") == "bonjour  ditil"
    assert normalize("ÉCOLE") == "école"


def test_normalize_keeps_symbols_digits_and_whitespace():
    assert normalize("$5 + 3 = 8\tok\n") == "$5 + 3 = 8\tok\n"


@pytest.mark.parametrize("ch", ["_", "-", "(", ")", "“", "”", "!", "¿"])
def test_is_punctuation(ch):
    assert is_punctuation(ch)


@pytest.mark.parametrize("ch", ["a", "7", " ", "$", "+", "€"])
def test_is_not_punctuation(ch):
    assert not is_punctuation(ch)


@pytest.mark.parametrize(
    "text",
    ["Hello, World!", "It's — “quoted” — text…", "MiXeD 123 (case)", "ŞEHİR"],
)
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once
