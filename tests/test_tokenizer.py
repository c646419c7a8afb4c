from analysis.normalizer import is_punctuation
from analysis.tokenizer import is_short_word, tokenize, word_length


def test_tokenize_sample_text():
    text = "Hello, John.\nNice to see you again!\n\nWhere are you going today?"
    assert tokenize(text) == [
        "hello", "john", "nice", "see", "you", "again",
        "where", "are", "you", "going", "today",
    ]


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize("  \n\t ") == []


def test_is_short_word():
    assert is_short_word("s")
    assert not is_short_word("long")
    assert not is_short_word("abc")
    assert is_short_word("abc", min_length=4)


def test_tokenize_keeps_digits_and_alphanumerics():
    assert tokenize("route 66 has 1234 miles and a4b") == ["route", "has", "1234", "miles", "and", "a4b"]


def test_tokenize_custom_min_length():
    assert tokenize("a bb ccc dddd", min_length=1) == ["a", "bb", "ccc", "dddd"]
    assert tokenize("a bb ccc dddd", min_length=4) == ["dddd"]


def test_punctuation_only_tokens_disappear():
    assert tokenize("--- ... !!! word") == ["word"]


def test_tokens_respect_length_and_contain_no_separators():
    text = "The quick, brown fox—jumped over:\tthe (lazy) dog's back!\r\nOK?"
    for min_length in (1, 3, 5):
        for word in tokenize(text, min_length):
            assert len(word) >= min_length
            assert not any(ch.isspace() or is_punctuation(ch) for ch in word)


def test_word_length_counts_graphemes():
    assert word_length("e\u0301te\u0301") == 3
    assert word_length("été") == 3
    assert word_length("") == 0


def test_combining_marks_do_not_lengthen_words():
    decomposed_es = "e\u0301s"
    decomposed_ete = "e\u0301te\u0301"
    assert tokenize(f"{decomposed_es} {decomposed_ete}") == [decomposed_ete]
    assert is_short_word(decomposed_es)
