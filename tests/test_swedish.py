# coding=utf-8

import pytest

from nordstem.lang.snowball.swedish import SwedishStemmer


stemmer = SwedishStemmer()

golden = [
    ("kvinnor", "kvinn"),
    ("kvinnornas", "kvinn"),
    ("fullt", "full"),
    ("l\xf6st", "l\xf6s"),
    ("klokheten", "klok"),
    ("h\xe4starna", "h\xe4st"),
    ("flickorna", "flick"),
    ("bilens", "bil"),
    ("fiskens", "fisk"),
    ("husets", "huset"),
    ("gatans", "gatan"),
    ("kraftigt", "kraft"),
    ("k\xe4rlighet", "k\xe4r"),
    ("hus", "hus"),
    ("as", "as"),
]


@pytest.mark.parametrize("word,stem", golden)
def test_golden(word, stem):
    assert stemmer.stem(word) == stem


def test_uppercase():
    assert stemmer.stem("KVINNOR") == "kvinn"
    assert stemmer.stem("Flickorna") == "flick"


def test_never_longer():
    for word, _ in golden:
        assert len(stemmer.stem(word)) <= len(word)


def test_minimal_stems_are_stable():
    for stem in ("kvinn", "h\xe4st", "bil", "hus", "flick"):
        assert stemmer.stem(stem) == stem


def test_s_ending():
    # The final s goes only after one of the listed letters
    assert stemmer.stem("husets") == "huset"
    assert stemmer.stem("gatans") == "gatan"
    assert stemmer.stem("kurus") == "kurus"
    assert stemmer.stem("kurss") == "kurss"


def test_short_words_untouched():
    # R1 never starts before the fourth letter
    for word in ("", "a", "as", "en", "ett", "och"):
        assert stemmer.stem(word) == word


def test_fullt_matches_whole_word():
    # "fullt" and "löst" are matched against the whole word, not just R1,
    # but only a "t" inside R1 is removed
    assert stemmer.stem("fullt") == "full"
    assert stemmer.stem("kraftfullt") == "kraftfull"
    assert stemmer.stem("l\xf6st") == "l\xf6s"


def test_lowercase_never_lengthens():
    # "İ".lower() is two characters long
    assert stemmer.stem("İ") == "İ"
    assert stemmer.stem("KVINNOR") == "kvinn"
