# coding=utf-8

from nordstem.lang.snowball.bases import (VowelSet, _ScandinavianStemmer,
                                          _StandardStemmer, region)


fi_vowels = VowelSet("aeiouy\xe4\xf6")
sv_vowels = VowelSet("aeiouy\xe4\xe5\xf6")


def test_is_vowel():
    assert fi_vowels.is_vowel("a")
    assert fi_vowels.is_vowel("\xe4")
    assert not fi_vowels.is_vowel("k")
    assert not fi_vowels.is_vowel("")
    # Membership is case sensitive
    assert not fi_vowels.is_vowel("A")
    assert not fi_vowels.is_vowel("\xe5")
    assert sv_vowels.is_vowel("\xe5")
    assert "o" in fi_vowels


def test_vowelset_repr():
    assert repr(VowelSet("ua")) == "VowelSet('au')"
    assert list(VowelSet("ua")) == ["a", "u"]


def test_short_syllable_at_start():
    assert fi_vowels.is_short_syllable("at", 0)
    assert not fi_vowels.is_short_syllable("ta", 0)
    assert not fi_vowels.is_short_syllable("a", 0)


def test_short_syllable_inside():
    assert fi_vowels.is_short_syllable("bat", 1)
    assert not fi_vowels.is_short_syllable("baw", 1)
    assert not fi_vowels.is_short_syllable("bax", 1)
    assert not fi_vowels.is_short_syllable("baY", 1)
    assert not fi_vowels.is_short_syllable("boat", 2)
    assert not fi_vowels.is_short_syllable("bta", 1)
    # Neighbours out of range
    assert not fi_vowels.is_short_syllable("bat", 2)
    assert not fi_vowels.is_short_syllable("bat", -1)
    assert not fi_vowels.is_short_syllable("", 0)


def test_short_word():
    assert fi_vowels.is_short_word("bat", "")
    assert not fi_vowels.is_short_word("bat", "t")
    assert not fi_vowels.is_short_word("boat", "")
    assert not fi_vowels.is_short_word("", "")
    assert not fi_vowels.is_short_word("a", "")


def test_standard_regions():
    s = _StandardStemmer()
    assert s._r1r2_standard("valitse", fi_vowels) == (3, 5)
    assert s._r1r2_standard("erikoismerkit", fi_vowels) == (2, 4)
    assert s._r1r2_standard("koko", fi_vowels) == (3, 4)
    assert s._r1r2_standard("kin", fi_vowels) == (3, 3)
    assert s._r1r2_standard("aaaa", fi_vowels) == (4, 4)
    assert s._r1r2_standard("", fi_vowels) == (0, 0)


def test_scandinavian_region():
    s = _ScandinavianStemmer()
    assert s._r1_scandinavian("kvinnor", sv_vowels) == 4
    assert s._r1_scandinavian("hus", sv_vowels) == 3
    # Never before the fourth letter
    assert s._r1_scandinavian("as", sv_vowels) == 3
    assert s._r1_scandinavian("ett", sv_vowels) == 3
    assert s._r1_scandinavian("", sv_vowels) == 3


def test_region():
    assert region("valitse", 3) == "itse"
    assert region("valitse", 7) == ""
    assert region("kin", 10) == ""


def test_stem_is_abstract():
    import pytest

    with pytest.raises(NotImplementedError):
        _StandardStemmer().stem("talo")


def test_lowercase():
    from nordstem.lang.snowball.bases import lowercase

    assert lowercase("TALO") == "talo"
    assert lowercase("\xc4\xc4") == "\xe4\xe4"
    assert lowercase("") == ""
    assert lowercase("İSTANBUL") == "İstanbul"
    assert len(lowercase("İ")) == 1
