# coding=utf-8

import logging
import pickle

import pytest

from nordstem import filters
from nordstem.lang import NoStemmer
from nordstem.lang.snowball import FinnishStemmer
from nordstem.util.cache import lfu_cache, unbound_cache


def test_stemfilter_lang():
    sf = filters.StemFilter(lang="fi")
    words = ["taloissa", "kissa", "autossa"]
    assert list(sf(words)) == ["talo", "kis", "auto"]
    assert sf.stem("kirjoissa") == "kirj"


def test_stemfilter_stemfn():
    sf = filters.StemFilter(FinnishStemmer().stem, cachesize=None)
    assert list(sf(["taloissa"])) == ["talo"]
    assert sf.cache_info() is None


def test_stemfilter_is_lazy():
    sf = filters.StemFilter(lang="sv")
    gen = sf(iter(["kvinnor", "flickorna"]))
    assert next(gen) == "kvinn"
    assert next(gen) == "flick"


def test_stemfilter_ignore():
    sf = filters.StemFilter(lang="sv", ignore=["kvinnor"])
    assert list(sf(["kvinnor", "flickorna"])) == ["kvinnor", "flick"]
    assert sf.stem("kvinnor") == "kvinnor"


def test_stemfilter_needs_stemmer():
    with pytest.raises(ValueError):
        filters.StemFilter()
    with pytest.raises(NoStemmer):
        filters.StemFilter(lang="xx")


def test_stemfilter_cache():
    sf = filters.StemFilter(lang="fi", cachesize=10)
    list(sf(["kissa", "kissa", "talo"]))
    hits, misses, maxsize, size = sf.cache_info()
    assert (hits, misses, maxsize, size) == (1, 2, 10, 2)

    sf.clear()
    assert sf.cache_info() == (0, 0, 10, 0)


def test_stemfilter_unbound_cache():
    sf = filters.StemFilter(lang="fi", cachesize=-1)
    assert list(sf(["kissa", "kissa", "talo"])) == ["kis", "kis", "talo"]
    assert sf.cache_info() is None


def test_stemfilter_pickle():
    sf = filters.StemFilter(lang="sv", ignore=["hus"], cachesize=100)
    list(sf(["kvinnor"]))
    sf2 = pickle.loads(pickle.dumps(sf))
    assert sf2 == sf
    assert sf2.cache_info() == (0, 0, 100, 0)
    assert list(sf2(["kvinnor", "hus"])) == ["kvinn", "hus"]


def test_stemfilter_equality():
    assert filters.StemFilter(lang="fi") == filters.StemFilter(lang="fi")
    assert filters.StemFilter(lang="fi") != filters.StemFilter(lang="sv")
    assert (filters.StemFilter(lang="fi", ignore=["a"])
            != filters.StemFilter(lang="fi"))


def test_logging_filter(caplog):
    lf = filters.LoggingFilter()
    with caplog.at_level(logging.DEBUG, logger="nordstem.filters"):
        assert list(lf(["alfa", "bravo"])) == ["alfa", "bravo"]
    assert "'alfa'" in caplog.text
    assert "'bravo'" in caplog.text


def test_logging_filter_custom_logger(caplog):
    log = logging.getLogger("nordstem.test")
    lf = filters.LoggingFilter(logger=log)
    with caplog.at_level(logging.DEBUG, logger="nordstem.test"):
        list(lf(["charlie"]))
    assert [r.name for r in caplog.records] == ["nordstem.test"]


def test_composition():
    chain = filters.StemFilter(lang="fi") | filters.LoggingFilter()
    assert isinstance(chain, filters.CompositeFilter)
    assert len(chain) == 2
    assert list(chain(["taloissa", "kissa"])) == ["talo", "kis"]

    chain2 = chain | filters.StemFilter(lang="sv")
    assert len(chain2) == 3
    assert isinstance(chain2[2], filters.StemFilter)

    with pytest.raises(TypeError):
        chain | "not a filter"


def test_unbound_cache():
    calls = []

    @unbound_cache
    def double(x):
        calls.append(x)
        return x * 2

    assert double(2) == 4
    assert double(2) == 4
    assert calls == [2]
    assert double(3) == 6
    assert calls == [2, 3]


def test_lfu_cache_evicts():
    @lfu_cache(maxsize=10)
    def ident(x):
        return x

    for _ in range(3):
        ident(0)
    for i in range(1, 10):
        ident(i)
    assert ident.cache_info()[3] == 10

    # The cache is full, so the least used entry is dropped
    ident(10)
    hits, misses, maxsize, size = ident.cache_info()
    assert size == 10
    assert misses == 11
    ident(0)
    assert ident.cache_info()[0] == hits + 1
