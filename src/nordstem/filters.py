# Copyright 2007 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

import logging
from typing import Callable, Iterable, Sequence, Set, Union

from nordstem.util.cache import lfu_cache, unbound_cache


logger = logging.getLogger(__name__)


# Type aliases

StrSet = Union[Sequence[str], Set[str]]


# Base classes

class Filter(object):
    """
    Base class for filters. A filter is a callable that takes an iterable of
    words and returns an iterable of (possibly changed) words. Filters can be
    chained with the ``|`` operator.

    >>> chain = StemFilter(lang="fi") | LoggingFilter()
    >>> list(chain(["taloissa", "kissa"]))
    ['talo', 'kis']
    """

    def __or__(self, other: 'Filter') -> 'CompositeFilter':
        if not isinstance(other, Filter):
            raise TypeError("%r is not composable with %r" % (self, other))
        return CompositeFilter(self, other)

    def __eq__(self, other):
        return (other
                and self.__class__ is other.__class__
                and self.__dict__ == other.__dict__)

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        attrs = ""
        if self.__dict__:
            attrs = ", ".join("%s=%r" % (key, value)
                              for key, value in sorted(self.__dict__.items())
                              if not key.startswith("_"))
        return self.__class__.__name__ + "(%s)" % attrs

    def __call__(self, words: Iterable[str]) -> Iterable[str]:
        raise NotImplementedError


class CompositeFilter(Filter):
    """
    Runs words through a sequence of filters in order.
    """

    def __init__(self, *filters: Filter):
        self.items = []
        for f in filters:
            # Flatten nested chains
            if isinstance(f, CompositeFilter):
                self.items.extend(f.items)
            else:
                self.items.append(f)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, item):
        return self.items[item]

    def __call__(self, words: Iterable[str]) -> Iterable[str]:
        for f in self.items:
            words = f(words)
        return words


# Filters

class LoggingFilter(Filter):
    """
    Logs every word that passes through as a debug log entry.
    """

    def __init__(self, logger=None):
        """
        :param logger: the logger to use. If omitted, the "nordstem.filters"
            logger is used.
        """

        self.logger = logger

    def __call__(self, words: Iterable[str]) -> Iterable[str]:
        log = self.logger or logger
        for word in words:
            log.debug("%r", word)
            yield word


class StemFilter(Filter):
    """
    Stems the words passing through it.

    >>> stemmer = StemFilter(lang="sv")
    >>> list(stemmer(["kvinnor", "hästarna"]))
    ['kvinn', 'häst']

    You can pass your own stemming function instead of a language:

    >>> from nordstem.lang.snowball import FinnishStemmer
    >>> stemmer = StemFilter(FinnishStemmer().stem)

    The list of available languages is in ``nordstem.lang.languages``.
    You can use :func:`nordstem.lang.has_stemmer` to check if a given
    language has a stemmer available.

    By default, this class wraps an LFU cache around the stemming function.
    The ``cachesize`` keyword argument sets the size of the cache. To make
    the cache unbounded (the class caches every input), use
    ``cachesize=-1``. To disable caching, use ``cachesize=None``.
    """

    def __init__(self, stemfn: Callable[[str], str]=None, lang: str=None,
                 ignore: StrSet=None, cachesize: int=50000):
        """
        :param stemfn: the function to use for stemming.
        :param lang: if not None, overrides the stemfn with a language stemmer
            from the ``nordstem.lang.snowball`` package.
        :param ignore: a set/list of words that should not be stemmed. This is
            converted into a frozenset. If you omit this argument, all words
            are stemmed.
        :param cachesize: the maximum number of words to cache. Use ``-1``
            for an unbounded cache, or ``None`` for no caching.
        :raises nordstem.lang.NoStemmer: if ``lang`` has no stemmer.
        """

        if stemfn is None and not lang:
            raise ValueError("StemFilter needs a stemming function or a "
                             "language")

        self.stemfn = stemfn
        self.lang = lang
        self.ignore = frozenset() if ignore is None else frozenset(ignore)
        self.cachesize = cachesize
        # clear() sets the _stem attr to a cached wrapper around self.stemfn
        self.clear()

    def __getstate__(self):
        # Can't pickle a dynamic function, so we have to remove the _stem
        # attribute from the state
        return dict((k, v) for k, v in self.__dict__.items() if k != "_stem")

    def __setstate__(self, state):
        self.__dict__.update(state)
        # Set the _stem attribute
        self.clear()

    def __eq__(self, other):
        return (other
                and self.__class__ is other.__class__
                and self.stemfn == other.stemfn
                and self.lang == other.lang
                and self.ignore == other.ignore)

    def clear(self):
        """
        Rebuilds the stemming function, throwing away any cached stems.
        """

        if self.lang:
            from nordstem.lang import stemmer_for_language
            stemfn = stemmer_for_language(self.lang)
        else:
            stemfn = self.stemfn

        cachesize = self.cachesize
        if isinstance(cachesize, int) and cachesize != 0:
            if cachesize < 0:
                self._stem = unbound_cache(stemfn)
            else:
                self._stem = lfu_cache(cachesize)(stemfn)
        else:
            self._stem = stemfn
        logger.debug("Stemming with %r (cache size %r)", stemfn, cachesize)

    def cache_info(self):
        """
        Returns the ``(hits, misses, maxsize, currsize)`` statistics of the
        bounded cache, or None if the filter has no cache or an unbounded one.
        """

        if not isinstance(self.cachesize, int) or self.cachesize <= 0:
            return None
        return self._stem.cache_info()

    def stem(self, word: str) -> str:
        if word in self.ignore:
            return word
        return self._stem(word)

    def __call__(self, words: Iterable[str]) -> Iterable[str]:
        stemfn = self._stem
        ignore = self.ignore

        for word in words:
            if word in ignore:
                yield word
            else:
                yield stemfn(word)
