class VowelSet(object):
    """
    An immutable set of vowel characters for one language, with the
    predicates the Snowball algorithms build on.

    >>> vs = VowelSet("aeiouy")
    >>> vs.is_vowel("a"), vs.is_vowel("k")
    (True, False)
    """

    def __init__(self, chars):
        self._chars = frozenset(chars)

    def __contains__(self, char):
        return char in self._chars

    def __iter__(self):
        return iter(sorted(self._chars))

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, "".join(self))

    def is_vowel(self, char):
        """
        Returns True if the given character is a vowel. The empty string is
        never a vowel, so it is safe to pass the result of an out-of-range
        slice.
        """

        return char in self._chars

    def is_short_syllable(self, word, index):
        """
        Returns True if a short syllable starts at the given index.

        At the start of the word, a short syllable is a vowel followed by a
        non-vowel. Elsewhere it is a vowel preceded by a non-vowel and followed
        by a non-vowel other than "w", "x" or "Y".

        :param word: the word (or sequence of characters) to check.
        :param index: the position of the syllable's vowel.
        :rtype: bool
        """

        if index == 0 and len(word) > 1:
            return self.is_vowel(word[0]) and not self.is_vowel(word[1])
        elif 0 < index < len(word) - 1:
            after = word[index + 1]
            return (self.is_vowel(word[index])
                    and not self.is_vowel(after)
                    and after not in "wxY"
                    and not self.is_vowel(word[index - 1]))
        return False

    def is_short_word(self, word, r1):
        """
        Returns True if the R1 region is empty and the word ends in a short
        syllable.
        """

        return r1 == "" and self.is_short_syllable(word, len(word) - 2)


def lowercase(word):
    """
    Lowercases a word one character at a time. A character whose lowercase
    form is longer than one character (such as "\\u0130") is kept as it is,
    so the result always has the same length as the word.
    """

    chars = []
    for char in word:
        lower = char.lower()
        chars.append(lower if len(lower) == 1 else char)
    return "".join(chars)


def region(word, start):
    """
    Returns the region of ``word`` beginning at ``start``, or an empty string
    if ``start`` is past the end of the word.
    """

    return word[start:]


def _next_region(word, vowels, start):
    for i in range(max(start, 1), len(word)):
        if not vowels.is_vowel(word[i]) and vowels.is_vowel(word[i - 1]):
            return i + 1
    return len(word)


class _LanguageSpecificStemmer(object):
    """
    This helper class is the base of all language-specific stemmers. Stemmers
    keep their tables in class attributes and hold no per-call state, so one
    instance can be shared freely.
    """

    def stem(self, word):
        """
        Stem a word and return the stemmed form. The word is lowercased
        first.

        :param word: The word that is stemmed.
        :type word: str
        :return: The stemmed form.
        :rtype: str
        """

        raise NotImplementedError

    def stem_words(self, words):
        """
        Stem each word in a sequence and return the stems as a list, in the
        same order.
        """

        stem = self.stem
        return [stem(word) for word in words]

    def __call__(self, word):
        return self.stem(word)

    def __eq__(self, other):
        return self.__class__ is other.__class__

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.__class__)

    def __repr__(self):
        return "<%s>" % self.__class__.__name__


class _StandardStemmer(_LanguageSpecificStemmer):
    """
    This subclass encapsulates the standard R1 and R2 region definition shared
    by most Snowball stemmers.
    """

    def _r1r2_standard(self, word, vowels):
        """
        Return the start indices of the standard regions R1 and R2.

        R1 begins after the first non-vowel following a vowel. R2 begins
        after the next non-vowel following a vowel inside R1. Either index is
        ``len(word)`` when the region is empty.

        :param word: The word whose regions are determined.
        :type word: str
        :param vowels: The vowels of the respective language.
        :type vowels: VowelSet
        :return: (r1, r2), the region start indices.
        :rtype: tuple
        """

        r1 = _next_region(word, vowels, 1)
        r2 = _next_region(word, vowels, r1)
        return r1, r2


class _ScandinavianStemmer(_LanguageSpecificStemmer):
    """
    This subclass encapsulates the R1 definition of the Scandinavian
    stemmers, which is the standard one pushed forward so that it never
    begins before the fourth letter.
    """

    def _r1_scandinavian(self, word, vowels):
        """
        Return the start index of the Scandinavian region R1.

        :param word: The word whose region is determined.
        :type word: str
        :param vowels: The vowels of the respective language.
        :type vowels: VowelSet
        :rtype: int
        """

        return max(_next_region(word, vowels, 1), 3)
