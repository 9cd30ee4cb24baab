from .bases import _ScandinavianStemmer, VowelSet, lowercase


class SwedishStemmer(_ScandinavianStemmer):
    """
    The Swedish Snowball stemmer.

    :cvar __vowels: The Swedish vowels.
    :type __vowels: VowelSet
    :cvar __s_ending: Letters that may directly precede a word final s.
    :type __s_ending: str
    :cvar __step1_suffixes: Suffixes to be deleted in step 1 of the algorithm.
    :type __step1_suffixes: tuple
    :cvar __step2_suffixes: Suffixes to be deleted in step 2 of the algorithm.
    :type __step2_suffixes: tuple
    :cvar __step3_suffixes: Suffixes to be deleted in step 3 of the algorithm.
    :type __step3_suffixes: tuple
    :note: A detailed description of the Swedish
           stemming algorithm can be found under
           http://snowball.tartarus.org/algorithms/swedish/stemmer.html
    """

    __vowels = VowelSet("aeiouy\xE4\xE5\xF6")
    __s_ending = "bcdfghjklmnoprtvy"
    __step1_suffixes = ("heterna", "hetens", "arens", "andes", "andet",
                        "ornas", "ernas", "arnas", "heter", "heten",
                        "anden", "erns", "ades", "aren", "aste", "arne",
                        "ande", "orna", "erna", "arna", "ast", "het",
                        "ens", "ern", "are", "ade", "at", "es", "as",
                        "or", "er", "ar", "en", "ad", "e", "a")
    __step2_suffixes = ("dd", "gd", "nn", "dt", "gt", "kt", "tt")
    __step3_suffixes = ("lig", "els", "ig")

    def stem(self, word):
        """
        Stem a Swedish word and return the stemmed form.

        The "fullt" and "löst" endings of step 3 are matched against the
        whole word rather than R1 alone, so "fullt" itself becomes "full".
        The final "t" is only removed when it lies in R1.

        :param word: The word that is stemmed.
        :type word: str
        :return: The stemmed form.
        :rtype: str
        """

        word = lowercase(word)
        p1 = self._r1_scandinavian(word, self.__vowels)
        # Only the R1 part of the word is ever changed
        prefix, r1 = word[:p1], word[p1:]

        # STEP 1
        for suffix in self.__step1_suffixes:
            if r1.endswith(suffix):
                r1 = r1[:-len(suffix)]
                break
        else:
            if r1.endswith("s") and (prefix + r1)[-2:-1] in self.__s_ending:
                r1 = r1[:-1]

        # STEP 2
        if r1.endswith(self.__step2_suffixes):
            r1 = r1[:-1]

        # STEP 3
        if r1 and (prefix + r1).endswith(("fullt", "l\xF6st")):
            r1 = r1[:-1]
        else:
            for suffix in self.__step3_suffixes:
                if r1.endswith(suffix):
                    r1 = r1[:-len(suffix)]
                    break

        return prefix + r1
