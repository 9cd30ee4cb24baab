from .bases import _StandardStemmer, VowelSet, lowercase, region


class FinnishStemmer(_StandardStemmer):
    """
    The Finnish Snowball stemmer.

    :cvar __vowels: The Finnish vowels.
    :type __vowels: VowelSet
    :cvar __restricted_vowels: The Finnish vowels other than y.
    :type __restricted_vowels: str
    :cvar __long_vowels: The Finnish vowels in their long forms.
    :type __long_vowels: tuple
    :cvar __step1_suffixes: Particles checked in step 1 of the algorithm.
    :type __step1_suffixes: tuple
    :cvar __step2_suffixes: Possessives checked in step 2 of the algorithm.
    :type __step2_suffixes: tuple
    :cvar __step3_suffixes: Case endings checked in step 3 of the algorithm.
    :type __step3_suffixes: tuple
    :cvar __step4_suffixes: Other endings checked in step 4 of the algorithm.
    :type __step4_suffixes: tuple
    :note: A detailed description of the Finnish
           stemming algorithm can be found under
           http://snowball.tartarus.org/algorithms/finnish/stemmer.html
    """

    __vowels = VowelSet("aeiouy\xE4\xF6")
    __restricted_vowels = "aeiou\xE4\xF6"
    __long_vowels = ("aa", "ee", "ii", "oo", "uu", "\xE4\xE4", "\xF6\xF6")
    __vi_pairs = tuple(v + "i" for v in __restricted_vowels)
    __step1_suffixes = ('k\xE4\xE4n', 'kaan', 'h\xE4n', 'han', 'kin',
                        'p\xE4', 'pa', 'k\xF6', 'ko')
    __step2_suffixes = ('nsa', 'ns\xE4', 'mme', 'nne', 'si', 'ni',
                        'an', '\xE4n', 'en')
    __step3_suffixes = ('seen', 'siin', 'tten', 'han', 'hon', 'lle',
                        'lt\xE4', 'lta', 'll\xE4', 'lla', 'st\xE4',
                        'hin', 'ss\xE4', 'ssa', 'hen', 'h\xE4n',
                        'tt\xE4', 'tta', 'h\xF6n', 'ksi', 'ine', 'den',
                        'sta', 'n\xE4', 't\xE4', 'ta', 'na', 'a',
                        '\xE4', 'n')
    __step4_suffixes = ('impi', 'imp\xE4', 'immi', 'imma', 'imm\xE4',
                        'impa', 'mpi', 'eja', 'mpa', 'mp\xE4', 'mmi',
                        'mma', 'mm\xE4', 'ej\xE4')

    def stem(self, word):
        """
        Stem a Finnish word and return the stemmed form.

        :param word: The word that is stemmed.
        :type word: str
        :return: The stemmed form.
        :rtype: str
        """

        vowels = self.__vowels
        word = lowercase(word)
        p1, p2 = self._r1r2_standard(word, vowels)

        # STEP 1: Particles etc.
        step1_success = False
        r1 = region(word, p1)
        for suffix in self.__step1_suffixes:
            if word.endswith(suffix):
                before = word[-len(suffix) - 1:-len(suffix)]
                if (r1.endswith(suffix) and
                    (before in ("n", "t") or vowels.is_vowel(before))):
                    word = word[:-len(suffix)]
                    step1_success = True
                break

        if not step1_success and region(word, p2).endswith("sti"):
            word = word[:-3]

        # STEP 2: Possessives
        r1 = region(word, p1)
        for suffix in self.__step2_suffixes:
            if r1.endswith(suffix):
                if suffix == "si":
                    if not word.endswith("ksi"):
                        word = word[:-2]

                elif suffix == "ni":
                    word = word[:-2]
                    if word.endswith("kse"):
                        word = word[:-1] + "i"

                elif suffix == "an":
                    if word.endswith(("taan", "ssaan", "staan", "llaan",
                                      "ltaan", "naan")):
                        word = word[:-2]

                elif suffix == "\xE4n":
                    if word.endswith(("t\xE4\xE4n", "ss\xE4\xE4n",
                                      "st\xE4\xE4n", "ll\xE4\xE4n",
                                      "lt\xE4\xE4n", "n\xE4\xE4n")):
                        word = word[:-2]

                elif suffix == "en":
                    if word.endswith(("lleen", "ineen")):
                        word = word[:-2]

                else:
                    word = word[:-3]
                break

        # STEP 3: Cases
        step3_success = False
        r1 = region(word, p1)
        for suffix in self.__step3_suffixes:
            if r1.endswith(suffix):
                size = len(suffix)
                if suffix in ("han", "hen", "hin", "hon", "h\xE4n",
                              "h\xF6n"):
                    # The vowel of the ending must also precede it
                    if word.endswith(suffix[1] + suffix):
                        word = word[:-size]
                        step3_success = True

                elif suffix in ("siin", "tten", "den"):
                    if (len(word) > size + 1 and
                        word[-size - 2:-size] in self.__vi_pairs):
                        word = word[:-size]
                        step3_success = True

                elif suffix == "seen":
                    if word[-6:-4] in self.__long_vowels:
                        word = word[:-4]
                        step3_success = True

                elif suffix in ("a", "\xE4"):
                    if (len(word) > 2 and not vowels.is_vowel(word[-3]) and
                        vowels.is_vowel(word[-2])):
                        word = word[:-1]
                        step3_success = True

                elif suffix in ("tta", "tt\xE4"):
                    if word.endswith("e" + suffix):
                        word = word[:-3]
                        step3_success = True

                elif suffix == "n":
                    word = word[:-1]
                    step3_success = True
                    if word.endswith("ie") or word[-2:] in self.__long_vowels:
                        word = word[:-1]

                else:
                    word = word[:-size]
                    step3_success = True
                break

        # STEP 4: Other endings
        r2 = region(word, p2)
        for suffix in self.__step4_suffixes:
            if r2.endswith(suffix):
                if suffix in ("mpi", "mpa", "mp\xE4", "mmi", "mma",
                              "mm\xE4"):
                    if not word.endswith("po" + suffix):
                        word = word[:-3]
                else:
                    word = word[:-len(suffix)]
                break

        # STEP 5: Plurals
        r1 = region(word, p1)
        if step3_success:
            if r1.endswith(("i", "j")):
                word = word[:-1]

        elif r1.endswith("t") and vowels.is_vowel(word[-2:-1]):
            word = word[:-1]
            r2 = region(word, p2)
            if r2.endswith("imma"):
                word = word[:-4]
            elif r2.endswith("mma") and not word.endswith("poma"):
                word = word[:-3]

        # STEP 6: Tidying up
        if region(word, p1).endswith(self.__long_vowels):
            word = word[:-1]

        r1 = region(word, p1)
        if (len(r1) > 1 and not vowels.is_vowel(r1[-2]) and
            r1.endswith(("a", "\xE4", "e", "i"))):
            word = word[:-1]

        if region(word, p1).endswith(("oj", "uj")):
            word = word[:-1]

        if region(word, p1).endswith("jo"):
            word = word[:-1]

        # If the word ends with a double consonant followed by zero or more
        # vowels, the last consonant is removed. Only the double consonant
        # nearest the end is considered.
        last = len(word) - 1
        for i in range(last, 0, -1):
            char = word[i]
            if char != word[i - 1] or vowels.is_vowel(char):
                continue

            vowel_count = sum(1 for c in word[i + 1:] if vowels.is_vowel(c))
            if vowel_count == last - i:
                word = word[:i] + word[i + 1:]
            break

        return word
