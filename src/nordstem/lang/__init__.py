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


logger = logging.getLogger(__name__)


# Exceptions

class NoStemmer(Exception):
    pass


# Data

languages = ("fi", "sv")

aliases = {
    # Finnish
    "fin": "fi",
    "finnish": "fi",
    "suomi": "fi",

    # Swedish
    "swe": "sv",
    "swedish": "sv",
    "svenska": "sv",
}


# Functions

def two_letter_code(name):
    """
    Returns the two-letter code for the given language name or code. Region
    suffixes such as ``"sv_SE"`` or ``"fi-FI"`` are ignored.

    >>> two_letter_code("Svenska")
    'sv'
    """

    name = name.strip().lower().replace("-", "_")
    if name in languages:
        return name
    if name in aliases:
        return aliases[name]

    base = name.split("_", 1)[0]
    if base in languages:
        return base
    return aliases.get(base)


def has_stemmer(lang):
    try:
        return bool(stemmer_for_language(lang))
    except NoStemmer:
        return False


def stemmer_for_language(lang):
    """
    Returns the ``stem`` method of a stemmer for the given language.

    :param lang: a language name or code, for example ``"fi"``,
        ``"finnish"`` or ``"sv_SE"``.
    :raises NoStemmer: if no stemmer is available for the language.
    """

    from nordstem.lang.snowball import classes

    tlc = two_letter_code(lang)
    if tlc in classes:
        logger.debug("Using %s for language %r", classes[tlc].__name__, lang)
        return classes[tlc]().stem

    raise NoStemmer("No stemmer available for %r" % lang)
