from .finnish import FinnishStemmer
from .swedish import SwedishStemmer


# Map two-letter codes to stemmer classes

classes = {
    "fi": FinnishStemmer,
    "sv": SwedishStemmer,
}
