"""Built-in substitution tables.

The Latin table follows Django's admin ``urlify.js``. The multi-character
table covers Devanagari letters written with a nukta and Hebrew letters
carrying niqqud (see http://www.eki.ee/wgrs/rom1_he.pdf).
"""

from types import MappingProxyType

CHARMAP = MappingProxyType(
    {
        # latin
        "À": "A",
        "Á": "A",
        "Â": "A",
        "Ã": "A",
        "Ä": "A",
        "Å": "A",
        "Æ": "AE",
        "Ç": "C",
        "È": "E",
        "É": "E",
        "Ê": "E",
        "Ë": "E",
        "Ì": "I",
        "Í": "I",
        "Î": "I",
        "Ï": "I",
        "Ð": "D",
        "Ñ": "N",
        "Ò": "O",
        "Ó": "O",
        "Ô": "O",
        "Õ": "O",
        "Ö": "O",
        "Ő": "O",
        "Ø": "O",
        "Ō": "O",
        "Ù": "U",
        "Ú": "U",
        "Û": "U",
        "Ü": "U",
        "Ű": "U",
        "Ý": "Y",
        "Þ": "TH",
        "à": "a",
        "á": "a",
        "â": "a",
        "ã": "a",
        "ä": "a",
        "å": "a",
        "æ": "ae",
        "ç": "c",
        "è": "e",
        "é": "e",
        "ê": "e",
        "ë": "e",
        "ì": "i",
        "í": "i",
        "î": "i",
        "ï": "i",
        "ð": "d",
        "ñ": "n",
        "ò": "o",
        "ó": "o",
        "ô": "o",
        "õ": "o",
        "ö": "o",
        "ő": "o",
        "ø": "o",
        "ō": "o",
        "Œ": "OE",
        "œ": "oe",
        "ù": "u",
        "ú": "u",
        "û": "u",
        "ü": "u",
        "ű": "u",
        "ý": "y",
        "þ": "th",
        "ÿ": "y",
    }
)

# Keys are written as escapes: the combining marks are invisible on their own
MULTICHARMAP = MappingProxyType(
    {
        # devanagari consonant + nukta
        "\u092b\u093c": "Fi",
        "\u0917\u093c": "Ghi",
        "\u0916\u093c": "Khi",
        "\u0915\u093c": "Qi",
        "\u0921\u093c": "ugDha",
        "\u0922\u093c": "ugDhha",
        "\u092f\u093c": "Yi",
        "\u091c\u093c": "Za",
        # hebrew letter + niqqud
        "\u05d1\u05b4\u05d9": "i",
        "\u05d1\u05b5": "e",
        "\u05d1\u05b5\u05d9": "e",
        "\u05d1\u05b6": "e",
        "\u05d1\u05b7": "a",
        "\u05d1\u05b8": "a",
        "\u05d1\u05b9": "o",
        "\u05d5\u05b9": "o",
        "\u05d1\u05bb": "u",
        "\u05d5\u05bc": "u",
        "\u05d1\u05bc": "b",
        "\u05db\u05bc": "k",
        "\u05da\u05bc": "k",
        "\u05e4\u05bc": "p",
        "\u05e9\u05c1": "sh",
        "\u05e9\u05c2": "s",
        "\u05d1\u05b0": "e",
        "\u05d7\u05b1": "e",
        "\u05d7\u05b2": "a",
        "\u05d7\u05b3": "o",
        "\u05d1\u05b4": "i",
    }
)
