"""
Static lookup tables consulted by the line fixing passes.

Loaded once on import and never mutated.
"""
from string import ascii_lowercase


# Lines (and words) can start with various things such as dashes, quotes or brackets.
# The empty prefix must stay in here so that a bare 'l' start always matches.
LINE_STARTS = (
    "", "\"", "-", "--", " -", " --", "- ", "-- ", " - ", " -- ",
    "-\"", "--\"", " -\"", " --\"", "- \"", "-- \"", " - \"", " -- \"",
    "[", " [", " [ ", "(", " (", " ( ",
);

# The only English words starting with a double l, plus some Spanish.
IGNORE_LIST = frozenset( { "llama", "llamas", "llano", "llanos", "llorar" } );

# Words the earlier passes get wrong. Mostly Roman numerals, first match wins.
FIX_LIST = (
    ( "ll", "II" ),
    ( "Il", "II" ),
    ( "IlI", "III" ),
    ( "IlI:", "III:" ),
    ( "Vll", "VII" ),
    ( "VIlI", "VIII" ),
    ( "VllI", "VIII" ),
    ( "Xll", "XII" ),
    ( "XIlI", "XIII" ),
    ( "XVll", "XVII" ),
    ( "XVIlI", "XVIII" ),
    ( "Nll", "NII" ),
    ( "XXllI", "XXIII" ),
    ( "d'lsere", "d'Isere" ),
    ( "lemand", "Iemand" ),
    ( "Iets", "lets" ),
    ( "ledere", "Iedere" ),
    ( "Gls", "GIs" ),
    ( "KEllCHI", "KEIICHI" ),
    ( "leyasu", "Ieyasu" ),
);

_LINE_START_CONSONANTS = "bcdfghjklmpqrvwxz";
_WORD_START_CONSONANTS = "bcdfghjklmnpqrstvwxz";

# What a line may start with when its first 'l' is really an 'I'
LINE_START_FRAGMENTS = (
    "l ", "ln ", "ls ", "lt ", "lf ", "l'", "lsn't ", "lt'",
) + tuple( "l" + letter for letter in _LINE_START_CONSONANTS );

# An 'l' followed by a consonant does not start an English word
WORD_START_FRAGMENTS = tuple( "l" + letter for letter in _WORD_START_CONSONANTS );

# Words ending in a lone 'l' plus punctuation, e.g. 'l...'
LONE_I_WORDS = frozenset( { "l.", "l,", "l?", "l!", "l..", "l..." } );

HTML_TAGS = ( "<b>", "</b>", "<i>", "</i>", "<br>", "<br />" );

QUOTE_REPLACEMENTS = (
    ( "`", "'" ),
    ( "’", "'" ),
    ( "“", "\"" ),
    ( "”", "\"" ),
);

# Order matters: 'II' first, then a letter followed by 'I', then 'I' followed by a letter.
CAPSED_I_REPLACEMENTS = (
    ( ( "II", "ll" ), )
    + tuple( ( letter + "I", letter + "l" ) for letter in ascii_lowercase if letter != "l" )
    + tuple( ( "I" + letter, "l" + letter ) for letter in ascii_lowercase if letter != "l" )
);
