"""
Line fixing heuristics for OCR-ripped subtitles.

OCR software regularly mixes up the uppercase 'I' and the lowercase 'l'.
The passes below are deliberately crude: a brute force substitution turns
almost every 'I' into an 'l', and later passes put the 'I' back where it
belongs (line starts, word starts, the pronoun) or revert known bad fixes.

Some examples of fixes:
    'wiIIow'    --> 'willow'
    'lnk'       --> 'Ink'
    'ls'        --> 'Is'
    ' l '       --> ' I '
    '<i>x</i>'  --> 'x'     (if enabled)
    'I`ve'      --> 'I've'  (if enabled)
"""
import re
from functools import reduce
from typing import Iterable, Optional

from .config import FixerConfig
from .logging import get_logger
from .tables import (
    CAPSED_I_REPLACEMENTS,
    FIX_LIST,
    HTML_TAGS,
    IGNORE_LIST,
    LINE_START_FRAGMENTS,
    LINE_STARTS,
    LONE_I_WORDS,
    QUOTE_REPLACEMENTS,
    WORD_START_FRAGMENTS,
)


CAPS_ONLY_PATTERN = re.compile( r"[0-9A-Zl\[\]:'\"()\- ]*" );
DASHED_WORD_PATTERN = re.compile( r"-[0-9a-zA-Z']+" );

# Control characters and the space, but no Unicode spaces such as \xa0
TRIM_CHARACTERS = "".join( chr( code ) for code in range( 33 ) );


def _replace_all( line: str, replacements ) -> str:
    return reduce( lambda text, pair: text.replace( pair[0], pair[1] ), replacements, line );


def remove_html_tags( line: str ) -> str:
    """
    Remove bold, italic and line break tags.

    Only the exact lowercase tags without attributes are removed.
    """
    return reduce( lambda text, tag: text.replace( tag, "" ), HTML_TAGS, line );


def fix_caps_only_line( line: str ) -> str:
    """
    Turn every 'l' into an 'I' on lines consisting of caps only.

    Covers hearing impaired lines such as '[SHOUTlNG]' and speaker labels
    like 'MlKE:', allowing digits, quotes, dashes, brackets and colons.
    """
    if CAPS_ONLY_PATTERN.fullmatch( line ):
        return line.replace( "l", "I" );
    return line;


def change_quotes( line: str ) -> str:
    """Replace backticks and curly quotes with straight quotes."""
    return _replace_all( line, QUOTE_REPLACEMENTS );


def fix_capsed_i( line: str ) -> str:
    """
    Brute force fix for capital I's in places they most likely shouldn't be.

    'II' becomes 'll', any lowercase letter followed by 'I' gets an 'l'
    instead, and so does any 'I' followed by a lowercase letter. The latter
    breaks 'If', 'In', 'Is' and 'It', which the line start and word start
    passes repair afterwards.

    Args:
        line: Line to fix

    Returns:
        Line with every replacement applied, in table order
    """
    return _replace_all( line, CAPSED_I_REPLACEMENTS );


def starts_with_any( text: str, fragments: Iterable[str] ) -> bool:
    """Check whether text starts with any fragment behind any of the LINE_STARTS prefixes."""
    for fragment in fragments:
        for prefix in LINE_STARTS:
            if text.startswith( prefix + fragment ):
                return True;
    return False;


def should_fix_line_start( line: str ) -> bool:
    """
    Check whether the line starts with an 'l', possibly behind a dash, quote or bracket.

    Args:
        line: Line to check

    Returns:
        True if a line start fix should be attempted
    """
    return starts_with_any( line, ( "l", ) );


def fix_line_start( line: str, fragments: Iterable[str] = LINE_START_FRAGMENTS ) -> str:
    """
    Replace the first 'l' of the line with an 'I' if the line starts with a known fragment.

    The first 'l' of the line is replaced. None of the LINE_STARTS prefixes
    contains an 'l', so that is always the 'l' of the matched fragment.

    Args:
        line: Line to fix
        fragments: 'l' fragments that mark a misread 'I' at the start

    Returns:
        Fixed line, or the line untouched when nothing matched
    """
    if starts_with_any( line, fragments ):
        return line.replace( "l", "I", 1 );
    return line;


def fix_isolated_i( line: str ) -> str:
    """A lone 'l' between spaces, or before an apostrophe, is the pronoun."""
    return line.replace( " l ", " I " ).replace( " l'", " I'" );


def fix_word_start( word: str ) -> str:
    """
    Fix a single word of a line.

    Most words starting with an 'l' followed by a consonant are not real
    words, so that 'l' is an 'I'. Words starting with 'l' and a vowel are
    left alone.
    """
    # I prefer a space between a dash and the word
    if DASHED_WORD_PATTERN.fullmatch( word ):
        word = "- " + word[1:];

    if starts_with_any( word, WORD_START_FRAGMENTS ):
        if starts_with_any( word, ( "ll", ) ) and word in IGNORE_LIST:
            return word;
        return word.replace( "l", "I", 1 );

    if word in LONE_I_WORDS:
        return "I" + word[1:];

    if word == "i":
        return "I";

    if word.startswith( "i'" ):
        return "I" + word[1:];

    return word;


def fix_word_starts( line: str ) -> str:
    """
    Fix 'l' characters at the start of every space separated word.

    Args:
        line: Line to fix

    Returns:
        Line with every word fixed, joined by single spaces
    """
    return " ".join( fix_word_start( word ) for word in line.split( " " ) );


def fix_mistake( word: str ) -> str:
    """Look the word up in FIX_LIST, first match wins."""
    for wrong, right in FIX_LIST:
        if word == wrong:
            return right;
    return word;


def fix_mistakes( line: str ) -> str:
    """Revert known bad fixes word by word."""
    return " ".join( fix_mistake( word ) for word in line.split( " " ) );


class LineFixer:
    """
    Applies every fixing pass to a single line, in a fixed order.

    The config decides whether HTML tags are removed and quotes changed.
    Every line that ends up different from its input is logged and counted.
    """

    def __init__( self, config: FixerConfig = None ):
        self.logger = get_logger();
        self.config = config if config else FixerConfig();
        self.changed_lines = 0;

    def fix_line( self, line: Optional[str] ) -> Optional[str]:
        """
        Fix the given line as much as possible.

        Args:
            line: Raw line of text, without its line terminator

        Returns:
            The fixed line, or None when the line is blank (a paragraph separator)
        """
        if line is None or not line.strip( TRIM_CHARACTERS ):
            return None;

        fixed_line = line.strip( TRIM_CHARACTERS );

        # NUL characters sneak in with some rips
        fixed_line = fixed_line.replace( "\x00", "" );

        if self.config.remove_html_tags:
            fixed_line = remove_html_tags( fixed_line );

        fixed_line = fix_caps_only_line( fixed_line );

        if self.config.change_quotes:
            fixed_line = change_quotes( fixed_line );

        # most of the fixing happens here
        fixed_line = fix_capsed_i( fixed_line );

        if should_fix_line_start( fixed_line ):
            fixed_line = fix_line_start( fixed_line );

        fixed_line = fix_isolated_i( fixed_line );

        # a capital I can also start a word in the middle of a line
        fixed_line = fix_word_starts( fixed_line );

        fixed_line = fix_mistakes( fixed_line );

        fixed_line = fixed_line.strip( TRIM_CHARACTERS );

        if fixed_line != line:
            self.changed_lines += 1;
            self.logger.info( f"  Changed <[{line}]> --> to --> <[{fixed_line}]>" );

        return fixed_line if fixed_line else None;
