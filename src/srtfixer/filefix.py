"""
Whole-file policy on top of the line fixer: blank line collapsing and renumbering.
"""
import re
from typing import Iterable, Iterator

from .linefix import LineFixer


INDEX_PATTERN = re.compile( r"[+-]?[0-9]+" );


def is_number_above_one( line: str ) -> bool:
    """
    Check whether the line is a plain integer greater than 1.

    Args:
        line: Fixed line

    Returns:
        True for subtitle indexes that may follow a removed blank line
    """
    if not INDEX_PATTERN.fullmatch( line ):
        return False;
    return int( line ) > 1;


class FileFixer:
    """
    Runs a LineFixer over the lines of one file.

    SRT files often carry lots of useless empty lines. Only a single empty
    line is kept between subtitles, never one before the first subtitle,
    and the index that follows it is replaced by a running counter.
    Create one FileFixer per file.
    """

    def __init__( self, line_fixer: LineFixer = None ):
        self.line_fixer = line_fixer if line_fixer else LineFixer();
        self.index = 1;
        self.last_line_was_empty = False;

    def fix_lines( self, lines: Iterable[str] ) -> Iterator[str]:
        """
        Lazily fix a sequence of lines.

        Args:
            lines: Raw lines without line terminators

        Yields:
            Output lines, blank separators included
        """
        for line in lines:
            fixed_line = self.line_fixer.fix_line( line );

            if fixed_line is None:
                self.last_line_was_empty = True;
                continue;

            if self.last_line_was_empty and is_number_above_one( fixed_line ):
                yield "";
                self.index += 1;
                yield str( self.index );
            else:
                yield fixed_line;

            self.last_line_was_empty = False;
