"""
Shift every timecode in an SRT file by a fixed number of milliseconds.

Sometimes the timing is just a bit off. Only lines that consist of a
complete 'HH:MM:SS,mmm --> HH:MM:SS,mmm' timecode are touched.
"""
import re
from typing import Iterable, Iterator

from pysrt import InvalidTimeString, SubRipTime

from .exceptions import TimestampParseError
from .logging import get_logger


TIMECODE_PATTERN = re.compile(
    r"^([0-9]{2}:[0-9]{2}:[0-9]{2},[0-9]{3}) --> ([0-9]{2}:[0-9]{2}:[0-9]{2},[0-9]{3})$"
);


class TimestampShifter:
    """
    Adds a signed millisecond offset to SRT timecodes.

    Results below 00:00:00,000 are clamped to zero.
    """

    def __init__( self, offset_millis: int = 0 ):
        self.logger = get_logger();
        self.offset_millis = offset_millis;
        self.shifted_lines = 0;

    def shift_timestamp( self, timestamp: str ) -> str:
        """
        Shift a single timestamp.

        Args:
            timestamp: String like "00:01:23,456"

        Returns:
            Shifted timestamp in the same zero padded format

        Raises:
            TimestampParseError: If the timestamp cannot be parsed
        """
        try:
            time = SubRipTime.from_string( timestamp );
        except ( InvalidTimeString, ValueError ) as e:
            raise TimestampParseError( f"Couldn't modify timestamp :: {timestamp}" ) from e;

        ordinal = time.ordinal + self.offset_millis;
        if ordinal < 0:
            self.logger.warning( f"Timestamp {timestamp} shifted below zero, clamping to 00:00:00,000" );
            ordinal = 0;

        return str( SubRipTime.from_ordinal( ordinal ) );

    def shift_line( self, line: str ) -> str:
        """Shift both timestamps of a timecode line, other lines pass through untouched."""
        match = TIMECODE_PATTERN.match( line );
        if not match:
            return line;

        self.shifted_lines += 1;
        return f"{self.shift_timestamp( match.group( 1 ) )} --> {self.shift_timestamp( match.group( 2 ) )}";

    def shift_lines( self, lines: Iterable[str] ) -> Iterator[str]:
        """Lazily shift every timecode line of a file."""
        for line in lines:
            yield self.shift_line( line );
