"""Custom exceptions for SRTFixer."""


class SrtFixerError( Exception ):
    """Base exception for SRTFixer."""
    pass


class BackupError( SrtFixerError ):
    """Backups were requested but the backup directory is unusable."""
    pass


class TimestampParseError( SrtFixerError ):
    """A timecode line could not be parsed."""
    pass
