"""
Runtime configuration for SRTFixer.

Values come from (lowest to highest priority) the defaults below, a .env
file / process environment, and finally command line options.
"""
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv


ENV_PREFIX = "SRTFIXER_";

_TRUE_VALUES = { "1", "true", "yes", "on" };
_FALSE_VALUES = { "0", "false", "no", "off" };


def _env_bool( name: str, default: bool ) -> bool:
    value = os.getenv( ENV_PREFIX + name );
    if value is None:
        return default;

    value = value.strip().lower();
    if value in _TRUE_VALUES:
        return True;
    if value in _FALSE_VALUES:
        return False;
    raise ValueError( f"{ENV_PREFIX}{name} must be a boolean, got: {value!r}" );


def _env_path( name: str, default: Optional[Path] ) -> Optional[Path]:
    value = os.getenv( ENV_PREFIX + name );
    return Path( value ) if value else default;


@dataclass( frozen=True )
class FixerConfig:
    """
    Options honoured by the line fixer, the file rewriter and the batch drivers.

    Attributes:
        root_directory: Directory searched recursively for subtitle files
        file_extension: Extension (without dot, case-insensitive) of files to fix
        make_backups: Copy every file to backup_directory before touching it
        backup_directory: Where backup copies go
        remove_html_tags: Strip <b>, <i> and <br> tags from lines
        change_quotes: Replace backticks and curly quotes with straight ones
        timestamp_offset_millis: Signed offset added to every timecode
        timestamp_file_path: Single file targeted by the timestamp shifter
        encoding: Text encoding used to read and write subtitle files
        dry_run: Report changes without rewriting any file
    """
    root_directory: Path = Path( "." );
    file_extension: str = "srt";
    make_backups: bool = True;
    backup_directory: Path = Path( "backup" );
    remove_html_tags: bool = True;
    change_quotes: bool = True;
    timestamp_offset_millis: int = 0;
    timestamp_file_path: Optional[Path] = None;
    encoding: str = "utf-8";
    dry_run: bool = False;

    @classmethod
    def from_env( cls, env_file: Path = None ) -> "FixerConfig":
        """
        Build a configuration from SRTFIXER_* environment variables.

        Args:
            env_file: Optional .env file to load first (defaults to ./.env when present)

        Returns:
            FixerConfig with environment overrides applied
        """
        env_file = Path( env_file ) if env_file else Path( ".env" );
        if env_file.exists():
            load_dotenv( env_file );

        defaults = cls();
        offset = os.getenv( ENV_PREFIX + "OFFSET_MILLIS" );

        return cls(
            root_directory=_env_path( "ROOT_DIR", defaults.root_directory ),
            file_extension=os.getenv( ENV_PREFIX + "EXTENSION", defaults.file_extension ),
            make_backups=_env_bool( "MAKE_BACKUPS", defaults.make_backups ),
            backup_directory=_env_path( "BACKUP_DIR", defaults.backup_directory ),
            remove_html_tags=_env_bool( "REMOVE_HTML_TAGS", defaults.remove_html_tags ),
            change_quotes=_env_bool( "CHANGE_QUOTES", defaults.change_quotes ),
            timestamp_offset_millis=int( offset ) if offset else defaults.timestamp_offset_millis,
            timestamp_file_path=_env_path( "TIMESTAMP_FILE", defaults.timestamp_file_path ),
            encoding=os.getenv( ENV_PREFIX + "ENCODING", defaults.encoding )
        );

    def with_overrides( self, **overrides ) -> "FixerConfig":
        """Return a copy with every non-None override applied."""
        changes = { key: value for key, value in overrides.items() if value is not None };
        return replace( self, **changes );
