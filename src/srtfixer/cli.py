"""
CLI entry point for SRTFixer with argument parsing and environment variable loading.
"""
import argparse
import sys
from pathlib import Path

from . import __version__
from .config import FixerConfig
from .exceptions import SrtFixerError
from .logging import setup_logging


class SrtFixerCLI:
    """
    Command line interface for SRTFixer.

    Supports command line arguments on top of SRTFIXER_* environment
    variables (optionally loaded from a .env file).
    """

    def __init__( self ):
        self.parser = self._create_parser();
        self.args = None;
        self.logger = None;
        self.config = None;

    def _add_common_arguments( self, parser ):
        parser.add_argument(
            "--backup-dir",
            type=Path,
            dest="backup_dir",
            help="Directory receiving a copy of every file before it is changed"
        );

        parser.add_argument(
            "--no-backup",
            action="store_true",
            help="Do not back up files before changing them"
        );

        parser.add_argument(
            "--encoding",
            help="Text encoding of the subtitle files (default: utf-8)"
        );

        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Report changes without modifying any file"
        );

        parser.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug mode with verbose output"
        );

        parser.add_argument(
            "--env-file",
            type=Path,
            help="Load SRTFIXER_* settings from this file instead of ./.env"
        );

    def _create_parser( self ):
        """Create argument parser with all SRTFixer options."""
        parser = argparse.ArgumentParser(
            prog="srtfixer",
            description="Repair OCR l/I confusion in subtitle files and shift subtitle timing",
            epilog="Environment variables: SRTFIXER_ROOT_DIR, SRTFIXER_BACKUP_DIR, SRTFIXER_OFFSET_MILLIS, ..."
        );
        parser.add_argument( "--version", action="version", version=f"%(prog)s {__version__}" );

        subparsers = parser.add_subparsers( dest="command", required=True );

        fix_parser = subparsers.add_parser( "fix", help="Fix every subtitle file under a directory" );
        fix_parser.add_argument(
            "--root", "-r",
            type=Path,
            dest="root",
            help="Directory to search recursively for subtitle files"
        );
        fix_parser.add_argument(
            "--ext",
            dest="extension",
            help="Extension of the files to fix (default: srt)"
        );
        fix_parser.add_argument(
            "--keep-html",
            action="store_true",
            help="Do not remove <b>, <i> and <br> tags"
        );
        fix_parser.add_argument(
            "--keep-quotes",
            action="store_true",
            help="Do not replace backticks and curly quotes"
        );
        self._add_common_arguments( fix_parser );

        shift_parser = subparsers.add_parser( "shift", help="Shift every timecode of a single file" );
        shift_parser.add_argument(
            "--file", "--sub", "-s",
            type=Path,
            dest="file",
            help="Subtitle file to shift"
        );
        shift_parser.add_argument(
            "--offset", "-o",
            type=int,
            dest="offset",
            help="Milliseconds to add to every timecode (negative to subtract)"
        );
        self._add_common_arguments( shift_parser );

        return parser;

    def _build_config( self ) -> FixerConfig:
        """Merge environment settings with the parsed command line options."""
        config = FixerConfig.from_env( self.args.env_file );

        overrides = {
            "backup_directory": self.args.backup_dir,
            "encoding": self.args.encoding,
            "dry_run": True if self.args.dry_run else None,
            "make_backups": False if self.args.no_backup else None,
        };

        if self.args.command == "fix":
            overrides.update( {
                "root_directory": self.args.root,
                "file_extension": self.args.extension,
                "remove_html_tags": False if self.args.keep_html else None,
                "change_quotes": False if self.args.keep_quotes else None,
            } );
        else:
            overrides.update( {
                "timestamp_file_path": self.args.file,
                "timestamp_offset_millis": self.args.offset,
            } );

        return config.with_overrides( **overrides );

    def _validate_config( self ):
        """Validate the merged configuration."""
        errors = [];

        if self.args.command == "fix":
            if not self.config.root_directory.is_dir():
                errors.append( f"Directory not found: {self.config.root_directory}" );
            if not self.config.file_extension.strip( "." ):
                errors.append( "File extension must not be empty" );
        else:
            if self.config.timestamp_file_path is None:
                errors.append( "No subtitle file given. Use --file or SRTFIXER_TIMESTAMP_FILE." );
            elif not self.config.timestamp_file_path.exists():
                errors.append( f"Subtitle file not found: {self.config.timestamp_file_path}" );

        return errors;

    def parse_args( self, argv=None ):
        """Parse command line arguments and validate configuration."""
        self.args = self.parser.parse_args( argv );

        self.logger = setup_logging( debug=self.args.debug );

        try:
            self.config = self._build_config();
        except ValueError as e:
            self.logger.error( f"Configuration error: {e}" );
            sys.exit( 1 );

        errors = self._validate_config();
        if errors:
            self.logger.error( "Configuration errors:" );
            for error in errors:
                self.logger.error( f"  - {error}" );
            sys.exit( 1 );

        self.logger.debug( f"SRTFixer v{__version__} starting..." );
        self.logger.debug( f"Configuration: {self.config}" );

        return self.args;


def main( argv=None ):
    """Main entry point for the SRTFixer CLI."""
    cli = SrtFixerCLI();
    args = cli.parse_args( argv );

    from .fixers import SrtFileFixer, SrtTimeFixer;

    try:
        if args.command == "fix":
            summary = SrtFileFixer( cli.config ).run();
            if summary.files_failed:
                sys.exit( 1 );
        else:
            if not SrtTimeFixer( cli.config ).run():
                sys.exit( 1 );
    except KeyboardInterrupt:
        cli.logger.warning( "Interrupted by user" );
        sys.exit( 130 );
    except SrtFixerError as e:
        cli.logger.error( str( e ) );
        if args.debug:
            raise;
        sys.exit( 1 );


if __name__ == "__main__":
    main();
