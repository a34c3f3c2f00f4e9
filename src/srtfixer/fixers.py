"""
Batch drivers: fix every subtitle file under a directory, or shift the timing of one file.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .backup import BackupManager
from .config import FixerConfig
from .files import TMP_PREFIX, find_files, rewrite_file
from .filefix import FileFixer
from .linefix import LineFixer
from .logging import get_logger
from .timeshift import TimestampShifter


@dataclass
class FixSummary:
    """Outcome of a batch run."""
    files_found: int = 0;
    files_fixed: int = 0;
    files_failed: int = 0;
    lines_changed: int = 0;


class SrtFileFixer:
    """
    Fixes the OCR mistakes of every subtitle file under the configured root.

    Files are processed one after another. A failing file is logged and
    skipped, the batch carries on with the next one.
    """

    def __init__( self, config: FixerConfig = None ):
        self.logger = get_logger();
        self.config = config if config else FixerConfig();
        self.line_fixer = LineFixer( self.config );
        self.backup_manager = None;

    def _get_backup_manager( self ) -> Optional[BackupManager]:
        if not self.config.make_backups or self.config.dry_run:
            return None;
        if self.backup_manager is None:
            self.backup_manager = BackupManager( self.config.backup_directory );
        return self.backup_manager;

    def _should_process( self, file_path: Path, backup_dir: Optional[Path] ) -> bool:
        # leftovers of an interrupted rewrite
        if file_path.name.startswith( TMP_PREFIX ):
            self.logger.debug( f"Skipping temporary file :: {file_path}" );
            return False;

        if backup_dir is not None and backup_dir in file_path.resolve().parents:
            self.logger.debug( f"Skipping backup copy :: {file_path}" );
            return False;

        return True;

    def fix_file( self, file_path: Path ) -> bool:
        """
        Back up and fix a single file.

        Args:
            file_path: Subtitle file to fix in place

        Returns:
            True if the file was rewritten
        """
        file_path = Path( file_path );
        if not file_path.exists():
            self.logger.error( f"File does not exist :: {file_path}" );
            return False;

        backup_manager = self._get_backup_manager();
        if backup_manager:
            backup_manager.make_backup( file_path );

        # fresh blank line flag and index counter for every file
        file_fixer = FileFixer( self.line_fixer );
        return rewrite_file(
            file_path,
            file_fixer.fix_lines,
            encoding=self.config.encoding,
            dry_run=self.config.dry_run
        );

    def run( self ) -> FixSummary:
        """
        Fix every matching file under the root directory.

        Returns:
            FixSummary with file and line counts

        Raises:
            BackupError: If backups are enabled but the backup directory cannot be made
        """
        root = Path( self.config.root_directory );
        summary = FixSummary();

        if not root.is_dir():
            self.logger.error( f"Directory does not exist :: {root}" );
            return summary;

        self.logger.info( f"Processing directory :: {root}" );
        backup_dir = Path( self.config.backup_directory ).resolve() if self.config.make_backups else None;
        subtitle_files = [
            subtitle_file for subtitle_file in find_files( root, self.config.file_extension )
            if self._should_process( subtitle_file, backup_dir )
        ];
        summary.files_found = len( subtitle_files );

        # fail early when backups were asked for but cannot be made
        self._get_backup_manager();

        lines_before = self.line_fixer.changed_lines;
        for subtitle_file in subtitle_files:
            self.logger.info( f"Processing subtitle file :: {subtitle_file.name}" );

            if self.fix_file( subtitle_file ):
                summary.files_fixed += 1;
            else:
                summary.files_failed += 1;

        summary.lines_changed = self.line_fixer.changed_lines - lines_before;
        self.logger.info(
            f"Done: {summary.files_fixed}/{summary.files_found} files fixed, "
            f"{summary.lines_changed} lines changed, {summary.files_failed} failed"
        );
        return summary;


class SrtTimeFixer:
    """
    Shifts every timecode in a single subtitle file.

    There is no batch here: an unparseable timecode stops the run.
    """

    def __init__( self, config: FixerConfig = None ):
        self.logger = get_logger();
        self.config = config if config else FixerConfig();
        self.shifter = TimestampShifter( self.config.timestamp_offset_millis );

    def run( self ) -> bool:
        """
        Back up and shift the configured file.

        Returns:
            True if the file was rewritten

        Raises:
            TimestampParseError: If a timecode line cannot be parsed
            BackupError: If backups are enabled but the backup directory cannot be made
        """
        file_path = self.config.timestamp_file_path;
        if file_path is None:
            self.logger.error( "No file to shift, set the timestamp file path" );
            return False;

        file_path = Path( file_path );
        self.logger.info( f"Processing file :: {file_path} ({self.shifter.offset_millis:+d} ms)" );

        if not file_path.exists():
            self.logger.error( f"File does not exist :: {file_path}" );
            return False;

        if self.config.make_backups and not self.config.dry_run:
            BackupManager( self.config.backup_directory ).make_backup( file_path );

        result = rewrite_file(
            file_path,
            self.shifter.shift_lines,
            encoding=self.config.encoding,
            dry_run=self.config.dry_run
        );

        if result:
            self.logger.info( f"Shifted {self.shifter.shifted_lines} timecode lines" );
        return result;
