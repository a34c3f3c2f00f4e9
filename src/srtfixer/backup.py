"""
Backup utility, in case you're not feeling very confident.
"""
import shutil
from pathlib import Path
from typing import Optional

from .exceptions import BackupError
from .logging import get_logger


class BackupManager:
    """
    Copies files into a backup directory before they are modified.

    One copy per file name: a later backup of a file with the same name
    overwrites the earlier one. Copy failures are logged and swallowed.
    """

    def __init__( self, backup_dir: Path = None ):
        self.logger = get_logger();
        self.backup_dir = Path( backup_dir ) if backup_dir else Path( "backup" );

        try:
            self.backup_dir.mkdir( parents=True, exist_ok=True );
        except OSError as e:
            raise BackupError( f"Failed to make the backup dir {self.backup_dir}: {e}" ) from e;

        if not self.backup_dir.is_dir():
            raise BackupError( f"Backup path is not a directory: {self.backup_dir}" );

    def get_backup_path( self, original_file: Path ) -> Path:
        """Where the backup of the given file goes."""
        return self.backup_dir / Path( original_file ).name;

    def make_backup( self, file_path: Path ) -> Optional[Path]:
        """
        Copy the file into the backup directory, replacing an existing copy.

        Args:
            file_path: File to back up

        Returns:
            Path of the backup, or None if copying failed
        """
        file_path = Path( file_path );
        backup_path = self.get_backup_path( file_path );

        try:
            shutil.copy2( file_path, backup_path );
        except OSError as e:
            # stuff may go wrong sometimes - e.g. locked files - tough luck
            self.logger.warning( f"Failed to back up {file_path}: {e}" );
            return None;

        self.logger.debug( f"Created backup: {backup_path}" );
        return backup_path;
