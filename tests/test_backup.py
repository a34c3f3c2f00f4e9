"""
Test cases for the backup manager.
"""
import pytest

from srtfixer.backup import BackupManager
from srtfixer.exceptions import BackupError


class TestBackupManager:

    def test_creates_backup_dir( self, tmp_path ):
        backup_dir = tmp_path / "nested" / "backup";
        manager = BackupManager( backup_dir );
        assert manager.backup_dir == backup_dir;
        assert backup_dir.is_dir();

    def test_backup_dir_is_a_file( self, tmp_path ):
        blocker = tmp_path / "backup";
        blocker.write_text( "not a dir" );

        with pytest.raises( BackupError ):
            BackupManager( blocker );

    def test_make_backup_overwrites( self, tmp_path ):
        manager = BackupManager( tmp_path / "backup" );
        subtitle = tmp_path / "movie.srt";

        subtitle.write_text( "first" );
        backup_path = manager.make_backup( subtitle );
        assert backup_path == tmp_path / "backup" / "movie.srt";
        assert backup_path.read_text() == "first";

        subtitle.write_text( "second" );
        manager.make_backup( subtitle );
        assert backup_path.read_text() == "second";

    def test_failed_backup_is_not_fatal( self, tmp_path ):
        manager = BackupManager( tmp_path / "backup" );
        assert manager.make_backup( tmp_path / "missing.srt" ) is None;
