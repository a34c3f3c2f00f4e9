"""
Test cases for configuration loading.
"""
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from srtfixer.config import FixerConfig


class TestFixerConfig:

    def test_defaults( self ):
        config = FixerConfig();
        assert config.file_extension == "srt";
        assert config.make_backups is True;
        assert config.remove_html_tags is True;
        assert config.change_quotes is True;
        assert config.timestamp_offset_millis == 0;
        assert config.timestamp_file_path is None;
        assert config.dry_run is False;

    @patch.dict( os.environ, {
        "SRTFIXER_ROOT_DIR": "/media/subs",
        "SRTFIXER_EXTENSION": "sub",
        "SRTFIXER_MAKE_BACKUPS": "no",
        "SRTFIXER_REMOVE_HTML_TAGS": "false",
        "SRTFIXER_OFFSET_MILLIS": "-250",
        "SRTFIXER_TIMESTAMP_FILE": "/media/subs/movie.srt",
    }, clear=True )
    def test_environment_overrides( self, tmp_path ):
        config = FixerConfig.from_env( tmp_path / ".env" );

        assert config.root_directory == Path( "/media/subs" );
        assert config.file_extension == "sub";
        assert config.make_backups is False;
        assert config.remove_html_tags is False;
        assert config.change_quotes is True;
        assert config.timestamp_offset_millis == -250;
        assert config.timestamp_file_path == Path( "/media/subs/movie.srt" );

    @patch.dict( os.environ, {}, clear=True )
    def test_env_file( self, tmp_path ):
        env_file = tmp_path / ".env";
        env_file.write_text( "SRTFIXER_BACKUP_DIR=/tmp/srt-backups\nSRTFIXER_CHANGE_QUOTES=0\n" );

        config = FixerConfig.from_env( env_file );

        assert config.backup_directory == Path( "/tmp/srt-backups" );
        assert config.change_quotes is False;

    @patch.dict( os.environ, { "SRTFIXER_MAKE_BACKUPS": "maybe" }, clear=True )
    def test_invalid_boolean( self, tmp_path ):
        with pytest.raises( ValueError ):
            FixerConfig.from_env( tmp_path / ".env" );

    def test_with_overrides_skips_none( self ):
        config = FixerConfig().with_overrides( file_extension=None, dry_run=True );
        assert config.file_extension == "srt";
        assert config.dry_run is True;
