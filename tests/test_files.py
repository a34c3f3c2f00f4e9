"""
Test cases for file discovery and the line-by-line rewrite protocol.
"""
from pathlib import Path
from unittest.mock import patch

from srtfixer.files import find_files, rewrite_file


def _upper( lines ):
    for line in lines:
        yield line.upper();


class TestFindFiles:

    def test_recursive_case_insensitive( self, tmp_path ):
        ( tmp_path / "a.srt" ).write_text( "x" );
        ( tmp_path / "season 1" ).mkdir();
        ( tmp_path / "season 1" / "b.SRT" ).write_text( "x" );
        ( tmp_path / "season 1" / "b.txt" ).write_text( "x" );
        ( tmp_path / "srt" ).write_text( "x" );

        found = find_files( tmp_path, "srt" );

        assert sorted( path.name for path in found ) == [ "a.srt", "b.SRT" ];

    def test_extension_with_dot( self, tmp_path ):
        ( tmp_path / "a.sub" ).write_text( "x" );
        assert find_files( tmp_path, ".SUB" ) == [ tmp_path / "a.sub" ];

    def test_unlistable_directory( self, tmp_path ):
        assert find_files( tmp_path / "missing", "srt" ) == [];

        with patch( "srtfixer.files.Path.iterdir", side_effect=PermissionError( "denied" ) ):
            assert find_files( tmp_path, "srt" ) == [];


class TestRewriteFile:

    def test_rewrite_replaces_original( self, tmp_path ):
        subtitle = tmp_path / "movie.srt";
        subtitle.write_text( "hello\r\nworld\n", encoding="utf-8" );

        assert rewrite_file( subtitle, _upper );

        assert subtitle.read_text( encoding="utf-8" ) == "HELLO\nWORLD\n";
        assert not ( tmp_path / "tmp_movie.srt" ).exists();

    def test_missing_file( self, tmp_path ):
        assert not rewrite_file( tmp_path / "missing.srt", _upper );
        assert not ( tmp_path / "tmp_missing.srt" ).exists();

    def test_dry_run_leaves_file_alone( self, tmp_path ):
        subtitle = tmp_path / "movie.srt";
        subtitle.write_text( "hello\n", encoding="utf-8" );
        seen = [];

        def transform( lines ):
            for line in lines:
                seen.append( line );
                yield line.upper();

        assert rewrite_file( subtitle, transform, dry_run=True );

        assert seen == [ "hello" ];
        assert subtitle.read_text( encoding="utf-8" ) == "hello\n";
        assert not ( tmp_path / "tmp_movie.srt" ).exists();

    def test_decode_error_keeps_original( self, tmp_path ):
        subtitle = tmp_path / "movie.srt";
        subtitle.write_bytes( b"caf\xe9\n" );

        assert not rewrite_file( subtitle, _upper, encoding="utf-8" );
        assert subtitle.read_bytes() == b"caf\xe9\n";

    def test_other_encoding( self, tmp_path ):
        subtitle = tmp_path / "movie.srt";
        subtitle.write_bytes( b"caf\xe9\n" );

        assert rewrite_file( subtitle, _upper, encoding="latin-1" );
        assert subtitle.read_bytes() == b"CAF\xc9\n";

    def test_delete_failure( self, tmp_path ):
        subtitle = tmp_path / "movie.srt";
        subtitle.write_text( "hello\n" );

        with patch.object( Path, "unlink", side_effect=PermissionError( "locked" ) ):
            assert not rewrite_file( subtitle, _upper );

        assert subtitle.read_text() == "hello\n";
        assert ( tmp_path / "tmp_movie.srt" ).read_text() == "HELLO\n";

    def test_rename_failure( self, tmp_path ):
        subtitle = tmp_path / "movie.srt";
        subtitle.write_text( "hello\n" );

        with patch.object( Path, "rename", side_effect=OSError( "busy" ) ):
            assert not rewrite_file( subtitle, _upper );

        assert not subtitle.exists();
        assert ( tmp_path / "tmp_movie.srt" ).read_text() == "HELLO\n";
