"""
File plumbing: finding subtitle files and rewriting them line by line.
"""
from pathlib import Path
from typing import Callable, Iterable, List

from .logging import get_logger


LineTransform = Callable[[Iterable[str]], Iterable[str]];

TMP_PREFIX = "tmp_";


def find_files( root: Path, extension: str ) -> List[Path]:
    """
    Recursively collect files with the given extension.

    Args:
        root: Directory to search
        extension: Extension without the dot, compared case-insensitively

    Returns:
        Matching files, directories that cannot be listed contribute nothing
    """
    logger = get_logger();
    wanted = "." + extension.lower().lstrip( "." );

    try:
        entries = sorted( Path( root ).iterdir() );
    except OSError as e:
        logger.debug( f"Cannot list directory {root}: {e}" );
        return [];

    files = [];
    for entry in entries:
        if entry.is_dir():
            files.extend( find_files( entry, extension ) );
        elif entry.suffix.lower() == wanted:
            files.append( entry );

    return files;


def _read_lines( reader ) -> Iterable[str]:
    for line in reader:
        yield line.rstrip( "\r\n" );


def rewrite_file( file_path: Path, transform: LineTransform, encoding: str = "utf-8",
                  dry_run: bool = False ) -> bool:
    """
    Rewrite a file through a line transform.

    The output goes to 'tmp_<name>' next to the original. Once it is complete
    the original is deleted and the temporary file takes its name. A crash
    between those two steps leaves only the temporary file behind.

    Args:
        file_path: File to rewrite
        transform: Callable turning the file's lines into output lines
        encoding: Text encoding for reading and writing
        dry_run: Run the transform but leave the file alone

    Returns:
        True if the file was rewritten (or, in dry run mode, read) successfully
    """
    logger = get_logger();
    file_path = Path( file_path );

    if not file_path.exists():
        logger.error( f"File does not exist :: {file_path}" );
        return False;

    if dry_run:
        try:
            with open( file_path, "r", encoding=encoding ) as reader:
                for _ in transform( _read_lines( reader ) ):
                    pass;
        except ( OSError, UnicodeError ) as e:
            logger.error( f"Error reading {file_path}: {e}" );
            return False;
        return True;

    tmp_path = file_path.with_name( TMP_PREFIX + file_path.name );

    try:
        with open( file_path, "r", encoding=encoding ) as reader, \
             open( tmp_path, "w", encoding=encoding ) as writer:
            for line in transform( _read_lines( reader ) ):
                writer.write( line + "\n" );
    except ( OSError, UnicodeError ) as e:
        logger.error( f"Error rewriting {file_path} to {tmp_path.name}: {e}" );
        return False;

    try:
        file_path.unlink();
    except OSError as e:
        logger.error( f"Error deleting the old file {file_path}: {e}" );
        return False;

    try:
        tmp_path.rename( file_path );
    except OSError as e:
        logger.error( f"Error renaming the temp file {tmp_path} to {file_path.name}: {e}" );
        return False;

    return True;
