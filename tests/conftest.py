"""
Shared fixtures for the SRTFixer test suite.
"""
import sys
from pathlib import Path

import pytest

# Add src directory to path for testing
sys.path.insert( 0, str( Path( __file__ ).parent.parent / "src" ) );

import srtfixer.logging as srtfixer_logging


@pytest.fixture( autouse=True, scope="session" )
def isolated_logger( tmp_path_factory ):
    """Keep test log files out of the working directory."""
    srtfixer_logging._logger = srtfixer_logging.SrtFixerLogger( log_dir=tmp_path_factory.mktemp( "logs" ) );
    yield srtfixer_logging._logger;
    srtfixer_logging._logger = None;


SAMPLE_SRT = """1
00:00:01,000 --> 00:00:02,000
<i>lt was dark</i>

2
00:00:03,000 --> 00:00:04,000
l think l can



3
00:00:05,000 --> 00:00:06,000
[SHOUTlNG]
""";


@pytest.fixture
def sample_srt():
    return SAMPLE_SRT;
