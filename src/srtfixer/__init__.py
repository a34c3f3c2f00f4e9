"""
SRTFixer - Subtitle OCR repair utility.

Repairs the lowercase 'l' / uppercase 'I' mix-ups that OCR ripping leaves
in SRT files, normalizes markup and quotes, and shifts subtitle timing.
"""

__version__ = "0.1.0";
__author__ = "SRTFixer Project";
__license__ = "MIT";
