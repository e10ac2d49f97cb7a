"""
Pattern analysis module.

Provides structural analysis of .splice files, including corrupted
and truncated tails the decoder does not report.
"""

from splicedrum.analysis.splice_analyzer import SpliceAnalysis, SpliceAnalyzer, TrackInfo

__all__ = [
    "SpliceAnalyzer",
    "SpliceAnalysis",
    "TrackInfo",
]
