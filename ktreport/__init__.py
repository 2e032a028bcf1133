"""
ktreport - pytest-style console summaries for Kotlin test reports.
"""

__version__ = "0.1.0"
