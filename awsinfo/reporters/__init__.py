"""
Report Generators
=================

CLIReporter
    Fixed-layout plain text for the terminal.
JSONReporter
    JSON export for scripting.
"""

from awsinfo.reporters.cli_reporter import CLIReporter
from awsinfo.reporters.json_reporter import JSONReporter

__all__ = [
    "CLIReporter",
    "JSONReporter",
]
