"""
JSON Reporter Module
====================

Exports instance reports as JSON for scripting and further processing.

Output Structure
----------------
Summary::

    {
      "metadata": {
        "report_type": "summary",
        "client": "acme",
        "region": "us-east-1",
        "generated_at": "2024-01-15T10:30:00",
        "instance_count": 2
      },
      "instances": [{"instance_id": "i-0abc123", ...}, ...]
    }

Detail::

    {
      "metadata": {"report_type": "detail", ...},
      "instance": {"instance_id": "i-0abc123", "disks": [...], ...}
    }

Classes
-------
JSONReporter
    Main reporter class for JSON export.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from awsinfo.core.models import InstanceDetail, InstanceSummary

# Module logger
logger = logging.getLogger(__name__)

Report = Union[List[InstanceSummary], InstanceDetail]


class JSONReporter:
    """
    Reporter for exporting instance reports to JSON.

    Parameters
    ----------
    output_path : str, optional
        Path for the output file. If not provided, ``report`` generates a
        timestamped filename in the current directory.
    indent : int, default=2
        JSON indentation level. ``None`` gives compact output.
    client : str, optional
        Client name recorded in the metadata.
    region : str, optional
        Region recorded in the metadata.

    Examples
    --------
    >>> reporter = JSONReporter(client="acme", region="us-east-1")
    >>> print(reporter.to_string(scanner.list_instances()))

    >>> reporter = JSONReporter(output_path="web-01.json")
    >>> path = reporter.report(detail)
    """

    def __init__(
        self,
        output_path: Optional[str] = None,
        indent: Optional[int] = 2,
        client: Optional[str] = None,
        region: Optional[str] = None,
    ) -> None:
        """Initialize the JSON reporter."""
        self.output_path = output_path
        self.indent = indent
        self.client = client
        self.region = region
        logger.debug(f"Initialized JSONReporter (output_path={output_path})")

    def _get_output_path(self, report_type: str) -> Path:
        if self.output_path:
            return Path(self.output_path)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        prefix = f"{self.client}_" if self.client else ""
        return Path(f"awsinfo_{prefix}{report_type}_{timestamp}.json")

    def to_dict(self, result: Report) -> Dict[str, Any]:
        """
        Convert a report to a dictionary.

        Parameters
        ----------
        result : list of InstanceSummary or InstanceDetail
            A summary list or a single-instance detail.

        Returns
        -------
        dict
            ``metadata`` plus ``instances`` or ``instance``.
        """
        if isinstance(result, InstanceDetail):
            return {
                "metadata": self._metadata("detail"),
                "instance": result.to_dict(),
            }

        metadata = self._metadata("summary")
        metadata["instance_count"] = len(result)
        return {
            "metadata": metadata,
            "instances": [instance.to_dict() for instance in result],
        }

    def to_string(self, result: Report) -> str:
        """Convert a report to a JSON string without writing a file."""
        return json.dumps(self.to_dict(result), indent=self.indent, default=str)

    def report(self, result: Report) -> str:
        """
        Write a report to a JSON file.

        Returns
        -------
        str
            Path to the created JSON file.
        """
        report_type = "detail" if isinstance(result, InstanceDetail) else "summary"
        output_path = self._get_output_path(report_type)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(result), f, indent=self.indent, default=str)

        logger.info(f"JSON export complete: {output_path}")
        return str(output_path)

    def _metadata(self, report_type: str) -> Dict[str, Any]:
        return {
            "report_type": report_type,
            "client": self.client,
            "region": self.region,
            "generated_at": datetime.now().isoformat(timespec="seconds"),
        }

    def __repr__(self) -> str:
        """Return string representation."""
        return f"JSONReporter(output_path={self.output_path!r}, indent={self.indent})"
