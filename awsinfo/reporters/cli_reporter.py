"""
CLI Reporter Module
===================

Renders instance reports as plain terminal text.

The layout is fixed and tab-separated so that existing shell habits
(``grep``, ``awk``) keep working against it::

    List of EC2 instances:
     * i-0abc123 t3.micro (running) | 203.0.113.7	| web-01

and, for a single instance::

    Instance i-0abc123
      IP:		203.0.113.7			  Name:		web-01
      State:	running				  Type:		t3.micro
      ...
      Disks:
    	vol-0def456 - /dev/xvda (root) (3 snapshots)

Classes
-------
CLIReporter
    Main reporter class for terminal output.

Functions
---------
format_summary
    Render the instance list as text.
format_detail
    Render a single instance as text.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from rich.console import Console

from awsinfo.core.models import DiskInfo, InstanceDetail, InstanceSummary

# Module logger
logger = logging.getLogger(__name__)

NO_IP_SUMMARY = "\t\t"
NO_IP_DETAIL = "(none)\t"
NO_IP_REVERSE_DNS = "No IP, so no reverse DNS"
SNAPSHOTS_UNKNOWN = "could not determine"


def format_summary_line(instance: InstanceSummary) -> str:
    """Render one instance of the list report."""
    ip = instance.ip if instance.ip else NO_IP_SUMMARY
    return (
        f" * {instance.instance_id} {instance.instance_type} ({instance.state}) "
        f"| {ip}\t| {instance.name}"
    )


def format_summary(instances: Iterable[InstanceSummary]) -> str:
    """Render the list report, one line per instance in the given order."""
    lines = ["", "List of EC2 instances:"]
    lines.extend(format_summary_line(instance) for instance in instances)
    lines.append("")
    return "\n".join(lines)


def format_disk_line(disk: DiskInfo) -> str:
    """Render one block device of the detail report."""
    count = SNAPSHOTS_UNKNOWN if disk.snapshot_count is None else disk.snapshot_count
    return (
        f"\t{disk.volume_id} - {disk.device_name} "
        f"({disk.description or ''}) ({count} snapshots)"
    )


def reverse_dns_text(detail: InstanceDetail) -> str:
    if detail.ip is None:
        return NO_IP_REVERSE_DNS
    if not detail.reverse_dns:
        return f"No reverse DNS for {detail.ip}"
    return detail.reverse_dns


def format_detail(detail: InstanceDetail) -> str:
    """
    Render the single-instance report.

    Parameters
    ----------
    detail : InstanceDetail
        The instance to render.

    Returns
    -------
    str
        The report text, beginning and ending with a blank line.
    """
    ip = detail.ip or NO_IP_DETAIL
    lines: List[str] = [
        "",
        f"Instance {detail.instance_id}",
        f"  IP:\t\t{ip}\t\t\t  Name:\t\t{detail.name}",
        f"  State:\t{detail.state}\t\t\t\t  Type:\t\t{detail.instance_type}",
        f"  AMI:\t\t{detail.image_id}\t\t\t  AZ:\t\t{detail.availability_zone}",
        f"  Reverse DNS:\t{reverse_dns_text(detail)}",
        f"  Groups:\t{', '.join(detail.security_groups)}",
        "  Disks:",
    ]
    lines.extend(format_disk_line(disk) for disk in detail.disks)
    lines.append("")
    return "\n".join(lines)


class CLIReporter:
    """
    Reporter for displaying instance reports in the terminal.

    Parameters
    ----------
    console : Console, optional
        Console whose file receives the report. If not provided, creates
        a stdout console.

    Examples
    --------
    >>> reporter = CLIReporter()
    >>> reporter.report_summary(scanner.list_instances())

    Capturing output:

    >>> import io
    >>> buffer = io.StringIO()
    >>> reporter = CLIReporter(Console(file=buffer))
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the CLI reporter."""
        self.console = console or Console()
        logger.debug("Initialized CLIReporter")

    def report_summary(self, instances: Iterable[InstanceSummary]) -> None:
        """Print the instance list."""
        self._print(format_summary(instances))

    def report_detail(self, detail: InstanceDetail) -> None:
        """Print the single-instance report."""
        self._print(format_detail(detail))

    def print_clients(self, clients: Iterable[str]) -> None:
        """Print client names, one per line."""
        for name in clients:
            self._print(name)

    def _print(self, text: str) -> None:
        # Written raw: rendering would expand the layout tabs into spaces.
        self.console.file.write(text + "\n")
        self.console.file.flush()

    def __repr__(self) -> str:
        """Return string representation."""
        return f"CLIReporter(console={self.console!r})"
