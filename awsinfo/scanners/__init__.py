"""
EC2 Scanners
============

InstanceScanner
    Lists instances and gathers per-instance detail (volumes, snapshots,
    reverse DNS).
"""

from awsinfo.scanners.instance_scanner import InstanceScanner

__all__ = ["InstanceScanner"]
