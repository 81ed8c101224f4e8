"""
Instance Filter Classification
==============================

Turns the free-text ``-f`` argument into an EC2 ``describe_instances``
filter. The classification is a heuristic:

- ``i-`` followed by word characters is an instance id
- four dot-separated digit groups is an IP address (octets are not
  range-checked)
- anything else is matched against tag values

Example
-------
>>> classify("i-0abc123").to_filters()
[{'Name': 'instance-id', 'Values': ['i-0abc123']}]
>>> classify("web-01").kind
<FilterKind.TAG_VALUE: 'tag-value'>
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

INSTANCE_ID_PATTERN = re.compile(r"^i-\w+$")
IPV4_PATTERN = re.compile(r"^\d+\.\d+\.\d+\.\d+$")


class FilterKind(Enum):
    """Kinds of instance filter, valued by their EC2 filter name."""

    INSTANCE_ID = "instance-id"
    IP_ADDRESS = "ip-address"
    TAG_VALUE = "tag-value"


@dataclass(frozen=True)
class InstanceFilter:
    """A classified instance filter."""

    kind: FilterKind
    value: str

    def to_filters(self) -> List[Dict[str, object]]:
        """Return the ``Filters`` parameter for ``describe_instances``."""
        return [{"Name": self.kind.value, "Values": [self.value]}]

    def __str__(self) -> str:
        return f"{self.kind.value}={self.value}"


def classify(raw: str) -> InstanceFilter:
    """
    Classify a raw filter argument.

    Parameters
    ----------
    raw : str
        The user's filter text.

    Returns
    -------
    InstanceFilter
        An instance id, IP address or tag value filter.
    """
    if INSTANCE_ID_PATTERN.match(raw):
        return InstanceFilter(FilterKind.INSTANCE_ID, raw)
    if IPV4_PATTERN.match(raw):
        return InstanceFilter(FilterKind.IP_ADDRESS, raw)
    return InstanceFilter(FilterKind.TAG_VALUE, raw)
