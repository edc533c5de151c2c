"""
IssueLicenseCommand.

Command to issue a new license owned by the caller.
"""
from dataclasses import dataclass


@dataclass
class IssueLicenseCommand:
    """Command to issue a license for ``duration_minutes`` from now."""

    owner: str
    product: str
    duration_minutes: int
    one_time: bool = False
