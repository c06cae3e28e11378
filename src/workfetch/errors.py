from __future__ import annotations


class WorkfetchError(Exception):
    pass


class BootTimeError(WorkfetchError):
    """Raised when the boot instant cannot be read or represented."""
