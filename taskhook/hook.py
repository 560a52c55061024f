from __future__ import annotations

from typing import Optional

from .config import Settings


def is_archive_transition(original_status: str, modified_status: str,
                          settings: Optional[Settings] = None) -> bool:
    """True when a task leaves the open status for a closing one.

    With default settings that is pending -> completed or pending -> deleted.
    Status strings are compared as given, any value is accepted.
    """
    settings = settings or Settings()
    return (
        original_status == settings.archive_from_status
        and modified_status in settings.archive_to_statuses
    )
