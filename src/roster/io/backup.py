"""Full-fidelity JSON backup of the roster.

Unlike the CSV export, the backup keeps every field (contact details
included) plus a format version and the export timestamp, so it can be
restored exactly.
"""

import json
from datetime import datetime
from typing import Optional, Sequence

from roster.core.entities import Availability
from roster.core.errors import ImportFormatError
from roster.core.personnel import PersonnelRecord

BACKUP_VERSION = "1.0.0"


def create_backup(
    records: Sequence[PersonnelRecord],
    now: Optional[datetime] = None,
) -> dict:
    """Backup payload: timestamp, personnel, version."""
    now = now or datetime.now()
    return {
        "timestamp": now.isoformat(),
        "personnel": [r.to_dict() for r in records],
        "version": BACKUP_VERSION,
    }


def backup_json(records: Sequence[PersonnelRecord], now: Optional[datetime] = None) -> str:
    return json.dumps(create_backup(records, now), indent=2)


def _checked_record(item: dict) -> PersonnelRecord:
    """Build a record from a backup entry, clamping scores to 0-100.

    Raises:
        ImportFormatError: If the availability is not a roster state.
    """
    item = dict(item)
    for key in ("health_score", "training_score"):
        if key in item:
            item[key] = max(0, min(100, int(item[key])))

    states = {state.value for state in Availability.roster_states()}
    availability = item.get("availability", Availability.AVAILABLE.value)
    if isinstance(availability, Availability):
        availability = availability.value
    if availability not in states:
        raise ImportFormatError(f"Backup record has invalid availability '{availability}'")

    return PersonnelRecord.from_dict(item)


def restore_backup(text: str) -> list[PersonnelRecord]:
    """Parse a backup produced by backup_json().

    Raises:
        ImportFormatError: If the text is not a backup payload or a
            record is invalid.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ImportFormatError(f"Backup is not valid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("personnel"), list):
        raise ImportFormatError("Backup has no personnel list")

    try:
        return [_checked_record(item) for item in data["personnel"]]
    except (AttributeError, TypeError, ValueError) as e:
        raise ImportFormatError(f"Backup contains an invalid record: {e}") from e


def backup_filename(today: datetime) -> str:
    return f"iaf-backup-{today.strftime('%Y-%m-%d')}.json"
