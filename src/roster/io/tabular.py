"""CSV import and export of the roster.

The tabular format uses fixed, human-friendly column headers. List
fields are joined with "; " on export and split on ";" on import.

Import is lenient per row (bad numbers become 0, missing ids are
generated) but strict per file: anything pandas cannot parse, or a file
with none of the recognised columns, raises ImportFormatError so the
caller can leave the store untouched.
"""

import io
import logging
from datetime import datetime
from pathlib import Path
from typing import IO, Optional, Sequence, Union

import pandas as pd

from roster.core.entities import Availability
from roster.core.errors import ImportFormatError
from roster.core.personnel import PersonnelRecord

logger = logging.getLogger(__name__)

# Column header -> PersonnelRecord field
COLUMN_FIELDS = {
    "ID": "id",
    "Name": "name",
    "Rank": "rank",
    "Role": "role",
    "Skills": "skills",
    "Health Score": "health_score",
    "Training Score": "training_score",
    "Readiness %": "readiness",
    "Availability": "availability",
    "Years of Service": "years_of_service",
    "Deployment Status": "deployment_status",
    "Last Training": "last_training_date",
    "Medical Restrictions": "medical_restrictions",
}
EXPORT_COLUMNS = list(COLUMN_FIELDS)

LIST_SEPARATOR = "; "


def _to_int(value: str) -> int:
    """Lenient integer parse; anything unparseable is 0."""
    text = str(value).strip()
    if not text:
        return 0
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        logger.warning(f"Coercing non-numeric value '{text}' to 0")
        return 0


def _to_score(value: str) -> int:
    return max(0, min(100, _to_int(value)))


def _split_list(value: str) -> list[str]:
    return [part.strip() for part in str(value).split(";") if part.strip()]


def _to_availability(value: str) -> Availability:
    text = str(value).strip()
    for state in Availability.roster_states():
        if state.value.lower() == text.lower():
            return state
    if text:
        logger.warning(f"Unknown availability '{text}', defaulting to Available")
    return Availability.AVAILABLE


def _row_to_record(row: dict, index: int, now: datetime) -> PersonnelRecord:
    return PersonnelRecord(
        id=row.get("ID", "").strip() or f"imported-{int(now.timestamp() * 1000)}-{index}",
        name=row.get("Name", "").strip(),
        rank=row.get("Rank", "").strip(),
        role=row.get("Role", "").strip(),
        skills=_split_list(row.get("Skills", "")),
        health_score=_to_score(row.get("Health Score", "")),
        training_score=_to_score(row.get("Training Score", "")),
        availability=_to_availability(row.get("Availability", "")),
        years_of_service=max(0, _to_int(row.get("Years of Service", ""))),
        deployment_status=row.get("Deployment Status", "").strip(),
        last_training_date=(
            row.get("Last Training", "").strip() or now.date().isoformat()
        ),
        medical_restrictions=_split_list(row.get("Medical Restrictions", "")),
    )


def import_personnel_csv(
    source: Union[str, Path, IO],
    now: Optional[datetime] = None,
) -> list[PersonnelRecord]:
    """Parse a roster CSV.

    Args:
        source: Path or file-like object (e.g. a Streamlit UploadedFile).
        now: Clock used for generated ids and the default training date.

    Returns:
        Records in file order. Readiness is recomputed from health and
        training, whatever the "Readiness %" column says.

    Raises:
        ImportFormatError: If the file cannot be parsed or has none of the
            recognised columns.
    """
    now = now or datetime.now()
    try:
        df = pd.read_csv(source, dtype=str, keep_default_na=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise ImportFormatError(f"Error importing data. Please check file format. ({e})") from e

    df = df.fillna("")
    df.columns = [str(c).strip() for c in df.columns]
    recognised = [c for c in df.columns if c in COLUMN_FIELDS]
    if not recognised:
        raise ImportFormatError(
            "Error importing data. No recognised columns; expected some of: "
            + ", ".join(EXPORT_COLUMNS)
        )

    records = [
        _row_to_record(row, i, now)
        for i, row in enumerate(df.to_dict(orient="records"))
    ]
    logger.info(f"Parsed {len(records)} personnel records from import")
    return records


def personnel_dataframe(records: Sequence[PersonnelRecord]) -> pd.DataFrame:
    """Roster as a DataFrame with the export headers."""
    rows = [
        {
            "ID": r.id,
            "Name": r.name,
            "Rank": r.rank,
            "Role": r.role,
            "Skills": LIST_SEPARATOR.join(r.skills),
            "Health Score": r.health_score,
            "Training Score": r.training_score,
            "Readiness %": r.readiness,
            "Availability": r.availability.value,
            "Years of Service": r.years_of_service,
            "Deployment Status": r.deployment_status,
            "Last Training": r.last_training_date,
            "Medical Restrictions": LIST_SEPARATOR.join(r.medical_restrictions),
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_personnel_csv(records: Sequence[PersonnelRecord]) -> str:
    """CSV text of the full roster in the import format."""
    buffer = io.StringIO()
    personnel_dataframe(records).to_csv(buffer, index=False)
    return buffer.getvalue()


def export_filename(today: datetime) -> str:
    return f"personnel-export-{today.strftime('%Y-%m-%d')}.csv"
