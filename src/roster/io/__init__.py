"""Import/export layer: roster CSV and JSON backups."""

from roster.io.tabular import (
    COLUMN_FIELDS,
    EXPORT_COLUMNS,
    export_personnel_csv,
    import_personnel_csv,
    personnel_dataframe,
)
from roster.io.backup import (
    BACKUP_VERSION,
    backup_json,
    create_backup,
    restore_backup,
)

__all__ = [
    "COLUMN_FIELDS",
    "EXPORT_COLUMNS",
    "export_personnel_csv",
    "import_personnel_csv",
    "personnel_dataframe",
    "BACKUP_VERSION",
    "backup_json",
    "create_backup",
    "restore_backup",
]
