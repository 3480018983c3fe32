from __future__ import annotations

from typing import Any, Sequence

import pandas as pd

from openspace_admin.core.entity_profile import EntityProfile


def records_frame(records: Sequence[Any], profile: EntityProfile) -> pd.DataFrame:
    """
    Flatten records into a DataFrame, one row per record, in collection order.

    List fields (report photos) are joined with ';' so the frame stays flat.
    """
    rows = []
    for r in records:
        row = r.to_dict()
        for key, value in row.items():
            if isinstance(value, list):
                row[key] = ";".join(str(v) for v in value)
        rows.append(row)

    if not rows:
        columns = list(profile.record_type.__dataclass_fields__.keys())
        return pd.DataFrame(columns=columns)
    return pd.DataFrame.from_records(rows)


def export_records_csv(records: Sequence[Any], profile: EntityProfile) -> str:
    return records_frame(records, profile).to_csv(index=False)


def export_filename(profile: EntityProfile, category: str) -> str:
    return f"{profile.key}_{category}.csv"
