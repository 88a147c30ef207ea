# payroll_model/data/readers.py
"""
Functions for reading the employee roster from CSV, Parquet or YAML files.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

import pandas as pd
import yaml

from payroll_model.models import Employee
from payroll_model.schema import (
    CATEGORY_ORDER,
    EMP_CATEGORY,
    EMP_CURRENT_NET,
    EMP_HAS_MA,
    EMP_ID,
    EMP_NAME,
    EMP_START_YEAR,
    EMP_TARGET_NET,
    REQUIRED_ROSTER_COLS,
)

logger = logging.getLogger(__name__)

# Alternative column names found in exported rosters
COLUMN_ALIASES: Dict[str, str] = {
    "cat": EMP_CATEGORY,
    "Category": EMP_CATEGORY,
    "start_year": EMP_START_YEAR,
    "hire_year": EMP_START_YEAR,
    "has_ma": EMP_HAS_MA,
    "currentNet": EMP_CURRENT_NET,
    "targetNet": EMP_TARGET_NET,
    "id": EMP_ID,
    "ID": EMP_ID,
    "Employee ID": EMP_ID,
}

_TRUE_STRINGS = {"true", "yes", "y", "1", "da"}


class DataReadError(Exception):
    """Custom exception for errors during data reading."""
    pass


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().casefold() in _TRUE_STRINGS
    if pd.isna(value):
        return False
    return bool(value)


def _optional_str(value: Any) -> Optional[str]:
    if value is None or pd.isna(value):
        return None
    return str(value)


def _standardize_columns(df: pd.DataFrame) -> pd.DataFrame:
    renames = {
        alias: canonical
        for alias, canonical in COLUMN_ALIASES.items()
        if alias in df.columns and canonical not in df.columns
    }
    if renames:
        logger.info(f"Renaming roster columns: {renames}")
        df = df.rename(columns=renames)
    return df


def roster_from_frame(df: pd.DataFrame) -> Tuple[Employee, ...]:
    """
    Convert a roster DataFrame into a tuple of Employee records, in row order.

    Raises:
        DataReadError: If a required column is missing.
    """
    df = _standardize_columns(df)
    # Positional row walk below needs a unique index (e.g. after pd.concat)
    df = df.reset_index(drop=True)
    missing = [c for c in REQUIRED_ROSTER_COLS if c not in df.columns]
    if missing:
        logger.error(f"Roster is missing required columns: {missing}")
        raise DataReadError(f"Roster is missing required columns: {missing}")

    unknown = sorted(set(df[EMP_CATEGORY].astype(str).str.strip()) - set(CATEGORY_ORDER))
    if unknown:
        logger.warning(
            f"Roster contains unrecognized categories {unknown}; "
            "they will not contribute to any category summary."
        )

    current = pd.to_numeric(df[EMP_CURRENT_NET], errors="coerce")
    target = pd.to_numeric(df[EMP_TARGET_NET], errors="coerce")
    start = pd.to_numeric(df[EMP_START_YEAR], errors="coerce")
    if current.isna().any() or target.isna().any() or start.isna().any():
        logger.warning("Roster has missing or non-numeric salary/start values.")

    ids = df[EMP_ID] if EMP_ID in df.columns else pd.Series([None] * len(df), index=df.index)
    names = df[EMP_NAME] if EMP_NAME in df.columns else pd.Series([None] * len(df), index=df.index)

    roster = []
    for idx in df.index:
        year = start[idx]
        roster.append(
            Employee(
                category=str(df.at[idx, EMP_CATEGORY]).strip(),
                start=int(year) if pd.notna(year) and float(year).is_integer() else year,
                ma=_as_bool(df.at[idx, EMP_HAS_MA]),
                current_net=float(current[idx]),
                target_net=float(target[idx]),
                employee_id=_optional_str(ids[idx]),
                name=_optional_str(names[idx]),
            )
        )
    return tuple(roster)


def roster_from_records(records: Iterable[Mapping[str, Any]]) -> Tuple[Employee, ...]:
    """Build a roster from an iterable of mappings (e.g., parsed YAML/JSON)."""
    records = list(records)
    if not records:
        return ()
    return roster_from_frame(pd.DataFrame.from_records(records))


def read_roster(file_path: Union[str, Path]) -> Tuple[Employee, ...]:
    """
    Reads the employee roster from a CSV, Parquet or YAML file.

    YAML files hold either a list of employee mappings or a mapping with an
    ``employees`` list.

    Args:
        file_path: Path pointing to the roster file.

    Returns:
        The roster as a tuple of Employee records in file order.

    Raises:
        DataReadError: If the file cannot be found, read, or processed.
    """
    if not isinstance(file_path, Path):
        file_path = Path(file_path)

    logger.info(f"Attempting to read roster from: {file_path}")

    if not file_path.exists():
        logger.error(f"Roster file not found: {file_path}")
        raise DataReadError(f"Roster file not found: {file_path}")

    file_suffix = file_path.suffix.lower()
    try:
        if file_suffix == '.parquet':
            df = pd.read_parquet(file_path)
        elif file_suffix == '.csv':
            df = pd.read_csv(file_path)
        elif file_suffix in ('.yaml', '.yml'):
            with open(file_path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or []
            if isinstance(raw, dict):
                raw = raw.get("employees", [])
            if not isinstance(raw, list):
                raise DataReadError(f"Expected a list of employees in {file_path}")
            roster = roster_from_records(raw)
            logger.info(f"Loaded {len(roster)} employees from YAML roster: {file_path}")
            return roster
        else:
            logger.error(f"Unsupported roster file format: {file_path}. Please use .csv, .parquet or .yaml.")
            raise DataReadError(f"Unsupported roster file format: {file_path.suffix}")
    except DataReadError:
        raise
    except (OSError, ValueError, yaml.YAMLError) as read_err:
        logger.error(f"Error reading roster file {file_path}: {read_err}")
        raise DataReadError(f"Error reading roster file {file_path}") from read_err

    logger.info(f"Loaded {len(df)} records from roster: {file_path}")
    return roster_from_frame(df)


__all__ = [
    "COLUMN_ALIASES",
    "DataReadError",
    "read_roster",
    "roster_from_frame",
    "roster_from_records",
]
