"""
Position data ingestion for the EEZ monitor.
Loads vessel position tracks from CSV files into DataFrames with
standardized ``longitude``/``latitude``/``timestamp`` columns.
"""
import logging
from pathlib import Path
from typing import Union

import pandas as pd

# Configure logging
logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["latitude", "longitude"]

# alias -> standard column name
COLUMN_ALIASES = {
    "lat": "latitude",
    "lon": "longitude",
    "lng": "longitude",
    "long": "longitude",
    "time": "timestamp",
}


def standardize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Rename known aliases to the standard column names when the standard one is absent."""
    renames = {
        alias: standard
        for alias, standard in COLUMN_ALIASES.items()
        if alias in df.columns and standard not in df.columns
    }
    return df.rename(columns=renames)


def load_positions(csv_path: Union[str, Path]) -> pd.DataFrame:
    """
    Load vessel positions from a CSV file.

    The CSV must provide latitude and longitude columns (``lat``/``lon``/``lng``
    are accepted too); an optional ``timestamp`` (or ``time``) column is parsed
    and used to order the rows. Additional columns are preserved.

    Raises:
        RuntimeError: If the file cannot be read
        ValueError: If required columns are missing
    """
    try:
        df = pd.read_csv(csv_path)
    except Exception as e:
        raise RuntimeError(f"Failed to read CSV file {csv_path}: {e}") from e

    df = standardize_columns(df)

    missing_cols = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing_cols:
        logger.error(f"Error loading positions from {csv_path}: missing {missing_cols}")
        raise ValueError(f"Missing required columns: {missing_cols}")

    df["latitude"] = pd.to_numeric(df["latitude"], errors="coerce")
    df["longitude"] = pd.to_numeric(df["longitude"], errors="coerce")

    if "timestamp" in df.columns:
        try:
            df["timestamp"] = pd.to_datetime(df["timestamp"])
            df = df.sort_values("timestamp", kind="stable")
        except (ValueError, TypeError) as e:
            logger.warning(f"Failed to parse timestamps in {csv_path}: {e}")

    df = df.reset_index(drop=True)
    logger.info(f"Loaded {len(df)} positions from {csv_path}")
    return df
