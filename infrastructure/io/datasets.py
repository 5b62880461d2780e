"""Tabular report files."""

from pathlib import Path

import pandas as pd


def write_table(df: pd.DataFrame, path: Path) -> Path:
    """
    Write a DataFrame based on file extension.

    Supported formats:
    - CSV: .csv
    - JSON: .json (records orientation)

    Raises:
        ValueError: If file format is not supported
    """
    suffix = path.suffix.lower()
    path.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".csv":
        df.to_csv(path, index=False)
    elif suffix == ".json":
        df.to_json(path, orient="records", indent=2)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .csv, .json")
    return path


def read_table(path: Path) -> pd.DataFrame:
    """
    Read a table written by write_table.

    Raises:
        ValueError: If file format is not supported
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == ".csv":
        return pd.read_csv(path)
    elif suffix == ".json":
        return pd.read_json(path, orient="records")
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .csv, .json")
