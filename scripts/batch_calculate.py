#!/usr/bin/env python3
"""Loads operations.csv, applies each row's operation, and prints NaN alerts.

Run from the repository root after installing the project:
    python -m pip install -e .
    python scripts/batch_calculate.py [operations.csv]
"""

import os
import sys
from pathlib import Path

import numpy as np
import pandas as pd

from arithmetic import calculate

DEFAULT_FILE = "operations.csv"
REQUIRED_COLUMNS = ("Operation", "A", "B")


def _parse_operand(value):
    if isinstance(value, str):
        try:
            value = pd.to_numeric(value.strip())
        except ValueError:
            return value
    # numpy integers wrap on overflow; plain Python ints do not.
    if isinstance(value, np.generic):
        return value.item()
    return value


def load_operations(path):
    if not os.path.isfile(path):
        raise FileNotFoundError(f"'{path}' not found.")

    if Path(path).suffix.lower() in (".xlsx", ".xls"):
        df = pd.read_excel(path)
    else:
        df = pd.read_csv(path)

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"'{path}' is missing columns: {', '.join(missing)}")

    # A column holding a stray word is read as text; parse the numeric cells.
    for col in ("A", "B"):
        df[col] = pd.Series(
            [_parse_operand(v) for v in df[col]], index=df.index, dtype=object
        )
    return df


def evaluate(df):
    out = df.copy()
    results = [
        calculate(op, a, b) for op, a, b in zip(df["Operation"], df["A"], df["B"])
    ]
    # object dtype keeps int results from printing as floats
    out["Result"] = pd.Series(results, index=df.index, dtype=object)
    return out


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    operations_file = argv[0] if argv else DEFAULT_FILE

    try:
        df = load_operations(operations_file)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error reading '{operations_file}': {e}", file=sys.stderr)
        return 1

    results = evaluate(df)

    failures = 0
    for idx, row in results.iterrows():
        print(f"{row['Operation']}({row['A']}, {row['B']}) = {row['Result']}")
        if pd.isna(row["Result"]):
            failures += 1
            print(f"ALERT: row {idx} did not produce a number")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
