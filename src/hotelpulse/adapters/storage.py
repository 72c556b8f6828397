from pathlib import Path

import pandas as pd


def read_df(path: str) -> pd.DataFrame:
    if not Path(path).exists():
        raise FileNotFoundError(path)
    if path.endswith(".parquet"):
        return pd.read_parquet(path)
    # keep codes like "PHX0001AB" and empty cells as plain strings
    return pd.read_csv(path, dtype=str, keep_default_na=False)

def write_df(df: pd.DataFrame, path: str):
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    if path.endswith(".parquet"):
        df.to_parquet(path, index=False)
    else:
        df.to_csv(path, index=False)
