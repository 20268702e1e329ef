from pathlib import Path

import pandas as pd


def ensure_outdir(path) -> Path:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def write_tsv(path, rows, columns=None):
    df = pd.DataFrame(rows, columns=columns)
    df.to_csv(path, sep="\t", index=False)
