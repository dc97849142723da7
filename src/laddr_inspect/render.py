import json

import pandas as pd

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

def canonical_json(obj) -> str:
    return json.dumps(obj, **CANONICAL_JSON_KW)

def rows_frame(rows: list) -> pd.DataFrame:
    return pd.DataFrame([list(r) for r in rows], columns=["property", "value"])

def render_table(rows: list) -> str:
    """Two-column property/value table, left aligned."""
    df = rows_frame(rows)
    if df.empty:
        return ""
    widths = {col: int(df[col].str.len().max()) for col in df.columns}
    formatters = {col: (lambda s, w=w: s.ljust(w)) for col, w in widths.items()}
    return df.to_string(index=False, justify="left", formatters=formatters)
