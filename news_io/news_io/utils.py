import numpy as np
import pandas as pd

def to_primitive(x):
    """Convert numpy/pandas scalars to Python primitives."""
    if x is None or (np.ndim(x) == 0 and pd.isna(x)):
        return None
    if isinstance(x, (np.generic,)):  # catches np.int64, np.float64, np.bool_, etc.
        return x.item()
    return x


def clean_text(x):
    """Return ``x`` as a stripped string, or None for missing/blank cells."""
    x = to_primitive(x)
    if x is None:
        return None
    s = str(x).strip()
    return s or None


def split_keywords(cell, sep: str):
    """Split a joined keyword cell; None when the cell holds no keywords."""
    s = clean_text(cell)
    if s is None:
        return None
    keywords = [k.strip() for k in s.split(sep)]
    return [k for k in keywords if k] or None
