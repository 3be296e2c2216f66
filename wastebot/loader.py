from pathlib import Path
from typing import Dict, Mapping, Optional

import pandas as pd

from .engines import Engine
from .errors import TableConfigError
from .logging import get_logger
from .tables import KeywordTable

log = get_logger(__name__)

# =========================
# Sheet settings
# =========================
SHEET_INDEX = 0

SHEET_COLUMNS = {
    "mode": "mode",
    "keyword": "keyword",
    "response": "response",
}


def read_sheet(path: str) -> pd.DataFrame:
    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    elif suffix in (".xlsx", ".xlsm"):
        df = pd.read_excel(path, sheet_name=SHEET_INDEX, engine="openpyxl", dtype=str)
    else:
        raise TableConfigError(f"unsupported table file type: {suffix or path!r}")

    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = [c for c in SHEET_COLUMNS.values() if c not in df.columns]
    if missing:
        raise TableConfigError(f"table file is missing columns: {', '.join(missing)}")

    df = df.fillna("")
    for key in ("mode", "keyword"):
        col = SHEET_COLUMNS[key]
        df[col] = df[col].astype(str).str.lower().str.strip()
    df[SHEET_COLUMNS["response"]] = df[SHEET_COLUMNS["response"]].astype(str)

    df = df[(df[SHEET_COLUMNS["mode"]] != "") & (df[SHEET_COLUMNS["keyword"]] != "")]
    return df.reset_index(drop=True)


def tables_from_frame(df: pd.DataFrame) -> Dict[str, KeywordTable]:
    # Row order is declaration order, which is also matching order
    mappings: Dict[str, Dict[str, str]] = {}
    for row in df.itertuples(index=False):
        mode = getattr(row, SHEET_COLUMNS["mode"])
        keyword = getattr(row, SHEET_COLUMNS["keyword"])
        mapping = mappings.setdefault(mode, {})
        if keyword in mapping:
            raise TableConfigError(f"duplicate keyword {keyword!r} in mode {mode!r}")
        mapping[keyword] = getattr(row, SHEET_COLUMNS["response"])
    return {mode: KeywordTable.from_mapping(mapping) for mode, mapping in mappings.items()}


def load_tables(path: str) -> Optional[Dict[str, KeywordTable]]:
    """Read keyword tables from a .csv/.xlsx sheet, or None if it can't be used."""
    try:
        tables = tables_from_frame(read_sheet(path))
    except Exception as exc:
        log.warning("table_load_failed", path=path, error=str(exc))
        return None

    log.info("tables_loaded", path=path, modes=sorted(tables))
    return tables


def apply_overrides(
    engines: Mapping[str, Engine], tables: Optional[Mapping[str, KeywordTable]]
) -> Dict[str, Engine]:
    if not tables:
        return dict(engines)
    unused = set(tables) - {mode for engine in engines.values() for mode in engine.modes}
    if unused:
        log.warning("table_modes_unused", modes=sorted(unused))
    return {name: engine.with_tables(tables) for name, engine in engines.items()}
