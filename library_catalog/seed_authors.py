import logging
import sys
from datetime import date

import pandas as pd

from .db_connection import ensure_schema, get_engine

logger = logging.getLogger(__name__)

# map the columns from CSV to DB table; the ones not listed here are ignored
COLUMN_MAPPING = {
    "first_name": "first_name",
    "family_name": "family_name",
    "last_name": "family_name",
    "date_of_birth": "date_of_birth",
    "date_of_death": "date_of_death",
}
DATE_COLUMNS = ("date_of_birth", "date_of_death")


def _iso_date(value):
    """ISO `YYYY-MM-DD` string for a CSV date cell, None when it does not parse."""
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value.strip()[:10]).isoformat()
    except ValueError:
        return None


def load_authors_csv(csv_path, engine=None) -> int:
    """Append the authors of a CSV file to the `authors` table.

    Rows without a family name are dropped and dates that cannot be parsed
    are stored as NULL. Returns the number of rows written.
    """
    authors_df = pd.read_csv(csv_path, engine="python", on_bad_lines="skip", dtype=str)

    existing_cols = {csv_col: db_col for csv_col, db_col in COLUMN_MAPPING.items() if csv_col in authors_df.columns}
    if "family_name" not in existing_cols.values():
        raise ValueError(f"{csv_path} has no family_name (or last_name) column")
    authors_for_db = authors_df[list(existing_cols.keys())].rename(columns=existing_cols)
    authors_for_db = authors_for_db.loc[:, ~authors_for_db.columns.duplicated()]

    # drop rows with no family name, it is the sort key of the catalog
    authors_for_db = authors_for_db[authors_for_db["family_name"].notna()].copy()
    authors_for_db["family_name"] = authors_for_db["family_name"].str.strip()
    authors_for_db = authors_for_db[authors_for_db["family_name"] != ""].copy()

    if "first_name" in authors_for_db.columns:
        authors_for_db["first_name"] = authors_for_db["first_name"].fillna("").str.strip()
    else:
        authors_for_db["first_name"] = ""

    for col in DATE_COLUMNS:
        if col in authors_for_db.columns:
            authors_for_db[col] = authors_for_db[col].map(_iso_date)
        else:
            authors_for_db[col] = None
    authors_for_db = authors_for_db.astype(object).where(authors_for_db.notna(), None)

    engine = engine or get_engine()
    ensure_schema(engine)
    authors_for_db.to_sql("authors", if_exists="append", con=engine, index=False)
    logger.info("Loaded %d authors from %s", len(authors_for_db), csv_path)
    return len(authors_for_db)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: python -m library_catalog.seed_authors AUTHORS.csv")
    logging.basicConfig(level=logging.INFO)
    load_authors_csv(sys.argv[1], engine=get_engine(interactive=True))
