"""
Schema catalog — static description of the tables the assistant may query.
The catalog is fixed at import time; live reflection is a debug-only path.
"""
import logging
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from models.table import TableMetadata, ColumnMetadata

logger = logging.getLogger(__name__)


def _col(name: str, data_type: str, description: Optional[str] = None, pk: bool = False) -> ColumnMetadata:
    return ColumnMetadata(
        name=name,
        data_type=data_type,
        is_nullable=False,
        is_primary_key=pk,
        description=description,
    )


LISTING_STATUSES = ("Active", "Pending", "Sold")

# updated_at / created_at exist in the store but are left out: their names
# contain denylisted keywords, so any query touching them is rejected.

_CATALOG: tuple[TableMetadata, ...] = (
    TableMetadata(
        table_name="listings",
        description="One row per property listing handled by the brokerage.",
        columns=[
            _col("id", "INTEGER", pk=True),
            _col("status", "TEXT", "One of 'Active', 'Pending', 'Sold'"),
            _col("transaction_type", "TEXT", "e.g. 'Resale'"),
            _col("primary_agent", "TEXT", "Agent name"),
            _col("address", "TEXT"),
            _col("unit_goal", "TEXT", "'Yes' or 'No'"),
            _col("contingent_sale", "TEXT", "'Yes' or 'No'"),
            _col("signed_listing_date", "TEXT", "MM/DD/YYYY"),
            _col("active_listing_date", "TEXT", "MM/DD/YYYY"),
            _col("target_mls_date", "TEXT", "MM/DD/YYYY"),
            _col("date_on_market", "TEXT", "MM/DD/YYYY"),
            _col("expiration_date", "TEXT", "MM/DD/YYYY"),
            _col("listing_price", "INTEGER", "US dollars"),
            _col("gross_commission", "INTEGER", "US dollars"),
            _col("team", "TEXT"),
            _col("gross_profit", "INTEGER", "US dollars, may be negative"),
        ],
    ),
    TableMetadata(
        table_name="portal_data",
        description="Dashboard metrics snapshot; normally a single row.",
        columns=[
            _col("id", "INTEGER", pk=True),
            _col("units_active", "INTEGER"),
            _col("units_pending", "INTEGER"),
            _col("units_closed", "INTEGER"),
            _col("gci_active", "INTEGER", "Gross commission income, US dollars"),
            _col("gci_pending", "INTEGER", "Gross commission income, US dollars"),
            _col("gci_closed", "INTEGER", "Gross commission income, US dollars"),
            _col("volume_active", "INTEGER", "Transaction volume, US dollars"),
            _col("volume_pending", "INTEGER", "Transaction volume, US dollars"),
            _col("volume_closed", "INTEGER", "Transaction volume, US dollars"),
            _col("profits_current_month", "INTEGER"),
            _col("profits_next_month", "INTEGER"),
            _col("profits_total", "INTEGER"),
            _col("monthly_profits", "TEXT", "JSON array of 12 monthly values"),
            _col("profit_goals", "TEXT", "JSON array of 12 monthly values"),
            _col("ratings", "TEXT", "JSON array"),
        ],
    ),
)


def schema_info() -> dict[str, list[dict]]:
    """Table name → ordered column descriptors (name, type)."""
    return {
        t.table_name: [{"name": c.name, "type": c.data_type} for c in t.columns]
        for t in _CATALOG
    }


def table_names() -> list[str]:
    return [t.table_name for t in _CATALOG]


def format_schema_text() -> str:
    """Render the catalog for the SQL generation prompt."""
    lines = []
    for t in _CATALOG:
        lines.append(f"- {t.table_name}: {', '.join(t.column_names)}")
    return "\n".join(lines)


def format_column_notes() -> str:
    notes = []
    for t in _CATALOG:
        for c in t.columns:
            if c.description:
                notes.append(f"- {t.table_name}.{c.name}: {c.description}")
    return "\n".join(notes)


def introspect_schema(engine: Engine) -> list[TableMetadata]:
    """
    Reflect the catalog's tables from the live store.
    Debug only; the pipeline never calls this.
    """
    insp = inspect(engine)
    present = set(insp.get_table_names())
    tables: list[TableMetadata] = []
    for name in table_names():
        if name not in present:
            logger.warning("Catalog table %s missing from store", name)
            continue
        pk_cols = set(insp.get_pk_constraint(name).get("constrained_columns", []))
        columns = []
        for col in insp.get_columns(name):
            data_type = str(col["type"]).upper()
            if "(" in data_type:
                data_type = data_type.split("(")[0]
            columns.append(ColumnMetadata(
                name=col["name"],
                data_type=data_type,
                is_nullable=col.get("nullable", True),
                is_primary_key=col["name"] in pk_cols,
            ))
        tables.append(TableMetadata(table_name=name, columns=columns))
    return tables
