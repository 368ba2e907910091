"""Pydantic schemas for table and column metadata."""
from typing import Optional
from pydantic import BaseModel


class ColumnMetadata(BaseModel):
    name: str
    data_type: str
    is_nullable: bool = True
    is_primary_key: bool = False
    description: Optional[str] = None


class TableMetadata(BaseModel):
    table_name: str
    columns: list[ColumnMetadata]
    description: Optional[str] = None

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]
