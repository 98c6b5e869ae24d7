from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


# =========================
# QUERY
# =========================
class QueryRequest(BaseModel):
    # A missing query is rejected by the pipeline with a 400
    query: Any = None


class QueryMetadata(BaseModel):
    execution_time: int = Field(alias="executionTime")
    highlighted_rows: List[Any] = Field(default_factory=list, alias="highlightedRows")
    highlighted_cells: List[Any] = Field(default_factory=list, alias="highlightedCells")

    model_config = ConfigDict(populate_by_name=True)


class QueryResult(BaseModel):
    columns: List[str]
    rows: List[Dict[str, Any]]
    metadata: QueryMetadata


class SafetyRejectionDetail(BaseModel):
    message: str
    disallowed_keywords: List[str] = Field(alias="disallowedKeywords")

    model_config = ConfigDict(populate_by_name=True)


# =========================
# SCHEMA
# =========================
class ColumnInfo(BaseModel):
    name: str
    type: str
    is_primary: bool = Field(default=False, alias="isPrimary")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ForeignKeyReference(BaseModel):
    table: str
    column: str

    model_config = ConfigDict(frozen=True)


class ForeignKey(BaseModel):
    column: str
    reference: ForeignKeyReference

    model_config = ConfigDict(frozen=True)


class TableSchema(BaseModel):
    columns: Tuple[ColumnInfo, ...]
    foreign_keys: Tuple[ForeignKey, ...] = Field(default=(), alias="foreignKeys")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class DatabaseSchema(BaseModel):
    tables: Dict[str, TableSchema]

    model_config = ConfigDict(frozen=True)
