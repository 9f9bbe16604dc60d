from pydantic import BaseModel
from typing import Optional, List

class ColumnInfo(BaseModel):
    name: str
    type: str
    nullable: bool
    primary_key: bool
    default: Optional[str] = None

class IndexInfo(BaseModel):
    name: str
    columns: List[str]
    unique: bool

class ForeignKeyEdge(BaseModel):
    table: str
    column: str
    target_table: str
    target_column: str
    ondelete: Optional[str] = None

class TableInfo(BaseModel):
    name: str
    columns: List[ColumnInfo]
    indexes: List[IndexInfo]
    foreign_keys: List[ForeignKeyEdge]
