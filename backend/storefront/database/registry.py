"""Typed, read-only view over the declared table metadata.

The ORM models stay the source of truth; this module flattens them into
table -> columns -> indexes -> foreign-key edges so callers can inspect the
schema or resolve a join between two tables without going through the
relationship() layer.
"""
from typing import List, Optional

from sqlalchemy import Table
from sqlalchemy.sql.elements import ColumnElement

from storefront.database.database import get_base_metadata
from storefront.schemas.table_info import ColumnInfo, ForeignKeyEdge, IndexInfo, TableInfo


def _table(name: str) -> Table:
    try:
        return get_base_metadata().tables[name]
    except KeyError:
        raise KeyError(f"Unknown table: {name}") from None


def _default_repr(column) -> Optional[str]:
    if column.server_default is not None:
        arg = getattr(column.server_default, "arg", None)
        return str(getattr(arg, "text", arg))
    if column.default is not None and getattr(column.default, "is_scalar", False):
        return str(column.default.arg)
    return None


def _edges(table: Table) -> List[ForeignKeyEdge]:
    edges = []
    for fk in sorted(table.foreign_keys, key=lambda fk: fk.parent.name):
        edges.append(
            ForeignKeyEdge(
                table=table.name,
                column=fk.parent.name,
                target_table=fk.column.table.name,
                target_column=fk.column.name,
                ondelete=fk.ondelete,
            )
        )
    return edges


def describe(table: Table) -> TableInfo:
    columns = [
        ColumnInfo(
            name=column.name,
            type=str(column.type),
            nullable=bool(column.nullable),
            primary_key=column.primary_key,
            default=_default_repr(column),
        )
        for column in table.columns
    ]
    indexes = [
        IndexInfo(name=index.name, columns=[c.name for c in index.columns], unique=bool(index.unique))
        for index in sorted(table.indexes, key=lambda index: index.name)
    ]
    return TableInfo(name=table.name, columns=columns, indexes=indexes, foreign_keys=_edges(table))


def get_tables() -> List[TableInfo]:
    return [describe(table) for table in get_base_metadata().sorted_tables]


def get_table(name: str) -> TableInfo:
    return describe(_table(name))


def foreign_key_edges(table: Optional[str] = None) -> List[ForeignKeyEdge]:
    if table is not None:
        return _edges(_table(table))
    edges = []
    for each in get_base_metadata().sorted_tables:
        edges.extend(_edges(each))
    return edges


def join_condition(left: str, right: str) -> ColumnElement:
    """
    Build the ON clause joining two tables through their single FK edge.

    The edge may point either way. Raises LookupError if the tables are not
    related, or if several edges connect them and the join would be ambiguous.
    """
    left_table, right_table = _table(left), _table(right)
    candidates = [
        (left_table, edge) for edge in _edges(left_table) if edge.target_table == right
    ] + [
        (right_table, edge) for edge in _edges(right_table) if edge.target_table == left
    ]
    if not candidates:
        raise LookupError(f"No foreign key between {left} and {right}")
    if len(candidates) > 1:
        paths = ", ".join(f"{e.table}.{e.column}" for _, e in candidates)
        raise LookupError(f"Ambiguous join between {left} and {right}: {paths}")

    source, edge = candidates[0]
    target = _table(edge.target_table)
    return source.c[edge.column] == target.c[edge.target_column]
