"""Relations and databases.

- relation: Relation abstraction, in-memory and DataFrame relations, string view
- database: Multi-relation database with lookup by kind
- views: Lazy element iteration
"""

from relstats.database.relation import (
    ConvertToStringView,
    DataFrameRelation,
    MaterializedRelation,
    Relation,
)
from relstats.database.database import Database
from relstats.database.views import RelationCollection, iter_objects

__all__ = [
    "Relation",
    "MaterializedRelation",
    "DataFrameRelation",
    "ConvertToStringView",
    "Database",
    "RelationCollection",
    "iter_objects",
]
