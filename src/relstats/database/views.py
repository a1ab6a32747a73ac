"""Lazy element views over a relation."""

from collections.abc import Collection
from typing import Iterable, Iterator, Optional

from relstats.database.relation import Relation

__all__ = ['iter_objects', 'RelationCollection']


def iter_objects(relation: Relation, ids: Optional[Iterable] = None) -> Iterator:
    """Yield the elements for ``ids`` (default: every id of the relation)."""
    if ids is None:
        ids = relation.iter_ids()
    for object_id in ids:
        yield relation.get(object_id)


class RelationCollection(Collection):
    """Collection view of a relation that fetches elements when needed."""

    def __init__(self, relation: Relation):
        self.relation = relation

    def __iter__(self):
        return iter_objects(self.relation)

    def __len__(self):
        return len(self.relation)

    def __contains__(self, item):
        return any(obj == item for obj in self)
