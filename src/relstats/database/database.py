"""Multi-relation database."""

import logging
from typing import Iterable

from relstats.contracts import NoSupportedDataType
from relstats.data.types import TypeKind
from relstats.database.relation import Relation

__all__ = ['Database']

logger = logging.getLogger(__name__)


class Database:
    """Read-only collection of relations over the same objects.

    Parameters
    ----------
    relations : iterable of Relation
        Relations in lookup priority order.

    Examples
    --------
    >>> db = Database([vectors, labels])
    >>> db.get_relation(TypeKind.CLASSLABEL) is labels
    True
    """

    def __init__(self, relations: Iterable[Relation] = ()):
        self._relations = tuple(relations)

    @property
    def relations(self) -> tuple:
        return self._relations

    def get_relation(self, kind: TypeKind) -> Relation:
        """First relation whose descriptor has the given kind.

        Raises
        ------
        NoSupportedDataType
            If no relation of that kind is present.
        """
        kind = TypeKind(kind)
        for relation in self._relations:
            if relation.type_information.kind == kind:
                return relation
        raise NoSupportedDataType(f"No data type found satisfying: {kind.value}")

    def __repr__(self):
        kinds = ", ".join(r.type_information.kind.value for r in self._relations)
        return f"Database([{kinds}])"
