"""Label-like representations of a database.

A database may describe its objects with class labels, label lists or
plain strings. The resolvers here pick the first available kind from an
ordered fallback list and present it as a string relation, which the
label-match lookup then scans.
"""

import logging
import re
from typing import Iterable, List, Optional, Union

from relstats.contracts import NoSupportedDataType
from relstats.data.types import TypeKind
from relstats.database.database import Database
from relstats.database.relation import ConvertToStringView, Relation
from relstats.schemas import InternalConfig

__all__ = [
    'CLASS_LABEL_ORDER',
    'OBJECT_LABEL_ORDER',
    'guess_label_representation',
    'guess_class_label_representation',
    'guess_object_label_representation',
    'get_class_labels',
    'get_objects_by_label_match',
    'LabelResolver',
]

logger = logging.getLogger(__name__)

CLASS_LABEL_ORDER = (TypeKind.CLASSLABEL, TypeKind.LABELLIST, TypeKind.STRING)
OBJECT_LABEL_ORDER = (TypeKind.LABELLIST, TypeKind.STRING, TypeKind.CLASSLABEL)


def guess_label_representation(database: Database, order: Iterable[TypeKind]) -> Relation:
    """First available label-like relation in ``order``, as strings.

    String relations are returned unchanged; any other kind is wrapped in
    a ConvertToStringView.

    Raises
    ------
    NoSupportedDataType
        If none of the kinds in ``order`` is present.
    """
    for kind in order:
        kind = TypeKind(kind)
        try:
            relation = database.get_relation(kind)
        except NoSupportedDataType:
            logger.debug("No %s relation, trying next label kind", kind.value)
            continue
        logger.debug("Using %s relation as label representation", kind.value)
        if kind == TypeKind.STRING:
            return relation
        return ConvertToStringView(relation)
    raise NoSupportedDataType("No label-like representation was found.")


def guess_class_label_representation(database: Database) -> Relation:
    """Label view preferring class labels, then label lists, then strings."""
    return guess_label_representation(database, CLASS_LABEL_ORDER)


def guess_object_label_representation(database: Database) -> Relation:
    """Label view preferring label lists, then strings, then class labels."""
    return guess_label_representation(database, OBJECT_LABEL_ORDER)


def get_class_labels(source: Union[Database, Relation]) -> list:
    """Sorted distinct class labels of a class label relation or database.

    Raises
    ------
    NoSupportedDataType
        If ``source`` is a database without a class label relation.
    """
    if isinstance(source, Database):
        source = source.get_relation(TypeKind.CLASSLABEL)
    return sorted({source.get(object_id) for object_id in source.iter_ids()})


def get_objects_by_label_match(database: Database, name_pattern: Optional[Union[str, re.Pattern]],
                               order: Iterable[TypeKind] = OBJECT_LABEL_ORDER) -> List:
    """Ids whose object label fully matches ``name_pattern``.

    The label representation is resolved before the pattern is looked at,
    so a database without labels raises even for a None pattern. A None
    pattern matches nothing.

    Parameters
    ----------
    database : Database
        Database to search in.
    name_pattern : str or re.Pattern or None
        Regular expression applied with ``fullmatch``.
    order : iterable of TypeKind, optional
        Label fallback order.

    Returns
    -------
    list
        Matching ids in relation order.
    """
    relation = guess_label_representation(database, order)
    if name_pattern is None:
        return []
    if isinstance(name_pattern, str):
        name_pattern = re.compile(name_pattern)
    ret = []
    for object_id in relation.iter_ids():
        if name_pattern.fullmatch(relation.get(object_id)):
            ret.append(object_id)
    logger.debug("Label match %r: %d objects", name_pattern.pattern, len(ret))
    return ret


class LabelResolver:
    """Label lookups using the fallback orders of a runtime config.

    Parameters
    ----------
    config : InternalConfig
        Fully validated runtime configuration.

    Examples
    --------
    >>> resolver = LabelResolver(resolve_config())
    >>> resolver.objects_by_label_match(db, "cluster_[0-9]+")
    [3, 7]
    """

    def __init__(self, config: InternalConfig):
        self.config = config
        self.class_label_order = config.labels.class_label_order
        self.object_label_order = config.labels.object_label_order

    def class_label_representation(self, database: Database) -> Relation:
        return guess_label_representation(database, self.class_label_order)

    def object_label_representation(self, database: Database) -> Relation:
        return guess_label_representation(database, self.object_label_order)

    def objects_by_label_match(self, database: Database, name_pattern) -> List:
        return get_objects_by_label_match(database, name_pattern, self.object_label_order)
