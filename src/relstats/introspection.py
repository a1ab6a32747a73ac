"""Runtime type inference for relation elements.

Note: the common base found by get_base_object_class_expensive() can be an
abstract class or a mixin.
"""

import logging
from typing import Optional

__all__ = ['guess_object_class', 'get_base_object_class_expensive']

logger = logging.getLogger(__name__)

_MISSING = object()


def guess_object_class(relation) -> Optional[type]:
    """Cheap guess: type of the first element, or None if empty."""
    for object_id in relation.iter_ids():
        return type(relation.get(object_id))
    return None


def get_base_object_class_expensive(relation) -> Optional[type]:
    """Most specific class shared by all elements of the relation.

    Keeps an ordered candidate set seeded with the first element's type.
    Every candidate that does not admit a further element's type is
    replaced by its declared bases until all candidates admit it. At the
    end, candidates that are bases of another candidate are dropped and the
    first survivor is returned.

    Ancestry follows declared bases only (membership in ``__mro__``), so
    ``__subclasscheck__`` hooks such as ABC registration or non-runtime
    protocols play no part.

    When several unrelated bases survive (e.g. two shared mixins), the one
    reached first through base declaration order wins.

    Returns
    -------
    type or None
        None for an empty relation.
    """
    ids = relation.iter_ids()
    first = next(ids, _MISSING)
    if first is _MISSING:
        return None
    # dict as an ordered set
    candidates = {type(relation.get(first)): None}

    for object_id in ids:
        newcls = type(relation.get(object_id))
        if all(cand in newcls.__mro__ for cand in candidates):
            continue
        refined = {}
        pending = list(candidates)
        while pending:
            cand = pending.pop(0)
            if cand in newcls.__mro__:
                refined[cand] = None
            else:
                pending.extend(cand.__bases__)
        candidates = refined

    remaining = [
        cand for cand in candidates
        if not any(other is not cand and cand in other.__mro__ for other in candidates)
    ]
    logger.debug("Base class candidates: %s", [c.__name__ for c in remaining])
    return remaining[0]
