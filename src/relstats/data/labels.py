"""Label value types."""

from abc import ABC, abstractmethod
from functools import total_ordering

__all__ = ['ClassLabel', 'SimpleClassLabel', 'LabelList']


@total_ordering
class ClassLabel(ABC):
    """Class label of an object. Ordered and compared by name."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Textual form of the label."""

    def __eq__(self, other):
        if not isinstance(other, ClassLabel):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other):
        if not isinstance(other, ClassLabel):
            return NotImplemented
        return self.name < other.name

    def __hash__(self):
        return hash(self.name)

    def __str__(self):
        return self.name


class SimpleClassLabel(ClassLabel):
    """Class label backed by a plain string."""

    def __init__(self, name: str):
        self._name = str(name)

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self):
        return f"SimpleClassLabel({self._name!r})"


class LabelList(tuple):
    """Immutable list of object labels. ``str()`` joins them with a space."""

    def __new__(cls, labels=()):
        return super().__new__(cls, (str(label) for label in labels))

    def __str__(self):
        return " ".join(self)

    def __repr__(self):
        return f"LabelList({list(self)!r})"
