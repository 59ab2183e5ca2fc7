# ==============================================
# Collections
# ==============================================
#
# PURPOSE:
#   Multi-select model fields hold their data in a collection that
#   other code (typically an ORM association) may keep a reference
#   to. Updating such a field must change the collection in place
#   instead of swapping it for a new one.
#
# CLASSES:
# --------
# - MutableCollection (Protocol)
#     add / remove / clear / __iter__ / __len__ / __contains__.
#     ArrayCollection and the builtin set both satisfy it.
#
# - ArrayCollection
#     Ordered list-backed collection.
#
# FUNCTION:
# ---------
# - reconcile(current, desired, key) -> (removed, added)
#     Make current's membership equal to desired's, comparing members
#     by key(member). Applies remove()/add() to current only.
#
# ==============================================

from typing import Any, Callable, Hashable, Iterable, Iterator, List, Protocol, Tuple, runtime_checkable


@runtime_checkable
class MutableCollection(Protocol):
    def add(self, element: Any) -> Any:
        ...

    def remove(self, element: Any) -> Any:
        ...

    def clear(self) -> None:
        ...

    def __iter__(self) -> Iterator[Any]:
        ...

    def __len__(self) -> int:
        ...

    def __contains__(self, element: Any) -> bool:
        ...


class ArrayCollection:
    """An ordered collection of models with in-place add/remove."""

    def __init__(self, elements: Iterable[Any] = ()):
        self._elements: List[Any] = list(elements)

    def add(self, element: Any) -> None:
        self._elements.append(element)

    def remove(self, element: Any) -> bool:
        """Remove the first occurrence of element; False if it was absent."""
        for index, candidate in enumerate(self._elements):
            if candidate is element or candidate == element:
                del self._elements[index]
                return True
        return False

    def clear(self) -> None:
        self._elements.clear()

    def to_list(self) -> List[Any]:
        return list(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._elements))

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element: Any) -> bool:
        return any(candidate is element or candidate == element for candidate in self._elements)

    def __getitem__(self, index: int) -> Any:
        return self._elements[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArrayCollection):
            return self._elements == other._elements
        return NotImplemented

    def __repr__(self) -> str:
        return f"ArrayCollection({self._elements!r})"


def is_collection(value: Any) -> bool:
    return isinstance(value, MutableCollection) and not isinstance(value, (str, bytes, dict))


def reconcile(
    current: MutableCollection,
    desired: Iterable[Any],
    key: Callable[[Any], Hashable],
) -> Tuple[List[Any], List[Any]]:
    """
    Bring current's membership in line with desired, in place.

    Args:
        current: Collection to mutate
        desired: Members current should end up with
        key: Stable identity of a member

    Returns:
        (removed, added) members
    """
    desired = list(desired)
    desired_keys = {key(member) for member in desired}
    current_keys = set()

    removed = []
    for member in list(current):
        member_key = key(member)
        if member_key in desired_keys:
            current_keys.add(member_key)
        else:
            removed.append(member)

    for member in removed:
        current.remove(member)

    added = []
    for member in desired:
        member_key = key(member)
        if member_key not in current_keys:
            current.add(member)
            current_keys.add(member_key)
            added.append(member)

    return removed, added
