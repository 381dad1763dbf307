"""Incremental merging of overlapping word groups.

Each observation says "member was seen in group group_id". Members seen
in several groups join those groups together, so after any number of
observations the components are the transitive closure of co-membership.

Example:
    builder = GroupBuilder()
    builder.extend(0, ["aa", "bb", "cc"])
    builder.extend(1, ["bb", "b"])
    builder.extend(2, ["a", "c"])
    str(builder.build())  → "a c\\naa b bb cc\\n"
"""

from typing import Generic, Hashable, Iterable, Iterator, TypeVar

from .disjoint_set import DisjointSet
from .word_groups import WordGroups

G = TypeVar("G", bound=Hashable)
M = TypeVar("M", bound=Hashable)


class GroupBuilder(Generic[G, M]):
    """Builds connected components from (group id, member) observations."""

    def __init__(self) -> None:
        self._sets: DisjointSet[G] = DisjointSet()
        # member -> group id it was most recently seen under
        self._members: dict[M, G] = {}

    def add(self, group_id: G, member: M) -> None:
        """Record that member belongs to group_id.

        If member was previously seen under another group, the two
        groups are merged.
        """
        self._sets.make_set(group_id)
        previous = self._members.get(member, group_id)
        self._members[member] = group_id
        if previous != group_id:
            self._sets.union(group_id, previous)

    def extend(self, group_id: G, members: Iterable[M]) -> None:
        """Record that all members belong to group_id."""
        for member in members:
            self.add(group_id, member)

    def groups(self) -> list[list[M]]:
        """Get the connected components, in unspecified order.

        Raises:
            KeyError: If a member's group id is missing from the forest,
                which means the builder's state is corrupt.
        """
        components: dict[int, list[M]] = {}
        for member, group_id in self._members.items():
            root = self._sets.find(group_id)
            components.setdefault(root, []).append(member)
        return list(components.values())

    def __iter__(self) -> Iterator[list[M]]:
        return iter(self.groups())

    def __len__(self) -> int:
        return len(self._members)

    def build(self) -> WordGroups:
        """Convert the components into canonical WordGroups."""
        return WordGroups.from_groups(self.groups())
