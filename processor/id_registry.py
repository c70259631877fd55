"""Name to integer id assignment for collections without source ids."""
from typing import Dict, Iterator, Optional, Tuple


class IdRegistry:
    """
    Assign integer ids to names in first-seen order.

    Ids start at ``base + 1`` and grow by one for every new name. A name
    that has not been assigned is simply absent from the mapping, so an
    assigned id of 0 (possible with a negative base) is still valid.
    """

    def __init__(self, base: int = 0):
        """
        Initialize an empty registry.

        Args:
            base: Offset added to the 1-based rank of each new name
        """
        self.base = base
        self._counter = base
        self._ids: Dict[str, int] = {}

    def assign(self, name: str) -> int:
        """
        Return the id for a name, assigning the next one if unseen.

        Args:
            name: Name to register

        Returns:
            Integer id, stable for the lifetime of the registry
        """
        if name in self._ids:
            return self._ids[name]

        self._counter += 1
        self._ids[name] = self._counter
        return self._counter

    def lookup(self, name: str) -> Optional[int]:
        """Return the id for a name, or None if it was never assigned."""
        return self._ids.get(name)

    def items(self) -> Iterator[Tuple[str, int]]:
        """Iterate over (name, id) pairs in registration order."""
        return iter(self._ids.items())

    def __getitem__(self, name: str) -> int:
        return self._ids[name]

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._ids)
