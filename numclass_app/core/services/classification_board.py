"""Pool/bucket partition of the identifiers in play."""

from __future__ import annotations

from collections import Counter

POOL = "__pool__"


class ClassificationBoard:
    """Tracks which container owns each identifier.

    Every identifier lives in exactly one container: the pool or one of the
    category buckets. All relocation goes through ``move_identifier``.
    """

    def __init__(self, identifiers: list[str], category_ids: list[str]) -> None:
        if len(set(identifiers)) != len(identifiers):
            raise ValueError("Identifiers on the board must be unique.")
        if POOL in category_ids:
            raise ValueError(f"'{POOL}' is reserved for the pool.")
        self._identifiers: tuple[str, ...] = tuple(identifiers)
        self._containers: dict[str, list[str]] = {POOL: list(identifiers)}
        for category_id in category_ids:
            self._containers[category_id] = []
        self._owner: dict[str, str] = {identifier: POOL for identifier in identifiers}

    def move_identifier(self, identifier: str, source: str, target: str) -> None:
        """Take ``identifier`` out of ``source`` and append it to ``target``."""
        source_items = self._container(source)
        target_items = self._container(target)
        if self._owner.get(identifier) != source:
            raise ValueError(f"'{identifier}' is not in container '{source}'.")
        source_items.remove(identifier)
        target_items.append(identifier)
        self._owner[identifier] = target
        self.check_invariant()

    def locate(self, identifier: str) -> str:
        try:
            return self._owner[identifier]
        except KeyError:
            raise KeyError(f"Unknown identifier '{identifier}'") from None

    def contains(self, identifier: str) -> bool:
        return identifier in self._owner

    def place(self, identifier: str, category_id: str) -> None:
        """Move ``identifier`` from wherever it is to the end of a bucket."""
        self._require_category(category_id)
        self.move_identifier(identifier, self.locate(identifier), category_id)

    def unassign(self, identifier: str, category_id: str) -> bool:
        """Return ``identifier`` from ``category_id`` to the pool if it is there."""
        self._require_category(category_id)
        if self._owner.get(identifier) != category_id:
            return False
        self.move_identifier(identifier, category_id, POOL)
        return True

    def identifiers(self) -> list[str]:
        return list(self._identifiers)

    def pool(self) -> list[str]:
        return list(self._containers[POOL])

    def bucket(self, category_id: str) -> list[str]:
        self._require_category(category_id)
        return list(self._containers[category_id])

    def assignments(self) -> dict[str, list[str]]:
        """Return copies of the non-empty buckets keyed by category id."""
        return {
            key: list(items)
            for key, items in self._containers.items()
            if key != POOL and items
        }

    def assigned_count(self) -> int:
        return len(self._identifiers) - len(self._containers[POOL])

    def check_invariant(self) -> None:
        held = Counter()
        for items in self._containers.values():
            held.update(items)
        expected = Counter(self._identifiers)
        assert held == expected, f"Board partition broken: expected {expected}, found {held}"

    def _container(self, key: str) -> list[str]:
        try:
            return self._containers[key]
        except KeyError:
            raise KeyError(f"Unknown container '{key}'") from None

    def _require_category(self, category_id: str) -> None:
        if category_id == POOL or category_id not in self._containers:
            raise KeyError(f"Unknown category '{category_id}'")
