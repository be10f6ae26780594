from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence


class CollectionStore(Protocol):
    """Persistent table of records for one entity kind, keyed by integer id.

    Note (DIP): the resource handler depends on this interface, not on a concrete DB.
    Records are dicts keyed by field name plus "id".
    """

    def list_all(self) -> Sequence[dict[str, Any]]:
        raise NotImplementedError

    def create(self, values: dict[str, Any]) -> dict[str, Any]:
        """Persist a new record; the store assigns the id."""

        raise NotImplementedError

    def update(
        self,
        record_id: int,
        payload: Any,
        prepare: Callable[[Any], dict[str, Any]],
    ) -> Optional[dict[str, Any]]:
        """Overwrite the fields returned by `prepare(payload)`; None when the id does not exist.

        `prepare` runs only once the record is known to exist, so a missing id wins over a bad payload.
        """

        raise NotImplementedError

    def delete(self, record_id: int) -> Optional[dict[str, Any]]:
        """Remove the record and return its prior state; None when the id does not exist."""

        raise NotImplementedError
