"""
Base Entity
===========

Identity semantics shared by all domain entities.
"""
from company_ledger.utils.datetime_utils import now


class BaseEntity:
    """
    Mixin giving entities identity-based equality.

    Concrete entities are dataclasses declared with eq=False that define
    `id` and `updated_at` fields.
    """
    id: str

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, BaseEntity):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def _touch(self) -> None:
        """Refresh the modification timestamp."""
        self.updated_at = now()
