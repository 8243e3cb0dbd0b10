"""
Category Entity

Classification taxon for stores. Managed elsewhere; this service only reads it.
"""

from dataclasses import dataclass

from storehub.core.domain import Entity, ValidationException, generate_uuid_str

from ..value_objects.store_status import CategoryStatus


@dataclass
class Category(Entity[str]):
    """Category entity."""

    name: str = ""
    status: CategoryStatus = CategoryStatus.PENDING

    def __post_init__(self):
        if not isinstance(self.status, CategoryStatus):
            self.status = CategoryStatus.from_string(self.status)

    @classmethod
    def create(cls, name: str) -> "Category":
        """
        Build a new pending category.

        Raises:
            ValidationException: If name is empty
        """
        if not name or not name.strip():
            raise ValidationException("Category name is required", field="name")
        category = cls(id=generate_uuid_str(), name=name)
        category.updated_at = category.created_at
        return category

    def is_active(self) -> bool:
        return self.status == CategoryStatus.ACTIVE
