"""Category domain service."""

import uuid
from typing import Optional

import structlog

from duobalance.database.base import Database
from duobalance.domain.defaults import palette_color
from duobalance.domain.entities import Category
from duobalance.domain.errors import NotFoundError, ValidationError, category_not_found

logger = structlog.get_logger(__name__)


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_category(self, name: str) -> Category:
        """Add a category with the next color from the palette.

        Args:
            name: Category name

        Returns:
            The created category

        Raises:
            ValidationError: If the name is blank
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name cannot be empty")

        existing = self.list_categories()
        category = Category(id=uuid.uuid4().hex, name=name, color=palette_color(len(existing)))
        self.db.add_category(category)
        logger.info("category_added", category_id=category.id, name=name)
        return category

    def get_category(self, category_id: str) -> Optional[Category]:
        """Get category by ID.

        Returns:
            Category or None if not found
        """
        return self.db.load_state().find_category(category_id)

    def find_category(self, id_or_name: str) -> Optional[Category]:
        """Find a category by ID, or by case-insensitive name."""
        categories = self.list_categories()
        for category in categories:
            if category.id == id_or_name:
                return category
        wanted = id_or_name.strip().lower()
        for category in categories:
            if category.name.lower() == wanted:
                return category
        return None

    def require_category(self, id_or_name: str) -> Category:
        """Find a category by ID or name.

        Raises:
            NotFoundError: If no category matches
        """
        category = self.find_category(id_or_name)
        if category is None:
            raise NotFoundError(category_not_found(id_or_name))
        return category

    def list_categories(self) -> list[Category]:
        """List categories in the order they were added."""
        return list(self.db.load_state().categories)

    def delete_category(self, category_id: str) -> None:
        """Delete a category.

        Expenses that reference it keep the reference and count as
        uncategorized from then on.

        Raises:
            NotFoundError: If the category doesn't exist
        """
        self.db.delete_category(category_id)
        logger.info("category_deleted", category_id=category_id)

    def category_name(self, category_id: Optional[str]) -> str:
        """Display name for a category reference."""
        category = self.get_category(category_id) if category_id else None
        return category.name if category else "Uncategorized"
