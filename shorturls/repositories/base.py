"""Base repository implementation for the URL shortener application.

This module provides a generic in-memory BaseRepository that follows the
Repository pattern, serving as a foundation for more specific repositories.
Every operation holds the repository lock for its whole duration and entities
leave the repository only as copies, so callers never see a half-applied
update.
"""

import logging
import threading
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

# Type variable for model types
T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Base exception for repository errors."""
    pass


class EntityNotFoundError(RepositoryError):
    """Exception raised when an entity cannot be found."""

    def __init__(self, model_type: Type[BaseModel], entity_id: Any):
        self.model_type = model_type
        self.entity_id = entity_id
        model_name = getattr(model_type, "__name__", "Entity")
        super().__init__(f"{model_name} with id {entity_id} not found")


class DuplicateEntityError(RepositoryError):
    """Exception raised when a unique key is already taken."""

    def __init__(self, model_type: Type[BaseModel], field_name: str, value: Any):
        self.model_type = model_type
        self.field_name = field_name
        self.value = value
        model_name = getattr(model_type, "__name__", "Entity")
        super().__init__(f"{model_name} with {field_name}={value} already exists")


class BaseRepository(Generic[T]):
    """
    Base repository implementing common operations for pydantic entities
    held in process memory.

    Entities are keyed by one of their own fields, so every key in the store
    equals the key field of the entity stored under it. There is no delete:
    entities live as long as the repository does.

    Type parameters:
        T: The model type this repository manages
    """

    def __init__(self, model_type: Type[T], key_field: str):
        """
        Initialize the repository with a specific model type.

        Args:
            model_type: The model class this repository will work with
            key_field: Name of the entity field used as the unique key
        """
        self.model_type = model_type
        self.key_field = key_field
        self._entities: Dict[Any, T] = {}
        self._lock = threading.RLock()

    def get_by_id(self, id: Any) -> Optional[T]:
        """
        Get a copy of an entity by its key.

        Args:
            id: Entity key

        Returns:
            A copy of the entity if found, None otherwise
        """
        with self._lock:
            entity = self._entities.get(id)
            return entity.model_copy(deep=True) if entity is not None else None

    def get_all(self) -> List[T]:
        """
        Get copies of all entities.

        Order is unspecified; callers sort as they need.
        """
        with self._lock:
            return [entity.model_copy(deep=True) for entity in self._entities.values()]

    def create(self, entity: T) -> T:
        """
        Insert a new entity.

        Args:
            entity: The entity to store

        Returns:
            A copy of the stored entity

        Raises:
            DuplicateEntityError: If the key is already taken
        """
        key = getattr(entity, self.key_field)
        with self._lock:
            if key in self._entities:
                raise DuplicateEntityError(self.model_type, self.key_field, key)
            stored = entity.model_copy(deep=True)
            self._entities[key] = stored
            logger.debug(f"Created {self.model_type.__name__} with {self.key_field}={key}")
            return stored.model_copy(deep=True)

    def update(self, id: Any, mutate: Callable[[T], None]) -> T:
        """
        Apply ``mutate`` to the stored entity while holding the lock.

        Args:
            id: Entity key
            mutate: Callable changing the entity in place

        Returns:
            A copy of the updated entity

        Raises:
            EntityNotFoundError: If no entity has this key
        """
        with self._lock:
            entity = self._entities.get(id)
            if entity is None:
                raise EntityNotFoundError(self.model_type, id)
            mutate(entity)
            return entity.model_copy(deep=True)

    def count(self) -> int:
        with self._lock:
            return len(self._entities)

    def exists(self, id: Any) -> bool:
        with self._lock:
            return id in self._entities
