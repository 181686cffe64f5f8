"""
Job Board — Service Base Class
===============================

What:  Shared building blocks for the resource services.
How:   Subclasses set `model` and `resource`; the base class provides
       offset pagination, primary-key lookup that raises NotFoundError, and a
       context manager translating SQLAlchemy errors into application errors.

Error translation:
    IntegrityError (unique / foreign key / check)  → ConflictError (409)
    any other SQLAlchemyError                      → DatabaseError (500)
    JobBoardError                                  → propagated unchanged
"""

import logging
from contextlib import contextmanager
from typing import Any, Generic, Iterator, List, Optional, Tuple, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.database import Base
from jobboard.exceptions import ConflictError, DatabaseError, JobBoardError, NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def page_number(limit: int, offset: int) -> int:
    """1-based page containing `offset` when pages hold `limit` items."""
    return offset // limit + 1


class BaseService(Generic[ModelT]):
    """Common CRUD plumbing for one ORM model."""

    model: Type[ModelT]
    resource: str = "resource"

    @contextmanager
    def database_errors(
        self,
        action: str,
        conflict_message: Optional[str] = None,
        **context: Any,
    ) -> Iterator[None]:
        """
        Wraps database work and converts driver errors.

        Args:
            action: Short description used in the generic error message
                    ("list jobs", "delete user")
            conflict_message: Message for IntegrityError; a generic one is used
                              when omitted
            context: Extra fields logged with the error
        """
        try:
            yield
        except JobBoardError:
            raise
        except IntegrityError as e:
            logger.warning("Integrity error during %s: %s | %s", action, e.orig, context)
            raise ConflictError(
                message=conflict_message or f"Could not {action}: it conflicts with existing data",
                context={"resource": self.resource, **context},
            ) from e
        except SQLAlchemyError as e:
            logger.error("Database error during %s: %s | %s", action, str(e), context, exc_info=True)
            raise DatabaseError(
                message=f"Could not {action}. Please try again.",
                context={"error_type": type(e).__name__, **context},
            ) from e

    async def _fetch_page(
        self, db: AsyncSession, limit: int, offset: int
    ) -> Tuple[List[ModelT], int]:
        """
        Returns one page of rows ordered by id, plus the total row count.

        Query plan:
            SELECT ... FROM <table> ORDER BY id LIMIT :limit OFFSET :offset
            SELECT count(id) FROM <table>
        """
        result = await db.execute(
            select(self.model).order_by(self.model.id).limit(limit).offset(offset)
        )
        rows = list(result.scalars().all())

        count_result = await db.execute(select(func.count(self.model.id)))
        total = count_result.scalar() or 0
        return rows, total

    async def _get_or_404(self, db: AsyncSession, item_id: int) -> ModelT:
        instance = await db.get(self.model, item_id)
        if instance is None:
            raise NotFoundError(resource=self.resource, resource_id=str(item_id))
        return instance

    async def _delete(self, db: AsyncSession, item_id: int) -> None:
        """Deletes by id; 404 when missing, 409 while other rows reference it."""
        with self.database_errors(
            f"delete {self.resource}",
            conflict_message=(
                f"{self.resource} with ID '{item_id}' is still referenced by other records"
            ),
            resource_id=item_id,
        ):
            instance = await self._get_or_404(db, item_id)
            await db.delete(instance)
            await db.flush()
        logger.info("Deleted %s %s", self.resource, item_id)
