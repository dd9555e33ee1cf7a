"""ResourceColumns — maps relationship facts onto mapped columns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["ResourceColumns"]


@dataclass(frozen=True, slots=True)
class ResourceColumns:
    """Columns standing in for the relationship facts of a listing query.

    Each column is compared against the actor's ``id`` (or, for
    ``status``, against ``"published"``). A predicate that needs a column
    left as ``None`` compiles to ``false()``.

    Attributes:
        status: Publication status column (video status).
        owner_id: Owner foreign key; stands in for ``is_resource_owner``.
        author_id: Author foreign key; stands in for ``is_author``.
        evaluator_id: Evaluator foreign key; stands in for ``is_evaluator``.

    Example::

        columns = ResourceColumns(status=Video.status, owner_id=Video.uploader_id)
    """

    status: Any = None
    owner_id: Any = None
    author_id: Any = None
    evaluator_id: Any = None

    @classmethod
    def from_model(
        cls,
        model: type,
        *,
        status: str = "status",
        owner_id: str = "owner_id",
        author_id: str = "author_id",
        evaluator_id: str = "evaluator_id",
    ) -> ResourceColumns:
        """Pick up conventionally named attributes of a mapped class.

        Attributes the model does not define are left unmapped.

        Example::

            columns = ResourceColumns.from_model(Video, owner_id="uploader_id")
        """
        return cls(
            status=getattr(model, status, None),
            owner_id=getattr(model, owner_id, None),
            author_id=getattr(model, author_id, None),
            evaluator_id=getattr(model, evaluator_id, None),
        )
