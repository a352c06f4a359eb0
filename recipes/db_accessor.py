from typing import Any, Dict, List, Mapping, Optional, Sequence, Type
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor wrapping the queryset operations repos share."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def base_queryset(self) -> QuerySet:
        """Queryset every listing starts from; repos override to annotate."""
        return self.model.objects.all()

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
        as_dict: bool = False,
    ) -> QuerySet | List[Dict[str, Any]]:
        """Return a filtered, ordered and optionally limited queryset (or list of dicts)."""
        qs: QuerySet = self.base_queryset().filter(**(filters or {}))
        if order_by:
            qs = qs.order_by(*order_by)
        if limit is not None:
            qs = qs[: max(0, int(limit))]
        return list(qs.values()) if as_dict else qs

    def get(self, **lookup: Any) -> Model:
        """Fetch a single object matching the lookup."""
        return self.base_queryset().get(**lookup)

    def first(self, **lookup: Any) -> Optional[Model]:
        """Return the first object matching the lookup, or None."""
        return self.base_queryset().filter(**lookup).first()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def update(self, lookup: Mapping[str, Any], **data: Any) -> int:
        """Update objects matching lookup; return count updated."""
        return self.model.objects.filter(**lookup).update(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
