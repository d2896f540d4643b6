"""
Small lookup helpers shared by the entity services.
"""
from __future__ import annotations

from typing import Optional, Type, TypeVar

from django.db import models

from core.exceptions import MissingArgumentError, NotFoundError

M = TypeVar('M', bound=models.Model)


def require(value, label: str):
    """Raise :class:`MissingArgumentError` when a mandatory argument is ``None``."""
    if value is None:
        raise MissingArgumentError(f'{label} cannot be null')
    return value


def get_or_404(model: Type[M], pk, *, label: Optional[str] = None, with_id: bool = False) -> M:
    """Fetch ``model`` by primary key or raise :class:`NotFoundError`.

    The message is ``"<label> not found"``, suffixed with ``": <id>"`` when
    ``with_id`` is set.
    """
    label = label or model._meta.verbose_name.capitalize()
    require(pk, f'{label} ID')
    obj = model.objects.filter(pk=pk).first()
    if obj is None:
        raise NotFoundError(f'{label} not found: {pk}' if with_id else f'{label} not found')
    return obj


def get_optional(model: Type[M], pk, *, label: Optional[str] = None) -> Optional[M]:
    """Like :func:`get_or_404` but ``None`` passes through."""
    if pk is None:
        return None
    return get_or_404(model, pk, label=label)


def delete_or_404(model: Type[M], pk, *, label: Optional[str] = None) -> None:
    label = label or model._meta.verbose_name.capitalize()
    require(pk, f'{label} ID')
    if not model.objects.filter(pk=pk).exists():
        raise NotFoundError(f'{label} not found')
    model.objects.filter(pk=pk).delete()
