from typing import Type, TypeVar, Generic
from django.db import models

T = TypeVar('T', bound=models.Model)


class GenericRepository(Generic[T]):
    """Thin ORM gateway shared by the app repositories."""

    def __init__(self, model: Type[T]):
        self.model = model

    def queryset(self) -> models.QuerySet:
        return self.model.objects.all()

    def create(self, **data) -> T:
        return self.model.objects.create(**data)
