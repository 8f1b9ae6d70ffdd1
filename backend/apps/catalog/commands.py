import json
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Optional, Tuple

from django.conf import settings

from apps.api.exceptions import ApplicationError, INVALID_BODY_MESSAGE

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 100
MAX_OFFSET = 2**63 - 1
DEFAULT_ALLOWED_CATEGORIES: Tuple[str, ...] = ("CLOTHING", "SHOES", "ACCESSORIES")

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def configured_allowed_categories() -> Tuple[str, ...]:
    configured = getattr(settings, "CATALOG_ALLOWED_CATEGORIES", None)
    if not configured:
        return DEFAULT_ALLOWED_CATEGORIES
    return tuple(str(code).strip().upper() for code in configured)


def _first_value(params: Mapping[str, Any], name: str) -> str:
    """First value of a query parameter, '' when absent."""
    getlist = getattr(params, "getlist", None)
    if callable(getlist):
        values = getlist(name)
        return values[0] if values else ""
    value = params.get(name)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    return "" if value is None else str(value)


def _parse_int(raw: str) -> Optional[int]:
    if not _INTEGER_RE.fullmatch(raw):
        return None
    return int(raw)


def _parse_decimal(raw: str) -> Optional[Decimal]:
    if not _DECIMAL_RE.fullmatch(raw):
        return None
    try:
        value = Decimal(raw)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def _invalid(message: str, parameter: str, value: str) -> ApplicationError:
    return ApplicationError(
        "VALIDATION_ERROR", message, details={"parameter": parameter, "value": value}
    )


# Product listing query
@dataclass(frozen=True)
class ProductListQuery:
    offset: int = DEFAULT_OFFSET
    limit: int = DEFAULT_LIMIT
    category: Optional[str] = None
    price_less_than: Optional[Decimal] = None

    @staticmethod
    def from_raw(
        params: Mapping[str, Any],
        *,
        allowed_categories: Optional[Iterable[str]] = None,
    ) -> "ProductListQuery":
        """
        Validate raw query parameters.

        Parameters are checked in the order offset, limit, category,
        price_less_than and the first failure is raised as a
        ``VALIDATION_ERROR``.
        """
        offset = DEFAULT_OFFSET
        limit = DEFAULT_LIMIT
        category = None
        price_less_than = None

        raw_offset = _first_value(params, "offset")
        if raw_offset != "":
            parsed = _parse_int(raw_offset)
            if parsed is None or not 0 <= parsed <= MAX_OFFSET:
                raise _invalid("invalid offset parameter", "offset", raw_offset)
            offset = parsed

        raw_limit = _first_value(params, "limit")
        if raw_limit != "":
            parsed = _parse_int(raw_limit)
            if parsed is None or not MIN_LIMIT <= parsed <= MAX_LIMIT:
                raise _invalid(
                    f"limit must be between {MIN_LIMIT} and {MAX_LIMIT}",
                    "limit",
                    raw_limit,
                )
            limit = parsed

        raw_category = _first_value(params, "category")
        if raw_category != "":
            allowed = (
                configured_allowed_categories()
                if allowed_categories is None
                else tuple(code.upper() for code in allowed_categories)
            )
            normalized = raw_category.strip().upper()
            if normalized not in allowed:
                quoted = json.dumps(raw_category, ensure_ascii=False)
                raise _invalid(f"invalid category {quoted}", "category", raw_category)
            category = normalized

        raw_price = _first_value(params, "price_less_than")
        if raw_price != "":
            price_less_than = _parse_decimal(raw_price)
            if price_less_than is None:
                raise _invalid(
                    "invalid price_less_than parameter", "price_less_than", raw_price
                )

        return ProductListQuery(
            offset=offset,
            limit=limit,
            category=category,
            price_less_than=price_less_than,
        )


# Category Commands
@dataclass(frozen=True)
class CategoryCreateCommand:
    code: str
    name: str

    @staticmethod
    def _field(data: Mapping[str, Any], name: str) -> str:
        value = data.get(name)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ApplicationError(
                "VALIDATION_ERROR", INVALID_BODY_MESSAGE, details={"field": name}
            )
        return value.strip()

    @staticmethod
    def from_raw(payload: Any) -> "CategoryCreateCommand":
        if not isinstance(payload, Mapping):
            raise ApplicationError(
                "VALIDATION_ERROR",
                INVALID_BODY_MESSAGE,
                details={"type": type(payload).__name__},
            )
        code = CategoryCreateCommand._field(payload, "code")
        name = CategoryCreateCommand._field(payload, "name")
        if not code or not name:
            raise ApplicationError(
                "VALIDATION_ERROR",
                "code and name are required",
                details={"code": bool(code), "name": bool(name)},
            )
        return CategoryCreateCommand(code=code.upper(), name=name)
