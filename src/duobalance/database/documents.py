"""Conversion between domain state and the JSON document format.

The document keeps the field names of the original browser storage format
(``categoryId``, ``createdAt`` in epoch milliseconds, ``payerWhoOwes`` set to
``"None"`` when nobody owes), so documents can move between installations.
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from duobalance.domain.entities import AppState, Batch, Category, Expense, Payer
from duobalance.domain.errors import ValidationError, non_positive_amount
from duobalance.utils.timestamps import from_millis, to_millis

STORAGE_KEY = "duobalance_v1"
NOBODY = "None"

_USER_KEYS = {Payer.RICARDO: "ricardo", Payer.RAFAELA: "rafaela"}


def _number(value: Decimal) -> Any:
    """Render a Decimal as a JSON number.

    Values a float cannot hold exactly are written as strings, which
    ``_decimal`` reads back without loss.
    """
    if value == value.to_integral_value():
        return int(value)
    as_float = float(value)
    if Decimal(repr(as_float)) == value:
        return as_float
    return str(value)


def _decimal(value: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"Invalid amount: {value!r}")
    try:
        result = Decimal(str(value))
    except InvalidOperation as e:
        raise ValidationError(f"Invalid amount: {value!r}") from e
    if not result.is_finite():
        raise ValidationError(f"Invalid amount: {value!r}")
    return result


def _payer(value: Any) -> Payer:
    try:
        return Payer(value)
    except ValueError as e:
        raise ValidationError(f"Invalid payer: {value!r}") from e


def category_to_document(category: Category) -> dict[str, Any]:
    return {"id": category.id, "name": category.name, "color": category.color}


def expense_to_document(expense: Expense) -> dict[str, Any]:
    return {
        "id": expense.id,
        "amount": _number(expense.amount),
        "payer": expense.payer.value,
        "date": expense.date.isoformat(),
        "categoryId": expense.category_id,
        "description": expense.description or "",
        "createdAt": to_millis(expense.created_at),
    }


def batch_to_document(batch: Batch) -> dict[str, Any]:
    return {
        "id": batch.id,
        "name": batch.name,
        "expenses": [expense_to_document(e) for e in batch.expenses],
        "settledAt": to_millis(batch.settled_at),
        "totalRicardo": _number(batch.total_ricardo),
        "totalRafaela": _number(batch.total_rafaela),
        "balance": _number(batch.balance),
        "payerWhoOwes": batch.payer_who_owes.value if batch.payer_who_owes else NOBODY,
    }


def state_to_document(state: AppState) -> dict[str, Any]:
    """Convert the application state to a JSON-serializable dict."""
    return {
        "expenses": [expense_to_document(e) for e in state.expenses],
        "batches": [batch_to_document(b) for b in state.batches],
        "categories": [category_to_document(c) for c in state.categories],
        "users": {_USER_KEYS[payer]: name for payer, name in state.users.items()},
    }


def category_from_document(data: dict[str, Any]) -> Category:
    return Category(id=str(data["id"]), name=str(data["name"]), color=str(data["color"]))


def _parse_date(value: Any) -> date:
    # Browser documents store a full ISO timestamp; only the day is kept.
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError as e:
        raise ValidationError(f"Invalid date: {value!r}") from e


def expense_from_document(data: dict[str, Any]) -> Expense:
    category_id: Optional[str] = data.get("categoryId")
    amount = _decimal(data["amount"])
    if amount <= 0:
        raise ValidationError(non_positive_amount(amount))
    return Expense(
        id=str(data["id"]),
        amount=amount,
        payer=_payer(data["payer"]),
        date=_parse_date(data["date"]),
        category_id=str(category_id) if category_id else None,
        description=data.get("description") or None,
        created_at=from_millis(data["createdAt"]),
    )


def batch_from_document(data: dict[str, Any]) -> Batch:
    who_owes = data.get("payerWhoOwes", NOBODY)
    return Batch(
        id=str(data["id"]),
        name=str(data["name"]),
        expenses=tuple(expense_from_document(e) for e in data["expenses"]),
        settled_at=from_millis(data["settledAt"]),
        total_ricardo=_decimal(data["totalRicardo"]),
        total_rafaela=_decimal(data["totalRafaela"]),
        balance=_decimal(data["balance"]),
        payer_who_owes=None if who_owes in (None, NOBODY) else _payer(who_owes),
    )


def _check_unique(kind: str, ids: list[str]) -> None:
    seen = set()
    for item_id in ids:
        if item_id in seen:
            raise ValidationError(f"Duplicate {kind} id: {item_id!r}")
        seen.add(item_id)


def state_from_document(data: Any) -> AppState:
    """Build application state from a document dict.

    Raises:
        ValidationError: If the document does not have the expected shape
    """
    if not isinstance(data, dict):
        raise ValidationError("State document must be an object")

    try:
        users_data = data.get("users") or {}
        users = {payer: str(users_data.get(key, payer.value)) for payer, key in _USER_KEYS.items()}
        state = AppState(
            expenses=tuple(expense_from_document(e) for e in data["expenses"]),
            batches=tuple(batch_from_document(b) for b in data["batches"]),
            categories=tuple(category_from_document(c) for c in data["categories"]),
            users=users,
        )
    except ValidationError:
        raise
    except (KeyError, TypeError, AttributeError, ValueError, OverflowError) as e:
        raise ValidationError(f"Malformed state document: {e}") from e

    # Every expense lives in exactly one place: the active list or one batch
    _check_unique("expense", [e.id for e in state.all_expenses()])
    _check_unique("batch", [b.id for b in state.batches])
    _check_unique("category", [c.id for c in state.categories])
    return state
