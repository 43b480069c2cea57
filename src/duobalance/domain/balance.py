"""Balance calculation between the two payers."""

from decimal import Decimal
from typing import Iterable, Optional

from duobalance.domain.entities import Balance, Expense, Payer


def total_paid(expenses: Iterable[Expense], payer: Payer) -> Decimal:
    """Sum of amounts paid by one payer."""
    return sum((e.amount for e in expenses if e.payer == payer), Decimal("0"))


def calculate_balance(expenses: Iterable[Expense]) -> Balance:
    """Compute each payer's total, their difference and who owes whom.

    The payer who paid less owes half of the difference to the other. When
    both paid the same, nobody owes anything.

    Args:
        expenses: Expenses of the period (usually the active ones)

    Returns:
        Balance for the given expenses
    """
    expenses = list(expenses)
    total_ricardo = total_paid(expenses, Payer.RICARDO)
    total_rafaela = total_paid(expenses, Payer.RAFAELA)

    diff = total_ricardo - total_rafaela
    who_owes: Optional[Payer] = None
    if diff > 0:
        who_owes = Payer.RAFAELA
    elif diff < 0:
        who_owes = Payer.RICARDO

    return Balance(
        total_ricardo=total_ricardo,
        total_rafaela=total_rafaela,
        diff=diff,
        balance_owed=abs(diff) / 2,
        who_owes=who_owes,
    )


def creditor(balance: Balance) -> Optional[Payer]:
    """Return the payer who is owed money, if any."""
    if balance.who_owes is None:
        return None
    return Payer.RAFAELA if balance.who_owes == Payer.RICARDO else Payer.RICARDO
