from __future__ import annotations

from .base import PayrollCalculator
from ...common.datetime_utils import month_index, month_ordinal
from ...finance.model import Advance


class ChronologicalPayrollCalculator(PayrollCalculator):
    """Every unpaid advance dated in or before the target month counts."""

    def advance_applies(self, advance: Advance, month: int, year: int) -> bool:
        advance_at = month_ordinal(month_index(advance.advance_date), advance.advance_date.year)
        return advance_at <= month_ordinal(month, year)
