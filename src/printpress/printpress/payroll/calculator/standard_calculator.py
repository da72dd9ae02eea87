from __future__ import annotations

from .base import PayrollCalculator
from ...common.datetime_utils import month_index
from ...finance.model import Advance


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: advance year <= year AND advance month <= month.

    Year and month are compared separately, so a November advance does not
    count against January of the following year.
    """

    def advance_applies(self, advance: Advance, month: int, year: int) -> bool:
        return advance.advance_date.year <= year and month_index(advance.advance_date) <= month
