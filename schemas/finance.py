from pydantic import BaseModel
from typing import List, Optional


# 1. Ek mahine ka data (chart ka ek point)
class MonthlyFinance(BaseModel):
    name: str
    collected: int
    pending: int
    overdue: int
    total: int

    class Config:
        from_attributes = True


# 2. Poore saal ka jod
class FinanceTotals(BaseModel):
    collected: int
    pending: int
    overdue: int
    total: int


# 3. Chart header + months + totals
class FinanceSummary(BaseModel):
    academicYear: Optional[str]
    title: str
    months: List[MonthlyFinance]
    totals: FinanceTotals


# 4. Year picker
class AcademicYearOptions(BaseModel):
    default: str
    options: List[str]
