"""
Academic year labels: "2025-2026" means 1 Jul 2025 to 30 Jun 2026.
"""
import datetime
import re
from dataclasses import dataclass
from typing import List, Optional

# Academic year July (month 7) se shuru hota hai
ACADEMIC_YEAR_START_MONTH = 7

# Year halves are capped at 9 digits
_LABEL_RE = re.compile(r"(\d{1,9})-(\d{1,9})", re.ASCII)


@dataclass(frozen=True)
class AcademicYear:
    start_year: int
    end_year: int

    @property
    def label(self) -> str:
        return f"{self.start_year}-{self.end_year}"

    def calendar_year_for(self, month: int) -> int:
        """Jul-Dec fall in the start year, Jan-Jun in the end year."""
        return self.start_year if month >= ACADEMIC_YEAR_START_MONTH else self.end_year


def default_academic_year(now: datetime.date) -> str:
    if now.month >= ACADEMIC_YEAR_START_MONTH:
        return f"{now.year}-{now.year + 1}"
    return f"{now.year - 1}-{now.year}"


def parse_academic_year(label: str) -> Optional[AcademicYear]:
    """Parse "<digits>-<digits>"; any other shape returns None."""
    match = _LABEL_RE.fullmatch(label.strip())
    if not match:
        return None
    return AcademicYear(start_year=int(match.group(1)), end_year=int(match.group(2)))


def resolve_academic_year(requested: Optional[str], now: datetime.date) -> Optional[AcademicYear]:
    """
    Fix the academic year for a request.

    No label -> the year "now" belongs to. A label of the wrong shape -> None,
    which the report builder turns into the all-zero report.
    """
    if requested is None or not requested.strip():
        requested = default_academic_year(now)
    return parse_academic_year(requested)


def academic_year_options(now: datetime.date, span: int = 2) -> List[str]:
    """Labels for the year picker: `span` years either side of the current calendar year."""
    return [f"{now.year + i}-{now.year + i + 1}" for i in range(-span, span + 1)]
