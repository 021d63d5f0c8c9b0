"""
Academic-year finance report.

Turns fee records into twelve month buckets (Jul..Jun) of collected, pending
and overdue money for the caller's visible records. Bucketing, classification
and aggregation are pure functions of (records, year, today); only
`build_finance_report` talks to the store and the parent directory.

Every failure path returns the all-zero twelve-month report together with a
Diagnostic, so the dashboard chart always has something to draw.
"""
import datetime
import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple, Union

from services.academic_year import AcademicYear, resolve_academic_year
from services.calendar_dates import DateLike, InvalidDateError, same_month, to_calendar_date
from services.fee_scope import (
    NoData,
    ParentDirectory,
    ROLE_PARENT,
    ROLE_STUDENT,
    ScopePredicate,
    resolve_scope,
)

logger = logging.getLogger(__name__)

STATUS_PAID = "paid"
STATUS_PENDING = "pending"

ZERO = Decimal("0")

# Academic order, with calendar month numbers
ACADEMIC_MONTHS: Tuple[Tuple[str, int], ...] = (
    ("Jul", 7), ("Aug", 8), ("Sep", 9), ("Oct", 10), ("Nov", 11), ("Dec", 12),
    ("Jan", 1), ("Feb", 2), ("Mar", 3), ("Apr", 4), ("May", 5), ("Jun", 6),
)

# Diagnostic kinds
INVALID_ACADEMIC_YEAR = "invalid_academic_year"
EMPTY_SCOPE = "empty_scope"
UPSTREAM_FAILURE = "upstream_failure"
NO_RECORDS = "no_records"

Number = Union[int, float, Decimal, None]


# ===========================
#        DATA TYPES
# ===========================

@dataclass(frozen=True)
class FeeRecord:
    id: Any
    student_id: str
    amount: Number
    paid_amount: Number
    status: str
    due_date: DateLike
    paid_date: DateLike = None
    academic_year: Optional[str] = None


@dataclass(frozen=True)
class MonthSlot:
    name: str
    year: int
    month: int


@dataclass(frozen=True)
class Contribution:
    collected: Decimal = ZERO
    pending: Decimal = ZERO
    overdue: Decimal = ZERO


@dataclass(frozen=True)
class MonthBucket:
    name: str
    collected: int = 0
    pending: int = 0
    overdue: int = 0
    total: int = 0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "collected": self.collected,
            "pending": self.pending,
            "overdue": self.overdue,
            "total": self.total,
        }


@dataclass(frozen=True)
class Diagnostic:
    kind: str
    message: str
    error: Optional[BaseException] = None


@dataclass
class Outcome:
    """The report is always twelve valid buckets; diagnostic explains an empty one."""
    report: List[MonthBucket]
    academic_year: Optional[AcademicYear] = None
    scope: Optional[ScopePredicate] = None
    record_count: int = 0
    diagnostic: Optional[Diagnostic] = None


class FeeRecordStore(Protocol):
    def query(self, academic_year: str, scope: ScopePredicate) -> Sequence[FeeRecord]:
        ...


# ===========================
#     HELPER FUNCTIONS
# ===========================

def _money(value: Number) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() keeps 0.1 as 0.1 instead of the binary float expansion
    return Decimal(str(value))


def _round(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def month_slots(year: AcademicYear) -> List[MonthSlot]:
    return [MonthSlot(name, year.calendar_year_for(month), month) for name, month in ACADEMIC_MONTHS]


def empty_report() -> List[MonthBucket]:
    return [MonthBucket(name) for name, _ in ACADEMIC_MONTHS]


# ===========================
#     MONTHLY BUCKETING
# ===========================

def bucket_records(
    records: Sequence[FeeRecord], year: AcademicYear
) -> List[Tuple[MonthSlot, List[FeeRecord]]]:
    """
    Assign records to the twelve months of `year`.

    A record goes into every month where it was due or paid, so a fee due in
    October and paid in November shows up in both. Records with a missing or
    bad due date, or a bad paid date, are left out.
    """
    usable = []
    for record in records:
        try:
            due = to_calendar_date(record.due_date)
            paid = to_calendar_date(record.paid_date)
        except InvalidDateError as exc:
            logger.warning("Skipping fee %s: %s", record.id, exc)
            continue
        if due is None:
            logger.warning("Skipping fee %s: no due date", record.id)
            continue
        if not (_money(record.amount).is_finite() and _money(record.paid_amount).is_finite()):
            logger.warning("Skipping fee %s: non-finite amount", record.id)
            continue
        usable.append((record, due, paid))

    buckets = []
    for slot in month_slots(year):
        in_month = [
            record for record, due, paid in usable
            if same_month(due, slot.year, slot.month)
            or (paid is not None and same_month(paid, slot.year, slot.month))
        ]
        buckets.append((slot, in_month))
    return buckets


# ===========================
#     FEE CLASSIFICATION
# ===========================

def classify_fee(record: FeeRecord, today: datetime.date) -> Contribution:
    """
    Split one fee into collected / pending / overdue money.

    A pending fee with a partial payment counts twice: the balance as pending
    (or overdue) and the paid part as collected.
    """
    amount = _money(record.amount)
    paid_amount = _money(record.paid_amount)
    remaining = amount - paid_amount

    collected = pending = overdue = ZERO

    if record.status == STATUS_PAID:
        collected += paid_amount
    elif record.status == STATUS_PENDING:
        due = to_calendar_date(record.due_date)
        # Due at midnight, so anything due today is already late
        if due is not None and due <= today:
            overdue += remaining
        else:
            pending += remaining

    # Partial payments against a fee still flagged pending
    # TODO: get product sign-off on counting partial payments twice before changing this
    if paid_amount > 0 and record.status != STATUS_PAID:
        collected += paid_amount

    return Contribution(collected=collected, pending=pending, overdue=overdue)


# ===========================
#        AGGREGATION
# ===========================

def aggregate(
    buckets: Sequence[Tuple[MonthSlot, Sequence[FeeRecord]]], today: datetime.date
) -> List[MonthBucket]:
    report = []
    for slot, records in buckets:
        collected = pending = overdue = ZERO
        for record in records:
            part = classify_fee(record, today)
            collected += part.collected
            pending += part.pending
            overdue += part.overdue

        # Round the summed figures, not each fee
        c, p, o = _round(collected), _round(pending), _round(overdue)
        report.append(MonthBucket(slot.name, collected=c, pending=p, overdue=o, total=c + p + o))
    return report


def grand_totals(report: Sequence[MonthBucket]) -> Dict[str, int]:
    return {
        "collected": sum(m.collected for m in report),
        "pending": sum(m.pending for m in report),
        "overdue": sum(m.overdue for m in report),
        "total": sum(m.total for m in report),
    }


def monthly_report(
    records: Sequence[FeeRecord], year: AcademicYear, today: datetime.date
) -> List[MonthBucket]:
    return aggregate(bucket_records(records, year), today)


def report_title(role: Optional[str]) -> str:
    if role == ROLE_STUDENT:
        return "My Fee Payments"
    if role == ROLE_PARENT:
        return "Children's Fee Payments"
    return "Financial Overview"


# ===========================
#        ENTRY POINT
# ===========================

def build_finance_report(
    caller_id: Optional[str],
    caller_role: Optional[str],
    store: FeeRecordStore,
    directory: ParentDirectory,
    academic_year: Optional[str] = None,
    requested_role: Optional[str] = None,
    requested_id: Optional[str] = None,
    now: Optional[datetime.date] = None,
) -> Outcome:
    """
    Build the finance report for one request.

    Never raises for bad input or an unreachable store: those come back as
    the empty report with a Diagnostic attached.
    """
    today = to_calendar_date(now) if now is not None else datetime.date.today()

    year = resolve_academic_year(academic_year, today)
    if year is None:
        return Outcome(
            empty_report(),
            diagnostic=Diagnostic(INVALID_ACADEMIC_YEAR, f"Invalid academic year format: {academic_year!r}"),
        )

    scope = resolve_scope(caller_role, caller_id, requested_role, requested_id, directory)
    if isinstance(scope, NoData):
        if scope.error is not None:
            diagnostic = Diagnostic(UPSTREAM_FAILURE, "Parent lookup failed", scope.error)
        else:
            diagnostic = Diagnostic(EMPTY_SCOPE, "No students visible for this parent")
        return Outcome(empty_report(), academic_year=year, diagnostic=diagnostic)

    try:
        records = list(store.query(year.label, scope))
    except Exception as exc:
        return Outcome(
            empty_report(),
            academic_year=year,
            scope=scope,
            diagnostic=Diagnostic(UPSTREAM_FAILURE, "Fee query failed", exc),
        )

    if not records:
        return Outcome(
            empty_report(),
            academic_year=year,
            scope=scope,
            diagnostic=Diagnostic(NO_RECORDS, f"No fees found for {year.label}"),
        )

    return Outcome(
        monthly_report(records, year, today),
        academic_year=year,
        scope=scope,
        record_count=len(records),
    )
