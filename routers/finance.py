"""
Finance Chart Router - month-wise collected / pending / overdue for an academic year
"""
import datetime
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from routers.auth import Caller, get_caller
from schemas.finance import AcademicYearOptions, FinanceSummary, MonthlyFinance
from services.academic_year import academic_year_options, default_academic_year
from services.fee_store import SqlFeeStore, SqlParentDirectory
from services.finance_report import (
    UPSTREAM_FAILURE,
    Outcome,
    build_finance_report,
    grand_totals,
    report_title,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/finance", tags=["Finance Chart"])


# =====================
# HELPER FUNCTIONS
# =====================

def get_today() -> datetime.date:
    """Overridable in tests"""
    return datetime.date.today()


def log_outcome(outcome: Outcome, caller: Caller, role: Optional[str], user_id: Optional[str]):
    event = {
        "caller_id": caller.user_id,
        "caller_role": caller.role,
        "requested_role": role,
        "requested_user_id": user_id,
        "academic_year": outcome.academic_year.label if outcome.academic_year else None,
        "scope": outcome.scope.describe() if outcome.scope else None,
        "record_count": outcome.record_count,
        "diagnostic": outcome.diagnostic.kind if outcome.diagnostic else None,
    }
    diagnostic = outcome.diagnostic
    if diagnostic is None:
        logger.info("Finance report built", extra=event)
    elif diagnostic.kind == UPSTREAM_FAILURE:
        logger.warning(
            "Finance report degraded to empty: %s", diagnostic.message,
            extra=event, exc_info=diagnostic.error,
        )
    else:
        logger.info("Finance report empty: %s", diagnostic.message, extra=event)


def run_report(
    caller: Caller,
    db: Session,
    today: datetime.date,
    academic_year: Optional[str],
    role: Optional[str],
    user_id: Optional[str],
) -> Outcome:
    outcome = build_finance_report(
        caller_id=caller.user_id,
        caller_role=caller.role,
        store=SqlFeeStore(db),
        directory=SqlParentDirectory(db),
        academic_year=academic_year,
        requested_role=role,
        requested_id=user_id,
        now=today,
    )
    log_outcome(outcome, caller, role, user_id)
    return outcome


# =====================
# API ROUTES
# =====================

# 1. Chart data (12 months, Jul -> Jun)
@router.get("/chart", response_model=List[MonthlyFinance])
def finance_chart(
    academic_year: Optional[str] = Query(None, alias="academicYear"),
    role: Optional[str] = Query(None),
    user_id: Optional[str] = Query(None, alias="userId"),
    caller: Caller = Depends(get_caller),
    today: datetime.date = Depends(get_today),
    db: Session = Depends(get_db),
):
    outcome = run_report(caller, db, today, academic_year, role, user_id)
    return [month.as_dict() for month in outcome.report]


# 2. Chart data + header + yearly totals
@router.get("/summary", response_model=FinanceSummary)
def finance_summary(
    academic_year: Optional[str] = Query(None, alias="academicYear"),
    role: Optional[str] = Query(None),
    user_id: Optional[str] = Query(None, alias="userId"),
    caller: Caller = Depends(get_caller),
    today: datetime.date = Depends(get_today),
    db: Session = Depends(get_db),
):
    outcome = run_report(caller, db, today, academic_year, role, user_id)
    return {
        "academicYear": outcome.academic_year.label if outcome.academic_year else None,
        "title": report_title(role or caller.role),
        "months": [month.as_dict() for month in outcome.report],
        "totals": grand_totals(outcome.report),
    }


# 3. Year picker options
@router.get("/academic-years", response_model=AcademicYearOptions)
def list_academic_years(
    caller: Caller = Depends(get_caller),
    today: datetime.date = Depends(get_today),
):
    return {"default": default_academic_year(today), "options": academic_year_options(today)}
