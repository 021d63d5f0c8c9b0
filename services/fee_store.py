"""
SQLAlchemy backed collaborators of the finance report:
fee records by academic year + scope, and the parent -> children lookup.
"""
from typing import List

from sqlalchemy.orm import Session

from models.fee_models import Fee
from models.students import Student
from services.fee_scope import GlobalScope, ScopePredicate, SingleStudent, StudentSet
from services.finance_report import FeeRecord


class SqlFeeStore:
    def __init__(self, db: Session):
        self.db = db

    def query(self, academic_year: str, scope: ScopePredicate) -> List[FeeRecord]:
        q = self.db.query(Fee).filter(Fee.academic_year == academic_year)

        if isinstance(scope, SingleStudent):
            q = q.filter(Fee.student_id == scope.student_id)
        elif isinstance(scope, StudentSet):
            q = q.filter(Fee.student_id.in_(scope.student_ids))
        elif not isinstance(scope, GlobalScope):
            raise TypeError(f"Unknown scope: {scope!r}")

        return [
            FeeRecord(
                id=fee.id,
                student_id=fee.student_id,
                amount=fee.amount,
                paid_amount=fee.paid_amount,
                status=fee.status,
                due_date=fee.due_date,
                paid_date=fee.paid_date,
                academic_year=fee.academic_year,
            )
            for fee in q.all()
        ]


class SqlParentDirectory:
    def __init__(self, db: Session):
        self.db = db

    def children_of(self, parent_id: str) -> List[str]:
        # Unknown parent ka matlab: koi bachcha nahi
        rows = self.db.query(Student.id).filter(Student.parent_id == parent_id).all()
        return [row.id for row in rows]
