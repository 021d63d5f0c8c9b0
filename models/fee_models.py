"""
Fee Models - one row per billable obligation of a student
"""
from sqlalchemy import Column, Integer, String, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from database import Base
from services.finance_report import STATUS_PENDING
import datetime


# 1. FEE - Amount due, amount paid so far, and the dates that drive the finance chart
class Fee(Base):
    __tablename__ = "fees"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(String(64), ForeignKey("students.id"), nullable=False, index=True)
    fee_type = Column(String(100), default="Tuition Fee")  # Tuition, Lab, Library, Transport...

    amount = Column(Float, default=0.0)          # Total due
    paid_amount = Column(Float, default=0.0)     # Paid so far (partial payments allowed)
    status = Column(String(20), default=STATUS_PENDING)  # pending / paid

    due_date = Column(Date, nullable=True)
    paid_date = Column(Date, nullable=True)      # Sirf tab jab kuch payment hua ho

    # Creation time par assign hota hai, e.g. "2025-2026"
    academic_year = Column(String(20), index=True)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    student = relationship("models.students.Student", back_populates="fees")
