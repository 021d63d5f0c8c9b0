from sqlalchemy import Column, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from database import Base


# 1. PARENT TABLE (ids identity provider se aate hain)
class Parent(Base):
    __tablename__ = "parents"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(100))
    mobile_number = Column(String(15), nullable=True)

    # Parent -> Children
    students = relationship("Student", back_populates="parent")


# 2. STUDENT TABLE
class Student(Base):
    __tablename__ = "students"

    id = Column(String(64), primary_key=True, index=True)
    admission_no = Column(String(50), unique=True, index=True)
    student_name = Column(String(100))

    parent_id = Column(String(64), ForeignKey("parents.id"), nullable=True, index=True)
    status = Column(Boolean, default=True)

    # --- RELATIONSHIPS ---
    parent = relationship("Parent", back_populates="students")
    fees = relationship("models.fee_models.Fee", back_populates="student")
