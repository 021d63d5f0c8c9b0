import datetime

from database import SessionLocal, engine, Base
from models.students import Parent, Student
from models.fee_models import Fee
from services.finance_report import STATUS_PAID, STATUS_PENDING
from services.academic_year import default_academic_year, parse_academic_year

# --- MAGICAL LINE (Ye Tables bana degi agar missing hain) ---
Base.metadata.create_all(bind=engine)

FEE_TYPES = [
    {"name": "Tuition Fee", "amount": 1200},
    {"name": "Lab Fee", "amount": 300},
    {"name": "Library Fee", "amount": 150},
    {"name": "Transport Fee", "amount": 500},
    {"name": "Activity Fee", "amount": 250},
]

PARENTS = [
    {"id": "parent_demo_1", "name": "Ramesh Verma", "mobile": "9800000001"},
    {"id": "parent_demo_2", "name": "Sunita Rao", "mobile": "9800000002"},
]

STUDENTS = [
    {"id": "student_demo_1", "adm": "ADM-001", "name": "Aarav Verma", "parent": "parent_demo_1"},
    {"id": "student_demo_2", "adm": "ADM-002", "name": "Diya Verma", "parent": "parent_demo_1"},
    {"id": "student_demo_3", "adm": "ADM-003", "name": "Kabir Rao", "parent": "parent_demo_2"},
    {"id": "student_demo_4", "adm": "ADM-004", "name": "Meera Iyer", "parent": None},
]


def seed_data(db):
    print("🌱 Seeding finance demo data...")
    today = datetime.date.today()
    label = default_academic_year(today)
    year = parse_academic_year(label)

    # 1. PARENTS
    for p in PARENTS:
        if not db.get(Parent, p["id"]):
            db.add(Parent(id=p["id"], name=p["name"], mobile_number=p["mobile"]))
            print(f"👪 Added Parent: {p['name']}")
    db.commit()

    # 2. STUDENTS
    for s in STUDENTS:
        if not db.get(Student, s["id"]):
            db.add(Student(id=s["id"], admission_no=s["adm"], student_name=s["name"], parent_id=s["parent"]))
            print(f"🎒 Added Student: {s['name']}")
    db.commit()

    # 3. FEES - har student ke liye har mahine ek fee (10 tareekh ko due)
    if db.query(Fee).filter(Fee.academic_year == label).count():
        print(f"ℹ️  Fees for {label} already exist")
        return

    for s_idx, s in enumerate(STUDENTS):
        for m_idx, month in enumerate([7, 8, 9, 10, 11, 12, 1, 2, 3, 4, 5, 6]):
            fee_type = FEE_TYPES[(s_idx + m_idx) % len(FEE_TYPES)]
            due = datetime.date(year.calendar_year_for(month), month, 10)
            fee = Fee(
                student_id=s["id"],
                fee_type=fee_type["name"],
                amount=fee_type["amount"],
                academic_year=label,
                due_date=due,
            )
            if due < today and (s_idx + m_idx) % 3:
                # Paid, kabhi kabhi agle mahine
                fee.status = STATUS_PAID
                fee.paid_amount = fee_type["amount"]
                fee.paid_date = due + datetime.timedelta(days=25 if m_idx % 2 else 3)
            elif (s_idx + m_idx) % 4 == 0:
                # Partial payment
                fee.status = STATUS_PENDING
                fee.paid_amount = round(fee_type["amount"] / 2, 2)
                fee.paid_date = due - datetime.timedelta(days=2)
            else:
                fee.status = STATUS_PENDING
                fee.paid_amount = 0.0
            db.add(fee)
    db.commit()

    print(f"\n🎉 Fees for {label} seeded successfully!")


if __name__ == "__main__":
    db = SessionLocal()
    try:
        seed_data(db)
    finally:
        db.close()
