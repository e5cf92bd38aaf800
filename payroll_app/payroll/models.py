# payroll_app/payroll/models.py

from sqlalchemy import Column, Integer, String, Date, DECIMAL, ForeignKey
from payroll_app.database import Base


class Payroll(Base):
    __tablename__ = "payroll"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False)
    basic_salary = Column(DECIMAL(10, 2), nullable=True)
    allowances = Column(DECIMAL(10, 2), nullable=True)
    deductions = Column(DECIMAL(10, 2), nullable=True)
    tax_amount = Column(DECIMAL(10, 2), nullable=True)
    payment_date = Column(Date, nullable=True)
    # pending / paid / cancelled -- no transition rules are enforced
    status = Column(String(20), nullable=True, default="pending")

    # total_salary is not stored: calculate_total_salary() computes it on read

    def __repr__(self):
        return f"<Payroll id={self.id} employee_id={self.employee_id} status={self.status}>"
