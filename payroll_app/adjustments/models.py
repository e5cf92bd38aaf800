# payroll_app/adjustments/models.py
# Allowances and deductions have the same shape; each keeps its own table.

from sqlalchemy import Column, Integer, String, Text, DECIMAL, ForeignKey
from payroll_app.database import Base


class Allowance(Base):
    __tablename__ = "allowances"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String(50), nullable=True)
    amount = Column(DECIMAL(10, 2), nullable=True)
    description = Column(Text, nullable=True)
    payroll_id = Column(Integer, ForeignKey("payroll.id"), nullable=True)

    def __repr__(self):
        return f"<Allowance id={self.id} payroll_id={self.payroll_id} type={self.type}>"


class Deduction(Base):
    __tablename__ = "deductions"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String(50), nullable=True)
    amount = Column(DECIMAL(10, 2), nullable=True)
    description = Column(Text, nullable=True)
    payroll_id = Column(Integer, ForeignKey("payroll.id"), nullable=True)

    def __repr__(self):
        return f"<Deduction id={self.id} payroll_id={self.payroll_id} type={self.type}>"
