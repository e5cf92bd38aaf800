# payroll_app/tax_slabs/models.py

from sqlalchemy import Column, Integer, DECIMAL
from payroll_app.database import Base


class TaxSlab(Base):
    __tablename__ = "tax_slabs"

    id = Column(Integer, primary_key=True, index=True)
    min_amount = Column(DECIMAL(12, 2), nullable=False)
    max_amount = Column(DECIMAL(12, 2), nullable=False)
    tax_percentage = Column(DECIMAL(5, 2), nullable=False)

    def __repr__(self):
        return f"<TaxSlab id={self.id} range=[{self.min_amount}, {self.max_amount}]>"
