# payroll_app/schemas/adjustment_schema.py
# Shared by allowances and deductions.
from pydantic import BaseModel
from decimal import Decimal
from typing import Optional


class AdjustmentSchema(BaseModel):
    type: Optional[str] = None
    amount: Optional[Decimal] = None
    description: Optional[str] = None
    payroll_id: Optional[int] = None
