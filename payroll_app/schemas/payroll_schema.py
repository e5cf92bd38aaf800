# payroll_app/schemas/payroll_schema.py
from pydantic import BaseModel
from datetime import date
from decimal import Decimal
from typing import Optional


class PayrollCreateSchema(BaseModel):
    employee_id: Optional[int] = None
    basic_salary: Optional[Decimal] = None
    allowances: Optional[Decimal] = None
    deductions: Optional[Decimal] = None
    tax_amount: Optional[Decimal] = None
    payment_date: Optional[date] = None
    # pending / paid / cancelled; any value is passed through
    status: Optional[str] = None


class PayrollUpdateSchema(BaseModel):
    basic_salary: Optional[Decimal] = None
    allowances: Optional[Decimal] = None
    deductions: Optional[Decimal] = None
    tax_amount: Optional[Decimal] = None
    payment_date: Optional[date] = None
    status: Optional[str] = None


class GeneratePayrollSchema(BaseModel):
    month: int
    year: int
