# payroll_app/schemas/tax_slab_schema.py
from pydantic import BaseModel
from decimal import Decimal


class TaxSlabSchema(BaseModel):
    min_amount: Decimal
    max_amount: Decimal
    tax_percentage: Decimal
