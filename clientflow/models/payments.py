# clientflow/models/payments.py

from typing import Optional

from pydantic import BaseModel


class PaymentUpdate(BaseModel):
    # New absolute total paid so far, not an increment
    advance_paid: float
    # Ledger amount for this payment event; recorded only when > 0
    amount_added: Optional[float] = None
