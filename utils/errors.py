"""
utils/errors.py
---------------
Exception types shared across layers.
Handlers catch `MasareefyError` and turn it into a localized reply.
"""


class MasareefyError(Exception):
    """Base class for expected, user-facing failures."""

    message_key: str = "error_generic"


class InvalidDateError(MasareefyError, ValueError):
    """A stored or user-supplied date string is not a valid ISO date."""

    message_key = "error_bad_date"

    def __init__(self, value, field: str = "date"):
        self.value = value
        self.field = field
        super().__init__(f"Invalid ISO date for '{field}': {value!r}")


class ProfileNotFoundError(MasareefyError):
    """No snapshot has been stored for the user yet."""

    message_key = "error_no_profile"

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"No profile stored for user {user_id}")


class BillNotFoundError(MasareefyError):
    message_key = "error_no_bill"

    def __init__(self, bill_id: str):
        self.bill_id = bill_id
        super().__init__(f"Recurring bill not found: {bill_id}")


class TransactionNotFoundError(MasareefyError):
    message_key = "error_no_transaction"

    def __init__(self, transaction_id: str):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction not found: {transaction_id}")


class PlanUnavailableError(MasareefyError):
    """The requested plan type was not offered for the current snapshot."""

    message_key = "error_plan_unavailable"

    def __init__(self, plan_type: str):
        self.plan_type = plan_type
        super().__init__(f"Plan '{plan_type}' is not available for the current balance")
