"""Rewardman exceptions."""

from datetime import date


class RewardmanError(Exception):
    """
    Structured exception for reward operations.

    Carries a stable ``code``, a human-readable ``message`` and the
    offending values in ``data``.

    Usage:
        try:
            summary = service.get_customer_summary(42)
        except RewardmanError as e:
            if e.code == "CUSTOMER_NOT_FOUND":
                handle_not_found()
    """

    _default_messages = {
        "CUSTOMER_NOT_FOUND": "Customer not found",
        "INVALID_DATE_RANGE": "Invalid date range",
        "INVALID_PARAMETER": "Invalid request parameter",
    }

    def __init__(self, code: str, message: str | None = None, **data):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(self.message)

    def as_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "data": self.data}


class CustomerNotFound(RewardmanError):
    """Requested customer identifier does not exist."""

    def __init__(self, customer_id: int):
        super().__init__(
            "CUSTOMER_NOT_FOUND",
            message=f"Customer not found with id: {customer_id}",
            customer_id=customer_id,
        )
        self.customer_id = customer_id


class InvalidDateRange(RewardmanError):
    """``from`` is strictly after ``to``."""

    def __init__(self, date_from: date, date_to: date):
        super().__init__(
            "INVALID_DATE_RANGE",
            message=f"'from' date ({date_from}) must not be after 'to' date ({date_to})",
            date_from=date_from,
            date_to=date_to,
        )
        self.date_from = date_from
        self.date_to = date_to


class InvalidParameter(RewardmanError):
    """Malformed input rejected at the boundary (ids, dates, paging)."""

    def __init__(self, name: str, value, message: str | None = None):
        super().__init__(
            "INVALID_PARAMETER",
            message=message or f"Invalid parameter: {name}",
            name=name,
            value=value,
        )
        self.name = name
        self.value = value
