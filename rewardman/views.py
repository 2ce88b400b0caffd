"""
Rewards JSON endpoints.

    GET rewards/                  - All summaries, or one page when page/size/from/to is given
    GET rewards/<customer_id>/    - One customer's summary
    GET rewards/points/?amount=   - Points for a single amount

Errors are rendered as {"status", "error", "message"}.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from http import HTTPStatus

from django.http import JsonResponse
from django.utils.dateparse import parse_date
from django.views import View

from rewardman.conf import rewardman_settings
from rewardman.exceptions import (
    CustomerNotFound,
    InvalidDateRange,
    InvalidParameter,
    RewardmanError,
)
from rewardman.service import RewardService

logger = logging.getLogger(__name__)

_ERROR_STATUS = {
    CustomerNotFound: HTTPStatus.NOT_FOUND,
    InvalidDateRange: HTTPStatus.BAD_REQUEST,
    InvalidParameter: HTTPStatus.BAD_REQUEST,
}

_PAGING_PARAMS = ("page", "size", "from", "to")

# 64-bit signed range of ids and SQL offsets
MAX_INT = 2**63 - 1

# Largest amount a Transaction can hold (12 digits, 2 decimal places)
MAX_AMOUNT = Decimal("1e10")


def error_response(status: HTTPStatus, message: str) -> JsonResponse:
    """Structured error body: numeric status, reason phrase, message."""
    return JsonResponse(
        {"status": status.value, "error": status.phrase, "message": message},
        status=status.value,
    )


def parse_int(
    name: str,
    raw: str | None,
    default: int | None = None,
    minimum: int = 0,
    maximum: int = MAX_INT,
) -> int:
    if raw is None or raw == "":
        if default is None:
            raise InvalidParameter(name, raw, message=f"Missing parameter: {name}")
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidParameter(name, raw)
    if value < minimum:
        raise InvalidParameter(name, raw, message=f"{name} must be greater than or equal to {minimum}")
    if value > maximum:
        raise InvalidParameter(name, raw, message=f"{name} must be less than or equal to {maximum}")
    return value


def parse_iso_date(name: str, raw: str | None) -> date | None:
    if raw is None or raw == "":
        return None
    try:
        value = parse_date(raw)
    except ValueError:
        # Well formed but not a real date (e.g. 2024-02-30)
        value = None
    if value is None:
        raise InvalidParameter(name, raw, message=f"Invalid parameter: {name} (expected YYYY-MM-DD)")
    return value


def parse_amount(raw: str | None) -> Decimal:
    if raw is None or raw == "":
        raise InvalidParameter("amount", raw, message="Missing parameter: amount")
    try:
        amount = Decimal(raw)
    except InvalidOperation:
        raise InvalidParameter("amount", raw)
    if not amount.is_finite() or amount < 0:
        raise InvalidParameter("amount", raw, message="amount must be a non-negative number")
    if amount >= MAX_AMOUNT:
        raise InvalidParameter("amount", raw, message=f"amount must be less than {MAX_AMOUNT:f}")
    return amount


class RewardView(View):
    """Base view: builds the service and maps failures to JSON errors."""

    http_method_names = ["get", "head", "options"]
    service_class = RewardService

    def get_service(self) -> RewardService:
        return self.service_class()

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except RewardmanError as exc:
            status = _ERROR_STATUS.get(type(exc), HTTPStatus.BAD_REQUEST)
            logger.warning("Rewards request %s rejected: %s", request.get_full_path(), exc.message)
            return error_response(status, exc.message)
        except Exception:
            logger.exception("Rewards request %s failed", request.get_full_path())
            return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, "Internal error")


class RewardListView(RewardView):
    """
    GET rewards/

    Without query parameters returns a JSON array with every customer.
    With any of page, size, from, to returns a paged object.
    """

    def get(self, request):
        params = request.GET
        if not any(name in params for name in _PAGING_PARAMS):
            summaries = self.get_service().get_all_summaries()
            logger.info("Rewards listed for %d customers", len(summaries))
            return JsonResponse([s.as_dict() for s in summaries], safe=False)

        page = parse_int("page", params.get("page"), default=0, minimum=0)
        size = parse_int(
            "size",
            params.get("size"),
            default=rewardman_settings.DEFAULT_PAGE_SIZE,
            minimum=1,
        )
        if size > rewardman_settings.MAX_PAGE_SIZE:
            raise InvalidParameter(
                "size",
                size,
                message=f"size must be less than or equal to {rewardman_settings.MAX_PAGE_SIZE}",
            )
        if page * size > MAX_INT:
            raise InvalidParameter("page", page, message="page is out of range")
        date_from = parse_iso_date("from", params.get("from"))
        date_to = parse_iso_date("to", params.get("to"))

        result = self.get_service().get_paged_summaries(page, size, date_from, date_to)
        logger.info(
            "Rewards page %d/%d (size=%d, from=%s, to=%s)",
            result.page + 1,
            result.total_pages,
            result.size,
            date_from,
            date_to,
        )
        return JsonResponse(result.as_dict())


class CustomerRewardView(RewardView):
    """GET rewards/<customer_id>/"""

    def get(self, request, customer_id):
        pk = parse_int("customerId", customer_id, minimum=1)
        date_from = parse_iso_date("from", request.GET.get("from"))
        date_to = parse_iso_date("to", request.GET.get("to"))

        summary = self.get_service().get_customer_summary(pk, date_from, date_to)
        logger.info("Rewards for customer %s: %d points", pk, summary.total_points)
        return JsonResponse(summary.as_dict())


class PointsView(RewardView):
    """GET rewards/points/?amount=120.50"""

    def get(self, request):
        amount = parse_amount(request.GET.get("amount"))
        return JsonResponse(
            {"amount": str(amount), "points": RewardService.calculate_points(amount)}
        )
