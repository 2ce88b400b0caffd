"""
Django Rewardman - Loyalty reward points.

Usage:
    from rewardman import RewardService, calculate_points

    service = RewardService()
    summary = service.get_customer_summary(1)
    page = service.get_paged_summaries(0, 10, date_from=date(2024, 1, 1))
    calculate_points(Decimal("120.00"))  # 90
"""


def __getattr__(name):
    if name == "RewardService":
        from rewardman.service import RewardService

        return RewardService
    if name == "calculate_points":
        from rewardman.points import calculate_points

        return calculate_points
    if name == "summarize":
        from rewardman.aggregation import summarize

        return summarize
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["RewardService", "calculate_points", "summarize"]
__version__ = "0.1.0"
