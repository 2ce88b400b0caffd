"""Management command to print reward summaries."""

from django.core.management.base import BaseCommand, CommandError
from django.utils.dateparse import parse_date

from rewardman.conf import rewardman_settings
from rewardman.exceptions import RewardmanError
from rewardman.service import RewardService


def _date_arg(value):
    parsed = parse_date(value)
    if parsed is None:
        raise ValueError(value)
    return parsed


class Command(BaseCommand):
    help = "Print monthly reward points per customer"

    def add_arguments(self, parser):
        parser.add_argument("--customer", type=int, default=None, help="Customer id")
        parser.add_argument("--from", dest="date_from", type=_date_arg, default=None)
        parser.add_argument("--to", dest="date_to", type=_date_arg, default=None)

    def handle(self, *args, **options):
        service = RewardService()
        date_from = options["date_from"]
        date_to = options["date_to"]

        try:
            if options["customer"] is not None:
                summaries = [
                    service.get_customer_summary(options["customer"], date_from, date_to)
                ]
            elif date_from is None and date_to is None:
                summaries = service.get_all_summaries()
            else:
                summaries = []
                page_index = 0
                while True:
                    page = service.get_paged_summaries(
                        page_index, rewardman_settings.MAX_PAGE_SIZE, date_from, date_to
                    )
                    summaries.extend(page.content)
                    if page.last:
                        break
                    page_index += 1
        except RewardmanError as exc:
            raise CommandError(exc.message)

        for summary in summaries:
            self.stdout.write(
                self.style.MIGRATE_HEADING(
                    f"#{summary.customer_id} {summary.customer_name}"
                )
            )
            for reward in summary.monthly_rewards:
                self.stdout.write(f"  {reward.year} {reward.month:<9} {reward.points:>6}")
            self.stdout.write(f"  {'TOTAL':<14} {summary.total_points:>6}")
