"""Management command to load reference customers and purchases."""

from datetime import date
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from rewardman.models import Customer, Transaction

# name, email, [(amount, date)]
SEED_CUSTOMERS = [
    (
        "Alice Johnson",
        "alice.johnson@example.com",
        [
            ("120.00", date(2024, 1, 15)),
            ("75.50", date(2024, 1, 28)),
            ("200.00", date(2024, 2, 10)),
            ("45.00", date(2024, 2, 20)),
            ("110.00", date(2024, 3, 5)),
        ],
    ),
    (
        "Bob Smith",
        "bob.smith@example.com",
        [
            ("55.00", date(2024, 1, 5)),
            ("130.00", date(2024, 1, 22)),
            ("99.99", date(2024, 2, 14)),
            ("40.00", date(2024, 2, 25)),
            ("150.00", date(2024, 3, 18)),
        ],
    ),
    (
        "Carol White",
        "carol.white@example.com",
        [
            ("300.00", date(2024, 1, 10)),
            ("88.00", date(2024, 2, 3)),
            ("50.00", date(2024, 2, 17)),
            ("175.00", date(2024, 3, 22)),
        ],
    ),
]


class Command(BaseCommand):
    help = "Load reference customers with three months of purchases"

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete all customers and transactions first",
        )

    def handle(self, *args, **options):
        with transaction.atomic():
            if options["flush"]:
                deleted_count, _ = Customer.objects.all().delete()
                self.stdout.write(f"Deleted {deleted_count} existing rows.")

            created_count = 0
            for name, email, purchases in SEED_CUSTOMERS:
                customer, created = Customer.objects.get_or_create(
                    email=email,
                    defaults={"name": name},
                )
                if not created:
                    continue
                created_count += 1
                Transaction.objects.bulk_create(
                    Transaction(
                        customer=customer,
                        amount=Decimal(amount),
                        transaction_date=tx_date,
                    )
                    for amount, tx_date in purchases
                )

        self.stdout.write(
            self.style.SUCCESS(f"Seeded {created_count} customers.")
        )
