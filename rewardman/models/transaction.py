"""Purchase transaction model."""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class Transaction(models.Model):
    """
    A customer purchase.

    Amounts are in whole currency with cents; negative amounts are
    rejected by the validator and by the check constraint.
    """

    customer = models.ForeignKey(
        "rewardman.Customer",
        on_delete=models.CASCADE,
        related_name="transactions",
        verbose_name=_("customer"),
    )
    amount = models.DecimalField(
        _("amount"),
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    transaction_date = models.DateField(_("transaction date"), db_index=True)

    class Meta:
        verbose_name = _("transaction")
        verbose_name_plural = _("transactions")
        ordering = ["transaction_date", "id"]
        indexes = [
            models.Index(
                fields=["customer", "transaction_date"],
                name="rewardman_tx_cust_date_idx",
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount__gte=0),
                name="rewardman_transaction_amount_non_negative",
            ),
        ]

    def __str__(self):
        return f"{self.transaction_date} ${self.amount} ({self.customer_id})"

    @property
    def points(self) -> int:
        """Points this purchase earns on its own."""
        from rewardman.points import calculate_points

        return calculate_points(self.amount)
