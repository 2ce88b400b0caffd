"""Customer model."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Customer(models.Model):
    """
    Retail customer.

    Read-only from the reward engine's point of view: summaries are
    computed from its transactions and never stored back.
    """

    name = models.CharField(_("name"), max_length=200)
    email = models.EmailField(_("email"), unique=True)

    created_at = models.DateTimeField(_("created at"), auto_now_add=True)

    class Meta:
        verbose_name = _("customer")
        verbose_name_plural = _("customers")
        ordering = ["id"]

    def __str__(self):
        return f"{self.name} (#{self.pk})"

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.lower().strip()
        super().save(*args, **kwargs)
