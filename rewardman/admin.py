"""Rewardman admin."""

from django.contrib import admin
from django.utils.html import format_html

from rewardman.aggregation import summarize
from rewardman.models import Customer, Transaction
from rewardman.protocols.store import CustomerRecord, TransactionRecord


class TransactionInline(admin.TabularInline):
    model = Transaction
    extra = 0
    fields = ["transaction_date", "amount", "points"]
    readonly_fields = ["points"]
    ordering = ["-transaction_date"]


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "email", "transaction_count", "total_points", "created_at"]
    search_fields = ["name", "email"]
    readonly_fields = ["created_at"]
    inlines = [TransactionInline]

    def transaction_count(self, obj):
        return obj.transactions.count()

    transaction_count.short_description = "Transactions"

    def total_points(self, obj):
        summary = summarize(
            CustomerRecord(id=obj.pk, name=obj.name),
            [
                TransactionRecord(amount=amount, transaction_date=tx_date)
                for amount, tx_date in obj.transactions.values_list("amount", "transaction_date")
            ],
        )
        return summary.total_points

    total_points.short_description = "Points"


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ["transaction_date", "customer_link", "amount", "points_display"]
    list_filter = ["transaction_date"]
    search_fields = ["customer__name", "customer__email"]
    raw_id_fields = ["customer"]
    date_hierarchy = "transaction_date"

    def customer_link(self, obj):
        from django.urls import reverse

        url = reverse("admin:rewardman_customer_change", args=[obj.customer.pk])
        return format_html('<a href="{}">{}</a>', url, obj.customer.name)

    customer_link.short_description = "Customer"

    def points_display(self, obj):
        points = obj.points
        if points > 0:
            return format_html('<span style="color:green">+{}</span>', points)
        return format_html('<span style="color:#6c757d">{}</span>', points)

    points_display.short_description = "Points"
