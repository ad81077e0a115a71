"""
Initial migration for the payments app.

Creates the Charge table with the card details reported by Stripe and a
unique constraint on (user, stripe_id) so charge recording is idempotent.
"""
from django.db import migrations, models
import django.db.models.deletion
from django.conf import settings


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Charge",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("stripe_id", models.CharField(help_text="Stripe charge identifier (ch_...)", max_length=255)),
                ("amount", models.PositiveIntegerField(default=0, help_text="Amount in the smallest currency unit")),
                ("card_last4", models.CharField(blank=True, max_length=4)),
                ("card_type", models.CharField(blank=True, max_length=32)),
                ("card_exp_month", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("card_exp_year", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="charges",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.AddConstraint(
            model_name="charge",
            constraint=models.UniqueConstraint(fields=("user", "stripe_id"), name="unique_charge_per_user"),
        ),
    ]
