import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="LedgerAccount",
            fields=[
                ("id", models.PositiveSmallIntegerField(default=1, primary_key=True, serialize=False)),
                ("next_event_id", models.PositiveBigIntegerField(default=0)),
                ("next_ticket_id", models.PositiveBigIntegerField(default=0)),
                ("proceeds", models.PositiveBigIntegerField(default=0)),
            ],
        ),
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.PositiveBigIntegerField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("price", models.PositiveBigIntegerField()),
                ("max_tickets", models.PositiveIntegerField()),
                ("tickets_sold", models.PositiveIntegerField(default=0)),
                ("event_time", models.DateTimeField()),
                ("active", models.BooleanField(default=True)),
            ],
            options={
                "ordering": ["id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("tickets_sold__lte", models.F("max_tickets"))),
                        name="event_tickets_sold_lte_max",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Ticket",
            fields=[
                ("id", models.PositiveBigIntegerField(primary_key=True, serialize=False)),
                ("holder", models.CharField(max_length=255)),
                ("used", models.BooleanField(default=False)),
                ("purchased_at", models.DateTimeField()),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="tickets",
                        to="ticketing.event",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
                "indexes": [models.Index(fields=["holder"], name="ticket_holder_idx")],
            },
        ),
        migrations.CreateModel(
            name="HolderCount",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("holder", models.CharField(max_length=255)),
                ("count", models.PositiveIntegerField(default=0)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="holder_counts",
                        to="ticketing.event",
                    ),
                ),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("event", "holder"), name="unique_event_holder")
                ],
            },
        ),
    ]
