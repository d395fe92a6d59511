from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="IngestedFile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                (
                    "summary",
                    models.JSONField(help_text="totalRows / numericColumns / columnNames for the first sheet."),
                ),
                ("graph_data", models.JSONField(blank=True, null=True)),
                ("url", models.CharField(help_text="Public URL of the stored upload.", max_length=500)),
                (
                    "storage_name",
                    models.CharField(
                        help_text="Name of the blob in the default storage, used for cleanup.",
                        max_length=500,
                    ),
                ),
                ("size", models.PositiveBigIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "uploaded_by",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ingested_files",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.AddConstraint(
            model_name="ingestedfile",
            constraint=models.UniqueConstraint(fields=("uploaded_by", "title"), name="unique_title_per_user"),
        ),
    ]
