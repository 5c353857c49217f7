import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "code",
                    models.CharField(
                        help_text="Unique 10 character business code.",
                        max_length=10,
                        unique=True,
                        validators=[django.core.validators.MinLengthValidator(10)],
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                (
                    "price_source",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Price in the catalog's source currency.",
                        max_digits=19,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "price_target",
                    models.DecimalField(
                        decimal_places=2,
                        editable=False,
                        help_text="Price converted with the daily middle rate at creation time.",
                        max_digits=19,
                    ),
                ),
                ("is_available", models.BooleanField()),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
