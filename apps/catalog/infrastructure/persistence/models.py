"""
Django ORM models for persistence.
Infrastructure layer — technical storage detail.
"""

from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models


class BaseModel(models.Model):

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Product(BaseModel):

    code = models.CharField(
        max_length=10,
        unique=True,
        validators=[MinLengthValidator(10)],
        help_text="Unique 10 character business code.",
    )
    name = models.CharField(max_length=255)
    price_source = models.DecimalField(
        max_digits=19,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text="Price in the catalog's source currency.",
    )
    price_target = models.DecimalField(
        max_digits=19,
        decimal_places=2,
        editable=False,
        help_text="Price converted with the daily middle rate at creation time.",
    )
    is_available = models.BooleanField()

    class Meta:
        app_label = "catalog"
        ordering = ["id"]

    def __str__(self):
        return f"{self.code} | {self.name} | {self.price_source} / {self.price_target}"
