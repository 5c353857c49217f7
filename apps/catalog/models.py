from apps.catalog.infrastructure.persistence.models import Product

__all__ = ["Product"]
