"""Catalog bounded context errors."""


class CatalogError(Exception):
    """Base class for catalog errors."""


class DuplicateCode(CatalogError):

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Product with code: {code} already exists.")


class NotFound(CatalogError):

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with ID: {product_id} not found.")
