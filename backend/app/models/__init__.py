"""ORM models. Importing this package registers every table with Base.metadata."""

from app.models.customer_request import CustomerRequest
from app.models.product import Product, Wood
from app.models.site_config import SITE_CONFIG_ID, SiteConfig

__all__ = ["CustomerRequest", "Product", "SITE_CONFIG_ID", "SiteConfig", "Wood"]
