"""SQLAlchemy repositories for customer orders and product specifications."""

from __future__ import annotations

from chemsonlab.domain.models import CustomerOrder, EntityKind, ProductSpecification

from .base import SqlRepository


class SqlCustomerOrderRepository(SqlRepository[CustomerOrder]):
    kind = EntityKind.CUSTOMER_ORDER
    domain_model = CustomerOrder


class SqlProductSpecificationRepository(SqlRepository[ProductSpecification]):
    kind = EntityKind.PRODUCT_SPECIFICATION
    domain_model = ProductSpecification
