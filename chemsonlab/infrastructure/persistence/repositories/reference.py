"""SQLAlchemy repositories for products, machines and customers."""

from __future__ import annotations

from chemsonlab.domain.models import Customer, EntityKind, Machine, Product

from .base import SqlRepository


class SqlProductRepository(SqlRepository[Product]):
    kind = EntityKind.PRODUCT
    domain_model = Product


class SqlMachineRepository(SqlRepository[Machine]):
    kind = EntityKind.MACHINE
    domain_model = Machine


class SqlCustomerRepository(SqlRepository[Customer]):
    kind = EntityKind.CUSTOMER
    domain_model = Customer
