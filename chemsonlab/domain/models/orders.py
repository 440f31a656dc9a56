"""Customer orders and per-machine product specifications."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .reference import Customer, Machine, Product


class CustomerOrder(BaseModel):
    """Links a customer to a product they order; status marks it active."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    customer_id: int
    product_id: int
    status: bool = True

    customer: Customer | None = None
    product: Product | None = None


class ProductSpecification(BaseModel):
    """Test settings (temperature, load, rpm) for a product on a machine."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    product_id: int
    machine_id: int
    in_use: bool | None = None
    temp: int | None = None
    load: int | None = None
    rpm: int | None = None

    product: Product | None = None
    machine: Machine | None = None
