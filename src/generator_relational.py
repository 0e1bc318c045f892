import logging
import random
from dataclasses import dataclass
from decimal import Decimal

from src.sampling import sample_unique_ids
from src.value_pools import (
    customer_name,
    make_faker,
    order_description,
    product_name,
    product_sku,
)

logger = logging.getLogger("generator_relational")

QUANTITY_MIN = 1
QUANTITY_MAX = 5
PRICE_MIN = 10.0
PRICE_MAX = 110.0
_CENTS = Decimal("0.01")


# --------- Data shapes (dataclasses) ---------
@dataclass(frozen=True)
class CustomerRow:
    customer_id: int
    name: str


@dataclass(frozen=True)
class ProductRow:
    product_id: int
    description: str
    sku: str


@dataclass(frozen=True)
class OrderRow:
    order_id: int
    description: str
    customer_id: int


@dataclass(frozen=True)
class ProductOrderRow:
    product_order_id: int
    order_id: int
    product_id: int
    quantity: int
    price: Decimal


@dataclass(frozen=True)
class StoreData:
    customers: list[CustomerRow]
    products: list[ProductRow]
    orders: list[OrderRow]
    order_lines: list[ProductOrderRow]


def _generation_error(location: str, issue: str, hint: str) -> str:
    return f"{location}: {issue}. Fix: {hint}."


def _random_price(rng: random.Random) -> Decimal:
    return Decimal(f"{rng.uniform(PRICE_MIN, PRICE_MAX):.2f}").quantize(_CENTS)


def _unique_sku(fake, seen: set[str]) -> str:
    sku = product_sku(fake)
    while sku in seen:
        sku = product_sku(fake)
    seen.add(sku)
    return sku


def generate_store_data(
    *,
    num_customers: int,
    num_products: int,
    num_orders: int,
    max_products_per_order: int,
    seed: int | None = None,
) -> StoreData:
    """
    Generates store data with valid PK/FK links:
      customer (id)
      product (id, unique sku)
      "order" (id, customer_id -> customer.id)
      product_order (id, order_id -> "order".id, product_id -> product.id)

    Each order holds 1..max_products_per_order lines with distinct products.
    product_order ids run 1, 2, 3, ... across all orders.
    Output is deterministic for the same seed + inputs; seed=None gives fresh data.
    """
    for name, value in (
        ("num_customers", num_customers),
        ("num_products", num_products),
        ("num_orders", num_orders),
        ("max_products_per_order", max_products_per_order),
    ):
        if value <= 0:
            raise ValueError(
                _generation_error("generate_store_data", f"{name} must be > 0", f"set {name} to a positive count")
            )
    if max_products_per_order > num_products:
        raise ValueError(
            _generation_error(
                "generate_store_data",
                f"max_products_per_order={max_products_per_order} exceeds num_products={num_products}",
                "lower max_products_per_order or generate more products",
            )
        )

    rng = random.Random(seed)
    fake = make_faker(rng)

    # ---- Customers ----
    customers = [
        CustomerRow(customer_id=customer_id, name=customer_name(fake))
        for customer_id in range(1, num_customers + 1)
    ]

    # ---- Products ----
    seen_skus: set[str] = set()
    products = [
        ProductRow(product_id=product_id, description=product_name(rng), sku=_unique_sku(fake, seen_skus))
        for product_id in range(1, num_products + 1)
    ]

    # ---- Orders ----
    orders = [
        OrderRow(
            order_id=order_id,
            description=order_description(fake),
            customer_id=rng.randint(1, num_customers),  # FK to customer
        )
        for order_id in range(1, num_orders + 1)
    ]

    # ---- Order lines, grouped by order ----
    order_lines: list[ProductOrderRow] = []
    product_order_id = 1
    for order in orders:
        num_lines = rng.randint(1, max_products_per_order)
        for product_id in sample_unique_ids(num_products, num_lines, rng):
            order_lines.append(
                ProductOrderRow(
                    product_order_id=product_order_id,
                    order_id=order.order_id,  # FK to "order"
                    product_id=product_id,  # FK to product
                    quantity=rng.randint(QUANTITY_MIN, QUANTITY_MAX),
                    price=_random_price(rng),
                )
            )
            product_order_id += 1

    logger.info(
        "Generated store data: customers=%d, products=%d, orders=%d, order_lines=%d (seed=%s)",
        len(customers), len(products), len(orders), len(order_lines), seed
    )

    return StoreData(customers=customers, products=products, orders=orders, order_lines=order_lines)
