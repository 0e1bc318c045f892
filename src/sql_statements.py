"""
SQL text for the store schema.

Emission contract for iter_insert_statements (one statement per line):
  1. customer        ascending id
  2. product         ascending id
  3. "order"         ascending id
  4. product_order   grouped by ascending order_id, ids 1, 2, 3, ...
Parents always precede the rows that reference them, so the output loads
cleanly with foreign keys enforced.
"""
from decimal import Decimal
from typing import Iterable, Iterator

from src.generator_relational import (
    CustomerRow,
    OrderRow,
    ProductOrderRow,
    ProductRow,
    StoreData,
)

CREATE_CUSTOMER_SQL = """
CREATE TABLE IF NOT EXISTS customer (
    id BIGINT PRIMARY KEY,
    name VARCHAR(255)
);
"""

CREATE_PRODUCT_SQL = """
CREATE TABLE IF NOT EXISTS product (
    id BIGINT PRIMARY KEY,
    description VARCHAR(255),
    sku UUID NOT NULL UNIQUE
);
"""

CREATE_ORDER_SQL = """
CREATE TABLE IF NOT EXISTS "order" (
    id BIGINT PRIMARY KEY,
    description VARCHAR(255),
    customer_id BIGINT REFERENCES customer(id)
);
"""

CREATE_PRODUCT_ORDER_SQL = """
CREATE TABLE IF NOT EXISTS product_order (
    id BIGINT PRIMARY KEY,
    order_id BIGINT NOT NULL REFERENCES "order"(id),
    product_id BIGINT NOT NULL REFERENCES product(id),
    quantity INTEGER,
    price NUMERIC(19, 2),
    UNIQUE (order_id, product_id)
);
"""

INSERT_CUSTOMER_SQL = "INSERT INTO customer (id, name) VALUES ({id}, {name});"
INSERT_PRODUCT_SQL = "INSERT INTO product (id, description, sku) VALUES ({id}, {description}, {sku});"
INSERT_ORDER_SQL = 'INSERT INTO "order" (id, description, customer_id) VALUES ({id}, {description}, {customer_id});'
INSERT_PRODUCT_ORDER_SQL = (
    "INSERT INTO product_order (id, order_id, product_id, quantity, price) "
    "VALUES ({id}, {order_id}, {product_id}, {quantity}, {price});"
)


def sql_literal(value: str) -> str:
    # Standard SQL escape: a quote inside a string literal is written twice.
    return "'" + value.replace("'", "''") + "'"


def _price_literal(price: Decimal) -> str:
    return f"{price:.2f}"


def schema_statements() -> list[str]:
    return [
        sql.strip()
        for sql in (CREATE_CUSTOMER_SQL, CREATE_PRODUCT_SQL, CREATE_ORDER_SQL, CREATE_PRODUCT_ORDER_SQL)
    ]


def customer_insert(r: CustomerRow) -> str:
    return INSERT_CUSTOMER_SQL.format(id=r.customer_id, name=sql_literal(r.name))


def product_insert(r: ProductRow) -> str:
    return INSERT_PRODUCT_SQL.format(id=r.product_id, description=sql_literal(r.description), sku=sql_literal(r.sku))


def order_insert(r: OrderRow) -> str:
    return INSERT_ORDER_SQL.format(id=r.order_id, description=sql_literal(r.description), customer_id=r.customer_id)


def product_order_insert(r: ProductOrderRow) -> str:
    return INSERT_PRODUCT_ORDER_SQL.format(
        id=r.product_order_id,
        order_id=r.order_id,
        product_id=r.product_id,
        quantity=r.quantity,
        price=_price_literal(r.price),
    )


def iter_insert_statements(data: StoreData) -> Iterator[str]:
    yield from (customer_insert(r) for r in data.customers)
    yield from (product_insert(r) for r in data.products)
    yield from (order_insert(r) for r in data.orders)
    yield from (product_order_insert(r) for r in data.order_lines)


def write_statements(out, statements: Iterable[str]) -> int:
    count = 0
    for stmt in statements:
        out.write(stmt)
        out.write("\n")
        count += 1
    return count
