import io
import re
import unittest
from decimal import Decimal

from src.generator_relational import (
    CustomerRow,
    OrderRow,
    ProductOrderRow,
    ProductRow,
    StoreData,
    generate_store_data,
)
from src.sql_statements import (
    customer_insert,
    iter_insert_statements,
    order_insert,
    product_insert,
    product_order_insert,
    schema_statements,
    sql_literal,
    write_statements,
)

PRODUCT_ORDER_RE = re.compile(
    r"^INSERT INTO product_order \(id, order_id, product_id, quantity, price\) "
    r"VALUES \((\d+), (\d+), (\d+), (\d+), (\d+\.\d{2})\);$"
)


class TestSqlLiteral(unittest.TestCase):
    def test_plain_text(self):
        self.assertEqual(sql_literal("Steel Chair"), "'Steel Chair'")

    def test_embedded_quote_is_doubled(self):
        self.assertEqual(sql_literal("O'Brien"), "'O''Brien'")


class TestInsertFormatting(unittest.TestCase):
    def test_customer(self):
        self.assertEqual(
            customer_insert(CustomerRow(customer_id=1, name="Ada O'Neil")),
            "INSERT INTO customer (id, name) VALUES (1, 'Ada O''Neil');",
        )

    def test_product(self):
        row = ProductRow(product_id=2, description="Soft Cotton Hat", sku="0f8e1c2a-1111-4222-8333-444455556666")
        self.assertEqual(
            product_insert(row),
            "INSERT INTO product (id, description, sku) "
            "VALUES (2, 'Soft Cotton Hat', '0f8e1c2a-1111-4222-8333-444455556666');",
        )

    def test_order_table_name_is_quoted(self):
        row = OrderRow(order_id=3, description="Gift wrap please.", customer_id=1)
        self.assertEqual(
            order_insert(row),
            'INSERT INTO "order" (id, description, customer_id) VALUES (3, \'Gift wrap please.\', 1);',
        )

    def test_price_keeps_two_decimals(self):
        row = ProductOrderRow(product_order_id=4, order_id=3, product_id=2, quantity=5, price=Decimal("57.10"))
        self.assertEqual(
            product_order_insert(row),
            "INSERT INTO product_order (id, order_id, product_id, quantity, price) VALUES (4, 3, 2, 5, 57.10);",
        )


class TestEmissionOrder(unittest.TestCase):
    def test_four_phases_in_order(self):
        data = generate_store_data(
            num_customers=3, num_products=5, num_orders=6, max_products_per_order=2, seed=4
        )
        statements = list(iter_insert_statements(data))

        prefixes = [
            "INSERT INTO customer ",
            "INSERT INTO product ",
            'INSERT INTO "order" ',
            "INSERT INTO product_order ",
        ]
        phases = [next(i for i, p in enumerate(prefixes) if s.startswith(p)) for s in statements]
        self.assertEqual(phases, sorted(phases))
        self.assertEqual(phases.count(0), 3)
        self.assertEqual(phases.count(1), 5)
        self.assertEqual(phases.count(2), 6)
        self.assertEqual(phases.count(3), len(data.order_lines))

    def test_product_order_lines_parse(self):
        data = generate_store_data(
            num_customers=4, num_products=10, num_orders=50, max_products_per_order=3, seed=12
        )
        lines = [s for s in iter_insert_statements(data) if s.startswith("INSERT INTO product_order")]

        ids = []
        for s in lines:
            m = PRODUCT_ORDER_RE.match(s)
            self.assertIsNotNone(m, s)
            ids.append(int(m.group(1)))
            self.assertTrue(1 <= int(m.group(4)) <= 5)
            self.assertTrue(Decimal("10.00") <= Decimal(m.group(5)) <= Decimal("110.00"))
        self.assertEqual(ids, list(range(1, len(lines) + 1)))

    def test_one_statement_per_line(self):
        data = StoreData(
            customers=[CustomerRow(customer_id=1, name="Sam Khan")],
            products=[],
            orders=[],
            order_lines=[],
        )
        buf = io.StringIO()
        count = write_statements(buf, iter_insert_statements(data))
        self.assertEqual(count, 1)
        self.assertEqual(buf.getvalue(), "INSERT INTO customer (id, name) VALUES (1, 'Sam Khan');\n")


class TestSchemaStatements(unittest.TestCase):
    def test_parents_created_first(self):
        ddl = schema_statements()
        self.assertEqual(len(ddl), 4)
        self.assertIn("customer", ddl[0])
        self.assertIn("product (", ddl[1])
        self.assertIn('"order"', ddl[2])
        self.assertIn("UNIQUE (order_id, product_id)", ddl[3])


if __name__ == "__main__":
    unittest.main()
