# To run:
# python -m src.main > seed.sql


import logging
import sys
import traceback
from typing import TextIO

from src.config import GeneratorConfig, validate_config
from src.generator_relational import generate_store_data
from src.logging_setup import setup_logging
from src.sql_statements import iter_insert_statements, schema_statements, write_statements

logger = logging.getLogger("main")


def run(cfg: GeneratorConfig, out: TextIO) -> int:
    """Generate the store data described by cfg and write it to out. Returns the statement count."""
    validate_config(cfg)
    logger.debug("Starting generation with config: %s", cfg)

    data = generate_store_data(
        num_customers=cfg.num_customers,
        num_products=cfg.num_products,
        num_orders=cfg.num_orders,
        max_products_per_order=cfg.max_products_per_order,
        seed=cfg.seed,
    )

    written = 0
    if cfg.emit_schema:
        written += write_statements(out, schema_statements())
    written += write_statements(out, iter_insert_statements(data))
    out.flush()

    logger.info("Wrote %d SQL statements.", written)
    return written


def main(cfg: GeneratorConfig | None = None, out: TextIO | None = None) -> int:
    cfg = cfg or GeneratorConfig()
    if out is None:
        out = sys.stdout

    setup_logging(cfg.log_level)

    try:
        run(cfg, out)
        return 0
    except ValueError as exc:
        logger.error("Generation failed: %s", exc)
        if cfg.debug:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
