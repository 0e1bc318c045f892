from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorConfig:
    debug: bool = False
    log_level: str = "INFO"
    num_customers: int = 100
    num_orders: int = 10_000
    num_products: int = 500
    max_products_per_order: int = 3
    seed: int | None = None  # None = fresh data every run
    emit_schema: bool = False  # prepend CREATE TABLE statements


def validate_config(cfg: GeneratorConfig) -> None:
    for name in ("num_customers", "num_orders", "num_products", "max_products_per_order"):
        value = getattr(cfg, name)
        if not isinstance(value, int) or value <= 0:
            raise ValueError(f"Config: {name} must be a positive integer. Fix: set {name} > 0.")

    if cfg.max_products_per_order > cfg.num_products:
        raise ValueError(
            f"Config: max_products_per_order={cfg.max_products_per_order} exceeds "
            f"num_products={cfg.num_products}. "
            "Fix: lower max_products_per_order or add more products."
        )
