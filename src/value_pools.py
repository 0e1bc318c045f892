import random

from faker import Faker

PRODUCT_ADJECTIVES = [
    "Small", "Ergonomic", "Rustic", "Intelligent", "Gorgeous", "Incredible",
    "Fantastic", "Practical", "Sleek", "Awesome", "Generic", "Handcrafted",
    "Refined", "Tasty", "Licensed", "Unbranded", "Modern", "Elegant",
]
PRODUCT_MATERIALS = [
    "Steel", "Wooden", "Concrete", "Plastic", "Cotton", "Granite", "Rubber",
    "Metal", "Soft", "Fresh", "Frozen", "Bronze", "Silk", "Marble",
]
PRODUCT_NOUNS = [
    "Chair", "Car", "Computer", "Keyboard", "Mouse", "Bike", "Ball", "Gloves",
    "Pants", "Shirt", "Table", "Shoes", "Hat", "Towels", "Soap", "Tuna",
    "Chicken", "Fish", "Cheese", "Bacon", "Pizza", "Salad", "Sausages", "Chips",
]


def make_faker(rng: random.Random) -> Faker:
    """Faker instance seeded from rng, so a seeded run reproduces its text too."""
    fake = Faker("en_US")
    fake.seed_instance(rng.getrandbits(32))
    return fake


def product_name(rng: random.Random) -> str:
    return f"{rng.choice(PRODUCT_ADJECTIVES)} {rng.choice(PRODUCT_MATERIALS)} {rng.choice(PRODUCT_NOUNS)}"


def customer_name(fake: Faker) -> str:
    return fake.name()


def product_sku(fake: Faker) -> str:
    return fake.uuid4()


def order_description(fake: Faker) -> str:
    return fake.sentence(nb_words=10)
