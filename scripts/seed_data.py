"""
Deterministic demo-data generator.

Produces:
  - 5 sellers
  - 40 products with purchase prices between 50 and 2 000
  - 200 purchase records, 1-5 line items each
    - sale price 1.1x-2.0x the purchase price
    - discounts of 0 / 5 / 10 / 20 %
  - a handful of records and items that reference unknown sellers / SKUs,
    which the report is expected to skip
"""

import random
from decimal import Decimal

from app.models import LineItem, Product, PurchaseRecord, Seller
from app.store import DataStore

SEED = 42

N_PRODUCTS = 40
N_RECORDS = 200

SELLERS = [
    ("seller_1", "Alexey", "Petrov"),
    ("seller_2", "Ivan", "Smirnov"),
    ("seller_3", "Maria", "Sokolova"),
    ("seller_4", "Olga", "Ivanova"),
    ("seller_5", "Dmitry", "Volkov"),
]

CATEGORIES = ["Chair", "Table", "Lamp", "Shelf", "Sofa", "Rug", "Mirror", "Desk"]
DISCOUNTS = [0, 0, 0, 5, 10, 20]


def _money(value: float) -> Decimal:
    return Decimal(str(round(value, 2)))


def seed(store: DataStore) -> None:
    rng = random.Random(SEED)

    # ── sellers ──────────────────────────────────────────────────────────────
    for seller_id, first_name, last_name in SELLERS:
        store.add_seller(Seller(id=seller_id, first_name=first_name, last_name=last_name))

    # ── products ─────────────────────────────────────────────────────────────
    skus: list[str] = []
    for n in range(1, N_PRODUCTS + 1):
        sku = f"SKU_{n:03d}"
        skus.append(sku)
        store.add_product(Product(
            sku=sku,
            name=f"{rng.choice(CATEGORIES)} {n}",
            purchase_price=_money(rng.uniform(50, 2_000)),
        ))

    # ── purchase records ─────────────────────────────────────────────────────
    seller_ids = [s[0] for s in SELLERS]
    for n in range(1, N_RECORDS + 1):
        # every 50th record belongs to a seller that is not on file
        seller_id = "seller_unknown" if n % 50 == 0 else rng.choice(seller_ids)

        items: list[LineItem] = []
        for _ in range(rng.randint(1, 5)):
            product = store.products[rng.choice(skus)]
            # roughly one item in 40 references a retired SKU
            sku = "SKU_RETIRED" if rng.random() < 0.025 else product.sku
            items.append(LineItem(
                sku=sku,
                sale_price=_money(float(product.purchase_price) * rng.uniform(1.1, 2.0)),
                discount=Decimal(rng.choice(DISCOUNTS)),
                quantity=rng.randint(1, 10),
            ))

        total = sum(
            (i.sale_price * i.quantity * (1 - i.discount / Decimal("100")) for i in items),
            Decimal("0"),
        )
        store.add_purchase_record(PurchaseRecord(
            seller_id=seller_id,
            total_amount=total.quantize(Decimal("0.01")),
            items=items,
        ))
