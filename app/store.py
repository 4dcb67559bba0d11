from typing import Optional
from app.models import Product, PurchaseRecord, SalesDataset, Seller


class DataStore:
    def __init__(self) -> None:
        self.sellers: dict[str, Seller] = {}
        self.products: dict[str, Product] = {}
        self.purchase_records: list[PurchaseRecord] = []

    # ── writes ────────────────────────────────────────────────────────────────

    def add_seller(self, seller: Seller) -> None:
        self.sellers[seller.id] = seller

    def add_product(self, product: Product) -> None:
        self.products[product.sku] = product

    def add_purchase_record(self, record: PurchaseRecord) -> None:
        self.purchase_records.append(record)

    def clear(self) -> None:
        self.sellers.clear()
        self.products.clear()
        self.purchase_records.clear()

    # ── reads ─────────────────────────────────────────────────────────────────

    def get_seller(self, seller_id: str) -> Optional[Seller]:
        return self.sellers.get(seller_id)

    def list_sellers(self) -> list[Seller]:
        return list(self.sellers.values())

    def as_dataset(self) -> SalesDataset:
        return SalesDataset(
            sellers=list(self.sellers.values()),
            products=list(self.products.values()),
            purchase_records=list(self.purchase_records),
        )


# module-level singleton used by the app
store = DataStore()
