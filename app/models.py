from pydantic import BaseModel, ConfigDict, Field
from decimal import Decimal


class InputModel(BaseModel):
    # ids and SKUs may arrive as numbers; they are compared as strings
    model_config = ConfigDict(coerce_numbers_to_str=True)


class Seller(InputModel):
    id: str
    first_name: str
    last_name: str


class Product(InputModel):
    sku: str
    name: str
    purchase_price: Decimal  # unit cost


class LineItem(InputModel):
    sku: str
    sale_price: Decimal
    discount: Decimal = Decimal("0")  # percent, e.g. Decimal("15") for 15 %
    quantity: int


class PurchaseRecord(InputModel):
    seller_id: str
    # stated receipt total; informational only, revenue is summed from items
    total_amount: Decimal = Decimal("0")
    items: list[LineItem]


class SalesDataset(BaseModel):
    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]


# ── Accumulators ─────────────────────────────────────────────────────────────

class ProductAggregate(BaseModel):
    sku: str
    name: str
    quantity: int = 0
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")


class SellerStats(BaseModel):
    seller_id: str
    name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0
    # keyed by SKU, in order of first sale
    products_sold: dict[str, ProductAggregate] = Field(default_factory=dict)


# ── Ranking ──────────────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    sku: str
    name: str
    quantity: int
    revenue: Decimal
    profit: Decimal


class RankedSeller(BaseModel):
    rank: int  # 1 = highest profit
    stats: SellerStats
    bonus_rate: Decimal
    bonus: Decimal
    top_products: list[TopProduct]


# ── Response models ──────────────────────────────────────────────────────────

class TopProductEntry(BaseModel):
    sku: str
    quantity: int


class SellerReport(BaseModel):
    seller_id: str
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: list[TopProductEntry]
    bonus: Decimal
