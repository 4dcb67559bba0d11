from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Optional

from pydantic import ValidationError

from app.config import settings
from app.errors import InvalidConfiguration, InvalidInput
from app.logging_config import get_logger
from app.models import (
    LineItem,
    ProductAggregate,
    RankedSeller,
    SalesDataset,
    SellerReport,
    SellerStats,
    TopProduct,
    TopProductEntry,
)
from app.money import ZERO, round_money, to_decimal
from app.strategies import BonusStrategy, RevenueStrategy

logger = get_logger(__name__)

_ONE = Decimal("1")

# checked in this order; the first failure is reported
_COLLECTIONS = (
    ("purchase_records", "Purchase records"),
    ("products", "Products"),
    ("sellers", "Sellers"),
)


# ── Validation ───────────────────────────────────────────────────────────────

def _load_dataset(data) -> SalesDataset:
    if isinstance(data, SalesDataset):
        raw = {key: getattr(data, key) for key, _ in _COLLECTIONS}
    elif isinstance(data, Mapping):
        raw = data
    else:
        raise InvalidInput("Sales data is missing or is not a mapping")

    for key, label in _COLLECTIONS:
        value = raw.get(key)
        if not isinstance(value, (list, tuple)) or len(value) == 0:
            raise InvalidInput(f"{label} are missing, not a list, or empty")

    if isinstance(data, SalesDataset):
        return data
    try:
        return SalesDataset.model_validate(dict(data))
    except ValidationError as exc:
        raise InvalidInput(f"Sales data is malformed ({exc.error_count()} error(s))") from exc


def _check_strategies(calculate_revenue, calculate_bonus) -> None:
    if not callable(calculate_revenue):
        raise InvalidConfiguration("Revenue strategy is missing or not callable")
    if not callable(calculate_bonus):
        raise InvalidConfiguration("Bonus strategy is missing or not callable")


# ── 1. Aggregate ─────────────────────────────────────────────────────────────

def _checked_revenue(value, item: LineItem) -> Decimal:
    try:
        return to_decimal(value)
    except TypeError as exc:
        raise InvalidConfiguration(
            f"Revenue strategy returned {value!r} for SKU '{item.sku}'; expected a number"
        ) from exc


def aggregate_sales(
    dataset: SalesDataset,
    calculate_revenue: RevenueStrategy,
) -> list[SellerStats]:
    """Fold every purchase record into a per-seller accumulator.

    Records for unknown sellers and items for unknown SKUs are skipped
    without touching any accumulator. Seller revenue is the sum of the
    computed line revenues; a record's ``total_amount`` is ignored.
    Returns one accumulator per input seller row, in input order. Duplicate
    seller ids or SKUs: the last one wins the lookup, so an earlier row with
    the same id stays at zero.
    """
    sellers = [
        SellerStats(seller_id=seller.id, name=f"{seller.first_name} {seller.last_name}")
        for seller in dataset.sellers
    ]
    seller_index = {stats.seller_id: stats for stats in sellers}
    product_index = {product.sku: product for product in dataset.products}

    skipped_records = 0
    skipped_items = 0

    for record in dataset.purchase_records:
        stats = seller_index.get(record.seller_id)
        if stats is None:
            logger.debug("Skipping purchase record for unknown seller %r", record.seller_id)
            skipped_records += 1
            continue

        stats.sales_count += 1

        for item in record.items:
            product = product_index.get(item.sku)
            if product is None:
                logger.debug("Skipping line item with unknown SKU %r (seller %r)", item.sku, record.seller_id)
                skipped_items += 1
                continue

            cost = product.purchase_price * item.quantity
            revenue = _checked_revenue(calculate_revenue(item, product), item)
            profit = revenue - cost

            stats.revenue += revenue
            stats.profit += profit

            sold = stats.products_sold.get(item.sku)
            if sold is None:
                sold = stats.products_sold[item.sku] = ProductAggregate(sku=item.sku, name=product.name)
            sold.quantity += item.quantity
            sold.revenue += revenue
            sold.profit += profit

    if skipped_records or skipped_items:
        logger.info(
            "Aggregation skipped %d record(s) with unknown sellers and %d item(s) with unknown SKUs",
            skipped_records,
            skipped_items,
        )
    return sellers


# ── 2. Rank ──────────────────────────────────────────────────────────────────

def _checked_rate(value, stats: SellerStats) -> Decimal:
    try:
        rate = to_decimal(value)
    except TypeError as exc:
        raise InvalidConfiguration(
            f"Bonus strategy returned {value!r} for seller '{stats.seller_id}'; expected a numeric rate"
        ) from exc
    if not rate.is_finite() or not ZERO <= rate <= _ONE:
        raise InvalidConfiguration(
            f"Bonus strategy returned {value} for seller '{stats.seller_id}'; "
            f"expected a rate between 0 and 1 (did it return an amount?)"
        )
    return rate


def _top_products(stats: SellerStats, limit: int) -> list[TopProduct]:
    products = [
        TopProduct(
            sku=p.sku,
            name=p.name,
            quantity=p.quantity,
            revenue=round_money(p.revenue),
            profit=round_money(p.profit),
        )
        for p in stats.products_sold.values()
    ]
    # stable: equal quantities keep first-sale order
    products.sort(key=lambda p: p.quantity, reverse=True)
    return products[:limit]


def rank_sellers(
    sellers: Iterable[SellerStats],
    calculate_bonus: BonusStrategy,
    top_n: Optional[int] = None,
) -> list[RankedSeller]:
    """Order sellers by profit (highest first) and attach bonus and top products.

    ``calculate_bonus`` must return a rate; the amount is rate × profit.
    Ties in profit keep their input order.
    """
    limit = settings.top_products_limit if top_n is None else top_n
    ordered = sorted(sellers, key=lambda s: s.profit, reverse=True)
    total = len(ordered)

    ranked: list[RankedSeller] = []
    for index, stats in enumerate(ordered):
        rate = _checked_rate(calculate_bonus(index, total, stats), stats)
        ranked.append(
            RankedSeller(
                rank=index + 1,
                stats=stats,
                bonus_rate=rate,
                bonus=round_money(rate * stats.profit),
                top_products=_top_products(stats, limit),
            )
        )
    return ranked


# ── 3. Project ───────────────────────────────────────────────────────────────

def project_report(ranked: Iterable[RankedSeller]) -> list[SellerReport]:
    return [
        SellerReport(
            seller_id=r.stats.seller_id,
            name=r.stats.name,
            revenue=round_money(r.stats.revenue),
            profit=round_money(r.stats.profit),
            sales_count=r.stats.sales_count,
            top_products=[TopProductEntry(sku=p.sku, quantity=p.quantity) for p in r.top_products],
            bonus=r.bonus,
        )
        for r in ranked
    ]


def analyze_sales_data(
    data,
    calculate_revenue: Optional[RevenueStrategy] = None,
    calculate_bonus: Optional[BonusStrategy] = None,
    top_n: Optional[int] = None,
) -> list[SellerReport]:
    """Build the seller report for ``data``, best profit first.

    ``data`` is a ``SalesDataset`` or a mapping with ``sellers``, ``products``
    and ``purchase_records`` lists. Everything is validated before any
    aggregation starts: bad data raises ``InvalidInput``, a missing strategy
    raises ``InvalidConfiguration``.
    """
    dataset = _load_dataset(data)
    _check_strategies(calculate_revenue, calculate_bonus)

    stats = aggregate_sales(dataset, calculate_revenue)
    ranked = rank_sellers(stats, calculate_bonus, top_n)
    report = project_report(ranked)

    logger.info(
        "Analyzed %d purchase record(s) for %d seller(s)",
        len(dataset.purchase_records),
        len(report),
    )
    return report
