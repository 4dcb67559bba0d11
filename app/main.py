from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from app.config import settings
from app.engine import analyze_sales_data
from app.errors import InvalidInput
from app.logging_config import get_logger, setup_logging
from app.models import SalesDataset
from app.store import store
from app.strategies import calculate_bonus_by_profit, calculate_simple_revenue

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    if settings.seed_on_startup:
        from scripts.seed_data import seed
        store.clear()
        seed(store)
        logger.info("Seeded %d sellers, %d products, %d purchase records",
                    len(store.sellers), len(store.products), len(store.purchase_records))
    yield


app = FastAPI(
    title="Sales Analytics Service",
    version="1.0.0",
    description="Per-seller revenue, profit, top products and bonus report",
    lifespan=lifespan,
)


def _build_report(data):
    try:
        return analyze_sales_data(
            data,
            calculate_revenue=calculate_simple_revenue,
            calculate_bonus=calculate_bonus_by_profit,
        )
    except InvalidInput as exc:
        raise HTTPException(400, str(exc))


# ── Sellers ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/sellers", summary="List all sellers")
def list_sellers():
    return {"sellers": [s.model_dump() for s in store.list_sellers()]}


@app.get("/api/v1/sellers/{seller_id}", summary="Get seller details")
def get_seller(seller_id: str):
    seller = store.get_seller(seller_id)
    if not seller:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    return seller.model_dump()


# ── Reports ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/reports/sellers", summary="Seller report over the stored dataset")
def get_report():
    report = _build_report(store.as_dataset())
    return {"sellers": [r.model_dump() for r in report]}


@app.get("/api/v1/reports/sellers/{seller_id}", summary="Report row for one seller")
def get_seller_report(seller_id: str):
    for row in _build_report(store.as_dataset()):
        if row.seller_id == seller_id:
            return row.model_dump()
    raise HTTPException(404, f"Seller '{seller_id}' not found")


@app.post("/api/v1/reports/sellers", summary="Seller report over a submitted dataset")
def post_report(dataset: SalesDataset):
    report = _build_report(dataset)
    return {"sellers": [r.model_dump() for r in report]}


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.post("/api/v1/admin/seed", summary="Re-seed demo data")
def reseed():
    from scripts.seed_data import seed
    store.clear()
    seed(store)
    return {
        "status": "seeded",
        "sellers": len(store.sellers),
        "products": len(store.products),
        "purchase_records": len(store.purchase_records),
    }
