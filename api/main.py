from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth import router as auth_router
from chat import router as chat_router
from compliance import router as compliance_router
from construction import router as construction_router
from core import db, settings
from core.errors import register_exception_handlers
from core.log import configure_logging
from dashboard import router as dashboard_router
from documents import router as documents_router
from escalations import router as escalations_router
from expenses import router as expenses_router
from handovers import router as handovers_router
from inspections import router as inspections_router
from legal_cases import router as legal_cases_router
from maintenance import router as maintenance_router
from notifications import router as notifications_router
from obligations import router as obligations_router
from poa import router as poa_router
from properties import router as properties_router
from realtime import router as realtime_router
from revenue_records import router as revenue_records_router
from support_tickets import router as support_tickets_router
from tenancies import router as tenancies_router

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Elevare API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.client_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router.router, tags=["auth"])
app.include_router(properties_router.router, tags=["properties"])
app.include_router(tenancies_router.router, tags=["tenancies"])
app.include_router(legal_cases_router.router, tags=["legal-cases"])
app.include_router(compliance_router.router, tags=["compliance"])
app.include_router(inspections_router.router, tags=["inspections"])
app.include_router(maintenance_router.router, tags=["maintenance"])
app.include_router(support_tickets_router.router, tags=["support-tickets"])
app.include_router(documents_router.router, tags=["documents"])
app.include_router(expenses_router.router, tags=["expenses"])
app.include_router(chat_router.router, tags=["chat"])
app.include_router(notifications_router.router, tags=["notifications"])
app.include_router(construction_router.router, tags=["construction"])
app.include_router(obligations_router.router, tags=["obligations"])
app.include_router(revenue_records_router.router, tags=["revenue-records"])
app.include_router(handovers_router.router, tags=["handovers"])
app.include_router(poa_router.router, tags=["poa"])
app.include_router(escalations_router.router, tags=["escalations"])
app.include_router(dashboard_router.router, tags=["dashboard"])
app.include_router(realtime_router.router, tags=["realtime"])


@app.get("/api/health")
def health() -> dict:
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host(), port=settings.port())
