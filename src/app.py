"""Checkout FastAPI application.

Serves cart document management, checkout resolution and catalog
publishing. Each request runs inside the checkout domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV controls which config overlay is applied.
from checkout.domain import checkout  # noqa: E402
from checkout.utils.logging import configure_logging  # noqa: E402
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

configure_logging()
checkout.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Checkout API",
    description="Cart documents, checkout resolution and the published catalog",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the checkout domain context for API requests."""
    if request.url.path.startswith(("/carts", "/catalog")):
        with checkout.domain_context():
            return await call_next(request)
    # Health check, docs, etc.
    return await call_next(request)


register_exception_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from checkout.api import cart_router, catalog_router  # noqa: E402

app.include_router(cart_router)
app.include_router(catalog_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "checkout": {"name": checkout.name},
            },
        }
    )
