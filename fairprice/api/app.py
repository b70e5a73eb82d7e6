"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fairprice.api.routes import neighborhoods, valuation
from fairprice.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="FairPrice",
    description="Price-per-m² valuation against neighborhood reference data",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(neighborhoods.router)
app.include_router(valuation.router)


@app.get("/health")
def health():
    return {"status": "ok"}
