from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from storefront.api.v1.api import api_router
from storefront.core.config import settings
from storefront.core.logger import setup_logger
from storefront.database.database import init_db

logger = setup_logger("main")

app = FastAPI(
    title="Storefront Admin API",
    description="Administration backend for stores, their catalogue and orders",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")

@app.get("/health")
def health():
    return {"status": "ok"}

@app.on_event("startup")
async def on_startup():
    logger.info("Starting application, ensuring tables exist...")
    init_db()
    logger.info("Database ready")

@app.on_event("shutdown")
async def on_shutdown():
    logger.info("Shutting down application")


if __name__ == "__main__":
    import os
    import uvicorn
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("storefront.main:app", host="0.0.0.0", port=port, reload=False)
