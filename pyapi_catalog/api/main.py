"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from pyapi_catalog.api.dependencies import get_product_cache
from pyapi_catalog.api.products_router import router as products_router
from pyapi_catalog.error_handler import ErrorHandler
from pyapi_catalog.integrations.contracts.interfaces import ProductCache

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

error_handler = ErrorHandler()

# Initialize FastAPI app
app = FastAPI(
    title="Python API Catalog",
    description="Product listing and admin endpoints backed by the remote Catalog API",
    version="0.1.0",
)

app.include_router(products_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    payload = error_handler.handle_exception(exc, context={"path": request.url.path})
    return JSONResponse(status_code=500, content=payload)


@app.get("/health")
def health(cache: ProductCache = Depends(get_product_cache)):
    return {"status": "ok", "cache": cache.ping()}
