"""
Product Link Scraper - FastAPI Application
Main entry point with REST API endpoints.
"""
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.config import config
from app.layers.extraction import ProductExtractionLayer
from app.layers.ingestion import ProductIngestionLayer
from app.models.product import ScrapeResult
from app.utils.logger import get_logger, set_trace_id


# Initialize FastAPI app
app = FastAPI(
    title="Product Link Scraper",
    description="Extracts title, price, image and supplier from a product page URL",
    version="1.0.0",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize layers
extraction_layer = ProductExtractionLayer()
ingestion_layer = ProductIngestionLayer(extractor=extraction_layer)

logger = get_logger("main")

# HTTP status per failure type
ERROR_STATUS = {
    "invalid_url": 400,
    "fetch_failed": 502,
}


# Request/Response models
class ScrapeRequest(BaseModel):
    """Request model for scraping a product link."""
    url: str


class ExtractRequest(BaseModel):
    """Request model for extracting from HTML the caller already has."""
    url: str
    html: str


class ScrapeResponse(BaseModel):
    """Response model for scraping. data uses camelCase field names."""
    success: bool
    data: Optional[dict] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    trace_id: str


def _to_response(result: ScrapeResult, trace_id: str) -> JSONResponse:
    body = ScrapeResponse(
        success=result.success,
        data=result.data.to_wire() if result.data else None,
        error=result.error,
        error_type=result.error_type,
        trace_id=trace_id,
    )
    status_code = 200 if result.success else ERROR_STATUS.get(result.error_type, 500)
    return JSONResponse(content=body.model_dump(), status_code=status_code)


# API Routes
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


@app.post("/api/scrape")
async def scrape_product(request: ScrapeRequest):
    """
    Scrape product data from a pasted link.

    Returns success=False with a short message when the URL is invalid
    or the page cannot be fetched.
    """
    trace_id = set_trace_id()

    logger.info("scrape_request", url=request.url, trace_id=trace_id)

    result = await ingestion_layer.scrape(request.url)

    if not result.success:
        logger.warning(
            "scrape_request_failed",
            url=request.url,
            error_type=result.error_type,
        )

    return _to_response(result, trace_id)


@app.get("/api/scrape")
async def scrape_product_query(url: str = Query(..., description="Product page URL")):
    """Scrape product data, URL passed as a query parameter."""
    return await scrape_product(ScrapeRequest(url=url))


@app.post("/api/extract")
async def extract_product(request: ExtractRequest):
    """
    Extract product data from HTML supplied by the caller.

    No fetch is made, so this always succeeds.
    """
    trace_id = set_trace_id()

    logger.info(
        "extract_request",
        url=request.url,
        content_length=len(request.html),
        trace_id=trace_id
    )

    product = extraction_layer.extract(request.html, request.url)
    return _to_response(ScrapeResult.ok(product), trace_id)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
