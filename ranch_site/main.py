"""
FastAPI application entry point
Serves the ranch site's catalog, page and blog content from the Cosmic bucket
"""
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from ranch_site.config import DEBUG, MODE
from ranch_site.middleware.cors import setup_cors
from ranch_site.common.content_client import create_content_client
import logging

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Golden Hills Ranch API",
    description="Catalog, pages and blog content for the ranch website",
    version="0.1.0",
    debug=DEBUG,
)

# Setup CORS
setup_cors(app)


@app.on_event("startup")
async def startup_event():
    """Create the content client shared by all requests"""
    logger.info(f"Starting application in {MODE} mode")
    app.state.content_client = create_content_client()
    logger.info("Application started successfully")


@app.on_event("shutdown")
async def shutdown_event():
    """Close the content client"""
    logger.info("Shutting down application")
    client = getattr(app.state, "content_client", None)
    if client is not None:
        await client.aclose()
    logger.info("Application shut down successfully")


@app.get("/")
async def root():
    """Root endpoint - health check"""
    return JSONResponse({
        "message": "Golden Hills Ranch API",
        "version": "0.1.0",
        "mode": MODE,
        "status": "running"
    })


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return JSONResponse({
        "status": "healthy",
        "mode": MODE
    })


from ranch_site.apps.site.router import router as site_router
app.include_router(site_router, prefix="/api", tags=["site"])

from ranch_site.apps.product.router import router as product_router
app.include_router(product_router, prefix="/api/products", tags=["products"])

from ranch_site.apps.page.router import router as page_router
app.include_router(page_router, prefix="/api/pages", tags=["pages"])

from ranch_site.apps.blog.router import router as blog_router
app.include_router(blog_router, prefix="/api/blog", tags=["blog"])

from ranch_site.apps.contact.router import router as contact_router
app.include_router(contact_router, prefix="/api/contact", tags=["contact"])


if __name__ == "__main__":
    import uvicorn
    import os
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run(
        "ranch_site.main:app",
        host="0.0.0.0",
        port=port,
        reload=DEBUG,
        log_level="debug" if DEBUG else "info"
    )
