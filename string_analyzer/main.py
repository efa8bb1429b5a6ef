from fastapi import FastAPI, Request, status
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from typing import Optional
import logging

from string_analyzer import __version__, config
from string_analyzer.api.routes import router
from string_analyzer.database import Database
from string_analyzer.exceptions import StringAnalyzerError

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """Build the API around its own storage handle."""
    app = FastAPI(
        title="String Analyzer Service",
        description="Analyze, store and query string properties",
        version=__version__
    )
    app.state.database = Database(database_url or config.DATABASE_URL)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    def on_startup():
        logger.info("Initializing database...")
        app.state.database.init_db()

    @app.on_event("shutdown")
    def on_shutdown():
        app.state.database.dispose()

    app.include_router(router, tags=["strings"])

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": "String Analyzer Service",
            "version": __version__,
            "endpoints": {
                "POST /strings": "Analyze and store a string",
                "GET /strings/{string_value}": "Get specific string analysis",
                "GET /strings": "Get all strings with optional filters",
                "GET /strings/filter-by-natural-language": "Filter using natural language",
                "DELETE /strings/{string_value}": "Delete a string"
            }
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    register_exception_handlers(app)
    return app


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(StringAnalyzerError)
    async def string_analyzer_exception_handler(request: Request, exc: StringAnalyzerError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message}
        )

    # Validation error handler
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = {}
        for error in exc.errors():
            field = error['loc'][-1]
            errors[str(field)] = error['msg']

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Validation failed",
                "details": errors
            }
        )

    # HTTPException handler
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)}
        )

    # Generic error handler
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {str(exc)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"}
        )


app = create_app()


def run():
    import uvicorn
    logger.info(f"✅ Server running on port {config.PORT}")
    uvicorn.run("string_analyzer.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
