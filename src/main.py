import argparse
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from tabchat import __version__
from tabchat.api import router as api_router
from tabchat.config import load_config_from_env
from tabchat.constants import API_PREFIX
from tabchat.manager_singleton import ManagerSingleton

config = load_config_from_env()

# Set up loguru for console logging
logger.remove()  # Remove default handler
logger.add(
    sys.stderr,
    level="DEBUG" if config.debug else config.log_level,
    format="{time:YYYY-MM-DD HH:mm:ss} {level} {name}: {message}",
    colorize=True,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Builds the session store at startup and discards it at shutdown.
    """
    # ====== STARTUP ======
    logger.info("Application Starting Up")
    await ManagerSingleton.initialize(config)
    try:
        # Application is now running and ready to accept requests
        yield
    finally:
        # ====== SHUTDOWN ======
        logger.info("Application Shutting Down")
        await ManagerSingleton.close_all()
        logger.info("Graceful shutdown complete.")


app = FastAPI(
    title="tabchat API",
    description="Chat sessions answered with canned tabular data",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router, prefix=API_PREFIX)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": "..."}."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.get("/")
async def root():
    return {"message": "tabchat API is running", "version": __version__}


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="tabchat API")
    parser.add_argument("--host", type=str, default=config.host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=config.port, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--reload-dirs", type=str, default="src", help="Directories to watch for changes")

    args = parser.parse_args()
    reload = args.reload or config.debug

    logger.info(f"Server running on http://{args.host}:{args.port}")
    if reload:
        reload_dirs = args.reload_dirs.split(",") if args.reload_dirs else ["src"]
        uvicorn.run(
            "main:app",
            host=args.host,
            port=args.port,
            reload=True,
            reload_dirs=reload_dirs,
            log_level="debug",
            access_log=True,
        )
    else:
        uvicorn.run(
            app,
            host=args.host,
            port=args.port,
        )
