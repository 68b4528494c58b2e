import sys
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from loguru import logger
from src.config import APPNAME, VERSION, DATA_SOURCE, LOG_LEVEL, HOST, PORT
from src.database import load_dataset
from fastapi.responses import RedirectResponse
from fastapi.middleware.cors import CORSMiddleware
from src.routers import candidates_router, comparison_router, locale_router

logger.remove()
logger.add(sys.stderr, level=LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The dataset is read once and stays read-only for the life of the process
    app.state.dataset = load_dataset(DATA_SOURCE)
    yield


# Defining the application
app = FastAPI(
    title=APPNAME,
    version=VERSION,
    lifespan=lifespan,
)

# Define allowed origins
origins = [
    "http://localhost:5173",  # Frontend on port 5173
    "http://127.0.0.1:5173",  # Alternate localhost on port 5173
    "http://localhost:3000",  # Frontend on port 3000
    "http://127.0.0.1:3000",  # Alternate localhost on port 3000
]

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,  # List of allowed origins
    allow_credentials=True, # Language preference cookie
    allow_methods=["*"],    # Allow all HTTP methods
    allow_headers=["*"],    # Allow all headers
)

# Including all the routes
app.include_router(candidates_router)
app.include_router(comparison_router)
app.include_router(locale_router)

@app.get("/")
def main_function():
    """
    Redirect to documentation (`/docs/`).
    """
    return RedirectResponse(url="/docs/")


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
