from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from backend.routes import erd
from backend.database import connect_to_mongo, close_mongo_connection, get_mongo_client
from config.settings import settings
from utils.logger import setup_logging

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    connect_to_mongo(app)
    yield
    close_mongo_connection(app)

app = FastAPI(
    title="Mongo Schema Mapper API",
    description="Schema inference and ERD generation for MongoDB collections",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(erd.router, prefix=settings.API_V1_PREFIX, tags=["erd"])

@app.get("/")
def root():
    return {"message": "Mongo Schema Mapper API is running"}

@app.get("/health")
def health(client=Depends(get_mongo_client)):
    try:
        client.admin.command('ping')
        return {"status": "healthy", "database_connected": True}
    except Exception as e:
        return {"status": "unhealthy", "database_connected": False, "error": str(e)}
