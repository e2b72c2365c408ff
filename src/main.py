"""
Content Ranking API - FastAPI adapter over the ranking engine

The host application fetches documents from its own storage and posts them
with each request; the service keeps no state between requests (apart from
the optional keyword cache, which only memoizes derived keyword sets).

Endpoints:
- POST /v1/recommend: related documents for a reference document
- POST /v1/trending: documents ordered by recency decay
- POST /v1/search: substring filter + relevance ranking for a query
- POST /v1/relevance: raw relevance score of one document
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from .config import Settings, load_environment

env_loaded = load_environment()

settings = Settings.from_env()

# Configure logging: console (brief) + file (detailed)
from .logging_config import setup_logging

setup_logging(
    log_file=settings.log_file,
    console_level=settings.console_level,
    file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
)

logger = logging.getLogger(__name__)

if env_loaded:
    logger.info(f"Loaded environment from: {env_loaded}")
else:
    logger.warning("No .env.local or .env file found - using system environment variables only")


from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from .ranking import (
    Document,
    KeywordCache,
    recommend,
    relevance,
    search,
    trending,
)

APP_VERSION = "0.1.0"
APP_START_TIME = datetime.now(timezone.utc)

keyword_cache: Optional[KeywordCache] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup resources"""
    global keyword_cache

    if settings.keyword_cache_enabled:
        keyword_cache = KeywordCache(max_size=settings.keyword_cache_size)
        logger.info(f"Keyword cache enabled (max_size={settings.keyword_cache_size})")
    else:
        logger.info("Keyword cache disabled - keywords recomputed per request")

    yield

    logger.info("Shutting down...")
    if keyword_cache is not None:
        logger.info(f"Keyword cache stats: hits={keyword_cache.hits}, misses={keyword_cache.misses}")
        keyword_cache.clear()
    keyword_cache = None


app = FastAPI(
    title="Content Ranking API",
    description="Related-content recommendations, trending ordering and search relevance",
    version=APP_VERSION,
    lifespan=lifespan,
)

# CORS middleware for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure properly in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class DocumentModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique document identifier", min_length=1)
    title: str
    preview_text: str = ""
    full_text: Optional[str] = Field(default=None, description="Full content (search relevance only)")
    author_id: str
    created_at: datetime = Field(..., description="Creation timestamp (ISO 8601)")

    def to_document(self) -> Document:
        return Document(
            id=self.id,
            title=self.title,
            preview_text=self.preview_text,
            full_text=self.full_text,
            author_id=self.author_id,
            created_at=self.created_at,
        )

    @classmethod
    def from_document(cls, document: Document) -> "DocumentModel":
        return cls(
            id=document.id,
            title=document.title,
            preview_text=document.preview_text,
            full_text=document.full_text,
            author_id=document.author_id,
            created_at=document.created_at,
        )


class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float
    keyword_cache_enabled: bool


class RecommendRequest(BaseModel):
    reference: Optional[DocumentModel] = Field(default=None, description="Document being viewed")
    corpus: List[DocumentModel] = Field(default_factory=list)
    limit: Optional[int] = Field(default=None, description="Max results (default: RECOMMEND_LIMIT)")


class TrendingRequest(BaseModel):
    corpus: List[DocumentModel] = Field(default_factory=list)
    limit: Optional[int] = Field(default=None, description="Max results (default: TRENDING_LIMIT)")


class SearchRequest(BaseModel):
    corpus: List[DocumentModel] = Field(default_factory=list)
    query: str = ""


class RelevanceRequest(BaseModel):
    document: DocumentModel
    terms: List[str] = Field(..., min_length=1, description="Lowercase search terms")


class RankedResponse(BaseModel):
    results: List[DocumentModel]
    total: int


class SearchResponse(RankedResponse):
    has_query: bool
    has_results: bool


class RelevanceResponse(BaseModel):
    score: float


def _to_documents(models: List[DocumentModel]) -> List[Document]:
    return [model.to_document() for model in models]


def _ranked_response(documents: List[Document]) -> RankedResponse:
    return RankedResponse(
        results=[DocumentModel.from_document(doc) for doc in documents],
        total=len(documents),
    )


@app.get("/", response_model=dict)
def root():
    """Root endpoint"""
    return {
        "service": "Content Ranking API",
        "version": APP_VERSION,
        "status": "running",
    }


@app.get("/health", response_model=HealthResponse)
def health():
    """Health check endpoint"""
    uptime = (datetime.now(timezone.utc) - APP_START_TIME).total_seconds()

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        started_at=APP_START_TIME.isoformat(),
        uptime_seconds=uptime,
        keyword_cache_enabled=keyword_cache is not None,
    )


# Handlers are sync: ranking is CPU-bound and runs in FastAPI's threadpool
@app.post("/v1/recommend", response_model=RankedResponse)
def recommend_documents(request: RecommendRequest):
    """
    Related content for a reference document

    Scores every other corpus document by keyword overlap (Jaccard), shared
    author and closeness in time, and returns the best `limit` matches.
    A missing reference or empty corpus returns no results.
    """
    limit = request.limit if request.limit is not None else settings.recommend_limit
    reference = request.reference.to_document() if request.reference else None

    results = recommend(
        reference,
        _to_documents(request.corpus),
        limit=limit,
        cache=keyword_cache,
    )
    logger.info(f"Recommend: corpus={len(request.corpus)}, limit={limit}, returned={len(results)}")
    return _ranked_response(results)


@app.post("/v1/trending", response_model=RankedResponse)
def trending_documents(request: TrendingRequest):
    """Documents ordered by exponential recency decay (one-week time constant)"""
    limit = request.limit if request.limit is not None else settings.trending_limit

    results = trending(_to_documents(request.corpus), limit=limit)
    logger.info(f"Trending: corpus={len(request.corpus)}, limit={limit}, returned={len(results)}")
    return _ranked_response(results)


@app.post("/v1/search", response_model=SearchResponse)
def search_documents(request: SearchRequest):
    """
    Free-text search

    Keeps documents whose title or preview contains any query term and orders
    them by relevance. An empty query returns the corpus unchanged. Results
    are not paginated; the caller slices them.
    """
    outcome = search(_to_documents(request.corpus), request.query)
    logger.info(f"Search: query={request.query!r}, corpus={len(request.corpus)}, matched={len(outcome.results)}")

    return SearchResponse(
        results=[DocumentModel.from_document(doc) for doc in outcome.results],
        total=len(outcome.results),
        has_query=outcome.has_query,
        has_results=outcome.has_results,
    )


@app.post("/v1/relevance", response_model=RelevanceResponse)
def relevance_score(request: RelevanceRequest):
    """Relevance score of a single document for the given terms"""
    return RelevanceResponse(score=relevance(request.document.to_document(), request.terms))


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=True,  # Development only
    )
