from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Depends, HTTPException, Response

from src.providers import config
from src.providers.base import Extraction
from src.providers.runner import ProviderEngine, UnknownSourceError

logging.basicConfig(level=config.LOG_LEVEL)
log = logging.getLogger("flicky.api")

_engine = None


def get_engine() -> ProviderEngine:
    global _engine
    if _engine is None:
        _engine = ProviderEngine()
    return _engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    if _engine is not None:
        await _engine.close()


app = FastAPI(title="Flicky | iwaatch provider", lifespan=lifespan)


def _json(result: Extraction) -> Response:
    return Response(
        content=result.to_json(),
        media_type="application/json",
        headers={"X-Provider-Fallback": "1" if result.fallback else "0"},
    )


def _source_or_404(engine: ProviderEngine, source: str):
    try:
        engine.get_source(source)
    except UnknownSourceError:
        raise HTTPException(status_code=404, detail=f"Unknown provider: {source}")


@app.get("/providers")
def list_providers(engine: ProviderEngine = Depends(get_engine)):
    return engine.list_sources()


@app.get("/providers/{source}/search")
async def search(source: str, q: str, engine: ProviderEngine = Depends(get_engine)):
    _source_or_404(engine, source)
    return _json(await engine.search(source, q))


@app.get("/providers/{source}/details")
async def details(source: str, url: str, engine: ProviderEngine = Depends(get_engine)):
    _source_or_404(engine, source)
    return _json(await engine.fetch_details(source, url))


@app.get("/providers/{source}/episodes")
async def episodes(source: str, url: str, engine: ProviderEngine = Depends(get_engine)):
    _source_or_404(engine, source)
    return _json(await engine.list_episodes(source, url))


@app.get("/providers/{source}/stream")
async def stream(source: str, url: str, engine: ProviderEngine = Depends(get_engine)):
    _source_or_404(engine, source)
    return _json(await engine.resolve_stream(source, url))
