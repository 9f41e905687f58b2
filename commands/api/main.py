"""Entry point: wires provider clients and services onto the app and serves it with uvicorn."""

from contextlib import asynccontextmanager
from typing import Dict, List, Optional

from fastapi import FastAPI  # type: ignore

from core.config import Settings, settings
from core.logger import format_exception_short, logger
from core.validation import log_environment_report
from internal.api.main import create_app as create_internal_app
from internal.market_data import Config as MarketDataConfig, NewMarketData
from internal.market_data.constant import API_KEY_HEADER as COINGECKO_KEY_HEADER
from internal.market_data.constant import SERVICE_NAME as COINGECKO_SERVICE
from internal.marketplace import Config as MarketplaceConfig, NewMarketplace
from internal.marketplace.constant import API_KEY_HEADER as OPENSEA_KEY_HEADER
from internal.marketplace.constant import SERVICE_NAME as OPENSEA_SERVICE
from internal.orchestrator import Config as OrchestratorConfig, NewOrchestrator
from internal.scoring import NewScorer
from internal.simulation import Config as SimulationConfig, NewSimulator
from internal.social import Config as SocialConfig, NewSocial
from internal.social.constant import FARCASTER_SERVICE_NAME, TWITTER_SERVICE_NAME
from internal.taste import Config as TasteConfig, NewTaste
from internal.taste.constant import SERVICE_NAME as QLOO_SERVICE
from internal.theme_expansion import Config as ThemeExpansionConfig, NewThemeExpansion
from pkg.cache.cache import MemoryCache
from pkg.cache.type import CacheConfig
from pkg.defaults.defaults import new_defaults_filler
from pkg.http.http import HttpClient
from pkg.http.type import HttpClientConfig
from pkg.llm.llm import LLMClient
from pkg.llm.type import LLMConfig

QLOO_KEY_HEADER = "X-API-Key"


def _http_client(
    cfg: Settings, base_url: str, service_name: str, headers: Dict[str, str]
) -> HttpClient:
    return HttpClient(
        HttpClientConfig(
            base_url=base_url,
            service_name=service_name,
            headers=headers,
            timeout=cfg.request_timeout_seconds,
            max_retries=cfg.request_max_retries,
            user_agent=cfg.user_agent,
        )
    )


def build_http_clients(cfg: Settings) -> Dict[str, Optional[HttpClient]]:
    """One client per provider with credentials. Providers without a key get
    None and their adapter serves fallback data only."""
    clients: Dict[str, Optional[HttpClient]] = {
        "qloo": None,
        "coingecko": None,
        "opensea": None,
        "twitter": None,
        "farcaster": None,
    }
    if cfg.qloo_api_key:
        clients["qloo"] = _http_client(
            cfg,
            cfg.qloo_api_url,
            QLOO_SERVICE,
            {"Authorization": f"Bearer {cfg.qloo_api_key}", QLOO_KEY_HEADER: cfg.qloo_api_key},
        )
    if cfg.coingecko_api_key:
        clients["coingecko"] = _http_client(
            cfg, cfg.coingecko_base_url, COINGECKO_SERVICE, {COINGECKO_KEY_HEADER: cfg.coingecko_api_key}
        )
    if cfg.opensea_api_key:
        clients["opensea"] = _http_client(
            cfg, cfg.opensea_base_url, OPENSEA_SERVICE, {OPENSEA_KEY_HEADER: cfg.opensea_api_key}
        )
    if cfg.twitter_bearer_token:
        clients["twitter"] = _http_client(
            cfg,
            cfg.twitter_base_url,
            TWITTER_SERVICE_NAME,
            {"Authorization": f"Bearer {cfg.twitter_bearer_token}"},
        )
    if cfg.farcaster_api_key:
        clients["farcaster"] = _http_client(
            cfg,
            cfg.farcaster_base_url,
            FARCASTER_SERVICE_NAME,
            {"Authorization": f"Bearer {cfg.farcaster_api_key}"},
        )
    return clients


def build_llm_client(cfg: Settings) -> LLMClient:
    return LLMClient(
        LLMConfig(
            azure_api_key=cfg.azure_openai_api_key,
            azure_endpoint=cfg.azure_openai_endpoint,
            azure_deployment=cfg.azure_openai_deployment,
            azure_api_version=cfg.azure_openai_api_version,
            openai_api_key=cfg.openai_api_key,
            openai_base_url=cfg.openai_base_url,
            model=cfg.llm_model,
            max_tokens=cfg.llm_max_tokens,
            temperature=cfg.llm_temperature,
            timeout=cfg.request_timeout_seconds,
        )
    )


def wire_services(
    app: FastAPI,
    cfg: Settings,
    cache: MemoryCache,
    clients: Dict[str, Optional[HttpClient]],
    llm: LLMClient,
) -> None:
    """Build adapters, scorer, orchestrator and simulator onto ``app.state``."""
    defaults = new_defaults_filler(cfg.fill_defaults_enabled, cfg.defaults_seed)

    theme_expansion = NewThemeExpansion(
        ThemeExpansionConfig(max_tokens=cfg.llm_max_tokens), llm=llm, cache=cache, logger=logger
    )
    taste = NewTaste(
        TasteConfig(), client=clients["qloo"], theme_expansion=theme_expansion, cache=cache, logger=logger
    )
    market_data = NewMarketData(
        MarketDataConfig(), client=clients["coingecko"], cache=cache, defaults=defaults, logger=logger
    )
    marketplace = NewMarketplace(
        MarketplaceConfig(), client=clients["opensea"], cache=cache, defaults=defaults, logger=logger
    )
    social = NewSocial(
        SocialConfig(lexicon_path=cfg.sentiment_lexicon_path),
        twitter=clients["twitter"],
        farcaster=clients["farcaster"],
        cache=cache,
        logger=logger,
    )
    scorer = NewScorer(logger=logger)
    orchestrator = NewOrchestrator(
        OrchestratorConfig(result_ttl=cfg.pipeline_result_ttl, failure_ttl=cfg.pipeline_failure_ttl),
        theme_expansion=theme_expansion,
        taste=taste,
        social=social,
        market_data=market_data,
        marketplace=marketplace,
        scorer=scorer,
        cache=cache,
        logger=logger,
    )

    app.state.cache = cache
    app.state.theme_expansion = theme_expansion
    app.state.taste = taste
    app.state.market_data = market_data
    app.state.marketplace = marketplace
    app.state.social = social
    app.state.scorer = scorer
    app.state.orchestrator = orchestrator
    app.state.simulator = NewSimulator(SimulationConfig(seed=cfg.simulation_seed), logger=logger)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the cache, provider clients and services once; close clients on shutdown."""
    clients: Dict[str, Optional[HttpClient]] = {}
    llm: Optional[LLMClient] = None
    cache: Optional[MemoryCache] = None
    try:
        logger.info(
            f"========== Starting {settings.service_name} v{settings.service_version} API service =========="
        )
        logger.info(f"API: {settings.api_host}:{settings.api_port}")

        if not log_environment_report(settings):
            logger.warning("Starting with invalid configuration, see errors above")

        cache = MemoryCache(
            CacheConfig(
                ttl_short=settings.cache_ttl_short,
                ttl_medium=settings.cache_ttl_medium,
                ttl_long=settings.cache_ttl_long,
                max_size=settings.cache_max_size,
                sweep_interval=settings.cache_sweep_interval,
            )
        )
        await cache.start()

        clients = build_http_clients(settings)
        llm = build_llm_client(settings)
        wire_services(app, settings, cache, clients, llm)

        configured: List[str] = [name for name, client in clients.items() if client is not None]
        if llm.is_configured:
            configured.append("llm")
        logger.info(f"Providers configured: {', '.join(configured) or 'none'}")

        logger.info(
            f"========== {settings.service_name} API service started successfully =========="
        )

        yield

    except Exception as e:
        logger.error(f"Fatal error in application lifespan: {format_exception_short(e, 'Lifespan')}")
        logger.exception("Lifespan error details:")
        raise

    finally:
        logger.info("========== Shutting down API service ==========")
        for name, client in clients.items():
            if client is not None:
                await client.close()
                logger.info(f"{name} HTTP client closed")
        if llm is not None:
            await llm.close()
        if cache is not None:
            await cache.close()
        logger.info("========== API service stopped successfully ==========")


def create_app() -> FastAPI:
    try:
        logger.info("Creating FastAPI application...")
        app = create_internal_app(lifespan=lifespan)
        logger.info("FastAPI application created successfully")
        return app

    except Exception as e:
        logger.error(f"Failed to create FastAPI application: {e}")
        logger.exception("Application creation error details:")
        raise


app = create_app()


# Run with: python -m commands.api.main
if __name__ == "__main__":
    import uvicorn  # type: ignore

    logger.info(
        "Serving with uvicorn",
        extra={"host": settings.api_host, "port": settings.api_port, "reload": settings.api_reload},
    )
    # reload needs an import string, not the app object
    uvicorn.run(
        "commands.api.main:app" if settings.api_reload else app,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level="info",
    )
