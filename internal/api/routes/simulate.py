"""Portfolio simulation API routes."""

import time

from fastapi import APIRouter, Depends

from core.constants import ErrorCode, HealthStatus
from core.errors import AppError, ValidationError
from core.logger import logger
from internal.api.dependencies import get_orchestrator, get_simulator
from internal.orchestrator.interface import IOrchestrator
from internal.simulation import ErrInvalidBacktest, ErrInvalidSimulation, ISimulator, pipeline_options
from models.schemas.base import ApiResponse
from models.schemas.simulate import BacktestRequest, SimulateRequest

router = APIRouter()

SERVICE = "SimulationService"


@router.post("", response_model=ApiResponse)
async def simulate(
    body: SimulateRequest,
    orchestrator: IOrchestrator = Depends(get_orchestrator),
    simulator: ISimulator = Depends(get_simulator),
):
    """Run the pipeline for a vibe and build an illustrative portfolio from it."""
    start = time.perf_counter()
    logger.info(
        "Simulation request accepted",
        extra={
            "vibe_length": len(body.vibe),
            "portfolio_size": body.portfolio_size,
            "risk_tolerance": body.risk_tolerance,
            "time_horizon": body.time_horizon,
        },
    )

    options = pipeline_options(
        body.risk_tolerance,
        body.time_horizon,
        max_assets=body.options.max_assets,
        include_nfts=body.options.include_nfts,
        include_tokens=body.options.include_tokens,
        use_cache=body.options.use_cache,
    )
    details = {
        "vibe": body.vibe,
        "portfolioSize": body.portfolio_size,
        "riskTolerance": body.risk_tolerance,
        "timeHorizon": body.time_horizon,
    }

    try:
        analysis = await orchestrator.process_full_pipeline(body.vibe, options)
        simulation = simulator.build_portfolio(
            analysis.asset_matches, body.portfolio_size, body.risk_tolerance, body.time_horizon
        )
    except ErrInvalidSimulation as e:
        raise ValidationError(str(e), details=details)
    except Exception as e:
        logger.error(f"Portfolio simulation failed: {e}", extra={"vibe": body.vibe})
        raise AppError(
            str(e) or "Portfolio simulation failed",
            status_code=500,
            code=ErrorCode.SIMULATION_ERROR.value,
            details=details,
        )

    return ApiResponse(
        data={
            "analysis": analysis.to_dict(),
            "simulation": simulation.to_dict(),
            "metadata": details,
        },
        message="Portfolio simulation completed successfully",
        meta={
            "processingTime": int((time.perf_counter() - start) * 1000),
            "assetCount": len(analysis.asset_matches),
            "portfolioAssets": len(simulation.portfolio.assets),
            "totalRisk": simulation.portfolio.risk_score,
        },
    )


@router.post("/backtest", response_model=ApiResponse)
async def backtest(body: BacktestRequest, simulator: ISimulator = Depends(get_simulator)):
    """Synthetic backtest of a fixed allocation between two dates."""
    start = time.perf_counter()
    details = {
        "assets": [a.model_dump() for a in body.assets],
        "startDate": body.start_date,
        "endDate": body.end_date,
        "initialValue": body.initial_value,
    }
    try:
        result = simulator.run_backtest(
            [a.to_asset() for a in body.assets], body.start_date, body.end_date, body.initial_value
        )
    except ErrInvalidBacktest as e:
        raise ValidationError(str(e), details=details)
    except Exception as e:
        logger.error(f"Backtest failed: {e}")
        raise AppError(
            str(e) or "Backtest failed",
            status_code=500,
            code=ErrorCode.BACKTEST_ERROR.value,
            details=details,
        )

    return ApiResponse(
        data=result.to_dict(),
        message="Backtest completed successfully",
        meta={
            "processingTime": int((time.perf_counter() - start) * 1000),
            "assetCount": len(body.assets),
            "period": f"{body.start_date} to {body.end_date}",
            "initialValue": body.initial_value,
        },
    )


@router.get("/health", response_model=ApiResponse)
async def simulate_health(simulator: ISimulator = Depends(get_simulator)):
    return ApiResponse(
        data={
            "status": HealthStatus.HEALTHY.value,
            "service": SERVICE,
            "features": {"portfolioSimulation": True, "backtesting": True, "riskAnalysis": True},
        },
        message="Simulation service is operational",
        meta={"service": SERVICE, "testSuccessful": True},
    )
