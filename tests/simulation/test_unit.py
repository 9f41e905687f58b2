"""Unit tests for portfolio simulation and synthetic backtests."""

import pytest  # type: ignore

from internal.scoring.type import (
    AssetScores,
    CulturalScores,
    MarketScores,
    NormalizedAsset,
    PriceInfo,
    RiskAssessment,
    ScoredAsset,
)
from internal.simulation import (
    BacktestAsset,
    Config,
    ErrInvalidBacktest,
    ErrInvalidSimulation,
    NewSimulator,
    pipeline_options,
)
from internal.simulation.constant import (
    MITIGATION_DIVERSIFY,
    REBALANCE_CONCENTRATION,
    REBALANCE_SCHEDULE,
)
from internal.simulation.usecase.helpers import allocate, correlation_matrix, select_assets
from internal.simulation.usecase.simulator import Simulator


# ============================================================================
# Test Fixtures
# ============================================================================


def make_scored(
    index: int = 0,
    relevance: float = 60,
    risk: str = "low",
    asset_type: str = "token",
    price: float = 2.0,
    momentum: float = 20,
) -> ScoredAsset:
    return ScoredAsset(
        asset=NormalizedAsset(
            id=f"asset-{index}",
            type=asset_type,
            name=f"Asset {index}",
            price=PriceInfo(current=price),
        ),
        scores=AssetScores(
            relevance=relevance,
            confidence=0.7,
            cultural=CulturalScores(),
            market=MarketScores(liquidity=80, momentum=momentum),
            risk=RiskAssessment(level=risk, score=10),
        ),
        reasoning="",
    )


@pytest.fixture
def simulator() -> Simulator:
    return Simulator(Config(seed=7))


# ============================================================================
# Factory and option mapping
# ============================================================================


class TestNew:
    def test_rejects_invalid_config(self):
        with pytest.raises(ValueError):
            NewSimulator({"seed": 1})

    def test_builds_simulator(self):
        assert isinstance(NewSimulator(Config(seed=1)), Simulator)


class TestPipelineOptions:
    @pytest.mark.parametrize(
        "tolerance,horizon,risk,time,confidence",
        [
            ("conservative", "3m", "low", "short", 0.6),
            ("moderate", "1y", "medium", "medium", 0.4),
            ("aggressive", "2y", "high", "long", 0.2),
        ],
    )
    def test_mapping(self, tolerance, horizon, risk, time, confidence):
        options = pipeline_options(tolerance, horizon)

        assert options.risk_tolerance == risk
        assert options.time_horizon == time
        assert options.min_confidence == confidence
        assert options.max_assets == 10


# ============================================================================
# Portfolio construction
# ============================================================================


class TestAllocation:
    @pytest.mark.parametrize("count", list(range(1, 11)))
    def test_allocations_sum_to_one_hundred(self, count):
        assets = [make_scored(i, relevance=10 + i * 7) for i in range(count)]

        positions = allocate(assets, 10_000, "aggressive")

        assert len(positions) == count
        assert sum(p.allocation for p in positions) == pytest.approx(100, abs=0.01)

    def test_zero_relevance_splits_evenly(self):
        assets = [make_scored(i, relevance=0) for i in range(4)]

        positions = allocate(assets, 1_000, "aggressive")

        assert [p.allocation for p in positions] == [25.0, 25.0, 25.0, 25.0]

    def test_empty_selection(self):
        assert allocate([], 1_000, "moderate") == []

    def test_quantity_uses_capped_base(self):
        positions = allocate([make_scored(price=2.0)], 10_000, "moderate")

        assert positions[0].allocation == 100.0
        assert positions[0].entry_price == 2.0
        assert positions[0].quantity == pytest.approx(1_500)


class TestSelectAssets:
    def test_conservative_keeps_low_and_medium(self):
        assets = [make_scored(0, risk="low"), make_scored(1, risk="high"), make_scored(2, risk="medium")]

        assert [a.id for a in select_assets(assets, "conservative")] == ["asset-0", "asset-2"]

    def test_moderate_excludes_extreme(self):
        assets = [make_scored(0, risk="extreme"), make_scored(1, risk="high")]

        assert [a.id for a in select_assets(assets, "moderate")] == ["asset-1"]

    @pytest.mark.parametrize("tolerance,cap", [("conservative", 5), ("moderate", 8), ("aggressive", 10)])
    def test_candidate_caps(self, tolerance, cap):
        assets = [make_scored(i) for i in range(15)]

        assert len(select_assets(assets, tolerance)) == cap


class TestCorrelationMatrix:
    def test_symmetric_with_unit_diagonal(self, simulator):
        matrix = correlation_matrix(4, simulator.rng)

        for i in range(4):
            assert matrix[i][i] == 1.0
            for j in range(4):
                assert matrix[i][j] == matrix[j][i]
                if i != j:
                    assert 0.2 <= matrix[i][j] <= 0.8


class TestBuildPortfolio:
    def test_single_low_risk_asset(self, simulator):
        result = simulator.build_portfolio([make_scored()], 10_000, "moderate", "6m")

        assert result.portfolio.risk_score == 25
        assert result.portfolio.diversification_score == 10
        assert result.portfolio.total_allocation == 100.0
        assert result.projections.expected_return == 11.25
        assert result.projections.volatility == 30.0
        assert result.projections.sharpe_ratio == 0.38
        assert result.projections.max_drawdown == 24.0
        assert result.risk_metrics.var_95 == 500.0
        assert result.risk_metrics.sector_exposure == {"DeFi": 100.0}
        assert result.risk_metrics.liquidity_score == 80
        assert result.risk_metrics.correlation_matrix == [[1.0]]

        recs = result.recommendations
        assert recs.rebalancing == [REBALANCE_CONCENTRATION, REBALANCE_SCHEDULE]
        assert MITIGATION_DIVERSIFY in recs.risk_mitigation

    def test_empty_selection_has_zero_risk(self, simulator):
        result = simulator.build_portfolio([make_scored(risk="extreme")], 10_000, "conservative", "1y")

        assert result.portfolio.assets == []
        assert result.portfolio.risk_score == 0
        assert result.portfolio.total_allocation == 0.0
        assert result.risk_metrics.correlation_matrix == []
        assert result.risk_metrics.liquidity_score == 0

    def test_mixed_sectors(self, simulator):
        assets = [make_scored(0, asset_type="token"), make_scored(1, asset_type="nft_collection")]

        result = simulator.build_portfolio(assets, 5_000, "aggressive", "2y")

        exposure = result.risk_metrics.sector_exposure
        assert set(exposure) == {"DeFi", "NFT"}
        assert sum(exposure.values()) == pytest.approx(100, abs=0.01)

    def test_high_momentum_listed(self, simulator):
        result = simulator.build_portfolio([make_scored(momentum=80)], 1_000, "moderate", "1m")

        assert result.recommendations.opportunities[0] == "Monitor high-momentum assets: Asset 0"

    @pytest.mark.parametrize(
        "size,tolerance,horizon",
        [
            (0, "moderate", "6m"),
            (2_000_000, "moderate", "6m"),
            (1_000, "reckless", "6m"),
            (1_000, "moderate", "5y"),
        ],
    )
    def test_invalid_parameters(self, simulator, size, tolerance, horizon):
        with pytest.raises(ErrInvalidSimulation):
            simulator.build_portfolio([make_scored()], size, tolerance, horizon)


# ============================================================================
# Backtest
# ============================================================================


class TestBacktest:
    ASSETS = [BacktestAsset(id="solar", type="token", allocation=60), BacktestAsset(id="punks", type="nft_collection", allocation=40)]

    def test_daily_series(self, simulator):
        result = simulator.run_backtest(self.ASSETS, "2024-01-01", "2024-01-31", 10_000)

        assert len(result.time_series) == 30
        assert result.time_series[0].date == "2024-01-01"
        assert result.time_series[-1].date == "2024-01-30"
        assert result.summary.initial_value == 10_000
        assert result.summary.final_value == pytest.approx(result.time_series[-1].value, abs=0.01)
        assert [a.id for a in result.asset_performance] == ["solar", "punks"]
        for perf in result.asset_performance:
            assert -20 <= perf.return_pct <= 40

    def test_seeded_runs_are_reproducible(self):
        first = Simulator(Config(seed=42)).run_backtest(self.ASSETS, "2024-01-01", "2024-03-01", 1_000)
        second = Simulator(Config(seed=42)).run_backtest(self.ASSETS, "2024-01-01", "2024-03-01", 1_000)

        assert first.to_dict() == second.to_dict()

    @pytest.mark.parametrize(
        "assets,start,end,value",
        [
            ([], "2024-01-01", "2024-02-01", 1_000),
            ([BacktestAsset(id=str(i), type="token", allocation=10) for i in range(11)], "2024-01-01", "2024-02-01", 1_000),
            ([BacktestAsset(id="x", type="stock", allocation=10)], "2024-01-01", "2024-02-01", 1_000),
            ([BacktestAsset(id="x", type="token", allocation=150)], "2024-01-01", "2024-02-01", 1_000),
            ([BacktestAsset(id="x", type="token", allocation=10)], "2024-01-01", "2024-02-01", 0),
            ([BacktestAsset(id="x", type="token", allocation=10)], "2024/01/01", "2024-02-01", 1_000),
            ([BacktestAsset(id="x", type="token", allocation=10)], "2024-02-30", "2024-03-01", 1_000),
            ([BacktestAsset(id="x", type="token", allocation=10)], "2024-02-01", "2024-02-01", 1_000),
            ([BacktestAsset(id="x", type="token", allocation=10)], "2024-03-01", "2024-02-01", 1_000),
        ],
    )
    def test_invalid_requests(self, simulator, assets, start, end, value):
        with pytest.raises(ErrInvalidBacktest):
            simulator.run_backtest(assets, start, end, value)
