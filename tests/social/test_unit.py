"""Unit tests for the social signal adapter."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import httpx
import pytest  # type: ignore

from internal.social import Config, ErrLexiconInvalid, NewSocial, SentimentLexicon
from internal.social.usecase.helpers import analyze_sentiment, relevance_score
from internal.social.usecase.lexicon import load_lexicon, parse_lexicon
from internal.social.usecase.social import SocialUseCase
from pkg.cache.cache import MemoryCache
from pkg.http.http import HttpClient
from pkg.http.type import HttpClientConfig

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
LEXICON_PATH = Path(__file__).resolve().parents[2] / "config" / "sentiment_lexicon.yaml"


def iso(delta: timedelta) -> str:
    return (NOW - delta).isoformat().replace("+00:00", "Z")


# ============================================================================
# Test Fixtures & Mocks
# ============================================================================


TWEETS = {
    "data": [
        {
            "id": "1",
            "text": "Solarpunk is amazing #solarpunk",
            "author_id": "u1",
            "created_at": iso(timedelta(hours=1)),
            "public_metrics": {"like_count": 100, "retweet_count": 20, "reply_count": 5},
        },
        {
            "id": "2",
            "text": "solarpunk looks like a scam",
            "author_id": "u2",
            "created_at": iso(timedelta(days=2)),
            "public_metrics": {"like_count": 1},
        },
    ],
    "includes": {
        "users": [
            {
                "id": "u1",
                "username": "sunny",
                "name": "Sunny",
                "verified": True,
                "public_metrics": {"followers_count": 60000},
            },
            {"id": "u2", "username": "grump", "public_metrics": {"followers_count": 10}},
        ]
    },
}

CASTS = {
    "casts": [
        {
            "hash": "0x1",
            "text": "solarpunk gm",
            "author": {"username": "fc1", "follower_count": 300},
            "timestamp": iso(timedelta(hours=1)),
            "reactions": {"likes": 4, "recasts": 1},
            "replies": {"count": 1},
            "parent_author": {"username": "solar"},
        }
    ]
}


def twitter_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/trends/place.json":
        return httpx.Response(200, json=[{"trends": [{"name": "#Solarpunk", "tweet_volume": 1200}]}])
    if request.url.path == "/tweets/search/recent":
        return httpx.Response(200, json=TWEETS)
    return httpx.Response(404)


def farcaster_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path in ("/casts/search", "/casts/trending"):
        return httpx.Response(200, json=CASTS)
    return httpx.Response(404)


def failing_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(401, json={"error": "unauthorized"})


def client(handler, name: str) -> HttpClient:
    return HttpClient(
        HttpClientConfig(
            base_url=f"https://{name}.test",
            service_name=name,
            max_retries=0,
            transport=httpx.MockTransport(handler),
        )
    )


def make_adapter(twitter=None, farcaster=None, cache=None) -> SocialUseCase:
    return SocialUseCase(Config(), twitter=twitter, farcaster=farcaster, cache=cache, clock=lambda: NOW)


# ============================================================================
# Heuristics
# ============================================================================


class TestSentimentAndRelevance:
    """Lexicon sentiment and query relevance."""

    def test_sentiment(self):
        lexicon = SentimentLexicon()
        assert analyze_sentiment("I love this amazing project", lexicon) == "positive"
        assert analyze_sentiment("total scam, going to dump", lexicon) == "negative"
        assert analyze_sentiment("the weather today", lexicon) == "neutral"

    def test_relevance(self):
        assert relevance_score("Solar punk is rising #solar", "solar punk") == 90
        assert relevance_score("nothing here", "solar") == 0


class TestLexicon:
    """Lexicon parsing and loading."""

    def test_parse_valid(self):
        lexicon = parse_lexicon({"positive": ["Gm", " "], "negative": ["ngmi"]})
        assert lexicon.positive == ("gm",)
        assert lexicon.negative == ("ngmi",)

    def test_parse_invalid(self):
        with pytest.raises(ErrLexiconInvalid):
            parse_lexicon({"positive": "good"})

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "lexicon.yaml"
        path.write_text("positive: [wagmi]\nnegative: [ngmi]\n", encoding="utf-8")
        assert load_lexicon(str(path)).positive == ("wagmi",)

    def test_missing_file_uses_builtin(self, tmp_path):
        assert load_lexicon(str(tmp_path / "missing.yaml")) == SentimentLexicon()

    def test_malformed_file_uses_builtin(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("positive: [unclosed\n", encoding="utf-8")
        assert load_lexicon(str(path)) == SentimentLexicon()

    def test_shipped_lexicon_loads(self):
        lexicon = load_lexicon(str(LEXICON_PATH))
        assert "bullish" in lexicon.positive
        assert "rekt" in lexicon.negative


# ============================================================================
# Adapter
# ============================================================================


class TestFallbacks:
    """Unconfigured platforms serve fallback data."""

    @pytest.mark.anyio
    async def test_trends_and_casts_fall_back(self):
        adapter = make_adapter()
        trends = await adapter.get_twitter_trends()
        casts = await adapter.get_farcaster_casts("solarpunk")
        assert [t.name for t in trends][:2] == ["AI", "crypto"]
        assert casts[0].hash == "fallback1"
        assert casts[0].timestamp == NOW.isoformat()
        assert await adapter.search_twitter_mentions("solarpunk") == []

    @pytest.mark.anyio
    async def test_provider_errors_fall_back(self):
        adapter = make_adapter(twitter=client(failing_handler, "twitter"), farcaster=client(failing_handler, "farcaster"))
        assert len(await adapter.get_twitter_trends()) == 5
        assert await adapter.search_twitter_mentions("solarpunk") == []
        assert (await adapter.get_farcaster_casts())[0].hash == "fallback1"

    @pytest.mark.anyio
    async def test_analysis_without_clients(self):
        analysis = await make_adapter().analyze_social_trend("ai")
        assert analysis.twitter.mention_count == 0
        assert analysis.twitter.trending is True
        assert analysis.farcaster.cast_count == 1
        assert analysis.farcaster.engagement_score == 15
        assert analysis.overall_score == 16
        assert analysis.momentum == "rising"
        assert analysis.viral_potential == 26


class TestAnalyzeSocialTrend:
    """Full analysis against mocked providers."""

    @pytest.mark.anyio
    async def test_analysis(self):
        adapter = make_adapter(
            twitter=client(twitter_handler, "twitter"), farcaster=client(farcaster_handler, "farcaster")
        )
        analysis = await adapter.analyze_social_trend("solarpunk")

        assert analysis.twitter.mention_count == 2
        assert analysis.twitter.sentiment_score == 0
        assert analysis.twitter.trending is True
        assert analysis.twitter.top_influencers == ["sunny"]
        assert analysis.twitter.hashtag_frequency == {"solarpunk": 1}
        assert analysis.farcaster.engagement_score == 6
        assert analysis.farcaster.top_channels == ["solar"]
        assert analysis.overall_score == 16
        assert analysis.momentum == "rising"
        assert analysis.cultural_relevance == 30
        assert analysis.viral_potential == 28

    @pytest.mark.anyio
    async def test_casts_cached(self):
        calls = []

        def counting(request: httpx.Request) -> httpx.Response:
            calls.append(request.url.path)
            return farcaster_handler(request)

        adapter = make_adapter(farcaster=client(counting, "farcaster"), cache=MemoryCache())
        await adapter.get_farcaster_casts("solarpunk")
        await adapter.get_farcaster_casts("solarpunk")
        assert calls == ["/casts/search"]

    @pytest.mark.anyio
    async def test_influencers_ranked(self):
        adapter = make_adapter(
            twitter=client(twitter_handler, "twitter"), farcaster=client(farcaster_handler, "farcaster")
        )
        influencers = await adapter.get_social_influencers("solarpunk", limit=2)
        assert [(i.handle, i.platform) for i in influencers] == [("sunny", "twitter"), ("grump", "twitter")]

        farcaster_only = await adapter.get_social_influencers("solarpunk", platform="farcaster")
        assert [i.handle for i in farcaster_only] == ["fc1"]
        assert farcaster_only[0].engagement == 6


class TestNew:
    def test_loads_lexicon_from_config(self, tmp_path):
        path = tmp_path / "lexicon.yaml"
        path.write_text("positive: [wagmi]\nnegative: [ngmi]\n", encoding="utf-8")
        adapter = NewSocial(Config(lexicon_path=str(path)))
        assert adapter.lexicon.negative == ("ngmi",)


def malformed_twitter_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/trends/place.json":
        return httpx.Response(200, json=[{"trends": [{"name": 5}, "x"]}])
    return httpx.Response(
        200, json={"data": [{"id": "1", "text": 5, "public_metrics": "n/a"}], "includes": ["u1"]}
    )


def malformed_farcaster_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200, json={"casts": [{"hash": "h", "text": ["x"], "author": "a", "reactions": 7, "embeds": 3}]}
    )


class TestMalformedPayloads:
    """Well-formed HTTP responses whose bodies have the wrong shape."""

    @pytest.mark.anyio
    async def test_twitter_fields_with_wrong_types(self):
        adapter = make_adapter(twitter=client(malformed_twitter_handler, "twitter"))

        assert await adapter.get_twitter_trends() == []
        mentions = await adapter.search_twitter_mentions("solarpunk")
        assert [m.content for m in mentions] == [""]
        assert mentions[0].author.handle == "unknown"
        assert mentions[0].metrics.likes == 0

    @pytest.mark.anyio
    async def test_unusable_casts_fall_back(self):
        adapter = make_adapter(farcaster=client(malformed_farcaster_handler, "farcaster"))

        casts = await adapter.get_farcaster_casts("solarpunk")

        assert [c.hash for c in casts] == ["fallback1"]

    @pytest.mark.anyio
    async def test_analysis_survives_malformed_providers(self):
        adapter = make_adapter(
            twitter=client(malformed_twitter_handler, "twitter"),
            farcaster=client(malformed_farcaster_handler, "farcaster"),
        )

        analysis = await adapter.analyze_social_trend("solarpunk")

        assert analysis.keyword == "solarpunk"
        assert analysis.twitter.mention_count == 1
        assert analysis.farcaster.cast_count == 1
