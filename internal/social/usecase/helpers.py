"""Normalisation and heuristics for social payloads."""

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Sequence

from internal.scoring.usecase.helpers import round_half_up

from ..constant import *
from ..type import (
    CastAuthor,
    CastReactions,
    FarcasterAnalysis,
    FarcasterCast,
    MentionAuthor,
    MentionMetrics,
    SentimentLexicon,
    SocialInfluencer,
    SocialMention,
    TwitterAnalysis,
    TwitterTrend,
)

_HASHTAG_RE = re.compile(r"#(\w+)")
_MENTION_RE = re.compile(r"@(\w+)")


def analyze_sentiment(text: str, lexicon: SentimentLexicon) -> str:
    lowered = text.lower()
    positive = sum(1 for word in lexicon.positive if word in lowered)
    negative = sum(1 for word in lexicon.negative if word in lowered)
    if positive > negative:
        return SENTIMENT_POSITIVE
    if negative > positive:
        return SENTIMENT_NEGATIVE
    return SENTIMENT_NEUTRAL


def relevance_score(text: str, query: str) -> float:
    """Substring match 50, word overlap up to 30, hashtag or mention 10."""
    lowered = text.lower()
    query = query.lower()

    score = 0.0
    if query in lowered:
        score += 50
    words = query.split(" ")
    matched = sum(1 for word in words if word in lowered)
    score += matched / len(words) * 30
    if "#" in text or "@" in text:
        score += 10
    return min(100.0, score)


def extract_hashtags(text: str) -> List[str]:
    return _HASHTAG_RE.findall(text)


def extract_mentions(text: str) -> List[str]:
    return _MENTION_RE.findall(text)


def parse_timestamp(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def normalize_twitter_trends(payload: Any) -> List[TwitterTrend]:
    if not isinstance(payload, list) or not payload or not isinstance(payload[0], dict):
        return []
    trends = []
    for trend in payload[0].get("trends") or []:
        if not isinstance(trend, dict) or not _text(trend.get("name")):
            continue
        trends.append(
            TwitterTrend(
                name=trend["name"],
                query=trend.get("query") or trend["name"],
                url=trend.get("url") or "",
                tweet_volume=trend.get("tweet_volume"),
                promoted=bool(trend.get("promoted_content")),
            )
        )
    return trends


def normalize_twitter_mentions(payload: Any, query: str, lexicon: SentimentLexicon) -> List[SocialMention]:
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        return []

    users = {}
    for user in _mapping(payload.get("includes")).get("users") or []:
        if isinstance(user, dict) and user.get("id"):
            users[user["id"]] = user

    mentions = []
    for tweet in payload["data"]:
        if not isinstance(tweet, dict):
            continue
        author = users.get(tweet.get("author_id"), {})
        public = _mapping(tweet.get("public_metrics"))
        text = _text(tweet.get("text"))
        mentions.append(
            SocialMention(
                id=str(tweet.get("id") or ""),
                content=text,
                author=MentionAuthor(
                    handle=_text(author.get("username")) or "unknown",
                    name=_text(author.get("name")) or "Unknown",
                    verified=bool(author.get("verified")),
                    followers=_int(_mapping(author.get("public_metrics")).get("followers_count")),
                ),
                metrics=MentionMetrics(
                    likes=_int(public.get("like_count")),
                    retweets=_int(public.get("retweet_count")),
                    replies=_int(public.get("reply_count")),
                    views=public.get("impression_count"),
                ),
                timestamp=_text(tweet.get("created_at")),
                sentiment=analyze_sentiment(text, lexicon),
                relevance_score=relevance_score(text, query),
                hashtags=extract_hashtags(text),
                mentions=extract_mentions(text),
                url=TWEET_URL.format(id=tweet.get("id")),
            )
        )
    return mentions


def normalize_farcaster_casts(casts: Any) -> List[FarcasterCast]:
    normalized = []
    for cast in casts if isinstance(casts, list) else []:
        if not isinstance(cast, dict):
            continue
        author = _mapping(cast.get("author"))
        reactions = _mapping(cast.get("reactions"))
        parent = _mapping(cast.get("parent_author"))
        normalized.append(
            FarcasterCast(
                hash=_text(cast.get("hash")),
                content=_text(cast.get("text")),
                author=CastAuthor(
                    username=_text(author.get("username")),
                    display_name=author.get("display_name") or "",
                    fid=_int(author.get("fid")),
                    pfp_url=author.get("pfp_url"),
                    follower_count=_int(author.get("follower_count")),
                    following_count=_int(author.get("following_count")),
                ),
                timestamp=_text(cast.get("timestamp")),
                reactions=CastReactions(
                    likes=_int(reactions.get("likes")),
                    recasts=_int(reactions.get("recasts")),
                    replies=_int(_mapping(cast.get("replies")).get("count")),
                ),
                embeds=list(cast.get("embeds") or []),
                mentions=list(cast.get("mentions") or []),
                channels=[parent["username"]] if parent.get("username") else [],
            )
        )
    return normalized


def fallback_twitter_trends() -> List[TwitterTrend]:
    return [
        TwitterTrend(name=name, query=query, url="", tweet_volume=volume)
        for name, query, volume in FALLBACK_TWITTER_TRENDS
    ]


def fallback_farcaster_casts(now: datetime) -> List[FarcasterCast]:
    likes, recasts, replies = FALLBACK_CAST_REACTIONS
    return [
        FarcasterCast(
            hash=FALLBACK_CAST_HASH,
            content=FALLBACK_CAST_CONTENT,
            author=CastAuthor(
                username=FALLBACK_CAST_USERNAME,
                display_name=FALLBACK_CAST_DISPLAY_NAME,
                fid=FALLBACK_CAST_FID,
                follower_count=FALLBACK_CAST_FOLLOWERS,
                following_count=FALLBACK_CAST_FOLLOWING,
            ),
            timestamp=now.isoformat(),
            reactions=CastReactions(likes=likes, recasts=recasts, replies=replies),
            channels=[FALLBACK_CAST_CHANNEL],
        )
    ]


def analyze_twitter_data(
    keyword: str, mentions: List[SocialMention], trends: List[TwitterTrend]
) -> TwitterAnalysis:
    scores = [SENTIMENT_SCORES[m.sentiment] for m in mentions]
    influencers = sorted(
        (m for m in mentions if m.author.followers > TOP_INFLUENCER_FOLLOWERS),
        key=lambda m: m.author.followers,
        reverse=True,
    )
    frequency: Dict[str, int] = {}
    for mention in mentions:
        for tag in mention.hashtags:
            frequency[tag] = frequency.get(tag, 0) + 1

    return TwitterAnalysis(
        mention_count=len(mentions),
        sentiment_score=sum(scores) / len(scores) if scores else 0.0,
        trending=any(keyword.lower() in t.name.lower() for t in trends),
        top_influencers=[m.author.handle for m in influencers[:TOP_INFLUENCERS_COUNT]],
        hashtag_frequency=frequency,
    )


def analyze_farcaster_data(casts: List[FarcasterCast]) -> FarcasterAnalysis:
    total = sum(c.reactions.total() for c in casts)
    channels: Dict[str, int] = {}
    for cast in casts:
        for channel in cast.channels:
            channels[channel] = channels.get(channel, 0) + 1
    top = sorted(channels.items(), key=lambda kv: kv[1], reverse=True)[:TOP_CHANNELS_COUNT]

    return FarcasterAnalysis(
        cast_count=len(casts),
        engagement_score=total / len(casts) if casts else 0.0,
        top_channels=[name for name, _ in top],
        active_users=len({c.author.username for c in casts}),
    )


def overall_score(twitter: TwitterAnalysis, farcaster: FarcasterAnalysis) -> int:
    twitter_score = min(
        100.0,
        twitter.mention_count * 0.5 + twitter.sentiment_score * 30 + (20 if twitter.trending else 0),
    )
    farcaster_score = min(
        100.0,
        farcaster.cast_count * 2 + farcaster.engagement_score * 0.1 + farcaster.active_users * 2,
    )
    return round_half_up(twitter_score * 0.7 + farcaster_score * 0.3)


def momentum(mentions: List[SocialMention], casts: List[FarcasterCast], now: datetime) -> str:
    """Share of posts in the last six hours decides rising, stable or declining."""
    total = len(mentions) + len(casts)
    if total == 0:
        return MOMENTUM_STABLE

    cutoff = now - timedelta(hours=RECENT_WINDOW_HOURS)
    stamps = [parse_timestamp(m.timestamp) for m in mentions]
    stamps += [parse_timestamp(c.timestamp) for c in casts]
    recent = sum(1 for ts in stamps if ts is not None and ts > cutoff)

    ratio = recent / total
    if ratio > RISING_RATIO:
        return MOMENTUM_RISING
    if ratio < DECLINING_RATIO:
        return MOMENTUM_DECLINING
    return MOMENTUM_STABLE


def cultural_relevance(mentions: List[SocialMention], casts: List[FarcasterCast]) -> float:
    score = 0.0
    score += sum(1 for m in mentions if m.author.followers > HIGH_INFLUENCER_FOLLOWERS) * 10
    score += sum(1 for m in mentions if m.author.verified) * 5
    if mentions and casts:
        score += 15
    return min(100.0, score)


def viral_potential(mentions: List[SocialMention], casts: List[FarcasterCast]) -> float:
    score = 0.0
    high_engagement = sum(
        1
        for m in mentions
        if m.metrics.likes + m.metrics.retweets > m.author.followers * HIGH_ENGAGEMENT_RATIO
    )
    score += high_engagement * 8

    positive = sum(1 for m in mentions if m.sentiment == SENTIMENT_POSITIVE)
    score += positive / max(1, len(mentions)) * 20

    if casts:
        avg = sum(c.reactions.likes + c.reactions.recasts for c in casts) / len(casts)
        score += min(30.0, avg * 2)
    return min(100.0, score)


def twitter_influencers(mentions: Sequence[SocialMention]) -> List[SocialInfluencer]:
    found: Dict[str, SocialInfluencer] = {}
    for mention in mentions:
        handle = mention.author.handle
        if not handle:
            continue
        entry = found.setdefault(
            handle,
            SocialInfluencer(handle=handle, platform=PLATFORM_TWITTER, followers=mention.author.followers),
        )
        entry.recent_mentions += 1
        entry.engagement += mention.metrics.likes + mention.metrics.retweets + mention.metrics.replies
        entry.relevance_score += mention.relevance_score
    return list(found.values())


def farcaster_influencers(casts: Sequence[FarcasterCast]) -> List[SocialInfluencer]:
    found: Dict[str, SocialInfluencer] = {}
    for cast in casts:
        handle = cast.author.username
        if not handle:
            continue
        entry = found.setdefault(
            handle,
            SocialInfluencer(handle=handle, platform=PLATFORM_FARCASTER, followers=cast.author.follower_count),
        )
        entry.recent_mentions += 1
        entry.engagement += cast.reactions.total()
        entry.relevance_score += FARCASTER_BASE_RELEVANCE
    return list(found.values())


__all__ = [
    "analyze_sentiment",
    "relevance_score",
    "extract_hashtags",
    "extract_mentions",
    "parse_timestamp",
    "normalize_twitter_trends",
    "normalize_twitter_mentions",
    "normalize_farcaster_casts",
    "fallback_twitter_trends",
    "fallback_farcaster_casts",
    "analyze_twitter_data",
    "analyze_farcaster_data",
    "overall_score",
    "momentum",
    "cultural_relevance",
    "viral_potential",
    "twitter_influencers",
    "farcaster_influencers",
]
