from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .constant import *


@dataclass
class Config:
    """Configuration for the social adapter."""

    lexicon_path: Optional[str] = None
    trends_ttl: str = "short"
    casts_ttl: str = "short"


@dataclass
class SentimentLexicon:
    positive: Tuple[str, ...] = DEFAULT_POSITIVE_WORDS
    negative: Tuple[str, ...] = DEFAULT_NEGATIVE_WORDS


@dataclass
class TwitterTrend:
    name: str
    query: str
    url: str = ""
    tweet_volume: Optional[int] = None
    promoted: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "query": self.query,
            "tweetVolume": self.tweet_volume,
            "url": self.url,
            "promoted": self.promoted,
        }


@dataclass
class MentionAuthor:
    handle: str = "unknown"
    name: str = "Unknown"
    verified: bool = False
    followers: int = 0


@dataclass
class MentionMetrics:
    likes: int = 0
    retweets: int = 0
    replies: int = 0
    views: Optional[int] = None


@dataclass
class SocialMention:
    id: str
    content: str
    author: MentionAuthor
    metrics: MentionMetrics
    timestamp: str
    sentiment: str
    relevance_score: float
    hashtags: List[str] = field(default_factory=list)
    mentions: List[str] = field(default_factory=list)
    url: str = ""
    platform: str = PLATFORM_TWITTER

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "platform": self.platform,
            "content": self.content,
            "author": {
                "handle": self.author.handle,
                "name": self.author.name,
                "verified": self.author.verified,
                "followers": self.author.followers,
            },
            "metrics": {
                "likes": self.metrics.likes,
                "retweets": self.metrics.retweets,
                "replies": self.metrics.replies,
                "views": self.metrics.views,
            },
            "timestamp": self.timestamp,
            "sentiment": self.sentiment,
            "relevanceScore": self.relevance_score,
            "hashtags": list(self.hashtags),
            "mentions": list(self.mentions),
            "url": self.url,
        }


@dataclass
class CastAuthor:
    username: str = ""
    display_name: str = ""
    fid: int = 0
    pfp_url: Optional[str] = None
    follower_count: int = 0
    following_count: int = 0


@dataclass
class CastReactions:
    likes: int = 0
    recasts: int = 0
    replies: int = 0

    def total(self) -> int:
        return self.likes + self.recasts + self.replies


@dataclass
class FarcasterCast:
    hash: str
    content: str
    author: CastAuthor
    timestamp: str
    reactions: CastReactions
    embeds: List[Dict[str, Any]] = field(default_factory=list)
    mentions: List[Any] = field(default_factory=list)
    channels: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hash": self.hash,
            "content": self.content,
            "author": {
                "username": self.author.username,
                "displayName": self.author.display_name,
                "fid": self.author.fid,
                "pfpUrl": self.author.pfp_url,
                "followerCount": self.author.follower_count,
                "followingCount": self.author.following_count,
            },
            "timestamp": self.timestamp,
            "reactions": {
                "likes": self.reactions.likes,
                "recasts": self.reactions.recasts,
                "replies": self.reactions.replies,
            },
            "embeds": list(self.embeds),
            "mentions": list(self.mentions),
            "channels": list(self.channels),
        }


@dataclass
class TwitterAnalysis:
    mention_count: int = 0
    sentiment_score: float = 0.0
    trending: bool = False
    top_influencers: List[str] = field(default_factory=list)
    hashtag_frequency: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mentionCount": self.mention_count,
            "sentimentScore": self.sentiment_score,
            "trending": self.trending,
            "topInfluencers": list(self.top_influencers),
            "hashtagFrequency": dict(self.hashtag_frequency),
        }


@dataclass
class FarcasterAnalysis:
    cast_count: int = 0
    engagement_score: float = 0.0
    top_channels: List[str] = field(default_factory=list)
    active_users: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "castCount": self.cast_count,
            "engagementScore": self.engagement_score,
            "topChannels": list(self.top_channels),
            "activeUsers": self.active_users,
        }


@dataclass
class SocialTrendAnalysis:
    """Per-keyword aggregate of the Twitter and Farcaster sub-analyses."""

    keyword: str
    twitter: TwitterAnalysis
    farcaster: FarcasterAnalysis
    overall_score: int
    momentum: str
    cultural_relevance: float
    viral_potential: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "platforms": {
                "twitter": self.twitter.to_dict(),
                "farcaster": self.farcaster.to_dict(),
            },
            "overallScore": self.overall_score,
            "momentum": self.momentum,
            "culturalRelevance": self.cultural_relevance,
            "viralPotential": self.viral_potential,
        }


@dataclass
class SocialInfluencer:
    handle: str
    platform: str
    followers: int = 0
    engagement: int = 0
    relevance_score: float = 0.0
    recent_mentions: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "handle": self.handle,
            "platform": self.platform,
            "followers": self.followers,
            "engagement": self.engagement,
            "relevanceScore": self.relevance_score,
            "recentMentions": self.recent_mentions,
        }


__all__ = [
    "Config",
    "SentimentLexicon",
    "TwitterTrend",
    "MentionAuthor",
    "MentionMetrics",
    "SocialMention",
    "CastAuthor",
    "CastReactions",
    "FarcasterCast",
    "TwitterAnalysis",
    "FarcasterAnalysis",
    "SocialTrendAnalysis",
    "SocialInfluencer",
]
