"""
Blog post ordering and related-post scoring
"""
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from ranch_site.apps.blog.schemas import BlogPost

# Sort key for posts without a usable date: older than any real date
OLDEST = datetime.min.replace(tzinfo=timezone.utc)

CATEGORY_WEIGHT = 3
TAG_WEIGHT = 1


def parse_published_date(value: Optional[str]) -> datetime:
    """
    Parse an ISO-8601 published date.

    Missing or unparseable dates become ``OLDEST`` so they sort last
    without dropping the post. Naive values are read as UTC.
    """
    if not value:
        return OLDEST
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return OLDEST
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def sort_by_published_date(posts: Iterable[BlogPost]) -> List[BlogPost]:
    """Newest first; posts sharing a date keep their original order."""
    return sorted(posts, key=lambda p: parse_published_date(p.metadata.published_date), reverse=True)


def relevance_score(source: BlogPost, candidate: BlogPost) -> int:
    source_categories = set(source.category_ids)
    source_tags = set(source.tag_ids)
    score = sum(CATEGORY_WEIGHT for cat_id in candidate.category_ids if cat_id in source_categories)
    score += sum(TAG_WEIGHT for tag_id in candidate.tag_ids if tag_id in source_tags)
    return score


def score_related_posts(source: BlogPost, candidates: Iterable[BlogPost], limit: int) -> List[BlogPost]:
    """
    Rank candidates by shared categories (3 points each) and tags (1 point each).

    The source post is never returned, unrelated posts (score 0) are
    dropped, and equal scores keep the candidates' input order.
    """
    scored: List[Tuple[BlogPost, int]] = []
    for candidate in candidates:
        if candidate.id == source.id:
            continue
        score = relevance_score(source, candidate)
        if score > 0:
            scored.append((candidate, score))

    scored.sort(key=lambda item: item[1], reverse=True)
    return [post for post, _ in scored[:limit]]
