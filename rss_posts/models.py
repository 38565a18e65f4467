from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FeedItem:
    """
    Stable public model representing one syndicated post.

    WARNING: Do not change fields lightly. This is the library's contract.

    `pub_date` is kept as the raw string the source published; it is only
    parsed when ranking. `img_src` stays None until post-processing.
    """
    title: str
    link: str
    pub_date: str
    source_feed_url: str
    img_src: Optional[str] = None
    source: Optional[str] = None
    source_url: Optional[str] = None
