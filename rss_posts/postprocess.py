from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Mapping, Optional

from .constants import SOLIDITY_FEED, VITALIK_FEED, ZERO_X_PARC_FEED
from .models import FeedItem


@dataclass(frozen=True)
class LinkRewrite:
    """Replace the first occurrence of `old` in a link with `new`."""
    old: str
    new: str

    def apply(self, link: str) -> str:
        return link.replace(self.old, self.new, 1)


@dataclass(frozen=True)
class EnrichmentPolicy:
    """Presentation metadata attached to every item of one feed."""
    image_asset: str
    link_rewrite: Optional[LinkRewrite] = None


FEED_ENRICHMENTS: Mapping[str, EnrichmentPolicy] = {
    VITALIK_FEED: EnrichmentPolicy(
        image_asset="/images/vitalik-blog-banner.svg",
        link_rewrite=LinkRewrite(".ca", ".eth.limo"),
    ),
    SOLIDITY_FEED: EnrichmentPolicy(image_asset="/images/solidity-banner.png"),
    ZERO_X_PARC_FEED: EnrichmentPolicy(image_asset="/images/0xparc-logo.svg"),
}


def enrich(item: FeedItem, enrichments: Mapping[str, EnrichmentPolicy] = FEED_ENRICHMENTS) -> FeedItem:
    """
    Annotate one item according to its source feed.
    Unknown feeds are returned as-is.
    """
    policy = enrichments.get(item.source_feed_url)
    if policy is None:
        return item
    link = policy.link_rewrite.apply(item.link) if policy.link_rewrite else item.link
    return replace(item, img_src=policy.image_asset, link=link)


def post_process(
    items: Iterable[FeedItem],
    enrichments: Mapping[str, EnrichmentPolicy] = FEED_ENRICHMENTS,
) -> List[FeedItem]:
    """Apply `enrich` to every item, preserving length and order."""
    return [enrich(it, enrichments) for it in items]
