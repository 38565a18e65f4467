"""
Static configuration: known feed identifiers, homepage feeds and limits.
"""
from __future__ import annotations

from typing import List, Tuple

VITALIK_FEED = "https://vitalik.eth.limo/feed.xml"
SOLIDITY_FEED = "https://soliditylang.org/feed.xml"
ZERO_X_PARC_FEED = "https://0xparc.org/blog/rss.xml"

# XML feeds shown in the homepage "Recent posts" section
FEEDS: List[str] = [
    VITALIK_FEED,
    SOLIDITY_FEED,
    ZERO_X_PARC_FEED,
    "https://blog.ethereum.org/en/feed.xml",
]

# (name, href) pairs rendered below the posts
COMMUNITY_BLOGS: List[Tuple[str, str]] = [
    ("Vitalik Buterin", "https://vitalik.eth.limo/"),
    ("Solidity", "https://soliditylang.org/blog/"),
    ("0xPARC", "https://0xparc.org/blog"),
    ("Ethereum Foundation", "https://blog.ethereum.org/"),
    ("Attestant", "https://www.attestant.io/posts/"),
]

RSS_DISPLAY_COUNT = 6
