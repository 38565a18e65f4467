from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List

import structlog

from .models import FeedItem
from .parser import parse_pub_date

logger = structlog.get_logger()


def find_invalid_dates(items: Iterable[FeedItem]) -> List[FeedItem]:
    """Return the items whose pub_date cannot be parsed, in input order."""
    return [it for it in items if parse_pub_date(it.pub_date) is None]


def compare_pub_dates(a: FeedItem, b: FeedItem) -> int:
    """
    Newest-first comparator.

    Returns -1 when `a` is newer, 1 when `b` is newer and 0 when both dates
    are equal or when either one cannot be parsed.
    """
    date_a = parse_pub_date(a.pub_date)
    date_b = parse_pub_date(b.pub_date)
    if date_a is None or date_b is None:
        return 0
    if date_a > date_b:
        return -1
    if date_a < date_b:
        return 1
    return 0


def sort_by_pub_date(items: Iterable[FeedItem]) -> List[FeedItem]:
    """
    Sort items by publish date, newest first.

    Unparseable dates are reported once per item and keep their input
    position; the parseable items are sorted into the remaining slots.
    Equal-to-everything comparisons are not a total order, so mixing them
    into one sort could leave valid dates out of order. sorted() is stable,
    so ties keep their input order.
    """
    items = list(items)
    valid = [parse_pub_date(it.pub_date) is not None for it in items]
    for it, ok in zip(items, valid):
        if ok:
            continue
        logger.warning(
            "invalid_pub_date",
            pub_date=it.pub_date,
            title=it.title,
            feed=it.source_feed_url,
        )
    ranked = iter(sorted(
        (it for it, ok in zip(items, valid) if ok),
        key=cmp_to_key(compare_pub_dates),
    ))
    return [next(ranked) if ok else it for it, ok in zip(items, valid)]
