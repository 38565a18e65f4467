from rss_posts import JsonPostSource, RecentPosts
from rss_posts.config import load_settings
from rss_posts.constants import COMMUNITY_BLOGS
from rss_posts.formatting import format_posts
from rss_posts.logger import configure_logging

# Reads RSS_* and LOG_* variables, from a local .env file if present
settings = load_settings()
configure_logging(settings.log_level, json_format=settings.log_json)


def main() -> None:
    posts = RecentPosts(
        feed_urls=settings.feed_urls,
        post_sources=[
            JsonPostSource(url, timeout=settings.fetch_timeout)
            for url in settings.post_source_urls
        ],
        limit=settings.display_count,
    )
    print(format_posts(posts.items(), community_blogs=COMMUNITY_BLOGS), end="")


if __name__ == "__main__":
    main()
