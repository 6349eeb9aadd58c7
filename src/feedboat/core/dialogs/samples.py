"""Static sample content for the dashboard.

Feeds and articles come from an external producer in a real deployment;
these let the dashboard run on its own.
"""

from feedboat.core.dialogs.detail_dialog import DetailDialog
from feedboat.core.dialogs.list_dialog import ListDialog

SAMPLE_FEEDS = [
    "   1    (14/532) Planet Debian",
    "   2       (0/1) Интересное на ДОУ",
    "   3 N (23/4558) Fabio Franchino’s blog",
    "   4      (0/13) @prometheusmooc on Twitter",
    "   5    (12/482) /dev/lawyer",
    "   6 N   (3/148) non-O(n) musings",
]

SAMPLE_ITEMS = [
    "   1    Apr 28   3.9K  NVidia acquires Mellanox",
    "   2    Apr 28    591  [$] Dumping kernel data structure with BPF",
    "   3    Apr 28    971  Wooden server rack",
    "   4    Apr 28   2.2K  Trouble fully setting up baremetal homelab",
    "   5    Apr 28    548  Looking for a very small server with 2 plus hot swap "
    "3.5 inch drives I can install linux on.",
    "   6    Apr 28   1.7K  VLAN and iOT devices",
]

SAMPLE_ARTICLE = [
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Morbi non ante "
    "porttitor, commodo lorem vitae, cursus mauris. Mauris mattis, turpis id "
    "convallis posuere, erat ante pharetra velit, sed blandit enim augue in urna.",
    "",
    "Phasellus ut nibh at urna pellentesque ultricies.",
    "",
    "Proin faucibus cursus libero quis semper. Nam vitae convallis sapien. "
    "Curabitur sollicitudin magna vitae felis finibus, nec tristique dui "
    "dignissim: https://newsboat.org/releases/2.19/docs/newsboat.html?parameter1="
    "first_value&parameter2=second_long_value. Fusce eu ex dui.",
    "",
    "Suspendisse pretium convallis orci, eget suscipit est dignissim in. Nulla "
    "facilisi. Ut pulvinar neque ut nisl maximus, a finibus tellus commodo.",
    "",
    "Etiam eu luctus metus, vitae pulvinar dui. Donec in mauris ultrices, "
    "rhoncus nisl nec, condimentum arcu. Aenean efficitur elit in tempor "
    "scelerisque.",
]


def _feed_name(entry: str) -> str:
    """Strip the index and counters from a feed-list row."""
    return entry.split(")", 1)[-1].strip()


def _item_title(entry: str) -> str:
    """Strip the index, date and size columns from an item-list row."""
    parts = entry.split(None, 4)
    return parts[4] if len(parts) == 5 else entry.strip()


def open_article(index: int, entry: str) -> DetailDialog:
    title = _item_title(entry)
    header = [
        "Feed: Example feed",
        f"Title: {title}",
        "Link: https://example.com/an-interesting-article.html",
        "Date: Mon, 02 Mar 2004 05:06:07 +0800",
        "",
    ]
    return DetailDialog(title, SAMPLE_ARTICLE, header=header)


def open_feed(index: int, entry: str) -> ListDialog:
    return ListDialog(_feed_name(entry), SAMPLE_ITEMS, opener=open_article)


def build_feed_list() -> ListDialog:
    """The dialog the dashboard starts with."""
    return ListDialog(
        f"Your Feeds ({len(SAMPLE_FEEDS)} feeds)", SAMPLE_FEEDS, opener=open_feed
    )
