"""Change feed and collection stores."""

from lawnboss.realtime.change_feed import ChangeEvent, ChangeFeed, get_change_feed
from lawnboss.realtime.collection_store import CollectionStore

__all__ = ["ChangeEvent", "ChangeFeed", "CollectionStore", "get_change_feed"]
