"""Store do cliente e seus slices.

Uso:
    store = create_store()
    await ads.fetch_ads(store, ads_api)
    store.select(ads.NAME).ads
"""

from client.store import ad_images, ads, auth, comments, favorites, notification, users
from client.store.actions import Action, Slice
from client.store.core import Store
from client.store.notification import NotificationState, NotificationType, Notifier
from client.store.thunk import run_thunk

SLICES: tuple[Slice, ...] = (
    auth.SLICE,
    users.SLICE,
    ads.SLICE,
    ad_images.SLICE,
    favorites.SLICE,
    comments.SLICE,
    notification.SLICE,
)


def create_store(*, notification_timeout: float = 5.0) -> Store:
    """Store com todos os slices da aplicação."""
    return Store(SLICES, notification_timeout=notification_timeout)


__all__ = [
    "SLICES",
    "Action",
    "NotificationState",
    "NotificationType",
    "Notifier",
    "Slice",
    "Store",
    "ad_images",
    "ads",
    "auth",
    "comments",
    "create_store",
    "favorites",
    "notification",
    "run_thunk",
    "users",
]
