"""Stock ledger service."""
import itertools
import logging
import re
from datetime import date, datetime, timezone
from typing import List, Optional

from app.services.stock.base import (
    AlertType,
    StockAlert,
    StockItem,
    StockItemData,
    StockItemUpdate,
    StockProvider,
)

logger = logging.getLogger(__name__)

_STOCK_ID_PATTERN = re.compile(r"^STK-(\d+)$")


def generate_alerts(stock: List[StockItem]) -> List[StockAlert]:
    """
    Build the alert feed from a snapshot of the ledger.

    One "out" alert per entry at zero, one "low" alert per entry below its
    minimum threshold.
    """
    alerts = []
    now = datetime.now(timezone.utc)
    for item in stock:
        if item.quantity == 0:
            alert_type = AlertType.OUT
        elif item.quantity < item.min_threshold:
            alert_type = AlertType.LOW
        else:
            continue
        alerts.append(
            StockAlert(
                id=f"ALT-{item.id}-{alert_type.value.upper()}",
                item_id=item.id,
                item_name=item.name,
                current_stock=item.quantity,
                min_threshold=item.min_threshold,
                alert_type=alert_type,
                created_at=now,
            )
        )
    return alerts


class StockLedger:
    """Raw-ingredient inventory with a low/out-of-stock alert feed.

    Alerts are a snapshot: they are built when the ledger is created or
    refreshed, and do not follow later quantity changes on their own.
    """

    def __init__(self, items: Optional[List[StockItem]] = None):
        self._items: List[StockItem] = list(items or [])
        self._alerts: List[StockAlert] = generate_alerts(self._items)
        highest = 0
        for item in self._items:
            match = _STOCK_ID_PATTERN.match(item.id)
            if match:
                highest = max(highest, int(match.group(1)))
        self._sequence = itertools.count(highest + 1)

    @classmethod
    async def load(cls, provider: StockProvider) -> "StockLedger":
        """Build a ledger from a provider, copying entries so sessions never share them."""
        stock = await provider.get_stock()
        return cls([item.model_copy(deep=True) for item in stock])

    @property
    def items(self) -> List[StockItem]:
        return list(self._items)

    @property
    def alerts(self) -> List[StockAlert]:
        return list(self._alerts)

    def get_item(self, item_id: str) -> Optional[StockItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def _remove_alerts_for(self, item_id: str) -> None:
        self._alerts = [alert for alert in self._alerts if alert.item_id != item_id]

    def update_stock(self, item_id: str, quantity: int) -> Optional[StockItem]:
        """Set an entry's quantity, floored at zero. No upper bound is applied here."""
        item = self.get_item(item_id)
        if item:
            item.quantity = max(0, quantity)
            logger.info(f"[STOCK] {item.name} quantity set to {item.quantity} {item.unit}")
        return item

    def restock_item(self, item_id: str, amount: int) -> Optional[StockItem]:
        """
        Add to an entry's quantity, capped at its maximum threshold.

        Clears any alerts for the entry and stamps today's restock date.

        Raises:
            ValueError: if amount is less than 1
        """
        if amount < 1:
            raise ValueError(f"Restock amount must be at least 1, got {amount}")

        item = self.get_item(item_id)
        if item:
            item.quantity = max(0, min(item.max_threshold, item.quantity + amount))
            item.last_restocked = date.today()
            self._remove_alerts_for(item_id)
            logger.info(
                f"[STOCK] Restocked {item.name} by {amount}, now {item.quantity} {item.unit}"
            )
        return item

    def add_stock(self, data: StockItemData) -> StockItem:
        """Add a new entry and return it with its assigned id."""
        item_id = f"STK-{next(self._sequence):03d}"
        while self.get_item(item_id):
            item_id = f"STK-{next(self._sequence):03d}"
        item = StockItem(id=item_id, **data.model_dump())
        self._items.append(item)
        logger.info(f"[STOCK] Added {item.id} ({item.name})")
        return item

    def update_stock_item(self, item_id: str, updates: StockItemUpdate) -> Optional[StockItem]:
        """
        Apply the fields set on updates to an entry.

        Fields sent as null are cleared. The merged entry is validated before
        anything is changed.

        Raises:
            pydantic.ValidationError: if the merged entry is invalid, e.g. a
                required field cleared or max_threshold below min_threshold
        """
        item = self.get_item(item_id)
        if item:
            changes = updates.model_dump(exclude_unset=True)
            merged = StockItem.model_validate({**item.model_dump(), **changes})
            for field in changes:
                setattr(item, field, getattr(merged, field))
            logger.info(f"[STOCK] Updated {item_id}: {', '.join(changes) or 'no fields'}")
        return item

    def delete_stock_item(self, item_id: str) -> bool:
        """Remove an entry and its alerts. Returns False if it did not exist."""
        item = self.get_item(item_id)
        if not item:
            return False
        self._items = [i for i in self._items if i.id != item_id]
        self._remove_alerts_for(item_id)
        logger.info(f"[STOCK] Deleted {item_id} ({item.name})")
        return True

    def refresh_alerts(self) -> List[StockAlert]:
        """Rebuild the alert feed from current quantities, keeping read flags."""
        read_ids = {alert.id for alert in self._alerts if alert.is_read}
        self._alerts = generate_alerts(self._items)
        for alert in self._alerts:
            alert.is_read = alert.id in read_ids
        return self.alerts

    def mark_alert_as_read(self, alert_id: str) -> Optional[StockAlert]:
        for alert in self._alerts:
            if alert.id == alert_id:
                alert.is_read = True
                return alert
        return None

    def clear_all_alerts(self) -> None:
        self._alerts = []

    def get_unread_alerts(self) -> List[StockAlert]:
        return [alert for alert in self._alerts if not alert.is_read]

    def get_low_stock_items(self) -> List[StockItem]:
        return [i for i in self._items if 0 < i.quantity < i.min_threshold]

    def get_out_of_stock_items(self) -> List[StockItem]:
        return [i for i in self._items if i.quantity == 0]

    def get_stock_by_category(self, category: str) -> List[StockItem]:
        return [i for i in self._items if i.category == category]
