"""Stock models and provider interface."""
from abc import ABC, abstractmethod
from datetime import date, datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, model_validator


class AlertType(str, Enum):
    LOW = "low"
    OUT = "out"


class StockItemData(BaseModel):
    """Fields of a raw-ingredient stock entry, without its id."""

    name: str
    category: str
    quantity: int = Field(default=0, ge=0)
    unit: str
    min_threshold: int = Field(ge=0)
    max_threshold: int = Field(ge=0)
    last_restocked: date = Field(default_factory=date.today)
    supplier: Optional[str] = None
    cost_per_unit: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def check_thresholds(self) -> "StockItemData":
        if self.max_threshold < self.min_threshold:
            raise ValueError(
                f"max_threshold ({self.max_threshold}) must not be below "
                f"min_threshold ({self.min_threshold})"
            )
        return self


class StockItem(StockItemData):
    """Raw-ingredient stock entry."""

    id: str


class StockItemUpdate(BaseModel):
    """Partial update of a stock entry. Unset fields are left alone."""

    name: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    unit: Optional[str] = None
    min_threshold: Optional[int] = Field(default=None, ge=0)
    max_threshold: Optional[int] = Field(default=None, ge=0)
    supplier: Optional[str] = None
    cost_per_unit: Optional[float] = Field(default=None, ge=0)


class StockAlert(BaseModel):
    """Low or out-of-stock notice for a ledger entry."""

    id: str
    item_id: str
    item_name: str
    current_stock: int
    min_threshold: int
    alert_type: AlertType
    created_at: datetime
    is_read: bool = False


class StockProvider(ABC):
    """Abstract base class for stock providers."""

    @abstractmethod
    async def get_stock(self) -> List[StockItem]:
        """Get all stock entries."""
        pass
