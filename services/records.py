"""Record models for every dashboard collection.

Closed categorical sets are ``Literal`` types so their select options can be
read straight off the model. Fields a record variant may omit are explicit
``Optional`` fields.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')


class InventoryItem(Record):
    id: str
    name: str
    sku: str
    category: str
    quantity: int = Field(ge=0)
    min_stock: int = Field(ge=0)
    price: float = Field(ge=0)
    supplier: str
    last_updated: str
    status: Literal['in-stock', 'low-stock', 'out-of-stock']
    location: str


class OrderLine(Record):
    id: str
    name: str
    sku: str
    quantity: int = Field(ge=0)
    price: float = Field(ge=0)


class Order(Record):
    id: str
    order_number: str
    customer_name: str
    customer_email: str
    items: List[OrderLine]
    total_amount: float = Field(ge=0)
    status: Literal['pending', 'processing', 'shipped', 'delivered', 'cancelled']
    order_date: str
    expected_delivery: str
    shipping_address: str
    payment_status: Literal['paid', 'pending', 'failed']


class Alert(Record):
    id: str
    type: Literal['low-stock', 'out-of-stock', 'system', 'order', 'supplier']
    severity: Literal['critical', 'high', 'medium', 'low']
    title: str
    description: str
    item_name: Optional[str] = None
    sku: Optional[str] = None
    current_stock: Optional[int] = Field(default=None, ge=0)
    min_stock: Optional[int] = Field(default=None, ge=0)
    supplier: Optional[str] = None
    timestamp: str
    status: Literal['active', 'acknowledged', 'resolved']
    priority: int = Field(ge=0)


class Supplier(Record):
    id: str
    name: str
    contact_person: str
    email: str
    phone: str
    website: str
    address: str
    category: str
    rating: float = Field(ge=0, le=5)
    status: Literal['active', 'inactive', 'pending']
    total_orders: int = Field(ge=0)
    total_spent: float = Field(ge=0)
    last_order_date: str
    payment_terms: str


class Report(Record):
    id: str
    name: str
    type: Literal['inventory', 'sales', 'supplier', 'financial']
    last_generated: str
    status: Literal['ready', 'generating', 'failed']
    size: str
    format: Literal['PDF', 'Excel', 'CSV']


class PeriodMetrics(Record):
    period: str
    revenue: float = Field(ge=0)
    orders: int = Field(ge=0)
    items: int = Field(ge=0)


class AnalyticsPeriod(Record):
    period: str
    revenue: float = Field(ge=0)
    orders: int = Field(ge=0)
    customers: int = Field(ge=0)
    conversion_rate: float = Field(ge=0)
    avg_order_value: float = Field(ge=0)
    top_product: str
    top_category: str


class TopProduct(Record):
    name: str
    category: str
    sales: int = Field(ge=0)
    revenue: float = Field(ge=0)
    growth: float


class UserAccount(Record):
    id: str
    name: str
    email: str
    role: str
    permissions: List[str]
    last_login: str
    status: Literal['active', 'inactive']


class SystemLog(Record):
    id: str
    type: Literal['info', 'warning', 'error', 'success']
    message: str
    timestamp: str
    user: str
