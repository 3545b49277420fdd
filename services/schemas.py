from typing import Dict

from query.schema import RecordSchema
from services.records import (
    Alert,
    AnalyticsPeriod,
    InventoryItem,
    Order,
    PeriodMetrics,
    Report,
    Supplier,
    SystemLog,
    TopProduct,
    UserAccount,
)

INVENTORY_SCHEMA = RecordSchema(
    domain='inventory',
    model=InventoryItem,
    search_fields=('name', 'sku'),
    filter_fields=('category', 'status', 'location'),
)

ORDERS_SCHEMA = RecordSchema(
    domain='orders',
    model=Order,
    search_fields=('order_number', 'customer_name', 'customer_email'),
    filter_fields=('status', 'payment_status'),
)

ALERTS_SCHEMA = RecordSchema(
    domain='alerts',
    model=Alert,
    search_fields=('title', 'description', 'item_name', 'sku'),
    filter_fields=('severity', 'type', 'status'),
)

SUPPLIERS_SCHEMA = RecordSchema(
    domain='suppliers',
    model=Supplier,
    search_fields=('name', 'contact_person', 'email'),
    filter_fields=('category', 'status'),
)

REPORTS_SCHEMA = RecordSchema(
    domain='reports',
    model=Report,
    filter_fields=('type',),
)

REPORT_PERIODS_SCHEMA = RecordSchema(
    domain='report_periods',
    model=PeriodMetrics,
    id_field='period',
)

ANALYTICS_PERIODS_SCHEMA = RecordSchema(
    domain='analytics_periods',
    model=AnalyticsPeriod,
    id_field='period',
)

TOP_PRODUCTS_SCHEMA = RecordSchema(
    domain='top_products',
    model=TopProduct,
    id_field='name',
    search_fields=('name',),
    filter_fields=('category',),
)

USERS_SCHEMA = RecordSchema(
    domain='users',
    model=UserAccount,
    search_fields=('name', 'email'),
    filter_fields=('status', 'role'),
)

SYSTEM_LOGS_SCHEMA = RecordSchema(
    domain='system_logs',
    model=SystemLog,
    search_fields=('message', 'user'),
    filter_fields=('type',),
)

SCHEMAS: Dict[str, RecordSchema] = {
    schema.domain: schema
    for schema in (
        INVENTORY_SCHEMA,
        ORDERS_SCHEMA,
        ALERTS_SCHEMA,
        SUPPLIERS_SCHEMA,
        REPORTS_SCHEMA,
        REPORT_PERIODS_SCHEMA,
        ANALYTICS_PERIODS_SCHEMA,
        TOP_PRODUCTS_SCHEMA,
        USERS_SCHEMA,
        SYSTEM_LOGS_SCHEMA,
    )
}
