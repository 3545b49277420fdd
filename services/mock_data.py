"""In-memory fixture collections standing in for a backend.

``load_records`` is the data-source seam: pages and services only ever ask it
for a validated record frame, so a real API or database client can replace
this module without touching the query engine.
"""
import logging
from functools import lru_cache
from typing import Dict, List

import pandas as pd

from services.schemas import SCHEMAS

logger = logging.getLogger(__name__)

INVENTORY_ITEMS: List[Dict[str, object]] = [
    {
        'id': '1', 'name': 'Wireless Headphones', 'sku': 'WH-001', 'category': 'Electronics',
        'quantity': 45, 'min_stock': 10, 'price': 99.99, 'supplier': 'TechCorp',
        'last_updated': '2024-01-15', 'status': 'in-stock', 'location': 'Warehouse A',
    },
    {
        'id': '2', 'name': 'Office Chair', 'sku': 'OC-002', 'category': 'Furniture',
        'quantity': 8, 'min_stock': 15, 'price': 249.99, 'supplier': 'FurniMax',
        'last_updated': '2024-01-14', 'status': 'low-stock', 'location': 'Warehouse B',
    },
    {
        'id': '3', 'name': 'Laptop Stand', 'sku': 'LS-003', 'category': 'Accessories',
        'quantity': 0, 'min_stock': 5, 'price': 39.99, 'supplier': 'AccessoryPlus',
        'last_updated': '2024-01-13', 'status': 'out-of-stock', 'location': 'Warehouse A',
    },
    {
        'id': '4', 'name': 'Bluetooth Speaker', 'sku': 'BS-004', 'category': 'Electronics',
        'quantity': 23, 'min_stock': 8, 'price': 79.99, 'supplier': 'SoundTech',
        'last_updated': '2024-01-15', 'status': 'in-stock', 'location': 'Warehouse A',
    },
    {
        'id': '5', 'name': 'Desk Lamp', 'sku': 'DL-005', 'category': 'Lighting',
        'quantity': 12, 'min_stock': 6, 'price': 34.99, 'supplier': 'LightCo',
        'last_updated': '2024-01-12', 'status': 'in-stock', 'location': 'Warehouse C',
    },
    {
        'id': '6', 'name': 'Ergonomic Mouse', 'sku': 'EM-006', 'category': 'Accessories',
        'quantity': 3, 'min_stock': 10, 'price': 29.99, 'supplier': 'ErgoTech',
        'last_updated': '2024-01-11', 'status': 'low-stock', 'location': 'Warehouse B',
    },
]

ORDERS: List[Dict[str, object]] = [
    {
        'id': '1', 'order_number': 'ORD-2024-001', 'customer_name': 'John Smith',
        'customer_email': 'john.smith@email.com',
        'items': [
            {'id': '1', 'name': 'Wireless Headphones', 'sku': 'WH-001', 'quantity': 2, 'price': 99.99},
            {'id': '2', 'name': 'Bluetooth Speaker', 'sku': 'BS-004', 'quantity': 1, 'price': 79.99},
        ],
        'total_amount': 279.97, 'status': 'delivered', 'order_date': '2024-01-10',
        'expected_delivery': '2024-01-15', 'shipping_address': '123 Main St, City, State 12345',
        'payment_status': 'paid',
    },
    {
        'id': '2', 'order_number': 'ORD-2024-002', 'customer_name': 'Sarah Johnson',
        'customer_email': 'sarah.j@email.com',
        'items': [
            {'id': '3', 'name': 'Office Chair', 'sku': 'OC-002', 'quantity': 1, 'price': 249.99},
        ],
        'total_amount': 249.99, 'status': 'processing', 'order_date': '2024-01-12',
        'expected_delivery': '2024-01-18', 'shipping_address': '456 Oak Ave, City, State 12345',
        'payment_status': 'paid',
    },
    {
        'id': '3', 'order_number': 'ORD-2024-003', 'customer_name': 'Mike Wilson',
        'customer_email': 'mike.w@email.com',
        'items': [
            {'id': '4', 'name': 'Desk Lamp', 'sku': 'DL-005', 'quantity': 3, 'price': 34.99},
            {'id': '5', 'name': 'Ergonomic Mouse', 'sku': 'EM-006', 'quantity': 2, 'price': 29.99},
        ],
        'total_amount': 164.95, 'status': 'pending', 'order_date': '2024-01-14',
        'expected_delivery': '2024-01-20', 'shipping_address': '789 Pine Rd, City, State 12345',
        'payment_status': 'pending',
    },
    {
        'id': '4', 'order_number': 'ORD-2024-004', 'customer_name': 'Lisa Brown',
        'customer_email': 'lisa.b@email.com',
        'items': [
            {'id': '6', 'name': 'Laptop Stand', 'sku': 'LS-003', 'quantity': 1, 'price': 39.99},
        ],
        'total_amount': 39.99, 'status': 'cancelled', 'order_date': '2024-01-13',
        'expected_delivery': '2024-01-17', 'shipping_address': '321 Elm St, City, State 12345',
        'payment_status': 'failed',
    },
]

ALERTS: List[Dict[str, object]] = [
    {
        'id': '1', 'type': 'low-stock', 'severity': 'high', 'title': 'Low Stock Alert',
        'description': 'Item is running low on stock and needs reordering',
        'item_name': 'Office Chair', 'sku': 'OC-002', 'current_stock': 8, 'min_stock': 15,
        'supplier': 'FurniMax', 'timestamp': '2024-01-15 10:30:00', 'status': 'active', 'priority': 1,
    },
    {
        'id': '2', 'type': 'out-of-stock', 'severity': 'critical', 'title': 'Out of Stock Alert',
        'description': 'Item is completely out of stock',
        'item_name': 'Laptop Stand', 'sku': 'LS-003', 'current_stock': 0, 'min_stock': 5,
        'supplier': 'AccessoryPlus', 'timestamp': '2024-01-15 09:15:00', 'status': 'active', 'priority': 1,
    },
    {
        'id': '3', 'type': 'low-stock', 'severity': 'medium', 'title': 'Low Stock Alert',
        'description': 'Item is approaching minimum stock level',
        'item_name': 'Ergonomic Mouse', 'sku': 'EM-006', 'current_stock': 3, 'min_stock': 10,
        'supplier': 'ErgoTech', 'timestamp': '2024-01-15 08:45:00', 'status': 'acknowledged', 'priority': 2,
    },
    {
        'id': '4', 'type': 'system', 'severity': 'low', 'title': 'System Maintenance',
        'description': 'Scheduled system maintenance in 2 hours',
        'timestamp': '2024-01-15 07:30:00', 'status': 'active', 'priority': 3,
    },
    {
        'id': '5', 'type': 'supplier', 'severity': 'medium', 'title': 'Supplier Delay',
        'description': 'Expected delivery delayed by 3 days', 'supplier': 'TechCorp',
        'timestamp': '2024-01-14 16:20:00', 'status': 'active', 'priority': 2,
    },
    {
        'id': '6', 'type': 'order', 'severity': 'high', 'title': 'Order Issue',
        'description': 'Payment failed for order ORD-2024-004',
        'timestamp': '2024-01-14 14:10:00', 'status': 'resolved', 'priority': 1,
    },
]

SUPPLIERS: List[Dict[str, object]] = [
    {
        'id': '1', 'name': 'TechCorp Solutions', 'contact_person': 'Mike Johnson',
        'email': 'mike@techcorp.com', 'phone': '+1 (555) 123-4567', 'website': 'www.techcorp.com',
        'address': '123 Tech Street, Silicon Valley, CA 94025', 'category': 'Electronics',
        'rating': 4.8, 'status': 'active', 'total_orders': 45, 'total_spent': 125000,
        'last_order_date': '2024-01-15', 'payment_terms': 'Net 30',
    },
    {
        'id': '2', 'name': 'FurniMax Industries', 'contact_person': 'Sarah Williams',
        'email': 'sarah@furnimax.com', 'phone': '+1 (555) 234-5678', 'website': 'www.furnimax.com',
        'address': '456 Furniture Ave, Chicago, IL 60601', 'category': 'Furniture',
        'rating': 4.5, 'status': 'active', 'total_orders': 32, 'total_spent': 89000,
        'last_order_date': '2024-01-14', 'payment_terms': 'Net 45',
    },
    {
        'id': '3', 'name': 'AccessoryPlus Co.', 'contact_person': 'David Chen',
        'email': 'david@accessoryplus.com', 'phone': '+1 (555) 345-6789', 'website': 'www.accessoryplus.com',
        'address': '789 Accessory Blvd, Miami, FL 33101', 'category': 'Accessories',
        'rating': 4.2, 'status': 'active', 'total_orders': 28, 'total_spent': 67000,
        'last_order_date': '2024-01-13', 'payment_terms': 'Net 30',
    },
    {
        'id': '4', 'name': 'SoundTech Audio', 'contact_person': 'Lisa Rodriguez',
        'email': 'lisa@soundtech.com', 'phone': '+1 (555) 456-7890', 'website': 'www.soundtech.com',
        'address': '321 Audio Lane, Nashville, TN 37201', 'category': 'Electronics',
        'rating': 4.7, 'status': 'active', 'total_orders': 38, 'total_spent': 95000,
        'last_order_date': '2024-01-12', 'payment_terms': 'Net 30',
    },
    {
        'id': '5', 'name': 'LightCo Lighting', 'contact_person': 'Robert Brown',
        'email': 'robert@lightco.com', 'phone': '+1 (555) 567-8901', 'website': 'www.lightco.com',
        'address': '654 Light Street, Las Vegas, NV 89101', 'category': 'Lighting',
        'rating': 4.3, 'status': 'pending', 'total_orders': 15, 'total_spent': 42000,
        'last_order_date': '2024-01-10', 'payment_terms': 'Net 30',
    },
    {
        'id': '6', 'name': 'ErgoTech Solutions', 'contact_person': 'Jennifer Davis',
        'email': 'jennifer@ergotech.com', 'phone': '+1 (555) 678-9012', 'website': 'www.ergotech.com',
        'address': '987 Ergo Way, Seattle, WA 98101', 'category': 'Accessories',
        'rating': 4.6, 'status': 'inactive', 'total_orders': 22, 'total_spent': 58000,
        'last_order_date': '2023-12-20', 'payment_terms': 'Net 30',
    },
]

REPORTS: List[Dict[str, object]] = [
    {'id': '1', 'name': 'Monthly Inventory Report', 'type': 'inventory', 'last_generated': '2024-01-15',
     'status': 'ready', 'size': '2.3 MB', 'format': 'PDF'},
    {'id': '2', 'name': 'Q4 Sales Analysis', 'type': 'sales', 'last_generated': '2024-01-10',
     'status': 'ready', 'size': '1.8 MB', 'format': 'Excel'},
    {'id': '3', 'name': 'Supplier Performance Report', 'type': 'supplier', 'last_generated': '2024-01-08',
     'status': 'ready', 'size': '3.1 MB', 'format': 'PDF'},
    {'id': '4', 'name': 'Financial Summary 2023', 'type': 'financial', 'last_generated': '2024-01-05',
     'status': 'ready', 'size': '4.2 MB', 'format': 'Excel'},
    {'id': '5', 'name': 'Low Stock Alert Report', 'type': 'inventory', 'last_generated': '2024-01-14',
     'status': 'generating', 'size': '0.5 MB', 'format': 'CSV'},
]

REPORT_PERIODS: List[Dict[str, object]] = [
    {'period': 'Jan', 'revenue': 45000, 'orders': 120, 'items': 850},
    {'period': 'Feb', 'revenue': 52000, 'orders': 135, 'items': 920},
    {'period': 'Mar', 'revenue': 48000, 'orders': 128, 'items': 880},
    {'period': 'Apr', 'revenue': 61000, 'orders': 155, 'items': 1050},
    {'period': 'May', 'revenue': 55000, 'orders': 142, 'items': 980},
    {'period': 'Jun', 'revenue': 67000, 'orders': 168, 'items': 1150},
]

ANALYTICS_PERIODS: List[Dict[str, object]] = [
    {
        'period': 'Jan 2024', 'revenue': 45000, 'orders': 120, 'customers': 85,
        'conversion_rate': 3.2, 'avg_order_value': 375,
        'top_product': 'Wireless Headphones', 'top_category': 'Electronics',
    },
    {
        'period': 'Feb 2024', 'revenue': 52000, 'orders': 135, 'customers': 92,
        'conversion_rate': 3.8, 'avg_order_value': 385,
        'top_product': 'Office Chair', 'top_category': 'Furniture',
    },
    {
        'period': 'Mar 2024', 'revenue': 48000, 'orders': 128, 'customers': 88,
        'conversion_rate': 3.5, 'avg_order_value': 375,
        'top_product': 'Bluetooth Speaker', 'top_category': 'Electronics',
    },
]

TOP_PRODUCTS: List[Dict[str, object]] = [
    {'name': 'Wireless Headphones', 'category': 'Electronics', 'sales': 45, 'revenue': 4495.55, 'growth': 12.5},
    {'name': 'Office Chair', 'category': 'Furniture', 'sales': 32, 'revenue': 7999.68, 'growth': 8.3},
    {'name': 'Bluetooth Speaker', 'category': 'Electronics', 'sales': 38, 'revenue': 3039.62, 'growth': 15.2},
    {'name': 'Desk Lamp', 'category': 'Lighting', 'sales': 28, 'revenue': 979.72, 'growth': 5.7},
    {'name': 'Ergonomic Mouse', 'category': 'Accessories', 'sales': 25, 'revenue': 749.75, 'growth': 3.1},
]

USERS: List[Dict[str, object]] = [
    {'id': '1', 'name': 'John Doe', 'email': 'john@company.com', 'role': 'Admin',
     'permissions': ['read', 'write', 'delete', 'admin'], 'last_login': '2024-01-15 10:30:00', 'status': 'active'},
    {'id': '2', 'name': 'Sarah Johnson', 'email': 'sarah@company.com', 'role': 'Manager',
     'permissions': ['read', 'write'], 'last_login': '2024-01-15 09:15:00', 'status': 'active'},
    {'id': '3', 'name': 'Mike Wilson', 'email': 'mike@company.com', 'role': 'User',
     'permissions': ['read'], 'last_login': '2024-01-14 16:45:00', 'status': 'active'},
]

SYSTEM_LOGS: List[Dict[str, object]] = [
    {'id': '1', 'type': 'info', 'message': 'System backup completed successfully',
     'timestamp': '2024-01-15 10:30:00', 'user': 'System'},
    {'id': '2', 'type': 'warning', 'message': 'Low disk space detected on server',
     'timestamp': '2024-01-15 09:15:00', 'user': 'System'},
    {'id': '3', 'type': 'success', 'message': 'User login successful',
     'timestamp': '2024-01-15 08:45:00', 'user': 'john@company.com'},
    {'id': '4', 'type': 'error', 'message': 'Failed to connect to database',
     'timestamp': '2024-01-15 07:30:00', 'user': 'System'},
]

FIXTURES: Dict[str, List[Dict[str, object]]] = {
    'inventory': INVENTORY_ITEMS,
    'orders': ORDERS,
    'alerts': ALERTS,
    'suppliers': SUPPLIERS,
    'reports': REPORTS,
    'report_periods': REPORT_PERIODS,
    'analytics_periods': ANALYTICS_PERIODS,
    'top_products': TOP_PRODUCTS,
    'users': USERS,
    'system_logs': SYSTEM_LOGS,
}


@lru_cache(maxsize=None)
def _load_frame(domain: str) -> pd.DataFrame:
    if domain not in FIXTURES:
        raise KeyError(f"Unknown record domain: {domain}")
    df = SCHEMAS[domain].to_frame(FIXTURES[domain])
    logger.info(f"Loaded {len(df)} {domain} fixture records")
    return df


def load_records(domain: str) -> pd.DataFrame:
    """Validated record frame for ``domain``; callers get their own copy."""
    return _load_frame(domain).copy()
