"""
Tests for the per-page views over the fixture data.
Run with: python -m pytest tests/test_services.py -v
"""
from pathlib import Path

import pandas as pd
import pytest

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from services.alert_metrics import get_alert_view
from services.analytics_metrics import get_analytics_view
from services.inventory_metrics import get_inventory_view
from services.mock_data import load_records
from services.order_metrics import get_order_view
from services.report_metrics import get_period_series, get_report_view
from services.settings_metrics import get_settings_view
from services.supplier_metrics import get_supplier_view


class TestInventoryView:
    def test_headline_stats(self):
        stats = get_inventory_view()['stats']
        assert stats['total_items'] == 6
        assert stats['low_stock_items'] == 2
        assert stats['out_of_stock_items'] == 1
        assert stats['total_value'] == pytest.approx(8849.09, abs=0.01)

    def test_low_stock_filter(self):
        view = get_inventory_view(status='low-stock')
        assert view['visible']['name'].tolist() == ['Office Chair', 'Ergonomic Mouse']
        assert view['stats']['low_stock_items'] == 2
        assert view['filtered'] is True

    def test_search_is_case_insensitive(self):
        assert get_inventory_view(search_text='chair')['visible']['name'].tolist() == ['Office Chair']
        assert get_inventory_view(search_text='CHAIR')['visible']['name'].tolist() == ['Office Chair']

    def test_search_by_sku(self):
        assert get_inventory_view(search_text='ls-003')['visible']['name'].tolist() == ['Laptop Stand']

    def test_filters_combine(self):
        view = get_inventory_view(category='Electronics', location='Warehouse A')
        assert view['visible']['name'].tolist() == ['Wireless Headphones', 'Bluetooth Speaker']

    def test_no_match_keeps_stats(self):
        view = get_inventory_view(search_text='zzz')
        assert view['visible'].empty
        assert view['stats']['total_items'] == 6

    def test_options(self):
        options = get_inventory_view()['options']
        assert options['category'] == ['Electronics', 'Furniture', 'Accessories', 'Lighting']
        assert options['status'] == ['in-stock', 'low-stock', 'out-of-stock']
        assert options['location'] == ['Warehouse A', 'Warehouse B', 'Warehouse C']

    def test_explicit_records(self):
        records = load_records('inventory').head(2)
        stats = get_inventory_view(records=records)['stats']
        assert stats['total_items'] == 2
        assert stats['total_value'] == pytest.approx(45 * 99.99 + 8 * 249.99)


class TestOrderView:
    def test_paid_revenue(self):
        stats = get_order_view()['stats']
        assert stats['total_revenue'] == pytest.approx(529.96)
        assert stats['total_orders'] == 4
        assert stats['pending_orders'] == 1
        assert stats['processing_orders'] == 1

    def test_item_counts(self):
        visible = get_order_view()['visible']
        assert visible['item_count'].tolist() == [2, 1, 2, 1]

    def test_search_by_customer(self):
        view = get_order_view(search_text='lisa')
        assert view['visible']['order_number'].tolist() == ['ORD-2024-004']

    def test_payment_status_filter(self):
        view = get_order_view(payment_status='paid')
        assert view['visible']['order_number'].tolist() == ['ORD-2024-001', 'ORD-2024-002']
        assert view['stats']['total_orders'] == 4

    def test_no_match_has_item_count_column(self):
        view = get_order_view(status='shipped')
        assert view['visible'].empty
        assert 'item_count' in view['visible'].columns


class TestAlertView:
    def test_search_tolerates_missing_item_fields(self):
        view = get_alert_view(search_text='mouse')
        assert view['visible']['item_name'].tolist() == ['Ergonomic Mouse']

    def test_stats(self):
        stats = get_alert_view()['stats']
        assert stats['total_alerts'] == 6
        assert stats['active_alerts'] == 4
        assert stats['critical_alerts'] == 1
        assert stats['resolved_alerts'] == 1

    def test_type_and_status_filters(self):
        view = get_alert_view(alert_type='low-stock', status='active')
        assert view['visible']['id'].tolist() == ['1']

    def test_severity_options_are_ordered(self):
        assert get_alert_view()['options']['severity'] == ['critical', 'high', 'medium', 'low']


class TestSupplierView:
    def test_stats(self):
        stats = get_supplier_view()['stats']
        assert stats['total_suppliers'] == 6
        assert stats['active_suppliers'] == 4
        assert stats['average_rating'] == pytest.approx(4.5167, abs=1e-3)
        assert stats['total_spent'] == pytest.approx(476000)

    def test_filters(self):
        view = get_supplier_view(category='Accessories', status='active')
        assert view['visible']['name'].tolist() == ['AccessoryPlus Co.']

    def test_average_rating_of_empty_set(self):
        records = load_records('suppliers').iloc[0:0]
        assert get_supplier_view(records=records)['stats']['average_rating'] == 0.0


class TestReportView:
    def test_period_stats(self):
        stats = get_report_view()['stats']
        assert stats['revenue_change'] == pytest.approx(21.818, abs=1e-3)
        assert stats['orders_change'] == pytest.approx((168 - 142) / 142 * 100)
        assert stats['total_revenue'] == pytest.approx(328000)
        assert stats['latest_items'] == 1150

    def test_report_stats(self):
        view = get_report_view(report_type='inventory')
        assert view['visible']['name'].tolist() == ['Monthly Inventory Report', 'Low Stock Alert Report']
        assert view['stats']['total_reports'] == 5
        assert view['stats']['ready_reports'] == 4

    def test_time_range_window(self):
        series = get_period_series('3months')
        assert series['period'].tolist() == ['Apr', 'May', 'Jun']
        assert series['revenue_share'].max() == pytest.approx(100.0)
        assert get_period_series('custom')['period'].tolist() == ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun']

    def test_single_period_has_no_change(self):
        stats = get_report_view(time_range='1month')['stats']
        assert stats['revenue_change'] == 0.0
        assert stats['total_revenue'] == pytest.approx(67000)


class TestAnalyticsView:
    def test_growth(self):
        stats = get_analytics_view()['stats']
        assert stats['revenue_growth'] == pytest.approx(-7.692, abs=1e-3)
        assert stats['orders_growth'] == pytest.approx((128 - 135) / 135 * 100)
        assert stats['total_customers'] == 85 + 92 + 88

    def test_invalid_metric_falls_back_to_revenue(self):
        view = get_analytics_view(metric='profit')
        assert view['metric'] == 'revenue'

    def test_metric_share(self):
        series = get_analytics_view(metric='customers')['series']
        assert series['metric_share'].tolist() == pytest.approx([85 / 92 * 100, 100.0, 88 / 92 * 100])

    def test_categories(self):
        categories = get_analytics_view()['categories']
        assert categories['category'].iloc[0] == 'Furniture'
        assert categories['share'].sum() == pytest.approx(100.0)

    def test_empty_periods(self):
        periods = load_records('analytics_periods').iloc[0:0]
        stats = get_analytics_view(periods=periods)['stats']
        assert stats['revenue_growth'] == 0.0
        assert stats['total_revenue'] == 0.0


class TestSettingsView:
    def test_users_and_logs(self):
        view = get_settings_view()
        assert view['stats'] == {'total_users': 3, 'active_users': 3, 'error_logs': 1, 'warning_logs': 1}
        assert view['users']['permissions'].iloc[1] == 'read, write'

    def test_filters(self):
        view = get_settings_view(search_text='sarah', log_type='error')
        assert view['users']['name'].tolist() == ['Sarah Johnson']
        assert view['logs']['message'].tolist() == ['Failed to connect to database']
        assert view['filtered'] is True

    def test_permissions_not_joined_in_source(self):
        get_settings_view()
        users = load_records('users')
        assert isinstance(users['permissions'].iloc[0], list)
        assert isinstance(users, pd.DataFrame)
