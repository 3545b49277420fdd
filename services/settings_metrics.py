from typing import Dict, Optional

import pandas as pd

from query.aggregates import count
from query.config import ALL
from query.engine import Stat, run_query
from query.filtering import distinct_values
from query.predicates import FilterConfig, field_equals
from services.mock_data import load_records
from services.schemas import SYSTEM_LOGS_SCHEMA, USERS_SCHEMA

USER_COLUMNS = ['name', 'email', 'role', 'permissions', 'last_login', 'status']
LOG_COLUMNS = ['type', 'message', 'user', 'timestamp']

USER_STATS: Dict[str, Stat] = {
    'total_users': Stat(lambda df: count(df)),
    'active_users': Stat(lambda df: count(df, field_equals('status', 'active'))),
}

LOG_STATS: Dict[str, Stat] = {
    'error_logs': Stat(lambda df: count(df, field_equals('type', 'error'))),
    'warning_logs': Stat(lambda df: count(df, field_equals('type', 'warning'))),
}


def get_settings_view(
    search_text: str = '',
    status: Optional[str] = ALL,
    role: Optional[str] = ALL,
    log_type: Optional[str] = ALL,
    users: Optional[pd.DataFrame] = None,
    logs: Optional[pd.DataFrame] = None,
) -> Dict[str, object]:
    """Users matching search/status/role, system logs by type, and their counts."""
    if users is None:
        users = load_records('users')
    if logs is None:
        logs = load_records('system_logs')

    user_result = run_query(
        users,
        USERS_SCHEMA,
        FilterConfig(search_text=search_text or '', field_filters={'status': status, 'role': role}),
        USER_STATS,
    )
    log_result = run_query(
        logs,
        SYSTEM_LOGS_SCHEMA,
        FilterConfig(field_filters={'type': log_type}),
        LOG_STATS,
    )

    visible_users = user_result['visible'].copy()
    visible_users['permissions'] = visible_users['permissions'].map(', '.join)

    return {
        'users': visible_users,
        'logs': log_result['visible'],
        'stats': {**user_result['stats'], **log_result['stats']},
        'filtered': user_result['filtered'] or log_result['filtered'],
        'options': {
            'status': USERS_SCHEMA.choices('status'),
            'role': distinct_values(users, 'role'),
            'type': SYSTEM_LOGS_SCHEMA.choices('type'),
        },
    }
