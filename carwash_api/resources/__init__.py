"""Endpoint wrappers for the car wash REST API"""

from .activity_logs import ActivityLogsApi
from .auth import AuthApi
from .bays import BaysApi
from .base import Resource
from .customers import CustomersApi
from .dashboard import DashboardApi
from .equipment import EquipmentApi
from .expenses import CashSessionsApi, ExpensesApi
from .inventory import InventoryApi, SuppliersApi
from .jobs import JobsApi
from .payments import PaymentsApi
from .receipts import ReceiptsApi
from .reports import ReportsApi
from .services import ServicesApi
from .subscriptions import SubscriptionsApi
from .system_settings import BranchesApi, PromotionsApi, SettingsApi
from .users import UsersApi
from .vehicles import VehiclesApi

__all__ = [
    "ActivityLogsApi",
    "AuthApi",
    "BaysApi",
    "BranchesApi",
    "CashSessionsApi",
    "CustomersApi",
    "DashboardApi",
    "EquipmentApi",
    "ExpensesApi",
    "InventoryApi",
    "JobsApi",
    "PaymentsApi",
    "PromotionsApi",
    "ReceiptsApi",
    "ReportsApi",
    "Resource",
    "ServicesApi",
    "SettingsApi",
    "SubscriptionsApi",
    "SuppliersApi",
    "UsersApi",
    "VehiclesApi",
]
