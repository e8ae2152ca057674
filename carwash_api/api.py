"""Single entry point bundling every endpoint wrapper around one ApiClient"""

from typing import Callable, Optional

from carwash_auth.credentials import CredentialStore
from .client import ApiClient, ClientSettings
from .resources import (
    ActivityLogsApi,
    AuthApi,
    BaysApi,
    BranchesApi,
    CashSessionsApi,
    CustomersApi,
    DashboardApi,
    EquipmentApi,
    ExpensesApi,
    InventoryApi,
    JobsApi,
    PaymentsApi,
    PromotionsApi,
    ReceiptsApi,
    ReportsApi,
    ServicesApi,
    SettingsApi,
    SubscriptionsApi,
    SuppliersApi,
    UsersApi,
    VehiclesApi,
)


class CarWashApi:
    """All resources of the backend sharing one authenticated client"""

    def __init__(
        self,
        client: Optional[ApiClient] = None,
        client_settings: Optional[ClientSettings] = None,
        credentials: Optional[CredentialStore] = None,
        on_session_expired: Optional[Callable[[str], None]] = None,
    ):
        self.client = client or ApiClient(
            client_settings=client_settings,
            credentials=credentials,
            on_session_expired=on_session_expired,
        )
        self.auth = AuthApi(self.client)
        self.users = UsersApi(self.client)
        self.dashboard = DashboardApi(self.client)
        self.customers = CustomersApi(self.client)
        self.vehicles = VehiclesApi(self.client)
        self.services = ServicesApi(self.client)
        self.jobs = JobsApi(self.client)
        self.payments = PaymentsApi(self.client)
        self.bays = BaysApi(self.client)
        self.equipment = EquipmentApi(self.client)
        self.inventory = InventoryApi(self.client)
        self.suppliers = SuppliersApi(self.client)
        self.expenses = ExpensesApi(self.client)
        self.cash_sessions = CashSessionsApi(self.client)
        self.subscriptions = SubscriptionsApi(self.client)
        self.reports = ReportsApi(self.client)
        self.receipts = ReceiptsApi(self.client)
        self.settings = SettingsApi(self.client)
        self.branches = BranchesApi(self.client)
        self.promotions = PromotionsApi(self.client)
        self.activity_logs = ActivityLogsApi(self.client)

    async def __aenter__(self) -> "CarWashApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()
