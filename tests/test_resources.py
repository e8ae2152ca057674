from __future__ import annotations

import asyncio

import httpx
import pytest

from carwash_api import CarWashApi
from carwash_api.models import parse_job_list
from tests.helpers import api_path, json_body, ok


class Recorder:
    """Transport handler answering every call with one canned response"""

    def __init__(self, response=None):
        self.requests = []
        self.response = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response or ok({})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def call(make_client, recorder, action):
    api = CarWashApi(client=make_client(recorder, "A1", "R1"))

    async def main():
        async with api:
            return await action(api)

    return asyncio.run(main())


def test_active_jobs_query_lists_on_premises_statuses(make_client) -> None:
    recorder = Recorder(ok([
        {"id": "j1", "job_number": "JOB-001", "status": "washing", "final_amount": 1500,
         "vehicle": {"registration_number": "KAA123A"}},
        {"id": "j2", "job_number": "JOB-002", "status": "in_queue", "total_amount": 800},
    ]))

    envelope = call(make_client, recorder, lambda api: api.jobs.active())

    assert api_path(recorder.last) == "/jobs"
    assert recorder.last.url.params["status"] == "checked_in,in_queue,washing,detailing"
    jobs = parse_job_list(envelope)
    assert [job.amount for job in jobs] == [1500, 800]
    assert jobs[0].vehicle.registration_number == "KAA123A"


def test_job_list_sends_only_given_filters(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.jobs.list(status="completed", page=1, limit=20))
    assert dict(recorder.last.url.params) == {"status": "completed", "page": "1", "limit": "20"}


def test_cancel_job_updates_status(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.jobs.cancel("j1", "Customer left"))

    assert recorder.last.method == "PUT"
    assert api_path(recorder.last) == "/jobs/j1/status"
    assert json_body(recorder.last) == {"status": "cancelled", "notes": "Customer left"}


def test_discount_type_is_checked_before_sending(make_client) -> None:
    recorder = Recorder()
    with pytest.raises(ValueError):
        call(make_client, recorder, lambda api: api.jobs.apply_discount("j1", "voucher", 10))
    assert recorder.requests == []


def test_mpesa_push_normalizes_phone(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.payments.initiate_mpesa("j1", "0712 345 678", 1500))

    assert api_path(recorder.last) == "/payments/mpesa/stk-push"
    assert json_body(recorder.last) == {"job_id": "j1", "phone": "254712345678", "amount": 1500}


def test_mpesa_push_rejects_foreign_phone(make_client) -> None:
    recorder = Recorder()
    with pytest.raises(ValueError):
        call(make_client, recorder, lambda api: api.payments.initiate_mpesa("j1", "+44 20 7946 0958", 1500))
    assert recorder.requests == []


def test_customer_lookup_routes(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.customers.get_by_phone("254712345678"))
    assert api_path(recorder.last) == "/customers/phone/254712345678"

    call(make_client, recorder, lambda api: api.customers.search("jane"))
    assert api_path(recorder.last) == "/customers/search/autocomplete"
    assert recorder.last.url.params["q"] == "jane"


def test_inventory_stock_movements_share_transaction_endpoint(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.inventory.add_stock("i1", 10, unit_cost=250.0))
    assert api_path(recorder.last) == "/inventory/transaction"
    assert json_body(recorder.last) == {
        "item_id": "i1", "transaction_type": "stock_in", "quantity": 10, "unit_cost": 250.0,
    }

    call(make_client, recorder, lambda api: api.inventory.adjust_stock("i1", -2))
    assert json_body(recorder.last) == {"item_id": "i1", "transaction_type": "adjustment", "quantity": -2}


def test_expense_approval_uses_patch(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.expenses.approve("e1"))
    assert recorder.last.method == "PATCH"
    assert api_path(recorder.last).startswith("/expenses/e1/")


def test_dashboard_summary_period_is_checked(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.dashboard.summary("week"))
    assert recorder.last.url.params["period"] == "week"

    with pytest.raises(ValueError):
        call(make_client, recorder, lambda api: api.dashboard.summary("year"))


def test_report_export_returns_raw_bytes(make_client) -> None:
    recorder = Recorder(httpx.Response(200, content=b"date,total\n2025-03-05,1500\n"))
    data = call(
        make_client, recorder,
        lambda api: api.reports.export("sales", {"start_date": "2025-03-01", "end_date": "2025-03-31"}),
    )
    assert data.startswith(b"date,total")
    assert api_path(recorder.last) == "/reports/export/sales"


def test_receipt_format_is_checked(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.receipts.generate("j1", "text"))
    assert api_path(recorder.last) == "/receipts/j1"
    assert recorder.last.url.params["format"] == "text"

    with pytest.raises(ValueError):
        call(make_client, recorder, lambda api: api.receipts.generate("j1", "pdf"))


def test_job_list_accepts_backend_row_shape() -> None:
    jobs = parse_job_list({"success": True, "data": [{
        "id": 17,
        "job_no": "JOB-001",
        "status": "washing",
        "registration_no": "KAA123A",
        "final_amount": "1500.00",
        "created_at": "2025-03-05T14:05:00.000Z",
        "customer_name": "Jane Wanjiku",
    }]})

    job = jobs[0]
    assert job.id == "17"
    assert job.job_number == "JOB-001"
    assert job.registration == "KAA123A"
    assert job.amount == 1500.0
    assert job.check_in_time == "2025-03-05T14:05:00.000Z"


def test_user_administration_routes(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.users.list(page=2))
    assert api_path(recorder.last) == "/auth/users"
    assert recorder.last.url.params["page"] == "2"

    call(make_client, recorder, lambda api: api.users.create({"name": "Peter", "email": "p@example.com", "password": "Secret123!"}))
    assert api_path(recorder.last) == "/auth/register"

    call(make_client, recorder, lambda api: api.users.performance("u1", start_date="2025-03-01"))
    assert api_path(recorder.last) == "/auth/users/u1/performance"
    assert dict(recorder.last.url.params) == {"start_date": "2025-03-01"}

    with pytest.raises(ValueError):
        call(make_client, recorder, lambda api: api.users.create({"name": "No Password"}))


def test_equipment_maintenance_log(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.equipment.list(bay_id="b1"))
    assert api_path(recorder.last) == "/bays/equipment"
    assert recorder.last.url.params["bay_id"] == "b1"

    call(make_client, recorder, lambda api: api.equipment.log_maintenance("eq1", "Replaced nozzle", "2025-06-01"))
    assert recorder.last.method == "POST"
    assert api_path(recorder.last) == "/bays/equipment/eq1/maintenance"
    assert json_body(recorder.last) == {"notes": "Replaced nozzle", "next_maintenance": "2025-06-01"}


def test_subscription_lifecycle_routes(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.subscriptions.plans())
    assert api_path(recorder.last) == "/subscriptions/plans"

    call(make_client, recorder, lambda api: api.subscriptions.create("c1", "p1", "v1", "mpesa"))
    assert json_body(recorder.last) == {
        "customer_id": "c1", "plan_id": "p1", "vehicle_id": "v1", "payment_method": "mpesa",
    }

    call(make_client, recorder, lambda api: api.subscriptions.cancel("s1", "Moved away"))
    assert recorder.last.method == "PATCH"
    assert api_path(recorder.last) == "/subscriptions/s1/cancel"

    call(make_client, recorder, lambda api: api.subscriptions.record_usage("s1", "j1"))
    assert api_path(recorder.last) == "/subscriptions/s1/usage"
    assert json_body(recorder.last) == {"job_id": "j1"}

    call(make_client, recorder, lambda api: api.subscriptions.check_validity("v1"))
    assert api_path(recorder.last) == "/subscriptions/check/v1"


def test_cash_session_open_and_close(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.cash_sessions.current())
    assert api_path(recorder.last) == "/expenses/cash-sessions/current"

    call(make_client, recorder, lambda api: api.cash_sessions.open(5000))
    assert api_path(recorder.last) == "/expenses/cash-sessions/open"
    assert json_body(recorder.last) == {"opening_balance": 5000}

    call(make_client, recorder, lambda api: api.cash_sessions.close(12500, "Short by 50"))
    assert api_path(recorder.last) == "/expenses/cash-sessions/close"
    assert json_body(recorder.last) == {"closing_balance": 12500, "notes": "Short by 50"}


def test_system_settings_routes(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.settings.list("receipt"))
    assert api_path(recorder.last) == "/settings"
    assert recorder.last.url.params["category"] == "receipt"

    call(make_client, recorder, lambda api: api.settings.update("vat_rate", "16"))
    assert recorder.last.method == "PUT"
    assert api_path(recorder.last) == "/settings/vat_rate"
    assert json_body(recorder.last) == {"value": "16"}

    call(make_client, recorder, lambda api: api.settings.update_bulk([{"key": "vat_rate", "value": "16"}]))
    assert api_path(recorder.last) == "/settings/bulk"
    assert json_body(recorder.last) == {"settings": [{"key": "vat_rate", "value": "16"}]}


def test_branch_routes(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.branches.list())
    assert api_path(recorder.last) == "/settings/branches"

    call(make_client, recorder, lambda api: api.branches.update("br1", {"name": "Westlands"}))
    assert recorder.last.method == "PUT"
    assert api_path(recorder.last) == "/settings/branches/br1"


def test_promotion_lookup_by_code(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.promotions.list(is_active=True))
    assert api_path(recorder.last) == "/settings/promotions"
    assert recorder.last.url.params["is_active"] == "true"

    call(make_client, recorder, lambda api: api.promotions.get_by_code("WASH20"))
    assert api_path(recorder.last) == "/settings/promotions/code/WASH20"


def test_activity_log_filters(make_client) -> None:
    recorder = Recorder()
    call(make_client, recorder, lambda api: api.activity_logs.list(entity_type="job", action="update", page=1))
    assert api_path(recorder.last) == "/activity-logs"
    assert dict(recorder.last.url.params) == {"entity_type": "job", "action": "update", "page": "1"}
