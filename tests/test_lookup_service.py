import pytest


@pytest.fixture
def orders(order_service):
    order_service.create_order("Jane Perera", "077 123 4567", [{"sku": "X1"}], "cash", "s")
    order_service.create_order("Kamal Silva", "0719990001", [{"sku": "X2"}], "card", "s")
    order_service.update_status("WHS-002", "ready", "s")


def numbers(records):
    return [r["order_number"] for r in records]


def test_search_by_name_is_case_insensitive(lookup_service, orders):
    assert numbers(lookup_service.search_orders("jane")) == ["WHS-001"]


def test_search_by_order_number(lookup_service, orders):
    assert numbers(lookup_service.search_orders("whs-002")) == ["WHS-002"]


def test_search_by_phone_digits(lookup_service, orders):
    assert numbers(lookup_service.search_orders("1234567")) == ["WHS-001"]
    assert numbers(lookup_service.search_orders("077-123")) == ["WHS-001"]


def test_search_status_filter(lookup_service, orders):
    assert numbers(lookup_service.search_orders(status="ready")) == ["WHS-002"]
    assert numbers(lookup_service.search_orders(status="all")) == ["WHS-001", "WHS-002"]
    assert numbers(lookup_service.search_orders()) == ["WHS-001", "WHS-002"]
    assert lookup_service.search_orders("jane", status="ready") == []


def test_customer_lookup_by_phone_fragment(lookup_service, order_service):
    order_service.create_order("Jane", "0771234567", [{"sku": "X1", "qty": 2}], "cash", "staff1")

    result = lookup_service.customer_lookup("1234567")

    assert result["found"] is True
    assert result["order"] == {
        "order_number": "WHS-001",
        "status": "received",
        "invoice_number": "",
        "payment_method": "cash",
        "created_at": "2026-10-19T10:00:00.000Z",
    }


def test_customer_lookup_by_exact_order_number(lookup_service, orders):
    assert lookup_service.customer_lookup("whs-002")["order"]["order_number"] == "WHS-002"
    assert lookup_service.customer_lookup("WHS-00") == {"found": False}


def test_customer_lookup_order_number_does_not_match_phone_digits(lookup_service, orders):
    # "WHS-001" must not hit a phone containing 001
    assert lookup_service.customer_lookup("WHS-001")["order"]["order_number"] == "WHS-001"
    assert lookup_service.customer_lookup("WHS-0001") == {"found": False}


def test_customer_lookup_blank_or_missing(lookup_service, orders):
    assert lookup_service.customer_lookup("") == {"found": False}
    assert lookup_service.customer_lookup(None) == {"found": False}
    assert lookup_service.customer_lookup("5555555") == {"found": False}


def test_customer_lookup_ignores_deleted_orders(lookup_service, recycle_bin_service, orders):
    recycle_bin_service.soft_delete("WHS-001", "manager")
    assert lookup_service.customer_lookup("1234567") == {"found": False}


def test_null_fields_do_not_match_as_text(container, lookup_service):
    container.orders_store.write(
        [{"order_number": "WHS-001", "customer_name": None, "customer_phone": None, "status": "received"}]
    )

    assert lookup_service.search_orders("non") == []
    assert lookup_service.search_orders("none") == []
    assert lookup_service.customer_lookup("None") == {"found": False}
    assert numbers(lookup_service.search_orders("whs-001")) == ["WHS-001"]
