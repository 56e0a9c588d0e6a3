"""Integration tests for order, payment and delivery endpoints"""

import pytest
import pytest_asyncio
from decimal import Decimal
from httpx import AsyncClient


@pytest_asyncio.fixture
async def priced_order(client: AsyncClient):
    """Order 5001 with lines 10.00 x 2 and 5.50 x 1"""
    await client.post("/inventory", json={"item_no": 1, "name": "Olive Oil", "price": "10.00", "quantity": 10})
    await client.post("/inventory", json={"item_no": 2, "name": "Green Tea", "price": "5.50", "quantity": 10})
    await client.post("/inventory", json={"item_no": 3, "name": "Honey", "price": "4.50", "quantity": 10})
    await client.post(
        "/orders",
        json={"order_no": 5001, "order_date": "2024-03-02", "customer_no": 12, "address": "14 Canal Road"},
    )
    await client.post("/ordered-items", json={"order_no": 5001, "item_no": 1, "quantity": 2})
    await client.post("/ordered-items", json={"order_no": 5001, "item_no": 2, "quantity": 1})
    return 5001


class TestOrdersAPI:
    @pytest.mark.asyncio
    async def test_order_amount_is_derived(self, client: AsyncClient, priced_order):
        response = await client.get(f"/orders/{priced_order}")

        assert response.status_code == 200
        assert Decimal(response.json()["amount"]) == Decimal("25.50")

    @pytest.mark.asyncio
    async def test_new_order_is_worth_zero(self, client: AsyncClient):
        created = await client.post(
            "/orders", json={"order_no": 1, "order_date": "2024-03-02", "customer_no": 3, "address": "X"}
        )

        assert created.status_code == 201
        assert Decimal(created.json()["amount"]) == Decimal("0.00")

    @pytest.mark.asyncio
    async def test_duplicate_order(self, client: AsyncClient, priced_order):
        response = await client.post(
            "/orders", json={"order_no": priced_order, "order_date": "2024-03-02", "customer_no": 3, "address": "X"}
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "ORDER_EXISTS"

    @pytest.mark.asyncio
    async def test_update_order_header(self, client: AsyncClient, priced_order):
        response = await client.put(
            f"/orders/{priced_order}",
            json={"order_date": "2024-03-05", "customer_no": 99, "address": "New Address"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["customer_no"] == 99
        assert data["order_date"] == "2024-03-05"
        assert Decimal(data["amount"]) == Decimal("25.50")

    @pytest.mark.asyncio
    async def test_list_orders(self, client: AsyncClient, priced_order):
        response = await client.get("/orders")

        assert response.status_code == 200
        assert [order["order_no"] for order in response.json()] == [priced_order]

    @pytest.mark.asyncio
    async def test_unknown_order(self, client: AsyncClient):
        response = await client.get("/orders/404")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ORDER_NOT_FOUND"
    @pytest.mark.asyncio
    async def test_delete_order_restocks_lines(self, client: AsyncClient, priced_order):
        response = await client.delete(f"/orders/{priced_order}")

        assert response.status_code == 200
        assert Decimal(response.json()["amount"]) == Decimal("25.50")
        assert (await client.get(f"/orders/{priced_order}")).status_code == 404
        assert (await client.get("/inventory/1")).json()["quantity"] == 10
        assert (await client.get("/inventory/2")).json()["quantity"] == 10

    @pytest.mark.asyncio
    async def test_delete_paid_order_is_rejected(self, client: AsyncClient, priced_order):
        await client.post(
            "/payments",
            json={"payment_no": 9001, "order_no": priced_order, "method": "cash on delivery", "payment_date": "2024-03-03"},
        )

        response = await client.delete(f"/orders/{priced_order}")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "ORDER_IN_USE"
        assert (await client.get("/inventory/1")).json()["quantity"] == 8

    @pytest.mark.asyncio
    async def test_delete_unknown_order(self, client: AsyncClient):
        response = await client.delete("/orders/404")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ORDER_NOT_FOUND"



class TestPaymentsAPI:
    @pytest.mark.asyncio
    async def test_payment_snapshot_lifecycle(self, client: AsyncClient, priced_order):
        recorded = await client.post(
            "/payments",
            json={"payment_no": 9001, "order_no": priced_order, "method": "Credit Card", "payment_date": "2024-03-03"},
        )
        assert recorded.status_code == 201
        assert recorded.json()["method"] == "credit card"
        assert Decimal(recorded.json()["amount"]) == Decimal("25.50")

        await client.post("/ordered-items", json={"order_no": priced_order, "item_no": 3, "quantity": 1})

        fetched = await client.get("/payments/9001")
        assert Decimal(fetched.json()["amount"]) == Decimal("25.50")

        updated = await client.put(
            "/payments/9001", json={"method": "bank transfer", "payment_date": "2024-03-04"}
        )
        assert updated.status_code == 200
        assert Decimal(updated.json()["amount"]) == Decimal("30.00")
        assert updated.json()["order_no"] == priced_order

        deleted = await client.delete("/payments/9001")
        assert deleted.status_code == 200
        missing = await client.get("/payments/9001")
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_payment_for_empty_order(self, client: AsyncClient):
        await client.post(
            "/orders", json={"order_no": 7, "order_date": "2024-03-02", "customer_no": 3, "address": "X"}
        )

        response = await client.post(
            "/payments",
            json={"payment_no": 1, "order_no": 7, "method": "cash on delivery", "payment_date": "2024-03-03"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ORDER"

    @pytest.mark.asyncio
    async def test_payment_for_missing_order(self, client: AsyncClient):
        response = await client.post(
            "/payments",
            json={"payment_no": 1, "order_no": 404, "method": "cash on delivery", "payment_date": "2024-03-03"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ORDER"

    @pytest.mark.asyncio
    async def test_unknown_method_is_a_validation_error(self, client: AsyncClient, priced_order):
        response = await client.post(
            "/payments",
            json={"payment_no": 1, "order_no": priced_order, "method": "bitcoin", "payment_date": "2024-03-03"},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_unknown_payment(self, client: AsyncClient):
        response = await client.put("/payments/1", json={"method": "credit card", "payment_date": "2024-03-04"})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PAYMENT_NOT_FOUND"


class TestDeliveriesAPI:
    @pytest.mark.asyncio
    async def test_record_and_update_delivery(self, client: AsyncClient, priced_order):
        recorded = await client.post(
            "/deliveries",
            json={"delivery_no": 301, "order_no": priced_order, "employee_no": 4, "expected_time": "17:30:00"},
        )
        assert recorded.status_code == 201
        assert recorded.json()["status"] == "Pending"

        updated = await client.put("/deliveries/301", json={"status": "Delivered", "expected_time": "18:00:00"})
        assert updated.status_code == 200
        assert updated.json()["status"] == "Delivered"
        assert updated.json()["expected_time"] == "18:00:00"

        listed = await client.get("/deliveries")
        assert [d["delivery_no"] for d in listed.json()] == [301]

    @pytest.mark.asyncio
    async def test_second_delivery_for_same_order(self, client: AsyncClient, priced_order):
        await client.post(
            "/deliveries",
            json={"delivery_no": 301, "order_no": priced_order, "employee_no": 4, "expected_time": "17:30:00"},
        )

        response = await client.post(
            "/deliveries",
            json={"delivery_no": 302, "order_no": priced_order, "employee_no": 5, "expected_time": "09:00:00"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "DELIVERY_EXISTS"

    @pytest.mark.asyncio
    async def test_delivery_for_unknown_order(self, client: AsyncClient):
        response = await client.post(
            "/deliveries",
            json={"delivery_no": 301, "order_no": 404, "employee_no": 4, "expected_time": "17:30:00"},
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ORDER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_unknown_delivery(self, client: AsyncClient):
        response = await client.get("/deliveries/301")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "DELIVERY_NOT_FOUND"
    @pytest.mark.asyncio
    async def test_delete_delivery_frees_the_order(self, client: AsyncClient, priced_order):
        await client.post(
            "/deliveries",
            json={"delivery_no": 301, "order_no": priced_order, "employee_no": 4, "expected_time": "17:30:00"},
        )

        deleted = await client.delete("/deliveries/301")
        assert deleted.status_code == 200
        assert deleted.json()["status"] == "Pending"
        assert (await client.get("/deliveries/301")).status_code == 404

        again = await client.post(
            "/deliveries",
            json={"delivery_no": 302, "order_no": priced_order, "employee_no": 5, "expected_time": "09:00:00"},
        )
        assert again.status_code == 201



@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
