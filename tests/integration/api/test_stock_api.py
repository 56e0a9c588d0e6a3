"""Integration tests for inventory, supplied item and ordered item endpoints"""

import pytest
from decimal import Decimal
from httpx import AsyncClient


async def create_item(client: AsyncClient, item_no=101, price="10.00", quantity=5):
    response = await client.post(
        "/inventory",
        json={"item_no": item_no, "name": f"Item {item_no}", "category": "Grocery", "price": price, "quantity": quantity},
    )
    assert response.status_code == 201
    return response.json()


async def create_order(client: AsyncClient, order_no=5001):
    response = await client.post(
        "/orders",
        json={"order_no": order_no, "order_date": "2024-03-02", "customer_no": 12, "address": "14 Canal Road"},
    )
    assert response.status_code == 201
    return response.json()


class TestInventoryAPI:
    @pytest.mark.asyncio
    async def test_create_and_get_item(self, client: AsyncClient):
        created = await create_item(client)
        assert created["quantity"] == 5
        assert Decimal(created["price"]) == Decimal("10.00")

        response = await client.get("/inventory/101")
        assert response.status_code == 200
        assert response.json()["name"] == "Item 101"

    @pytest.mark.asyncio
    async def test_duplicate_item(self, client: AsyncClient):
        await create_item(client)

        response = await client.post(
            "/inventory", json={"item_no": 101, "name": "Again", "price": "1.00"}
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "ITEM_EXISTS"

    @pytest.mark.asyncio
    async def test_update_does_not_touch_stock(self, client: AsyncClient):
        await create_item(client, quantity=5)

        response = await client.put(
            "/inventory/101", json={"name": "Renamed", "category": None, "price": "12.00", "quantity": 99}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Renamed"
        assert Decimal(data["price"]) == Decimal("12.00")
        assert data["quantity"] == 5

    @pytest.mark.asyncio
    async def test_unknown_item(self, client: AsyncClient):
        response = await client.get("/inventory/404")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ITEM_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_negative_price_is_a_validation_error(self, client: AsyncClient):
        response = await client.post("/inventory", json={"item_no": 1, "name": "X", "price": "-1.00"})

        assert response.status_code == 422
    @pytest.mark.asyncio
    async def test_delete_unused_item(self, client: AsyncClient):
        await create_item(client)

        response = await client.delete("/inventory/101")

        assert response.status_code == 200
        assert response.json()["item_no"] == 101
        missing = await client.get("/inventory/101")
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_item_on_an_order(self, client: AsyncClient):
        await create_item(client, quantity=5)
        await create_order(client)
        await client.post("/ordered-items", json={"order_no": 5001, "item_no": 101, "quantity": 1})

        response = await client.delete("/inventory/101")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "ITEM_IN_USE"
        assert (await client.get("/inventory/101")).status_code == 200



class TestSuppliedItemsAPI:
    @pytest.mark.asyncio
    async def test_receive_supply_adds_stock(self, client: AsyncClient):
        await create_item(client, quantity=5)

        response = await client.post(
            "/supplied-items",
            json={"item_no": 101, "supplier_no": 7, "quantity": 20, "purchase_date": "2024-03-01"},
        )

        assert response.status_code == 201
        receipt = response.json()
        assert receipt["quantity_on_hand"] == 25

        listed = await client.get("/supplied-items")
        assert listed.status_code == 200
        assert len(listed.json()) == 1

        fetched = await client.get(f"/supplied-items/{receipt['serial_no']}")
        assert fetched.status_code == 200
        assert fetched.json()["supplier_no"] == 7

        item = await client.get("/inventory/101")
        assert item.json()["quantity"] == 25

    @pytest.mark.asyncio
    async def test_receive_for_unknown_item(self, client: AsyncClient):
        response = await client.post(
            "/supplied-items",
            json={"item_no": 404, "supplier_no": 7, "quantity": 1, "purchase_date": "2024-03-01"},
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ITEM_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_zero_quantity_is_a_validation_error(self, client: AsyncClient):
        response = await client.post(
            "/supplied-items",
            json={"item_no": 101, "supplier_no": 7, "quantity": 0, "purchase_date": "2024-03-01"},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_receipt(self, client: AsyncClient):
        response = await client.get("/supplied-items/999")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "RECEIPT_NOT_FOUND"
    @pytest.mark.asyncio
    async def test_correct_receipt_quantity(self, client: AsyncClient):
        await create_item(client, quantity=5)
        receipt = (
            await client.post(
                "/supplied-items",
                json={"item_no": 101, "supplier_no": 7, "quantity": 20, "purchase_date": "2024-03-01"},
            )
        ).json()

        response = await client.put(
            f"/supplied-items/{receipt['serial_no']}",
            json={"item_no": 101, "supplier_no": 7, "quantity": 12, "purchase_date": "2024-03-01"},
        )

        assert response.status_code == 200
        assert response.json()["quantity"] == 12
        assert response.json()["quantity_on_hand"] == 17
        item = await client.get("/inventory/101")
        assert item.json()["quantity"] == 17

    @pytest.mark.asyncio
    async def test_delete_receipt_after_units_were_ordered(self, client: AsyncClient):
        await create_item(client, quantity=0)
        await create_order(client)
        receipt = (
            await client.post(
                "/supplied-items",
                json={"item_no": 101, "supplier_no": 7, "quantity": 4, "purchase_date": "2024-03-01"},
            )
        ).json()
        await client.post("/ordered-items", json={"order_no": 5001, "item_no": 101, "quantity": 3})

        response = await client.delete(f"/supplied-items/{receipt['serial_no']}")

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INSUFFICIENT_STOCK"
        assert error["details"]["available"] == 1
        assert (await client.get(f"/supplied-items/{receipt['serial_no']}")).status_code == 200

    @pytest.mark.asyncio
    async def test_delete_receipt(self, client: AsyncClient):
        await create_item(client, quantity=5)
        receipt = (
            await client.post(
                "/supplied-items",
                json={"item_no": 101, "supplier_no": 7, "quantity": 4, "purchase_date": "2024-03-01"},
            )
        ).json()

        response = await client.delete(f"/supplied-items/{receipt['serial_no']}")

        assert response.status_code == 200
        assert response.json()["quantity_on_hand"] == 5
        assert (await client.get(f"/supplied-items/{receipt['serial_no']}")).status_code == 404



class TestOrderedItemsAPI:
    @pytest.mark.asyncio
    async def test_place_list_and_cancel_line(self, client: AsyncClient):
        await create_item(client, quantity=5)
        await create_order(client)

        placed = await client.post("/ordered-items", json={"order_no": 5001, "item_no": 101, "quantity": 3})
        assert placed.status_code == 201
        assert placed.json()["quantity_on_hand"] == 2

        lines = await client.get("/ordered-items/5001")
        assert lines.status_code == 200
        assert [line["item_no"] for line in lines.json()["lines"]] == [101]

        cancelled = await client.delete("/ordered-items/5001/101")
        assert cancelled.status_code == 200
        assert cancelled.json()["quantity_on_hand"] == 5

    @pytest.mark.asyncio
    async def test_insufficient_stock_reports_available(self, client: AsyncClient):
        await create_item(client, quantity=2)
        await create_order(client)

        response = await client.post("/ordered-items", json={"order_no": 5001, "item_no": 101, "quantity": 3})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INSUFFICIENT_STOCK"
        assert error["details"]["available"] == 2

        item = await client.get("/inventory/101")
        assert item.json()["quantity"] == 2

    @pytest.mark.asyncio
    async def test_duplicate_line(self, client: AsyncClient):
        await create_item(client, quantity=5)
        await create_order(client)
        await client.post("/ordered-items", json={"order_no": 5001, "item_no": 101, "quantity": 1})

        response = await client.post("/ordered-items", json={"order_no": 5001, "item_no": 101, "quantity": 1})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "ORDER_LINE_EXISTS"

    @pytest.mark.asyncio
    async def test_unknown_order(self, client: AsyncClient):
        await create_item(client)

        response = await client.post("/ordered-items", json={"order_no": 1, "item_no": 101, "quantity": 1})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ORDER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_cancel_unknown_line(self, client: AsyncClient):
        response = await client.delete("/ordered-items/5001/101")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ORDER_LINE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_change_line_quantity(self, client: AsyncClient):
        await create_item(client, quantity=5)
        await create_order(client)
        await client.post("/ordered-items", json={"order_no": 5001, "item_no": 101, "quantity": 1})

        raised = await client.put("/ordered-items/5001/101", json={"quantity": 4})
        assert raised.status_code == 200
        assert raised.json()["quantity_on_hand"] == 1

        lowered = await client.put("/ordered-items/5001/101", json={"quantity": 2})
        assert lowered.status_code == 200
        assert lowered.json()["quantity"] == 2
        assert lowered.json()["quantity_on_hand"] == 3

    @pytest.mark.asyncio
    async def test_raise_line_beyond_stock_reports_available(self, client: AsyncClient):
        await create_item(client, quantity=3)
        await create_order(client)
        await client.post("/ordered-items", json={"order_no": 5001, "item_no": 101, "quantity": 2})

        response = await client.put("/ordered-items/5001/101", json={"quantity": 5})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INSUFFICIENT_STOCK"
        assert error["details"]["available"] == 1
        lines = await client.get("/ordered-items/5001")
        assert lines.json()["lines"][0]["quantity"] == 2

    @pytest.mark.asyncio
    async def test_change_unknown_line(self, client: AsyncClient):
        await create_item(client)

        response = await client.put("/ordered-items/5001/101", json={"quantity": 1})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ORDER_LINE_NOT_FOUND"
