"""
Integration tests for the Transaction API endpoints.

These tests verify:
1. POST /v1/transactions - Record a transaction and move the credit limit
2. GET /v1/accounts/{account_id}/transactions - List an account's transactions
3. Rejections for unknown accounts and invalid operation types
"""

from decimal import Decimal
from uuid import UUID

import pytest
from httpx import AsyncClient

UNKNOWN_ACCOUNT = "c4682098-9778-4dca-ba45-fe77eed53279"


async def get_limit(client: AsyncClient, account_id: str) -> Decimal:
    response = await client.get(f"/v1/accounts/{account_id}")
    return Decimal(response.json()["available_credit_limit"])


# =============================================================================
# POST /v1/transactions Tests
# =============================================================================

class TestCreateTransaction:
    """Tests for POST /v1/transactions endpoint."""

    @pytest.mark.asyncio
    async def test_cash_withdrawal(self, client: AsyncClient, account: dict):
        """A 10.00 cash withdrawal on a 100.00 limit stores -10 and leaves 90."""
        response = await client.post(
            "/v1/transactions",
            json={"account_id": account["id"], "operation_type": 1, "amount": "10.00"},
        )

        assert response.status_code == 201

        data = response.json()
        UUID(data["id"])
        assert data["account_id"] == account["id"]
        assert data["operation_type"] == 1
        assert Decimal(data["amount"]) == Decimal("-10")
        assert data["event_date"].endswith("Z")

        assert await get_limit(client, account["id"]) == Decimal("90")

    @pytest.mark.asyncio
    async def test_payment(self, client: AsyncClient, account: dict):
        """A 10.00 payment on a 100.00 limit stores +10 and leaves 110."""
        response = await client.post(
            "/v1/transactions",
            json={"account_id": account["id"], "operation_type": 4, "amount": "10.00"},
        )

        assert response.status_code == 201
        assert Decimal(response.json()["amount"]) == Decimal("10")

        assert await get_limit(client, account["id"]) == Decimal("110")

    @pytest.mark.asyncio
    async def test_caller_supplied_sign_is_ignored(self, client: AsyncClient, account: dict):
        installment = await client.post(
            "/v1/transactions",
            json={"account_id": account["id"], "operation_type": 2, "amount": "25.00"},
        )
        payment = await client.post(
            "/v1/transactions",
            json={"account_id": account["id"], "operation_type": 4, "amount": "-5.00"},
        )

        assert Decimal(installment.json()["amount"]) == Decimal("-25")
        assert Decimal(payment.json()["amount"]) == Decimal("5")
        assert await get_limit(client, account["id"]) == Decimal("80")

    @pytest.mark.asyncio
    async def test_limit_can_go_negative(self, client: AsyncClient, account: dict):
        response = await client.post(
            "/v1/transactions",
            json={"account_id": account["id"], "operation_type": 3, "amount": "150.00"},
        )

        assert response.status_code == 201
        assert await get_limit(client, account["id"]) == Decimal("-50")

    @pytest.mark.asyncio
    async def test_unknown_account(self, client: AsyncClient):
        response = await client.post(
            "/v1/transactions",
            json={"account_id": UNKNOWN_ACCOUNT, "operation_type": 1, "amount": "10.00"},
        )

        assert response.status_code == 400

        data = response.json()
        assert data["error"] == "INVALID_ACCOUNT"
        assert data["message"] == "Account invalid or not found"

    @pytest.mark.asyncio
    async def test_missing_account(self, client: AsyncClient):
        response = await client.post(
            "/v1/transactions",
            json={"operation_type": 1, "amount": "10.00"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_ACCOUNT"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation_type", [None, 0, 5])
    async def test_invalid_operation_type(
        self,
        client: AsyncClient,
        account: dict,
        operation_type,
    ):
        response = await client.post(
            "/v1/transactions",
            json={
                "account_id": account["id"],
                "operation_type": operation_type,
                "amount": "10.00",
            },
        )

        assert response.status_code == 400

        data = response.json()
        assert data["error"] == "INVALID_OPERATION_TYPE"
        assert data["message"] == "Operation type is invalid"

        assert await get_limit(client, account["id"]) == Decimal("100")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation_type", [True, False])
    async def test_boolean_operation_type_is_rejected(
        self,
        client: AsyncClient,
        account: dict,
        operation_type,
    ):
        """A JSON boolean is not read as code 1 or 0."""
        response = await client.post(
            "/v1/transactions",
            json={
                "account_id": account["id"],
                "operation_type": operation_type,
                "amount": "10.00",
            },
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_OPERATION_TYPE"

        assert await get_limit(client, account["id"]) == Decimal("100")

        listing = await client.get(f"/v1/accounts/{account['id']}/transactions")
        assert listing.json()["transactions"] == []

    @pytest.mark.asyncio
    async def test_missing_amount_returns_422(self, client: AsyncClient, account: dict):
        response = await client.post(
            "/v1/transactions",
            json={"account_id": account["id"], "operation_type": 1},
        )

        assert response.status_code == 422


# =============================================================================
# GET /v1/accounts/{account_id}/transactions Tests
# =============================================================================

class TestListAccountTransactions:
    """Tests for GET /v1/accounts/{account_id}/transactions endpoint."""

    @pytest.mark.asyncio
    async def test_lists_recorded_transactions(self, client: AsyncClient, account: dict):
        for operation_type in (1, 2, 4):
            await client.post(
                "/v1/transactions",
                json={
                    "account_id": account["id"],
                    "operation_type": operation_type,
                    "amount": "10.00",
                },
            )

        response = await client.get(f"/v1/accounts/{account['id']}/transactions")

        assert response.status_code == 200

        data = response.json()
        assert data["account_id"] == account["id"]
        assert len(data["transactions"]) == 3
        assert sorted(t["operation_type"] for t in data["transactions"]) == [1, 2, 4]
        assert sum(Decimal(t["amount"]) for t in data["transactions"]) == Decimal("-10")

    @pytest.mark.asyncio
    async def test_account_without_transactions(self, client: AsyncClient, account: dict):
        response = await client.get(f"/v1/accounts/{account['id']}/transactions")

        assert response.status_code == 200
        assert response.json()["transactions"] == []

    @pytest.mark.asyncio
    async def test_unknown_account_returns_404(self, client: AsyncClient):
        response = await client.get(f"/v1/accounts/{UNKNOWN_ACCOUNT}/transactions")

        assert response.status_code == 404
        assert response.json()["error"] == "ACCOUNT_NOT_FOUND"
