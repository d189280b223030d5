"""
Integration tests for the loan lifecycle API.

These tests verify:
1. POST /api/create - Create a loan for a mobile number
2. GET /api/fetch - Fetch loan details
3. PUT /api/update - Update loan details by loan number
4. DELETE /api/delete - Delete a loan by mobile number
5. Transport-level validation of inputs
"""

import pytest
from httpx import AsyncClient


async def create_and_fetch(client: AsyncClient, mobile_number: str) -> dict:
    """Create a loan and return the fetched body."""
    response = await client.post("/api/create", params={"mobileNumber": mobile_number})
    assert response.status_code == 201

    response = await client.get("/api/fetch", params={"mobileNumber": mobile_number})
    assert response.status_code == 200
    return response.json()


# =============================================================================
# POST /api/create Tests
# =============================================================================

class TestCreateLoan:
    """Tests for POST /api/create endpoint."""

    @pytest.mark.asyncio
    async def test_create_returns_201(
        self,
        client: AsyncClient,
        mobile_number: str,
    ):
        response = await client.post("/api/create", params={"mobileNumber": mobile_number})

        assert response.status_code == 201
        assert response.json() == {
            "statusCode": "201",
            "statusMsg": "Loan created successfully",
        }

    @pytest.mark.asyncio
    async def test_created_loan_has_default_terms(
        self,
        client: AsyncClient,
        mobile_number: str,
    ):
        """A fresh loan is a fully outstanding home loan at the configured limit."""
        data = await create_and_fetch(client, mobile_number)

        assert data["mobileNumber"] == mobile_number
        assert data["loanType"] == "Home Loan"
        assert data["totalLoan"] == 100000
        assert data["amountPaid"] == 0
        assert data["outstandingAmount"] == data["totalLoan"]
        assert len(data["loanNumber"]) == 12
        assert data["loanNumber"].isdigit()
        assert isinstance(data["loanId"], int)

    @pytest.mark.asyncio
    async def test_fetch_body_hides_audit_fields(
        self,
        client: AsyncClient,
        mobile_number: str,
    ):
        data = await create_and_fetch(client, mobile_number)

        assert set(data) == {
            "loanId",
            "loanNumber",
            "mobileNumber",
            "loanType",
            "totalLoan",
            "amountPaid",
            "outstandingAmount",
        }

    @pytest.mark.asyncio
    async def test_duplicate_mobile_number_fails(
        self,
        client: AsyncClient,
        mobile_number: str,
    ):
        """A second loan for the same number is rejected and the first is kept."""
        original = await create_and_fetch(client, mobile_number)

        response = await client.post("/api/create", params={"mobileNumber": mobile_number})

        assert response.status_code == 500
        data = response.json()
        assert data["errorCode"] == "INTERNAL_SERVER_ERROR"
        assert data["apiPath"] == "POST /api/create"
        assert mobile_number in data["errorMessage"]
        assert "already registered" in data["errorMessage"]

        after = await client.get("/api/fetch", params={"mobileNumber": mobile_number})
        assert after.json() == original

    @pytest.mark.asyncio
    async def test_loans_for_different_numbers_get_distinct_ids(
        self,
        client: AsyncClient,
        mobile_number: str,
        other_mobile_number: str,
    ):
        first = await create_and_fetch(client, mobile_number)
        second = await create_and_fetch(client, other_mobile_number)

        assert first["loanId"] != second["loanId"]
        assert second["mobileNumber"] == other_mobile_number

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_number", ["12345", "98765432101", "98765abcde"])
    async def test_malformed_mobile_number_is_rejected(
        self,
        client: AsyncClient,
        bad_number: str,
    ):
        response = await client.post("/api/create", params={"mobileNumber": bad_number})

        assert response.status_code == 400
        assert "Mobile number must be 10 digits" in response.json()["errorMessage"]

    @pytest.mark.asyncio
    async def test_empty_mobile_number_passes_boundary(self, client: AsyncClient):
        """An empty number is allowed through validation, as the pattern permits."""
        data = await create_and_fetch(client, "")

        assert data["mobileNumber"] == ""
        assert data["outstandingAmount"] == data["totalLoan"]

    @pytest.mark.asyncio
    async def test_missing_mobile_number_is_rejected(self, client: AsyncClient):
        response = await client.post("/api/create")

        assert response.status_code == 400
        assert "mobileNumber" in response.json()["errorMessage"]


# =============================================================================
# GET /api/fetch Tests
# =============================================================================

class TestFetchLoan:
    """Tests for GET /api/fetch endpoint."""

    @pytest.mark.asyncio
    async def test_fetch_unknown_number_is_server_error(
        self,
        client: AsyncClient,
        mobile_number: str,
    ):
        """Not-found on fetch surfaces as a generic server error."""
        response = await client.get("/api/fetch", params={"mobileNumber": mobile_number})

        assert response.status_code == 500
        data = response.json()
        assert data["errorMessage"] == (
            f"Loan not found with the given input data mobileNumber : '{mobile_number}'"
        )
        assert data["apiPath"] == "GET /api/fetch"
        assert data["errorTime"]

    @pytest.mark.asyncio
    async def test_fetch_rejects_malformed_number(self, client: AsyncClient):
        response = await client.get("/api/fetch", params={"mobileNumber": "abc"})

        assert response.status_code == 400


# =============================================================================
# PUT /api/update Tests
# =============================================================================

class TestUpdateLoan:
    """Tests for PUT /api/update endpoint."""

    @pytest.mark.asyncio
    async def test_update_persists_all_mutable_fields(
        self,
        client: AsyncClient,
        mobile_number: str,
    ):
        loan = await create_and_fetch(client, mobile_number)

        response = await client.put("/api/update", json={
            "mobileNumber": mobile_number,
            "loanNumber": loan["loanNumber"],
            "loanType": "Vehicle Loan",
            "totalLoan": 80000,
            "amountPaid": 30000,
            "outstandingAmount": 50000,
        })

        assert response.status_code == 200
        assert response.json() == {
            "statusCode": "200",
            "statusMsg": "Request processed successfully",
        }

        updated = (await client.get(
            "/api/fetch", params={"mobileNumber": mobile_number}
        )).json()
        assert updated["loanType"] == "Vehicle Loan"
        assert updated["totalLoan"] == 80000
        assert updated["amountPaid"] == 30000
        assert updated["outstandingAmount"] == 50000
        assert updated["loanNumber"] == loan["loanNumber"]
        assert updated["loanId"] == loan["loanId"]

    @pytest.mark.asyncio
    async def test_update_ignores_mobile_number_in_body(
        self,
        client: AsyncClient,
        mobile_number: str,
        other_mobile_number: str,
    ):
        """The loan number is the key; the body's mobile number is not applied."""
        loan = await create_and_fetch(client, mobile_number)

        response = await client.put("/api/update", json={
            "mobileNumber": other_mobile_number,
            "loanNumber": loan["loanNumber"],
            "loanType": "Home Loan",
            "totalLoan": 100000,
            "amountPaid": 1000,
            "outstandingAmount": 99000,
        })
        assert response.status_code == 200

        still_there = await client.get("/api/fetch", params={"mobileNumber": mobile_number})
        assert still_there.status_code == 200
        assert still_there.json()["amountPaid"] == 1000

    @pytest.mark.asyncio
    async def test_update_unknown_loan_number_is_expectation_failed(
        self,
        client: AsyncClient,
        mobile_number: str,
    ):
        response = await client.put("/api/update", json={
            "mobileNumber": mobile_number,
            "loanNumber": "999999999999",
            "loanType": "Home Loan",
            "totalLoan": 100000,
            "amountPaid": 0,
            "outstandingAmount": 100000,
        })

        assert response.status_code == 417
        assert response.json() == {
            "statusCode": "417",
            "statusMsg": "Update operation failed. Please try again or contact Dev team",
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,value,message",
        [
            ("loanNumber", "12345", "LoanNumber must be 12 digits"),
            ("loanType", "", "LoanType can not be a null or empty"),
            ("totalLoan", 0, "Total loan amount should be greater than zero"),
            ("amountPaid", -1, "Total loan amount paid should be equal or greater than zero"),
            ("outstandingAmount", -5, "Total outstanding amount should be equal or greater than zero"),
        ],
    )
    async def test_update_rejects_invalid_body(
        self,
        client: AsyncClient,
        mobile_number: str,
        field: str,
        value,
        message: str,
    ):
        body = {
            "mobileNumber": mobile_number,
            "loanNumber": "100000000001",
            "loanType": "Home Loan",
            "totalLoan": 100000,
            "amountPaid": 0,
            "outstandingAmount": 100000,
        }
        body[field] = value

        response = await client.put("/api/update", json=body)

        assert response.status_code == 400
        assert message in response.json()["errorMessage"]


# =============================================================================
# DELETE /api/delete Tests
# =============================================================================

class TestDeleteLoan:
    """Tests for DELETE /api/delete endpoint."""

    @pytest.mark.asyncio
    async def test_delete_removes_loan(
        self,
        client: AsyncClient,
        mobile_number: str,
    ):
        await create_and_fetch(client, mobile_number)

        response = await client.delete("/api/delete", params={"mobileNumber": mobile_number})

        assert response.status_code == 200
        assert response.json()["statusCode"] == "200"

        gone = await client.get("/api/fetch", params={"mobileNumber": mobile_number})
        assert gone.status_code == 500
        assert "Loan not found" in gone.json()["errorMessage"]

    @pytest.mark.asyncio
    async def test_delete_unknown_number_is_expectation_failed(
        self,
        client: AsyncClient,
        mobile_number: str,
    ):
        response = await client.delete("/api/delete", params={"mobileNumber": mobile_number})

        assert response.status_code == 417
        assert response.json() == {
            "statusCode": "417",
            "statusMsg": "Delete operation failed. Please try again or contact Dev team",
        }

    @pytest.mark.asyncio
    async def test_number_can_be_reused_after_delete(
        self,
        client: AsyncClient,
        mobile_number: str,
    ):
        await create_and_fetch(client, mobile_number)
        await client.delete("/api/delete", params={"mobileNumber": mobile_number})

        second = await create_and_fetch(client, mobile_number)

        assert second["mobileNumber"] == mobile_number
        assert second["amountPaid"] == 0


# =============================================================================
# Request Context Tests
# =============================================================================

class TestRequestContext:
    """Tests for request ID propagation."""

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, client: AsyncClient):
        response = await client.get("/api/health", headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, client: AsyncClient):
        response = await client.get("/api/health")

        assert response.headers.get("X-Request-ID")

    @pytest.mark.asyncio
    async def test_error_body_carries_request_id(
        self,
        client: AsyncClient,
        mobile_number: str,
    ):
        response = await client.get(
            "/api/fetch",
            params={"mobileNumber": mobile_number},
            headers={"X-Request-ID": "trace-456"},
        )

        assert response.json()["requestId"] == "trace-456"


# =============================================================================
# Mobile Number Boundary Tests
# =============================================================================

class TestEmptyMobileNumber:
    """An empty mobileNumber matches the transport pattern on every endpoint."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,path,expected_status",
        [
            ("POST", "/api/create", 201),
            ("GET", "/api/fetch", 500),
            ("DELETE", "/api/delete", 417),
        ],
    )
    async def test_empty_mobile_number_is_not_a_validation_error(
        self,
        client: AsyncClient,
        method: str,
        path: str,
        expected_status: int,
    ):
        response = await client.request(method, path, params={"mobileNumber": ""})

        assert response.status_code != 400
        assert response.status_code == expected_status
