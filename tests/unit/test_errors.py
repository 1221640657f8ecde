"""Unit tests for the HTTP shape of validation errors."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from paramcheck.validation import (
    InternalError,
    InvalidParamsError,
    MultiError,
    ParamSchema,
    invalid_param,
    ip_validator,
    limit_validator,
    missing_param,
    validate_params,
)

LIST_SCHEMA = ParamSchema(strict=True, required={"ip": ip_validator}, optional={"limit": limit_validator})


def _build_client() -> TestClient:
    app = FastAPI()

    @app.get("/nics")
    async def list_nics(request: Request) -> dict[str, Any]:
        return await validate_params(LIST_SCHEMA, None, dict(request.query_params))

    @app.get("/internal")
    async def internal() -> None:
        raise InternalError(MultiError([{"a": 1}, {"b": 2}]))

    return TestClient(app)


def test_invalid_params_error_attributes():
    errors = [invalid_param("ip", "invalid IP address"), missing_param("name")]
    err = InvalidParamsError("Invalid parameters", errors)

    assert err.status_code == 422
    assert err.rest_code == "InvalidParameters"
    assert str(err) == "Invalid parameters"
    assert err.body == {
        "code": "InvalidParameters",
        "message": "Invalid parameters",
        "errors": [
            {"field": "ip", "code": "InvalidParameter", "message": "invalid IP address"},
            {"field": "name", "code": "MissingParameter", "message": "Missing parameter"},
        ],
    }
    assert err.detail == err.body


def test_invalid_list_is_serialized():
    err = InvalidParamsError("Invalid parameters", [invalid_param("ips", "invalid IPs", ["a", "b"])])

    assert err.body["errors"][0]["invalid"] == ["a", "b"]


def test_multi_error_keeps_every_error():
    err = MultiError(["one", "two"])

    assert err.errors == ["one", "two"]
    assert "first of 2 errors" in str(err)


def test_validated_request_succeeds():
    client = _build_client()

    response = client.get("/nics", params={"ip": "8.8.8.8", "limit": "20"})

    assert response.status_code == 200
    assert response.json() == {"ip": "8.8.8.8", "limit": 20}


def test_invalid_request_is_422():
    client = _build_client()

    response = client.get("/nics", params={"limit": "5000", "vlan": "4"})

    assert response.status_code == 422
    body = response.json()["detail"]
    assert body["code"] == "InvalidParameters"
    assert body["message"] == "Invalid parameters"
    assert [e["field"] for e in body["errors"]] == ["ip", "limit", ["vlan"]]


def test_internal_error_is_500():
    client = _build_client()

    response = client.get("/internal")

    assert response.status_code == 500
    assert response.json() == {"detail": {"code": "InternalError", "message": "Internal error"}}
