"""Tests for the company registration Lambda handler."""

import json
from types import SimpleNamespace

import pytest

from company_ledger.lambda_handlers import cors_handler, handler


def event_with(body):
    return {"httpMethod": "POST", "body": body if body is None else json.dumps(body)}


def company_body(**overrides):
    body = {
        "name": "Lambda Co",
        "industry": "Cloud",
        "foundedYear": 2018,
        "employeeCount": 12,
        "isActive": True,
        "type": "PYME",
        "description": "Serverless things",
    }
    body.update(overrides)
    return body


@pytest.fixture
def context():
    return SimpleNamespace(aws_request_id="req-123")


class TestRegistrationHandler:
    """Tests for handler()."""

    def test_registers_company(self, context):
        response = handler(event_with(company_body()), context)
        body = json.loads(response["body"])

        assert response["statusCode"] == 201
        assert body["success"] is True
        assert body["companyId"]
        assert body["message"] == "Company registered successfully"
        assert body["requestId"] == "req-123"
        assert body["timestamp"].endswith("Z")
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"

    def test_missing_body(self, context):
        response = handler({"body": None}, context)
        body = json.loads(response["body"])
        assert response["statusCode"] == 400
        assert body["message"] == "Request body is required"
        assert body["requestId"] == "req-123"
        assert body["timestamp"].endswith("Z")

    def test_invalid_json(self, context):
        response = handler({"body": "{not json"}, context)
        assert response["statusCode"] == 400
        assert json.loads(response["body"])["message"] == "Invalid JSON in request body"

    def test_validation_errors_collected(self, context):
        response = handler(event_with(company_body(employeeCount=400, industry="")), context)
        body = json.loads(response["body"])

        assert response["statusCode"] == 400
        assert body["message"] == "Validation failed"
        assert body["validationErrors"] == [
            "Industry is required",
            "PYME companies cannot have more than 250 employees",
        ]

    def test_duplicate_name(self, context):
        handler(event_with(company_body()), context)
        response = handler(event_with(company_body(name="LAMBDA CO")), context)
        body = json.loads(response["body"])

        assert response["statusCode"] == 400
        assert "already exists" in body["message"]

    def test_request_id_generated_without_context(self):
        response = handler(event_with(company_body()))
        assert json.loads(response["body"])["requestId"]

    def test_unexpected_error(self, context, monkeypatch):
        def broken_container():
            raise RuntimeError("storage down")

        monkeypatch.setattr(
            "company_ledger.lambda_handlers.company_registration.get_container",
            broken_container,
        )
        response = handler(event_with(company_body()), context)

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["message"] == "Internal server error"


class TestCorsHandler:
    def test_preflight(self):
        response = cors_handler({"httpMethod": "OPTIONS"}, None)
        assert response["statusCode"] == 200
        assert "POST" in response["headers"]["Access-Control-Allow-Methods"]
