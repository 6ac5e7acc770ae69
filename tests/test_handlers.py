"""
End-to-end tests for the HTTP handlers: the Flask test client drives a full request while
`requests.post` stands in for the AI gateway.
"""
import json
from unittest import mock

import pytest

from config import AppConfig
from fake_gateway import gateway_response
from web.main import create_app

ONE_TEST_CASE = {
    "testCases": [{"id": "TC001", "steps": "click login", "expected": "dashboard shown"}],
    "locators": {},
    "testData": {},
}

GHERKIN_TEXT = """```gherkin
Feature: Login Functionality
  As a user
  I want to login
  So that I can see the dashboard

  Scenario: Successful login
    Given the user is on the login page
    When the user clicks the Login button
    Then the dashboard should be shown
```"""


def post_with_gateway(client, path, body, response):
    with mock.patch("llm.llm_client.requests.post", return_value=response) as post:
        result = client.post(path, json=body)
    return result, post


def test_preflight_returns_cors_headers(client):
    with mock.patch("llm.llm_client.requests.post") as post:
        response = client.open("/generate-playwright", method="OPTIONS")
    assert response.status_code == 200
    assert response.data == b""
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Headers"] == "authorization, x-client-info, apikey, content-type"
    post.assert_not_called()


def test_gherkin_from_test_cases(client):
    response, post = post_with_gateway(client, "/generate-gherkin", ONE_TEST_CASE, gateway_response(GHERKIN_TEXT))
    assert response.status_code == 200
    gherkin = response.get_json()["gherkin"]
    assert "Feature:" in gherkin
    assert not gherkin.startswith("```")
    assert not gherkin.endswith("```")
    assert post.call_args[1]["json"]["temperature"] == 0.3
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_gherkin_from_url_and_scenario(client):
    body = {"url": "https://www.saucedemo.com", "scenarioDesc": "1. open page 2. login with standard_user"}
    response, post = post_with_gateway(client, "/generate-gherkin", body, gateway_response(GHERKIN_TEXT))
    assert response.status_code == 200
    assert response.get_json()["gherkin"].startswith("Feature: Login Functionality")
    prompt = post.call_args[1]["json"]["messages"][0]["content"]
    assert "https://www.saucedemo.com" in prompt


def test_gherkin_url_mode_validation(client):
    response, post = post_with_gateway(client, "/generate-gherkin", {"url": "", "scenarioDesc": "login"}, None)
    assert response.status_code == 400
    assert response.get_json() == {"error": "A valid URL is required.", "errorKind": "ValidationError"}
    post.assert_not_called()


def test_too_many_test_cases(client):
    body = {"testCases": [{"id": f"TC{i:03}", "steps": "s", "expected": "e"} for i in range(51)]}
    response, post = post_with_gateway(client, "/generate-selenium", body, None)
    assert response.status_code == 400
    payload = response.get_json()
    assert "50" in payload["error"]
    assert payload["errorKind"] == "ValidationError"
    post.assert_not_called()


@pytest.mark.parametrize("body", [{}, {"testCases": []}, {"testCases": "TC001"}])
def test_missing_test_cases(client, body):
    response, _ = post_with_gateway(client, "/generate-cypress", body, None)
    assert response.status_code == 400
    assert response.get_json()["error"] == "No test cases provided. Please upload a valid CSV first."


def test_unparseable_body_is_a_validation_error(client):
    with mock.patch("llm.llm_client.requests.post") as post:
        response = client.post("/generate-robot", data="not json", content_type="application/json")
    assert response.status_code == 400
    post.assert_not_called()


def test_rate_limit_is_mirrored(client):
    response, _ = post_with_gateway(client, "/generate-playwright", ONE_TEST_CASE,
                                    gateway_response(status=429, text="quota exceeded for project 42"))
    assert response.status_code == 429
    payload = response.get_json()
    assert "limit" in payload["error"]
    assert payload["errorKind"] == "UpstreamRateLimit"
    assert "project 42" not in payload["error"]


def test_payment_required_is_mirrored(client):
    response, _ = post_with_gateway(client, "/generate-robot", ONE_TEST_CASE, gateway_response(status=402))
    assert response.status_code == 402
    assert response.get_json() == {
        "error": "Payment required. Please add credits to your workspace.",
        "errorKind": "UpstreamPaymentRequired",
    }


def test_other_upstream_errors_are_opaque(client):
    response, _ = post_with_gateway(client, "/generate-gherkin", ONE_TEST_CASE,
                                    gateway_response(status=500, text="stack trace from upstream"))
    assert response.status_code == 500
    assert response.get_json() == {
        "error": "Failed to generate Gherkin. Please try again.",
        "errorKind": "UpstreamError",
    }


def test_empty_completion(client):
    response, _ = post_with_gateway(client, "/generate-selenium", ONE_TEST_CASE, gateway_response("  "))
    assert response.status_code == 500
    assert response.get_json()["errorKind"] == "EmptyResponse"


def test_missing_api_key():
    app = create_app(AppConfig(_env_file=None, ai_gateway_api_key=None))
    with mock.patch("llm.llm_client.requests.post") as post:
        response = app.test_client().post("/generate-playwright", json=ONE_TEST_CASE)
    assert response.status_code == 500
    assert response.get_json() == {
        "error": "Service configuration error. Please try again later.",
        "errorKind": "ConfigError",
    }
    post.assert_not_called()


def test_partial_pom_response(client):
    completion = (
        "===PAGE_OBJECT_START===\nexport class LoginPage {}\n===PAGE_OBJECT_END===\n"
        "===TEST_FILE_START===\ntest('login', async ({ page }) => {});\n===TEST_FILE_END==="
    )
    response, post = post_with_gateway(client, "/generate-playwright", ONE_TEST_CASE, gateway_response(completion))
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["pageObject"] == "export class LoginPage {}"
    assert payload["testFile"] == "test('login', async ({ page }) => {});"
    assert payload["dataFile"] == ""
    assert post.call_args[1]["json"]["temperature"] == 0.2


def test_robot_fallback_without_markers(client):
    raw = "*** Test Cases ***\nValid Login\n    Open Browser To Login Page"
    response, _ = post_with_gateway(client, "/generate-robot", ONE_TEST_CASE, gateway_response(raw))
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["testFile"] == raw
    assert payload["pageObject"]
    assert payload["dataFile"]


def test_single_file_mode(client):
    body = {"scenarioText": "Scenario: Login\n  Given the user is on the login page", "featureUrl": "https://x.io"}
    completion = "```javascript\ntest('Login', async ({ page }) => {});\n```"
    response, _ = post_with_gateway(client, "/generate-playwright", body, gateway_response(completion))
    assert response.status_code == 200
    assert response.get_json() == {"code": "test('Login', async ({ page }) => {});"}


def test_json_output_format():
    app = create_app(AppConfig(_env_file=None, ai_gateway_api_key="k", output_format="json"))
    completion = json.dumps({"pageObject": "cmds", "testFile": "spec", "dataFile": "{}"})
    with mock.patch("llm.llm_client.requests.post", return_value=gateway_response(completion)) as post:
        response = app.test_client().post("/generate-cypress", json=ONE_TEST_CASE)
    assert response.get_json() == {"pageObject": "cmds", "testFile": "spec", "dataFile": "{}"}
    assert "===PAGE_OBJECT_START===" not in post.call_args[1]["json"]["messages"][0]["content"]


def test_unexpected_exception_becomes_json(client):
    with mock.patch("web.handlers.run_pipeline", side_effect=RuntimeError("boom")):
        response = client.post("/generate-selenium", json=ONE_TEST_CASE)
    assert response.status_code == 500
    assert response.get_json() == {"error": "Failed to generate code. Please try again.", "errorKind": "InternalError"}


def test_unknown_kind(client):
    response = client.post("/generate-cucumber", json=ONE_TEST_CASE)
    assert response.status_code == 404
    assert response.get_json()["errorKind"] == "NotFound"


def test_health(client):
    response = client.get("/health")
    assert response.get_json() == {"status": "UP"}


def test_malformed_completion_is_empty_response(client):
    response = gateway_response("x")
    response.json.return_value = {"choices": [{"message": "hello"}]}
    result, _ = post_with_gateway(client, "/generate-playwright", ONE_TEST_CASE, response)
    assert result.status_code == 500
    assert result.get_json()["errorKind"] == "EmptyResponse"
