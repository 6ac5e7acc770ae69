"""
This module implements the Sanitize Payload step of the generation pipeline.
Whatever validation concluded, the request is clamped into a well-formed object with
guaranteed types and bounded lengths before it is embedded in a prompt.
"""
import logging
from typing import Any, Dict

from models.generation import (
    MAX_DESC_LENGTH,
    MAX_ID_LENGTH,
    MAX_STRING_LENGTH,
    MAX_TEST_CASES,
    MAX_URL_LENGTH,
    GenerationRequest,
    ScenarioRequest,
    SingleFileRequest,
    TestCase,
)


def _as_text(value: Any, limit: int | None = None) -> str:
    """Coerces scalars to str and truncates; anything else becomes an empty string."""
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, (int, float)):
        value = str(value)
    if not isinstance(value, str):
        return ""
    return value[:limit]


def _as_mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _sanitize_test_case(raw: Any) -> TestCase:
    raw = raw if isinstance(raw, dict) else {}
    return TestCase(
        id=_as_text(raw.get("id"), MAX_ID_LENGTH),
        description=_as_text(raw.get("description"), MAX_STRING_LENGTH),
        steps=_as_text(raw.get("steps"), MAX_STRING_LENGTH),
        expected=_as_text(raw.get("expected"), MAX_STRING_LENGTH),
    )


def sanitize_payload(body: Any) -> GenerationRequest:
    """
    Builds a GenerationRequest from a raw body. Never raises.

    Args:
        body (Any): The parsed JSON body, untyped.

    Returns:
        GenerationRequest: At most 50 test cases with bounded string fields, and
                           locators / test data that are always dictionaries.
    """
    body = body if isinstance(body, dict) else {}
    raw_cases = body.get("testCases")
    raw_cases = raw_cases if isinstance(raw_cases, list) else []
    return GenerationRequest(
        test_cases=[_sanitize_test_case(tc) for tc in raw_cases[:MAX_TEST_CASES]],
        locators=_as_mapping(body.get("locators")),
        test_data=_as_mapping(body.get("testData")),
    )


def sanitize_scenario_payload(body: Any) -> ScenarioRequest:
    body = body if isinstance(body, dict) else {}
    return ScenarioRequest(
        url=_as_text(body.get("url")).strip()[:MAX_URL_LENGTH],
        scenario_desc=_as_text(body.get("scenarioDesc")).strip()[:MAX_DESC_LENGTH],
    )


def sanitize_single_file_payload(body: Any) -> SingleFileRequest:
    body = body if isinstance(body, dict) else {}
    return SingleFileRequest(
        scenario_text=_as_text(body.get("scenarioText")).strip()[:MAX_DESC_LENGTH],
        feature_url=_as_text(body.get("featureUrl")).strip()[:MAX_URL_LENGTH],
    )


SANITIZERS = {
    "test_cases": sanitize_payload,
    "scenario": sanitize_scenario_payload,
    "single_file": sanitize_single_file_payload,
}


def run(ctx: Dict[str, Any]) -> None:
    """
    Executes the Sanitize Payload step and stores the result as ctx["request"].

    Args:
        ctx (Dict[str, Any]): The pipeline context, which must contain 'mode' and 'body'.
    """
    request = SANITIZERS[ctx["mode"]](ctx["body"])
    ctx["request"] = request
    if isinstance(request, GenerationRequest):
        logging.info(f"Generating {ctx['kind'].label} code for {len(request.test_cases)} test cases")
