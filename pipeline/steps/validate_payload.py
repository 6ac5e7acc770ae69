"""
This module implements the Validate Payload step of the generation pipeline.
It checks the shape and size limits of the raw request body before anything else
happens, so an oversized or empty upload never reaches the AI gateway.
"""
import logging
from typing import Any, Dict, Optional

from models.generation import MAX_DESC_LENGTH, MAX_STRING_LENGTH, MAX_TEST_CASES, MAX_URL_LENGTH
from utils.exceptions import PayloadValidationError

MIN_DESC_LENGTH = 5


def validate_payload(body: Any) -> Optional[str]:
    """
    Validates a test-case generation request.

    Args:
        body (Any): The parsed JSON body, untyped.

    Returns:
        Optional[str]: None when the body is valid, otherwise a message for the user.
    """
    test_cases = body.get("testCases") if isinstance(body, dict) else None
    if not isinstance(test_cases, list) or not test_cases:
        return "No test cases provided. Please upload a valid CSV first."
    if len(test_cases) > MAX_TEST_CASES:
        return f"Too many test cases. Maximum is {MAX_TEST_CASES}."
    for tc in test_cases:
        if not isinstance(tc, dict):
            continue
        steps = tc.get("steps")
        if isinstance(steps, str) and len(steps) > MAX_STRING_LENGTH:
            return f"Test case step too long (max {MAX_STRING_LENGTH} chars)."
        expected = tc.get("expected")
        if isinstance(expected, str) and len(expected) > MAX_STRING_LENGTH:
            return f"Test case expected result too long (max {MAX_STRING_LENGTH} chars)."
    return None


def validate_scenario_payload(body: Any) -> Optional[str]:
    """Validates a Gherkin request made of a page URL and a prose scenario."""
    body = body if isinstance(body, dict) else {}
    url = body.get("url")
    scenario_desc = body.get("scenarioDesc")

    if not isinstance(url, str) or not url.strip():
        return "A valid URL is required."
    if len(url) > MAX_URL_LENGTH:
        return f"URL must be less than {MAX_URL_LENGTH} characters."
    if not isinstance(scenario_desc, str) or len(scenario_desc.strip()) < MIN_DESC_LENGTH:
        return f"A scenario description of at least {MIN_DESC_LENGTH} characters is required."
    if len(scenario_desc) > MAX_DESC_LENGTH:
        return f"Scenario description must be less than {MAX_DESC_LENGTH} characters."
    return None


def validate_single_file_payload(body: Any) -> Optional[str]:
    """Validates a request that turns one Gherkin scenario into a single code file."""
    body = body if isinstance(body, dict) else {}
    scenario_text = body.get("scenarioText")
    feature_url = body.get("featureUrl")

    if not isinstance(scenario_text, str) or not scenario_text.strip():
        return "No scenario provided."
    if len(scenario_text) > MAX_DESC_LENGTH:
        return f"Scenario must be less than {MAX_DESC_LENGTH} characters."
    if isinstance(feature_url, str) and len(feature_url) > MAX_URL_LENGTH:
        return f"URL must be less than {MAX_URL_LENGTH} characters."
    return None


VALIDATORS = {
    "test_cases": validate_payload,
    "scenario": validate_scenario_payload,
    "single_file": validate_single_file_payload,
}


def run(ctx: Dict[str, Any]) -> None:
    """
    Executes the Validate Payload step.

    Args:
        ctx (Dict[str, Any]): The pipeline context, which must contain:
                              - 'mode' (str): One of the keys of VALIDATORS.
                              - 'body' (Any): The raw request body.

    Raises:
        PayloadValidationError: If the body does not pass validation.
    """
    error = VALIDATORS[ctx["mode"]](ctx["body"])
    if error:
        logging.info(f"Rejected {ctx['kind'].name} request: {error}")
        raise PayloadValidationError(error)
