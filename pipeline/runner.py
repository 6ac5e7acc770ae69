"""
This module defines the generation pipeline steps and runs them for one request.
A run walks RECEIVED -> VALIDATED -> SANITIZED -> PROMPTED -> CALLING_GATEWAY ->
EXTRACTING -> RESPONDED; any step may end it early by raising a GenerationError.
"""
import logging
from typing import Any, Dict

from llm.llm_client import AbstractLLMClient
from models.generation import GeneratedArtifactSet
from pipeline.kinds import ArtifactKind
from pipeline.steps import (
    build_prompt,
    call_gateway,
    extract_sections,
    sanitize_payload,
    validate_payload,
)

# Each tuple contains the step name, the state reached once the step succeeds,
# and the function to execute for that step.
PIPELINE_STEPS = [
    ("Validating Payload", "VALIDATED", validate_payload.run),
    ("Sanitizing Payload", "SANITIZED", sanitize_payload.run),
    ("Building Prompt", "PROMPTED", build_prompt.run),
    ("Calling AI Gateway", "CALLING_GATEWAY", call_gateway.run),
    ("Extracting Sections", "EXTRACTING", extract_sections.run),
]


def detect_mode(kind: ArtifactKind, body: Any) -> str:
    """
    Picks the request mode from the body shape.

    Returns:
        str: "scenario" for a Gherkin URL + description body, "single_file" for a
             scenarioText body on kinds that support it, otherwise "test_cases".
    """
    if not isinstance(body, dict):
        return "test_cases"
    if kind.scenario_prompt and ("url" in body or "scenarioDesc" in body):
        return "scenario"
    if kind.single_file_rules and "scenarioText" in body:
        return "single_file"
    return "test_cases"


def initialize_pipeline(kind: ArtifactKind, body: Any, llm_client: AbstractLLMClient,
                        output_format: str = "markers") -> Dict[str, Any]:
    """
    Sets up the context for one pipeline run.

    Args:
        kind (ArtifactKind): The artifact kind requested.
        body (Any): The parsed JSON body, or None when it could not be parsed.
        llm_client (AbstractLLMClient): The client used for the single gateway call.
        output_format (str): "markers" or "json".

    Returns:
        Dict[str, Any]: The initial context, in state RECEIVED.
    """
    return {
        "kind": kind,
        "mode": detect_mode(kind, body),
        "body": body,
        "llm_client": llm_client,
        "output_format": output_format,
        "state": "RECEIVED",
    }


def run_pipeline(kind: ArtifactKind, body: Any, llm_client: AbstractLLMClient,
                 output_format: str = "markers") -> GeneratedArtifactSet:
    """
    Runs every step for one request and returns the generated artifacts.

    Raises:
        GenerationError: From the step that failed; the context is discarded.
    """
    ctx = initialize_pipeline(kind, body, llm_client, output_format)
    for step_name, state, step in PIPELINE_STEPS:
        logging.debug(f"[{kind.name}] {step_name}")
        step(ctx)
        ctx["state"] = state
    ctx["state"] = "RESPONDED"
    return ctx["artifacts"]
