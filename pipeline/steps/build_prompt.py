"""
This module implements the Build Prompt step of the generation pipeline.
It renders the kind-specific template around the sanitized request. The builder is pure:
the same request, kind and output format always produce the same prompt text.
"""
import json
import logging
from typing import Any, Dict

from llm.prompts.output_contract import render_contract
from llm.prompts.single_file import PROMPT as SINGLE_FILE_PROMPT
from models.generation import GenerationRequest, ScenarioRequest, SingleFileRequest
from pipeline.kinds import ArtifactKind


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def build_prompt(request: GenerationRequest, kind: ArtifactKind, output_format: str = "markers") -> str:
    """
    Renders the prompt for the test-case mode of a kind.

    Args:
        request (GenerationRequest): The sanitized request.
        kind (ArtifactKind): The artifact kind to generate.
        output_format (str): "markers" or "json"; ignored for kinds without sections.

    Returns:
        str: The complete prompt text.
    """
    output_contract = render_contract(kind.sections, output_format) if kind.sections else ""
    return kind.prompt.format(
        test_cases=_dump([tc.to_payload() for tc in request.test_cases]),
        locators=_dump(request.locators),
        test_data=_dump(request.test_data),
        output_contract=output_contract,
    )


def build_scenario_prompt(request: ScenarioRequest, kind: ArtifactKind) -> str:
    return kind.scenario_prompt.format(url=request.url, scenario_desc=request.scenario_desc)


def build_single_file_prompt(request: SingleFileRequest, kind: ArtifactKind) -> str:
    return SINGLE_FILE_PROMPT.format(
        framework=kind.label,
        rules=kind.single_file_rules,
        feature_url=request.feature_url or "not provided",
        scenario_text=request.scenario_text,
    )


def run(ctx: Dict[str, Any]) -> None:
    """
    Executes the Build Prompt step and stores the text as ctx["prompt"].

    Args:
        ctx (Dict[str, Any]): The pipeline context, which must contain
                              'mode', 'kind', 'request' and 'output_format'.
    """
    kind = ctx["kind"]
    mode = ctx["mode"]
    if mode == "scenario":
        prompt = build_scenario_prompt(ctx["request"], kind)
    elif mode == "single_file":
        prompt = build_single_file_prompt(ctx["request"], kind)
    else:
        prompt = build_prompt(ctx["request"], kind, ctx["output_format"])
    ctx["prompt"] = prompt
    logging.debug(f"Prompt for {kind.name}/{mode} is {len(prompt)} chars")
