"""
This module implements the Extract Sections step of the generation pipeline.
It slices the model's free-text completion into named artifacts, either from one
JSON object keyed by section name or from literal start/end marker pairs.
Extraction never raises: a section that cannot be found comes back empty.
"""
import json
import logging
import re
from typing import Any, Dict, Iterable, Optional

from models.generation import GeneratedArtifactSet
from pipeline.kinds import ArtifactKind, Section

_LEADING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?```$")


def strip_code_fences(text: str) -> str:
    """
    Removes a markdown code fence wrapped around the whole text, e.g. ```gherkin ... ```.

    Args:
        text (str): The raw text received from the LLM.

    Returns:
        str: The text without leading/trailing triple backticks, stripped.
    """
    text = text.strip()
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def extract_section(text: str, start_marker: str, end_marker: str) -> str:
    """Returns the trimmed text between the first start marker and the first end marker after it."""
    start_idx = text.find(start_marker)
    if start_idx == -1:
        return ""
    end_idx = text.find(end_marker)
    if end_idx == -1 or end_idx < start_idx + len(start_marker):
        return ""
    return text[start_idx + len(start_marker):end_idx].strip()


def extract_sections(text: str, sections: Iterable[Section]) -> Dict[str, str]:
    """
    Extracts every section of a marker-framed completion.

    Args:
        text (str): The raw completion.
        sections (Iterable[Section]): The expected sections with their markers.

    Returns:
        Dict[str, str]: section name -> extracted text ("" when the pair is missing).
    """
    return {s.name: extract_section(text, s.start_marker, s.end_marker) for s in sections}


def extract_json_sections(text: str, sections: Iterable[Section]) -> Optional[Dict[str, str]]:
    """
    Reads the sections from a completion that is one JSON object keyed by section name.

    Returns:
        Optional[Dict[str, str]]: The sections, or None when the text is not such an object.
    """
    sections = list(sections)
    try:
        data = json.loads(strip_code_fences(text))
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    if not any(isinstance(data.get(s.name), str) for s in sections):
        return None
    return {
        s.name: data[s.name].strip() if isinstance(data.get(s.name), str) else ""
        for s in sections
    }


def extract_artifacts(text: str, kind: ArtifactKind, mode: str = "test_cases") -> GeneratedArtifactSet:
    """
    Turns a completion into the artifact set returned to the caller.

    Args:
        text (str): The raw completion.
        kind (ArtifactKind): The kind that produced it.
        mode (str): "test_cases", "scenario" or "single_file".

    Returns:
        GeneratedArtifactSet: {gherkin}, {code} or one entry per section.
    """
    if mode == "single_file":
        return GeneratedArtifactSet({"code": strip_code_fences(text)})
    if not kind.sections:
        return GeneratedArtifactSet({kind.result_field: strip_code_fences(text)})

    found = extract_json_sections(text, kind.sections)
    if found is None:
        found = extract_sections(text, kind.sections)

    if kind.fallback_section and not any(found.values()):
        logging.warning(f"Markers not found in AI output, returning raw text as {kind.fallback_section}")
        artifacts = {s.name: kind.fallback_placeholders.get(s.name, "") for s in kind.sections}
        artifacts[kind.fallback_section] = text
        return GeneratedArtifactSet(artifacts)

    return GeneratedArtifactSet({s.name: found[s.name] or s.placeholder for s in kind.sections})


def run(ctx: Dict[str, Any]) -> None:
    """
    Executes the Extract Sections step and stores the result as ctx["artifacts"].

    Args:
        ctx (Dict[str, Any]): The pipeline context, which must contain
                              'raw_response', 'kind' and 'mode'.
    """
    artifacts = extract_artifacts(ctx["raw_response"], ctx["kind"], ctx["mode"])
    ctx["artifacts"] = artifacts
    empty = [role for role, value in artifacts.artifacts.items() if not value]
    if empty:
        logging.warning(f"{ctx['kind'].label} response is missing sections: {', '.join(empty)}")
