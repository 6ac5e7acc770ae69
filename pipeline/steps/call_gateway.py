"""
This module implements the Call Gateway step of the generation pipeline:
exactly one request to the configured LLM client per pipeline run.
"""
import logging
from typing import Any, Dict


def run(ctx: Dict[str, Any]) -> None:
    """
    Sends ctx["prompt"] to ctx["llm_client"] and stores the completion as ctx["raw_response"].
    Errors raised by the client propagate unchanged; nothing is retried here.
    """
    kind = ctx["kind"]
    result = ctx["llm_client"].generate_content(prompt=ctx["prompt"], temperature=kind.temperature)
    ctx["raw_response"] = result
    logging.info(f"Generated text length: {len(result)}")
    logging.debug(f"Raw LLM response (first 500 chars): {result[:500]}...")
