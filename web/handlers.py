"""
This module holds the HTTP handlers of the generator service.
One parameterized view serves every artifact kind: it answers CORS preflights, runs
the generation pipeline and turns every outcome, including unexpected exceptions,
into a JSON body with a single status code.
"""
from flask import Blueprint, current_app, jsonify, request

from logs.logger import log_error
from pipeline.kinds import get_kind
from pipeline.runner import run_pipeline
from utils.exceptions import ConfigError, GenerationError, LLMError

bp = Blueprint("generators", __name__)


def error_response(message: str, status: int, kind: str):
    """Builds the JSON error body. `errorKind` lets clients branch without parsing `message`."""
    return jsonify({"error": message, "errorKind": kind}), status


@bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "UP"}), 200


@bp.route("/generate-<kind_name>", methods=["OPTIONS", "POST"])
def generate(kind_name: str):
    """
    Handles one generation request for the kind named in the URL.

    Args:
        kind_name (str): gherkin, playwright, selenium, cypress or robot.

    Returns:
        The artifact JSON with 200, or {"error", "errorKind"} with 400, 402, 429 or 500.
    """
    if request.method == "OPTIONS":
        return current_app.response_class(status=200)

    kind = get_kind(kind_name)
    if kind is None:
        return error_response(f"Unknown generator: {kind_name}", 404, "NotFound")

    try:
        body = request.get_json(force=True, silent=True)
        artifacts = run_pipeline(
            kind,
            body,
            current_app.config["LLM_CLIENT"],
            current_app.config["APP_CONFIG"].output_format,
        )
        return jsonify(artifacts.to_dict()), 200
    except GenerationError as e:
        if isinstance(e, (ConfigError, LLMError)):
            log_error(f"generate-{kind.name} failed: {e}" + (f" | upstream body: {e.detail}" if e.detail else ""))
        return error_response(e.user_message or kind.failure_message, e.status_code, e.kind)
    except Exception as e:
        log_error(f"Error generating {kind.label} code: {e!r}")
        return error_response(kind.failure_message, 500, "InternalError")
