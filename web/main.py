"""
This module builds the Flask application that exposes the generators over HTTP.
Configuration and the LLM client are created once at startup and shared read-only
by every request.
"""
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import AppConfig, config
from llm.llm_client import AbstractLLMClient, get_llm_client
from web.handlers import bp

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def add_cors_headers(response):
    response.headers.update(CORS_HEADERS)
    return response


def handle_http_error(e: HTTPException):
    return jsonify({"error": e.description, "errorKind": e.name.replace(" ", "")}), e.code


def create_app(app_config: AppConfig | None = None, llm_client: AbstractLLMClient | None = None) -> Flask:
    """
    Creates the Flask application.

    Args:
        app_config (AppConfig | None): Configuration to use; defaults to the one loaded from the environment.
        llm_client (AbstractLLMClient | None): Client to use; defaults to the one built from the configuration.

    Returns:
        Flask: The configured application.
    """
    app_config = app_config or config
    app = Flask(__name__)
    app.config["APP_CONFIG"] = app_config
    app.config["LLM_CLIENT"] = llm_client or get_llm_client(app_config)
    app.register_blueprint(bp)
    app.after_request(add_cors_headers)
    app.register_error_handler(HTTPException, handle_http_error)
    return app


if __name__ == "__main__":
    create_app().run(host=config.host, port=config.port)
