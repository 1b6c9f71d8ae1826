import logging
from datetime import datetime

from flask import Flask, jsonify, request
from flask_cors import CORS

from assignment_modifier.config import Config
from assignment_modifier.modules.doc_fetcher import DocFetcher
from assignment_modifier.modules.doc_publisher import DEFAULT_TITLE, DocPublisher
from assignment_modifier.modules.llm_handler import ModificationService
from assignment_modifier.modules.prompt_builder import build_prompt
from assignment_modifier.modules.renderer import assignment_to_plain_text
from assignment_modifier.utils import (
    RequestValidationError,
    configure_logging,
    error_response,
    register_error_handlers,
    validate_create_doc_request,
    validate_modify_request,
)

configure_logging(Config.LOG_LEVEL)

if not Config.openai_configured():
    logging.warning("OPENAI_API_KEY is not set. Requests will fail.")

app = Flask(__name__)

# CORS configuration
CORS(
    app,
    origins=Config.CORS_ORIGINS or ["*"],
    methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Register standardized error handlers
register_error_handlers(app)

# Initialize modules
doc_fetcher = DocFetcher()
modification_service = ModificationService()
doc_publisher = DocPublisher()


@app.route("/", methods=["GET"])
def index():
    """Liveness check."""
    return "Assignment Modifier API is running.", 200, {"Content-Type": "text/plain; charset=utf-8"}


@app.route("/health", methods=["GET"])
def health_check():
    return jsonify({
        "ok": True,
        "status": "healthy",
        "openai_configured": Config.openai_configured(),
        "chat_model": modification_service.chat_model,
        "timestamp": datetime.now().isoformat()
    }), 200


@app.route("/api/modify", methods=["POST"])
@app.route("/modify", methods=["POST"])
def modify_assignment():
    """Fetch a Google Doc, have the model adapt it, and return the assignment JSON."""
    doc_url = None
    try:
        # 1. Validate request
        data = request.get_json(silent=True)
        doc_url, profiles, supports = validate_modify_request(data)

        logging.info(f"[/api/modify] Incoming request: docUrl={doc_url} profiles={profiles} supports={supports}")

        # 2. Fetch document text
        doc_text = doc_fetcher.fetch_text(doc_url)

        # 3. Build prompt and ask the model
        prompt = build_prompt(doc_text, profiles, supports)
        result = modification_service.modify(prompt)

        # 4. Return success
        return jsonify({
            "ok": True,
            "profiles": profiles,
            "supports": supports,
            "docUrl": doc_url,
            "result": result,
        }), 200
    except Exception as e:
        return error_response(e, {"endpoint": "/api/modify", "doc_url": doc_url})


@app.route("/api/create-doc", methods=["POST"])
@app.route("/create-doc", methods=["POST"])
def create_doc():
    """Render an assignment to plain text and publish it as a shared Google Doc."""
    try:
        # 1. Validate request
        data = request.get_json(silent=True)
        assignment = validate_create_doc_request(data)

        # 2. Render
        text_content = assignment_to_plain_text(assignment)
        if not text_content.strip():
            raise RequestValidationError("Assignment content is empty.")

        # 3. Publish
        published = doc_publisher.publish(text_content, str(assignment.get("title") or DEFAULT_TITLE))

        return jsonify({"ok": True, "docId": published["docId"], "url": published["url"]}), 200
    except Exception as e:
        return error_response(e, {"endpoint": "/api/create-doc"})


def main() -> None:
    logging.info(f"Server listening on http://localhost:{Config.PORT}")
    app.run(host="0.0.0.0", port=Config.PORT)


if __name__ == "__main__":
    main()
