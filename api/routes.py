"""
API routes for the Business Card Parser.

Flask REST API endpoints for parsing business card text.
"""

import logging
from typing import Optional

from flask import Blueprint, request, jsonify
from werkzeug.utils import secure_filename

from cardparser import BusinessCardParser, ContactInfo, available_parsers, create_parser
from config import Config

logger = logging.getLogger(__name__)

# Create Blueprint
api_bp = Blueprint("api", __name__, url_prefix="/api")

# Parser instance (lazy initialization)
_parser: Optional[BusinessCardParser] = None


def get_parser() -> BusinessCardParser:
    """Get or create the parser instance.

    Returns:
        BusinessCardParser instance
    """
    global _parser

    if _parser is None:
        _parser = create_parser(Config.PARSER_TYPE, **Config.parser_options())
        logger.info(f"Parser initialized: {type(_parser).__name__}")

    return _parser


def allowed_file(filename: str) -> bool:
    """Check if file extension is allowed.

    Args:
        filename: Name of the file

    Returns:
        True if allowed, False otherwise
    """
    return Config.is_allowed_file(filename)


def _loaded_model() -> Optional[str]:
    """Model behind the running parser, None until the parser is created."""
    tagger = getattr(_parser, "tagger", None)
    return getattr(tagger, "model_name", None)


def _contact_response(contact: ContactInfo):
    return jsonify({
        "success": True,
        "data": contact.to_dict(),
        "formatted": str(contact)
    }), 200


@api_bp.route("/health", methods=["GET"])
def health_check():
    """Health check endpoint.

    Returns:
        JSON with health status
    """
    return jsonify({
        "success": True,
        "status": "healthy",
        "message": "Business Card Parser API is running",
        "version": "1.0.0"
    }), 200


@api_bp.route("/status", methods=["GET"])
def get_status():
    """Get API and parser status.

    Returns:
        JSON with status information
    """
    return jsonify({
        "success": True,
        "data": {
            "api_status": "running",
            "parser_type": Config.PARSER_TYPE,
            "available_parsers": available_parsers(),
            "spacy_model": Config.SPACY_MODEL,
            "parser_loaded": _parser is not None,
            "loaded_model": _loaded_model()
        }
    }), 200


@api_bp.route("/parse-text", methods=["POST"])
def parse_text():
    """Parse raw business card text.

    Expects:
        - JSON body with 'text' field

    Returns:
        JSON with parsed contact data
    """
    data = request.get_json(silent=True)

    if not data or not isinstance(data.get("text"), str):
        return jsonify({
            "success": False,
            "error": "No text provided. Send JSON with 'text' field."
        }), 400

    try:
        contact = get_parser().get_contact_info(data["text"])
    except Exception as e:
        logger.error(f"Error parsing text: {str(e)}")
        return jsonify({
            "success": False,
            "error": str(e)
        }), 500

    return _contact_response(contact)


@api_bp.route("/parse-file", methods=["POST"])
def parse_file():
    """Parse an uploaded business card text file.

    Expects:
        - multipart/form-data with 'file' field (.txt, UTF-8)

    Returns:
        JSON with parsed contact data
    """
    if "file" not in request.files:
        return jsonify({
            "success": False,
            "error": "No file provided. Use 'file' field in form-data."
        }), 400

    file = request.files["file"]

    if file.filename == "":
        return jsonify({
            "success": False,
            "error": "No file selected"
        }), 400

    filename = secure_filename(file.filename)
    if not allowed_file(filename):
        return jsonify({
            "success": False,
            "error": f"File type not allowed. Allowed: {', '.join(sorted(Config.ALLOWED_EXTENSIONS))}"
        }), 400

    try:
        document = file.read().decode("utf-8")
    except UnicodeDecodeError:
        logger.error(f"Unable to load file: {filename}")
        return jsonify({
            "success": False,
            "error": f"Unable to load file: {filename} is not UTF-8 text"
        }), 400

    logger.info(f"Parsing business card text from upload: {filename}")

    try:
        contact = get_parser().get_contact_info(document)
    except Exception as e:
        logger.error(f"Error parsing file {filename}: {str(e)}")
        return jsonify({
            "success": False,
            "error": str(e)
        }), 500

    return _contact_response(contact)


# Error handlers
@api_bp.errorhandler(400)
def bad_request(error):
    """Handle 400 errors."""
    return jsonify({
        "success": False,
        "error": "Bad request"
    }), 400


@api_bp.errorhandler(404)
def not_found(error):
    """Handle 404 errors."""
    return jsonify({
        "success": False,
        "error": "Resource not found"
    }), 404


@api_bp.errorhandler(500)
def internal_error(error):
    """Handle 500 errors."""
    return jsonify({
        "success": False,
        "error": "Internal server error"
    }), 500
