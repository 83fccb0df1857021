import logging
from pathlib import Path

from flask import current_app, jsonify, request

from . import catalog_bp
from extensions import catalog
from services.catalog_errors import CatalogError, SourceNotFound

logger = logging.getLogger(__name__)


@catalog_bp.route("/courses")
def list_courses():
    # ascending by course number (in-order walk of the store)
    courses = [c.to_dict() for c in catalog.manager.courses()]
    return jsonify({"count": len(courses), "courses": courses})


@catalog_bp.route("/courses/<path:number>")
def get_course(number: str):
    course = catalog.manager.find_by_number(number)
    if course is None:
        return jsonify({"error": "Course not found.", "number": number}), 404
    return jsonify(course.to_dict())


@catalog_bp.route("/catalog/load", methods=["POST"])
def load_catalog():
    """
    Reload the catalog from disk.

    Body (optional JSON): {"file": "<name inside CATALOG_DIR>"}; defaults to CATALOG_PATH.
    A failed load keeps whatever catalog was loaded before.
    """
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return jsonify({"error": 'Request body must be a JSON object like {"file": "..."}'}), 400

    file_name = str(payload.get("file") or "").strip()

    if file_name:
        catalog_dir = Path(current_app.config["CATALOG_DIR"]).resolve()
        path = (catalog_dir / file_name).resolve()
        if catalog_dir not in path.parents:
            return jsonify({"error": f"File must be inside the catalog directory: {file_name}"}), 400
    else:
        path = current_app.config["CATALOG_PATH"]

    try:
        count = catalog.manager.load_file(path)
    except SourceNotFound as e:
        logger.warning("Catalog load failed: %s", e)
        return jsonify({"error": str(e)}), 404
    except CatalogError as e:
        # unreadable source or malformed line
        logger.warning("Catalog load failed: %s", e)
        return jsonify({"error": str(e)}), 400

    logger.info("Loaded %d courses from %s", count, path)
    return jsonify({"loaded": count})
