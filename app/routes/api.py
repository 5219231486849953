"""
JSON API endpoints for rooming lists.

Endpoints:
    GET /api/health                           - Health check
    GET /api/rooming-lists                    - List rooming lists (sorting, status filter)
    GET /api/rooming-lists/<id>/bookings      - Bookings of one rooming list
"""

import logging
import os
from flask import Blueprint, jsonify, request, Response
from sqlalchemy import select

from app import db
from app.models import RoomingList, RoomingListStatus

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

# Query parameter value -> sortable column
SORT_FIELDS = {
    "rfpName": RoomingList.rfp_name,
    "eventName": RoomingList.event_name,
    "agreementType": RoomingList.agreement_type,
    "cutOffDate": RoomingList.cut_off_date,
    "status": RoomingList.status,
}

SORT_ORDERS = ("ASC", "DESC")


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "environment": os.getenv("ENVIRONMENT", "unknown"),
        "version": os.getenv("APP_VERSION", "unknown")
    }), 200


@api_bp.route("/rooming-lists", methods=["GET"])
def get_rooming_lists() -> tuple[Response, int]:
    """
    List rooming lists with optional sorting and status filtering.

    Query Parameters:
        sortBy: Sort field (rfpName, eventName, agreementType, cutOffDate, status)
        sortOrder: Sort order (ASC, DESC)
        status: Comma-separated statuses to include (active, closed, cancelled)

    Returns:
        JSON array of rooming lists and 200 status code,
        or error message and 400 for invalid parameters.
    """
    sort_by = request.args.get("sortBy", "rfpName")
    sort_order = request.args.get("sortOrder", "ASC").upper()
    logger.info("GET /api/rooming-lists - sortBy=%s sortOrder=%s", sort_by, sort_order)

    if sort_by not in SORT_FIELDS:
        return jsonify({"error": f"Invalid sortBy. Must be one of: {list(SORT_FIELDS)}"}), 400
    if sort_order not in SORT_ORDERS:
        return jsonify({"error": f"Invalid sortOrder. Must be one of: {list(SORT_ORDERS)}"}), 400

    column = SORT_FIELDS[sort_by]
    order = column.asc() if sort_order == "ASC" else column.desc()
    stmt = select(RoomingList).order_by(order, RoomingList.id.asc())

    status_param = request.args.get("status")
    if status_param:
        statuses = [value.strip().lower() for value in status_param.split(",") if value.strip()]
        valid_statuses = [s.value for s in RoomingListStatus]
        invalid = [value for value in statuses if value not in valid_statuses]
        if invalid:
            return jsonify({"error": f"Invalid status. Must be one of: {valid_statuses}"}), 400
        stmt = stmt.where(RoomingList.status.in_(statuses))

    rooming_lists = db.session.scalars(stmt).all()
    logger.info("Found %s rooming lists", len(rooming_lists))

    return jsonify([rooming_list.to_dict() for rooming_list in rooming_lists]), 200


@api_bp.route("/rooming-lists/<int:rooming_list_id>/bookings", methods=["GET"])
def get_bookings(rooming_list_id: int) -> tuple[Response, int]:
    """
    List the bookings of one rooming list.

    Args:
        rooming_list_id: The unique identifier of the rooming list.

    Returns:
        JSON array of bookings and 200 status code,
        or error message and 404 if the rooming list does not exist.
    """
    logger.info("GET /api/rooming-lists/%s/bookings - Fetching bookings", rooming_list_id)

    rooming_list = db.session.get(RoomingList, rooming_list_id)
    if not rooming_list:
        logger.warning("Rooming list %s not found", rooming_list_id)
        return jsonify({"error": "Rooming list not found"}), 404

    return jsonify([booking.to_dict() for booking in rooming_list.bookings]), 200


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.errorhandler(404)
def not_found(error: Exception) -> tuple[Response, int]:
    """Handle 404 Not Found errors."""
    return jsonify({"error": "Resource not found"}), 404


@api_bp.errorhandler(500)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Handle 500 Internal Server errors."""
    logger.error("Internal server error: %s", error)
    return jsonify({"error": "Internal server error"}), 500
