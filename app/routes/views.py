"""
HTML view routes for the Rooming List demo interface.

Routes:
    GET  /              - Rooming list events page
"""

import logging
from flask import Blueprint, render_template

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)

PAGE_TITLE = "Rooming List Management: Events"


@views_bp.route("/")
def index():
    """
    Render the events page.

    The page loads its rooming lists from the listing API and renders
    them client-side, like the production single-page app.

    Returns:
        Rendered index.html template.
    """
    logger.info("GET / - Rendering rooming list page")
    return render_template("index.html", page_title=PAGE_TITLE)
