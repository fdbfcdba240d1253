"""
Logging utilities for tracking visitor activity across the site.
"""

import logging

from flask import has_request_context, request

logger = logging.getLogger(__name__)


def _visitor_description():
    if has_request_context() and request.remote_addr:
        return f"Visitor {request.remote_addr}"
    return "Anonymous visitor"


def log_project_visit(project_name, project_display_name=None):
    """
    Log a visit to a project/page.

    Args:
        project_name (str): The project identifier (e.g., 'tic_tac_toe')
        project_display_name (str, optional): Human-readable name for the description.
                                              Defaults to project_name if not provided.
    """
    display_name = project_display_name or project_name
    logger.info(f"[{project_name}] Visit: {_visitor_description()} visited {display_name}")


def log_game_event(project_name, description):
    """Log something that happened inside a game, e.g. an accepted move."""
    logger.info(f"[{project_name}] Game: {_visitor_description()} {description}")
