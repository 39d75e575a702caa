from flask import Blueprint

from .health import health
from .methods import list_methods, toggle_method
from .values import get_values


api_bp = Blueprint("api", __name__)
api_bp.add_url_rule("/health", view_func=health)
api_bp.add_url_rule("/methods", view_func=list_methods)
api_bp.add_url_rule("/methods/toggle", view_func=toggle_method, methods=["POST"])
api_bp.add_url_rule("/values", view_func=get_values, methods=["GET", "POST"])


__all__ = ["api_bp"]
