from flask import Blueprint

main_bp = Blueprint("main", __name__)

from school_results.main import routes  # noqa: E402,F401
