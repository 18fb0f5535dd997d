from flask import current_app, jsonify
from school_results.utils.academic import get_current_semester, get_current_session
from . import main_bp

@main_bp.route("/")
def home():
    return jsonify({
        "service": "school_results",
        "status": "ok",
        "session": get_current_session(),
        "semester": get_current_semester(),
        "passMark": current_app.config["PASS_MARK"],
    })
