from school_results.main import main_bp
from school_results.results import results_bp
from school_results.attendance import attendance_bp
from school_results.timetable import timetable_bp

def register_blueprints(app):
    app.register_blueprint(main_bp)
    app.register_blueprint(results_bp)
    app.register_blueprint(attendance_bp)
    app.register_blueprint(timetable_bp)
