import logging

from flask import current_app, jsonify

from school_results.grading import (
    aggregate,
    class_summary,
    classify,
    compute_cohort_results,
    compute_metrics,
    results_frame,
)
from school_results.utils.academic import to_number
from school_results.utils.payloads import (
    PayloadError,
    dict_field,
    json_body,
    list_field,
    number_field,
    subject_names,
)
from . import results_bp

logger = logging.getLogger(__name__)


def _places():
    return current_app.config["RESULT_DECIMALS"]


def _cohort_results(data):
    students = list_field(data, "students")
    subjects = subject_names(data)
    period1 = list_field(data, "period1")
    period2 = list_field(data, "period2", required=False)

    return compute_cohort_results(
        students,
        subjects,
        period1,
        period2,
        start=data.get("startDate"),
        end=data.get("endDate"),
        pass_mark=current_app.config["PASS_MARK"],
        places=_places(),
    ), subjects


@results_bp.route("/aggregate", methods=["POST"])
def aggregate_scores():
    data = json_body()
    scores = aggregate(list_field(data, "entries"), subject_names(data), _places())
    return jsonify({"scores": scores})


@results_bp.route("/metrics", methods=["POST"])
def student_metrics():
    data = json_body()
    subject_values = dict_field(data, "subjectValues")
    cohort_averages = list_field(data, "cohortAverages")

    values = {}
    for subject, value in subject_values.items():
        number = to_number(value)
        if number is None:
            raise PayloadError(f"Score for '{subject}' must be a number")
        values[subject] = number

    averages = [to_number(a) for a in cohort_averages]
    if any(a is None for a in averages):
        raise PayloadError("'cohortAverages' must only contain numbers")

    metrics = compute_metrics(values, averages, _places())
    return jsonify(metrics.to_dict())


@results_bp.route("/classify", methods=["POST"])
def classify_student():
    data = json_body()
    period1 = number_field(data, "period1Average")
    period2 = number_field(data, "period2Average", required=False)

    return jsonify({
        "passFail": classify(period1, period2, current_app.config["PASS_MARK"])
    })


@results_bp.route("/cohort", methods=["POST"])
def cohort_results():
    data = json_body()
    results, _ = _cohort_results(data)
    summary = class_summary(results, _places())

    logger.info(
        "Computed results for %d students (average %s, pass rate %s%%)",
        summary.student_count, summary.average_score, summary.pass_rate,
    )

    return jsonify({
        "results": [r.to_dict() for r in results],
        "summary": summary.to_dict(),
    })


@results_bp.route("/table", methods=["POST"])
def results_table():
    data = json_body()
    results, subjects = _cohort_results(data)

    df = results_frame(results, subjects)
    rows = df.astype(object).where(df.notna(), None).to_dict(orient="records")

    return jsonify({"columns": list(df.columns), "rows": rows})
