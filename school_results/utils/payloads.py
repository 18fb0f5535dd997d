from flask import request


class PayloadError(ValueError):
    """Request body is missing or has the wrong shape."""


def json_body():
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        raise PayloadError("Request body must be a JSON object")

    return data


def list_field(data, name, required=True):
    value = data.get(name)

    if value is None and not required:
        return None
    if not isinstance(value, list):
        raise PayloadError(f"'{name}' must be a list")

    return value


def dict_field(data, name, required=True):
    value = data.get(name)

    if value is None and not required:
        return None
    if not isinstance(value, dict):
        raise PayloadError(f"'{name}' must be an object")

    return value


def number_field(data, name, required=True):
    value = data.get(name)

    if value is None and not required:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PayloadError(f"'{name}' must be a number")

    return value


def int_field(data, name, default, minimum=None, maximum=None):
    value = data.get(name)

    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise PayloadError(f"'{name}' must be an integer")
    if minimum is not None and value < minimum:
        raise PayloadError(f"'{name}' must be at least {minimum}")
    if maximum is not None and value > maximum:
        raise PayloadError(f"'{name}' must be at most {maximum}")

    return value


def subject_names(data, name="subjects"):
    return [str(s) for s in list_field(data, name) if s not in (None, "")]
