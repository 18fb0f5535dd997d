import os

from dotenv import load_dotenv

load_dotenv()


class Config:

    SECRET_KEY = os.environ.get(
        "SECRET_KEY",
        "school_result_secret_key"
    )

    # Results
    PASS_MARK = float(os.environ.get("PASS_MARK", 50))
    RESULT_DECIMALS = int(os.environ.get("RESULT_DECIMALS", 2))

    # Timetable defaults
    SCHOOL_DAY_START = os.environ.get("SCHOOL_DAY_START", "08:00")
    SCHOOL_DAY_END = os.environ.get("SCHOOL_DAY_END", "15:00")
    BREAK_TIME = os.environ.get("BREAK_TIME", "11:00")
    LUNCH_TIME = os.environ.get("LUNCH_TIME", "12:00")
    COURSES_BEFORE_BREAK = int(os.environ.get("COURSES_BEFORE_BREAK", 2))
    COURSES_AFTER_BREAK = int(os.environ.get("COURSES_AFTER_BREAK", 2))

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    if os.environ.get("RENDER"):
        LOG_FILE = "/tmp/school_results.log"
    else:
        LOG_FILE = os.environ.get("LOG_FILE", "")


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"
    LOG_FILE = ""
