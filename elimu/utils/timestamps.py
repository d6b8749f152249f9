from datetime import datetime
import pytz


def get_utc_time():
    return datetime.now(pytz.utc)
