# utils/dates_handler.py

import datetime


def utcnow() -> datetime.datetime:
    """ Timezone-aware current time, used for every stored timestamp. """
    return datetime.datetime.now(datetime.timezone.utc)
