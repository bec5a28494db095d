from datetime import timedelta

from decouple import config

# Minimum distance between "now" and the event date when an event is created or rescheduled.
EVENT_MIN_LEAD_TIME = timedelta(hours=config("EVENT_MIN_LEAD_TIME_HOURS", default=2, cast=int))

# Minimum distance between the publication moment and the event date for published events.
EVENT_PUBLICATION_LEAD_TIME = timedelta(hours=config("EVENT_PUBLICATION_LEAD_TIME_HOURS", default=1, cast=int))
