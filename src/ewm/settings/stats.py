from decouple import config

# External view-count service (stats server).
STATS_SERVER_URL = config("STATS_SERVER_URL", default="http://localhost:9090")
STATS_APP_NAME = config("STATS_APP_NAME", default="ewm-main-service")
STATS_TIMEOUT_SECONDS = config("STATS_TIMEOUT_SECONDS", default=5.0, cast=float)
