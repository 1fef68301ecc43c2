from .base import *
from .base import env

DEBUG = env.bool("DJANGO_DEBUG", True)
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="lH3vN0pq7Yc2Rk9TzW4sJ8mXbE1uGf6aDoQiS5tLyV0nCwPjK2rMh7BxUe3gZd9F",
)
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1"]
