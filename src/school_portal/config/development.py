import os

from .base import Config

SECRET_KEY = Config.SECRET_KEY
API_BASE_URL = Config.API_BASE_URL
API_TIMEOUT = Config.API_TIMEOUT
WEEKLY_HOLIDAYS = Config.WEEKLY_HOLIDAYS
PAYMENT_CURRENCY = Config.PAYMENT_CURRENCY
UPLOAD_HANDLER_PATH = Config.UPLOAD_HANDLER_PATH

DEBUG = bool(int(os.environ.get("DEBUG", "1")))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG").upper()
