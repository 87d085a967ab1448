import os

from .base import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
API_BASE_URL = os.getenv("API_BASE_URL", Config.API_BASE_URL)
API_TIMEOUT = Config.API_TIMEOUT
WEEKLY_HOLIDAYS = Config.WEEKLY_HOLIDAYS
PAYMENT_CURRENCY = Config.PAYMENT_CURRENCY
UPLOAD_HANDLER_PATH = Config.UPLOAD_HANDLER_PATH

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
