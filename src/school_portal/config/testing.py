from .base import Config

SECRET_KEY = "test-secret"
API_BASE_URL = "http://backend.test/api"
API_TIMEOUT = 5
WEEKLY_HOLIDAYS = Config.WEEKLY_HOLIDAYS
PAYMENT_CURRENCY = Config.PAYMENT_CURRENCY
UPLOAD_HANDLER_PATH = Config.UPLOAD_HANDLER_PATH

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
