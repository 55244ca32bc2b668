from aws_lambda_powertools import Logger

from app.settings import Settings

settings = Settings()

# Logging
logger = Logger(service=settings.app_name, utc=True)
