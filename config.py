import os
from dotenv import load_dotenv

load_dotenv() # Load variables from the .env file


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'staffing-default-secret-key')
    APP_ENV = os.getenv('APP_ENV', 'development')
    DEBUG = APP_ENV == 'development'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    DB_HOST = os.getenv('DB_HOST', 'localhost')
    DB_USER = os.getenv('DB_USER', 'root')
    DB_PASSWORD = os.getenv('DB_PASSWORD')
    DB_NAME = os.getenv('DB_NAME', 'staffing_management')

    # Build MySQL connection string (using PyMySQL driver) unless overridden
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL') or (
        f"mysql+pymysql://{DB_USER}@{DB_HOST}/{DB_NAME}"
        if not DB_PASSWORD else
        f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}/{DB_NAME}"
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False  # disables overhead warning
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    JSON_SORT_KEYS = False


class TestConfig(Config):
    TESTING = True
    DEBUG = False
    APP_ENV = 'test'
    LOG_LEVEL = 'WARNING'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}
