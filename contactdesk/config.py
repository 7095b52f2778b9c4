import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration."""
    # Database - relative SQLite paths resolve inside the app instance folder
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///contactdesk.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Listener
    PORT = int(os.environ.get('PORT', 5000))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Frontends allowed to call the API with credentials
    CORS_ALLOWED_ORIGINS = ('http://localhost:8080', 'http://localhost:3000')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    SQLALCHEMY_ECHO = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
