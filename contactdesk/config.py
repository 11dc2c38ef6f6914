import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # JSON API only, no session-backed forms
    WTF_CSRF_ENABLED = False

    # Database - SQLite file, created on first start
    DB_PATH = os.environ.get('DB_PATH', './data/database.db')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f'sqlite:///{os.path.abspath(DB_PATH)}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server
    PORT = int(os.environ.get('PORT', 3000))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LANDING_PAGE = os.environ.get('LANDING_PAGE', 'index.html')

    # EmailJS Configuration
    EMAILJS_API_URL = os.environ.get('EMAILJS_API_URL',
                                     'https://api.emailjs.com/api/v1.0/email/send')
    EMAILJS_SERVICE_ID = os.environ.get('EMAILJS_SERVICE_ID')
    EMAILJS_TEMPLATE_ID = os.environ.get('EMAILJS_TEMPLATE_ID')
    EMAILJS_WELCOME_TEMPLATE_ID = os.environ.get('EMAILJS_WELCOME_TEMPLATE_ID')
    EMAILJS_PUBLIC_KEY = os.environ.get('EMAILJS_PUBLIC_KEY')
    EMAILJS_PRIVATE_KEY = os.environ.get('EMAILJS_PRIVATE_KEY')
    TO_EMAIL = os.environ.get('TO_EMAIL')
    EMAIL_TIMEOUT = float(os.environ.get('EMAIL_TIMEOUT', 10))


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    SQLALCHEMY_ECHO = False


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DB_PATH = None
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'

    # Never talk to the real provider from tests
    EMAILJS_SERVICE_ID = None
    EMAILJS_TEMPLATE_ID = None
    EMAILJS_WELCOME_TEMPLATE_ID = None
    EMAILJS_PUBLIC_KEY = None
    EMAILJS_PRIVATE_KEY = None
    TO_EMAIL = None


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
