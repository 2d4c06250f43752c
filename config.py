import os
import logging
from datetime import timedelta
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def _env_bool(name, default):
    return os.environ.get(name, str(default)).lower() == 'true'


class Config:
    """Base configuration"""
    # Security - MUST be set in environment
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # Debug mode - default to False for safety
    DEBUG = _env_bool('DEBUG', False)
    TESTING = False

    # MongoDB Configuration - MUST be set in environment
    MONGO_URI = os.environ.get('MONGO_URI')
    MONGO_DB_NAME = os.environ.get('MONGO_DB_NAME', 'role_fit_quiz')

    # Admin dashboard and quiz gate; an unset QUIZ_ACCESS_CODE leaves the quiz open
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')
    QUIZ_ACCESS_CODE = os.environ.get('QUIZ_ACCESS_CODE')

    # Submission rate limiting
    RATE_LIMIT_MAX_REQUESTS = int(os.environ.get('RATE_LIMIT_MAX_REQUESTS', '5'))
    RATE_LIMIT_WINDOW_SECONDS = int(os.environ.get('RATE_LIMIT_WINDOW_SECONDS', '60'))

    # Scoring
    STRONG_SIGNAL_THRESHOLD = int(os.environ.get('STRONG_SIGNAL_THRESHOLD', '2'))
    MULTI_SELECT_STRONG_SIGNALS = _env_bool('MULTI_SELECT_STRONG_SIGNALS', True)
    MAX_EVIDENCE_HIGHLIGHTS = int(os.environ.get('MAX_EVIDENCE_HIGHLIGHTS', '5'))
    CONFIDENCE_STRONG_MIN = int(os.environ.get('CONFIDENCE_STRONG_MIN', '6'))
    CONFIDENCE_CLEAR_MIN = int(os.environ.get('CONFIDENCE_CLEAR_MIN', '3'))

    # Bonus (tie-breaker) questions
    BONUS_QUESTION_COUNT = int(os.environ.get('BONUS_QUESTION_COUNT', '2'))
    BONUS_TIE_DELTA = int(os.environ.get('BONUS_TIE_DELTA', '2'))

    # Session configuration
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = timedelta(hours=24)

    # Configuration validation
    @classmethod
    def validate(cls, require_database=True):
        """Validate that all required environment variables are set"""
        errors = []

        # Check required variables
        if require_database and not cls.MONGO_URI:
            errors.append("MONGO_URI is not set in environment variables")
        if not cls.SECRET_KEY:
            errors.append("SECRET_KEY is not set in environment variables")

        # Warn about default values
        if cls.DEBUG:
            logger.warning("⚠️ Debug mode is enabled. Disable in production!")
        if not cls.ADMIN_PASSWORD:
            logger.warning("⚠️ ADMIN_PASSWORD is not set; admin login is disabled")

        if errors:
            error_msg = "\n".join(errors)
            raise ValueError(f"Configuration validation failed:\n{error_msg}")

        return True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SESSION_COOKIE_SECURE = True


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True


class TestingConfig(Config):
    """Configuration for the test suite"""
    TESTING = True
    DEBUG = False
    SECRET_KEY = 'test-secret-key'
    MONGO_URI = None
    ADMIN_PASSWORD = 'test-admin-password'
    QUIZ_ACCESS_CODE = None
    RATE_LIMIT_MAX_REQUESTS = 5
    RATE_LIMIT_WINDOW_SECONDS = 60
    STRONG_SIGNAL_THRESHOLD = 2
    MULTI_SELECT_STRONG_SIGNALS = True


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration class based on environment"""
    env = os.environ.get('FLASK_ENV', 'development')

    config_map = {
        'development': DevelopmentConfig,
        'production': ProductionConfig,
        'testing': TestingConfig,
        'default': DevelopmentConfig
    }

    return config_map.get(env, config_map['default'])
