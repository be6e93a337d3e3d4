"""
Application Configuration

FLOW OVERVIEW
- Config.__init__
  • Reads FLASK_ENV to select which .env file to load (dev/prod). Testing bypasses file load.
- Properties expose configuration values. DATABASE_URL has no default: reading
  SQLALCHEMY_DATABASE_URI without it raises ConfigurationError, so the app
  refuses to start instead of failing on the first request.
- Display-only values (page title, GitHub/Neon identifiers) feed the
  deployment banner and have no effect on storage behaviour.
"""

import os
from dotenv import load_dotenv

from ..errors import ConfigurationError


def _env(name, default=None):
    """Read NAME, falling back to the NEXT_PUBLIC_ prefixed variant used by hosted deployments."""
    value = os.getenv(name)
    if value:
        return value
    return os.getenv(f'NEXT_PUBLIC_{name}', default)


def normalize_database_url(url):
    """SQLAlchemy only accepts the postgresql:// scheme."""
    if url.startswith('postgres://'):
        return 'postgresql://' + url[len('postgres://'):]
    return url


class Config:
    """Base configuration class"""

    def __init__(self):
        # Load environment variables based on FLASK_ENV
        env_file = os.getenv('FLASK_ENV', 'development')
        if env_file == 'testing':
            # For testing, don't load config files, use environment variables directly
            pass
        elif env_file == 'production':
            load_dotenv('config.prod.env')
        else:
            load_dotenv('config.env')  # Default to development

    @property
    def SECRET_KEY(self):
        """Application secret key"""
        return os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        """Database connection URI"""
        url = os.getenv('DATABASE_URL')
        if not url:
            raise ConfigurationError('DATABASE_URL is required')
        return normalize_database_url(url)

    @property
    def SQLALCHEMY_TRACK_MODIFICATIONS(self):
        """SQLAlchemy track modifications setting"""
        return False

    @property
    def SQLALCHEMY_ENGINE_OPTIONS(self):
        """Engine options; serverless Postgres drops idle connections"""
        return {'pool_pre_ping': True}

    @property
    def LOG_LEVEL(self):
        """Root log level used by the entry point"""
        return os.getenv('LOG_LEVEL', 'INFO').upper()

    @property
    def PAGE_TITLE(self):
        """Heading shown at the top of the page"""
        return _env('PAGE_TITLE', 'Neon Todos')

    @property
    def GITHUB_REPOSITORY(self):
        return _env('GITHUB_REPOSITORY')

    @property
    def GITHUB_REF(self):
        return _env('GITHUB_REF')

    @property
    def GITHUB_PULL_NUMBER(self):
        """Set only on preview deployments"""
        return _env('GITHUB_PULL_NUMBER')

    @property
    def NEON_BRANCH(self):
        return _env('NEON_BRANCH')

    @property
    def NEON_ONBOARDING_ORIGIN(self):
        return _env('NEON_ONBOARDING_ORIGIN')

    @property
    def NEON_ONBOARDING_ID(self):
        return _env('NEON_ONBOARDING_ID')
