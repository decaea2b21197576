# Development entry point (debug server).
# In production use wsgi.py + gunicorn.

"""Run the employee requests service locally.

The config class is chosen from the environment:

- ``APP_ENV=production`` or ``FLASK_ENV=production`` → ProductionConfig
- anything else → DevelopmentConfig.
"""

import os

from hr_requests import create_app
from hr_requests.config import DevelopmentConfig, ProductionConfig


def _select_config_class() -> type:
    """Pick the config class; any value starting with ``prod`` means production."""
    env = (os.getenv('APP_ENV') or os.getenv('FLASK_ENV') or 'development').lower()
    if env.startswith('prod'):
        return ProductionConfig
    return DevelopmentConfig


def main() -> None:
    app = create_app(_select_config_class())
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 5000)), debug=app.config.get('DEBUG', True))


if __name__ == '__main__':
    main()
