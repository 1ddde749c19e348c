"""
Logging configuration

Module loggers propagate to a single stdout handler. Access-log lines for the
health endpoint are dropped so liveness probes do not flood the output.
"""

import logging
import logging.config
from typing import Any, Dict


class HealthCheckFilter(logging.Filter):
    """Filter out werkzeug access logs for the health endpoint."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == 'werkzeug':
            message = record.getMessage()
            if '/api/health' in message and 'GET' in message:
                return False
        return True


def get_logging_config(level: str = 'INFO') -> Dict[str, Any]:
    """Build the dictConfig used by the application."""
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'filters': {
            'health_check_filter': {
                '()': HealthCheckFilter
            }
        },
        'formatters': {
            'default': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            }
        },
        'handlers': {
            'default': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'stream': 'ext://sys.stdout',
                'filters': ['health_check_filter']
            }
        },
        'loggers': {
            'storefront': {
                'handlers': ['default'],
                'level': level,
                'propagate': False
            },
            'werkzeug': {
                'handlers': ['default'],
                'level': 'INFO',
                'propagate': False
            }
        },
        'root': {
            'level': level,
            'handlers': ['default']
        }
    }


def configure_logging(app):
    """Apply the logging configuration for ``app``."""
    level = str(app.config.get('LOG_LEVEL', 'INFO')).upper()
    logging.config.dictConfig(get_logging_config(level))
    logging.getLogger(__name__).debug('Logging configured at %s', level)
