"""
Logging configuration for the schema mapper.
"""

import logging
import os

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(level: str = None):
    """Setup basic logging configuration."""
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    
    handlers = [logging.StreamHandler()]
    if os.path.exists('logs'):
        handlers.append(logging.FileHandler('logs/app.log', mode='a'))
    
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers
    )

def get_logger(name: str):
    """Get a logger instance."""
    return logging.getLogger(name)
