"""
Flask Extensions
"""

from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

# Database instance
db = SQLAlchemy()

# Cross-origin support for the storefront and admin front ends
cors = CORS()
