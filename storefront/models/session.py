"""
Admin Session Model

One row per issued admin token. Rows are removed on logout; expired rows
are simply ignored by verification.
"""

from storefront.extensions import db
from storefront.models.product import utcnow


class AdminSession(db.Model):
    """Opaque admin token with its expiry"""
    __tablename__ = 'admin_sessions'

    token = db.Column(db.String(128), primary_key=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    expires_at = db.Column(db.DateTime, nullable=False)

    def is_active(self, now=None):
        """True while ``expires_at`` is strictly after ``now``."""
        if now is None:
            now = utcnow()
        return self.expires_at > now

    def __repr__(self):
        # Tokens are credentials; only show a prefix.
        return f'<AdminSession {self.token[:8]}... expires {self.expires_at}>'
