"""
Product Model
"""

from datetime import datetime, timezone

from storefront.extensions import db


def utcnow():
    """Naive UTC timestamp, as stored in DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _isoformat(value):
    return value.isoformat() if value is not None else None


class Product(db.Model):
    """Catalog product shown in the storefront"""
    __tablename__ = 'products'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    price = db.Column(db.Float, nullable=False)
    stock_quantity = db.Column(db.Integer, nullable=False)
    image_filename = db.Column(db.String(255))  # file lives outside the service
    category = db.Column(db.String(100), nullable=False)
    instagram_handle = db.Column(db.String(100))
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'price': self.price,
            'stock_quantity': self.stock_quantity,
            'image_filename': self.image_filename,
            'category': self.category,
            'instagram_handle': self.instagram_handle,
            'created_at': _isoformat(self.created_at),
            'updated_at': _isoformat(self.updated_at),
        }

    def __repr__(self):
        return f'<Product {self.id} {self.name}>'
