"""
SQLAlchemy models for the demo product catalogue.
"""

from sqlalchemy import Column, Integer, String, Float
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Product(Base):
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False, default=0.0)
    sku = Column(String(8), nullable=False, unique=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'price': self.price,
            'sku': self.sku,
        }

    def __repr__(self):
        return f"<Product(id={self.id}, sku='{self.sku}', name='{self.name[:50]}')>"
