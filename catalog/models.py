from sqlalchemy import Column, Integer, Numeric, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(Numeric(asdecimal=False))  # NUMERIC: SQLite хранит 250 как целое
    image_url = Column("imageUrl", String(512))
