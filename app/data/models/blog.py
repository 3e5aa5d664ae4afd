from sqlalchemy import Boolean, Column, Integer, String, Text

from app.data.database import Base
from app.data.models.mixins import SoftDeleteMixin, TimestampMixin


class BlogModel(SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "blogs"

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    excerpt = Column(String(500), nullable=False, default="")
    content = Column(Text, nullable=False, default="")
    author = Column(String(100), nullable=False)
    image_url = Column(String(500), nullable=False, default="")
    published = Column(Boolean, nullable=False, default=False, index=True)
