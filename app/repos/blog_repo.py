from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.blog import BlogModel


class BlogRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_blog(self, blog_id: int, published_only: bool = False) -> BlogModel | None:
        blog = self.db.get(BlogModel, blog_id)
        if not blog or blog.is_deleted:
            return None
        if published_only and not blog.published:
            return None
        return blog

    def list_blogs(self, published_only: bool = False) -> list[BlogModel]:
        stmt = select(BlogModel).where(BlogModel.deleted_at.is_(None))
        if published_only:
            stmt = stmt.where(BlogModel.published.is_(True))
        stmt = stmt.order_by(BlogModel.created_at.desc(), BlogModel.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def add(self, blog: BlogModel) -> BlogModel:
        self.db.add(blog)
        self.db.flush()
        return blog

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
