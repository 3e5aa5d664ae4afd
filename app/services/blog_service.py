from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.blog import BlogModel
from app.domain.errors import InternalError, NotFoundError
from app.domain.schemas import BlogIn
from app.repos.blog_repo import BlogRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class BlogService:
    """
    Publicznie widoczne tylko opublikowane wpisy,
    panel admina widzi wszystko.
    """

    def __init__(self, db: Session):
        self.repo = BlogRepo(db)

    #query
    def list_published(self) -> list[BlogModel]:
        return self.repo.list_blogs(published_only=True)

    def get_published(self, blog_id: int) -> BlogModel:
        blog = self.repo.get_blog(blog_id, published_only=True)
        if not blog:
            raise NotFoundError("Blog not found")
        return blog

    def list_blogs(self) -> list[BlogModel]:
        return self.repo.list_blogs()

    def get_blog(self, blog_id: int) -> BlogModel:
        blog = self.repo.get_blog(blog_id)
        if not blog:
            raise NotFoundError("Blog not found")
        return blog

    #commands
    def create_blog(self, payload: BlogIn) -> BlogModel:
        blog = BlogModel(**payload.model_dump())
        self._save("create blog", new=blog)
        logger.info(f"Blog {blog.id} created (published={blog.published})")
        return blog

    def update_blog(self, blog_id: int, payload: BlogIn) -> BlogModel:
        blog = self.get_blog(blog_id)
        for field, value in payload.model_dump().items():
            setattr(blog, field, value)
        self._save("update blog")
        logger.info(f"Blog {blog_id} updated")
        return blog

    def delete_blog(self, blog_id: int) -> None:
        blog = self.get_blog(blog_id)
        blog.soft_delete()
        self._save("delete blog")
        logger.info(f"Blog {blog_id} soft-deleted")

    def _save(self, action: str, new: BlogModel | None = None) -> None:
        try:
            if new is not None:
                self.repo.add(new)
            self.repo.commit()
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise InternalError(f"Failed to {action}") from e
