from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.schemas import BlogOut
from app.services.blog_service import BlogService

router = APIRouter(prefix="/api/blogs", tags=["blogs"])


@router.get("", response_model=List[BlogOut])
def list_blogs(db: Session = Depends(get_db)):
    return BlogService(db).list_published()


@router.get("/{blog_id}", response_model=BlogOut)
def get_blog(blog_id: int, db: Session = Depends(get_db)):
    return BlogService(db).get_published(blog_id)
