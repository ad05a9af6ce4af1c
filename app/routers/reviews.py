# app/routers/reviews.py
import re

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.dao.review_dao import ReviewDao
from app.database import get_db
from app.exceptions import ApiError, DaoException
from app.models.review import Review
from app.schemas.review import ReviewCreate, ReviewOut

import logging
logger = logging.getLogger("app.reviews")


router = APIRouter(prefix="/courses", tags=["Reviews"])


def get_review_dao(db: Session = Depends(get_db)) -> ReviewDao:
    return ReviewDao(db)


COURSE_ID_RE = re.compile(r"[+-]?[0-9]+")
INT_MIN, INT_MAX = -2**31, 2**31 - 1


def parse_course_id(raw: str) -> int:
    """
    Parse a path id as a signed 32-bit integer; raises ValueError.
    Only ASCII digits with an optional sign, no whitespace or underscores.
    """
    if not COURSE_ID_RE.fullmatch(raw):
        raise ValueError(f"not an integer: {raw!r}")
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"out of range: {raw}")
    return value


@router.get("/{course_id}/reviews", response_model=list[ReviewOut])
def list_reviews(course_id: str, review_dao: ReviewDao = Depends(get_review_dao)):
    try:
        cid = parse_course_id(course_id)
    except ValueError:
        # id 無法解析時回傳空陣列，不當成錯誤
        return []
    return review_dao.find_by_course_id(cid)


@router.post("/{course_id}/reviews", response_model=ReviewOut, status_code=201)
def add_review(
    course_id: str,
    body: ReviewCreate,
    review_dao: ReviewDao = Depends(get_review_dao),
):
    try:
        cid = parse_course_id(course_id)
    except ValueError:
        raise ApiError(f"Invalid course id: {course_id}", 400)

    if body.course_id != cid:
        raise ApiError("Mismatched ID", 400)

    review = Review(course_id=cid, rating=body.rating, comment=body.comment)
    try:
        review_dao.add(review)
    except DaoException as e:
        # course 不存在 -> FOREIGN KEY constraint failed
        raise ApiError(str(e), 500)

    logger.info("Review %s created for course %s", review.id, cid)
    return review
