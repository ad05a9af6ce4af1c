# app/dao/review_dao.py
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import DaoException
from app.models.review import Review

import logging
logger = logging.getLogger("app.dao")


class ReviewDao:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Review]:
        return self.db.query(Review).order_by(Review.id).all()

    def find_by_course_id(self, course_id: int) -> List[Review]:
        return (
            self.db.query(Review)
            .filter(Review.course_id == course_id)
            .order_by(Review.id)
            .all()
        )

    def add(self, review: Review) -> Review:
        # course_id 不存在時由 FK constraint 擋下
        try:
            self.db.add(review)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            msg = str(getattr(e, "orig", None) or e)
            logger.warning("Unable to add review for course %s: %s", review.course_id, msg)
            raise DaoException(msg) from e

        self.db.refresh(review)
        return review
