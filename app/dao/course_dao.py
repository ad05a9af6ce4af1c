# app/dao/course_dao.py
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import DaoException
from app.models.course import Course

import logging
logger = logging.getLogger("app.dao")


class CourseDao:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Course]:
        return self.db.query(Course).order_by(Course.id).all()

    def add(self, course: Course) -> Course:
        """Insert `course`; its id is filled in by the database."""
        try:
            self.db.add(course)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            msg = str(getattr(e, "orig", None) or e)
            logger.warning("Unable to add course %r: %s", course.name, msg)
            raise DaoException(msg) from e

        self.db.refresh(course)
        return course
