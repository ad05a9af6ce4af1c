# app/routers/courses.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.dao.course_dao import CourseDao
from app.database import get_db
from app.exceptions import ApiError, DaoException
from app.models.course import Course
from app.schemas.course import CourseCreate, CourseOut

import logging
logger = logging.getLogger("app.courses")


router = APIRouter(prefix="/courses", tags=["Courses"])


def get_course_dao(db: Session = Depends(get_db)) -> CourseDao:
    return CourseDao(db)


@router.get("", response_model=list[CourseOut])
def list_courses(course_dao: CourseDao = Depends(get_course_dao)):
    return course_dao.find_all()


@router.post("", response_model=CourseOut, status_code=201)
def add_course(body: CourseCreate, course_dao: CourseDao = Depends(get_course_dao)):
    course = Course(name=body.name, url=body.url)
    try:
        course_dao.add(course)
    except DaoException as e:
        # e.g. name 為 null -> NOT NULL constraint failed
        raise ApiError(str(e), 500)

    logger.info("Course %s created: %s", course.id, course.name)
    return course
