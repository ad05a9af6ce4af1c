from app.dao.course_dao import CourseDao
from app.dao.review_dao import ReviewDao
from app.models.course import Course
from app.models.review import Review

import logging
logger = logging.getLogger("app.sample_data")


SAMPLE_COURSES = [
    ("Data Structures", "https://www.cs.jhu.edu/~cs226/"),
    ("Object-Oriented Software Engineering", "https://www.jhu-oose.com/"),
    ("Intermediate Programming", "https://www.cs.jhu.edu/~cs220/"),
    ("Computer System Fundamentals", "https://www.cs.jhu.edu/~cs229/"),
    ("Automata and Computation Theory", "https://www.cs.jhu.edu/~cs363/"),
]

# (index into SAMPLE_COURSES, rating, comment)
SAMPLE_REVIEWS = [
    (0, 5, "Great intro to the classic structures, heavy but fair workload."),
    (0, 4, "Lectures are clear, homework takes a while."),
    (1, 5, "Team project was the best part of the semester."),
    (1, 3, "Lots of moving parts, start the iterations early."),
    (2, 4, "Solid C and C++ practice."),
    (3, 4, "Finally understood what the machine is doing."),
]


def add_sample_courses(course_dao: CourseDao) -> list[Course]:
    added = [course_dao.add(Course(name=name, url=url)) for name, url in SAMPLE_COURSES]
    logger.info("Added %d sample courses", len(added))
    return added


def add_sample_reviews(course_dao: CourseDao, review_dao: ReviewDao) -> list[Review]:
    """Attach the sample reviews to the courses currently in the store."""
    courses = course_dao.find_all()
    added = []
    for idx, rating, comment in SAMPLE_REVIEWS:
        if idx >= len(courses):
            continue
        review = Review(course_id=courses[idx].id, rating=rating, comment=comment)
        added.append(review_dao.add(review))
    logger.info("Added %d sample reviews", len(added))
    return added


def seed_sample_data(course_dao: CourseDao, review_dao: ReviewDao) -> bool:
    # 已有資料就不重複新增
    if course_dao.find_all():
        logger.info("Courses already present, skipping sample data")
        return False
    add_sample_courses(course_dao)
    add_sample_reviews(course_dao, review_dao)
    return True
