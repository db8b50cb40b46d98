from functools import lru_cache

from chemquiz.api.v1.models import Question, QuestionCategory
from chemquiz.core.repositories import BaseRepository


class QuestionRepository(BaseRepository[Question]):
    search_columns = {
        "category_id": Question.category_id,
        "title": Question.title,
    }

    def __init__(self):
        super().__init__(Question)


class QuestionCategoryRepository(BaseRepository[QuestionCategory]):
    search_columns = {
        "title": QuestionCategory.title,
    }

    def __init__(self):
        super().__init__(QuestionCategory)


@lru_cache()
def get_question_repository() -> QuestionRepository:
    return QuestionRepository()


@lru_cache()
def get_question_category_repository() -> QuestionCategoryRepository:
    return QuestionCategoryRepository()
