from pydantic import Field

from chemquiz.core.helpers import NO_SEARCH, Search, SearchCriteria
from chemquiz.core.schemas import BaseSchema, RecordId


class QuestionCategoryCreate(BaseSchema):
    title: str = Field(..., min_length=1, max_length=255)


class QuestionCategory(QuestionCategoryCreate):
    id: int


class QuestionCreate(BaseSchema):
    category_id: RecordId
    title: str = Field(..., min_length=1)
    correct_answer: str = Field(..., min_length=1)
    incorrect_answer_1: str = Field(..., min_length=1)
    incorrect_answer_2: str = Field(..., min_length=1)
    incorrect_answer_3: str = Field(..., min_length=1)


class Question(QuestionCreate):
    id: int


class QuestionCategorySearch(SearchCriteria):
    title: Search[str] = NO_SEARCH


class QuestionSearch(SearchCriteria):
    category_id: Search[RecordId] = NO_SEARCH
    title: Search[str] = NO_SEARCH
