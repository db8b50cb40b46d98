from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.api.v1.repositories import (
    QuestionCategoryRepository,
    QuestionRepository,
    get_question_category_repository,
    get_question_repository,
)
from chemquiz.api.v1.schemas import (
    Question,
    QuestionCategory,
    QuestionCategoryCreate,
    QuestionCategorySearch,
    QuestionCreate,
    QuestionSearch,
)
from chemquiz.core.routers import PathId, create, delete, filter, parse_criteria, read_item
from chemquiz.core.schemas import ApiResponse
from chemquiz.core.security import require_access
from chemquiz.db.session import get_session

router = APIRouter(prefix="/questions")
category_router = APIRouter(prefix="/question-categories")


@router.get("", response_model=ApiResponse, dependencies=[Depends(require_access("GetQuestions"))])
async def search_questions(
        request: Request,
        db: Annotated[AsyncSession, Depends(get_session)],
        question_repository: Annotated[QuestionRepository, Depends(get_question_repository)]
):
    criteria = parse_criteria(request, QuestionSearch)
    return await filter(criteria, db, question_repository, Question)


@router.get("/{question_id}", response_model=ApiResponse, dependencies=[Depends(require_access("GetQuestions"))])
async def read_question(
        question_id: PathId,
        db: Annotated[AsyncSession, Depends(get_session)],
        question_repository: Annotated[QuestionRepository, Depends(get_question_repository)]
):
    return await read_item(question_id, db, question_repository, Question)


@router.post("", response_model=ApiResponse, status_code=201, dependencies=[Depends(require_access("CreateQuestions"))])
async def create_question(
        question: QuestionCreate,
        db: Annotated[AsyncSession, Depends(get_session)],
        question_repository: Annotated[QuestionRepository, Depends(get_question_repository)]
):
    return await create(db, question, question_repository, Question)


@router.delete("/{question_id}", response_model=ApiResponse, dependencies=[Depends(require_access("DeleteQuestions"))])
async def delete_question(
        question_id: PathId,
        db: Annotated[AsyncSession, Depends(get_session)],
        question_repository: Annotated[QuestionRepository, Depends(get_question_repository)]
):
    return await delete(question_id, db, question_repository)


@category_router.get("", response_model=ApiResponse, dependencies=[Depends(require_access("GetQuestions"))])
async def search_question_categories(
        request: Request,
        db: Annotated[AsyncSession, Depends(get_session)],
        category_repository: Annotated[QuestionCategoryRepository, Depends(get_question_category_repository)]
):
    criteria = parse_criteria(request, QuestionCategorySearch)
    return await filter(criteria, db, category_repository, QuestionCategory)


@category_router.post(
    "", response_model=ApiResponse, status_code=201, dependencies=[Depends(require_access("CreateQuestions"))]
)
async def create_question_category(
        category: QuestionCategoryCreate,
        db: Annotated[AsyncSession, Depends(get_session)],
        category_repository: Annotated[QuestionCategoryRepository, Depends(get_question_category_repository)]
):
    return await create(db, category, category_repository, QuestionCategory)


@category_router.delete(
    "/{category_id}", response_model=ApiResponse, dependencies=[Depends(require_access("DeleteQuestions"))]
)
async def delete_question_category(
        category_id: PathId,
        db: Annotated[AsyncSession, Depends(get_session)],
        category_repository: Annotated[QuestionCategoryRepository, Depends(get_question_category_repository)]
):
    return await delete(category_id, db, category_repository)
