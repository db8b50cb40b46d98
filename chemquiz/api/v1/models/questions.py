from typing import List

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chemquiz.core.models import Base, BigId


class QuestionCategory(Base):
    __tablename__ = "question_categories"

    id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)

    questions: Mapped[List["Question"]] = relationship(back_populates="category")

    def __repr__(self):
        return f"<QuestionCategory(title='{self.title}')>"


class Question(Base):
    """A multiple choice question with one correct and three incorrect answers."""
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    category_id: Mapped[int] = mapped_column(
        BigId, ForeignKey("question_categories.id"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    correct_answer: Mapped[str] = mapped_column(Text, nullable=False)
    incorrect_answer_1: Mapped[str] = mapped_column(Text, nullable=False)
    incorrect_answer_2: Mapped[str] = mapped_column(Text, nullable=False)
    incorrect_answer_3: Mapped[str] = mapped_column(Text, nullable=False)

    category: Mapped["QuestionCategory"] = relationship(back_populates="questions")

    def __repr__(self):
        return f"<Question(id='{self.id}', category_id='{self.category_id}')>"
