from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse
from typing import List

from constants import HTTPStatus, Messages
from dependencies import get_book_service
from dtos.mappers import to_book_dtos, to_book_record
from dtos.request import BookCreateRequest, ReviewRatingUpdateRequest
from dtos.response import BookDto, BookRecord
from services.interfaces import IBookService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post(
    "",
    response_class=PlainTextResponse,
    responses={HTTPStatus.NOT_FOUND: {"description": "User not found"}},
)
@handle_api_errors("Add book")
def add_book(
    request: BookCreateRequest,
    user_id: int = Query(..., alias="userId", description="Owning user ID"),
    service: IBookService = Depends(get_book_service)
):
    """Add a book to a user's collection"""
    _, user = service.add_book(request, user_id)
    return Messages.BOOK_ADDED.format(first_name=user.first_name)


@router.get(
    "/user/{user_id}",
    response_model=List[BookDto],
    responses={HTTPStatus.NOT_FOUND: {"description": "User not found"}},
)
@handle_api_errors("List books of user")
def list_books_by_user(user_id: int, service: IBookService = Depends(get_book_service)):
    """Get every book belonging to a user"""
    return to_book_dtos(service.list_books_by_user(user_id))


@router.delete(
    "/{book_id}/user/{user_id}",
    response_class=PlainTextResponse,
    responses={HTTPStatus.NOT_FOUND: {"description": "Book or user not found"}},
)
@handle_api_errors("Delete book")
def delete_book(book_id: int, user_id: int, service: IBookService = Depends(get_book_service)):
    """Delete a book from a user's collection"""
    book = service.delete_book(book_id, user_id)
    return Messages.BOOK_DELETED.format(title=book.title)


@router.patch(
    "/{book_id}",
    response_class=PlainTextResponse,
    responses={
        HTTPStatus.BAD_REQUEST: {"description": Messages.RATING_OUT_OF_RANGE},
        HTTPStatus.NOT_FOUND: {"description": "Book not found"},
    },
)
@handle_api_errors("Update review and rating")
def update_review_and_rating(
    book_id: int,
    request: ReviewRatingUpdateRequest,
    service: IBookService = Depends(get_book_service)
):
    """Replace the review and rating of a book"""
    service.update_book_review(book_id, request.review, request.rating)
    return Messages.REVIEW_UPDATED


@router.get(
    "/{book_id}",
    response_model=BookRecord,
    responses={HTTPStatus.NOT_FOUND: {"description": "Book not found"}},
)
def get_book(book_id: int, service: IBookService = Depends(get_book_service)):
    """Get a specific book"""
    book = service.find_book(book_id)
    if not book:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=Messages.BOOK_NOT_FOUND_DETAIL)
    return to_book_record(book)
