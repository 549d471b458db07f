"""API endpoints for community posts."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.db.database import async_get_db
from ...core.exceptions import PostNotFoundError
from ...schemas.post import LikeResult, PostCreate, PostList, PostRead, PostUpdate
from ...services.author_service import AuthorService, SnapshotAuthorService
from ...services.like_service import LikeService
from ...services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["Posts"])


async def get_author_service() -> AuthorService:
    return SnapshotAuthorService()


async def get_post_service(
    db: AsyncSession = Depends(async_get_db),
    author_service: AuthorService = Depends(get_author_service),
) -> PostService:
    return PostService(db, author_service)


async def get_like_service(db: AsyncSession = Depends(async_get_db)) -> LikeService:
    return LikeService(db)


@router.post(
    "",
    response_model=PostRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Post",
)
async def create_post(
    data: PostCreate,
    service: PostService = Depends(get_post_service),
) -> PostRead:
    post = await service.create_post(data)
    return PostRead.model_validate(post)


@router.get("", response_model=PostList, summary="List Posts")
async def list_posts(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    author_id: Optional[str] = Query(None, description="Only posts by this author"),
    include_author: bool = Query(False, description="Attach the author profile to each post"),
    service: PostService = Depends(get_post_service),
) -> PostList:
    posts, total = await service.list_posts(page=page, page_size=page_size, author_id=author_id)
    if include_author:
        await service.enrich(posts)

    return PostList(
        items=[PostRead.model_validate(post) for post in posts],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{post_id}", response_model=PostRead, summary="Get Post")
async def get_post(
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> PostRead:
    try:
        post = await service.get_post(post_id)
    except PostNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    await service.enrich([post])
    return PostRead.model_validate(post)


@router.patch("/{post_id}", response_model=PostRead, summary="Update Post")
async def update_post(
    post_id: str,
    data: PostUpdate,
    service: PostService = Depends(get_post_service),
) -> PostRead:
    try:
        post = await service.update_post(post_id, data)
    except PostNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return PostRead.model_validate(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Post")
async def delete_post(
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> Response:
    try:
        await service.delete_post(post_id)
    except PostNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{post_id}/like", response_model=LikeResult, summary="Like Post")
async def like_post(
    post_id: str,
    service: LikeService = Depends(get_like_service),
) -> LikeResult:
    try:
        return await service.like(post_id)
    except PostNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.delete("/{post_id}/like", response_model=LikeResult, summary="Unlike Post")
async def unlike_post(
    post_id: str,
    service: LikeService = Depends(get_like_service),
) -> LikeResult:
    try:
        return await service.unlike(post_id)
    except PostNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
