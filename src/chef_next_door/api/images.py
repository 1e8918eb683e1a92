"""Image upload endpoint."""

from fastapi import APIRouter, Depends, Request, status

from chef_next_door.api.deps import get_container, get_session
from chef_next_door.services.session import SessionContext

router = APIRouter(prefix="/images", tags=["images"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def upload_image(
    request: Request,
    filename: str,
    category: str = "recipes",
    session: SessionContext = Depends(get_session),
) -> dict[str, str]:
    """Store the raw request body as an image and return its public URL."""
    container = get_container(request)
    content = await request.body()
    url = await container.image_service.upload_image(
        session, filename, content, category
    )
    return {"url": url}
