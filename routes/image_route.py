from fastapi import APIRouter, File, HTTPException, Request, UploadFile

from controllers.image_controller import clear_image, select_image
from models.image_models import ImageSlot

router = APIRouter(prefix="/api/sessions", tags=["images"])


@router.put("/{session_id}/images/{slot}")
async def select_image_route(request: Request, session_id: str, slot: ImageSlot, image: UploadFile = File(...)):
	"""Place an uploaded file into the primary or reference slot."""
	try:
		return await select_image(request, session_id, slot, image)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))


@router.delete("/{session_id}/images/{slot}")
async def clear_image_route(request: Request, session_id: str, slot: ImageSlot):
	"""Remove the image held in a slot."""
	try:
		return await clear_image(request, session_id, slot)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))
