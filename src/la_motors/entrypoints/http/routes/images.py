from fastapi import APIRouter, Depends, File, Query, UploadFile, status

from la_motors.entrypoints.http.auth import require_admin
from la_motors.entrypoints.http.dependencies import (
    get_delete_vehicle_image_use_case,
    get_upload_vehicle_image_use_case,
)
from la_motors.entrypoints.http.dtos.vehicles import (
    ImageDeleteResponseDTO,
    ImageUploadResponseDTO,
)
from la_motors.entrypoints.http.error_responses import ErrorResponse
from la_motors.use_cases.delete_vehicle_image import (
    DeleteVehicleImage,
    DeleteVehicleImageRequest,
)
from la_motors.use_cases.upload_vehicle_image import (
    MAX_IMAGE_BYTES,
    UploadVehicleImage,
    UploadVehicleImageRequest,
)

router = APIRouter(tags=["Images"], dependencies=[Depends(require_admin)])


@router.post(
    "/vehicles/{vehicle_id}/images",
    response_model=ImageUploadResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Upload a vehicle image",
    description="JPG, PNG or WEBP up to 5MB. Returns the public URL to store in `images`.",
    responses={
        401: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
def upload_vehicle_image(
    vehicle_id: str,
    file: UploadFile = File(...),
    use_case: UploadVehicleImage = Depends(get_upload_vehicle_image_use_case),
) -> ImageUploadResponseDTO:
    request = UploadVehicleImageRequest(
        vehicle_id=vehicle_id,
        filename=file.filename or "",
        content_type=file.content_type or "",
        content=file.file.read(MAX_IMAGE_BYTES + 1),
    )
    result = use_case.execute(request)
    return ImageUploadResponseDTO(url=result.url, path=result.path)


@router.delete(
    "/images",
    response_model=ImageDeleteResponseDTO,
    summary="Remove a stored image",
    description="Best effort: failures are reported as removed=false, never as an error.",
    responses={401: {"model": ErrorResponse}},
)
def delete_image(
    url: str = Query(..., description="Public URL returned by the upload endpoint"),
    use_case: DeleteVehicleImage = Depends(get_delete_vehicle_image_use_case),
) -> ImageDeleteResponseDTO:
    result = use_case.execute(DeleteVehicleImageRequest(url=url))
    return ImageDeleteResponseDTO(removed=result.removed)
