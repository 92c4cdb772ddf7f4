"""Document upload and library API endpoints."""
from typing import Optional
from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    HTTPException,
    Query,
    UploadFile,
    status,
)

from portal.api.deps import get_document_library, get_document_parser
from portal.schemas.document import (
    DocumentListResponse,
    DocumentPreviewResponse,
    ErrorResponse,
    StoredDocumentResponse,
)
from portal.services.library import DocumentLibrary
from portal.services.parsing import (
    DocumentParser,
    ParsedDocument,
    UploadedFile,
    format_document_for_display,
)
from portal.core.config import settings
from portal.core.exceptions import DocumentReadException
from portal.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(
    prefix="/documents",
    tags=["Documents"],
    responses={
        400: {"model": ErrorResponse, "description": "Unreadable upload or missing title"},
        404: {"model": ErrorResponse, "description": "Document not found"},
        500: {"model": ErrorResponse, "description": "Document storage failure"},
    },
)


async def _read_upload(file: UploadFile, parser: DocumentParser) -> ParsedDocument:
    """Buffer, size-check and parse an upload."""
    try:
        uploaded = await UploadedFile.from_upload(file)
    except OSError as e:
        logger.error(
            f"Failed to read upload: {str(e)}",
            extra={"file_name": file.filename},
            exc_info=True,
        )
        raise DocumentReadException(details={"file_name": file.filename}) from e

    if uploaded.size > settings.MAX_FILE_SIZE_BYTES:
        logger.warning(
            "Upload rejected, file too large",
            extra={"file_name": uploaded.name, "size": uploaded.size},
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                f"File size ({uploaded.size} bytes) exceeds maximum allowed "
                f"size ({settings.MAX_FILE_SIZE_BYTES} bytes)"
            ),
        )

    return await parser.parse(uploaded)


@router.post(
    "/preview",
    response_model=DocumentPreviewResponse,
    status_code=status.HTTP_200_OK,
    summary="Parse a document for preview",
    description="Parse an upload into sections and display blocks without saving it.",
)
async def preview_document(
    file: UploadFile = File(..., description="Document file to parse"),
    parser: DocumentParser = Depends(get_document_parser),
) -> DocumentPreviewResponse:
    """
    Parse an upload and render it.

    Text-like files (text/*, JSON) are split into sections; other files get
    placeholder text.

    Raises:
        HTTPException 400: File too large or unreadable
    """
    document = await _read_upload(file, parser)
    return DocumentPreviewResponse(
        document=document,
        blocks=format_document_for_display(document),
    )


@router.post(
    "",
    response_model=StoredDocumentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload and save a document",
    description="Parse an upload and save it to the library, optionally linked to a course module.",
)
async def save_document(
    file: UploadFile = File(..., description="Document file to upload"),
    title: Optional[str] = Form(default=None, description="Title to save the document under"),
    module_id: Optional[str] = Form(default=None, description="Course module id"),
    subtopic_id: Optional[str] = Form(default=None, description="Subtopic id"),
    parser: DocumentParser = Depends(get_document_parser),
    library: DocumentLibrary = Depends(get_document_library),
) -> StoredDocumentResponse:
    """
    Parse an upload and append it to the library.

    Raises:
        HTTPException 400: File too large or unreadable, or blank title
    """
    logger.info(
        "Document save request",
        extra={
            "file_name": file.filename,
            "module_id": module_id,
            "subtopic_id": subtopic_id,
        }
    )

    document = await _read_upload(file, parser)
    stored = await library.save_document(
        document,
        title=title or "",
        module_id=module_id or None,
        subtopic_id=subtopic_id or None,
    )
    return StoredDocumentResponse(
        document=stored,
        blocks=format_document_for_display(stored),
    )


@router.get(
    "",
    response_model=DocumentListResponse,
    summary="List saved documents",
    description="List library documents, optionally only those linked to a module/subtopic.",
)
async def list_documents(
    module_id: Optional[str] = Query(default=None),
    subtopic_id: Optional[str] = Query(default=None),
    library: DocumentLibrary = Depends(get_document_library),
) -> DocumentListResponse:
    if module_id:
        documents = await library.documents_for_module(module_id, subtopic_id)
    else:
        documents = await library.list_documents()
    return DocumentListResponse(documents=documents, total=len(documents))


@router.get(
    "/{document_id}",
    response_model=StoredDocumentResponse,
    summary="Get a saved document",
)
async def get_document(
    document_id: str,
    library: DocumentLibrary = Depends(get_document_library),
) -> StoredDocumentResponse:
    document = await library.get_document(document_id)
    return StoredDocumentResponse(
        document=document,
        blocks=format_document_for_display(document),
    )


@router.delete(
    "/{document_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a saved document",
)
async def delete_document(
    document_id: str,
    library: DocumentLibrary = Depends(get_document_library),
) -> None:
    await library.remove_document(document_id)
