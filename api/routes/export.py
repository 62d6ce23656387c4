"""Calendar export endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Response

from api.schemas.requests import BatchExportRequest, ChequeInput
from chequeflow.export import ExportArtifact, export_cheque, export_pending_cheques

router = APIRouter(prefix="/export", tags=["Export"])


def _attachment(artifact: ExportArtifact) -> Response:
    return Response(
        content=artifact.to_bytes(),
        media_type=artifact.media_type,
        headers={"Content-Disposition": f'attachment; filename="{artifact.filename}"'},
    )


@router.post("/ics")
async def export_single_cheque(cheque: ChequeInput):
    """Download one cheque's reminder as an .ics file."""
    artifact = export_cheque(cheque.to_cheque(), now=datetime.now(timezone.utc))
    return _attachment(artifact)


@router.post("/ics/batch")
async def export_cheque_batch(request: BatchExportRequest):
    """
    Download all pending cheques as one .ics calendar.

    Returns 204 No Content when none of the cheques are pending.
    """
    artifact = export_pending_cheques(
        [c.to_cheque() for c in request.cheques],
        now=datetime.now(timezone.utc),
    )
    if artifact is None:
        return Response(status_code=204)
    return _attachment(artifact)
